from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # strong references so lambdas and bound methods stay connected
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


EVENT_RENDER = "render"                    # payload: squares=list[Square], mode=GameMode
EVENT_PIECE_SPAWNED = "piece_spawned"      # payload: piece=Piece
EVENT_PIECE_LANDED = "piece_landed"        # payload: squares=list[Square]
EVENT_ROWS_CLEARED = "rows_cleared"        # payload: rows=list[int]
EVENT_MODE_CHANGED = "mode_changed"        # payload: mode=GameMode
EVENT_GAME_OVER = "game_over"              # payload: none
