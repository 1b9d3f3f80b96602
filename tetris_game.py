"""Game state aggregate and the fixed-cadence tick that drives it"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional

from tetris_board import Board, Square, sweep
from tetris_config import CONFIG
from tetris_controller import ActivePieceController
from tetris_events import (EventBus, EVENT_RENDER, EVENT_PIECE_SPAWNED, EVENT_PIECE_LANDED,
                           EVENT_ROWS_CLEARED, EVENT_MODE_CHANGED, EVENT_GAME_OVER)
from tetris_input import Command
from tetris_piece import PieceFactory, spawn_x


class GameMode(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass
class GameState:
    board: Board
    factory: PieceFactory
    controller: ActivePieceController = field(init=False)
    mode: GameMode = GameMode.RUNNING
    over_notified: bool = False

    def __post_init__(self):
        self.controller = ActivePieceController(self.board)

    def squares(self) -> List[Square]:
        """Everything to draw: fixed, falling and active-piece squares."""
        return self.board.squares() + self.controller.squares()


def new_game(config: Optional[Mapping] = None) -> GameState:
    cfg = dict(CONFIG)
    if config:
        cfg.update(config)
    board = Board(cfg["BOARD_WIDTH"], cfg["BOARD_HEIGHT"])
    return GameState(board, PieceFactory(cfg["SEED"]))


class GameLoopScheduler:
    """Runs one simulation tick at a time and applies player commands between ticks.

    Nothing here owns a timer: the caller invokes ``tick`` every ``TICK_MS``
    and stops once it returns False.
    """

    def __init__(self, state: GameState, bus: EventBus):
        self.state = state
        self.bus = bus

    def render(self):
        self.bus.emit(EVENT_RENDER, squares=self.state.squares(), mode=self.state.mode)

    def _set_mode(self, mode: GameMode):
        self.state.mode = mode
        logging.info("game %s", mode.value)
        self.bus.emit(EVENT_MODE_CHANGED, mode=mode)

    def _notify_over(self):
        if self.state.over_notified:
            return
        self.state.over_notified = True
        self.render()
        self.bus.emit(EVENT_GAME_OVER)

    def _ensure_piece(self) -> bool:
        ctl = self.state.controller
        if ctl.piece is not None:
            return True
        piece = self.state.factory.generate()
        piece.x += spawn_x(self.state.board.width)
        if not ctl.spawn(piece):
            return False
        self.bus.emit(EVENT_PIECE_SPAWNED, piece=piece)
        return True

    def tick(self) -> bool:
        st = self.state
        if st.mode is GameMode.PAUSED:
            return True
        if st.mode is GameMode.OVER:
            self._notify_over()
            return False

        if not self._ensure_piece():
            self._set_mode(GameMode.OVER)
            self._notify_over()
            return False

        self.render()

        landing = st.controller.squares()
        if st.controller.gravity_step():
            self.bus.emit(EVENT_PIECE_LANDED, squares=landing)
        st.board.step_falling_squares()

        rows = sweep(st.board)
        if rows:
            self.bus.emit(EVENT_ROWS_CLEARED, rows=rows)

        self.render()
        return True

    def handle(self, command: Command) -> bool:
        """Apply one input command immediately; returns True if it changed anything."""
        st = self.state
        if st.mode is GameMode.OVER:
            return False
        if command is Command.TOGGLE_PAUSE:
            self._set_mode(GameMode.RUNNING if st.mode is GameMode.PAUSED else GameMode.PAUSED)
            self.render()
            return True
        if st.mode is not GameMode.RUNNING:
            return False

        if command is Command.MOVE_LEFT:
            changed = st.controller.move_sideways(-1)
        elif command is Command.MOVE_RIGHT:
            changed = st.controller.move_sideways(1)
        elif command is Command.ROTATE_CW:
            changed = st.controller.rotate()
        else:
            return False
        if changed:
            self.render()
        return changed
