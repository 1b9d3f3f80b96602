import sys, os

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

import tetris_events
from tetris_board import Board
from tetris_events import EventBus

ALL_EVENTS = [getattr(tetris_events, n) for n in dir(tetris_events) if n.startswith("EVENT_")]


class Recorder:
    """Collects every emitted event as (name, payload)."""

    def __init__(self, bus: EventBus):
        self.events = []
        for name in ALL_EVENTS:
            bus.subscribe(name, self._make(name))

    def _make(self, name):
        def receive(sender, **payload):
            self.events.append((name, payload))
        return receive

    def named(self, name):
        return [p for n, p in self.events if n == name]


@pytest.fixture
def board():
    return Board(10, 22)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return Recorder(bus)
