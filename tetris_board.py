"""Board helpers: fixed squares, falling squares, row release, sweep"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from tetris_collision import CollisionRows


@dataclass
class Square:
    x: int
    y: int
    color: str


class Board:
    """Owns every square that is not part of the active piece.

    A square is either fixed (keyed by its coordinate and mirrored by a bit in
    ``collision``) or falling after a row clear, never both. Falling squares
    have no collision bit until they settle again.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.collision = CollisionRows(width, height)
        self._fixed: Dict[Tuple[int, int], Square] = {}
        self._falling: List[Square] = []

    def is_fixed(self, x: int, y: int) -> bool:
        return self.collision.is_fixed(x, y)

    def fix_square(self, x: int, y: int, color: str) -> Square:
        sq = Square(x, y, color)
        self._place(sq)
        return sq

    def _place(self, sq: Square):
        self.collision.fix(sq.x, sq.y)
        if (sq.x, sq.y) in self._fixed:
            logging.debug("square at (%d, %d) replaced", sq.x, sq.y)
        self._fixed[(sq.x, sq.y)] = sq

    def release_row(self, y: int):
        """Drop the squares of row ``y`` and set everything above it falling."""
        self.collision.clear_row(y)
        kept: Dict[Tuple[int, int], Square] = {}
        for (sx, sy), sq in self._fixed.items():
            if sy == y:
                continue
            if sy < y:
                self.collision.unfix(sx, sy)
                self._falling.append(sq)
            else:
                kept[(sx, sy)] = sq
        self._fixed = kept

    def step_falling_squares(self) -> int:
        """Move falling squares down one row; returns how many settled."""
        # bottom-up so a square never passes the one below it
        self._falling.sort(key=lambda s: s.y, reverse=True)
        still: List[Square] = []
        settled = 0
        for sq in self._falling:
            if sq.y + 1 < self.height and not self.is_fixed(sq.x, sq.y + 1):
                sq.y += 1
                still.append(sq)
            else:
                self._place(sq)
                settled += 1
        self._falling = still
        return settled

    def fixed_squares(self) -> List[Square]:
        return list(self._fixed.values())

    def falling_squares(self) -> List[Square]:
        return list(self._falling)

    def squares(self) -> List[Square]:
        return self.fixed_squares() + self.falling_squares()


def sweep(board: Board) -> List[int]:
    """Release every row that is full right now, top to bottom; returns the cleared rows."""
    cleared = []
    for y in range(board.height):
        if board.collision.is_row_full(y):
            board.release_row(y)
            cleared.append(y)
    if cleared:
        logging.info("cleared rows %s", cleared)
    return cleared
