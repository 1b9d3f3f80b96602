"""Player-controlled piece: spawn, sideways moves, rotation, gravity and landing"""
import logging
from typing import Iterable, List, Optional, Tuple

from tetris_board import Board, Square
from tetris_piece import Piece, rotate_cw


class ActivePieceController:
    """Holds the single active piece.

    ``piece is None`` means no piece is in play and the scheduler has to spawn
    one. Collisions are checked against fixed squares only; falling squares
    and the active piece do not block each other.
    """

    def __init__(self, board: Board):
        self.board = board
        self.piece: Optional[Piece] = None

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.board.width and 0 <= y < self.board.height

    def _free(self, cells: Iterable[Tuple[int, int]]) -> bool:
        # every cell is checked before the caller mutates anything
        return all(self._inside(x, y) and not self.board.is_fixed(x, y) for x, y in cells)

    def spawn(self, piece: Piece) -> bool:
        if not self._free((x, y) for x, y, _ in piece.cells()):
            logging.info("spawn of %s blocked at (%d, %d)", piece.t, piece.x, piece.y)
            return False
        self.piece = piece
        logging.debug("spawned %s at (%d, %d)", piece.t, piece.x, piece.y)
        return True

    def move_sideways(self, direction: int) -> bool:
        """Shift the piece one column (-1 left, +1 right) if no cell is blocked."""
        p = self.piece
        if p is None:
            return False
        if not self._free((x + direction, y) for x, y, _ in p.cells()):
            logging.debug("move %+d blocked", direction)
            return False
        p.x += direction
        return True

    def rotate(self) -> bool:
        p = self.piece
        if p is None:
            return False
        shape = rotate_cw(p.shape)
        turned = Piece(p.t, shape, p.x, p.y)
        # overlap with fixed squares is allowed, leaving the board is not
        if not all(self._inside(x, y) for x, y, _ in turned.cells()):
            logging.debug("rotation of %s would leave the board", p.t)
            return False
        p.shape = shape
        return True

    def gravity_step(self) -> bool:
        """Drop the piece one row, or fix it to the board. Returns True on landing."""
        p = self.piece
        if p is None:
            return False
        if self._free((x, y + 1) for x, y, _ in p.cells()):
            p.y += 1
            return False
        for x, y, color in p.cells():
            self.board.fix_square(x, y, color)
        logging.debug("%s landed at (%d, %d)", p.t, p.x, p.y)
        self.piece = None
        return True

    def squares(self) -> List[Square]:
        if self.piece is None:
            return []
        return [Square(x, y, color) for x, y, color in self.piece.cells()]
