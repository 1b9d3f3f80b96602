"""Piece model, shapes, rotation, random piece factory"""
import random
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

# A cell is either empty (None) or the color it is drawn with
Cell = Optional[str]
Shape = Tuple[Tuple[Cell, ...], ...]

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[0,0,0,0],[0,1,1,0],[0,1,1,0],[0,0,0,0]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

COLORS: Dict[str, str] = {
    "I": "cyan",
    "J": "blue",
    "L": "orange",
    "O": "yellow",
    "S": "green",
    "T": "purple",
    "Z": "red",
}

PIECE_TYPES = list(SHAPES)


def colored_shape(t: str) -> Shape:
    """Replace the 0/1 flags of a template with None/color."""
    color = COLORS[t]
    return tuple(tuple(color if v else None for v in row) for row in SHAPES[t])


def rotate_cw(m: Shape) -> Shape:
    # new[i][j] = m[n-1-j][i]
    return tuple(tuple(row) for row in zip(*m[::-1]))


@dataclass
class Piece:
    t: str
    shape: Shape
    x: int = 0
    y: int = 0

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Board coordinates and color of every occupied cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v is not None:
                    yield self.x + c, self.y + r, v


class PieceFactory:
    """Uniformly random pieces at the origin; the caller moves them to the spawn column."""

    def __init__(self, rng: Union[random.Random, int, None] = None):
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)
        self.rng = rng

    def generate(self) -> Piece:
        t = PIECE_TYPES[self.rng.randrange(len(PIECE_TYPES))]
        return Piece(t, colored_shape(t))


def spawn_x(board_width: int) -> int:
    return board_width // 2 - 2
