"""Per-row bitmask occupancy: bit x of row y is set while a fixed square sits at (x, y)"""
from typing import List


class CollisionRows:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.full_row_value = (1 << width) - 1
        self.rows: List[int] = [0] * height

    def __len__(self) -> int:
        return self.height

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")

    def row(self, y: int) -> int:
        self._check(0, y)
        return self.rows[y]

    def is_fixed(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self.rows[y] & (1 << x))

    def fix(self, x: int, y: int):
        self._check(x, y)
        self.rows[y] |= 1 << x

    def unfix(self, x: int, y: int):
        self._check(x, y)
        self.rows[y] &= ~(1 << x)

    def is_row_full(self, y: int) -> bool:
        return self.row(y) == self.full_row_value

    def clear_row(self, y: int):
        self._check(0, y)
        self.rows[y] = 0
