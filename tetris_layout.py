# tetris_layout.py
from dataclasses import dataclass
from typing import Mapping, Optional
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    margin: int
    cols: int
    rows: int
    hidden_rows: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims(config: Optional[Mapping] = None) -> Dims:
    cfg = config or CONFIG
    cell = int(cfg["CELL_SIZE"])
    margin = 16

    cols = int(cfg["BOARD_WIDTH"])
    hidden = int(cfg["HIDDEN_ROWS"])
    # hidden spawn rows are part of the board but never drawn
    rows = int(cfg["BOARD_HEIGHT"]) - hidden

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin, cols=cols, rows=rows, hidden_rows=hidden,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
    )
