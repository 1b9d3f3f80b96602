"""
Rendering for the Tetris board.

The core hands over squares in board coordinates; everything pixel related
lives here:
- Board rows above ``hidden_rows`` are the spawn buffer and are skipped.
- Cell Surfaces are pre-rendered per color and blitted.
- The static background (grid) is rendered once per Dims.
"""
from __future__ import annotations
import pygame
from typing import Dict, Iterable, Optional
from tetris_layout import Dims
from tetris_board import Square
from tetris_game import GameMode


class BoardRenderer:
    """Draws squares plus the PAUSED / GAME OVER banners onto a surface."""
    def __init__(self, dims: Dims, font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.banners: Dict[str, pygame.Surface] = {}
        self._make_static()

    # ---------- Static background (grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Cell sprites, created on first use per color ----------
    def _cell(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c-2, c-2))
            s.fill(pygame.Color(color))
            self.cell_surf[color] = s
        return s

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        """Pixel rect of a board cell, or an empty rect for hidden rows."""
        d = self.dims
        vy = by - d.hidden_rows
        if vy < 0:
            return pygame.Rect(0, 0, 0, 0)
        return pygame.Rect(d.board_x + bx*d.cell, d.board_y + vy*d.cell, d.cell, d.cell)

    def draw(self, screen: pygame.Surface, squares: Iterable[Square], mode: GameMode = GameMode.RUNNING) -> int:
        """Redraw the whole board; returns the number of squares drawn."""
        screen.blit(self.bg, (0,0))
        drawn = 0
        for sq in squares:
            r = self.cell_rect(sq.x, sq.y)
            if not r.width:
                continue
            screen.blit(self._cell(sq.color), (r.x + 1, r.y + 1))
            drawn += 1
        if mode is GameMode.PAUSED:
            self._banner(screen, "PAUSED  (P to Resume)", (220,240,255))
        elif mode is GameMode.OVER:
            self._banner(screen, "GAME OVER", (255,220,220))
        return drawn

    def _banner(self, screen: pygame.Surface, text: str, color):
        if self.font is None:
            return
        surf = self.banners.get(text)
        if surf is None:
            surf = self.banners[text] = self.font.render(text, True, color)
        d = self.dims
        rect = surf.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(surf, rect)
