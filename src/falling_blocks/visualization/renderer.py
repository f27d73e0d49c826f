from __future__ import annotations

from typing import Tuple

import pygame

from falling_blocks.game import Cell, TetrisEngine


BACKGROUND = (0, 0, 0)
GRID_LINE = (32, 32, 32)

PALETTE = {
    Cell.EMPTY: BACKGROUND,
    Cell.I: (0, 255, 255),    # cyan
    Cell.O: (255, 255, 0),    # yellow
    Cell.T: (128, 0, 128),    # purple
    Cell.S: (0, 255, 0),      # green
    Cell.Z: (255, 0, 0),      # red
    Cell.J: (0, 0, 255),      # blue
    Cell.L: (255, 165, 0),    # orange
}


def color_for_cell(cell: Cell) -> Tuple[int, int, int]:
    return PALETTE[Cell(cell)]


class Renderer:
    """Draws an engine snapshot; never mutates the engine."""

    def __init__(self, cell_size: int = 20) -> None:
        self.cell_size = cell_size

    def window_size(self, engine: TetrisEngine) -> Tuple[int, int]:
        return engine.width * self.cell_size + 1, engine.height * self.cell_size + 1

    def _draw_lines(self, screen: pygame.Surface, width: int, height: int) -> None:
        size = self.cell_size
        for y in range(height + 1):
            pygame.draw.line(screen, GRID_LINE, (0, y * size), (width * size, y * size))
        for x in range(width + 1):
            pygame.draw.line(screen, GRID_LINE, (x * size, 0), (x * size, height * size))

    def _fill(self, screen: pygame.Surface, x: int, y: int, cell: Cell) -> None:
        size = self.cell_size
        rect = pygame.Rect(x * size + 1, y * size + 1, size - 1, size - 1)
        pygame.draw.rect(screen, color_for_cell(cell), rect)

    def draw(self, screen: pygame.Surface, engine: TetrisEngine) -> None:
        screen.fill(BACKGROUND)
        self._draw_lines(screen, engine.width, engine.height)
        for y in range(engine.height):
            for x in range(engine.width):
                self._fill(screen, x, y, engine.cell(x, y))
        for x, y in engine.active_cells():
            if 0 <= x < engine.width and 0 <= y < engine.height:
                self._fill(screen, x, y, engine.active_color)
        pygame.display.flip()
