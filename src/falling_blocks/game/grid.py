from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .pieces import Cell, Coordinate


@dataclass
class PlacementResult:
    lines_cleared: int


class GameGrid:
    """Fixed-size playfield of frozen blocks.

    Cells are stored as ``Cell`` values in an ``int8`` matrix indexed
    ``[y, x]``; row 0 is the top of the field. ``get``/``set`` assume the
    caller has bounds-checked and assert otherwise.
    """

    def __init__(self, width: int = 10, height: int = 22) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(Cell.EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        assert self.is_inside(x, y), f"cell ({x}, {y}) outside {self.width}x{self.height} grid"
        return Cell(int(self.grid[y, x]))

    def set(self, x: int, y: int, cell: Cell) -> None:
        assert self.is_inside(x, y), f"cell ({x}, {y}) outside {self.width}x{self.height} grid"
        self.grid[y, x] = cell

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if not self.is_inside(x, y):
                return False
            if self.grid[y, x] != Cell.EMPTY:
                return False
        return True

    def place(self, cells: Iterable[Coordinate], cell: Cell) -> PlacementResult:
        """Freeze ``cells`` with ``cell`` and collapse any rows that became full."""
        for x, y in cells:
            self.set(x, y, cell)
        return PlacementResult(lines_cleared=self.collapse_full_lines())

    def is_line_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != Cell.EMPTY))

    def collapse_full_lines(self) -> int:
        # Scan bottom-up; after a collapse the same row is examined again since
        # it now holds what used to be the row above.
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_line_full(y):
                self.grid[1 : y + 1] = self.grid[0:y].copy()
                self.grid[0].fill(Cell.EMPTY)
                cleared += 1
            else:
                y -= 1
        return cleared

    def filled_rows(self) -> int:
        return int(np.count_nonzero(np.any(self.grid != Cell.EMPTY, axis=1)))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
