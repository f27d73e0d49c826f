from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional

import numpy as np

from .grid import GameGrid
from .pieces import ActivePiece, Cell, Coordinate, PieceKind


class Command(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    GRAVITY = 5


@dataclass
class GameConfig:
    width: int = 10
    height: int = 22
    random_seed: Optional[int] = None
    spawn_x: Optional[int] = None
    spawn_y: int = 0

    @property
    def spawn_position(self) -> Coordinate:
        x = self.width // 2 - 1 if self.spawn_x is None else self.spawn_x
        return x, self.spawn_y


class TetrisEngine:
    """Owns one playfield and one falling piece.

    Every move builds a candidate ``ActivePiece`` and commits it only when all
    of its cells are free. Time only advances through ``gravity_tick``.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.game_over = False
        self.last_lines_cleared = 0
        self.active: ActivePiece = self._random_piece()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def reset(self, rng: Optional[random.Random] = None) -> None:
        if rng is not None:
            self.rng = rng
        self.grid.reset()
        self.game_over = False
        self.last_lines_cleared = 0
        self.active = self._random_piece()

    def _random_piece(self) -> ActivePiece:
        kind = self.rng.choice(list(PieceKind))
        return ActivePiece(kind=kind, position=self.config.spawn_position, orientation=0)

    def _spawn_piece(self) -> None:
        self.active = self._random_piece()
        # Top-out: the piece stays visible but is never written to the grid.
        if not self.is_free(self.active.cells()):
            self.game_over = True

    def is_free(self, cells: Iterable[Coordinate]) -> bool:
        return self.grid.can_place(cells)

    def _try_commit(self, candidate: ActivePiece) -> bool:
        if self.game_over or not self.is_free(candidate.cells()):
            return False
        self.active = candidate
        return True

    def move_left(self) -> bool:
        return self._try_commit(self.active.moved(-1, 0))

    def move_right(self) -> bool:
        return self._try_commit(self.active.moved(1, 0))

    def rotate(self) -> bool:
        return self._try_commit(self.active.rotated(1))

    def move_down(self) -> bool:
        return self._try_commit(self.active.moved(0, 1))

    def soft_drop(self) -> int:
        rows = 0
        while self.move_down():
            rows += 1
        return rows

    def _freeze(self) -> None:
        assert not self.game_over
        result = self.grid.place(self.active.cells(), self.active.color)
        self.last_lines_cleared = result.lines_cleared
        self._spawn_piece()

    def gravity_tick(self) -> bool:
        """Step the piece down once; freeze it and spawn the next one if blocked.

        Returns True when the piece moved. After game over this is a no-op.
        """
        if self.game_over:
            return False
        self.last_lines_cleared = 0
        if self.move_down():
            return True
        self._freeze()
        return False

    def apply(self, command: Command) -> bool:
        if command == Command.LEFT:
            return self.move_left()
        elif command == Command.RIGHT:
            return self.move_right()
        elif command == Command.ROTATE:
            return self.rotate()
        elif command == Command.SOFT_DROP:
            return self.soft_drop() > 0
        elif command == Command.GRAVITY:
            return self.gravity_tick()
        return False

    # Read-only views for renderers.

    def cell(self, x: int, y: int) -> Cell:
        return self.grid.get(x, y)

    def active_cells(self) -> List[Coordinate]:
        return self.active.cells()

    @property
    def active_color(self) -> Cell:
        return self.active.color

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid; negative marks the falling piece
        state = self.grid.clone_state()
        if not self.game_over:
            for x, y in self.active.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = -int(self.active.color)
        return state
