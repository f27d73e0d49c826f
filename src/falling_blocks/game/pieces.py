from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class PieceKind(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7

    @property
    def color(self) -> Cell:
        return Cell[self.name]


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.setflags(write=False)
    return arr


# Offsets are scaled by 2 so that rotating about a half-cell center stays exact.
SHAPE_TEMPLATES: Dict[PieceKind, Tuple[np.ndarray, np.ndarray]] = {
    PieceKind.I: (_frozen([1, 1]), _frozen([[-3, 1], [-1, 1], [1, 1], [3, 1]])),
    PieceKind.O: (_frozen([1, 1]), _frozen([[1, 1], [-1, 1], [-1, -1], [1, -1]])),
    PieceKind.T: (_frozen([0, 0]), _frozen([[-2, 0], [0, 0], [0, 2], [2, 0]])),
    PieceKind.S: (_frozen([0, 0]), _frozen([[-2, 2], [0, 2], [0, 0], [2, 0]])),
    PieceKind.Z: (_frozen([0, 0]), _frozen([[-2, 0], [0, 2], [0, 0], [2, 2]])),
    PieceKind.J: (_frozen([0, 0]), _frozen([[-2, 2], [-2, 0], [0, 0], [2, 0]])),
    PieceKind.L: (_frozen([0, 0]), _frozen([[2, 2], [-2, 0], [0, 0], [2, 0]])),
}

_QUARTER_TURN = np.array([[0, -1], [1, 0]], dtype=np.int64)

# ROTATIONS[k] maps (x, y) through k quarter turns.
ROTATIONS: Tuple[np.ndarray, ...] = tuple(
    _frozen(np.linalg.matrix_power(_QUARTER_TURN, k)) for k in range(4)
)


def rotate90(point: Coordinate) -> Coordinate:
    x, y = point
    return -y, x


def shape_template(kind: PieceKind) -> List[Coordinate]:
    _, offsets = SHAPE_TEMPLATES[kind]
    return [(int(x), int(y)) for x, y in offsets]


def resolve(kind: PieceKind, orientation: int, position: Coordinate) -> List[Coordinate]:
    """Absolute grid cells of ``kind`` turned ``orientation`` quarter turns at ``position``.

    Rotation, centering and halving are done on integer arrays; after adding the
    center every coordinate is even, so the floor division is exact.
    """
    center, offsets = SHAPE_TEMPLATES[kind]
    scaled = offsets @ ROTATIONS[orientation % 4].T + center
    cells = scaled // 2 + np.asarray(position, dtype=np.int64)
    return [(int(x), int(y)) for x, y in cells]


@dataclass(frozen=True)
class ActivePiece:
    kind: PieceKind
    position: Coordinate = (0, 0)
    orientation: int = 0  # 0..3

    @property
    def color(self) -> Cell:
        return self.kind.color

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        x, y = self.position
        return replace(self, position=(x + dx, y + dy))

    def rotated(self, delta: int = 1) -> "ActivePiece":
        return replace(self, orientation=(self.orientation + delta) % 4)

    def cells(self) -> List[Coordinate]:
        return resolve(self.kind, self.orientation, self.position)
