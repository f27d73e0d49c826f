"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Playfield cells and line collapse
- ActivePiece: Falling piece with integer rotation mechanics
- PieceKind / Cell: The seven piece kinds and their cell colors
- TetrisEngine: Move/rotate/drop/gravity state machine
"""

from .grid import GameGrid, PlacementResult
from .pieces import ActivePiece, Cell, PieceKind, resolve, rotate90, shape_template
from .core import TetrisEngine, GameConfig, Command

__all__ = [
    "GameGrid",
    "PlacementResult",
    "ActivePiece",
    "Cell",
    "PieceKind",
    "resolve",
    "rotate90",
    "shape_template",
    "TetrisEngine",
    "GameConfig",
    "Command",
]
