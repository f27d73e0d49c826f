"""Falling-block puzzle engine with pygame and gymnasium front ends."""

from .game import Command, GameConfig, TetrisEngine

__all__ = ["Command", "GameConfig", "TetrisEngine"]
