"""Gymnasium environments for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Player commands on a 10x22 field, gravity applied on a step cadence
register(
    id="FallingBlocks-10x22-v0",
    entry_point="falling_blocks.env.falling_blocks_env:FallingBlocksEnv",
)

__all__ = ["FallingBlocks-10x22-v0"]
