from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Command, GameConfig, PieceKind, TetrisEngine


class FallingBlocksEnv(gym.Env):
    """Drives a ``TetrisEngine`` with one player command per step.

    Every ``gravity_every`` steps a gravity tick follows the command. The
    reward is the number of lines cleared during the step.
    """

    metadata = {"render_modes": ["human"], "render_fps": 25}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 gravity_every: int = 1) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError(f"gravity_every must be positive, got {gravity_every}")
        self.config = config or GameConfig()
        self.engine = TetrisEngine(self.config)
        self.render_mode = render_mode
        self.gravity_every = int(gravity_every)

        limit = len(PieceKind)
        self.observation_space = spaces.Box(
            low=-limit, high=limit, shape=(self.engine.height, self.engine.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Command))

        self._steps = 0
        self._screen = None
        self._renderer = None

    def _get_info(self) -> Dict[str, Any]:
        return {
            "piece": int(self.engine.active.kind),
            "orientation": self.engine.active.orientation,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Seed the engine from the env's generator so resets are reproducible
        self.engine.reset(rng=random.Random(int(self.np_random.integers(0, 2**31 - 1))))
        self._steps = 0
        return self.engine.get_state(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(action):
            raise ValueError(f"invalid action {action!r}")
        command = Command(int(action))

        lines = 0
        self.engine.apply(command)
        if command == Command.GRAVITY:
            lines += self.engine.last_lines_cleared
        self._steps += 1
        if self._steps % self.gravity_every == 0 and not self.engine.game_over:
            self.engine.gravity_tick()
            lines += self.engine.last_lines_cleared

        terminated = self.engine.game_over
        if self.render_mode == "human":
            self.render()
        return self.engine.get_state(), float(lines), terminated, False, self._get_info()

    def render(self):
        if self.render_mode != "human":
            return None
        import pygame

        from falling_blocks.visualization.renderer import Renderer

        if self._screen is None:
            pygame.init()
            self._renderer = Renderer()
            self._screen = pygame.display.set_mode(self._renderer.window_size(self.engine))
            pygame.display.set_caption("Falling Blocks - Env")
        pygame.event.pump()
        self._renderer.draw(self._screen, self.engine)
        return None

    def close(self) -> None:
        if self._screen is not None:
            import pygame

            pygame.quit()
            self._screen = None
