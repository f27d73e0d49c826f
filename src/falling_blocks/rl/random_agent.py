from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401


def run_random(steps: int = 500, seed: Optional[int] = None) -> float:
    env = gym.make("FallingBlocks-10x22-v0")
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    games = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            games += 1
            obs, info = env.reset()
    env.close()
    print(f"Random agent cleared {total_reward:.0f} lines over {games} game(s) in {steps} steps")
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    run_random(steps=args.steps, seed=args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
