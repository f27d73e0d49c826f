"""Tests for the gymnasium wrapper."""

import gymnasium as gym
import numpy as np
import pytest

import falling_blocks.env  # noqa: F401
from falling_blocks.env.falling_blocks_env import FallingBlocksEnv
from falling_blocks.game import Command


def test_registered_env_resets():
    env = gym.make("FallingBlocks-10x22-v0")
    obs, info = env.reset(seed=3)
    assert obs.shape == (22, 10)
    assert obs.dtype == np.int8
    assert np.count_nonzero(obs < 0) == 4
    env.close()


def test_reset_with_seed_is_reproducible():
    env = FallingBlocksEnv()
    _, info_a = env.reset(seed=11)
    obs_a, *_ = env.step(int(Command.SOFT_DROP))
    _, info_b = env.reset(seed=11)
    obs_b, *_ = env.step(int(Command.SOFT_DROP))
    assert info_a["piece"] == info_b["piece"]
    np.testing.assert_array_equal(obs_a, obs_b)


def test_step_applies_gravity_on_cadence():
    env = FallingBlocksEnv(gravity_every=2)
    env.reset(seed=0)
    start = env.engine.active.position
    env.step(int(Command.NONE))
    assert env.engine.active.position == start
    env.step(int(Command.NONE))
    assert env.engine.active.position == (start[0], start[1] + 1)


def test_episode_terminates_on_top_out():
    env = FallingBlocksEnv()
    env.reset(seed=5)
    terminated = False
    for _ in range(2000):
        obs, reward, terminated, truncated, info = env.step(int(Command.SOFT_DROP))
        assert env.observation_space.contains(obs)
        assert reward >= 0.0
        if terminated:
            break
    assert terminated
    assert env.engine.game_over


def test_invalid_action_rejected():
    env = FallingBlocksEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(len(Command))


def test_bad_gravity_cadence_rejected():
    with pytest.raises(ValueError):
        FallingBlocksEnv(gravity_every=0)
