import numpy as np
import pytest

from gravitydrop.game.env import DropGridEnv


@pytest.fixture
def env():
    env = DropGridEnv()
    env.reset(seed=0)
    yield env
    env.close()


def test_reset_returns_empty_board(env):
    observation, info = env.reset(seed=1)

    assert observation.shape == (6, 7)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['current_player'] == 1
    assert info['valid_moves'] == list(range(7))
    assert info['winner'] is None


def test_step_alternates_players(env):
    observation, reward, terminated, truncated, info = env.step(3)

    assert observation[5, 3] == 1
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == 2

    observation, _, _, _, info = env.step(3)
    assert observation[4, 3] == 2
    assert info['current_player'] == 1
    assert info['turn_count'] == 2


def test_vertical_win_terminates_episode(env):
    for action in [0, 1, 0, 1, 0, 1]:
        _, _, terminated, _, _ = env.step(action)
        assert not terminated

    _, reward, terminated, truncated, info = env.step(0)

    assert terminated and not truncated
    assert reward == env.reward_win
    assert info['winner'] == 1
    assert info['last_move'] == (2, 0, 1)


def test_invalid_action_truncates_episode(env):
    _, reward, terminated, truncated, info = env.step(7)

    assert truncated and not terminated
    assert reward == env.reward_invalid_move
    assert info['error'] == "column index is outside of the grid range"
    assert info['turn_count'] == 0


def test_full_column_is_invalid():
    env = DropGridEnv(width=2, height=2)
    env.reset()
    env.step(0)
    env.step(0)

    _, _, _, truncated, info = env.step(0)

    assert truncated
    assert info['valid_moves'] == [1]


def test_ascii_render():
    env = DropGridEnv(width=3, height=2, render_mode="ascii")
    env.reset()
    env.step(1)

    assert env.render() == ". . .\n. X ."
