"""
env.py - Gymnasium environment for the gravity-drop grid game

The environment is a self-play driver: it alternates players 1 and 2,
forwards each action to apply_turn and ends the episode on the first
rejected turn or the first win.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from gravitydrop.debug import debug
from gravitydrop.game.rules import apply_turn, playable_columns
from gravitydrop.game.state import GameState
from gravitydrop.utils import ASCII_GLYPHS, Player, render_grid


class DropGridEnv(gym.Env):
    """
    Two-player gravity-drop environment following the Gymnasium interface.

    Rewards are given from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, width: int = 7, height: int = 6, render_mode: Optional[str] = None):
        debug.debug(f"Initializing DropGridEnv {width} x {height}", "env")

        self.width = width
        self.height = height
        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.state = GameState(width, height)
        self.current_player = Player.ONE
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        self.state = GameState(self.width, self.height)
        self.current_player = Player.ONE

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a token for the current player into column `action`.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = apply_turn(self.state, int(action), self.current_player.value)

        if not result.ok:
            debug.warning(f"Invalid action {action}: {result.error}", "env")
            info = self._get_info()
            info['error'] = str(result.error)
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.is_winning:
            debug.info(f"Episode over: player {result.winner} wins", "env")
            reward = self.reward_win
            terminated = True
        else:
            self.current_player = self.current_player.other()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return render_grid(self.state.grid, ASCII_GLYPHS)
        if self.render_mode == "human":
            print(render_grid(self.state.grid, ASCII_GLYPHS))
        return None

    def _get_observation(self) -> np.ndarray:
        return self.state.grid.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = playable_columns(self.state)
        return {
            'current_player': self.current_player.value,
            'turn_count': self.state.turn_count,
            'last_move': self.state.last_move,
            'winner': self.state.winner,
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
        }
