"""
state.py - Game state model for the gravity-drop grid game

This module implements GameState, which owns the grid, its dimensions and
the complete move history. Only the rules engine mutates it.
"""

from typing import List, NamedTuple, Optional

import numpy as np

from gravitydrop.debug import debug
from gravitydrop.errors import ConstructionError, InvalidDimensionsError
from gravitydrop.game.results import StateResult
from gravitydrop.utils import COLOR_DTYPE, EMPTY_COLOR


class Move(NamedTuple):
    """A placed token: grid coordinates plus the id of the player who placed it."""
    row: int
    column: int
    player_id: int


class GameState:
    """
    Current state of a game.

    The grid is indexed as grid[row, column] with row 0 at the top. Cells hold
    EMPTY_COLOR or the id of the player occupying them. History is append-only
    and its last entry is the anchor for terminal detection.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty grid of the given size.

        Raises:
            InvalidDimensionsError: if width or height is below 1
        """
        if width < 1 or height < 1:
            raise InvalidDimensionsError(width, height)

        self.grid_width = int(width)
        self.grid_height = int(height)
        self.grid = np.full((self.grid_height, self.grid_width), EMPTY_COLOR, dtype=COLOR_DTYPE)
        self.history: List[Move] = []
        self.winner: Optional[int] = None
        debug.debug(f"Initialized {self.grid_width} x {self.grid_height} state", "state")

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    @property
    def turn_count(self) -> int:
        return len(self.history)

    def cell(self, row: int, column: int) -> int:
        return int(self.grid[row, column])

    def is_terminal(self) -> Optional[int]:
        """Return the winner completed by the last move, or None."""
        from gravitydrop.game.rules import is_terminal
        return is_terminal(self)

    def copy(self) -> 'GameState':
        """Create an independent copy of this state."""
        new_state = GameState(self.grid_width, self.grid_height)
        new_state.grid = self.grid.copy()
        new_state.history = list(self.history)
        new_state.winner = self.winner
        return new_state

    def __repr__(self) -> str:
        return (f"GameState(width={self.grid_width}, height={self.grid_height}, "
                f"turns={self.turn_count}, winner={self.winner})")


def init_state(width: int, height: int) -> StateResult:
    """
    Build the initial state for a grid size without raising.

    Args:
        width: Number of columns, at least 1
        height: Number of rows, at least 1

    Returns:
        StateResult holding either the new state or INVALID_DIMENSIONS
    """
    if width < 1 or height < 1:
        debug.debug(f"Rejected grid size {width} x {height}", "state")
        return StateResult(width, height, error=ConstructionError.INVALID_DIMENSIONS)
    return StateResult(width, height, state=GameState(width, height))
