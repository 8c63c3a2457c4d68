"""
errors.py - Error taxonomies for the rules engine

Expected game errors are plain enum values carried inside result objects.
The exception types are only raised when a caller constructs a state
directly or unwraps a failed result.
"""

from enum import Enum


class ConstructionError(Enum):
    """Reasons a game state cannot be created."""
    INVALID_DIMENSIONS = "invalid dimensions"

    def __str__(self) -> str:
        return self.value


class TurnError(Enum):
    """Reasons a turn is rejected. No state is mutated for any of them."""
    COLUMN_OUT_OF_RANGE = "column index is outside of the grid range"
    COLUMN_FULL = "token cannot be placed in a given column as it's full or does not exist"
    INVALID_PLAYER = "player id must be a positive integer that fits an unsigned 64-bit cell"
    GAME_OVER = "game already has a winner"

    def __str__(self) -> str:
        return self.value


class GameError(Exception):
    """Base class for raised game errors; keeps the underlying reason."""

    def __init__(self, reason):
        super().__init__(str(reason))
        self.reason = reason


class InvalidDimensionsError(GameError):

    def __init__(self, width: int, height: int):
        super().__init__(ConstructionError.INVALID_DIMENSIONS)
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"{self.reason}: {self.width} x {self.height}"


class TurnRejectedError(GameError):

    def __init__(self, reason: TurnError, column: int, player_id: int):
        super().__init__(reason)
        self.column = column
        self.player_id = player_id
