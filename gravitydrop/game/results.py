"""
results.py - Tagged results returned by state construction and turn application

A result holds either a value or an error, never both, so "no error" and
"succeeded without a winner" stay distinguishable.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from gravitydrop.errors import ConstructionError, InvalidDimensionsError, TurnError, TurnRejectedError

if TYPE_CHECKING:
    from gravitydrop.game.state import GameState, Move


@dataclass(frozen=True)
class StateResult:
    width: int
    height: int
    state: Optional['GameState'] = None
    error: Optional[ConstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> 'GameState':
        """Return the state or raise InvalidDimensionsError."""
        if self.error is not None:
            raise InvalidDimensionsError(self.width, self.height)
        return self.state


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of one turn.

    On success `move` is the placed token and `winner` is set when that token
    completed a run. On failure only `error` is set, with `column` and
    `player_id` kept for reporting.
    """
    column: int
    player_id: int
    move: Optional['Move'] = None
    error: Optional[TurnError] = None
    winner: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_winning(self) -> bool:
        return self.winner is not None

    def unwrap(self) -> 'Move':
        """Return the placed move or raise TurnRejectedError."""
        if self.error is not None:
            raise TurnRejectedError(self.error, self.column, self.player_id)
        return self.move
