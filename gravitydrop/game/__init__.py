"""
gravitydrop.game - State model and rules engine

This package contains the game state, the tagged result types and the
rules engine operations drivers call to play a game.
"""

from gravitydrop.game.results import StateResult, TurnResult
from gravitydrop.game.state import GameState, Move, init_state
from gravitydrop.game.rules import (apply_turn, check_line, is_terminal,
                                    playable_columns, trace_drop_row)

__all__ = ['GameState', 'Move', 'StateResult', 'TurnResult', 'init_state',
           'apply_turn', 'check_line', 'is_terminal', 'playable_columns',
           'trace_drop_row']
