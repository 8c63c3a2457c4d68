"""Helpers for building grids that turns alone cannot reach."""

from gravitydrop.game.rules import apply_turn
from gravitydrop.game.state import Move


def place(state, cells, player_id):
    """Write tokens straight into the grid, recording each one in history."""
    for row, col in cells:
        state.grid[row, col] = player_id
        state.history.append(Move(row, col, player_id))


def play(state, columns, players=(1, 2)):
    """Apply columns with alternating players and return every TurnResult."""
    return [apply_turn(state, col, players[i % len(players)]) for i, col in enumerate(columns)]
