"""
rules.py - Rules engine for the gravity-drop grid game

This module provides the operations a driver calls on a GameState:
1. Turn application (gravity resolution followed by a single cell write)
2. Terminal detection, anchored on the most recent move

Win detection never scans the whole grid. A run can only be completed by the
token just placed, so each of the four directions is checked over a window
of LINE_STEPS cells running through that token.
"""

from typing import List, Optional, Tuple

import numpy as np

from gravitydrop.debug import debug
from gravitydrop.errors import TurnError
from gravitydrop.game.results import TurnResult
from gravitydrop.game.state import GameState, Move
from gravitydrop.utils import (DIRECTION_VECTORS, EMPTY_COLOR, LINE_LEN, LINE_OFFSET,
                               LINE_STEPS, MAX_PLAYER_ID, Direction, in_bounds)


def check_line(state: GameState, start_row: int, start_col: int,
               row_delta: int, col_delta: int, steps: int, player_id: int) -> bool:
    """
    Check whether a line of cells holds LINE_LEN consecutive tokens of a player.

    The walk starts at (start_row, start_col) and advances by
    (row_delta, col_delta) up to `steps` times. Bounds are checked after each
    advance, so the start cell is always evaluated and leaving the grid ends
    the scan.

    Returns:
        True as soon as LINE_LEN matching cells are seen in a row
    """
    if not in_bounds(start_row, start_col, state.grid_height, state.grid_width):
        debug.trace(f"Line start ({start_row}, {start_col}) is off the grid", "rules")
        return False

    token_counter = 0
    row, col = start_row, start_col

    for _ in range(steps):
        if state.grid[row, col] == player_id:
            token_counter += 1
        else:
            token_counter = 0

        if token_counter == LINE_LEN:
            return True

        row += row_delta
        col += col_delta
        if not in_bounds(row, col, state.grid_height, state.grid_width):
            return False

    return False


def window_start(state: GameState, row: int, col: int,
                 row_delta: int, col_delta: int) -> Tuple[int, int]:
    """
    Back off from an anchor against a direction by up to LINE_OFFSET cells.

    Both coordinates move by the same count, so the start stays on the
    anchor's line even when one of them hits a grid edge first.
    """
    back = 0
    while back < LINE_OFFSET:
        prev_row = row - (back + 1) * row_delta
        prev_col = col - (back + 1) * col_delta
        if not in_bounds(prev_row, prev_col, state.grid_height, state.grid_width):
            break
        back += 1
    return row - back * row_delta, col - back * col_delta


def scan_window(state: GameState, row: int, col: int,
                direction: Direction, player_id: int) -> bool:
    """Check the LINE_STEPS window through (row, col) along one direction."""
    row_delta, col_delta = DIRECTION_VECTORS[direction]
    start_row, start_col = window_start(state, row, col, row_delta, col_delta)
    found = check_line(state, start_row, start_col, row_delta, col_delta,
                       LINE_STEPS, player_id)
    debug.trace(f"{direction.name} scan from ({start_row}, {start_col}): {found}", "rules")
    return found


def is_terminal(state: GameState) -> Optional[int]:
    """
    Return the id of the player whose last move completed a run.

    Only the last recorded move is inspected. An empty history is never
    terminal, and a run elsewhere on the grid that the last move is not part
    of is not reported.
    """
    if not state.history:
        return None

    row, col, player_id = state.history[-1]
    with debug.timed("is_terminal", "rules"):
        for direction in DIRECTION_VECTORS:
            if scan_window(state, row, col, direction, player_id):
                return player_id

    return None


def trace_drop_row(state: GameState, column: int) -> Optional[int]:
    """
    Find the row a token dropped into `column` settles in.

    Returns:
        The lowest empty row, or None if the column is full or out of range
    """
    if not 0 <= column < state.grid_width:
        return None

    empty_rows = np.flatnonzero(state.grid[:, column] == EMPTY_COLOR)
    if empty_rows.size == 0:
        return None
    return int(empty_rows[-1])


def playable_columns(state: GameState) -> List[int]:
    """List the columns whose top cell is empty."""
    return [int(col) for col in np.flatnonzero(state.grid[0] == EMPTY_COLOR)]


def apply_turn(state: GameState, column: int, player_id: int,
               allow_after_terminal: bool = False) -> TurnResult:
    """
    Drop a token for `player_id` into `column`.

    All checks run before the grid is touched, so a rejected turn leaves the
    state unchanged. Once a winner is recorded further turns are rejected
    unless `allow_after_terminal` is set.

    Args:
        state: State to mutate
        column: Column index, 0 is leftmost
        player_id: Id written into the cell, from 1 to MAX_PLAYER_ID
        allow_after_terminal: Accept turns after the game has been won

    Returns:
        TurnResult with the placed move and winner, or the rejection reason
    """
    if state.winner is not None and not allow_after_terminal:
        return _reject(state, column, player_id, TurnError.GAME_OVER)

    if not 0 <= column < state.grid_width:
        return _reject(state, column, player_id, TurnError.COLUMN_OUT_OF_RANGE)

    if not 1 <= player_id <= MAX_PLAYER_ID:
        return _reject(state, column, player_id, TurnError.INVALID_PLAYER)

    row = trace_drop_row(state, column)
    if row is None:
        return _reject(state, column, player_id, TurnError.COLUMN_FULL)

    move = Move(row, int(column), int(player_id))
    state.grid[move.row, move.column] = move.player_id
    state.history.append(move)
    debug.debug(f"Player {move.player_id} placed at ({move.row}, {move.column})", "rules")

    winner = is_terminal(state)
    if winner is not None:
        if state.winner is None:
            state.winner = winner
        debug.info(f"Player {winner} wins on turn {state.turn_count}", "rules")

    return TurnResult(column=move.column, player_id=move.player_id, move=move, winner=winner)


def _reject(state: GameState, column: int, player_id: int, reason: TurnError) -> TurnResult:
    debug.debug(f"Rejected turn for player {player_id} in column {column}: {reason}", "rules")
    return TurnResult(column=column, player_id=player_id, error=reason)
