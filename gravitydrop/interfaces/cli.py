"""
cli.py - Console driver for the gravity-drop grid game

This module reads column indices, alternates players 1 and 2, applies each
turn and prints the grid after every successful move. A session stops on the
first rejected turn or the first win.
"""

import argparse
import sys
from enum import Enum, auto
from itertools import cycle
from typing import Iterable, Iterator, List, Mapping, Optional, TextIO, Tuple

from gravitydrop.debug import debug, DebugLevel
from gravitydrop.game.results import TurnResult
from gravitydrop.game.rules import apply_turn, is_terminal
from gravitydrop.game.state import GameState, init_state
from gravitydrop.utils import (ASCII_GLYPHS, DEFAULT_HEIGHT, DEFAULT_WIDTH, EMOJI_GLYPHS,
                               PLAYER_IDS, render_grid)


class SessionEnd(Enum):
    """Why a session stopped."""
    WINNER = auto()
    TURN_ERROR = auto()
    INPUT_EXHAUSTED = auto()


def describe_state(state: GameState, glyphs: Mapping[int, str] = EMOJI_GLYPHS) -> str:
    """
    Render a state summary followed by the grid.

    Returns:
        Size, turn and terminal lines, a blank line, then the grid
    """
    lines = [
        f"size:     {state.grid_width} x {state.grid_height}",
        f"turn:     {state.turn_count}",
    ]

    winner = is_terminal(state)
    if winner is not None:
        lines.append(f"terminal: YES (player {winner} is a winner)")
    else:
        lines.append("terminal: NO")

    lines.append("")
    lines.append(render_grid(state.grid, glyphs))
    lines.append("")
    return "\n".join(lines)


def read_columns(stream: TextIO) -> Iterator[int]:
    """
    Yield whitespace separated column indices from a text stream.

    Raises:
        ValueError: on a token that is not an integer
    """
    for line in stream:
        for token in line.split():
            yield int(token)


def parse_moves(moves: str) -> List[int]:
    """Parse a comma separated move list such as "3,3,4"."""
    return [int(part) for part in moves.split(',') if part.strip()]


def play_session(state: GameState, columns: Iterable[int], out: TextIO = sys.stdout,
                 glyphs: Mapping[int, str] = EMOJI_GLYPHS) -> Tuple[SessionEnd, Optional[TurnResult]]:
    """
    Play columns against a state, alternating players starting with player 1.

    Args:
        state: State to play on
        columns: Column index for each turn, in order
        out: Stream for printed output
        glyphs: Glyph set for the grid

    Returns:
        Why the session ended and the last turn result (None if no turn was made)
    """
    result = None
    players = cycle(PLAYER_IDS)

    for column in columns:
        player_id = next(players)
        result = apply_turn(state, column, player_id)

        if not result.ok:
            print(f"error: {result.error}", file=out)
            return SessionEnd.TURN_ERROR, result

        print(describe_state(state, glyphs), file=out)
        if result.is_winning:
            print("gg", file=out)
            return SessionEnd.WINNER, result

    return SessionEnd.INPUT_EXHAUSTED, result


class DropCLI:
    """Command line interface wrapping play_session."""

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
        self.stdin = stdin
        self.stdout = stdout
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Gravity-drop grid game')
        parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Grid width')
        parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Grid height')
        parser.add_argument('--ascii', action='store_true', help='Render with plain ASCII glyphs')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', type=str, default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', type=str, default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        subparsers.add_parser('play', help='Read one column per turn from stdin')
        replay_parser = subparsers.add_parser('replay', help='Replay a fixed list of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma separated column indices, e.g. 3,3,4')
        return parser

    def configure_debug(self) -> None:
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Parse arguments and run the chosen command.

        Returns:
            Process exit status
        """
        self.args = self.build_parser().parse_args(argv)
        self.configure_debug()

        if self.args.command is None:
            print("Please specify a command. Use --help for options.", file=self.stdout)
            return 2

        state_result = init_state(self.args.width, self.args.height)
        if not state_result.ok:
            print("failed to initialize game state", file=self.stdout)
            return 1

        glyphs = ASCII_GLYPHS if self.args.ascii else EMOJI_GLYPHS
        try:
            if self.args.command == 'replay':
                columns = parse_moves(self.args.moves)
            else:
                columns = read_columns(self.stdin)
            end, _ = play_session(state_result.state, columns, self.stdout, glyphs)
        except ValueError as e:
            debug.error(f"Bad column input: {e}", "cli")
            print(f"error: column index must be an integer ({e})", file=self.stdout)
            return 1

        debug.debug(f"Session ended: {end.name}", "cli")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return DropCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
