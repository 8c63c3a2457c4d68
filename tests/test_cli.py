import io

from gravitydrop.game.state import GameState
from gravitydrop.interfaces.cli import (DropCLI, SessionEnd, describe_state, parse_moves,
                                        play_session, read_columns)
from gravitydrop.utils import ASCII_GLYPHS


def run_cli(argv, stdin=""):
    out = io.StringIO()
    status = DropCLI(stdin=io.StringIO(stdin), stdout=out).run(["--debug-level", "none"] + argv)
    return status, out.getvalue()


def test_describe_empty_state():
    text = describe_state(GameState(2, 2), ASCII_GLYPHS)

    assert text == "size:     2 x 2\nturn:     0\nterminal: NO\n\n. .\n. .\n"


def test_describe_state_reports_winner():
    state = GameState(4, 4)
    play_session(state, [0, 0, 1, 1, 2, 2, 3], io.StringIO(), ASCII_GLYPHS)

    text = describe_state(state, ASCII_GLYPHS)

    assert "turn:     7" in text
    assert "terminal: YES (player 1 is a winner)" in text
    assert "X X X X" in text


def test_unknown_player_ids_render_as_numbers():
    state = GameState(2, 1)
    state.grid[0, 1] = 7

    assert describe_state(state, ASCII_GLYPHS).splitlines()[-1] == ". 7"


def test_read_columns_splits_on_whitespace():
    assert list(read_columns(io.StringIO("1 2\n3\n\n 4 \n"))) == [1, 2, 3, 4]


def test_parse_moves():
    assert parse_moves("3, 3,4,") == [3, 3, 4]


def test_play_session_stops_on_first_error():
    state = GameState(3, 3)
    out = io.StringIO()

    end, result = play_session(state, [0, 5, 1], out, ASCII_GLYPHS)

    assert end is SessionEnd.TURN_ERROR
    assert result.player_id == 2
    assert state.turn_count == 1
    assert out.getvalue().endswith("error: column index is outside of the grid range\n")


def test_play_session_runs_out_of_input():
    end, result = play_session(GameState(3, 3), [0, 1], io.StringIO())

    assert end is SessionEnd.INPUT_EXHAUSTED
    assert result.ok


def test_replay_win_prints_gg():
    status, output = run_cli(["--ascii", "replay", "--moves", "0,0,1,1,2,2,3"])

    assert status == 0
    assert output.count("size:     10 x 10") == 7
    assert "terminal: YES (player 1 is a winner)" in output
    assert output.rstrip().endswith("gg")


def test_replay_diagonal_win_on_custom_grid():
    status, output = run_cli(["--width", "7", "--height", "6", "replay",
                              "--moves", "0,1,1,2,2,3,2,3,3,6,3"])

    assert status == 0
    assert "turn:     11" in output
    assert output.rstrip().endswith("gg")


def test_replay_out_of_range_column():
    status, output = run_cli(["--width", "4", "--height", "4", "replay", "--moves", "0,9"])

    assert status == 0
    assert "error: column index is outside of the grid range" in output
    assert "gg" not in output


def test_replay_full_column():
    status, output = run_cli(["--width", "4", "--height", "4", "replay", "--moves", "0,0,0,0,0"])

    assert status == 0
    assert output.count("size:     4 x 4") == 4
    assert output.rstrip().endswith(
        "error: token cannot be placed in a given column as it's full or does not exist")


def test_play_reads_stdin():
    status, output = run_cli(["--ascii", "play"], stdin="0\n0\n1 1\n2\n2\n3\n")

    assert status == 0
    assert output.rstrip().endswith("gg")


def test_play_rejects_non_integer_input():
    status, output = run_cli(["play"], stdin="0\nx\n")

    assert status == 1
    assert "error: column index must be an integer" in output


def test_invalid_dimensions_fail_to_initialize():
    status, output = run_cli(["--width", "0", "replay", "--moves", "0"])

    assert status == 1
    assert output.strip() == "failed to initialize game state"


def test_missing_command():
    status, output = run_cli([])

    assert status == 2
    assert "Please specify a command" in output
