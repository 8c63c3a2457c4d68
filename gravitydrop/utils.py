"""
utils.py - Constants, enumerations and rendering helpers

This module holds the fixed game constants shared by the rules engine and
its drivers, plus helpers for turning a grid into printable text.
"""

from enum import Enum, auto
from typing import Dict, List, Mapping, Tuple

import numpy as np

# Game constants
EMPTY_COLOR = 0
COLOR_DTYPE = np.uint64  # cells hold unsigned player ids
MAX_PLAYER_ID = int(np.iinfo(COLOR_DTYPE).max)
LINE_LEN = 4  # Tokens in a row needed to win
LINE_OFFSET = LINE_LEN - 1
LINE_STEPS = LINE_LEN * 2 - 1  # Window covering every run through one cell

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10


class Player(Enum):
    """Player identifiers as stored in grid cells."""
    EMPTY = EMPTY_COLOR
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        if self == Player.ONE:
            return Player.TWO
        if self == Player.TWO:
            return Player.ONE
        return Player.EMPTY


PLAYER_IDS = (Player.ONE.value, Player.TWO.value)


class Direction(Enum):
    """The four principal directions a run can follow."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # top-right to bottom-left


# (row_delta, col_delta) walked by each directional scan, rows grow downwards
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}

# Glyph sets for rendering, keyed by cell color
EMOJI_GLYPHS = {
    EMPTY_COLOR: "⬜️",
    Player.ONE.value: "🟢",
    Player.TWO.value: "🔴",
}

ASCII_GLYPHS = {
    EMPTY_COLOR: ".",
    Player.ONE.value: "X",
    Player.TWO.value: "O",
}


def in_bounds(row: int, col: int, height: int, width: int) -> bool:
    """Check whether a signed coordinate lies inside a height x width grid."""
    return 0 <= row < height and 0 <= col < width


def cell_glyph(color: int, glyphs: Mapping[int, str] = EMOJI_GLYPHS) -> str:
    """Return the glyph for a cell, falling back to the raw id for unknown players."""
    return glyphs.get(int(color), str(int(color)))


def render_grid(grid: np.ndarray, glyphs: Mapping[int, str] = EMOJI_GLYPHS) -> str:
    """
    Render a grid as lines of glyphs, row 0 first.

    Args:
        grid: 2D array of cell colors
        glyphs: Mapping from cell color to glyph

    Returns:
        One line per row, cells separated by a space
    """
    lines: List[str] = []
    for row in grid:
        lines.append(" ".join(cell_glyph(cell, glyphs) for cell in row))
    return "\n".join(lines)
