"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board defaults, the player and status enumerations,
the run directions used by win detection, and the ASCII board renderer.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Board defaults
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        return {0: ".", 1: "X", 2: "O"}[self.value]

    def __str__(self):
        if self == Player.EMPTY:
            return "empty"
        return f"Player {self.value}"


class GameStatus(Enum):
    """Terminal-status flag of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the status is terminal."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Directions a run can extend in from its origin cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col). Only forward directions are needed when every
# cell is tried as a run origin.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def run_cells(row: int, col: int, direction: Direction,
              length: int = CONNECT_N) -> List[Tuple[int, int]]:
    """
    Get the cells of the run starting at (row, col) in the given direction.

    Args:
        row: Row of the origin cell
        col: Column of the origin cell
        direction: Direction the run extends in
        length: Number of cells in the run

    Returns:
        List of (row, col) positions, which may fall outside the board
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + i * dr, col + i * dc) for i in range(length)]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of player values

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    border = "+" + "-" * (cols * 2 + 1) + "+"

    lines = [border]
    for row in range(rows):
        cells = " ".join(Player(int(grid[row, col])).symbol for col in range(cols))
        lines.append(f"| {cells} |")
    lines.append(border)
    # Column numbers wrap past 9 so wide boards stay aligned
    lines.append("  " + " ".join(str(col % 10) for col in range(cols)))

    return "\n".join(lines)
