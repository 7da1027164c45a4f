"""
board.py - Board representation for Connect Four

This module implements the Board class: a numpy grid of player values with
the column queries and the full-board win scan the engine builds on. The
board knows nothing about turns; GameEngine decides who plays where.
"""

import numbers
from typing import Iterable, List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.errors import InvalidColumn
from connectfour.utils import (ROWS, COLS, CONNECT_N, Player, DIRECTION_VECTORS,
                               run_cells, render_board_ascii)


class Board:
    """
    A rows x cols Connect Four grid, indexed [row, column] with row 0 on top.

    Cells hold Player values (0 empty, 1 and 2 for the players).
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        if not _is_index(rows) or not _is_index(cols) or rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive integers, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        debug.trace(f"Initializing {self.rows}x{self.cols} board", "board")
        self.grid = np.zeros((self.rows, self.cols), dtype=int)

    @classmethod
    def from_values(cls, values: Iterable[int], rows: int = ROWS, cols: int = COLS) -> 'Board':
        """
        Build a board from row-major cell values (top row first).

        Args:
            values: rows * cols integers, each 0, 1 or 2
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If the value count or any value is wrong, a piece
                floats above an empty cell, or the piece counts could not
                arise from alternating turns
        """
        values = [int(v) for v in values]
        if len(values) != rows * cols:
            raise ValueError(f"Position must have {rows * cols} values, got {len(values)}")
        allowed = {p.value for p in Player}
        bad = sorted(set(values) - allowed)
        if bad:
            raise ValueError(f"Invalid cell values: {bad}")

        grid = np.array(values, dtype=int).reshape(rows, cols)
        floating = (grid[:-1] != Player.EMPTY.value) & (grid[1:] == Player.EMPTY.value)
        if np.any(floating):
            cells = [(int(r), int(c)) for r, c in np.argwhere(floating)]
            raise ValueError(f"Pieces floating above empty cells at {cells}")

        ones = int(np.count_nonzero(grid == Player.ONE.value))
        twos = int(np.count_nonzero(grid == Player.TWO.value))
        if ones - twos not in (0, 1):
            raise ValueError(f"Unreachable piece counts: {ones} for Player 1, {twos} for Player 2")

        board = cls(rows, cols)
        board.grid = grid
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def validate_column(self, column) -> int:
        """
        Check a column index and return it as a plain int.

        Raises:
            InvalidColumn: If column is not an integer in [0, cols)
        """
        if not _is_index(column) or not (0 <= column < self.cols):
            raise InvalidColumn(column, self.cols)
        return int(column)

    def cell(self, row: int, col: int) -> Player:
        return Player(int(self.grid[row, col]))

    def find_drop_row(self, column) -> Optional[int]:
        """
        Find the row a piece dropped in this column would land on.

        Args:
            column: Column index

        Returns:
            The lowest empty row (highest row number), or None if the column is full

        Raises:
            InvalidColumn: If column is out of range
        """
        column = self.validate_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def legal_columns(self) -> List[int]:
        """Columns that still have an empty cell, in ascending order."""
        return [col for col in range(self.cols)
                if np.any(self.grid[:, col] == Player.EMPTY.value)]

    def place(self, row: int, col: int, player: Player):
        """Write a player's marker into a cell. No rule checks happen here."""
        debug.trace(f"Placing {player} at ({row}, {col})", "board")
        self.grid[row, col] = player.value

    def is_full(self) -> bool:
        return not np.any(self.grid == Player.EMPTY.value)

    def count(self, player: Player) -> int:
        """Number of cells holding the given marker."""
        return int(np.count_nonzero(self.grid == player.value))

    def find_winning_run(self, player: Player) -> List[Tuple[int, int]]:
        """
        Scan the whole board for a run of CONNECT_N cells owned by player.

        Every cell is tried as a run origin in row-major order, extending
        horizontally, vertically and along both downward diagonals.

        Args:
            player: Player whose runs are checked

        Returns:
            The cells of the first winning run found, or an empty list
        """
        if player == Player.EMPTY:
            return []

        value = player.value
        for row in range(self.rows):
            for col in range(self.cols):
                if self.grid[row, col] != value:
                    continue
                for direction in DIRECTION_VECTORS:
                    cells = run_cells(row, col, direction, CONNECT_N)
                    if all(self.in_bounds(r, c) and self.grid[r, c] == value
                           for r, c in cells):
                        return cells
        return []

    def has_win(self, player: Player) -> bool:
        return bool(self.find_winning_run(player))

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))


def _is_index(value) -> bool:
    """True for ints and numpy integers, but not bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))
