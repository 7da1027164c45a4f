"""
errors.py - Error kinds raised by the Connect Four engine

Every rejected move raises one of these. The engine state is left unchanged,
so callers can report the problem and ask for another column.
"""

from typing import Any, Optional


class ConnectFourError(Exception):
    """Base class for all engine errors."""
    pass


class InvalidColumn(ConnectFourError):
    """Raised when a column index falls outside [0, width)."""

    def __init__(self, column: Any, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} is out of range 0-{width - 1}")


class ColumnFull(ConnectFourError):
    """Raised when a piece is dropped into a column with no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(ConnectFourError):
    """Raised when a move is attempted after the game has finished."""

    def __init__(self, status: Any, winner: Optional[Any] = None):
        self.status = status
        self.winner = winner
        if winner is not None:
            message = f"Game is already over: {winner} won"
        else:
            message = "Game is already over: tie"
        super().__init__(message)
