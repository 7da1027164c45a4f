"""
engine.py - Game state and turn sequencing for Connect Four

This module provides:
1. GameState, the board plus whose turn it is and whether the game is over
2. MoveOutcome, the structured result of a successful drop
3. GameEngine, the state machine that enforces the rules

Presentation code calls drop_piece() and reacts to the returned outcome. The
engine never renders anything itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.errors import ColumnFull, GameAlreadyOver, InvalidColumn
from connectfour.game.board import Board
from connectfour.utils import ROWS, COLS, Player, GameStatus


class OutcomeKind(Enum):
    WIN = "win"
    TIE = "tie"
    CONTINUE = "continue"


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a successful drop.

    player is the winner for WIN, the player to move next for CONTINUE, and
    None for TIE. row and column locate the piece that was just placed.
    """

    kind: OutcomeKind
    player: Optional[Player]
    row: int
    column: int

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.CONTINUE


class GameState:
    """
    Everything that describes one game in progress.

    A fresh state has an empty board, Player ONE to move and status
    IN_PROGRESS. Only GameEngine.drop_piece changes it.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        self.board = Board(rows, cols)
        self.current_player = Player.ONE
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.last_move: Optional[Tuple[int, int]] = None
        self.move_count = 0

    def __repr__(self) -> str:
        return (f"GameState(status={self.status.name}, current_player={self.current_player.name}, "
                f"winner={self.winner.name if self.winner else None}, moves={self.move_count})")


class GameEngine:
    """
    Connect Four rules engine.

    Owns a single GameState and is its sole mutator. Engines share nothing,
    so any number of games can run side by side. Calls on one engine must not
    interleave; the engine does no locking of its own.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize an engine with a fresh game.

        Args:
            rows: Board height
            cols: Board width
        """
        debug.debug(f"Initializing GameEngine ({rows}x{cols})", "engine")
        self._state = GameState(rows, cols)

    def reset(self, rows: Optional[int] = None, cols: Optional[int] = None) -> GameState:
        """
        Start a new game, replacing the current state.

        Args:
            rows: New board height (keeps the current one if None)
            cols: New board width (keeps the current one if None)

        Returns:
            The new game state

        Raises:
            ValueError: If a dimension is not a positive integer
        """
        rows = self._state.board.rows if rows is None else rows
        cols = self._state.board.cols if cols is None else cols
        debug.debug(f"Resetting game ({rows}x{cols})", "engine")
        self._state = GameState(rows, cols)
        return self._state

    def legal_columns(self) -> List[int]:
        """Ascending list of columns that are not full."""
        return self._state.board.legal_columns()

    def find_drop_row(self, column: int) -> Optional[int]:
        """
        Row where a piece dropped in column would land, or None if it is full.

        Raises:
            InvalidColumn: If column is outside [0, width)
        """
        return self._state.board.find_drop_row(column)

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column index

        Returns:
            WIN with the mover, TIE, or CONTINUE with the next player

        Raises:
            GameAlreadyOver: If the game has already been won or tied
            InvalidColumn: If column is outside [0, width)
            ColumnFull: If the column has no empty cell
        """
        state = self._state
        player = state.current_player

        if state.status.is_game_over():
            debug.debug(f"Rejected move in column {column!r}: game is over", "engine")
            raise GameAlreadyOver(state.status, state.winner)

        try:
            row = state.board.find_drop_row(column)
        except InvalidColumn:
            debug.debug(f"Rejected move in column {column!r}: out of range", "engine")
            raise
        if row is None:
            debug.debug(f"Rejected move in column {column}: column is full", "engine")
            raise ColumnFull(column)

        column = int(column)
        state.board.place(row, column, player)
        state.last_move = (row, column)
        state.move_count += 1
        debug.debug(f"{player} dropped in column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        won = state.board.has_win(player)
        debug.end_timer("win_check", "engine")

        if won:
            state.status = GameStatus.WON
            state.winner = player
            debug.info(f"{player} wins after {state.move_count} moves", "engine")
            return MoveOutcome(OutcomeKind.WIN, player, row, column)

        if state.board.is_full():
            state.status = GameStatus.TIED
            debug.info(f"Game tied after {state.move_count} moves", "engine")
            return MoveOutcome(OutcomeKind.TIE, None, row, column)

        state.current_player = player.other()
        return MoveOutcome(OutcomeKind.CONTINUE, state.current_player, row, column)

    @property
    def state(self) -> GameState:
        """The live game state. Treat it as read-only."""
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    def is_game_over(self) -> bool:
        return self._state.status.is_game_over()

    def winning_run(self) -> List[Tuple[int, int]]:
        """Cells of the winning run, or an empty list unless the game was won."""
        if self._state.status != GameStatus.WON:
            return []
        return self._state.board.find_winning_run(self._state.winner)

    def render(self) -> str:
        return self._state.board.render()
