"""Unit tests for GameEngine: turn order, outcomes, errors and resets."""

import random

import numpy as np
import pytest

from connectfour.errors import ColumnFull, GameAlreadyOver, InvalidColumn
from connectfour.game.engine import GameEngine, MoveOutcome, OutcomeKind
from connectfour.utils import GameStatus, Player

# Fills the 6x7 board with no four-in-a-row for either player.
TIE_SEQUENCE = [0, 2, 1, 3, 4, 6, 5] * 6

VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]

# Player ONE ends on (5,0) (4,1) (3,2) (2,3)
DIAGONAL_WIN = [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3]


def play(engine, columns):
    outcome = None
    for column in columns:
        outcome = engine.drop_piece(column)
    return outcome


def snapshot(engine):
    state = engine.state
    return (state.board.get_state(), state.current_player, state.status,
            state.winner, state.last_move, state.move_count)


def assert_unchanged(engine, before):
    after = snapshot(engine)
    assert np.array_equal(before[0], after[0])
    assert before[1:] == after[1:]


class TestNewGame:
    def test_initial_state(self):
        engine = GameEngine()
        assert engine.current_player == Player.ONE
        assert engine.status == GameStatus.IN_PROGRESS
        assert engine.winner is None
        assert engine.board.count(Player.EMPTY) == 42
        assert not engine.is_game_over()

    def test_find_drop_row_on_empty_board(self):
        assert GameEngine().find_drop_row(3) == 5

    def test_engines_are_independent(self):
        first, second = GameEngine(), GameEngine()
        first.drop_piece(3)
        assert second.board.count(Player.ONE) == 0
        assert second.current_player == Player.ONE


class TestDropPiece:
    def test_first_move(self):
        engine = GameEngine()
        outcome = engine.drop_piece(3)
        assert outcome == MoveOutcome(OutcomeKind.CONTINUE, Player.TWO, 5, 3)
        assert not outcome.is_terminal
        assert engine.board.cell(5, 3) == Player.ONE
        assert engine.current_player == Player.TWO
        assert engine.state.last_move == (5, 3)
        assert engine.state.move_count == 1

    def test_players_alternate(self):
        engine = GameEngine()
        assert engine.drop_piece(0).player == Player.TWO
        assert engine.drop_piece(0).player == Player.ONE
        assert engine.board.cell(5, 0) == Player.ONE
        assert engine.board.cell(4, 0) == Player.TWO

    def test_vertical_win_scenario(self):
        engine = GameEngine()
        play(engine, VERTICAL_WIN[:-1])
        assert engine.status == GameStatus.IN_PROGRESS

        outcome = engine.drop_piece(0)
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.player == Player.ONE
        assert (outcome.row, outcome.column) == (2, 0)
        assert engine.status == GameStatus.WON
        assert engine.winner == Player.ONE
        assert engine.current_player == Player.ONE
        assert engine.winning_run() == [(2, 0), (3, 0), (4, 0), (5, 0)]

    def test_diagonal_win(self):
        engine = GameEngine()
        outcome = play(engine, DIAGONAL_WIN)
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.player == Player.ONE
        assert engine.winning_run() == [(2, 3), (3, 2), (4, 1), (5, 0)]

    def test_player_two_wins(self):
        engine = GameEngine()
        outcome = play(engine, [0, 1, 0, 1, 0, 1, 2, 1])
        assert outcome == MoveOutcome(OutcomeKind.WIN, Player.TWO, 2, 1)
        assert engine.winner == Player.TWO

    def test_tie(self):
        engine = GameEngine()
        outcomes = [engine.drop_piece(column) for column in TIE_SEQUENCE]
        assert all(o.kind == OutcomeKind.CONTINUE for o in outcomes[:-1])
        assert outcomes[-1] == MoveOutcome(OutcomeKind.TIE, None, 0, 5)
        assert engine.status == GameStatus.TIED
        assert engine.winner is None
        assert engine.winning_run() == []
        assert engine.board.is_full()
        assert engine.legal_columns() == []

    def test_piece_counts_stay_balanced(self):
        rng = random.Random(7)
        for _ in range(20):
            engine = GameEngine()
            while not engine.is_game_over():
                ones = engine.board.count(Player.ONE)
                twos = engine.board.count(Player.TWO)
                expected = 0 if engine.current_player == Player.ONE else 1
                assert ones - twos == expected
                engine.drop_piece(rng.choice(engine.legal_columns()))
            assert engine.board.count(Player.ONE) - engine.board.count(Player.TWO) in (0, 1)


class TestErrors:
    @pytest.mark.parametrize("column", [-1, 7])
    def test_invalid_column(self, column):
        engine = GameEngine()
        engine.drop_piece(3)
        before = snapshot(engine)
        with pytest.raises(InvalidColumn):
            engine.drop_piece(column)
        assert_unchanged(engine, before)

    def test_find_drop_row_invalid_column(self):
        with pytest.raises(InvalidColumn):
            GameEngine().find_drop_row(7)

    def test_column_full(self):
        engine = GameEngine()
        play(engine, [0] * 6)
        assert engine.find_drop_row(0) is None
        assert 0 not in engine.legal_columns()

        before = snapshot(engine)
        with pytest.raises(ColumnFull) as exc_info:
            engine.drop_piece(0)
        assert exc_info.value.column == 0
        assert_unchanged(engine, before)

    @pytest.mark.parametrize("column", [0, 3, 6, -1, 7])
    def test_game_already_over(self, column):
        engine = GameEngine()
        play(engine, VERTICAL_WIN)
        before = snapshot(engine)
        with pytest.raises(GameAlreadyOver) as exc_info:
            engine.drop_piece(column)
        assert exc_info.value.winner == Player.ONE
        assert exc_info.value.status == GameStatus.WON
        assert_unchanged(engine, before)

    def test_game_already_over_after_tie(self):
        engine = GameEngine()
        play(engine, TIE_SEQUENCE)
        with pytest.raises(GameAlreadyOver, match="tie"):
            engine.drop_piece(0)


class TestReset:
    def test_reset_after_win(self):
        engine = GameEngine()
        play(engine, VERTICAL_WIN)
        old_state = engine.state

        new_state = engine.reset()
        assert new_state is engine.state
        assert new_state is not old_state
        assert engine.status == GameStatus.IN_PROGRESS
        assert engine.current_player == Player.ONE
        assert engine.board.count(Player.EMPTY) == 42
        assert engine.drop_piece(0).kind == OutcomeKind.CONTINUE

    def test_reset_with_dimensions(self):
        engine = GameEngine()
        engine.reset(4, 5)
        assert engine.board.grid.shape == (4, 5)
        assert engine.legal_columns() == [0, 1, 2, 3, 4]
        with pytest.raises(InvalidColumn):
            engine.drop_piece(5)

    def test_reset_keeps_dimensions(self):
        engine = GameEngine(5, 8)
        engine.reset()
        assert engine.board.grid.shape == (5, 8)

    def test_reset_rejects_bad_dimensions(self):
        engine = GameEngine()
        engine.drop_piece(2)
        with pytest.raises(ValueError):
            engine.reset(0, 7)
        assert engine.state.move_count == 1

    def test_small_board_tie(self):
        engine = GameEngine(2, 2)
        outcome = play(engine, [0, 0, 1, 1])
        assert outcome.kind == OutcomeKind.TIE

    def test_small_board_win(self):
        engine = GameEngine(4, 4)
        outcome = play(engine, [0, 1, 0, 1, 0, 1, 0])
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.player == Player.ONE
