"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the rules engine and the
Gymnasium environment built on top of it.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, GameState, MoveOutcome, OutcomeKind

__all__ = ['Board', 'GameEngine', 'GameState', 'MoveOutcome', 'OutcomeKind']
