"""
connectfour - Connect Four rules engine

This package provides the board representation, move legality, win and tie
detection and turn sequencing for Connect Four, along with a terminal
interface and a Gymnasium environment that drive the engine.
"""

from connectfour.errors import ConnectFourError, InvalidColumn, ColumnFull, GameAlreadyOver
from connectfour.game.engine import GameEngine, GameState, MoveOutcome, OutcomeKind
from connectfour.utils import Player, GameStatus

__version__ = '0.1.0'

__all__ = [
    'GameEngine', 'GameState', 'MoveOutcome', 'OutcomeKind', 'Player', 'GameStatus',
    'ConnectFourError', 'InvalidColumn', 'ColumnFull', 'GameAlreadyOver',
]
