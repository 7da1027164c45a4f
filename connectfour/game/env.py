"""
env.py - Gymnasium environment over the Connect Four engine

ConnectFourEnv lets Gymnasium-style drivers play a game by sending column
actions. Both players act through the same env, alternating as the engine
dictates; rewards are from Player ONE's point of view.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.errors import ConnectFourError
from connectfour.game.engine import GameEngine, OutcomeKind
from connectfour.utils import ROWS, COLS, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Actions are column indices. Observations are the board grid as int8 with
    0 for empty and 1/2 for the players.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None, rows: int = ROWS, cols: int = COLS):
        """
        Initialize the environment.

        Args:
            render_mode: None, 'ascii' or 'human'
            rows: Board height
            cols: Board width
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.engine = GameEngine(rows, cols)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8)

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for whichever player is to move.

        Args:
            action: Column to drop into

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        try:
            outcome = self.engine.drop_piece(action)
        except ConnectFourError as e:
            debug.debug(f"Invalid action {action!r}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = type(e).__name__
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = outcome.is_terminal
        if outcome.kind == OutcomeKind.WIN:
            reward = self.reward_win if outcome.player == Player.ONE else self.reward_lose
        elif outcome.kind == OutcomeKind.TIE:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        state = self.engine.state
        valid_moves = [] if self.engine.is_game_over() else self.engine.legal_columns()
        return {
            'valid_moves': valid_moves,
            'current_player': state.current_player.value,
            'status': state.status.name,
            'winner': state.winner.value if state.winner else None,
            'moves_made': state.move_count,
            'winning_line': self.engine.winning_run(),
            'last_move': state.last_move,
        }
