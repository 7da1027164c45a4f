"""
cli.py - Command-line interface for Connect Four

This module is a terminal presentation layer over GameEngine: it turns typed
input into column indices, prints the board after each move, and reacts to
the engine's outcomes and errors. It holds no game rules of its own.
"""

import argparse
import random
import sys
from typing import List, Optional, Union

from connectfour.debug import debug, DebugLevel
from connectfour.errors import ConnectFourError
from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, OutcomeKind
from connectfour.utils import ROWS, COLS, Player

QUIT = 'q'
RESTART = 'r'


class SimpleCLI:
    """Interactive command-line front end for the Connect Four engine."""

    def __init__(self, argv: Optional[List[str]] = None):
        self.argv = argv
        self.args = None
        self.engine = GameEngine()

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        board_options = argparse.ArgumentParser(add_help=False)
        board_options.add_argument('--rows', type=int, default=ROWS,
                                   help=f'Board height (default: {ROWS})')
        board_options.add_argument('--cols', type=int, default=COLS,
                                   help=f'Board width (default: {COLS})')

        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug-level debug)')
        parser.add_argument('--debug-level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default=None,
                            help='Logging level: none, error, warning, info, debug, trace')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', parents=[board_options],
                              help='Play a two-player game in the terminal')

        test_parser = subparsers.add_parser('test', parents=[board_options],
                                            help='Analyze a board position')
        test_parser.add_argument('--position', type=str,
                                 help='Comma-separated cell values (0/1/2), row-major, top row first')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[board_options],
                                                 help='Benchmark engine performance')
        benchmark_parser.add_argument('--iterations', type=int, default=100,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for reproducible games')

        return parser

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(self.argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the selected command and return a process exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command is None:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            self.engine.reset(self.args.rows, self.args.cols)
        except ValueError as e:
            print(f"Error: {e}")
            return 2

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        return 0

    def play_game(self) -> None:
        """Play hot-seat games until a player quits or declines a rematch."""
        last_col = self.engine.board.cols - 1
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{last_col}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.engine.render())

        while True:
            if self.engine.is_game_over():
                self.announce_result()
                if not self.ask_play_again():
                    print("Thanks for playing!")
                    return
                self.engine.reset()
                print(self.engine.render())
                continue

            move = self.get_human_move()
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                self.engine.reset()
                print("Game restarted.")
                print(self.engine.render())
                continue

            try:
                outcome = self.engine.drop_piece(move)
            except ConnectFourError as e:
                debug.debug(f"Move rejected: {e}", "cli")
                print(f"Invalid move: {e}")
                continue

            print(self.engine.render())
            if outcome.kind == OutcomeKind.CONTINUE:
                debug.trace(f"Next to move: {outcome.player}", "cli")

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Read one move from the current player.

        Returns:
            Column index, QUIT or RESTART, or None if the input was not understood
        """
        player = self.engine.current_player
        try:
            user_input = input(f"{player} ({player.symbol}), your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

    def announce_result(self) -> None:
        winner = self.engine.winner
        if winner is not None:
            print(f"{winner} won!")
            print(f"Winning cells: {self.engine.winning_run()}")
        else:
            print("Tie!")

    def ask_play_again(self) -> bool:
        try:
            answer = input("Play again? [y/n]: ").strip().lower()
        except EOFError:
            return False
        return answer in ('y', 'yes')

    def test_position(self) -> int:
        """Load a position and report wins, fullness and legal columns."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return 1

        try:
            board = Board.from_values(self.args.position.split(','),
                                      self.args.rows, self.args.cols)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        has_win = False
        for player in (Player.ONE, Player.TWO):
            run = board.find_winning_run(player)
            if run:
                print(f"Win for {player} detected at {run}")
                has_win = True
        if not has_win:
            print("No win detected for any player")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {board.count(Player.EMPTY)}")

        print(f"Valid moves: {board.legal_columns()}")
        return 0

    def benchmark(self) -> None:
        """Time random legal games played through the engine."""
        rng = random.Random(self.args.seed)
        iterations = max(1, self.args.iterations)
        results = {OutcomeKind.WIN: 0, OutcomeKind.TIE: 0}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(iterations):
            self.engine.reset()
            outcome = None
            while outcome is None or not outcome.is_terminal:
                outcome = self.engine.drop_piece(rng.choice(self.engine.legal_columns()))
                total_moves += 1
            results[outcome.kind] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} total moves "
              f"({results[OutcomeKind.WIN]} won, {results[OutcomeKind.TIE]} tied)")
        print(f"{elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per game, "
              f"{elapsed / total_moves * 1000:.6f} ms per move")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
