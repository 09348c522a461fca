"""
Main entry point for the TicTacToe game.

Runs the Tkinter UI by default, or a console game with --no-ui.
Both play X against O on the same machine.
"""

import sys

from loguru import logger

from engine import EngineConfig, Game, GameStatus, format_board


def configure_logging(verbose: bool = False) -> int:
    """Send engine logs to stderr at the configured level. Returns the handler id."""
    logger.remove()
    level = "DEBUG" if verbose or EngineConfig.DEBUG_MODE else EngineConfig.LOG_LEVEL
    return logger.add(sys.stderr, level=level)


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Commands:
    - 0-8: place the current player's mark on that cell
    - n: new game (scores are kept)
    - s: reset scores
    - q: quit
    """

    def __init__(self):
        self.game = Game()
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nCells are numbered 0-8, left to right, top to bottom.")
        print("Type 'n' for a new game, 's' to reset scores, 'q' to quit\n")

        self.is_running = True
        self._show_board()

        while self.is_running:
            command = input(self._prompt()).strip().lower()
            self.handle_command(command)

    def handle_command(self, command: str):
        """Apply one line of user input."""
        if command == 'q':
            print("\nGame quit by user.")
            self.is_running = False
        elif command == 'n':
            self.game.reset_game()
            print("\nNew game!")
            self._show_board()
        elif command == 's':
            self.game.reset_scores()
            print("Scores reset.")
        elif command.isdigit():
            self._play(int(command))
        else:
            print("Please enter a cell number (0-8), 'n', 's' or 'q'.")

    def _play(self, index: int):
        """Play a move and report what happened."""
        if not self.game.attempt_move(index):
            print(f"Move {index} is not allowed. Available: {self.game.available_moves()}")
            return

        report = self.game.check_consistency()
        if not report.is_valid:
            logger.warning("Inconsistent game state: {}", report.issues)

        self._show_board()

        if self.game.is_ended():
            self._show_game_result()

    def _prompt(self) -> str:
        if self.game.is_playing():
            return f"Player {self.game.current_player.value}, your move: "
        return "Game over. 'n' for a new game: "

    def _show_board(self):
        print(format_board(self.game.board))

    def _show_game_result(self):
        """Show the final game result and the score."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        if self.game.status == GameStatus.WIN:
            print(f"\n🏆 Player {self.game.winner.value} wins!")
        else:
            print("\n🤝 It's a draw! Good game!")

        scores = self.game.scores
        print(f"\nScore  X: {scores.wins_x}  O: {scores.wins_o}  Draws: {scores.draws}")
        print(f"Win rate  X: {self.game.win_rate('X'):.0f}%  O: {self.game.win_rate('O'):.0f}%")
        print("=" * 40 + "\n")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--turn-seconds",
        type=int,
        default=EngineConfig.TURN_DURATION_SECONDS,
        help="Seconds per turn before it passes to the opponent (UI only)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    configure_logging(args.verbose)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(turn_seconds=args.turn_seconds)
        ui.run()
        return

    console = ConsoleGame()
    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
