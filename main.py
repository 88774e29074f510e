"""
Main entry point for TicTacToe.

Play against the computer (or a friend) in a window, or in the console
with --no-ui.

Run this script to play TicTacToe!
"""

import time
from typing import Optional

from logic.ai_player import AIPlayer
from logic.config import GameConfig, ConfigError
from logic.orchestrator import GameOrchestrator, GameStatus


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Game flow:
    1. The board is printed with the index of every empty cell
    2. The human types the index of a cell
    3. The computer searches for its reply
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the console game.

        Args:
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self.game = GameOrchestrator(self.config)
        self.is_running = False

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        print(f"   Board: {self.config.BOARD_WIDTH}x{self.config.BOARD_WIDTH}, "
              f"{self.config.PIECES_TO_WIN} in a row wins")
        if self.config.USE_AI:
            print(f"   Human plays: {self.config.player_piece.symbol}")
            print(f"   Computer plays: {self.config.computer_piece.symbol}")
        else:
            print("   Two players, X moves first")
        print("="*60 + "\n")

    def start(self):
        """Start playing, one game after another."""
        print("Type a cell number to play, 'h' for a hint, 'r' to restart, 'q' to quit\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if self.is_running:
                self._show_game_result()
                self.is_running = self._ask_play_again()
                if self.is_running:
                    self.game.reset()

    def _game_loop(self):
        """Play one game."""
        while self.is_running and not self.game.is_game_over:
            if self.game.status == GameStatus.AWAITING_SEARCH_RESULT:
                self._wait_for_computer()
                continue

            self.game.state.print_board()
            self._handle_human_turn()

    def _wait_for_computer(self):
        """Let the computer think, then apply its move."""
        print("\n>>> Computer is thinking...")
        started = time.perf_counter()
        self.game.search_task.wait()

        # Respect the minimum think time, it keeps the pace readable
        remaining = self.config.AI_THINK_TIME - (time.perf_counter() - started)
        if remaining > 0:
            time.sleep(remaining)
        self.game.update(max(self.config.AI_THINK_TIME, time.perf_counter() - started))

    def _handle_human_turn(self):
        """Read one move from the keyboard."""
        text = input(f"{self.game.current_player.symbol} to move > ").strip().lower()

        if text == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return
        if text == "h":
            print(self.hint())
            return
        if text == "r":
            print("\nResetting game...")
            self.game.reset()
            return

        try:
            index = int(text)
        except ValueError:
            print(f"Not a cell number: {text!r}")
            return

        result = self.game.cell_clicked(index)
        if not result.is_valid:
            print(result.error_message)

    def hint(self) -> str:
        """Ask the search engine for the best move of the player to move."""
        if self.config.BOARD_WIDTH > self.config.MAX_AI_BOARD_WIDTH:
            return f"No hints on boards wider than {self.config.MAX_AI_BOARD_WIDTH}"

        advisor = AIPlayer(self.game.current_player, self.config)
        return advisor.get_move_suggestion(self.game.board)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.game.state.print_board()
        print(f"\n{self.game.end_message}")

        cells = self.game.winning_cells()
        if cells:
            print(f"Winning line: {cells}")

        print("\n" + "="*60)

    def _ask_play_again(self) -> bool:
        answer = input("Play again? [Y/n] ").strip().lower()
        return answer in ("", "y", "yes")


def build_config(args) -> GameConfig:
    """Turn parsed command line options into a GameConfig."""
    overrides = {
        "player_start": not args.computer_first,
        "use_ai": not args.two_player,
        "verbose": not args.quiet,
    }
    if args.board_width is not None:
        overrides["board_width"] = args.board_width
    if args.pieces_to_win is not None:
        overrides["pieces_to_win"] = args.pieces_to_win
    if args.think_time is not None:
        overrides["ai_think_time"] = args.think_time
    return GameConfig(**overrides)


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
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans take turns, no computer"
    )
    parser.add_argument(
        "--board-width",
        type=int,
        help="Board width (the board is square)"
    )
    parser.add_argument(
        "--pieces-to-win",
        type=int,
        help="Pieces in a row needed to win (default: board width)"
    )
    parser.add_argument(
        "--think-time",
        type=float,
        help="Minimum computer thinking time in seconds"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print game progress"
    )

    args = parser.parse_args()

    try:
        config = build_config(args)
    except ConfigError as e:
        parser.error(str(e))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(game_config=config)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(config)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
