"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8     place a mark on that cell
    j N     jump to history step N
    u / r   undo / redo one step
    h       show history
    n       new game
    q       quit
"""

import logging
from typing import Callable, Optional

from logic.config import GameConfig
from logic.errors import GameError
from logic.game_engine import GameEngine

logger = logging.getLogger(__name__)


HELP_TEXT = "Commands: 0-8 play | j N jump | u undo | r redo | h history | n new game | q quit"


class TicTacToeConsole:
    """
    Console front end for the game engine.

    Game flow:
    1. Board and status are printed
    2. A command is read and applied
    3. Repeat until 'q' or end of input
    """

    def __init__(self, engine: Optional[GameEngine] = None,
                 output: Callable[[str], None] = print):
        """
        Initialize the console.

        Args:
            engine: Game engine to drive. A new one is created if None.
            output: Where to write text (print by default).
        """
        self.engine = engine or GameEngine()
        self.output = output

    def show(self):
        """Print the board and status line."""
        self.output(self.engine.format_board())
        self.output(self.engine.status)

    def show_history(self):
        """Print the history entries, marking the current one."""
        current = self.engine.current_step
        for step, label in self.engine.history_entries():
            marker = "→" if step == current else " "
            self.output(f" {marker} [{step}] {label}")

    def handle_command(self, text: str) -> bool:
        """
        Apply one console command.

        Args:
            text: The line typed by the user.

        Returns:
            False if the user asked to quit, True otherwise.
        """
        parts = text.strip().lower().split()
        if not parts:
            return True

        command = parts[0]
        try:
            if command in ("q", "quit"):
                return False
            elif command.isdecimal():
                if not self.engine.apply_move(int(command)):
                    self.output(f"Cell {command} can't be played.")
            elif command in ("j", "jump"):
                if len(parts) != 2 or not parts[1].isdecimal():
                    self.output("Usage: j N")
                    return True
                self.engine.jump_to(int(parts[1]))
                self.output(self.engine.history_label(self.engine.current_step))
            elif command in ("u", "undo"):
                if not self.engine.undo():
                    self.output("Already at game start.")
            elif command in ("r", "redo"):
                if not self.engine.redo():
                    self.output("Already at the last move.")
            elif command in ("h", "history"):
                self.show_history()
                return True
            elif command in ("n", "new"):
                self.engine.reset()
            else:
                self.output(HELP_TEXT)
                return True
        except GameError as e:
            self.output(f"Error: {e}")
            return True

        self.show()
        return True

    def start(self):
        """Run the console game loop."""
        self.output(HELP_TEXT)
        self.show()
        while True:
            try:
                text = input("> ")
            except EOFError:
                break
            if not self.handle_command(text):
                break


def parse_moves(text: str):
    """Parse a comma separated list of cell indices, e.g. '0,4,1'."""
    return [int(part) for part in text.split(",") if part.strip()]


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
        "--moves",
        type=parse_moves,
        default=[],
        help="Moves to replay before starting, e.g. 0,4,1"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report illegal moves as errors instead of ignoring them"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        engine = GameEngine.from_moves(args.moves, config=GameConfig(), strict=args.strict)
    except GameError as e:
        parser.error(f"invalid --moves: {e}")
    logger.info("Starting at step %d (%s)", engine.current_step, engine.status)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(engine)
        ui.run()
        return

    console = TicTacToeConsole(engine)
    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
