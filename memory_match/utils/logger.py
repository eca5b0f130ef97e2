"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from memory_match.logging.formatters import format_board

if TYPE_CHECKING:
    from memory_match.models.game_state import GameSnapshot


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Logs go to stderr so they don't interleave with the board on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state as text."""

    def __init__(self, columns: int = 4, out: TextIO | None = None):
        """Initialize display.

        Args:
            columns: Cards per board row
            out: Output stream (stdout if not provided)
        """
        self.columns = columns
        self.out = out or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def print_separator(self) -> None:
        """Print a separator line."""
        self._print("=" * 40)

    def print_title(self) -> None:
        """Print the game title."""
        self.print_separator()
        self._print("Card Matching Game")
        self.print_separator()

    def print_status(self, snapshot: "GameSnapshot") -> None:
        """Print time and score."""
        self._print(f"Time: {snapshot.elapsed_seconds}s    Score: {snapshot.score}")

    def print_board(self, snapshot: "GameSnapshot") -> None:
        """Print the card grid with status line above it."""
        self._print()
        self.print_status(snapshot)
        self._print(format_board(snapshot.cards, self.columns))

    def print_win(self, snapshot: "GameSnapshot") -> None:
        """Print the win banner."""
        self._print()
        self.print_separator()
        self._print("        \\o/")
        self._print("Yay!! You won the game")
        self._print("Congratulations on matching all the cards!")
        self._print(f"Final score {snapshot.score} in {snapshot.elapsed_seconds}s")
        self.print_separator()

    def print_help(self, deck_size: int) -> None:
        """Print available commands."""
        self._print(f"Enter a card id (0-{deck_size - 1}) to flip it.")
        self._print("  r: restart   s: show board   h: help   q: quit")

    def print_message(self, message: str) -> None:
        """Print a one-line message."""
        self._print(message)
