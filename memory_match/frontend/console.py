"""Line-oriented terminal front end."""

import logging
from typing import Callable

from memory_match.game.engine import GameEngine
from memory_match.models.game_state import FlipOutcome, GameSnapshot
from memory_match.utils.logger import GameDisplay

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
RESTART_COMMANDS = {"r", "restart"}
SHOW_COMMANDS = {"", "s", "show"}
HELP_COMMANDS = {"h", "help", "?"}

OUTCOME_MESSAGES = {
    FlipOutcome.IGNORED: "That card can't be flipped right now.",
    FlipOutcome.MATCHED: "Match!",
    FlipOutcome.MISMATCHED: "No match.",
}


class ConsoleFrontend:
    """Reads commands from a prompt and renders the board after each one.

    The win banner is shown once per won game; restarting arms it again.
    """

    def __init__(
        self,
        engine: GameEngine,
        display: GameDisplay,
        input_fn: Callable[[str], str] = input,
    ):
        self.engine = engine
        self.display = display
        self.input_fn = input_fn

        self._win_shown = False
        self._won_games: set[int] = set()
        self.engine.add_listener(self._on_change)

    @property
    def games_won(self) -> int:
        return len(self._won_games)

    def _on_change(self, snapshot: GameSnapshot) -> None:
        # May run on a timer thread; only record state here
        if snapshot.won:
            self._won_games.add(snapshot.generation)

    def render(self) -> None:
        """Draw the board, plus the win banner the first time a game is won."""
        snapshot = self.engine.snapshot()
        self.display.print_board(snapshot)
        if snapshot.won and not self._win_shown:
            self._win_shown = True
            self.display.print_win(snapshot)
            self.display.print_message("Enter r to play again or q to quit.")

    def handle(self, line: str) -> bool:
        """Handle one line of input.

        Args:
            line: Raw input line

        Returns:
            False if the user asked to quit, True otherwise
        """
        command = line.strip().lower()

        if command in QUIT_COMMANDS:
            return False

        if command in RESTART_COMMANDS:
            self.engine.restart()
            self._win_shown = False
        elif command in HELP_COMMANDS:
            self.display.print_help(len(self.engine.get_cards()))
            return True
        elif command in SHOW_COMMANDS:
            pass
        elif command.isdecimal():
            self._flip(int(command))
        else:
            self.display.print_message(f"Unknown command: {line.strip()!r} (h for help)")
            return True

        self.render()
        return True

    def run(self) -> None:
        """Run the prompt loop until quit or end of input."""
        self.display.print_title()
        self.display.print_help(len(self.engine.get_cards()))
        self.render()

        while True:
            try:
                line = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle(line):
                break

    def _flip(self, card_id: int) -> None:
        deck_size = len(self.engine.get_cards())
        if card_id >= deck_size:
            self.display.print_message(f"No card {card_id}; pick 0-{deck_size - 1}.")
            return

        outcome = self.engine.flip(card_id)
        logger.debug(f"Console flip {card_id} -> {outcome.value}")
        message = OUTCOME_MESSAGES.get(outcome)
        if message:
            self.display.print_message(message)
