"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from memory_match.config import GameLogConfig
from memory_match.models.card import Card
from memory_match.models.game_state import FlipOutcome

from .formatters import format_values


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    With the dealt deck recorded in ``game_start`` and every flip after it,
    a game can be replayed step by step.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, pair_count: int, columns: int) -> None:
        """Log session start with board dimensions."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "pair_count": pair_count,
            "columns": columns,
        })

    def log_game_start(self, game_num: int, cards: Sequence[Card]) -> None:
        """Log a freshly dealt deck.

        Args:
            game_num: Deck generation number.
            cards: Cards in board order.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "values": format_values(cards),
        })

    def log_flip(
        self,
        game_num: int,
        card_id: int,
        outcome: FlipOutcome,
        score: int,
        elapsed: int,
    ) -> None:
        """Log a single flip.

        Args:
            game_num: Deck generation number.
            card_id: Card that was flipped.
            outcome: What the flip did.
            score: Score after the flip.
            elapsed: Elapsed seconds at the time of the flip.
        """
        self._write({
            "type": "flip",
            "game": game_num,
            "card": card_id,
            "outcome": outcome.value,
            "score": score,
            "elapsed": elapsed,
        })

    def log_resolve(self, game_num: int, card_ids: list[int]) -> None:
        """Log a mismatched pair turning back face down."""
        self._write({
            "type": "resolve",
            "game": game_num,
            "hidden": card_ids,
        })

    def log_game_won(self, game_num: int, score: int, elapsed: int) -> None:
        """Log a completed board."""
        self._write({
            "type": "game_won",
            "game": game_num,
            "score": score,
            "elapsed": elapsed,
        })

    def log_restart(self, game_num: int) -> None:
        """Log a restart that abandons the given game."""
        self._write({
            "type": "restart",
            "game": game_num,
        })

    def log_session_end(self, games_played: int, games_won: int) -> None:
        """Log session end.

        Args:
            games_played: Number of decks dealt.
            games_won: Number of decks completed.
        """
        self._write({
            "type": "session_end",
            "timestamp": datetime.now().isoformat(),
            "games_played": games_played,
            "games_won": games_won,
        })
