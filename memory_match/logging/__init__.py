"""Game logging module."""

from memory_match.config import GameLogConfig

from .formatters import format_board, format_card, format_values
from .game_logger import GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_board",
    "format_card",
    "format_values",
]
