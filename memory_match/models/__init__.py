"""Game models."""

from .card import DEFAULT_PAIR_COUNT, Card, CardView, create_deck
from .game_state import FlipOutcome, GamePhase, GameSnapshot

__all__ = [
    "DEFAULT_PAIR_COUNT",
    "Card",
    "CardView",
    "create_deck",
    "FlipOutcome",
    "GamePhase",
    "GameSnapshot",
]
