"""Card model and deck generation."""

import random

from pydantic import BaseModel, Field

# 8 pairs fill a 4x4 grid
DEFAULT_PAIR_COUNT = 8


class CardView(BaseModel, frozen=True):
    """Read-only view of a card, handed out to the presentation layer."""

    id: int
    value: int
    face_up: bool = False
    matched: bool = False


class Card(BaseModel):
    """Single card on the board.

    ``id`` and ``value`` are fixed at deck creation. ``face_up`` and
    ``matched`` change as the game progresses; a matched card is always
    face up.
    """

    id: int = Field(frozen=True)
    value: int = Field(frozen=True)
    face_up: bool = False
    matched: bool = False

    def view(self) -> CardView:
        """Get an immutable copy of this card."""
        return CardView(
            id=self.id,
            value=self.value,
            face_up=self.face_up,
            matched=self.matched,
        )


def create_deck(
    pair_count: int = DEFAULT_PAIR_COUNT,
    rng: random.Random | None = None,
) -> list[Card]:
    """Create a shuffled deck with every value appearing exactly twice.

    Args:
        pair_count: Number of pairs (values 0..pair_count-1).
        rng: Random source. Uses the module-level generator if None.

    Returns:
        List of 2*pair_count face-down cards, ids numbered in deck order.
    """
    if pair_count < 1:
        raise ValueError("pair_count must be at least 1")

    values = list(range(pair_count)) * 2
    (rng or random).shuffle(values)

    return [Card(id=i, value=value) for i, value in enumerate(values)]
