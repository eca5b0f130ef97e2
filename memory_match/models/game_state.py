"""Game state snapshot models."""

from enum import Enum

from pydantic import BaseModel

from .card import CardView


class GamePhase(str, Enum):
    """Phase of the selection state machine (derived, never stored)."""

    IDLE = "idle"  # No card pending
    ONE_SELECTED = "one_selected"  # First card of a pair revealed
    RESOLVING = "resolving"  # Mismatched pair waiting to flip back
    WON = "won"  # Every card matched


class FlipOutcome(str, Enum):
    """What a call to flip() did."""

    IGNORED = "ignored"  # Busy, already face up, or matched
    SELECTED = "selected"  # First card of a pair
    MATCHED = "matched"
    MISMATCHED = "mismatched"


class GameSnapshot(BaseModel, frozen=True):
    """Immutable view of the whole game, passed to listeners."""

    cards: tuple[CardView, ...] = ()
    score: int = 0
    elapsed_seconds: int = 0
    won: bool = False
    busy: bool = False
    pending_card_id: int | None = None
    generation: int = 0

    @property
    def phase(self) -> GamePhase:
        """Get the current state machine phase."""
        if self.won:
            return GamePhase.WON
        if self.busy:
            return GamePhase.RESOLVING
        if self.pending_card_id is not None:
            return GamePhase.ONE_SELECTED
        return GamePhase.IDLE

