"""Game engine for the memory matching game."""

from __future__ import annotations

import logging
import random
import threading
from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from memory_match.config import Config
from memory_match.models.card import Card, CardView, create_deck
from memory_match.models.game_state import FlipOutcome, GameSnapshot

from .scheduler import Scheduler, ThreadingScheduler

if TYPE_CHECKING:
    from memory_match.logging import GameLogger

    from .scheduler import TimerHandle

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


class InvalidCardError(ValueError):
    """Raised when flip() is given an id that is not in the current deck."""

    def __init__(self, card_id: Any, deck_size: int):
        super().__init__(f"no card with id {card_id!r} (deck has {deck_size} cards)")
        self.card_id = card_id
        self.deck_size = deck_size


class GameEngine:
    """Main game engine.

    Owns the deck, the current selection, score and elapsed time, plus the
    periodic tick and the delayed flip-back of mismatched pairs. Every public
    method is serialized on one lock, so timer callbacks from a
    ThreadingScheduler never interleave with user input.
    """

    def __init__(
        self,
        config: Config | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine and deal the first deck.

        Args:
            config: Configuration (uses defaults if not provided)
            scheduler: Timer source (real-time threads if not provided)
            rng: Random source for shuffling (seeded from config if not provided)
            game_logger: GameLogger instance for event logging
        """
        self.config = config or Config()
        self.rules = self.config.game
        self.timing = self.config.timing
        self.scheduler = scheduler or ThreadingScheduler()
        self.rng = rng or random.Random(self.rules.seed)
        self.game_logger = game_logger

        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        self._cards: list[Card] = []
        self._pending: Card | None = None
        self._busy = False
        self._score = 0
        self._elapsed = 0
        self._generation = 0

        self._tick_timer: TimerHandle | None = None
        self._resolve_timer: TimerHandle | None = None

        with self._lock:
            self._init_game()

    def __enter__(self) -> "GameEngine":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked with a snapshot after every change."""
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def generation(self) -> int:
        """Number of decks dealt so far (1 after construction)."""
        return self._generation

    def get_cards(self) -> tuple[CardView, ...]:
        """Get a read-only copy of the deck in board order."""
        with self._lock:
            return tuple(card.view() for card in self._cards)

    def get_score(self) -> int:
        """Get the current score (never negative)."""
        with self._lock:
            return self._score

    def get_elapsed_seconds(self) -> int:
        """Get seconds counted since the deck was dealt."""
        with self._lock:
            return self._elapsed

    def is_won(self) -> bool:
        """Check if every card is matched. Stays true until restart()."""
        with self._lock:
            return self._all_matched()

    def is_busy(self) -> bool:
        """Check if a mismatched pair is waiting to flip back."""
        with self._lock:
            return self._busy

    def snapshot(self) -> GameSnapshot:
        """Get an immutable view of the whole game."""
        with self._lock:
            return GameSnapshot(
                cards=tuple(card.view() for card in self._cards),
                score=self._score,
                elapsed_seconds=self._elapsed,
                won=self._all_matched(),
                busy=self._busy,
                pending_card_id=self._pending.id if self._pending else None,
                generation=self._generation,
            )

    def flip(self, card_id: int) -> FlipOutcome:
        """Turn a card face up and apply the matching rules.

        Flipping while a mismatched pair is waiting to turn back, or flipping
        a card that is already face up or matched, does nothing.

        Args:
            card_id: Id of a card in the current deck

        Returns:
            What the flip did

        Raises:
            InvalidCardError: If card_id is not in the current deck
        """
        with self._lock:
            card = self._get_card(card_id)

            if self._busy or card.face_up or card.matched:
                logger.debug(f"Ignored flip of card {card_id}")
                return FlipOutcome.IGNORED

            card.face_up = True

            if self._pending is None:
                self._pending = card
                outcome = FlipOutcome.SELECTED
            else:
                self._busy = True
                first = self._pending
                if first.value == card.value:
                    outcome = self._resolve_match(first, card)
                else:
                    outcome = self._start_mismatch(first, card)

            logger.debug(f"Flip card {card_id} (value {card.value}): {outcome.value}")
            if self.game_logger:
                self.game_logger.log_flip(
                    self._generation,
                    card_id,
                    outcome,
                    self._score,
                    self._elapsed,
                )

            if outcome == FlipOutcome.MATCHED:
                self._check_win()

            self._notify()
            return outcome

    def tick(self) -> None:
        """Advance the elapsed-time counter by one second.

        Ignored once the game is won.
        """
        with self._lock:
            if self._all_matched():
                return
            self._elapsed += 1
            self._notify()

    def restart(self) -> None:
        """Discard the current game and deal a fresh one."""
        with self._lock:
            logger.info(f"Restarting game {self._generation}")
            if self.game_logger:
                self.game_logger.log_restart(self._generation)
            self._cancel_timers()
            self._init_game()

    def close(self) -> None:
        """Stop all timers. The engine can still be restarted afterwards."""
        with self._lock:
            self._cancel_timers()

    def _init_game(self) -> None:
        """Deal a new deck and reset every counter."""
        self._generation += 1
        self._cards = create_deck(self.rules.pair_count, self.rng)
        self._pending = None
        self._busy = False
        self._elapsed = 0
        self._score = 0

        self._tick_timer = self.scheduler.call_every(
            self.timing.tick_interval,
            partial(self._on_tick, self._generation),
        )

        logger.info(f"Dealt game {self._generation} with {len(self._cards)} cards")
        if self.game_logger:
            self.game_logger.log_game_start(self._generation, self._cards)

        self._notify()

    def _get_card(self, card_id: int) -> Card:
        if isinstance(card_id, bool) or not isinstance(card_id, int):
            raise InvalidCardError(card_id, len(self._cards))
        if not 0 <= card_id < len(self._cards):
            raise InvalidCardError(card_id, len(self._cards))
        return self._cards[card_id]

    def _resolve_match(self, first: Card, second: Card) -> FlipOutcome:
        first.matched = True
        second.matched = True
        self._score += self.rules.match_reward
        self._reset_selection()
        logger.info(f"Matched cards {first.id} and {second.id} (value {first.value})")
        return FlipOutcome.MATCHED

    def _start_mismatch(self, first: Card, second: Card) -> FlipOutcome:
        self._score = max(self._score - self.rules.mismatch_penalty, 0)
        self._resolve_timer = self.scheduler.call_later(
            self.timing.mismatch_delay,
            partial(self._resolve_mismatch, self._generation, first.id, second.id),
        )
        return FlipOutcome.MISMATCHED

    def _resolve_mismatch(self, generation: int, first_id: int, second_id: int) -> None:
        """Turn a mismatched pair back over (runs after the mismatch delay)."""
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Dropped stale flip-back from game {generation}")
                return

            self._cards[first_id].face_up = False
            self._cards[second_id].face_up = False
            self._resolve_timer = None
            self._reset_selection()

            if self.game_logger:
                self.game_logger.log_resolve(generation, [first_id, second_id])
            self._notify()

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._tick_timer is None:
                return
            self.tick()

    def _reset_selection(self) -> None:
        self._pending = None
        self._busy = False

    def _check_win(self) -> None:
        if not self._all_matched():
            return

        if self._tick_timer is not None:
            self._tick_timer.cancel()
            self._tick_timer = None

        logger.info(
            f"Game {self._generation} won with score {self._score} "
            f"in {self._elapsed}s"
        )
        if self.game_logger:
            self.game_logger.log_game_won(self._generation, self._score, self._elapsed)

    def _all_matched(self) -> bool:
        return bool(self._cards) and all(card.matched for card in self._cards)

    def _cancel_timers(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.cancel()
            self._tick_timer = None
        if self._resolve_timer is not None:
            self._resolve_timer.cancel()
            self._resolve_timer = None

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
