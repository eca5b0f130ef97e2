"""Shared fixtures for game tests."""

import random
from collections import defaultdict

import pytest

from memory_match.config import Config
from memory_match.game.engine import GameEngine
from memory_match.game.scheduler import ManualScheduler
from memory_match.models.card import CardView


def find_pair(cards: tuple[CardView, ...]) -> tuple[int, int]:
    """Get ids of two unmatched cards sharing a value."""
    by_value: dict[int, list[int]] = defaultdict(list)
    for card in cards:
        if not card.matched:
            by_value[card.value].append(card.id)
    for ids in by_value.values():
        if len(ids) == 2:
            return ids[0], ids[1]
    raise AssertionError("no unmatched pair left")


def find_mismatch(cards: tuple[CardView, ...]) -> tuple[int, int]:
    """Get ids of two unmatched cards with different values."""
    unmatched = [c for c in cards if not c.matched]
    first = unmatched[0]
    for card in unmatched[1:]:
        if card.value != first.value:
            return first.id, card.id
    raise AssertionError("no mismatching cards left")


def pairs_by_value(cards: tuple[CardView, ...]) -> list[tuple[int, int]]:
    """Get id pairs for every value, in value order."""
    by_value: dict[int, list[int]] = defaultdict(list)
    for card in cards:
        by_value[card.value].append(card.id)
    return [(ids[0], ids[1]) for _, ids in sorted(by_value.items())]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(scheduler):
    game = GameEngine(Config(), scheduler=scheduler, rng=random.Random(1234))
    yield game
    game.close()
