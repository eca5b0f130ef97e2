"""Formatters for board and log output."""

from typing import Sequence

from memory_match.models.card import Card, CardView

# Cell shown for a face-down card
HIDDEN = "##"

AnyCard = Card | CardView


def format_card(card: AnyCard) -> str:
    """Format a single card as a board cell.

    Args:
        card: Card to format.

    Returns:
        "##" if face down, the value if face up, the value in brackets
        if matched (e.g., "[3]").
    """
    if card.matched:
        return f"[{card.value}]"
    if card.face_up:
        return str(card.value)
    return HIDDEN


def format_values(cards: Sequence[AnyCard]) -> list[int]:
    """Get card values in deck order (for the event log)."""
    return [c.value for c in cards]


def format_board(cards: Sequence[AnyCard], columns: int) -> str:
    """Format cards as a grid with card ids beside each cell.

    Args:
        cards: Cards in board order.
        columns: Cards per row.

    Returns:
        Multi-line string, one board row per line.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")

    id_width = len(str(max(len(cards) - 1, 0)))
    lines = []
    for start in range(0, len(cards), columns):
        row = cards[start:start + columns]
        cells = [f"{c.id:>{id_width}}:{format_card(c):>4}" for c in row]
        lines.append("  ".join(cells))
    return "\n".join(lines)
