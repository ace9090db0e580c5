"""Composite ordering for the card grid: points first, then category rank."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from utils.card_categories import DEFAULT_CATEGORY_ORDER, category_rank
from utils.card_data import CanonicalCard


def compare_cards(
    a: CanonicalCard,
    b: CanonicalCard,
    *,
    descending: bool = True,
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> int:
    """
    Three-way comparison of two cards.

    The direction flag only flips the points comparison; the category
    tie-break is always ascending.
    """
    points_diff = b.score - a.score if descending else a.score - b.score
    if points_diff:
        return points_diff
    return category_rank(a.category, category_order) - category_rank(b.category, category_order)


def card_sort_key(
    card: CanonicalCard,
    *,
    descending: bool = True,
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> tuple[int, int]:
    score = -card.score if descending else card.score
    return score, category_rank(card.category, category_order)


def sort_cards(
    cards: Iterable[CanonicalCard],
    *,
    descending: bool = True,
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> list[CanonicalCard]:
    """Return a new list in grid order; equal keys keep their input order."""
    return sorted(
        cards,
        key=lambda card: card_sort_key(card, descending=descending, category_order=category_order),
    )


__all__ = ["card_sort_key", "compare_cards", "sort_cards"]
