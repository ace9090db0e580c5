"""Canonical card categories and the ordering used for tie-breaks."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_CATEGORY_ORDER: tuple[str, ...] = (
    "effect",
    "ritual",
    "fusion",
    "synchro",
    "xyz",
    "spell",
    "trap",
)
GENESYS_CATEGORY_ORDER: tuple[str, ...] = ("normal",) + DEFAULT_CATEGORY_ORDER

UNKNOWN_CATEGORY = "unknown"
ALL_CATEGORIES = "all"


def classify_category(label: object, order: Sequence[str] = DEFAULT_CATEGORY_ORDER) -> str:
    """
    Map a free-text type label onto a canonical category.

    The first token in ``order`` that appears anywhere in the label wins, so
    "Pendulum Effect Monster" is an effect card and "effect" is still "effect".

    Args:
        label: Raw category/type label (may be missing or not a string)
        order: Canonical tokens in priority order

    Returns:
        A token from ``order`` or ``UNKNOWN_CATEGORY``
    """
    if not isinstance(label, str):
        return UNKNOWN_CATEGORY
    lowered = label.strip().lower()
    if not lowered:
        return UNKNOWN_CATEGORY
    for token in order:
        if token in lowered:
            return token
    return UNKNOWN_CATEGORY


def category_rank(category: str, order: Sequence[str] = DEFAULT_CATEGORY_ORDER) -> int:
    """Position of ``category`` in ``order``; unknown categories rank last."""
    try:
        return list(order).index(category)
    except ValueError:
        return len(order)


def category_label(category: str) -> str:
    if category == ALL_CATEGORIES:
        return "All Types"
    return category[:1].upper() + category[1:]


def category_options(order: Sequence[str] = DEFAULT_CATEGORY_ORDER) -> list[tuple[str, str]]:
    """(value, label) pairs for a category selector, "all" first."""
    values = [ALL_CATEGORIES, *order]
    return [(value, category_label(value)) for value in values]


__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_CATEGORY_ORDER",
    "GENESYS_CATEGORY_ORDER",
    "UNKNOWN_CATEGORY",
    "category_label",
    "category_options",
    "category_rank",
    "classify_category",
]
