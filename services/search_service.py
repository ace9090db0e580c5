"""
Search Service - Business logic for card filtering.

This module composes the browser's filters into a single predicate:
- Text search on card names
- Points range
- Category selection
- Archetype selection
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from utils.card_categories import ALL_CATEGORIES
from utils.card_data import CanonicalCard
from utils.search_filters import (
    matches_archetype,
    matches_category,
    matches_name,
    matches_points,
    parse_points_filter,
)

CardPredicate = Callable[[CanonicalCard], bool]


@dataclass(frozen=True)
class CardFilters:
    """Filter inputs as the user typed/selected them."""

    search: str = ""
    points: str = ""
    category: str = ALL_CATEGORIES
    archetype: str = ""


class SearchService:
    """Service for card filtering logic."""

    # ============= Predicate Composition =============

    def build_predicates(self, filters: CardFilters) -> list[CardPredicate]:
        """
        Build one predicate per active filter.

        Inactive filters (blank search, "all" category, no archetype, empty or
        malformed points text) contribute nothing.

        Args:
            filters: Current filter inputs

        Returns:
            List of predicates; empty when no filter is active
        """
        predicates: list[CardPredicate] = []

        search = filters.search.strip()
        if search:
            predicates.append(lambda card: matches_name(card, search))

        if filters.category and filters.category != ALL_CATEGORIES:
            category = filters.category
            predicates.append(lambda card: matches_category(card, category))

        if filters.archetype:
            archetype = filters.archetype
            predicates.append(lambda card: matches_archetype(card, archetype))

        points = parse_points_filter(filters.points)
        if points is not None:
            predicates.append(lambda card: matches_points(card, points))
        elif filters.points.strip():
            logger.debug(f"Ignoring malformed points filter: {filters.points!r}")

        return predicates

    def build_predicate(self, filters: CardFilters) -> CardPredicate:
        """Conjunction of every active filter."""
        predicates = self.build_predicates(filters)

        def predicate(card: CanonicalCard) -> bool:
            return all(check(card) for check in predicates)

        return predicate

    def filter_cards(
        self,
        cards: Iterable[CanonicalCard],
        filters: CardFilters,
    ) -> list[CanonicalCard]:
        """
        Filter cards by all active criteria, preserving input order.

        Args:
            cards: Normalized cards of the active dataset
            filters: Current filter inputs

        Returns:
            Filtered list of cards
        """
        predicate = self.build_predicate(filters)
        return [card for card in cards if predicate(card)]

    # ============= Filter Options =============

    def archetype_options(self, cards: Iterable[CanonicalCard]) -> list[str]:
        """Sorted distinct archetypes present in ``cards``."""
        return sorted({card.archetype for card in cards if card.archetype})


# Global instance for backward compatibility
_default_service: SearchService | None = None


def get_search_service() -> SearchService:
    """Get the default search service instance."""
    global _default_service
    if _default_service is None:
        _default_service = SearchService()
    return _default_service


def reset_search_service() -> None:
    global _default_service
    _default_service = None
