"""Tests for SearchService filter composition."""

import itertools

from services.search_service import CardFilters, SearchService, get_search_service
from utils.card_data import CanonicalCard


def create_card(name="Test Card", category="effect", score=10, score_known=True, archetype=None):
    """Helper to create normalized card data."""
    return CanonicalCard(
        id=name,
        name=name,
        category=category,
        score=score,
        score_known=score_known,
        archetype=archetype,
    )


def sample_cards():
    return [
        create_card("Sky Striker Ace - Raye", "effect", 60, archetype="Sky Striker"),
        create_card("Sky Striker Mobilize - Engage!", "spell", 30, archetype="Sky Striker"),
        create_card("Raigeki", "spell", 50),
        create_card("Infinite Impermanence", "trap", 20),
        create_card("Mystery Card", "unknown", 0, score_known=False, archetype="Mystery"),
    ]


def names(cards):
    return [card.name for card in cards]


def test_no_filters_returns_everything():
    """With nothing active, the predicate list is empty and all cards pass."""
    service = SearchService()
    cards = sample_cards()

    assert service.build_predicates(CardFilters()) == []
    assert service.filter_cards(cards, CardFilters()) == cards


def test_filter_by_search_text():
    """Search text matches names case-insensitively."""
    service = SearchService()

    filtered = service.filter_cards(sample_cards(), CardFilters(search="  striker "))

    assert names(filtered) == ["Sky Striker Ace - Raye", "Sky Striker Mobilize - Engage!"]


def test_filter_by_category():
    """A concrete category restricts to exact matches."""
    service = SearchService()

    filtered = service.filter_cards(sample_cards(), CardFilters(category="spell"))

    assert names(filtered) == ["Sky Striker Mobilize - Engage!", "Raigeki"]


def test_filter_by_archetype_skips_cards_without_one():
    """Cards without an archetype never match an archetype filter."""
    service = SearchService()

    filtered = service.filter_cards(sample_cards(), CardFilters(archetype="Sky Striker"))

    assert names(filtered) == ["Sky Striker Ace - Raye", "Sky Striker Mobilize - Engage!"]


def test_filter_by_points_range_excludes_unknown_scores():
    """The points range is inclusive and drops cards without a score."""
    service = SearchService()

    filtered = service.filter_cards(sample_cards(), CardFilters(points="0-50"))

    assert names(filtered) == ["Sky Striker Mobilize - Engage!", "Raigeki", "Infinite Impermanence"]


def test_malformed_points_filter_is_ignored():
    """Malformed points text applies no filter instead of hiding everything."""
    service = SearchService()
    cards = sample_cards()

    assert service.filter_cards(cards, CardFilters(points="lots")) == cards
    assert service.build_predicates(CardFilters(points="1-2-3")) == []


def test_filters_combine_with_and():
    """Every active filter must hold."""
    service = SearchService()

    filtered = service.filter_cards(
        sample_cards(),
        CardFilters(search="sky", category="spell", points="20-40", archetype="Sky Striker"),
    )

    assert names(filtered) == ["Sky Striker Mobilize - Engage!"]


def test_filters_commute():
    """Applying the filters one by one in any order gives the same set."""
    service = SearchService()
    cards = sample_cards()
    single_filters = [
        CardFilters(search="s"),
        CardFilters(category="spell"),
        CardFilters(points="25-60"),
        CardFilters(archetype="Sky Striker"),
    ]
    combined = {card.id for card in service.filter_cards(
        cards, CardFilters(search="s", category="spell", points="25-60", archetype="Sky Striker")
    )}

    for ordering in itertools.permutations(single_filters):
        result = cards
        for filters in ordering:
            result = service.filter_cards(result, filters)
        assert {card.id for card in result} == combined


def test_archetype_options_sorted_distinct_non_empty():
    """Archetype options are the sorted distinct values, ignoring missing ones."""
    service = SearchService()

    options = service.archetype_options(sample_cards())

    assert options == ["Mystery", "Sky Striker"]


def test_get_search_service_returns_singleton():
    """get_search_service should return the same instance across calls."""
    assert get_search_service() is get_search_service()
