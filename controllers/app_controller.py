"""
Card Browser Controller - Application logic for the card grid.

This controller separates filter/sort state and the recompute pipeline from
UI presentation. A view layer binds its widgets to the event methods and
renders ``tiles()`` after each call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from loguru import logger

from repositories.card_repository import CardRepository, DatasetVariant, get_card_repository
from services.changelog_service import ChangelogService
from services.search_service import CardFilters, SearchService, get_search_service
from utils.card_categories import ALL_CATEGORIES, category_options
from utils.card_data import CanonicalCard, normalize_cards
from utils.card_sort import sort_cards
from utils.changelog import CHANGELOG_VERSION


@dataclass(frozen=True)
class BrowserState:
    """Every input the pipeline depends on."""

    search: str = ""
    points: str = ""
    category: str = ALL_CATEGORIES
    archetype: str = ""
    sort_desc: bool = True
    use_alternate_dataset: bool = False

    @property
    def filters(self) -> CardFilters:
        return CardFilters(
            search=self.search,
            points=self.points,
            category=self.category,
            archetype=self.archetype,
        )


@dataclass(frozen=True)
class BrowserView:
    """Output of one pipeline run."""

    dataset: DatasetVariant
    all_cards: tuple[CanonicalCard, ...]
    visible_cards: tuple[CanonicalCard, ...]
    archetype_options: tuple[str, ...]


@dataclass(frozen=True)
class CardTile:
    key: str
    name: str
    score: int | None
    image_url: str
    link_url: str | None

    @property
    def clickable(self) -> bool:
        return self.link_url is not None

    @classmethod
    def from_card(cls, card: CanonicalCard) -> CardTile:
        return cls(
            key=card.id,
            name=card.name,
            score=card.score if card.score_known else None,
            image_url=card.image_url,
            link_url=card.link_url,
        )


def run_pipeline(
    dataset: DatasetVariant,
    state: BrowserState,
    search_service: SearchService,
) -> BrowserView:
    """Normalize, derive options, filter and sort one dataset from scratch."""
    cards = normalize_cards(dataset.records, dataset.category_order)
    return build_view(dataset, cards, state, search_service)


def build_view(
    dataset: DatasetVariant,
    cards: Sequence[CanonicalCard],
    state: BrowserState,
    search_service: SearchService,
) -> BrowserView:
    """Derive options, filter and sort already-normalized cards of ``dataset``."""
    archetypes = search_service.archetype_options(cards)
    filtered = search_service.filter_cards(cards, state.filters)
    ordered = sort_cards(
        filtered,
        descending=state.sort_desc,
        category_order=dataset.category_order,
    )
    return BrowserView(
        dataset=dataset,
        all_cards=tuple(cards),
        visible_cards=tuple(ordered),
        archetype_options=tuple(archetypes),
    )


class CardBrowserController:

    def __init__(
        self,
        card_repository: CardRepository | None = None,
        search_service: SearchService | None = None,
        changelog_service: ChangelogService | None = None,
        state: BrowserState | None = None,
    ):
        self.card_repo = card_repository or get_card_repository()
        self.search_service = search_service or get_search_service()
        self.changelog_service = changelog_service or ChangelogService()

        self.state = state or BrowserState()
        self.show_changelog = self.changelog_service.should_show(CHANGELOG_VERSION)
        self.view = self.refresh()

    # ============= Pipeline =============

    def refresh(self) -> BrowserView:
        """Re-run the full pipeline for the current state and publish the result."""
        dataset = self.card_repo.get_dataset(self.state.use_alternate_dataset)
        self.view = run_pipeline(dataset, self.state, self.search_service)
        logger.debug(
            f"Recomputed '{dataset.key}': {len(self.view.visible_cards)} of "
            f"{len(self.view.all_cards)} cards visible"
        )
        return self.view

    def _update(self, **changes) -> BrowserView:
        self.state = replace(self.state, **changes)
        return self.refresh()

    @property
    def visible_cards(self) -> tuple[CanonicalCard, ...]:
        return self.view.visible_cards

    @property
    def archetype_options(self) -> tuple[str, ...]:
        return self.view.archetype_options

    # ============= Events =============

    def set_search(self, text: str) -> BrowserView:
        return self._update(search=text or "")

    def set_points_filter(self, text: str) -> BrowserView:
        return self._update(points=text or "")

    def set_category(self, category: str) -> BrowserView:
        return self._update(category=category or ALL_CATEGORIES)

    def set_archetype(self, archetype: str) -> BrowserView:
        return self._update(archetype=archetype or "")

    def toggle_sort(self) -> BrowserView:
        return self._update(sort_desc=not self.state.sort_desc)

    def toggle_dataset(self) -> BrowserView:
        """
        Switch to the other dataset variant.

        Archetype and category selections the new dataset cannot satisfy are
        cleared so the dropdowns never point at missing options.
        """
        use_alternate = not self.state.use_alternate_dataset
        dataset = self.card_repo.get_dataset(use_alternate)
        cards = normalize_cards(dataset.records, dataset.category_order)
        archetype = self.state.archetype
        if archetype and archetype not in self.search_service.archetype_options(cards):
            logger.debug(f"Clearing archetype '{archetype}' missing from '{dataset.key}'")
            archetype = ""
        category = self.state.category
        if category != ALL_CATEGORIES and category not in dataset.category_order:
            category = ALL_CATEGORIES
        self.state = replace(
            self.state,
            use_alternate_dataset=use_alternate,
            archetype=archetype,
            category=category,
        )
        self.view = build_view(dataset, cards, self.state, self.search_service)
        logger.debug(
            f"Switched to '{dataset.key}': {len(self.view.visible_cards)} of "
            f"{len(self.view.all_cards)} cards visible"
        )
        return self.view

    def reset_filters(self) -> BrowserView:
        return self._update(search="", points="", category=ALL_CATEGORIES, archetype="")

    # ============= Presentation =============

    def tiles(self) -> list[CardTile]:
        return [CardTile.from_card(card) for card in self.view.visible_cards]

    def category_options(self) -> list[tuple[str, str]]:
        return category_options(self.view.dataset.category_order)

    def sort_button_label(self) -> str:
        return "Sort Lowest → Highest" if self.state.sort_desc else "Sort Highest → Lowest"

    def dataset_label(self) -> str:
        return self.view.dataset.label

    def result_summary(self) -> str:
        return f"Showing {len(self.view.visible_cards)} of {len(self.view.all_cards)} cards"

    # ============= Changelog =============

    def dismiss_changelog(self) -> None:
        self.show_changelog = False
        result = self.changelog_service.mark_seen(CHANGELOG_VERSION)
        if result.is_error:
            logger.warning(f"Could not remember changelog version {CHANGELOG_VERSION}: {result.error}")


_default_controller: CardBrowserController | None = None


def get_card_browser_controller() -> CardBrowserController:
    global _default_controller
    if _default_controller is None:
        _default_controller = CardBrowserController()
    return _default_controller


def reset_card_browser_controller() -> None:
    global _default_controller
    _default_controller = None
