"""Points-range parsing and the per-filter match helpers."""

from dataclasses import dataclass

from utils.card_categories import ALL_CATEGORIES
from utils.card_data import CanonicalCard


@dataclass(frozen=True)
class PointsRange:
    min: int
    max: int

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


def _parse_int(text: str) -> int | None:
    text = text.strip()
    # plain ASCII digits only: no sign, underscores or other scripts' digits
    if not (text.isascii() and text.isdigit()):
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_points_filter(text: str | None) -> PointsRange | None:
    """
    Parse "N" or "A-B" into an inclusive range.

    Malformed input is ignored rather than rejected: it yields None, which
    means no points filter at all.
    """
    if not text or not text.strip():
        return None
    parts = text.split("-")
    if len(parts) > 2:
        return None
    values = [_parse_int(part) for part in parts]
    if any(value is None for value in values):
        return None
    low, high = min(values), max(values)  # type: ignore[type-var]
    return PointsRange(low, high)


def matches_name(card: CanonicalCard, query: str) -> bool:
    query = query.strip().lower()
    if not query:
        return True
    return query in card.name.lower()


def matches_category(card: CanonicalCard, category: str) -> bool:
    if not category or category == ALL_CATEGORIES:
        return True
    return card.category == category


def matches_archetype(card: CanonicalCard, archetype: str) -> bool:
    if not archetype:
        return True
    return card.archetype is not None and card.archetype == archetype


def matches_points(card: CanonicalCard, points: PointsRange | None) -> bool:
    if points is None:
        return True
    if not card.score_known:
        return False
    return points.contains(card.score)
