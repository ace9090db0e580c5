"""Normalization of raw card records from every dataset generation."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from utils.card_categories import DEFAULT_CATEGORY_ORDER, classify_category
from utils.constants import PLACEHOLDER_IMAGE_URL

# Key aliases across dataset generations, checked in order.
ID_KEYS = ("id", "card_id", "passcode")
NAME_KEYS = ("name", "card_name")
CATEGORY_KEYS = ("frameType", "frame_type", "card_type", "type", "category")
SCORE_KEYS = ("genesys_points", "points", "score")
ARCHETYPE_KEYS = ("archetype",)
IMAGE_KEYS = ("image_url", "image", "imageUrl")
LINK_KEYS = ("ygoprodeck_url", "url", "link", "linkUrl")
NESTED_KEYS = ("metadata", "misc_info")


@dataclass(frozen=True)
class CanonicalCard:
    """One card record projected into the shape the browser works with."""

    id: str
    name: str
    category: str
    score: int = 0
    score_known: bool = False
    archetype: str | None = None
    image_url: str = PLACEHOLDER_IMAGE_URL
    link_url: str | None = None
    raw_category: str = ""


def _nested(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    for key in NESTED_KEYS:
        value = raw.get(key)
        if isinstance(value, Mapping):
            return value
        # YGOPRODeck ships misc_info as a single-element list
        if isinstance(value, list) and value and isinstance(value[0], Mapping):
            return value[0]
    return {}


def _lookup(raw: Mapping[str, Any], nested: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for source in (raw, nested):
        for key in keys:
            value = source.get(key)
            if value is not None and value != "":
                return value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return str(value)
        except ValueError:
            # ints past the interpreter's str conversion digit limit
            return ""
    return ""


def parse_score(value: Any) -> int | None:
    """Coerce a raw points value to an int, or None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def _image_url(raw: Mapping[str, Any], nested: Mapping[str, Any]) -> str:
    images = raw.get("card_images")
    if isinstance(images, list) and images and isinstance(images[0], Mapping):
        url = _text(images[0].get("image_url"))
        if url:
            return url
    return _text(_lookup(raw, nested, IMAGE_KEYS)) or PLACEHOLDER_IMAGE_URL


def normalize_card(
    raw: Any,
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> CanonicalCard:
    """
    Build a CanonicalCard from any of the known raw record shapes.

    Missing or malformed fields fall back to defaults; this never raises for
    sparse input. Anything that is not a mapping is treated as an empty record.

    Args:
        raw: Raw record from the active dataset
        category_order: Canonical categories for the active dataset

    Returns:
        The normalized card
    """
    if not isinstance(raw, Mapping):
        raw = {}
    nested = _nested(raw)

    name = _text(_lookup(raw, nested, NAME_KEYS))
    card_id = _text(_lookup(raw, nested, ID_KEYS)) or name
    raw_category = _text(_lookup(raw, nested, CATEGORY_KEYS))
    score = parse_score(_lookup(raw, nested, SCORE_KEYS))

    return CanonicalCard(
        id=card_id,
        name=name,
        category=classify_category(raw_category, category_order),
        score=score if score is not None else 0,
        score_known=score is not None,
        archetype=_text(_lookup(raw, nested, ARCHETYPE_KEYS)) or None,
        image_url=_image_url(raw, nested),
        link_url=_text(_lookup(raw, nested, LINK_KEYS)) or None,
        raw_category=raw_category,
    )


def normalize_cards(
    records: Iterable[Any],
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> list[CanonicalCard]:
    return [normalize_card(record, category_order) for record in records]


__all__ = ["CanonicalCard", "normalize_card", "normalize_cards", "parse_score"]
