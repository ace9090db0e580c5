"""
Card Repository - Data access layer for card datasets.

This module owns the raw dataset variants the browser can switch between:
- Loading dataset files from disk
- Selecting the active variant
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from utils.card_categories import DEFAULT_CATEGORY_ORDER, GENESYS_CATEGORY_ORDER
from utils.constants import (
    ALTERNATE_DATASET_FILE,
    ALTERNATE_DATASET_KEY,
    ALTERNATE_DATASET_LABEL,
    PRIMARY_DATASET_FILE,
    PRIMARY_DATASET_KEY,
    PRIMARY_DATASET_LABEL,
)


@dataclass(frozen=True)
class DatasetVariant:
    """One raw card collection plus the category order that applies to it."""

    key: str
    label: str
    category_order: tuple[str, ...] = DEFAULT_CATEGORY_ORDER
    records: tuple[Any, ...] = field(default_factory=tuple)


def make_dataset(
    key: str,
    label: str,
    records: Iterable[Any],
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> DatasetVariant:
    return DatasetVariant(
        key=key,
        label=label,
        category_order=tuple(category_order),
        records=tuple(records),
    )


def _extract_records(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    # YGOPRODeck API responses wrap cards in {"data": [...]}
    if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
        return payload["data"]
    return []


def load_dataset_file(
    path: Path,
    key: str,
    label: str,
    category_order: Sequence[str] = DEFAULT_CATEGORY_ORDER,
) -> DatasetVariant:
    """
    Load a dataset variant from a JSON file.

    Args:
        path: JSON file holding an array of card records
        key: Variant identifier
        label: Display label for the dataset toggle
        category_order: Canonical categories for this dataset

    Returns:
        The loaded variant (empty if the file is missing or unreadable)
    """
    try:
        if not path.exists():
            logger.warning(f"Dataset file not found: {path}")
            return make_dataset(key, label, [], category_order)
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid JSON in dataset {path}: {exc}")
        return make_dataset(key, label, [], category_order)
    except UnicodeDecodeError as exc:
        logger.warning(f"Dataset {path} is not UTF-8 text: {exc}")
        return make_dataset(key, label, [], category_order)
    except OSError as exc:
        logger.warning(f"Failed to read dataset {path}: {exc}")
        return make_dataset(key, label, [], category_order)

    records = _extract_records(payload)
    if not records and payload:
        logger.warning(f"Dataset {path} has no card array; treating as empty")
    logger.info(f"Loaded {len(records)} records for dataset '{key}' from {path}")
    return make_dataset(key, label, records, category_order)


class CardRepository:
    """Repository holding the primary and alternate dataset variants."""

    def __init__(
        self,
        primary: DatasetVariant | None = None,
        alternate: DatasetVariant | None = None,
    ):
        self._primary = primary or make_dataset(
            PRIMARY_DATASET_KEY, PRIMARY_DATASET_LABEL, [], GENESYS_CATEGORY_ORDER
        )
        self._alternate = alternate or make_dataset(
            ALTERNATE_DATASET_KEY, ALTERNATE_DATASET_LABEL, [], DEFAULT_CATEGORY_ORDER
        )

    @classmethod
    def from_files(
        cls,
        primary_path: Path = PRIMARY_DATASET_FILE,
        alternate_path: Path = ALTERNATE_DATASET_FILE,
    ) -> CardRepository:
        return cls(
            primary=load_dataset_file(
                primary_path, PRIMARY_DATASET_KEY, PRIMARY_DATASET_LABEL, GENESYS_CATEGORY_ORDER
            ),
            alternate=load_dataset_file(
                alternate_path, ALTERNATE_DATASET_KEY, ALTERNATE_DATASET_LABEL, DEFAULT_CATEGORY_ORDER
            ),
        )

    @property
    def primary(self) -> DatasetVariant:
        return self._primary

    @property
    def alternate(self) -> DatasetVariant:
        return self._alternate

    def get_dataset(self, use_alternate: bool = False) -> DatasetVariant:
        """Return exactly one variant; the two are never merged."""
        return self._alternate if use_alternate else self._primary


_default_repository: CardRepository | None = None


def get_card_repository() -> CardRepository:
    """Get the default card repository, loading dataset files on first use."""
    global _default_repository
    if _default_repository is None:
        _default_repository = CardRepository.from_files()
    return _default_repository


def reset_card_repository() -> None:
    global _default_repository
    _default_repository = None
