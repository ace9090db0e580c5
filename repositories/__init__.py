"""
Repositories package - Data access layer.

This package contains repository classes that handle dataset loading,
isolating the browser pipeline from where card records come from.
"""

from repositories.card_repository import (
    CardRepository,
    DatasetVariant,
    get_card_repository,
    load_dataset_file,
    make_dataset,
)

__all__ = [
    "CardRepository",
    "DatasetVariant",
    "get_card_repository",
    "load_dataset_file",
    "make_dataset",
]
