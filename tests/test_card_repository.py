"""Tests for CardRepository dataset loading and selection."""

import json
from pathlib import Path

from repositories.card_repository import (
    CardRepository,
    get_card_repository,
    load_dataset_file,
    make_dataset,
)
from utils.card_categories import DEFAULT_CATEGORY_ORDER, GENESYS_CATEGORY_ORDER


def test_load_dataset_file_reads_array(tmp_path: Path):
    """A JSON array becomes the dataset records."""
    path = tmp_path / "cards.json"
    path.write_text(json.dumps([{"name": "A"}, {"name": "B"}]), encoding="utf-8")

    dataset = load_dataset_file(path, "genesys", "Genesys", GENESYS_CATEGORY_ORDER)

    assert dataset.key == "genesys"
    assert dataset.category_order == GENESYS_CATEGORY_ORDER
    assert dataset.records == ({"name": "A"}, {"name": "B"})


def test_load_dataset_file_reads_data_wrapper(tmp_path: Path):
    """An API-style {"data": [...]} payload is unwrapped."""
    path = tmp_path / "cards.json"
    path.write_text(json.dumps({"data": [{"name": "A"}]}), encoding="utf-8")

    dataset = load_dataset_file(path, "classic", "Classic")

    assert dataset.records == ({"name": "A"},)


def test_load_dataset_file_missing_is_empty(tmp_path: Path):
    """A missing dataset file yields an empty variant."""
    dataset = load_dataset_file(tmp_path / "missing.json", "classic", "Classic")

    assert dataset.records == ()


def test_load_dataset_file_invalid_json_is_empty(tmp_path: Path):
    """Corrupt dataset files yield an empty variant."""
    path = tmp_path / "cards.json"
    path.write_text("[{", encoding="utf-8")

    assert load_dataset_file(path, "classic", "Classic").records == ()


def test_get_dataset_is_exclusive():
    """The toggle picks exactly one variant."""
    primary = make_dataset("genesys", "Genesys", [{"name": "P"}], GENESYS_CATEGORY_ORDER)
    alternate = make_dataset("classic", "Classic", [{"name": "A"}], DEFAULT_CATEGORY_ORDER)
    repo = CardRepository(primary=primary, alternate=alternate)

    assert repo.get_dataset(False) is primary
    assert repo.get_dataset(True) is alternate


def test_empty_variant_is_kept():
    """An explicitly empty variant is not replaced by the default."""
    primary = make_dataset("custom", "Custom", [])
    repo = CardRepository(primary=primary)

    assert repo.primary.key == "custom"
    assert repo.alternate.category_order == DEFAULT_CATEGORY_ORDER


def test_from_files(tmp_path: Path):
    """from_files loads both variants with their category orders."""
    primary_path = tmp_path / "genesys.json"
    alternate_path = tmp_path / "classic.json"
    primary_path.write_text(json.dumps([{"name": "P"}]), encoding="utf-8")
    alternate_path.write_text(json.dumps([{"name": "A"}, {"name": "B"}]), encoding="utf-8")

    repo = CardRepository.from_files(primary_path, alternate_path)

    assert len(repo.primary.records) == 1
    assert repo.primary.category_order == GENESYS_CATEGORY_ORDER
    assert len(repo.alternate.records) == 2


def test_get_card_repository_returns_singleton(monkeypatch, tmp_path: Path):
    """get_card_repository should return the same instance across calls."""
    monkeypatch.setattr(
        CardRepository,
        "from_files",
        classmethod(lambda cls: cls()),
    )

    assert get_card_repository() is get_card_repository()


def test_load_dataset_file_undecodable_is_empty(tmp_path: Path):
    """Dataset files that are not UTF-8 text yield an empty variant."""
    path = tmp_path / "cards.json"
    path.write_bytes(b"\xff\xfe[]")

    dataset = load_dataset_file(path, "classic", "Classic")

    assert dataset.records == ()
    assert dataset.key == "classic"


def test_from_files_survives_undecodable_dataset(tmp_path: Path):
    """One broken dataset file does not stop the other from loading."""
    primary_path = tmp_path / "genesys.json"
    alternate_path = tmp_path / "classic.json"
    primary_path.write_bytes(b"\xff\xfe\x00")
    alternate_path.write_text(json.dumps([{"name": "A"}]), encoding="utf-8")

    repo = CardRepository.from_files(primary_path, alternate_path)

    assert repo.primary.records == ()
    assert len(repo.alternate.records) == 1
