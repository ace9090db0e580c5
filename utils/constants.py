"""Constants file."""

import os
from pathlib import Path

APP_NAME = "Genesys Card Browser"


def _default_base_dir() -> Path:
    """Return the writable base directory for config/data/logging."""
    override = os.getenv("CARD_BROWSER_HOME")
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent


PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/150x210?text=No+Image"
CHANGELOG_SEEN_KEY = "changelog_seen_version"

PRIMARY_DATASET_KEY = "genesys"
PRIMARY_DATASET_LABEL = "Genesys"
ALTERNATE_DATASET_KEY = "classic"
ALTERNATE_DATASET_LABEL = "Classic"

BASE_DATA_DIR = _default_base_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"
DATA_DIR = BASE_DATA_DIR / "data"
LOGS_DIR = BASE_DATA_DIR / "logs"


def ensure_base_dirs() -> None:
    """Ensure base config/data/log directories exist without importing side effects."""
    BASE_DATA_DIR.mkdir(parents=True, exist_ok=True)
    for path in (CONFIG_DIR, DATA_DIR, LOGS_DIR):
        path.mkdir(parents=True, exist_ok=True)


CHANGELOG_STORE_FILE = CONFIG_DIR / "changelog.json"
PRIMARY_DATASET_FILE = DATA_DIR / "genesys_merged.json"
ALTERNATE_DATASET_FILE = DATA_DIR / "cards_classic.json"

__all__ = [
    "APP_NAME",
    "PLACEHOLDER_IMAGE_URL",
    "CHANGELOG_SEEN_KEY",
    "PRIMARY_DATASET_KEY",
    "PRIMARY_DATASET_LABEL",
    "ALTERNATE_DATASET_KEY",
    "ALTERNATE_DATASET_LABEL",
    "BASE_DATA_DIR",
    "CONFIG_DIR",
    "DATA_DIR",
    "LOGS_DIR",
    "ensure_base_dirs",
    "CHANGELOG_STORE_FILE",
    "PRIMARY_DATASET_FILE",
    "ALTERNATE_DATASET_FILE",
]
