"""Utility service for simple JSON-backed key/value stores."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from utils.result import Result


class StoreService:
    """Service that reads and writes lightweight JSON stores."""

    def load_store(self, path: Path) -> Result[dict[str, Any], str]:
        """
        Load JSON data from the given path.

        Args:
            path: Path to the JSON store

        Returns:
            Result holding the payload; a missing file is an empty store,
            unreadable or invalid content is a failure
        """
        try:
            if not path.exists():
                return Result.success({})
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            logger.warning(f"Invalid JSON at {path}; ignoring store")
            return Result.failure(f"invalid JSON: {exc}")
        except UnicodeDecodeError as exc:
            logger.warning(f"Store at {path} is not UTF-8 text; ignoring store")
            return Result.failure(f"undecodable store: {exc}")
        except OSError as exc:
            logger.warning(f"Failed to read {path}: {exc}")
            return Result.failure(str(exc))
        if not isinstance(payload, dict):
            logger.warning(f"Store at {path} is not a JSON object; ignoring store")
            return Result.failure("store is not a JSON object")
        return Result.success(payload)

    def save_store(self, path: Path, data: dict[str, Any]) -> Result[None, str]:
        """
        Persist JSON data to the given path.

        Args:
            path: Path to write
            data: Dictionary payload
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError) as exc:
            logger.warning(f"Failed to write {path}: {exc}")
            return Result.failure(str(exc))
        return Result.success(None)


_default_store_service: StoreService | None = None


def get_store_service() -> StoreService:
    """Return a shared StoreService instance."""
    global _default_store_service
    if _default_store_service is None:
        _default_store_service = StoreService()
    return _default_store_service


def reset_store_service() -> None:
    global _default_store_service
    _default_store_service = None
