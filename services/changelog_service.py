"""Tracks which changelog version the user has already dismissed."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from services.store_service import StoreService, get_store_service
from utils.changelog import CHANGELOG_VERSION
from utils.constants import CHANGELOG_SEEN_KEY, CHANGELOG_STORE_FILE
from utils.result import Result


class ChangelogService:
    """Best-effort persistence of the changelog-seen flag."""

    def __init__(
        self,
        store_path: Path | None = None,
        store_service: StoreService | None = None,
    ) -> None:
        self.store_path = store_path or CHANGELOG_STORE_FILE
        self.store_service = store_service or get_store_service()

    def read_seen_version(self) -> Result[str | None, str]:
        loaded = self.store_service.load_store(self.store_path)
        if loaded.is_error:
            return Result.failure(loaded.error or "unreadable store")
        value = loaded.unwrap().get(CHANGELOG_SEEN_KEY)
        return Result.success(value if isinstance(value, str) else None)

    def should_show(self, version: str = CHANGELOG_VERSION) -> bool:
        """A failed read counts as not seen."""
        seen = self.read_seen_version()
        if seen.is_error:
            logger.debug(f"Changelog flag unavailable ({seen.error}); showing changelog")
            return True
        return seen.value != version

    def mark_seen(self, version: str = CHANGELOG_VERSION) -> Result[None, str]:
        loaded = self.store_service.load_store(self.store_path)
        data = dict(loaded.unwrap_or({}))
        data[CHANGELOG_SEEN_KEY] = version
        return self.store_service.save_store(self.store_path, data)


__all__ = ["ChangelogService"]
