"""Changelog entries shown once per version."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

CHANGELOG_VERSION = "1.0.0"  # bump whenever entries are added

CHANGELOG: list[dict[str, Any]] = [
    {
        "date": "2025-09-26",
        "changes": [
            "Added point range filter",
            "Added card type filter",
            "Made entire card clickable to YGOPRODeck",
        ],
    },
    {
        "date": "2025-09-20",
        "changes": [
            "Initial release with basic card grid",
            "Search cards by name",
        ],
    },
]


def format_changelog(entries: Iterable[dict[str, Any]] = CHANGELOG) -> str:
    lines = ["Changelog"]
    for entry in entries:
        lines.append("")
        lines.append(str(entry.get("date", "")))
        for change in entry.get("changes") or []:
            lines.append(f"  - {change}")
    return "\n".join(lines)


__all__ = ["CHANGELOG", "CHANGELOG_VERSION", "format_changelog"]
