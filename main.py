#!/usr/bin/env python3
"""Command-line entry point that prints the filtered card grid."""

from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger

from controllers.app_controller import BrowserState, CardBrowserController, CardTile
from repositories.card_repository import CardRepository
from utils.card_categories import ALL_CATEGORIES
from utils.changelog import format_changelog
from utils.constants import ALTERNATE_DATASET_FILE, LOGS_DIR, PRIMARY_DATASET_FILE
from utils.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse Genesys card points.")
    parser.add_argument("--primary", type=Path, default=PRIMARY_DATASET_FILE, help="Primary dataset JSON")
    parser.add_argument("--alternate", type=Path, default=ALTERNATE_DATASET_FILE, help="Alternate dataset JSON")
    parser.add_argument("--alternate-dataset", action="store_true", help="Browse the alternate dataset")
    parser.add_argument("--search", default="", help="Case-insensitive name search")
    parser.add_argument("--points", default="", help='Points filter: "N" or "A-B"')
    parser.add_argument("--category", default=ALL_CATEGORIES, help="Canonical category or 'all'")
    parser.add_argument("--archetype", default="", help="Exact archetype name")
    parser.add_argument("--ascending", action="store_true", help="Lowest points first")
    parser.add_argument("--limit", type=int, default=0, help="Maximum tiles to print (0 = all)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_tile(tile: CardTile) -> str:
    points = "?" if tile.score is None else str(tile.score)
    line = f"{points:>4} pts  {tile.name}"
    if tile.clickable:
        line += f"  <{tile.link_url}>"
    return line


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(LOGS_DIR, level="DEBUG" if args.verbose else "INFO")

    repository = CardRepository.from_files(args.primary, args.alternate)
    state = BrowserState(
        search=args.search,
        points=args.points,
        category=args.category,
        archetype=args.archetype,
        sort_desc=not args.ascending,
        use_alternate_dataset=args.alternate_dataset,
    )
    controller = CardBrowserController(card_repository=repository, state=state)

    if controller.show_changelog:
        print(format_changelog())
        print()
        controller.dismiss_changelog()

    tiles = controller.tiles()
    if args.limit > 0:
        tiles = tiles[: args.limit]
    print(f"[{controller.dataset_label()}] {controller.result_summary()}")
    for tile in tiles:
        print(format_tile(tile))

    logger.info(f"Printed {len(tiles)} tiles")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
