"""Controllers module - Application-level controllers for coordinating business logic."""

from controllers.app_controller import (
    BrowserState,
    CardBrowserController,
    CardTile,
    get_card_browser_controller,
    reset_card_browser_controller,
)

__all__ = [
    "BrowserState",
    "CardBrowserController",
    "CardTile",
    "get_card_browser_controller",
    "reset_card_browser_controller",
]
