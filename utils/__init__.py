"""Utility helpers: card normalization, filtering, ordering and configuration."""
