"""Configuration package."""

from iconsearch.config.settings import (
    CorpusSettings,
    SearchSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "CorpusSettings",
    "SearchSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
