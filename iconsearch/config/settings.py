"""
Configuration Management for Icon Search

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The ranking constants live in SearchSettings so that a product decision
to retune them is a configuration change, not a code change.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "tags.json"

# Shown by the icon picker before the user types anything
DEFAULT_POPULAR_ICONS = (
    "shopping-bag,car,film,zap,heart,home,credit-card,plane,scissors,"
    "utensils,shopping-cart,briefcase,gift,book,users"
)


class CorpusSettings(BaseSettings):
    """Where the icon tag corpus comes from."""

    model_config = SettingsConfigDict(
        env_prefix="ICON_CORPUS_",
        extra="ignore"
    )

    source: Literal["file", "http"] = Field(
        default="file",
        description="Corpus provider: local JSON file or HTTP resource"
    )
    path: Path = Field(
        default=DEFAULT_CORPUS_PATH,
        description="Path to the tags JSON document (file source)"
    )
    url: str = Field(
        default="http://localhost:3000/tags.json",
        description="URL of the tags JSON document (http source)"
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="HTTP timeout for corpus retrieval"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts for corpus retrieval on transport errors"
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Path) -> Path:
        """Warn if the corpus file doesn't exist (the store degrades to empty)."""
        if not v.exists():
            import warnings
            warnings.warn(
                f"Icon corpus file not found at {v}. "
                "Searches will return no results until it exists."
            )
        return v


class SearchSettings(BaseSettings):
    """Fuzzy matching and ranking parameters."""

    model_config = SettingsConfigDict(
        env_prefix="ICON_SEARCH_",
        extra="ignore"
    )

    threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Match strictness (0 = exact only, 1 = anything matches)"
    )
    name_weight: float = Field(
        default=0.5,
        gt=0.0,
        description="Relative weight of the icon name field"
    )
    tags_weight: float = Field(
        default=0.5,
        gt=0.0,
        description="Relative weight of the tags field"
    )
    min_match_char_length: int = Field(
        default=2,
        ge=1,
        description="Shortest matched run that counts as a match"
    )
    location: int = Field(
        default=0,
        ge=0,
        description="Expected position of the match inside a field"
    )
    distance: int = Field(
        default=100,
        ge=1,
        description="How far from location a match may drift before it scores 1.0"
    )
    default_limit: int = Field(
        default=50,
        ge=0,
        description="Default maximum number of search results"
    )
    suggestion_limit: int = Field(
        default=5,
        ge=0,
        description="Default maximum number of search suggestions"
    )
    popular_icons: str = Field(
        default=DEFAULT_POPULAR_ICONS,
        description="Comma-separated icons shown for an empty picker query"
    )

    @property
    def popular_icons_list(self) -> list[str]:
        """Get popular icons as a list."""
        return [name.strip() for name in self.popular_icons.split(",") if name.strip()]


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def corpus(self) -> CorpusSettings:
        return CorpusSettings()

    @property
    def search(self) -> SearchSettings:
        return SearchSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("corpus", "search"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
