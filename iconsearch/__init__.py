"""
Icon Search - Source Package

Fuzzy, relevance-ranked icon lookup for the personal finance tracker.
Categories and payment methods pick their icon through this engine.

DESIGN PRINCIPLES:
1. Exact and prefix matches always beat fuzzy ones
2. A broken corpus means "no results", never a crash
3. Every failure is logged even when it is not raised
4. The corpus source is swappable
"""

from iconsearch.orchestrator import (
    IconSearchService,
    create_corpus_provider,
    create_icon_search_service,
)

__version__ = "1.0.0"
__author__ = "Personal Finance Tracker Team"

__all__ = [
    "IconSearchService",
    "create_corpus_provider",
    "create_icon_search_service",
]
