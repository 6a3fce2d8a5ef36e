# Path: artsearch/core/search/__init__.py
# Purpose: Package initializer for search strategies and pipeline orchestration.
# Layer: core/search.
# Details: Exposes strategy interfaces, suggestion/trending helpers, and the main search pipeline entrypoint.

from .strategies import (
    ColorSearch,
    ImageSearch,
    MoodSearch,
    SearchStrategy,
    StyleSearch,
    TextSearch,
    default_strategies,
)
from .suggestions import build_suggestions
from .trending import TrendingAnalyzer
from .pipeline import SearchPipeline

__all__ = [
    "SearchPipeline",
    "SearchStrategy",
    "TextSearch",
    "ImageSearch",
    "MoodSearch",
    "ColorSearch",
    "StyleSearch",
    "TrendingAnalyzer",
    "build_suggestions",
    "default_strategies",
]
