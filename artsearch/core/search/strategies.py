# Path: artsearch/core/search/strategies.py
# Purpose: Define search strategies that turn user input into a SemanticQuery.
# Layer: core/search.
# Details: Text-like strategies template the input and reuse the query analyzer; image search goes through visual features.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Set

from artsearch.core.analysis.query_analyzer import QueryAnalyzer
from artsearch.core.models.domain import SemanticQuery
from artsearch.core.visual.extractor import VisualFeatureExtractor


class SearchStrategy(ABC):
    """Interface for building a SemanticQuery from one kind of user input."""

    id: str
    description: str
    required_modalities: Set[str]

    def query_text(self, value: Any) -> str:
        """Text form of ``value`` used for cache keys and logging."""

        return "" if value is None else str(value)

    @abstractmethod
    def build_query(
        self, analyzer: QueryAnalyzer, extractor: VisualFeatureExtractor, value: Any
    ) -> Optional[SemanticQuery]:
        """Return the semantic query for ``value`` or ``None`` when nothing can be derived."""


class TextSearch(SearchStrategy):
    """Strategy that analyzes free text as typed."""

    id = "text"
    description = "Analyze the raw query text."
    required_modalities: Set[str] = {"text"}
    template = "{}"

    def query_text(self, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError(f"{type(self).__name__} requires a text input.")
        return self.template.format(value.strip()) if value.strip() else value.strip()

    def build_query(
        self, analyzer: QueryAnalyzer, extractor: VisualFeatureExtractor, value: Any
    ) -> Optional[SemanticQuery]:
        return analyzer.analyze(self.query_text(value))


class MoodSearch(TextSearch):
    id = "mood"
    description = "Search for artwork that evokes a mood."
    template = "artwork that feels {}"


class ColorSearch(TextSearch):
    id = "color"
    description = "Search for artwork dominated by a color."
    template = "artwork with {} colors"


class StyleSearch(TextSearch):
    id = "style"
    description = "Search for artwork in a named style."
    template = "{} style artwork"


class ImageSearch(SearchStrategy):
    """Strategy that derives the query vocabulary from an image."""

    id = "image"
    description = "Describe an image with visual features and match their vocabulary."
    required_modalities: Set[str] = {"image"}

    def build_query(
        self, analyzer: QueryAnalyzer, extractor: VisualFeatureExtractor, value: Any
    ) -> Optional[SemanticQuery]:
        if value is None:
            raise ValueError("ImageSearch requires an image input.")
        features = extractor.extract(value)
        return features.to_semantic_query() if features is not None else None


def default_strategies():
    return {
        strategy.id: strategy
        for strategy in (TextSearch(), ImageSearch(), MoodSearch(), ColorSearch(), StyleSearch())
    }
