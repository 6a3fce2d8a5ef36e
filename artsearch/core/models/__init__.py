# Path: artsearch/core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across analysis, ranking, and search layers.

from .domain import (
    ArtistProfile,
    BudgetRange,
    CandidateArtwork,
    ComparableArtwork,
    DemandLevel,
    MarketContext,
    PriceCompetitiveness,
    SearchContext,
    SearchFilters,
    SearchIntent,
    SemanticQuery,
    SemanticSearchResult,
    TrendingRecord,
)

__all__ = [
    "ArtistProfile",
    "BudgetRange",
    "CandidateArtwork",
    "ComparableArtwork",
    "DemandLevel",
    "MarketContext",
    "PriceCompetitiveness",
    "SearchContext",
    "SearchFilters",
    "SearchIntent",
    "SemanticQuery",
    "SemanticSearchResult",
    "TrendingRecord",
]
