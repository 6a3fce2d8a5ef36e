# Path: artsearch/core/stores/base.py
# Purpose: Define the storage interfaces the search pipeline reads artworks and preferences from.
# Layer: core/stores.
# Details: Backends raise freely; the pipeline wraps every call in a deadline and maps failures to UpstreamFetchError.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from artsearch.core.models.domain import CandidateArtwork, ComparableArtwork, SearchFilters, TrendingRecord


class ArtworkStore(ABC):
    """Abstract base class for pluggable artwork catalog backends."""

    name: str

    @abstractmethod
    def fetch_candidates(self, filters: Optional[SearchFilters], limit: int) -> List[CandidateArtwork]:
        """Return up to ``limit`` public artworks satisfying the structural filters."""

    @abstractmethod
    def fetch_comparable(
        self,
        medium: Optional[str],
        genre: Optional[str],
        style: Optional[str],
        limit: int,
    ) -> List[ComparableArtwork]:
        """Return priced artworks sharing at least one of medium, genre, or style."""

    @abstractmethod
    def fetch_all_public_with_image(self) -> List[CandidateArtwork]:
        """Return every public artwork that has a primary image."""

    @abstractmethod
    def fetch_recent_for_trending(self, limit: int) -> List[TrendingRecord]:
        """Return the ``limit`` most recently created available, titled artworks as trending records."""


class PreferenceStore(ABC):
    """Lookup of stored user preferences (favorite mediums, genres, ...)."""

    @abstractmethod
    def get_preferences(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Return the preference mapping for ``user_id`` or ``None`` when unknown."""
