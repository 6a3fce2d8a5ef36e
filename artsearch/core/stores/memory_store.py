# Path: artsearch/core/stores/memory_store.py
# Purpose: Provide in-memory artwork and preference stores.
# Layer: core/stores.
# Details: Implements the store interfaces over plain dicts with JSON save/load for demos and tests.

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from artsearch.core.models.domain import (
    CandidateArtwork,
    ComparableArtwork,
    SearchFilters,
    TrendingRecord,
)

from .base import ArtworkStore, PreferenceStore

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _strings(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value.lower()]
    if isinstance(value, (list, tuple, set)):
        return [item.lower() for item in value if isinstance(item, str) and item]
    return []


class InMemoryArtworkStore(ArtworkStore):
    """Artwork catalog held in insertion order.

    Structural filters are applied permissively: a filter field with a value of
    the wrong type is skipped instead of rejecting the request.
    """

    def __init__(self, artworks: Optional[Iterable[CandidateArtwork]] = None, name: str = "memory") -> None:
        self.name = name
        self._artworks: Dict[str, CandidateArtwork] = {}
        for artwork in artworks or []:
            self.add(artwork)

    def __len__(self) -> int:
        return len(self._artworks)

    def add(self, artwork: Union[CandidateArtwork, Mapping[str, Any]]) -> CandidateArtwork:
        if not isinstance(artwork, CandidateArtwork):
            artwork = CandidateArtwork.from_record(artwork)
        if artwork.id in self._artworks:
            raise ValueError(f"Artwork {artwork.id!r} already exists.")
        self._artworks[artwork.id] = artwork
        return artwork

    def update(self, artwork: CandidateArtwork) -> None:
        if artwork.id not in self._artworks:
            raise KeyError(artwork.id)
        self._artworks[artwork.id] = artwork

    def remove(self, artwork_id: str) -> None:
        self._artworks.pop(artwork_id, None)

    def get(self, artwork_id: str) -> Optional[CandidateArtwork]:
        return self._artworks.get(artwork_id)

    # ---------------------- ArtworkStore ----------------------
    def fetch_candidates(self, filters: Optional[SearchFilters], limit: int) -> List[CandidateArtwork]:
        filters = filters or SearchFilters()
        results: List[CandidateArtwork] = []
        for artwork in self._artworks.values():
            if not artwork.is_public or not self._matches(artwork, filters):
                continue
            results.append(artwork)
            if len(results) >= limit:
                break
        return results

    def fetch_comparable(
        self,
        medium: Optional[str],
        genre: Optional[str],
        style: Optional[str],
        limit: int,
    ) -> List[ComparableArtwork]:
        wanted = [(field, value) for field, value in (("medium", medium), ("genre", genre), ("style", style)) if value]
        if not wanted:
            return []
        comparables: List[ComparableArtwork] = []
        for artwork in self._artworks.values():
            if artwork.status != "available" or artwork.price is None:
                continue
            if not any(getattr(artwork, field) == value for field, value in wanted):
                continue
            comparables.append(
                ComparableArtwork(
                    price=artwork.price,
                    medium=artwork.medium,
                    genre=artwork.genre,
                    style=artwork.style,
                    year_created=artwork.year_created,
                )
            )
            if len(comparables) >= limit:
                break
        return comparables

    def fetch_all_public_with_image(self) -> List[CandidateArtwork]:
        return [artwork for artwork in self._artworks.values() if artwork.is_public and artwork.primary_image_url]

    def fetch_recent_for_trending(self, limit: int) -> List[TrendingRecord]:
        recent = [artwork for artwork in self._artworks.values() if artwork.status == "available" and artwork.title]
        recent.sort(key=lambda artwork: artwork.created_at or _EPOCH, reverse=True)
        return [
            TrendingRecord(
                title=artwork.title,
                description=artwork.description,
                genre=artwork.genre,
                medium=artwork.medium,
                subject=artwork.subject,
                created_at=artwork.created_at,
                views_count=artwork.views_count,
                likes_count=artwork.likes_count,
            )
            for artwork in recent[:limit]
        ]

    # ---------------------- filtering ----------------------
    @staticmethod
    def _matches(artwork: CandidateArtwork, filters: SearchFilters) -> bool:
        price_min = _number(filters.price_min)
        price_max = _number(filters.price_max)
        if price_min is not None and (artwork.price is None or artwork.price < price_min):
            return False
        if price_max is not None and (artwork.price is None or artwork.price > price_max):
            return False

        year_from = _number(filters.year_from)
        year_to = _number(filters.year_to)
        if year_from is not None and (artwork.year_created is None or artwork.year_created < year_from):
            return False
        if year_to is not None and (artwork.year_created is None or artwork.year_created > year_to):
            return False

        size_min = _number(filters.size_min)
        size_max = _number(filters.size_max)
        if size_min is not None or size_max is not None:
            if artwork.width is None or artwork.height is None:
                return False
            area = artwork.width * artwork.height
            if size_min is not None and area < size_min:
                return False
            if size_max is not None and area > size_max:
                return False

        for wanted, actual in (
            (_strings(filters.medium), artwork.medium),
            (_strings(filters.genre), artwork.genre),
            (_strings(filters.artist), artwork.artist_name),
        ):
            if wanted and (actual or "").lower() not in wanted:
                return False

        if isinstance(filters.location, str) and filters.location:
            if filters.location.lower() not in (artwork.artist.location or "").lower():
                return False

        if isinstance(filters.availability, bool) and filters.availability:
            if not artwork.is_for_sale or artwork.status != "available":
                return False
        return True

    # ---------------------- persistence ----------------------
    def save(self, path: str) -> None:
        """Persist the catalog as a JSON list of records."""

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps([artwork.to_record() for artwork in self._artworks.values()], indent=2))

    def load(self, path: str) -> None:
        """Replace the catalog with records previously saved by :meth:`save`."""

        target = Path(path)
        if not target.exists():
            raise FileNotFoundError(f"Missing catalog file {path}.")
        records = json.loads(target.read_text())
        if not isinstance(records, list):
            raise ValueError(f"Catalog {path} must contain a JSON list of artworks.")
        self._artworks = {}
        for record in records:
            self.add(record)
        logger.info("Loaded %d artworks from %s", len(self._artworks), path)

    @classmethod
    def from_json(cls, path: str) -> "InMemoryArtworkStore":
        store = cls()
        store.load(path)
        return store


class InMemoryPreferenceStore(PreferenceStore):
    """Preferences keyed by user id."""

    def __init__(self, preferences: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self._preferences: Dict[str, Dict[str, Any]] = dict(preferences or {})

    def set_preferences(self, user_id: str, preferences: Dict[str, Any]) -> None:
        self._preferences[user_id] = dict(preferences)

    def get_preferences(self, user_id: str) -> Optional[Dict[str, Any]]:
        preferences = self._preferences.get(user_id)
        return dict(preferences) if preferences is not None else None
