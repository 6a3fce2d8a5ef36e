# Path: artsearch/config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes search thresholds, cache TTL, image analysis parameters, and logging setup.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class SearchSettings(BaseModel):
    """Settings controlling candidate fetching, ranking thresholds, and caching."""

    cache_ttl_seconds: float = Field(default=300.0, gt=0, description="Lifetime of a cached search result set.")
    default_limit: int = Field(default=50, ge=1, description="Number of results returned when no limit is given.")
    candidate_multiplier: int = Field(default=2, ge=1, description="Candidates fetched per requested result.")
    relevance_threshold: float = Field(default=0.1, ge=0, le=1, description="Results at or below this score are dropped.")
    visual_threshold: float = Field(default=0.3, ge=0, le=1, description="Minimum visual similarity for image search.")
    similar_limit: int = Field(default=5, ge=0, description="Maximum similar artworks attached to a result.")
    comparable_limit: int = Field(default=50, ge=1, description="Rows fetched for the price comparable set.")
    trending_fetch_limit: int = Field(default=500, ge=1, description="Recent artworks analysed for trending terms.")
    trending_term_limit: int = Field(default=20, ge=1, description="Trending terms kept after ranking.")
    fetch_timeout_seconds: float = Field(default=10.0, gt=0, description="Deadline applied to every store fetch.")
    raise_on_upstream_error: bool = Field(
        default=False,
        description="Re-raise store failures instead of returning an empty result list.",
    )


class VisualSettings(BaseModel):
    """Settings for pixel-level feature extraction."""

    sample_step: int = Field(default=10, ge=1, description="Pixel stride used when counting dominant colors.")
    palette_size: int = Field(default=5, ge=1, description="Number of dominant colors reported.")
    symmetry_tolerance: float = Field(default=30.0, ge=0, description="Brightness delta for a mirrored pair to match.")
    edge_threshold: float = Field(default=50.0, ge=0, description="Gradient magnitude counted as an edge.")
    max_side: int = Field(default=256, ge=8, description="Images are thumbnailed to this size before analysis.")
    download_timeout: float = Field(default=10.0, gt=0, description="Timeout in seconds for fetching image URLs.")


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    catalog_path: Optional[Path] = Field(default=None, description="JSON catalog loaded into the in-memory store.")
    search: SearchSettings = Field(default_factory=SearchSettings)
    visual: VisualSettings = Field(default_factory=VisualSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "AppSettings":
        """Instantiate settings, applying ``ARTSEARCH_*`` environment overrides when present.

        Nested values use a double underscore, e.g. ``ARTSEARCH_SEARCH__CACHE_TTL_SECONDS=60``.
        """

        env = os.environ if environ is None else environ
        payload: Dict[str, Any] = {}
        prefix = "ARTSEARCH_"
        for name, value in env.items():
            if not name.startswith(prefix):
                continue
            parts = name[len(prefix):].lower().split("__")
            target = payload
            for part in parts[:-1]:
                target = target.setdefault(part, {})
            target[parts[-1]] = value
        return cls.model_validate(payload)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for entrypoints (API factory, demo script)."""

    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


__all__ = ["AppSettings", "SearchSettings", "VisualSettings", "configure_logging"]
