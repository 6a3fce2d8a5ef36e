# Path: artsearch/core/market/analyzer.py
# Purpose: Derive trend, demand, price competitiveness, and rarity signals for an artwork.
# Layer: core/market.
# Details: Deterministic heuristics over engagement counters and a comparable-price set.

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from artsearch.core.lexicon import Lexicon, default_lexicon
from artsearch.core.models.domain import (
    CandidateArtwork,
    ComparableArtwork,
    DemandLevel,
    MarketContext,
    PriceCompetitiveness,
    as_utc,
)
from artsearch.core.stores.base import ArtworkStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

RECENCY_DAYS = 30.0
COMPARABLE_MIN_SIMILARITY = 0.3
PRICE_DEVIATION = 0.2


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def recency_score(created_at: Optional[datetime], now: datetime) -> float:
    """exp(-days/30) since creation; 0 when unknown, 1 for timestamps in the future."""

    if created_at is None:
        return 0.0
    days = max(0.0, (as_utc(now) - as_utc(created_at)).total_seconds() / 86400.0)
    return math.exp(-days / RECENCY_DAYS)


class MarketContextAnalyzer:
    """Compute the MarketContext attached to each search result."""

    def __init__(
        self,
        store: Optional[ArtworkStore] = None,
        comparable_limit: int = 50,
        clock: Clock = utc_now,
        lexicon: Optional[Lexicon] = None,
    ) -> None:
        self.store = store
        self.comparable_limit = comparable_limit
        self.clock = clock
        self.rare_mediums = (lexicon or default_lexicon()).rare_mediums

    def analyze(
        self,
        artwork: CandidateArtwork,
        comparables: Optional[Sequence[ComparableArtwork]] = None,
    ) -> MarketContext:
        """Build the market context; ``comparables`` is fetched from the store when not supplied."""

        if comparables is None:
            comparables = self.load_comparables(artwork)
        return MarketContext(
            trend_score=self.trend_score(artwork),
            demand_level=self.demand_level(artwork),
            price_competitiveness=self.price_competitiveness(artwork, comparables),
            rarity_score=self.rarity_score(artwork),
        )

    def trend_score(self, artwork: CandidateArtwork) -> float:
        engagement = (artwork.likes_count + artwork.inquiries_count) / max(artwork.views_count, 1)
        recency = recency_score(artwork.created_at, self.clock())
        return clamp(0.7 * engagement + 0.3 * recency)

    @staticmethod
    def demand_level(artwork: CandidateArtwork) -> DemandLevel:
        rate = artwork.inquiries_count / artwork.views_count if artwork.views_count > 0 else 0.0
        if rate > 0.1:
            return DemandLevel.HIGH
        if rate > 0.05:
            return DemandLevel.MEDIUM
        return DemandLevel.LOW

    def load_comparables(self, artwork: CandidateArtwork) -> List[ComparableArtwork]:
        if self.store is None:
            return []
        try:
            return list(
                self.store.fetch_comparable(artwork.medium, artwork.genre, artwork.style, self.comparable_limit)
            )
        except Exception:
            logger.exception("Comparable fetch failed for artwork %s; using fixed price bands", artwork.id)
            return []

    @staticmethod
    def comparable_similarity(artwork: CandidateArtwork, comparable: ComparableArtwork) -> float:
        score = 0.0
        if comparable.medium == artwork.medium:
            score += 0.4
        if comparable.genre == artwork.genre:
            score += 0.3
        if comparable.style == artwork.style:
            score += 0.3
        return score

    def price_competitiveness(
        self,
        artwork: CandidateArtwork,
        comparables: Sequence[ComparableArtwork],
    ) -> PriceCompetitiveness:
        price = artwork.price or 0.0
        similar = [item for item in comparables if self.comparable_similarity(artwork, item) >= COMPARABLE_MIN_SIMILARITY]
        if similar:
            mean_price = sum(item.price for item in similar) / len(similar)
            if mean_price > 0:
                deviation = (price - mean_price) / mean_price
                if deviation < -PRICE_DEVIATION:
                    return PriceCompetitiveness.BELOW
                if deviation > PRICE_DEVIATION:
                    return PriceCompetitiveness.ABOVE
                return PriceCompetitiveness.AVERAGE
        return self.fixed_band(price)

    @staticmethod
    def fixed_band(price: float) -> PriceCompetitiveness:
        if price < 1000:
            return PriceCompetitiveness.BELOW
        if price < 10000:
            return PriceCompetitiveness.AVERAGE
        return PriceCompetitiveness.ABOVE

    def rarity_score(self, artwork: CandidateArtwork) -> float:
        score = 0.5
        if artwork.medium and artwork.medium.lower() in self.rare_mediums:
            score += 0.2
        if artwork.is_limited_edition:
            score += 0.3
        return clamp(score)
