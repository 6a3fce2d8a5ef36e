"""
Tests for MarketContextAnalyzer signals.
"""

import math
from datetime import timedelta

import pytest

from artsearch.core.market import MarketContextAnalyzer, recency_score
from artsearch.core.models.domain import ComparableArtwork, DemandLevel, PriceCompetitiveness, TrendingRecord
from artsearch.core.stores.memory_store import InMemoryArtworkStore

from conftest import NOW, fixed_now


class BrokenComparableStore(InMemoryArtworkStore):
    def fetch_comparable(self, medium, genre, style, limit):
        raise RuntimeError("database unavailable")


@pytest.fixture
def analyzer():
    return MarketContextAnalyzer(clock=fixed_now)


def test_recency_score():
    assert recency_score(None, NOW) == 0.0
    assert recency_score(NOW + timedelta(days=3), NOW) == 1.0
    assert recency_score(NOW - timedelta(days=30), NOW) == pytest.approx(math.exp(-1))


def test_naive_timestamps_count_as_utc(analyzer, make_artwork):
    naive = (NOW - timedelta(days=30)).replace(tzinfo=None)
    artwork = make_artwork("n", created_at=NOW)
    artwork.created_at = naive

    assert recency_score(naive, NOW) == pytest.approx(math.exp(-1))
    assert analyzer.trend_score(artwork) == pytest.approx(0.3 * math.exp(-1))
    assert TrendingRecord(created_at=naive).created_at == NOW - timedelta(days=30)
    assert make_artwork("m", created_at=naive).created_at.tzinfo is not None


def test_popular_but_rarely_inquired_artwork(analyzer, make_artwork):
    artwork = make_artwork(
        "b1", views_count=1000, likes_count=5, inquiries_count=2, created_at=NOW - timedelta(days=2)
    )

    assert analyzer.demand_level(artwork) is DemandLevel.LOW
    expected = 0.7 * (7 / 1000) + 0.3 * math.exp(-2 / 30)
    assert analyzer.trend_score(artwork) == pytest.approx(expected)
    assert analyzer.trend_score(artwork) == pytest.approx(0.2856, abs=1e-3)


@pytest.mark.parametrize(
    "views, inquiries, level",
    [(100, 11, DemandLevel.HIGH), (100, 6, DemandLevel.MEDIUM), (100, 5, DemandLevel.LOW), (0, 9, DemandLevel.LOW)],
)
def test_demand_levels(analyzer, make_artwork, views, inquiries, level):
    assert analyzer.demand_level(make_artwork("d", views_count=views, inquiries_count=inquiries)) is level


def test_trend_score_is_clamped(analyzer, make_artwork):
    artwork = make_artwork("t", views_count=1, likes_count=50, inquiries_count=50, created_at=NOW)

    assert analyzer.trend_score(artwork) == 1.0


def test_price_competitiveness_against_comparables(analyzer, make_artwork):
    artwork = make_artwork("p", medium="Oil", genre="Landscape", style="Realism", price=500.0)
    comparables = [
        ComparableArtwork(price=900.0, medium="Oil"),
        ComparableArtwork(price=1100.0, medium="Oil", genre="Landscape"),
        ComparableArtwork(price=99999.0, medium="Acrylic", genre="Portrait", style="Pop"),
    ]

    assert analyzer.price_competitiveness(artwork, comparables) is PriceCompetitiveness.BELOW
    artwork.price = 1100.0
    assert analyzer.price_competitiveness(artwork, comparables) is PriceCompetitiveness.AVERAGE
    artwork.price = 1300.0
    assert analyzer.price_competitiveness(artwork, comparables) is PriceCompetitiveness.ABOVE


@pytest.mark.parametrize(
    "price, band",
    [(999.0, PriceCompetitiveness.BELOW), (5000.0, PriceCompetitiveness.AVERAGE), (10000.0, PriceCompetitiveness.ABOVE)],
)
def test_fixed_price_bands_without_comparables(analyzer, make_artwork, price, band):
    assert analyzer.price_competitiveness(make_artwork("f", price=price), []) is band


def test_failed_comparable_fetch_falls_back_to_bands(make_artwork, caplog):
    analyzer = MarketContextAnalyzer(BrokenComparableStore(), clock=fixed_now)

    context = analyzer.analyze(make_artwork("x", medium="Oil", price=20000.0))

    assert context.price_competitiveness is PriceCompetitiveness.ABOVE
    assert "Comparable fetch failed" in caplog.text


def test_comparables_are_loaded_from_store(make_artwork):
    store = InMemoryArtworkStore(
        [make_artwork("c1", medium="Oil", price=2000.0), make_artwork("c2", medium="Oil", price=2000.0)]
    )
    analyzer = MarketContextAnalyzer(store, clock=fixed_now)

    context = analyzer.analyze(make_artwork("x", medium="Oil", price=1000.0))

    assert context.price_competitiveness is PriceCompetitiveness.BELOW


def test_rarity_score(analyzer, make_artwork):
    assert analyzer.rarity_score(make_artwork("r1", medium="Watercolor")) == pytest.approx(0.5)
    assert analyzer.rarity_score(make_artwork("r2", medium="Sculpture")) == pytest.approx(0.7)
    assert analyzer.rarity_score(make_artwork("r3", medium="Mixed Media", is_limited_edition=True)) == pytest.approx(1.0)
