"""
Shared fixtures: a small artwork catalog, deterministic clocks, and synthetic images.
"""

import io
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest
from PIL import Image

from artsearch.config.settings import SearchSettings
from artsearch.core.cache.result_cache import ResultCache
from artsearch.core.models.domain import ArtistProfile, CandidateArtwork
from artsearch.core.search.pipeline import SearchPipeline
from artsearch.core.stores.memory_store import InMemoryArtworkStore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeMonotonic:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def fixed_now() -> datetime:
    return NOW


def build_artwork(artwork_id, **fields):
    artist = fields.pop("artist_name", None)
    fields.setdefault("created_at", NOW - timedelta(days=10))
    return CandidateArtwork(id=artwork_id, artist=ArtistProfile(name=artist), **fields)


@pytest.fixture
def make_artwork():
    return build_artwork


@pytest.fixture
def catalog():
    return [
        build_artwork(
            "a1",
            title="Abstract Composition No. 4",
            genre="Abstract",
            medium="Oil on Canvas",
            price=1000.0,
            year_created=2020,
            views_count=1000,
            likes_count=5,
            inquiries_count=2,
            created_at=NOW - timedelta(days=2),
            artist_name="Thandi Mokoena",
            primary_image_url="https://img.example/a1.png",
        ),
        build_artwork(
            "a2",
            title="Abstract Blue Study",
            description="a calm abstract study in blue",
            genre="Abstract",
            medium="Oil on Canvas",
            price=1300.0,
            year_created=2022,
            views_count=200,
            likes_count=30,
            inquiries_count=25,
            artist_name="Sipho Dlamini",
        ),
        build_artwork(
            "a3",
            title="Mountain Landscape at Dawn",
            description="misty mountain landscape with warm light",
            genre="Landscape",
            medium="Watercolor",
            price=800.0,
            year_created=2019,
        ),
        build_artwork(
            "a4",
            title="Portrait of a Woman",
            genre="Portrait",
            medium="Charcoal",
            price=15000.0,
            year_created=1950,
        ),
        build_artwork(
            "a5",
            title="Abstract Private Sketch",
            genre="Abstract",
            medium="Oil on Canvas",
            is_public=False,
        ),
        build_artwork(
            "a6",
            title="Dark Warm Symmetry",
            description="a smooth classical study",
            genre="Classical",
            medium="Oil on Canvas",
            price=5000.0,
            year_created=1990,
            primary_image_url="https://img.example/a6.png",
        ),
    ]


@pytest.fixture
def store(catalog):
    return InMemoryArtworkStore(catalog)


@pytest.fixture
def monotonic():
    return FakeMonotonic()


@pytest.fixture
def pipeline(store, monotonic):
    settings = SearchSettings()
    pipe = SearchPipeline(
        store,
        settings=settings,
        cache=ResultCache(ttl_seconds=settings.cache_ttl_seconds, clock=monotonic),
        clock=fixed_now,
    )
    yield pipe
    pipe.close()


@pytest.fixture
def red_image():
    return Image.new("RGB", (64, 64), (255, 0, 0))


@pytest.fixture
def checkerboard_image():
    rows, cols = np.indices((64, 64))
    mask = ((rows // 8) + (cols // 8)) % 2 == 0
    pixels = np.zeros((64, 64, 3), dtype=np.uint8)
    pixels[mask] = 255
    return Image.fromarray(pixels)


@pytest.fixture
def png_bytes(red_image):
    buffer = io.BytesIO()
    red_image.save(buffer, format="PNG")
    return buffer.getvalue()
