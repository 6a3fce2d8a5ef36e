"""
Tests for the in-memory artwork and preference stores and record parsing.
"""

from datetime import timedelta

import pytest

from artsearch.core.models.domain import CandidateArtwork, SearchFilters
from artsearch.core.stores import InMemoryArtworkStore, InMemoryPreferenceStore

from conftest import NOW, build_artwork


def ids(artworks):
    return [artwork.id for artwork in artworks]


class TestCandidates:
    def test_private_artworks_are_excluded(self, store):
        assert ids(store.fetch_candidates(None, 100)) == ["a1", "a2", "a3", "a4", "a6"]

    def test_limit_caps_results(self, store):
        assert ids(store.fetch_candidates(SearchFilters(), 2)) == ["a1", "a2"]

    def test_price_and_year_filters(self, store):
        assert ids(store.fetch_candidates(SearchFilters(price_min=900.0, price_max=6000.0), 100)) == ["a1", "a2", "a6"]
        assert ids(store.fetch_candidates(SearchFilters(year_from=2020, year_to=2021), 100)) == ["a1"]

    def test_list_filters_are_case_insensitive(self, store):
        filters = SearchFilters(medium=["oil on canvas", "WATERCOLOR"], genre=["abstract", "landscape"])

        assert ids(store.fetch_candidates(filters, 100)) == ["a1", "a2", "a3"]
        assert ids(store.fetch_candidates(SearchFilters(artist=["sipho dlamini"]), 100)) == ["a2"]

    def test_malformed_filter_values_are_ignored(self, store):
        filters = SearchFilters(price_min="cheap", medium=[3, None], location=7, availability="yes")

        assert len(store.fetch_candidates(filters, 100)) == 5

    def test_size_and_location_filters(self):
        store = InMemoryArtworkStore(
            [
                build_artwork("big", width=100.0, height=80.0, artist_name="A"),
                build_artwork("small", width=20.0, height=20.0),
                build_artwork("unknown"),
            ]
        )
        store.get("small").artist.location = "Cape Town, South Africa"

        assert ids(store.fetch_candidates(SearchFilters(size_min=1000.0), 10)) == ["big"]
        assert ids(store.fetch_candidates(SearchFilters(size_max=1000.0), 10)) == ["small"]
        assert ids(store.fetch_candidates(SearchFilters(location="cape town"), 10)) == ["small"]

    def test_availability_filter(self):
        store = InMemoryArtworkStore(
            [build_artwork("sold", status="sold"), build_artwork("nfs", is_for_sale=False), build_artwork("ok")]
        )

        assert ids(store.fetch_candidates(SearchFilters(availability=True), 10)) == ["ok"]
        assert len(store.fetch_candidates(SearchFilters(availability=False), 10)) == 3


class TestOtherQueries:
    def test_comparables_match_any_attribute(self, store):
        comparables = store.fetch_comparable("Watercolor", "Portrait", None, 10)

        assert sorted(c.price for c in comparables) == [800.0, 15000.0]

    def test_comparables_skip_unpriced_and_unavailable(self):
        store = InMemoryArtworkStore(
            [
                build_artwork("p", medium="Oil", price=100.0),
                build_artwork("n", medium="Oil"),
                build_artwork("s", medium="Oil", price=100.0, status="sold"),
            ]
        )

        assert len(store.fetch_comparable("Oil", None, None, 10)) == 1
        assert store.fetch_comparable(None, None, None, 10) == []

    def test_public_with_image(self, store):
        assert ids(store.fetch_all_public_with_image()) == ["a1", "a6"]

    def test_trending_records_newest_first(self):
        store = InMemoryArtworkStore(
            [
                build_artwork("old", title="Old", created_at=NOW - timedelta(days=40)),
                build_artwork("new", title="New", created_at=NOW),
                build_artwork("untitled", created_at=NOW),
                build_artwork("undated", title="Undated", created_at=None),
                build_artwork("sold", title="Sold", status="sold"),
            ]
        )

        assert [record.title for record in store.fetch_recent_for_trending(10)] == ["New", "Old", "Undated"]
        assert len(store.fetch_recent_for_trending(1)) == 1


class TestCatalogManagement:
    def test_duplicate_ids_rejected(self, store, catalog):
        with pytest.raises(ValueError):
            store.add(catalog[0])

    def test_update_requires_existing_artwork(self, store):
        with pytest.raises(KeyError):
            store.update(build_artwork("missing"))

    def test_save_and_load(self, store, tmp_path):
        path = tmp_path / "catalog.json"
        store.save(str(path))

        loaded = InMemoryArtworkStore.from_json(str(path))

        assert len(loaded) == len(store)
        assert loaded.get("a1").artist_name == "Thandi Mokoena"
        assert loaded.get("a1").created_at == NOW - timedelta(days=2)
        assert loaded.get("a5").is_public is False

    def test_load_rejects_non_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('{"id": "x"}')

        with pytest.raises(ValueError):
            InMemoryArtworkStore.from_json(str(path))
        with pytest.raises(FileNotFoundError):
            InMemoryArtworkStore.from_json(str(tmp_path / "nope.json"))

    def test_add_accepts_raw_records(self):
        store = InMemoryArtworkStore()
        artwork = store.add({"id": 5, "title": "Dusk", "price": "1200.50"})

        assert artwork.id == "5"
        assert artwork.price == pytest.approx(1200.5)


def test_from_record_tolerates_malformed_fields():
    artwork = CandidateArtwork.from_record(
        {
            "id": 7,
            "price": "abc",
            "views_count": None,
            "profiles": {"name": "Lindiwe", "location": "Durban"},
            "edition_info": {"is_limited": True},
            "created_at": "2026-02-01T10:00:00Z",
            "awards": "not a list",
        }
    )

    assert artwork.id == "7"
    assert artwork.price is None
    assert artwork.views_count == 0
    assert artwork.artist_name == "Lindiwe"
    assert artwork.is_limited_edition is True
    assert artwork.created_at.tzinfo is not None
    assert artwork.created_at.day == 1
    assert artwork.awards == []


def test_preference_store_returns_copies():
    preferences = InMemoryPreferenceStore()
    preferences.set_preferences("u1", {"favorite_genres": ["Abstract"]})

    fetched = preferences.get_preferences("u1")
    fetched["favorite_genres"] = []

    assert preferences.get_preferences("u1") == {"favorite_genres": ["Abstract"]}
    assert preferences.get_preferences("u2") is None
