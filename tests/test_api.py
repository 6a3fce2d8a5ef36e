"""
HTTP tests for the FastAPI adapter.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from artsearch.api import build_pipeline, create_app
from artsearch.api.payloads import context_from_payload, filters_from_payload
from artsearch.config.settings import AppSettings, SearchSettings
from artsearch.core.models.domain import SearchIntent
from artsearch.core.search import SearchPipeline
from artsearch.core.stores import InMemoryArtworkStore

from conftest import fixed_now


class FailingStore(InMemoryArtworkStore):
    def fetch_candidates(self, filters, limit):
        raise RuntimeError("connection refused")


@pytest.fixture
def client(pipeline):
    return TestClient(create_app(pipeline))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_text_search(client):
    response = client.post("/search", json={"query": "abstract art", "limit": 1})

    assert response.status_code == 200
    results = response.json()["results"]
    assert [result["id"] for result in results] == ["a2"]
    assert results[0]["market_context"]["price_competitiveness"] in {"below", "average", "above"}


def test_search_applies_filters(client):
    response = client.post("/search", json={"query": "abstract art", "filters": {"price_max": 1100}})

    assert [result["id"] for result in response.json()["results"]] == ["a1"]


@pytest.mark.parametrize("limit", [0, "many"])
def test_bad_limit_is_a_client_error(client, limit):
    assert client.post("/search", json={"query": "abstract", "limit": limit}).status_code == 400


def test_image_search_from_base64(client, png_bytes):
    payload = {"image_base64": base64.b64encode(png_bytes).decode("ascii")}

    response = client.post("/search/image", json=payload)

    assert response.status_code == 200
    assert [result["id"] for result in response.json()["results"]] == ["a6"]


@pytest.mark.parametrize("payload", [{}, {"image_base64": "***"}])
def test_image_search_requires_a_valid_image(client, payload):
    assert client.post("/search/image", json=payload).status_code == 400


def test_facet_searches(client):
    response = client.post("/search/style", json={"style": "abstract"})

    assert response.status_code == 200
    assert {result["id"] for result in response.json()["results"]} == {"a1", "a2"}
    assert client.post("/search/mood", json={"mood": "calm"}).status_code == 200
    assert client.post("/search/color", json={"mood": "calm"}).status_code == 400


def test_suggestions_and_trending(client):
    suggestions = client.get("/suggestions", params={"q": "abstract", "limit": 2}).json()["suggestions"]
    trending = client.get("/trending", params={"limit": 3}).json()["trending"]

    assert suggestions == ["abstract art", "abstract painting"]
    assert 0 < len(trending) <= 3


def test_upstream_failure_maps_to_bad_gateway(catalog):
    pipeline = SearchPipeline(
        FailingStore(catalog), settings=SearchSettings(raise_on_upstream_error=True), clock=fixed_now
    )
    try:
        response = TestClient(create_app(pipeline)).post("/search", json={"query": "abstract"})
    finally:
        pipeline.close()

    assert response.status_code == 502


def test_build_pipeline_loads_catalog(store, tmp_path):
    path = tmp_path / "catalog.json"
    store.save(str(path))

    pipeline = build_pipeline(AppSettings(catalog_path=path))
    try:
        assert len(pipeline.store) == len(store)
    finally:
        pipeline.close()


def test_payload_parsing_is_tolerant():
    context = context_from_payload(
        {
            "user_id": "u1",
            "intent": "gift",
            "budget_range": {"min": 100, "max": "lots"},
            "preferences": ["not", "a", "mapping"],
            "unknown": True,
        }
    )

    assert context.user_id == "u1"
    assert context.intent is SearchIntent.GIFT
    assert context.budget_range is None
    assert context.preferences is None
    assert context_from_payload({"intent": "hoarding"}).intent is None
    assert filters_from_payload({"price_max": 10, "bogus": 1}).price_max == 10
    assert filters_from_payload("nope") is None
