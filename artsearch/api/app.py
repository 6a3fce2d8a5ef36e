# Path: artsearch/api/app.py
# Purpose: Expose a FastAPI application for semantic artwork search.
# Layer: api.
# Details: Thin HTTP adapter over SearchPipeline; FastAPI is imported lazily so the core has no web dependency.

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Dict, List, Optional

from artsearch.config.settings import AppSettings, configure_logging
from artsearch.core.errors import UpstreamFetchError
from artsearch.core.models.domain import SemanticSearchResult
from artsearch.core.search.pipeline import SearchPipeline
from artsearch.core.stores.memory_store import InMemoryArtworkStore

from .payloads import context_from_payload, filters_from_payload

logger = logging.getLogger(__name__)


def build_pipeline(settings: AppSettings) -> SearchPipeline:
    """Create a pipeline over the JSON catalog named in ``settings`` (empty store when unset)."""

    store = InMemoryArtworkStore()
    if settings.catalog_path is not None:
        store.load(str(settings.catalog_path))
    return SearchPipeline(store, settings=settings.search, visual_settings=settings.visual)


def _serialize(results: List[SemanticSearchResult]) -> Dict[str, Any]:
    return {"results": [result.to_dict() for result in results]}


def create_app(pipeline: Optional[SearchPipeline] = None, settings: Optional[AppSettings] = None):  # type: ignore[override]
    """Create a FastAPI app instance configured with the provided search pipeline."""

    from fastapi import FastAPI, HTTPException

    if pipeline is None:
        settings = settings or AppSettings.from_env()
        configure_logging(settings.log_level)
        pipeline = build_pipeline(settings)

    app = FastAPI(title="artsearch API", version="0.1.0")

    def run(call, *args, **kwargs):
        try:
            return call(*args, **kwargs)
        except UpstreamFetchError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def limit_of(payload: Dict[str, Any]) -> Optional[int]:
        limit = payload.get("limit")
        if limit is None:
            return None
        try:
            return int(limit)
        except (TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail="limit must be an integer") from exc

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.post("/search")
    def search(payload: Dict[str, Any]):
        """Run a free-text semantic search."""

        results = run(
            pipeline.search,
            payload.get("query") or "",
            filters=filters_from_payload(payload.get("filters")),
            context=context_from_payload(payload.get("context")),
            limit=limit_of(payload),
        )
        return _serialize(results)

    @app.post("/search/image")
    def search_image(payload: Dict[str, Any]):
        """Search by an image given as ``image_url`` or base64 ``image_base64``."""

        source: Any = payload.get("image_url")
        if not source and payload.get("image_base64"):
            try:
                source = base64.b64decode(payload["image_base64"], validate=True)
            except (binascii.Error, TypeError, ValueError) as exc:
                raise HTTPException(status_code=400, detail="image_base64 is not valid base64") from exc
        if not source:
            raise HTTPException(status_code=400, detail="image_url or image_base64 is required")
        results = run(
            pipeline.search_by_image,
            source,
            filters=filters_from_payload(payload.get("filters")),
            context=context_from_payload(payload.get("context")),
        )
        return _serialize(results)

    def facet_endpoint(strategy_id: str):
        def handler(payload: Dict[str, Any]):
            value = payload.get(strategy_id)
            if not isinstance(value, str) or not value.strip():
                raise HTTPException(status_code=400, detail=f"'{strategy_id}' is required")
            results = run(
                pipeline.run_strategy,
                strategy_id,
                value,
                filters=filters_from_payload(payload.get("filters")),
                context=context_from_payload(payload.get("context")),
                limit=limit_of(payload),
            )
            return _serialize(results)

        handler.__name__ = f"search_{strategy_id}"
        return handler

    for strategy_id in ("mood", "color", "style"):
        app.post(f"/search/{strategy_id}")(facet_endpoint(strategy_id))

    @app.get("/suggestions")
    def suggestions(q: str = "", limit: int = 10):
        return {"suggestions": run(pipeline.get_search_suggestions, q, limit=limit)}

    @app.get("/trending")
    def trending(limit: int = 10):
        return {"trending": pipeline.get_trending_searches(limit=limit)}

    logger.info("API ready with %d strategies", len(pipeline.strategies))
    return app
