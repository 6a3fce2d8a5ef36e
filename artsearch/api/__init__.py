# Path: artsearch/api/__init__.py
# Purpose: Package initializer for HTTP API layer.
# Layer: api.
# Details: Exposes the FastAPI application factory; FastAPI itself loads only when the factory runs.

from .app import build_pipeline, create_app

__all__ = ["build_pipeline", "create_app"]
