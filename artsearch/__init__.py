# Path: artsearch/__init__.py
# Purpose: Package initializer for the artsearch semantic search library.
# Layer: root.
# Details: Re-exports the pipeline, stores, and settings most callers need.

from artsearch.config.settings import AppSettings, SearchSettings, VisualSettings, configure_logging
from artsearch.core.search.pipeline import SearchPipeline
from artsearch.core.stores.memory_store import InMemoryArtworkStore, InMemoryPreferenceStore

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "InMemoryArtworkStore",
    "InMemoryPreferenceStore",
    "SearchPipeline",
    "SearchSettings",
    "VisualSettings",
    "configure_logging",
]
