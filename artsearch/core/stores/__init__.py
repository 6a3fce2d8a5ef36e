# Path: artsearch/core/stores/__init__.py
# Purpose: Package initializer for storage backends.
# Layer: core/stores.
# Details: Exposes the store interfaces and in-memory implementations.

from .base import ArtworkStore, PreferenceStore
from .memory_store import InMemoryArtworkStore, InMemoryPreferenceStore

__all__ = ["ArtworkStore", "InMemoryArtworkStore", "InMemoryPreferenceStore", "PreferenceStore"]
