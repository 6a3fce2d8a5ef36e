# Path: artsearch/core/cache/__init__.py
# Purpose: Package initializer for result caching.
# Layer: core/cache.
# Details: Exposes the TTL cache and its key builder.

from .result_cache import CacheEntry, ResultCache, make_cache_key

__all__ = ["CacheEntry", "ResultCache", "make_cache_key"]
