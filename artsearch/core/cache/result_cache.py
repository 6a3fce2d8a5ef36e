# Path: artsearch/core/cache/result_cache.py
# Purpose: Cache ranked result sets per (query, filters, context) for a fixed time-to-live.
# Layer: core/cache.
# Details: Lock-guarded dict; entries are only replaced on write, never evicted in the background.

from __future__ import annotations

import copy
import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from artsearch.core.models.domain import SearchContext, SearchFilters, SemanticSearchResult

logger = logging.getLogger(__name__)


def make_cache_key(
    query: str,
    filters: Optional[SearchFilters] = None,
    context: Optional[SearchContext] = None,
    namespace: str = "text",
) -> str:
    """Deterministic key: sorted-key JSON of the query text, filters, and context."""

    payload = {
        "namespace": namespace,
        "query": query,
        "filters": (filters or SearchFilters()).to_dict(),
        "context": (context or SearchContext()).to_dict(),
    }
    return json.dumps(payload, sort_keys=True, default=str)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    results: Tuple[SemanticSearchResult, ...]
    timestamp: float


class ResultCache:
    """Thread-safe TTL cache for search results."""

    def __init__(self, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[Tuple[SemanticSearchResult, ...]]:
        """Return a private copy of cached results younger than the TTL, else ``None``."""

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self.clock() - entry.timestamp >= self.ttl_seconds:
                logger.debug("Cache entry expired")
                return None
            return copy.deepcopy(entry.results)

    def set(self, key: str, results: Sequence[SemanticSearchResult]) -> None:
        # Entries are snapshots; readers always receive copies.
        snapshot = tuple(copy.deepcopy(list(results)))
        with self._lock:
            self._entries[key] = CacheEntry(key=key, results=snapshot, timestamp=self.clock())

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
