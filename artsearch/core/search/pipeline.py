# Path: artsearch/core/search/pipeline.py
# Purpose: Orchestrate semantic search by combining strategies, stores, ranking, and the result cache.
# Layer: core/search.
# Details: Analyzes the query, fetches candidates under a deadline, ranks and enriches them, then caches the set.

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from artsearch.config.settings import SearchSettings, VisualSettings
from artsearch.core.analysis.query_analyzer import QueryAnalyzer
from artsearch.core.cache.result_cache import ResultCache, make_cache_key
from artsearch.core.errors import UpstreamFetchError
from artsearch.core.lexicon import Lexicon, default_lexicon
from artsearch.core.market.analyzer import Clock, MarketContextAnalyzer, utc_now
from artsearch.core.models.domain import (
    CandidateArtwork,
    ComparableArtwork,
    SearchContext,
    SearchFilters,
    SemanticQuery,
    SemanticSearchResult,
)
from artsearch.core.ranking.relevance import RelevanceScorer, term_ratio
from artsearch.core.ranking.similarity_graph import SimilarityGraph
from artsearch.core.stores.base import ArtworkStore, PreferenceStore
from artsearch.core.visual.extractor import ImageSource, VisualFeatureExtractor

from .strategies import SearchStrategy, TextSearch, default_strategies
from .suggestions import build_suggestions
from .trending import TrendingAnalyzer

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown Artist"
FETCH_WORKERS = 4


class SearchPipeline:
    """High-level service bridging API/CLI layers with analysis, stores, and ranking."""

    def __init__(
        self,
        store: ArtworkStore,
        settings: Optional[SearchSettings] = None,
        visual_settings: Optional[VisualSettings] = None,
        preference_store: Optional[PreferenceStore] = None,
        lexicon: Optional[Lexicon] = None,
        analyzer: Optional[QueryAnalyzer] = None,
        extractor: Optional[VisualFeatureExtractor] = None,
        cache: Optional[ResultCache] = None,
        strategies: Optional[Dict[str, SearchStrategy]] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.store = store
        self.settings = settings or SearchSettings()
        self.preference_store = preference_store
        self.lexicon = lexicon or default_lexicon()
        self.analyzer = analyzer or QueryAnalyzer(self.lexicon)
        self.extractor = extractor or VisualFeatureExtractor(visual_settings)
        self.scorer = RelevanceScorer(self.lexicon, clock=clock)
        self.market = MarketContextAnalyzer(
            store, comparable_limit=self.settings.comparable_limit, clock=clock, lexicon=self.lexicon
        )
        self.trending = TrendingAnalyzer(self.lexicon, clock=clock, term_limit=self.settings.trending_term_limit)
        self.cache = cache or ResultCache(ttl_seconds=self.settings.cache_ttl_seconds)
        self.strategies: Dict[str, SearchStrategy] = strategies or default_strategies()
        self._executor_lock = threading.Lock()
        self._executor = self._new_executor()

    def close(self) -> None:
        """Release the fetch worker threads; abandoned fetches are not waited for."""

        with self._executor_lock:
            self._executor.shutdown(wait=False)

    @staticmethod
    def _new_executor() -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=FETCH_WORKERS, thread_name_prefix="artsearch-fetch")

    def _retire_executor(self, executor: ThreadPoolExecutor) -> None:
        """Swap in a fresh pool so abandoned calls cannot hold every worker."""

        with self._executor_lock:
            if self._executor is executor:
                self._executor = self._new_executor()
        executor.shutdown(wait=False)
        logger.warning("Fetch pool replaced after a timed-out store call")

    # ---------------------- public search API ----------------------
    def search(
        self,
        query: Optional[str],
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
        limit: Optional[int] = None,
    ) -> List[SemanticSearchResult]:
        """Run a free-text search and return at most ``limit`` results by descending relevance."""

        return self.run_strategy(TextSearch.id, query, filters=filters, context=context, limit=limit)

    def search_by_mood(
        self,
        mood: str,
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
        limit: Optional[int] = None,
    ) -> List[SemanticSearchResult]:
        return self.run_strategy("mood", mood, filters=filters, context=context, limit=limit)

    def search_by_color(
        self,
        color: str,
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
        limit: Optional[int] = None,
    ) -> List[SemanticSearchResult]:
        return self.run_strategy("color", color, filters=filters, context=context, limit=limit)

    def search_by_style(
        self,
        style: str,
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
        limit: Optional[int] = None,
    ) -> List[SemanticSearchResult]:
        return self.run_strategy("style", style, filters=filters, context=context, limit=limit)

    def run_strategy(
        self,
        strategy_id: str,
        value: Any,
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
        limit: Optional[int] = None,
    ) -> List[SemanticSearchResult]:
        """
        Execute a search through the named strategy.

        External calls:
        - artsearch/core/search/strategies.py::SearchStrategy.build_query - builds the SemanticQuery.
        - artsearch/core/stores/base.py::ArtworkStore.fetch_candidates - retrieves structural matches.
        - artsearch/core/cache/result_cache.py::ResultCache - serves repeated requests within the TTL.
        """

        strategy = self.strategies.get(strategy_id)
        if strategy is None:
            raise ValueError(f"Unknown search strategy: {strategy_id}")
        if "image" in strategy.required_modalities:
            return self.search_by_image(value, filters=filters, context=context)

        limit = self._resolve_limit(limit)
        text = strategy.query_text(value)
        key = make_cache_key(text, filters, context)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r (%d results)", text, len(cached))
            return list(cached[:limit])

        semantic = strategy.build_query(self.analyzer, self.extractor, value)
        resolved = self._resolve_context(context)
        try:
            candidates = self._fetch(
                self.store.fetch_candidates, filters, limit * self.settings.candidate_multiplier
            )
        except UpstreamFetchError:
            logger.exception("Candidate fetch failed for %r", text)
            if self.settings.raise_on_upstream_error:
                raise
            return []

        results = self._rank(candidates, semantic, resolved)
        logger.info("Search %r: %d candidates, %d results", text, len(candidates), len(results))
        self.cache.set(key, results)
        return results[:limit]

    def search_by_image(
        self,
        image: ImageSource,
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
    ) -> List[SemanticSearchResult]:
        """Rank every public artwork with an image by overlap with the image's derived vocabulary.

        Structural ``filters`` are accepted for signature symmetry; the scan covers the full public catalog.
        """

        semantic = self.strategies["image"].build_query(self.analyzer, self.extractor, image)
        if semantic is None:
            return []
        resolved = self._resolve_context(context)
        try:
            candidates = self._fetch(self.store.fetch_all_public_with_image)
        except UpstreamFetchError:
            logger.exception("Image search scan failed")
            if self.settings.raise_on_upstream_error:
                raise
            return []

        vocabulary = list(
            dict.fromkeys(semantic.concepts + semantic.emotions + semantic.styles + semantic.visual_elements)
        )
        graph = SimilarityGraph(candidates, limit=self.settings.similar_limit)
        comparables: Dict[Tuple[Optional[str], ...], List[ComparableArtwork]] = {}
        results: List[SemanticSearchResult] = []
        for artwork in candidates:
            text = " ".join(part or "" for part in (artwork.title, artwork.description, artwork.medium, artwork.genre))
            similarity = term_ratio(vocabulary, text.lower())
            if similarity <= self.settings.visual_threshold:
                continue
            results.append(
                self._build_result(
                    artwork, semantic, resolved, graph, comparables, similarity, visual_similarity=similarity
                )
            )
        results.sort(key=lambda result: result.visual_similarity, reverse=True)
        logger.info("Image search: %d scanned, %d results", len(candidates), len(results))
        return results

    def get_search_suggestions(self, query: Optional[str], limit: int = 10) -> List[str]:
        return build_suggestions(self.analyzer.analyze(query), limit)

    def get_trending_searches(self, limit: int = 10) -> List[str]:
        try:
            records = self._fetch(self.store.fetch_recent_for_trending, self.settings.trending_fetch_limit)
        except UpstreamFetchError:
            logger.exception("Trending fetch failed; serving default terms")
            return self.trending.fallback(limit)
        terms = self.trending.rank(records)
        if not terms:
            return self.trending.fallback(limit)
        return terms[:limit]

    def clear_cache(self) -> None:
        self.cache.clear()

    def invalidate_cache(
        self,
        query: Optional[str],
        filters: Optional[SearchFilters] = None,
        context: Optional[SearchContext] = None,
    ) -> bool:
        return self.cache.invalidate(make_cache_key(TextSearch().query_text(query), filters, context))

    # ---------------------- internals ----------------------
    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.default_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        return limit

    def _resolve_context(self, context: Optional[SearchContext]) -> SearchContext:
        context = context or SearchContext()
        if context.preferences is not None or not context.user_id or self.preference_store is None:
            return context
        try:
            preferences = self._fetch(self.preference_store.get_preferences, context.user_id)
        except UpstreamFetchError:
            logger.warning("Preference lookup failed for user %s; ranking without preferences", context.user_id)
            return context
        return replace(context, preferences=preferences) if preferences is not None else context

    def _fetch(self, call: Callable[..., Any], *args: Any) -> Any:
        """Run a store call on a worker thread and wait at most ``fetch_timeout_seconds``."""

        with self._executor_lock:
            executor = self._executor
            future = executor.submit(call, *args)
        try:
            return future.result(timeout=self.settings.fetch_timeout_seconds)
        except FutureTimeout as exc:
            future.cancel()
            self._retire_executor(executor)
            raise UpstreamFetchError(
                f"{getattr(call, '__name__', 'store call')} exceeded {self.settings.fetch_timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise UpstreamFetchError(f"{getattr(call, '__name__', 'store call')} failed: {exc}") from exc

    def _comparables_for(
        self,
        artwork: CandidateArtwork,
        memo: Dict[Tuple[Optional[str], ...], List[ComparableArtwork]],
    ) -> List[ComparableArtwork]:
        key = (artwork.medium, artwork.genre, artwork.style)
        if key not in memo:
            try:
                memo[key] = list(
                    self._fetch(
                        self.store.fetch_comparable, artwork.medium, artwork.genre, artwork.style,
                        self.settings.comparable_limit,
                    )
                )
            except UpstreamFetchError:
                logger.warning("Comparable fetch failed for artwork %s; using fixed price bands", artwork.id)
                memo[key] = []
        return memo[key]

    def _rank(
        self,
        candidates: Sequence[CandidateArtwork],
        semantic: SemanticQuery,
        context: SearchContext,
    ) -> List[SemanticSearchResult]:
        graph = SimilarityGraph(candidates, limit=self.settings.similar_limit)
        comparables: Dict[Tuple[Optional[str], ...], List[ComparableArtwork]] = {}
        results: List[SemanticSearchResult] = []
        for artwork in candidates:
            relevance = self.scorer.score(artwork, semantic, context)
            if relevance <= self.settings.relevance_threshold:
                continue
            results.append(self._build_result(artwork, semantic, context, graph, comparables, relevance))
        results.sort(key=lambda result: result.relevance_score, reverse=True)
        return results

    def _build_result(
        self,
        artwork: CandidateArtwork,
        semantic: SemanticQuery,
        context: SearchContext,
        graph: SimilarityGraph,
        comparables: Dict[Tuple[Optional[str], ...], List[ComparableArtwork]],
        relevance: float,
        visual_similarity: Optional[float] = None,
    ) -> SemanticSearchResult:
        if visual_similarity is None:
            visual_similarity = self.scorer.visual_similarity(artwork, semantic)
        return SemanticSearchResult(
            id=artwork.id,
            title=artwork.title,
            artist_name=artwork.artist_name or UNKNOWN_ARTIST,
            description=artwork.description,
            medium=artwork.medium,
            genre=artwork.genre,
            price=artwork.price,
            currency=artwork.currency,
            primary_image_url=artwork.primary_image_url,
            relevance_score=relevance,
            semantic_matches=self.scorer.semantic_matches(artwork, semantic),
            similar_artworks=graph.neighbours(artwork),
            market_context=self.market.analyze(artwork, self._comparables_for(artwork, comparables)),
            visual_similarity=visual_similarity,
            conceptual_similarity=self.scorer.conceptual_similarity(artwork, semantic),
            emotional_resonance=self.scorer.emotional_resonance(artwork, semantic),
            cultural_context=self.analyzer.extract_cultural_context(artwork.description or ""),
            historical_significance=self.scorer.historical_significance(artwork),
            contemporary_relevance=self.scorer.contemporary_relevance(artwork, context),
        )
