# Path: artsearch/core/ranking/relevance.py
# Purpose: Score candidates against a SemanticQuery and explain the match.
# Layer: core/ranking.
# Details: Weighted field similarity plus concept ratio, then multiplicative context adjustments.

from __future__ import annotations

from typing import AbstractSet, Dict, List, Optional, Sequence

from artsearch.core.analysis.text_similarity import jaccard_similarity, tokenize
from artsearch.core.lexicon import Lexicon, default_lexicon
from artsearch.core.market.analyzer import Clock, clamp, recency_score, utc_now
from artsearch.core.models.domain import CandidateArtwork, SearchContext, SearchIntent, SemanticQuery


FIELD_WEIGHTS: Dict[str, float] = {
    "title": 0.30,
    "description": 0.20,
    "medium": 0.15,
    "genre": 0.15,
    "artist": 0.10,
}
CONCEPT_WEIGHT = 0.10

PREFERENCE_BOOST = 1.2
IN_BUDGET_BOOST = 1.1
OVER_BUDGET_PENALTY = 0.8
INVESTMENT_BOOST = 1.3
GIFT_BOOST = 1.2
GIFT_PRICE_CEILING = 1000.0


def _text(*parts: Optional[str]) -> str:
    return " ".join(part or "" for part in parts).lower()


def term_ratio(terms: Sequence[str], text: str) -> float:
    """Fraction of ``terms`` (underscores read as spaces) that occur in ``text``."""

    if not terms:
        return 0.0
    matches = sum(1 for term in terms if term.replace("_", " ").lower() in text)
    return matches / len(terms)


class RelevanceScorer:
    """Compute relevance and the per-result explanation scores."""

    def __init__(self, lexicon: Optional[Lexicon] = None, clock: Clock = utc_now) -> None:
        self.lexicon = lexicon or default_lexicon()
        self.clock = clock

    # ---------------------- relevance ----------------------
    def score(self, artwork: CandidateArtwork, query: SemanticQuery, context: Optional[SearchContext] = None) -> float:
        """Base field similarity plus concept ratio, adjusted for context and clamped to [0, 1]."""

        fields = {
            "title": artwork.title,
            "description": artwork.description,
            "medium": artwork.medium,
            "genre": artwork.genre,
            "artist": artwork.artist_name,
        }
        ignore = self.ignored_terms(query.original)
        score = sum(
            FIELD_WEIGHTS[name] * self.field_similarity(value, query.original, ignore) for name, value in fields.items()
        )
        score += CONCEPT_WEIGHT * self.conceptual_similarity(artwork, query)
        if context is not None:
            score = self.apply_context(score, artwork, context)
        return clamp(score)

    def ignored_terms(self, query_text: str) -> AbstractSet[str]:
        """Generic art nouns, unless the query consists of nothing else."""

        generic = self.lexicon.generic_art_nouns
        if set(tokenize(query_text)) <= generic:
            return frozenset()
        return generic

    def field_similarity(
        self, field_text: Optional[str], query_text: str, ignore: Optional[AbstractSet[str]] = None
    ) -> float:
        if ignore is None:
            ignore = self.ignored_terms(query_text)
        return jaccard_similarity(field_text, query_text, ignore=ignore)

    @staticmethod
    def apply_context(score: float, artwork: CandidateArtwork, context: SearchContext) -> float:
        if artwork.medium is not None and artwork.medium in context.favorites("favorite_mediums"):
            score *= PREFERENCE_BOOST
        if artwork.genre is not None and artwork.genre in context.favorites("favorite_genres"):
            score *= PREFERENCE_BOOST

        budget = context.budget_range
        if budget is not None:
            price = artwork.price or 0.0
            if budget.contains(price):
                score *= IN_BUDGET_BOOST
            elif price > budget.max:
                score *= OVER_BUDGET_PENALTY

        if context.intent == SearchIntent.INVESTMENT and (artwork.appreciation_rate or 0.0) > 0:
            score *= INVESTMENT_BOOST
        if context.intent == SearchIntent.GIFT and artwork.price is not None and artwork.price <= GIFT_PRICE_CEILING:
            score *= GIFT_BOOST
        return score

    # ---------------------- explanations ----------------------
    @staticmethod
    def semantic_matches(artwork: CandidateArtwork, query: SemanticQuery) -> List[str]:
        text = _text(artwork.title, artwork.description)
        matches = [f"Concept: {concept}" for concept in query.concepts if concept.lower() in text]
        matches.extend(f"Emotion: {emotion}" for emotion in query.emotions if emotion.lower() in text)
        for style in query.styles:
            needle = style.lower()
            if needle in (artwork.genre or "").lower() or needle in (artwork.medium or "").lower():
                matches.append(f"Style: {style}")
        return matches

    @staticmethod
    def visual_similarity(artwork: CandidateArtwork, query: SemanticQuery) -> float:
        return term_ratio(query.visual_elements, _text(artwork.title, artwork.description))

    @staticmethod
    def conceptual_similarity(artwork: CandidateArtwork, query: SemanticQuery) -> float:
        return term_ratio(query.concepts, _text(artwork.title, artwork.description, artwork.medium, artwork.genre))

    @staticmethod
    def emotional_resonance(artwork: CandidateArtwork, query: SemanticQuery) -> float:
        return term_ratio(query.emotions, _text(artwork.title, artwork.description, artwork.medium, artwork.genre))

    def historical_significance(self, artwork: CandidateArtwork) -> float:
        score = 0.0
        if artwork.year_created is not None:
            age = max(0, self.clock().year - artwork.year_created)
            score += min(0.5, age / 100)
        score += min(0.3, 0.1 * len(artwork.exhibition_history))
        score += min(0.2, 0.1 * len(artwork.awards))
        return clamp(score)

    def contemporary_relevance(self, artwork: CandidateArtwork, context: Optional[SearchContext] = None) -> float:
        score = 0.5 + 0.3 * recency_score(artwork.created_at, self.clock())
        if artwork.likes_count + artwork.inquiries_count > 10:
            score += 0.2
        trends = context.current_trends if context is not None else []
        if trends:
            text = _text(artwork.title, artwork.description)
            score += 0.3 * term_ratio(trends, text)
        return clamp(score)
