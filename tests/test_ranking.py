"""
Tests for the relevance scorer and the similarity graph.
"""

from datetime import timedelta

import pytest

from artsearch.core.analysis import QueryAnalyzer
from artsearch.core.models.domain import BudgetRange, SearchContext, SearchIntent, SemanticQuery
from artsearch.core.ranking import RelevanceScorer, SimilarityGraph

from conftest import NOW, fixed_now


@pytest.fixture(scope="module")
def analyzer():
    return QueryAnalyzer()


@pytest.fixture
def scorer():
    return RelevanceScorer(clock=fixed_now)


class TestSimilarityGraph:
    def test_matching_pair_scores_full_marks(self, make_artwork):
        first = make_artwork("s1", medium="Oil on Canvas", genre="Landscape", price=1000.0, year_created=2020)
        second = make_artwork("s2", medium="Oil on Canvas", genre="Landscape", price=1300.0, year_created=2022)
        graph = SimilarityGraph([first, second])

        assert SimilarityGraph.pair_score(first, second) == pytest.approx(1.0)
        assert graph.build() == {"s1": ["s2"], "s2": ["s1"]}

    def test_half_score_does_not_qualify(self, make_artwork):
        first = make_artwork("s1", medium="Oil", price=1000.0, year_created=2000)
        second = make_artwork("s2", medium="Oil", price=1200.0, year_created=2030)

        assert SimilarityGraph.pair_score(first, second) == pytest.approx(0.5)
        assert SimilarityGraph([first, second]).neighbours(first) == []

    def test_neighbours_capped_and_exclude_self(self, make_artwork):
        artworks = [
            make_artwork(f"n{i}", medium="Oil", genre="Abstract", price=100.0, year_created=2000) for i in range(8)
        ]
        graph = SimilarityGraph(artworks, limit=5)

        neighbours = graph.neighbours(artworks[0])

        assert neighbours == ["n1", "n2", "n3", "n4", "n5"]
        assert "n0" not in neighbours

    def test_higher_scores_rank_first(self, make_artwork):
        subject = make_artwork("s", medium="Oil", genre="Abstract", price=100.0, year_created=2000)
        partial = make_artwork("p", medium="Oil", genre="Abstract", price=900.0, year_created=1900)
        full = make_artwork("f", medium="Oil", genre="Abstract", price=110.0, year_created=2001)

        assert SimilarityGraph([subject, partial, full]).neighbours(subject) == ["f", "p"]


class TestRelevanceScorer:
    def test_abstract_query_against_abstract_title(self, scorer, analyzer, make_artwork):
        artwork = make_artwork("a", title="Abstract Composition No. 4", genre="Abstract")
        query = analyzer.analyze("abstract art")

        assert "abstract" in query.concepts
        assert scorer.score(artwork, query) == pytest.approx(0.325)
        assert scorer.score(artwork, query) >= 0.3

    def test_generic_only_query_still_matches(self, scorer, make_artwork):
        artwork = make_artwork("g", title="Art")

        assert scorer.score(artwork, SemanticQuery(original="art")) == pytest.approx(0.3)
        assert scorer.ignored_terms("abstract art") == scorer.lexicon.generic_art_nouns
        assert scorer.ignored_terms("art work") == frozenset()

    def test_unrelated_artwork_scores_zero(self, scorer, analyzer, make_artwork):
        artwork = make_artwork("b", title="Harbour at Night", genre="Seascape")

        assert scorer.score(artwork, analyzer.analyze("abstract art")) == 0.0

    def test_context_adjustments_multiply(self, scorer, make_artwork):
        artwork = make_artwork("c", title="Red Sun", medium="Oil", genre="Abstract", price=800.0, appreciation_rate=0.05)
        query = SemanticQuery(original="red sun")
        base = scorer.score(artwork, query)

        preferred = SearchContext(preferences={"favorite_mediums": ["Oil"], "favorite_genres": ["Abstract"]})
        in_budget = SearchContext(budget_range=BudgetRange(min=500, max=1000))
        over_budget = SearchContext(budget_range=BudgetRange(min=100, max=500))
        investor = SearchContext(intent=SearchIntent.INVESTMENT)
        gifting = SearchContext(intent=SearchIntent.GIFT)

        assert base == pytest.approx(0.3)
        assert scorer.score(artwork, query, preferred) == pytest.approx(0.3 * 1.2 * 1.2)
        assert scorer.score(artwork, query, in_budget) == pytest.approx(0.3 * 1.1)
        assert scorer.score(artwork, query, over_budget) == pytest.approx(0.3 * 0.8)
        assert scorer.score(artwork, query, investor) == pytest.approx(0.3 * 1.3)
        assert scorer.score(artwork, query, gifting) == pytest.approx(0.3 * 1.2)

    def test_malformed_preferences_are_ignored(self, scorer, make_artwork):
        artwork = make_artwork("c", title="Red Sun", medium="Oil")
        query = SemanticQuery(original="red sun")
        context = SearchContext(preferences={"favorite_mediums": "Oil"})

        assert scorer.score(artwork, query, context) == scorer.score(artwork, query)

    def test_score_is_clamped_to_one(self, scorer, make_artwork):
        artwork = make_artwork(
            "d", title="Red Sun", description="red sun", medium="red sun", genre="red sun", artist_name="red sun"
        )
        context = SearchContext(
            preferences={"favorite_mediums": ["red sun"], "favorite_genres": ["red sun"]},
            intent=SearchIntent.INVESTMENT,
        )
        artwork.appreciation_rate = 0.1

        assert scorer.score(artwork, SemanticQuery(original="red sun"), context) == 1.0

    def test_semantic_matches(self, scorer, make_artwork):
        artwork = make_artwork("e", title="Joyful abstract", genre="Cubist painting", medium="Oil")
        query = SemanticQuery(original="", concepts=("abstract", "urban"), emotions=("joy",), styles=("cubist",))

        assert scorer.semantic_matches(artwork, query) == ["Concept: abstract", "Emotion: joy", "Style: cubist"]

    def test_similarity_ratios(self, scorer, make_artwork):
        artwork = make_artwork("f", title="Still life with light", description="soft colour", genre="Realism")
        query = SemanticQuery(
            original="",
            concepts=("still_life", "urban"),
            emotions=("calm",),
            visual_elements=("light", "line", "texture", "form"),
        )

        assert scorer.conceptual_similarity(artwork, query) == pytest.approx(0.5)
        assert scorer.emotional_resonance(artwork, query) == 0.0
        assert scorer.visual_similarity(artwork, query) == pytest.approx(0.25)

    def test_historical_significance(self, scorer, make_artwork):
        old = make_artwork("g", year_created=NOW.year - 200, exhibition_history=["a", "b", "c", "d"], awards=["x"])
        recent = make_artwork("h", year_created=NOW.year - 10)

        assert scorer.historical_significance(old) == pytest.approx(0.5 + 0.3 + 0.1)
        assert scorer.historical_significance(recent) == pytest.approx(0.1)

    def test_contemporary_relevance(self, scorer, make_artwork):
        fresh = make_artwork(
            "i", title="Neon city", likes_count=8, inquiries_count=5, created_at=NOW
        )
        context = SearchContext(current_trends=["neon", "ceramics"])

        assert scorer.contemporary_relevance(fresh, context) == 1.0
        stale = make_artwork("j", title="Quiet field", created_at=NOW - timedelta(days=3000))
        assert scorer.contemporary_relevance(stale) == pytest.approx(0.5, abs=1e-6)
