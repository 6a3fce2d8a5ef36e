"""
Tests for QueryAnalyzer and SentimentAnalyzer.
"""

import pytest

from artsearch.core.analysis import QueryAnalyzer
from artsearch.core.models.domain import SearchIntent


@pytest.fixture(scope="module")
def analyzer():
    return QueryAnalyzer()


def test_empty_query_yields_empty_analysis(analyzer):
    query = analyzer.analyze("")

    assert query.concepts == ()
    assert query.emotions == ()
    assert query.styles == ()
    assert query.visual_elements == ()
    assert query.keywords == ()
    assert query.entities == ()
    assert query.intent is SearchIntent.BROWSE
    assert query.sentiment == 0.0


def test_none_query_is_treated_as_empty(analyzer):
    assert analyzer.analyze(None).original == ""


def test_direct_concept_match(analyzer):
    assert "abstract" in analyzer.analyze("abstract art").concepts


def test_fuzzy_concept_match_tolerates_typos(analyzer):
    assert "landscape" in analyzer.analyze("landscpe paintings").concepts


def test_short_words_do_not_fuzzy_match(analyzer):
    assert analyzer.analyze("xyz").concepts == ()


def test_implicit_concepts_from_cue_words(analyzer):
    concepts = analyzer.analyze("play of color and texture").concepts

    assert "color_focused" in concepts
    assert "texture_focused" in concepts
    assert len(concepts) == len(set(concepts))


@pytest.mark.parametrize(
    "text, intent",
    [
        ("I want to buy a landscape painting", SearchIntent.PURCHASE),
        ("a present for my mother", SearchIntent.GIFT),
        ("artwork that will appreciate in value", SearchIntent.INVESTMENT),
        ("I want to study cubism", SearchIntent.RESEARCH),
        ("quiet harbour scenes", SearchIntent.BROWSE),
    ],
)
def test_intent_detection(analyzer, text, intent):
    assert analyzer.extract_intent(text) is intent


def test_keywords_drop_stop_words_and_short_words(analyzer):
    assert analyzer.extract_keywords("The bright red painting") == ["bright", "red", "painting"]


def test_entities_capture_artists_locations_and_movements(analyzer):
    entities = analyzer.extract_entities("paintings by Claude Monet from Paris inspired by Impressionism")

    assert "Claude Monet" in entities
    assert "Paris" in entities
    assert "impressionism" in entities


def test_specificity_indicators(analyzer):
    assert analyzer.analyze_specificity("exactly this one") == pytest.approx(0.7)
    assert analyzer.analyze_specificity("something maybe") == pytest.approx(0.1)
    assert analyzer.analyze_specificity("a painting") == pytest.approx(0.5)


def test_complexity_is_bounded(analyzer):
    long_query = " ".join(["abstract landscape portrait urban nature"] * 10)

    assert analyzer.analyze(long_query).complexity == 1.0
    assert analyzer.analyze("abstract").complexity == pytest.approx(1 / 20 + 1 / 10 + 0.5)


class TestSentiment:
    def test_intensifier_scales_word_weight(self, analyzer):
        assert analyzer.analyze("very happy and vibrant").sentiment == pytest.approx(0.9)

    def test_negation_flips_sign(self, analyzer):
        positive = analyzer.analyze_sentiment("I love this piece")
        negative = analyzer.analyze_sentiment("I do not love this piece")

        assert positive == pytest.approx(0.88)
        assert negative == pytest.approx(-0.8)
        assert positive > negative

    def test_question_dampens(self, analyzer):
        assert analyzer.analyze_sentiment("I love this?") == pytest.approx(0.56)

    def test_conditional_phrasing_dampens(self, analyzer):
        assert analyzer.analyze_sentiment("I would love this") == pytest.approx(0.48)

    def test_art_context_does_not_amplify_negative_scores(self, analyzer):
        assert analyzer.analyze_sentiment("an awful painting") == pytest.approx(-0.7)

    def test_exclamation_amplifies(self, analyzer):
        assert analyzer.analyze_sentiment("happy!") == pytest.approx(0.78)

    def test_comparative_phrasing_dampens(self, analyzer):
        assert analyzer.analyze_sentiment("happy compared to") == pytest.approx(0.48)
        assert analyzer.analyze_sentiment("happy and better than") == pytest.approx(0.48)

    def test_long_queries_dampen(self, analyzer):
        query = " ".join(["happy"] + ["blue"] * 20)

        assert analyzer.analyze_sentiment(query) == pytest.approx(0.54)
        assert analyzer.analyze_sentiment(" ".join(["happy"] + ["blue"] * 19)) == pytest.approx(0.6)

    def test_score_is_clamped(self, analyzer):
        assert analyzer.analyze_sentiment("extremely ecstatic!") == 1.0

    def test_no_sentiment_words(self, analyzer):
        assert analyzer.analyze_sentiment("blue canvas") == 0.0
