# Path: artsearch/core/analysis/__init__.py
# Purpose: Package initializer for query analysis.
# Layer: core/analysis.
# Details: Exposes the query analyzer, sentiment scorer, and pure text similarity helpers.

from .query_analyzer import QueryAnalyzer
from .sentiment import SentimentAnalyzer
from .text_similarity import jaccard_similarity, levenshtein_distance, tokenize, word_similarity, words

__all__ = [
    "QueryAnalyzer",
    "SentimentAnalyzer",
    "jaccard_similarity",
    "levenshtein_distance",
    "tokenize",
    "word_similarity",
    "words",
]
