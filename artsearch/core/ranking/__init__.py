# Path: artsearch/core/ranking/__init__.py
# Purpose: Package initializer for relevance ranking.
# Layer: core/ranking.
# Details: Exposes the relevance scorer and the candidate similarity graph.

from .relevance import RelevanceScorer, term_ratio
from .similarity_graph import SimilarityGraph

__all__ = ["RelevanceScorer", "SimilarityGraph", "term_ratio"]
