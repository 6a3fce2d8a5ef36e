# Path: artsearch/core/__init__.py
# Purpose: Package initializer for the core search layer.
# Layer: core.
# Details: Aggregates subpackages for lexicon, analysis, visual features, market signals, ranking, caching, stores, and search.
