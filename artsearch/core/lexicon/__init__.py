# Path: artsearch/core/lexicon/__init__.py
# Purpose: Package initializer for the static vocabularies.
# Layer: core/lexicon.
# Details: Exposes the immutable Lexicon and its process-wide default instance.

from .store import Lexicon, LexiconEntry, build_lexicon, default_lexicon

__all__ = ["Lexicon", "LexiconEntry", "build_lexicon", "default_lexicon"]
