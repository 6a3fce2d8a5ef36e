# Path: artsearch/core/lexicon/store.py
# Purpose: Freeze the raw vocabularies into an immutable Lexicon object.
# Layer: core/lexicon.
# Details: default_lexicon() builds the object once per process; analyzers receive it explicitly.

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from . import vocabulary


@dataclass(frozen=True)
class LexiconEntry:
    """A named category with the words that signal it."""

    name: str
    keywords: Tuple[str, ...]
    synonyms: Tuple[str, ...] = ()
    weight: float = 1.0

    @property
    def terms(self) -> Tuple[str, ...]:
        return self.keywords + self.synonyms


def _freeze_terms(values: Iterable[str]) -> Tuple[str, ...]:
    """Lower-case and de-duplicate while preserving order."""

    return tuple(dict.fromkeys(value.lower() for value in values))


def _entries(table: Mapping[str, Sequence[str]]) -> Tuple[LexiconEntry, ...]:
    return tuple(LexiconEntry(name=name, keywords=_freeze_terms(words)) for name, words in table.items())


@dataclass(frozen=True)
class Lexicon:
    """Read-only vocabularies consumed by query analysis, ranking, and trending."""

    concepts: Tuple[LexiconEntry, ...]
    emotions: Tuple[LexiconEntry, ...]
    styles: Tuple[LexiconEntry, ...]
    visual_elements: Tuple[LexiconEntry, ...]
    cultural_contexts: Tuple[LexiconEntry, ...]
    temporal_contexts: Tuple[LexiconEntry, ...]
    intents: Tuple[LexiconEntry, ...]
    implicit_concepts: Tuple[LexiconEntry, ...]
    sentiment: Mapping[str, float]
    intensifiers: Mapping[str, float]
    negations: frozenset
    specific_indicators: Tuple[str, ...]
    vague_indicators: Tuple[str, ...]
    comparative_phrases: Tuple[str, ...]
    conditional_words: frozenset
    art_context_words: frozenset
    generic_art_nouns: frozenset
    stop_words: frozenset
    movement_names: Tuple[str, ...]
    rare_mediums: frozenset
    default_trending: Tuple[str, ...]

    def category(self, group: str, name: str) -> Optional[LexiconEntry]:
        """Look up a single entry, e.g. ``category("styles", "cubist")``."""

        for entry in getattr(self, group):
            if entry.name == name:
                return entry
        return None

    def names(self, group: str) -> List[str]:
        return [entry.name for entry in getattr(self, group)]


def build_lexicon(
    concepts: Optional[Dict[str, tuple]] = None,
    emotions: Optional[Dict[str, Sequence[str]]] = None,
    styles: Optional[Dict[str, Sequence[str]]] = None,
    sentiment: Optional[Dict[str, float]] = None,
) -> Lexicon:
    """Assemble a Lexicon, optionally replacing the main tables (handy for tests)."""

    concept_table = vocabulary.CONCEPTS if concepts is None else concepts
    concept_entries = tuple(
        LexiconEntry(
            name=name,
            keywords=_freeze_terms(keywords),
            synonyms=_freeze_terms(synonyms),
            weight=float(weight),
        )
        for name, (keywords, synonyms, weight) in concept_table.items()
    )
    sentiment_table = vocabulary.SENTIMENT if sentiment is None else sentiment

    return Lexicon(
        concepts=concept_entries,
        emotions=_entries(vocabulary.EMOTIONS if emotions is None else emotions),
        styles=_entries(vocabulary.STYLES if styles is None else styles),
        visual_elements=_entries(vocabulary.VISUAL_ELEMENTS),
        cultural_contexts=_entries(vocabulary.CULTURAL_CONTEXTS),
        temporal_contexts=_entries(vocabulary.TEMPORAL_CONTEXTS),
        intents=_entries(vocabulary.INTENTS),
        implicit_concepts=_entries(vocabulary.IMPLICIT_CONCEPTS),
        sentiment=MappingProxyType({word.lower(): float(score) for word, score in sentiment_table.items()}),
        intensifiers=MappingProxyType(dict(vocabulary.INTENSIFIERS)),
        negations=frozenset(vocabulary.NEGATIONS),
        specific_indicators=tuple(vocabulary.SPECIFIC_INDICATORS),
        vague_indicators=tuple(vocabulary.VAGUE_INDICATORS),
        comparative_phrases=tuple(vocabulary.COMPARATIVE_PHRASES),
        conditional_words=frozenset(vocabulary.CONDITIONAL_WORDS),
        art_context_words=frozenset(vocabulary.ART_CONTEXT_WORDS),
        generic_art_nouns=frozenset(vocabulary.GENERIC_ART_NOUNS),
        stop_words=frozenset(vocabulary.STOP_WORDS),
        movement_names=tuple(vocabulary.MOVEMENT_NAMES),
        rare_mediums=frozenset(vocabulary.RARE_MEDIUMS),
        default_trending=tuple(vocabulary.DEFAULT_TRENDING_SEARCHES),
    )


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Return the process-wide lexicon, building it on first use."""

    return build_lexicon()
