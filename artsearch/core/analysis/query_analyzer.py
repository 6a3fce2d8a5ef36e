# Path: artsearch/core/analysis/query_analyzer.py
# Purpose: Turn raw query text into a structured SemanticQuery.
# Layer: core/analysis.
# Details: Lexicon matching (substring + fuzzy word match), intent lookup, entity regexes, sentiment, complexity.

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from artsearch.core.lexicon import Lexicon, LexiconEntry, default_lexicon
from artsearch.core.models.domain import SearchIntent, SemanticQuery

from .sentiment import SentimentAnalyzer
from .text_similarity import word_similarity, words

logger = logging.getLogger(__name__)

_ARTIST_PATTERN = re.compile(r"\b(?i:painted by|created by|by|artist)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)")
_LOCATION_PATTERN = re.compile(r"\b(?i:in|from|at)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)")


def _phrase_pattern(phrases: Sequence[str], prefix: bool = False) -> "re.Pattern[str]":
    alternation = "|".join(re.escape(phrase) for phrase in sorted(phrases, key=len, reverse=True))
    tail = "" if prefix else r"\b"
    return re.compile(rf"\b(?:{alternation}){tail}", re.IGNORECASE)


class QueryAnalyzer:
    """Analyze free-text queries against an injected, immutable lexicon."""

    FUZZY_THRESHOLD = 0.7
    FUZZY_MIN_WORD_LENGTH = 4
    SPECIFICITY_STEP = 0.2

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon = lexicon or default_lexicon()
        self.sentiment = SentimentAnalyzer(self.lexicon)
        self._keyword_words: Dict[Tuple[str, str], Tuple[str, ...]] = {}
        for group in ("concepts", "emotions", "styles", "visual_elements", "cultural_contexts", "temporal_contexts"):
            for entry in getattr(self.lexicon, group):
                split = (word for keyword in entry.keywords for word in keyword.split())
                self._keyword_words[(group, entry.name)] = tuple(dict.fromkeys(split))
        self._intent_patterns = [
            (SearchIntent(entry.name), _phrase_pattern(entry.keywords, prefix=True)) for entry in self.lexicon.intents
        ]
        self._specific_patterns = [_phrase_pattern([word]) for word in self.lexicon.specific_indicators]
        self._vague_patterns = [_phrase_pattern([word]) for word in self.lexicon.vague_indicators]
        self._movement_pattern = _phrase_pattern(self.lexicon.movement_names)

    def analyze(self, text: Optional[str]) -> SemanticQuery:
        """Build the full SemanticQuery for ``text``; ``None`` is treated as an empty query."""

        text = text or ""
        concepts = self.extract_concepts(text)
        specificity = self.analyze_specificity(text)
        query = SemanticQuery(
            original=text,
            concepts=tuple(concepts),
            emotions=tuple(self.extract_emotions(text)),
            styles=tuple(self.extract_styles(text)),
            intent=self.extract_intent(text),
            visual_elements=tuple(self._match_group("visual_elements", text)),
            cultural_context=tuple(self.extract_cultural_context(text)),
            temporal_context=tuple(self._match_group("temporal_contexts", text)),
            keywords=tuple(self.extract_keywords(text)),
            entities=tuple(self.extract_entities(text)),
            sentiment=self.sentiment.score(text),
            complexity=self._complexity(text, len(concepts), specificity),
            specificity=specificity,
        )
        logger.debug(
            "Analyzed query %r: concepts=%s emotions=%s styles=%s intent=%s",
            text,
            query.concepts,
            query.emotions,
            query.styles,
            query.intent.value,
        )
        return query

    # ---------------------- lexicon matching ----------------------
    def extract_concepts(self, text: str) -> List[str]:
        concepts = self._match_group("concepts", text)
        lowered = text.lower()
        for entry in self.lexicon.implicit_concepts:
            if any(cue in lowered for cue in entry.keywords):
                concepts.append(entry.name)
        return list(dict.fromkeys(concepts))

    def extract_emotions(self, text: str) -> List[str]:
        return self._match_group("emotions", text)

    def extract_styles(self, text: str) -> List[str]:
        return self._match_group("styles", text)

    def extract_cultural_context(self, text: str) -> List[str]:
        return self._match_group("cultural_contexts", text)

    def _match_group(self, group: str, text: str) -> List[str]:
        lowered = text.lower()
        if not lowered.strip():
            return []
        long_words = [word for word in words(lowered) if len(word) >= self.FUZZY_MIN_WORD_LENGTH]
        matched: List[str] = []
        for entry in getattr(self.lexicon, group):
            if self._direct_match(lowered, entry) or self._fuzzy_match(long_words, self._keyword_words[(group, entry.name)]):
                matched.append(entry.name)
        return matched

    @staticmethod
    def _direct_match(lowered: str, entry: LexiconEntry) -> bool:
        return any(term in lowered for term in entry.terms)

    def _fuzzy_match(self, query_words: Sequence[str], keyword_words: Sequence[str]) -> bool:
        for keyword_word in keyword_words:
            for word in query_words:
                longest = max(len(word), len(keyword_word))
                # Edit distance is at least the length gap, so skip pairs that cannot reach the threshold.
                if abs(len(word) - len(keyword_word)) > (1 - self.FUZZY_THRESHOLD) * longest:
                    continue
                if word_similarity(keyword_word, word) >= self.FUZZY_THRESHOLD:
                    return True
        return False

    # ---------------------- intent / keywords / entities ----------------------
    def extract_intent(self, text: str) -> SearchIntent:
        for intent, pattern in self._intent_patterns:
            if pattern.search(text):
                return intent
        return SearchIntent.BROWSE

    def extract_keywords(self, text: str) -> List[str]:
        return [word for word in words(text) if len(word) > 2 and word not in self.lexicon.stop_words]

    def extract_entities(self, text: str) -> List[str]:
        entities: List[str] = []
        entities.extend(match.group(1) for match in _ARTIST_PATTERN.finditer(text))
        entities.extend(match.group(1) for match in _LOCATION_PATTERN.finditer(text))
        entities.extend(match.group(0).lower() for match in self._movement_pattern.finditer(text))
        return list(dict.fromkeys(entities))

    # ---------------------- scalar signals ----------------------
    def analyze_sentiment(self, text: str) -> float:
        return self.sentiment.score(text)

    def analyze_specificity(self, text: str) -> float:
        score = 0.5
        score += self.SPECIFICITY_STEP * sum(1 for pattern in self._specific_patterns if pattern.search(text))
        score -= self.SPECIFICITY_STEP * sum(1 for pattern in self._vague_patterns if pattern.search(text))
        return round(max(0.0, min(1.0, score)), 6)

    @staticmethod
    def _complexity(text: str, concept_count: int, specificity: float) -> float:
        word_count = len(text.split())
        return round(min(1.0, word_count / 20 + concept_count / 10 + specificity), 6)
