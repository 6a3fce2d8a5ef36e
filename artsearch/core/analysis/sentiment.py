# Path: artsearch/core/analysis/sentiment.py
# Purpose: Score query sentiment in [-1, 1] from a weighted lexicon.
# Layer: core/analysis.
# Details: Handles intensifiers, negation, and phrasing-level multipliers; deterministic by construction.

from __future__ import annotations

from typing import List

from artsearch.core.lexicon import Lexicon

from .text_similarity import contains_any, words


class SentimentAnalyzer:
    """Lexicon-driven sentiment scoring."""

    QUESTION_FACTOR = 0.7
    EXCLAMATION_FACTOR = 1.3
    COMPARATIVE_FACTOR = 0.8
    CONDITIONAL_FACTOR = 0.6
    ART_CONTEXT_FACTOR = 1.1
    LONG_QUERY_WORDS = 20
    LONG_QUERY_FACTOR = 0.9

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    def score(self, text: str) -> float:
        tokens = words(text)
        base = self._average_word_score(tokens)
        adjusted = self._apply_context(text, tokens, base)
        return round(max(-1.0, min(1.0, adjusted)), 6)

    def _average_word_score(self, tokens: List[str]) -> float:
        total = 0.0
        matched = 0
        for index, token in enumerate(tokens):
            weight = self.lexicon.sentiment.get(token)
            if weight is None:
                continue
            previous = tokens[index - 1] if index > 0 else ""
            total += weight * self._intensity(tokens, index) * (-1.0 if previous in self.lexicon.negations else 1.0)
            matched += 1
        return total / matched if matched else 0.0

    def _intensity(self, tokens: List[str], index: int) -> float:
        """Multiplier from the word (or two-word phrase) right before ``tokens[index]``."""

        if index >= 2:
            phrase = f"{tokens[index - 2]} {tokens[index - 1]}"
            if phrase in self.lexicon.intensifiers:
                return self.lexicon.intensifiers[phrase]
        if index >= 1:
            return self.lexicon.intensifiers.get(tokens[index - 1], 1.0)
        return 1.0

    def _apply_context(self, text: str, tokens: List[str], score: float) -> float:
        lowered = text.lower()
        if "?" in text:
            score *= self.QUESTION_FACTOR
        if "!" in text:
            score *= self.EXCLAMATION_FACTOR
        if contains_any(lowered, self.lexicon.comparative_phrases):
            score *= self.COMPARATIVE_FACTOR
        if any(token in self.lexicon.conditional_words for token in tokens):
            score *= self.CONDITIONAL_FACTOR
        if any(token in self.lexicon.art_context_words for token in tokens):
            # Boost positive readings only; negative scores keep their magnitude.
            score = max(score, score * self.ART_CONTEXT_FACTOR)
        if len(tokens) > self.LONG_QUERY_WORDS:
            score *= self.LONG_QUERY_FACTOR
        return score
