# Path: artsearch/core/search/trending.py
# Purpose: Rank search terms by the engagement and recency of the artworks that mention them.
# Layer: core/search.
# Details: 1-3 word n-grams from title and description plus genre, medium, and subject labels.

from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from artsearch.core.lexicon import Lexicon, default_lexicon
from artsearch.core.market.analyzer import Clock, recency_score, utc_now
from artsearch.core.models.domain import TrendingRecord

_PUNCTUATION = re.compile(r"[^\w\s]")

TEXT_WEIGHT = 1.0
LABEL_WEIGHTS = (("genre", 0.8), ("medium", 0.6), ("subject", 0.7))
# (min length, max length exclusive) per n-gram size.
NGRAM_LENGTHS = {1: (3, 50), 2: (5, 30), 3: (7, 40)}
TERM_LENGTH = (3, 50)


class TrendingAnalyzer:
    """Aggregate weighted term scores across recent artworks."""

    def __init__(self, lexicon: Optional[Lexicon] = None, clock: Clock = utc_now, term_limit: int = 20) -> None:
        self.lexicon = lexicon or default_lexicon()
        self.clock = clock
        self.term_limit = term_limit

    def record_score(self, record: TrendingRecord) -> float:
        engagement = record.views_count + 2 * record.likes_count
        return engagement * recency_score(record.created_at, self.clock())

    def search_terms(self, text: str) -> List[str]:
        """Unigrams, bigrams, and trigrams of the meaningful words in ``text``."""

        cleaned = _PUNCTUATION.sub("", text.lower()).split()
        kept = [word for word in cleaned if len(word) > 2 and word not in self.lexicon.stop_words]
        terms: List[str] = []
        for size, (shortest, longest) in NGRAM_LENGTHS.items():
            for start in range(len(kept) - size + 1):
                phrase = " ".join(kept[start: start + size])
                if shortest <= len(phrase) < longest:
                    terms.append(phrase)
        return terms

    def rank(self, records: Iterable[TrendingRecord]) -> List[str]:
        """Top terms by accumulated score; empty when no record yields a term."""

        scores: Dict[str, float] = defaultdict(float)
        for record in records:
            score = self.record_score(record)
            for term in self.search_terms(f"{record.title or ''} {record.description or ''}"):
                scores[term] += score * TEXT_WEIGHT
            for field, weight in LABEL_WEIGHTS:
                label = getattr(record, field)
                if label:
                    scores[label.lower().strip()] += score * weight

        shortest, longest = TERM_LENGTH
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        return [term for term, _ in ranked if shortest <= len(term) < longest][: self.term_limit]

    def fallback(self, limit: int) -> List[str]:
        return list(self.lexicon.default_trending[:limit])
