# Path: artsearch/core/analysis/text_similarity.py
# Purpose: Pure text similarity helpers used by query analysis and ranking.
# Layer: core/analysis.
# Details: Jaccard similarity over lower-cased token sets and Levenshtein-based word similarity.

from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List, Optional

_EDGE_PUNCTUATION = re.compile(r"^[^\w]+|[^\w]+$")


def tokenize(text: Optional[str]) -> List[str]:
    """Split on whitespace after lower-casing; ``None`` and blank strings yield no tokens."""

    if not text:
        return []
    return text.lower().split()


def words(text: Optional[str]) -> List[str]:
    """Like :func:`tokenize` but with leading/trailing punctuation stripped from each token."""

    stripped = (_EDGE_PUNCTUATION.sub("", token) for token in tokenize(text))
    return [token for token in stripped if token]


def jaccard_similarity(text1: Optional[str], text2: Optional[str], ignore: AbstractSet[str] = frozenset()) -> float:
    """Return |A ∩ B| / |A ∪ B| for the token sets of both texts, minus ``ignore``."""

    first = set(tokenize(text1)) - ignore
    second = set(tokenize(text2)) - ignore
    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)


def levenshtein_distance(first: str, second: str) -> int:
    """Classic edit distance with unit insert/delete/substitute costs."""

    if first == second:
        return 0
    if not first:
        return len(second)
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, start=1):
        current = [i]
        for j, right in enumerate(second, start=1):
            cost = 0 if left == right else 1
            current.append(min(current[j - 1] + 1, previous[j] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def word_similarity(first: str, second: str) -> float:
    """Normalize edit distance into [0, 1]; identical words score 1."""

    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in text for phrase in phrases)


__all__ = ["contains_any", "jaccard_similarity", "levenshtein_distance", "tokenize", "word_similarity", "words"]
