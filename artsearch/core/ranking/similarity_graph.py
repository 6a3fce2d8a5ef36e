# Path: artsearch/core/ranking/similarity_graph.py
# Purpose: Link each artwork to its closest neighbours within a candidate set.
# Layer: core/ranking.
# Details: Attribute overlap on medium, genre, price band, and creation year.

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from artsearch.core.models.domain import CandidateArtwork

QUALIFYING_SCORE = 0.5


class SimilarityGraph:
    """Pairwise attribute similarity over a fixed candidate list."""

    def __init__(self, artworks: Sequence[CandidateArtwork] = (), limit: int = 5) -> None:
        self.artworks = list(artworks)
        self.limit = limit

    @staticmethod
    def pair_score(subject: CandidateArtwork, other: CandidateArtwork) -> float:
        score = 0.0
        if subject.medium is not None and subject.medium == other.medium:
            score += 0.3
        if subject.genre is not None and subject.genre == other.genre:
            score += 0.3
        if subject.price and other.price is not None and subject.price > 0:
            if abs(subject.price - other.price) / subject.price < 0.5:
                score += 0.2
        if subject.year_created is not None and other.year_created is not None:
            if abs(subject.year_created - other.year_created) <= 10:
                score += 0.2
        return score

    def neighbours(self, subject: CandidateArtwork) -> List[str]:
        """Ids of the best-scoring qualifying artworks, excluding ``subject`` itself."""

        scored = []
        for other in self.artworks:
            if other.id == subject.id:
                continue
            score = self.pair_score(subject, other)
            if score > QUALIFYING_SCORE:
                scored.append((score, other.id))
        # sorted() is stable so ties keep candidate order.
        scored = sorted(scored, key=lambda item: item[0], reverse=True)
        return [artwork_id for _, artwork_id in scored[: self.limit]]

    def build(self, artworks: Optional[Sequence[CandidateArtwork]] = None) -> Dict[str, List[str]]:
        """Neighbour lists for every artwork, optionally replacing the candidate set first."""

        if artworks is not None:
            self.artworks = list(artworks)
        return {artwork.id: self.neighbours(artwork) for artwork in self.artworks}
