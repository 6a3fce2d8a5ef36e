# Path: artsearch/core/visual/features.py
# Purpose: Describe the measurements taken from an image and the vocabulary they imply.
# Layer: core/visual.
# Details: VisualFeatures converts into a SemanticQuery so image search reuses the text matching path.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from artsearch.core.models.domain import SearchIntent, SemanticQuery

RGB = Tuple[int, int, int]


@dataclass
class VisualFeatures:
    """Pixel statistics plus the concepts, emotions, styles, and elements derived from them."""

    dominant_colors: List[RGB]
    brightness: float
    contrast: float
    symmetry: float
    rule_of_thirds: bool
    edge_count: int
    edge_density: float
    texture: str
    concepts: List[str] = field(default_factory=list)
    emotions: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)
    elements: List[str] = field(default_factory=list)

    @property
    def vocabulary(self) -> List[str]:
        """All derived terms, de-duplicated, in concept/emotion/style/element order."""

        return list(dict.fromkeys(self.concepts + self.emotions + self.styles + self.elements))

    def to_semantic_query(self) -> SemanticQuery:
        return SemanticQuery(
            original=" ".join(term.replace("_", " ") for term in self.vocabulary),
            concepts=tuple(self.concepts),
            emotions=tuple(self.emotions),
            styles=tuple(self.styles),
            intent=SearchIntent.BROWSE,
            visual_elements=tuple(self.elements),
        )


def is_warm(color: RGB) -> bool:
    red, green, blue = color
    return red > green and red > blue


def is_cool(color: RGB) -> bool:
    red, green, blue = color
    return blue > red and blue > green
