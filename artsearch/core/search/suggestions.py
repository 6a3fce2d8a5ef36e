# Path: artsearch/core/search/suggestions.py
# Purpose: Expand an analyzed query into follow-up search phrases.
# Layer: core/search.
# Details: Concepts, styles, and emotions each contribute fixed phrase templates.

from __future__ import annotations

from typing import List

from artsearch.core.models.domain import SemanticQuery

CONCEPT_TEMPLATES = ("{} art", "{} painting", "{} sculpture")
STYLE_TEMPLATES = ("{} artwork", "{} painting")
EMOTION_TEMPLATES = ("{} art", "artwork that feels {}")


def build_suggestions(query: SemanticQuery, limit: int = 10) -> List[str]:
    """Return up to ``limit`` de-duplicated suggestions in concept, style, emotion order."""

    suggestions: List[str] = []
    for names, templates in (
        (query.concepts, CONCEPT_TEMPLATES),
        (query.styles, STYLE_TEMPLATES),
        (query.emotions, EMOTION_TEMPLATES),
    ):
        for name in names:
            label = name.replace("_", " ")
            suggestions.extend(template.format(label) for template in templates)
    return list(dict.fromkeys(suggestions))[:limit]
