# Path: artsearch/api/payloads.py
# Purpose: Convert loosely-typed JSON request bodies into domain dataclasses.
# Layer: api.
# Details: Unknown keys and malformed values are dropped rather than rejected.

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping, Optional

from artsearch.core.models.domain import BudgetRange, SearchContext, SearchFilters, SearchIntent


def _known_fields(cls: type, payload: Mapping[str, Any]) -> Dict[str, Any]:
    names = {field.name for field in dataclasses.fields(cls)}
    return {key: value for key, value in payload.items() if key in names}


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def filters_from_payload(payload: Any) -> Optional[SearchFilters]:
    if not isinstance(payload, Mapping):
        return None
    return SearchFilters(**_known_fields(SearchFilters, payload))


def context_from_payload(payload: Any) -> Optional[SearchContext]:
    if not isinstance(payload, Mapping):
        return None
    values = _known_fields(SearchContext, payload)

    intent = values.get("intent")
    try:
        values["intent"] = SearchIntent(intent) if intent is not None else None
    except ValueError:
        values["intent"] = None

    budget = values.get("budget_range")
    values["budget_range"] = None
    if isinstance(budget, Mapping):
        low, high = _number(budget.get("min")), _number(budget.get("max"))
        if low is not None and high is not None:
            values["budget_range"] = BudgetRange(min=low, max=high)

    if not isinstance(values.get("preferences"), (Mapping, type(None))):
        values["preferences"] = None
    return SearchContext(**values)
