# Path: artsearch/core/models/domain.py
# Purpose: Define domain models shared across query analysis, ranking, and the search pipeline.
# Layer: core/models.
# Details: Lightweight dataclasses simplify serialization between API, cache keys, and core services.

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple


class SearchIntent(str, Enum):
    """Why the user is searching; drives context adjustments in ranking."""

    BROWSE = "browse"
    RESEARCH = "research"
    PURCHASE = "purchase"
    GIFT = "gift"
    INVESTMENT = "investment"


class DemandLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriceCompetitiveness(str, Enum):
    BELOW = "below"
    AVERAGE = "average"
    ABOVE = "above"


@dataclass(frozen=True)
class SemanticQuery:
    """Structured interpretation of a raw query, built once per request."""

    original: str
    concepts: Tuple[str, ...] = ()
    emotions: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()
    intent: SearchIntent = SearchIntent.BROWSE
    visual_elements: Tuple[str, ...] = ()
    cultural_context: Tuple[str, ...] = ()
    temporal_context: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    entities: Tuple[str, ...] = ()
    sentiment: float = 0.0
    complexity: float = 0.0
    specificity: float = 0.0


@dataclass(frozen=True)
class BudgetRange:
    min: float
    max: float

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


@dataclass
class SearchFilters:
    """Caller-supplied filters. Structural fields are applied by the store; the rest ride along."""

    price_min: Optional[float] = None
    price_max: Optional[float] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    size_min: Optional[float] = None
    size_max: Optional[float] = None
    medium: List[str] = field(default_factory=list)
    genre: List[str] = field(default_factory=list)
    artist: List[str] = field(default_factory=list)
    location: Optional[str] = None
    availability: Optional[bool] = None
    color_palette: List[str] = field(default_factory=list)
    mood: List[str] = field(default_factory=list)
    style: List[str] = field(default_factory=list)
    technique: List[str] = field(default_factory=list)
    subject_matter: List[str] = field(default_factory=list)
    cultural_period: List[str] = field(default_factory=list)
    movement: List[str] = field(default_factory=list)
    rarity: Optional[str] = None
    condition: List[str] = field(default_factory=list)
    provenance: List[str] = field(default_factory=list)
    exhibition_history: Optional[bool] = None
    awards: Optional[bool] = None
    publications: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchContext:
    """Who is searching and under what circumstances."""

    user_id: Optional[str] = None
    search_history: List[str] = field(default_factory=list)
    preferences: Optional[Dict[str, Any]] = None
    location: Optional[str] = None
    device: Optional[str] = None
    time_of_day: Optional[str] = None
    season: Optional[str] = None
    current_trends: List[str] = field(default_factory=list)
    emotional_state: Optional[str] = None
    intent: Optional[SearchIntent] = None
    budget_range: Optional[BudgetRange] = None
    timeline: Optional[str] = None
    collection_goals: List[str] = field(default_factory=list)
    existing_collection: List[str] = field(default_factory=list)
    complementary_artworks: List[str] = field(default_factory=list)
    conflicting_artworks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def favorites(self, key: str) -> List[str]:
        """Return a list-valued preference such as ``favorite_mediums``, tolerating bad shapes."""

        if not isinstance(self.preferences, Mapping):
            return []
        value = self.preferences.get(key)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [item for item in value if isinstance(item, str)]
        return []


@dataclass
class ArtistProfile:
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    specializations: List[str] = field(default_factory=list)


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_int(value: Any) -> Optional[int]:
    number = _as_float(value)
    return int(number) if number is not None else None


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive timestamps as UTC so they compare with aware clocks."""

    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return as_utc(parsed)
    return None


def _as_str_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return []


@dataclass
class CandidateArtwork:
    """Artwork row fetched from the store for a single request."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    medium: Optional[str] = None
    genre: Optional[str] = None
    style: Optional[str] = None
    subject: Optional[str] = None
    price: Optional[float] = None
    currency: str = "ZAR"
    year_created: Optional[int] = None
    width: Optional[float] = None
    height: Optional[float] = None
    primary_image_url: Optional[str] = None
    views_count: int = 0
    likes_count: int = 0
    inquiries_count: int = 0
    created_at: Optional[datetime] = None
    is_public: bool = True
    is_for_sale: bool = True
    status: str = "available"
    appreciation_rate: Optional[float] = None
    is_limited_edition: bool = False
    exhibition_history: List[str] = field(default_factory=list)
    awards: List[str] = field(default_factory=list)
    artist: ArtistProfile = field(default_factory=ArtistProfile)

    def __post_init__(self) -> None:
        self.created_at = as_utc(self.created_at)

    @property
    def artist_name(self) -> Optional[str]:
        return self.artist.name

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CandidateArtwork":
        """Build an artwork from a loosely-typed store row, ignoring malformed fields."""

        artist_payload = record.get("artist") or record.get("profiles") or {}
        if not isinstance(artist_payload, Mapping):
            artist_payload = {}
        edition = record.get("edition_info")
        limited = bool(record.get("is_limited_edition")) or (
            isinstance(edition, Mapping) and bool(edition.get("is_limited"))
        )
        return cls(
            id=str(record["id"]),
            title=record.get("title"),
            description=record.get("description"),
            medium=record.get("medium"),
            genre=record.get("genre"),
            style=record.get("style"),
            subject=record.get("subject"),
            price=_as_float(record.get("price")),
            currency=record.get("currency") or "ZAR",
            year_created=_as_int(record.get("year_created")),
            width=_as_float(record.get("width")),
            height=_as_float(record.get("height")),
            primary_image_url=record.get("primary_image_url"),
            views_count=_as_int(record.get("views_count")) or 0,
            likes_count=_as_int(record.get("likes_count")) or 0,
            inquiries_count=_as_int(record.get("inquiries_count")) or 0,
            created_at=_as_datetime(record.get("created_at")),
            is_public=bool(record.get("is_public", True)),
            is_for_sale=bool(record.get("is_for_sale", True)),
            status=record.get("status") or "available",
            appreciation_rate=_as_float(record.get("appreciation_rate")),
            is_limited_edition=limited,
            exhibition_history=_as_str_list(record.get("exhibition_history")),
            awards=_as_str_list(record.get("awards")),
            artist=ArtistProfile(
                name=artist_payload.get("name"),
                bio=artist_payload.get("bio"),
                location=artist_payload.get("location"),
                specializations=_as_str_list(artist_payload.get("specializations")),
            ),
        )

    def to_record(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["created_at"] = self.created_at.isoformat() if self.created_at else None
        return payload


@dataclass(frozen=True)
class ComparableArtwork:
    price: float
    medium: Optional[str] = None
    genre: Optional[str] = None
    style: Optional[str] = None
    year_created: Optional[int] = None


@dataclass(frozen=True)
class TrendingRecord:
    title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    medium: Optional[str] = None
    subject: Optional[str] = None
    created_at: Optional[datetime] = None
    views_count: int = 0
    likes_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", as_utc(self.created_at))


@dataclass(frozen=True)
class MarketContext:
    trend_score: float
    demand_level: DemandLevel
    price_competitiveness: PriceCompetitiveness
    rarity_score: float


@dataclass
class SemanticSearchResult:
    """Ranked search hit with explanations, market signals, and recommendations."""

    id: str
    title: Optional[str]
    artist_name: str
    description: Optional[str]
    medium: Optional[str]
    genre: Optional[str]
    price: Optional[float]
    currency: str
    primary_image_url: Optional[str]
    relevance_score: float
    semantic_matches: List[str]
    similar_artworks: List[str]
    market_context: MarketContext
    visual_similarity: float = 0.0
    conceptual_similarity: float = 0.0
    emotional_resonance: float = 0.0
    cultural_context: List[str] = field(default_factory=list)
    historical_significance: float = 0.0
    contemporary_relevance: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        context = payload["market_context"]
        context["demand_level"] = self.market_context.demand_level.value
        context["price_competitiveness"] = self.market_context.price_competitiveness.value
        return payload


__all__ = [
    "ArtistProfile",
    "BudgetRange",
    "CandidateArtwork",
    "ComparableArtwork",
    "DemandLevel",
    "MarketContext",
    "PriceCompetitiveness",
    "SearchContext",
    "SearchFilters",
    "SearchIntent",
    "SemanticQuery",
    "SemanticSearchResult",
    "TrendingRecord",
]
