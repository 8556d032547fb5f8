"""
Core domain models for location search.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from domain.errors import ProviderQueryError


class Category(str, Enum):
    """User-facing place categories.

    Classification may also yield a free-form category derived from the first
    raw provider tag, so `SearchResult.category` is typed as a plain string.
    """
    LANDMARK = "landmark"
    MUSEUM = "museum"
    HISTORICAL = "historical"
    RELIGIOUS = "religious"
    PARK = "park"
    TOUR = "tour"
    CITY = "city"


@dataclass(frozen=True)
class SearchResult:
    """A candidate place exchanged across the search subsystem.

    Provider-origin results coming out of autocomplete carry placeholder
    coordinates (0, 0); only catalog-origin or detail-resolved results have
    usable lat/lng.
    """
    id: int
    name: str
    category: str
    lat: float
    lng: float
    external_ref: Optional[str] = None  # provider place id, absent for catalog rows

    @property
    def is_provider_origin(self) -> bool:
        return self.external_ref is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SearchOk:
    """Results that can be displayed as-is."""
    results: List[SearchResult] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return False


@dataclass
class SearchFallback:
    """Catalog results served because the live provider failed.

    `results` is authoritative for display; `reason` should be surfaced to the
    user separately (e.g. a "using sample data" notice).
    """
    results: List[SearchResult]
    reason: ProviderQueryError

    @property
    def degraded(self) -> bool:
        return True


SearchOutcome = Union[SearchOk, SearchFallback]
