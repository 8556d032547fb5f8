from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PlacesStatus(str, Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    NOT_FOUND = "NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    # local codes, never sent by the provider
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"


@dataclass
class Prediction:
    place_id: str  # opaque provider id
    main_text: str
    description: str = ""
    types: List[str] = field(default_factory=list)
    raw: Optional[dict] = None

    @property
    def display_name(self) -> str:
        return self.main_text or self.description


@dataclass
class AutocompleteResponse:
    status: str
    predictions: List[Prediction] = field(default_factory=list)


@dataclass
class PlaceDetails:
    name: Optional[str]
    lat: Optional[float]  # None when the provider returned no geometry
    lng: Optional[float]
    types: List[str] = field(default_factory=list)
    raw: Optional[dict] = None

    @property
    def has_location(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass
class PlaceDetailsResponse:
    status: str
    result: Optional[PlaceDetails] = None
