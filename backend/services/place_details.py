"""
Resolve a provider place id into a full SearchResult with coordinates.
"""
from __future__ import annotations

import hashlib
import logging
import re
from typing import Optional

from domain.errors import DetailResolutionError, ProviderQueryError, ProviderUnavailable
from domain.models import SearchResult
from services.categories import classify_types
from services.places_client import DETAIL_FIELDS, PlacesProvider
from services.places_types import PlacesStatus

logger = logging.getLogger(__name__)

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
UNKNOWN_PLACE_NAME = "Unknown Place"


def stable_place_number(place_id: str) -> int:
    """Small deterministic id for a provider place id.

    The first 8 characters are read leniently as base 16: leading whitespace,
    an optional sign and an optional `0x` are skipped, then the leading hex
    digits count. The value is taken modulo 1000 with the sign of the
    dividend, so `"-1a"` gives -26.
    Ids without leading hex digits use the SHA-1 of the id instead.
    Collisions between different ids are possible.
    """
    match = _HEX_PREFIX.match(place_id[:8])
    if match:
        sign, digits = match.groups()
        value = int(digits, 16) % 1000
        return -value if sign == "-" else value
    digest = hashlib.sha1(place_id.encode("utf-8")).hexdigest()
    return int(digest[:8], 16) % 1000


class PlaceDetailResolver:
    def __init__(self, provider: Optional[PlacesProvider]):
        self.provider = provider

    async def resolve(self, place_id: str) -> SearchResult:
        if self.provider is None:
            logger.error("Places service not initialized")
            raise ProviderUnavailable()

        try:
            response = await self.provider.details(place_id, fields=DETAIL_FIELDS)
        except ProviderQueryError as exc:
            logger.error("Failed to fetch place details: %s", exc.status)
            raise DetailResolutionError(exc.status) from exc

        place = response.result
        if response.status != PlacesStatus.OK.value or place is None or not place.has_location:
            logger.error("Failed to fetch place details: %s", response.status)
            raise DetailResolutionError(response.status)

        return SearchResult(
            id=stable_place_number(place_id),
            name=place.name or UNKNOWN_PLACE_NAME,
            category=classify_types(place.types),
            lat=place.lat,
            lng=place.lng,
            external_ref=place_id,
        )
