"""
Google Places web service client (autocomplete + place details) with a shared
session and a simple minimum-interval guard between requests.
"""
from __future__ import annotations

import asyncio
import logging
import threading
import time
from typing import Any, List, Optional, Protocol, Sequence

import requests

from domain.errors import ProviderQueryError
from services.places_types import (
    AutocompleteResponse,
    PlaceDetails,
    PlaceDetailsResponse,
    PlacesStatus,
    Prediction,
)
from settings import DEFAULT_PLACES_BASE_URL, Settings

logger = logging.getLogger(__name__)

DETAIL_FIELDS = ("name", "geometry", "types")


class PlacesProvider(Protocol):
    async def autocomplete(
        self,
        query: str,
        session_token: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> AutocompleteResponse:
        ...

    async def details(
        self,
        place_id: str,
        fields: Sequence[str] = DETAIL_FIELDS,
    ) -> PlaceDetailsResponse:
        ...


def _parse_prediction(item: dict) -> Prediction:
    formatting = item.get("structured_formatting") or {}
    return Prediction(
        place_id=str(item.get("place_id", "")),
        main_text=formatting.get("main_text") or "",
        description=item.get("description") or "",
        types=list(item.get("types") or []),
        raw=item,
    )


def _parse_details(item: dict) -> PlaceDetails:
    location = (item.get("geometry") or {}).get("location") or {}
    lat = location.get("lat")
    lng = location.get("lng")
    return PlaceDetails(
        name=item.get("name"),
        lat=float(lat) if lat is not None else None,
        lng=float(lng) if lng is not None else None,
        types=list(item.get("types") or []),
        raw=item,
    )


class GooglePlacesClient:
    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        min_interval: float = 0.0,
        language: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_PLACES_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.min_interval = min_interval
        self.language = language
        self._session = session or requests.Session()
        self._lock = threading.Lock()
        self._last_request_ts = 0.0

    def _throttled_get(self, path: str, params: dict[str, Any]) -> dict:
        """Blocking GET against the places API, returning decoded JSON."""
        with self._lock:
            now = time.time()
            delta = now - self._last_request_ts
            if delta < self.min_interval:
                time.sleep(self.min_interval - delta)
            self._last_request_ts = time.time()
        query = dict(params, key=self.api_key)
        if self.language:
            query["language"] = self.language
        try:
            resp = self._session.get(f"{self.base_url}/{path}", params=query, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Places request to %s failed: %s", path, exc)
            raise ProviderQueryError(PlacesStatus.TRANSPORT_ERROR.value, str(exc)) from exc
        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("Places response from %s was not JSON: %s", path, exc)
            raise ProviderQueryError(PlacesStatus.INVALID_RESPONSE.value) from exc
        if not isinstance(data, dict):
            raise ProviderQueryError(PlacesStatus.INVALID_RESPONSE.value)
        return data

    def autocomplete_sync(
        self,
        query: str,
        session_token: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> AutocompleteResponse:
        params: dict[str, Any] = {"input": query}
        if session_token:
            params["sessiontoken"] = session_token
        if types:
            params["types"] = "|".join(types)
        data = self._throttled_get("autocomplete/json", params)
        status = str(data.get("status") or PlacesStatus.UNKNOWN_ERROR.value)
        predictions: List[Prediction] = []
        try:
            for item in data.get("predictions") or []:
                if isinstance(item, dict) and item.get("place_id"):
                    predictions.append(_parse_prediction(item))
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Malformed autocomplete payload: %s", exc)
            raise ProviderQueryError(PlacesStatus.INVALID_RESPONSE.value) from exc
        logger.debug(
            "GooglePlacesClient.autocomplete: status=%s got %d predictions",
            status,
            len(predictions),
        )
        return AutocompleteResponse(status=status, predictions=predictions)

    def details_sync(self, place_id: str, fields: Sequence[str] = DETAIL_FIELDS) -> PlaceDetailsResponse:
        params = {"place_id": place_id, "fields": ",".join(fields)}
        data = self._throttled_get("details/json", params)
        status = str(data.get("status") or PlacesStatus.UNKNOWN_ERROR.value)
        item = data.get("result")
        try:
            result = _parse_details(item) if isinstance(item, dict) else None
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Malformed place details payload: %s", exc)
            raise ProviderQueryError(PlacesStatus.INVALID_RESPONSE.value) from exc
        logger.debug("GooglePlacesClient.details: status=%s found=%s", status, result is not None)
        return PlaceDetailsResponse(status=status, result=result)

    async def autocomplete(
        self,
        query: str,
        session_token: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> AutocompleteResponse:
        return await asyncio.to_thread(self.autocomplete_sync, query, session_token, types)

    async def details(self, place_id: str, fields: Sequence[str] = DETAIL_FIELDS) -> PlaceDetailsResponse:
        return await asyncio.to_thread(self.details_sync, place_id, fields)


def build_places_client(config: Settings) -> Optional[GooglePlacesClient]:
    """Return a configured client, or None when live lookups are off."""
    if not config.PLACES_LOOKUP_ENABLED:
        logger.info("Places lookup disabled; search will use sample data")
        return None
    if not config.PLACES_API_KEY:
        logger.warning(
            "PLACES_API_KEY not set in environment; search will use sample data "
            "and place details are unavailable."
        )
        return None
    logger.info("Places services initialized successfully")
    return GooglePlacesClient(
        api_key=config.PLACES_API_KEY,
        base_url=config.PLACES_BASE_URL,
        timeout=config.PLACES_TIMEOUT_SECONDS,
        min_interval=config.PLACES_MIN_INTERVAL,
        language=config.PLACES_LANGUAGE,
    )
