"""
Location search façade used by UI collaborators.

`LocationSearch` is the context object for one search box: it owns the
provider handle, the session token, the catalog and the debounce/throttle
timers. Independent instances do not share any state.

In-flight provider requests are not cancelled by newer input, so a result
for an older query can arrive after a newer one. Callers should compare the
query they rendered for against their current input before displaying.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from domain.errors import LocationSearchError
from domain.models import SearchOk, SearchOutcome, SearchResult
from services.autocomplete import AutocompleteResolver
from services.catalog import LocalCatalog, get_default_catalog
from services.debounce import Debouncer, Throttler
from services.place_details import PlaceDetailResolver
from services.places_client import PlacesProvider, build_places_client
from services.session_tokens import SessionTokenManager
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

ResultCallback = Callable[[List[SearchResult]], None]
ErrorCallback = Callable[[LocationSearchError], None]

DEFAULT_DEBOUNCE_SECONDS = 0.3
DEFAULT_THROTTLE_SECONDS = 1.0


class LocationSearch:
    def __init__(
        self,
        provider: Optional[PlacesProvider] = None,
        catalog: Optional[LocalCatalog] = None,
        tokens: Optional[SessionTokenManager] = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        throttle_seconds: float = DEFAULT_THROTTLE_SECONDS,
    ):
        self.provider = provider
        self.catalog = catalog or get_default_catalog()
        self.tokens = tokens or SessionTokenManager()
        self.autocomplete = AutocompleteResolver(provider, self.tokens, self.catalog)
        self.details = PlaceDetailResolver(provider)
        self._debounced = Debouncer(self._deliver, debounce_seconds)
        self._throttled = Throttler(self.search, throttle_seconds)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "LocationSearch":
        config = config or default_settings
        return cls(
            provider=build_places_client(config),
            debounce_seconds=config.SEARCH_DEBOUNCE_MS / 1000.0,
            throttle_seconds=config.SEARCH_THROTTLE_MS / 1000.0,
        )

    @property
    def provider_available(self) -> bool:
        return self.provider is not None

    # -- search -----------------------------------------------------------

    def search(
        self,
        query: str,
        on_result: ResultCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """Debounced search entry point; must be called on the event loop.

        Empty input answers immediately with no results and drops any
        search still waiting out its quiet window.
        """
        if not (query or "").strip():
            self._debounced.cancel()
            on_result([])
            return
        self._debounced(query, on_result, on_error)

    def throttled_search(
        self,
        query: str,
        on_result: ResultCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """Same as `search`, but fed at most once per throttle window."""
        self._throttled(query, on_result, on_error)

    async def lookup(self, query: str) -> SearchOutcome:
        """Resolve a query right away and return the typed outcome."""
        trimmed = (query or "").strip()
        if not trimmed:
            return SearchOk([])
        return await self.autocomplete.resolve(trimmed)

    async def _deliver(
        self,
        query: str,
        on_result: ResultCallback,
        on_error: Optional[ErrorCallback],
    ) -> None:
        outcome = await self.lookup(query)
        on_result(outcome.results)
        if outcome.degraded and on_error is not None:
            on_error(outcome.reason)

    def cancel_pending(self) -> None:
        self._debounced.cancel()
        self._throttled.cancel()

    async def drain(self) -> None:
        """Wait until every scheduled or running search has delivered."""
        await self._debounced.drain()

    def search_catalog(self, query: str) -> List[SearchResult]:
        """Catalog-only search, no provider involved."""
        if not (query or "").strip():
            return []
        return self.catalog.filter(query.strip())

    # -- selection --------------------------------------------------------

    async def resolve_selection(self, candidate: SearchResult) -> SearchResult:
        """Turn a chosen candidate into a result with real coordinates.

        Catalog rows come back unchanged without any network call. The
        session token is rotated once per selection, whether or not the
        detail lookup succeeded.
        """
        try:
            if not candidate.is_provider_origin:
                return candidate
            return await self.details.resolve(candidate.external_ref)
        finally:
            self.reset_session()

    def reset_session(self) -> None:
        self.tokens.rotate()

    # -- catalog ----------------------------------------------------------

    def all_points(self) -> List[SearchResult]:
        return self.catalog.all_points()

    def get_point(self, point_id: int) -> Optional[SearchResult]:
        return self.catalog.get_point(point_id)
