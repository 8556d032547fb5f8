"""
Autocomplete resolution with a local catalog backstop.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from domain.errors import ProviderQueryError
from domain.models import SearchFallback, SearchOk, SearchOutcome, SearchResult
from services.catalog import LocalCatalog
from services.categories import classify_types
from services.places_client import PlacesProvider
from services.places_types import PlacesStatus, Prediction
from services.session_tokens import SessionTokenManager

logger = logging.getLogger(__name__)


def prediction_to_result(prediction: Prediction, index: int) -> SearchResult:
    # id is positional and only unique within one response; coordinates are
    # filled in by place details after selection
    return SearchResult(
        id=index + 1,
        name=prediction.display_name,
        category=classify_types(prediction.types),
        lat=0.0,
        lng=0.0,
        external_ref=prediction.place_id,
    )


class AutocompleteResolver:
    def __init__(
        self,
        provider: Optional[PlacesProvider],
        tokens: SessionTokenManager,
        catalog: LocalCatalog,
    ):
        self.provider = provider
        self.tokens = tokens
        self.catalog = catalog

    async def resolve(self, query: str) -> SearchOutcome:
        """Resolve a trimmed, non-empty query into candidates.

        Never raises for provider problems: an unconfigured provider yields
        catalog matches, and a failing one yields a `SearchFallback`.
        """
        if self.provider is None:
            logger.warning("Using sample data for search as the places API is not available")
            return SearchOk(self.catalog.filter(query))

        token = self.tokens.current()
        logger.debug("Searching for: %s", query)
        try:
            # no type filter: cities, regions and establishments all match
            response = await self.provider.autocomplete(query, session_token=token, types=None)
        except ProviderQueryError as exc:
            return self._fallback(query, exc)

        if response.status == PlacesStatus.OK.value:
            results: List[SearchResult] = [
                prediction_to_result(p, i) for i, p in enumerate(response.predictions)
            ]
            logger.debug("Search predictions received: %d", len(results))
            return SearchOk(results)
        if response.status == PlacesStatus.ZERO_RESULTS.value:
            logger.debug("No search results found for %r", query)
            return SearchOk([])
        return self._fallback(query, ProviderQueryError(response.status))

    def _fallback(self, query: str, exc: ProviderQueryError) -> SearchFallback:
        logger.error("Places API search error: %s; falling back to sample data", exc.status)
        return SearchFallback(results=self.catalog.filter(query), reason=exc)
