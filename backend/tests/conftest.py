import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from services.places_types import (  # noqa: E402
    AutocompleteResponse,
    PlaceDetailsResponse,
)


class FakePlacesProvider:
    """In-memory stand-in for the places web service."""

    def __init__(self):
        self.autocomplete_response = AutocompleteResponse(status="ZERO_RESULTS")
        self.details_response = PlaceDetailsResponse(status="NOT_FOUND")
        self.autocomplete_error = None
        self.details_error = None
        self.autocomplete_calls = []
        self.details_calls = []

    async def autocomplete(self, query, session_token, types=None):
        self.autocomplete_calls.append({"query": query, "session_token": session_token, "types": types})
        if self.autocomplete_error is not None:
            raise self.autocomplete_error
        return self.autocomplete_response

    async def details(self, place_id, fields=("name", "geometry", "types")):
        self.details_calls.append({"place_id": place_id, "fields": tuple(fields)})
        if self.details_error is not None:
            raise self.details_error
        return self.details_response


@pytest.fixture
def fake_provider():
    return FakePlacesProvider()
