"""
Error taxonomy for the location search subsystem.

ZERO_RESULTS from the provider is a normal, empty outcome and has no
exception here.
"""
from typing import Optional


class LocationSearchError(Exception):
    """Base class for search and resolution failures."""


class ProviderUnavailable(LocationSearchError):
    """The live places provider was never configured.

    Search falls back to the local catalog silently; detail resolution has no
    fallback and fails with this error.
    """

    def __init__(self, message: str = "Places service not initialized"):
        super().__init__(message)


# Name used by callers of the detail resolver.
ServiceUnavailable = ProviderUnavailable


class ProviderQueryError(LocationSearchError):
    """The provider answered with a non-OK, non-ZERO_RESULTS status, or the
    request itself failed."""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Places API error: {status}")


class DetailResolutionError(LocationSearchError):
    """Place details could not be resolved into coordinates."""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Failed to fetch place details: {status}")
