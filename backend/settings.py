import os

# Basic settings helper to read environment configuration.

DEFAULT_PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_float(val: str | None, default: float | None = None) -> float | None:
    if val is None or not val.strip():
        return default
    return float(val)


class Settings:
    def __init__(self) -> None:
        self.PLACES_API_KEY: str | None = os.getenv("PLACES_API_KEY") or None
        self.PLACES_BASE_URL: str = os.getenv("PLACES_BASE_URL", DEFAULT_PLACES_BASE_URL)
        self.PLACES_LOOKUP_ENABLED: bool = _as_bool(os.getenv("PLACES_LOOKUP_ENABLED"), True)
        # None keeps the transport default (requests waits indefinitely)
        self.PLACES_TIMEOUT_SECONDS: float | None = _as_float(os.getenv("PLACES_TIMEOUT_SECONDS"))
        self.PLACES_MIN_INTERVAL: float = _as_float(os.getenv("PLACES_MIN_INTERVAL"), 0.0) or 0.0
        self.PLACES_LANGUAGE: str | None = os.getenv("PLACES_LANGUAGE") or None
        self.SEARCH_DEBOUNCE_MS: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "300"))
        self.SEARCH_THROTTLE_MS: int = int(os.getenv("SEARCH_THROTTLE_MS", "1000"))


settings = Settings()
