"""
Session tokens group a run of autocomplete calls into one provider session.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _new_token() -> str:
    return uuid.uuid4().hex


class SessionTokenManager:
    """Owns the single active session token of a search context.

    absent -> active on the first `current()` call; `rotate()` swaps in a new
    token after each finalized selection.
    """

    def __init__(self, token_factory: Optional[Callable[[], str]] = None):
        self._factory = token_factory or _new_token
        self._token: Optional[str] = None

    @property
    def active(self) -> bool:
        return self._token is not None

    @property
    def token(self) -> Optional[str]:
        """Current token without allocating one."""
        return self._token

    def current(self) -> str:
        if self._token is None:
            self._token = self._factory()
            logger.debug("Started places session")
        return self._token

    def rotate(self) -> str:
        token = self._factory()
        if token == self._token:
            logger.warning("Session token factory returned the active token; session not renewed")
        self._token = token
        logger.debug("Rotated places session token")
        return token

    def clear(self) -> None:
        self._token = None
