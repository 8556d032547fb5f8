"""
Debounce and throttle helpers for keystroke-driven searches.

Both run on the current asyncio event loop. Debouncing only ever cancels a
call that is still waiting out its quiet window; a downstream coroutine that
has already started runs to completion.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Set

logger = logging.getLogger(__name__)


class Debouncer:
    def __init__(self, func: Callable[..., Awaitable[Any]], wait: float):
        self.func = func
        self.wait = wait
        self._timer: Optional[asyncio.Task] = None
        self._running: Set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.create_task(self._fire_later(args, kwargs))

    def cancel(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _fire_later(self, args: tuple, kwargs: dict) -> None:
        await asyncio.sleep(self.wait)
        # past this point a newer call must not cancel the downstream work
        self._timer = None
        task = asyncio.get_running_loop().create_task(self.func(*args, **kwargs))
        self._running.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task) -> None:
        self._running.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced call failed", exc_info=exc)

    async def drain(self) -> None:
        """Wait for the pending call (if any) and every started call."""
        if self._timer is not None:
            try:
                await self._timer
            except asyncio.CancelledError:
                pass
        if self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)


class Throttler:
    """At most one call per `wait` seconds, with leading and trailing edges.

    Calls landing inside the window collapse into a single trailing call that
    uses the latest arguments.
    """

    def __init__(self, func: Callable[..., Any], wait: float):
        self.func = func
        self.wait = wait
        self._last_call: Optional[float] = None
        self._trailing: Optional[asyncio.TimerHandle] = None
        self._pending_args: Optional[tuple] = None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        loop = asyncio.get_running_loop()
        now = loop.time()
        if self._trailing is None and (self._last_call is None or now - self._last_call >= self.wait):
            self._last_call = now
            self.func(*args, **kwargs)
            return
        self._pending_args = (args, kwargs)
        if self._trailing is None:
            remaining = self.wait - (now - (self._last_call or now))
            self._trailing = loop.call_later(max(remaining, 0.0), self._fire_trailing)

    def _fire_trailing(self) -> None:
        self._trailing = None
        if self._pending_args is None:
            return
        args, kwargs = self._pending_args
        self._pending_args = None
        self._last_call = asyncio.get_running_loop().time()
        self.func(*args, **kwargs)

    def cancel(self) -> None:
        if self._trailing is not None:
            self._trailing.cancel()
        self._trailing = None
        self._pending_args = None
