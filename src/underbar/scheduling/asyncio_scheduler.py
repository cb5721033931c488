"""Scheduler backed by an asyncio event loop."""

import asyncio
import time
from typing import Any, Callable, Optional

from underbar.core.errors import SchedulerError
from underbar.logger.logger import get_logger
from underbar.scheduling.protocol import Scheduler

logger = get_logger(__name__)


class AsyncioScheduler(Scheduler):
    """Run deferred callbacks with ``loop.call_later``.

    Without an explicit loop, the loop running at scheduling time is used, so
    one instance can be shared across ``asyncio.run`` invocations. Only
    :meth:`call_later` needs a loop.

    Args:
        loop: Event loop to schedule on. Defaults to the running loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerError(
                "AsyncioScheduler needs a running event loop or an explicit loop"
            ) from e

    def now(self) -> float:
        """Loop time in milliseconds.

        Outside a running loop this reads ``time.monotonic()``, the clock the
        default event loop uses, so synchronous callers such as the leading
        edge of ``throttle`` work without a loop.
        """
        if self._loop is not None:
            return self._loop.time() * 1000.0
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return time.monotonic() * 1000.0
        return loop.time() * 1000.0

    def call_later(
        self, delay_ms: float, callback: Callable[..., Any], *args: Any
    ) -> None:
        loop = self._resolve_loop()
        logger.debug(f"Scheduling {_name(callback)} in {delay_ms}ms on asyncio loop")
        loop.call_later(delay_ms / 1000.0, callback, *args)


def _name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", repr(callback))
