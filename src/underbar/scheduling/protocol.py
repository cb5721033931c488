"""Scheduler protocol definition for deferred callbacks."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Scheduler(ABC):
    """Abstract base class for cooperative deferred-task schedulers.

    A scheduler owns a monotonic clock and runs callbacks after a minimum
    delay, on the same thread that drives it. Scheduled callbacks cannot be
    cancelled.
    """

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds on the scheduler's monotonic clock."""
        pass

    @abstractmethod
    def call_later(
        self, delay_ms: float, callback: Callable[..., Any], *args: Any
    ) -> None:
        """Run ``callback(*args)`` once, no sooner than ``delay_ms`` from now.

        Args:
            delay_ms: Minimum delay in milliseconds.
            callback: Function to call.
            *args: Positional arguments captured now and passed at run time.
        """
        pass
