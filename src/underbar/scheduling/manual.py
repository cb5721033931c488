"""Deterministic scheduler driven by a virtual clock.

``ManualScheduler`` never looks at wall-clock time: the clock only moves when
:meth:`ManualScheduler.advance` is called, and due callbacks run inside that
call. This makes timing-dependent code such as ``throttle`` reproducible.

Example:
    >>> scheduler = ManualScheduler()
    >>> fired = []
    >>> scheduler.call_later(100, fired.append, "done")
    >>> scheduler.advance(99)
    >>> fired
    []
    >>> scheduler.advance(1)
    >>> fired
    ['done']
"""

import heapq
import itertools
from typing import Any, Callable, List, Tuple

from underbar.core.base_models import ScheduledTask
from underbar.core.types import validate_wait
from underbar.logger.logger import get_logger
from underbar.scheduling.protocol import Scheduler

logger = get_logger(__name__)


class ManualScheduler(Scheduler):
    """Scheduler whose clock advances only on request.

    Args:
        start_ms: Initial clock reading in milliseconds.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._counter = itertools.count()
        self._queue: List[Tuple[Tuple[float, int], ScheduledTask]] = []

    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        return len(self._queue)

    def call_later(
        self, delay_ms: float, callback: Callable[..., Any], *args: Any
    ) -> None:
        delay_ms = validate_wait(delay_ms)
        task = ScheduledTask(
            due_ms=self._now + delay_ms,
            sequence=next(self._counter),
            callback=callback,
            args=args,
        )
        heapq.heappush(self._queue, (task.sort_key, task))
        logger.debug(f"Queued task #{task.sequence} due at {task.due_ms}ms")

    def advance(self, ms: float) -> None:
        """Move the clock forward and run every callback that falls due.

        Callbacks run in due-time order, ties broken by scheduling order. A
        callback scheduled while advancing runs too if it falls due before the
        target time. An exception raised by a callback propagates; the clock
        then stays at that callback's due time.

        Args:
            ms: Non-negative number of milliseconds to advance.
        """
        target = self._now + validate_wait(ms)
        while self._queue and self._queue[0][0][0] <= target:
            _, task = heapq.heappop(self._queue)
            self._now = task.due_ms
            task.run()
        self._now = target

    def run_all(self) -> None:
        """Advance until the queue is empty."""
        while self._queue:
            self.advance(self._queue[0][0][0] - self._now)
