"""Deferred-task schedulers used by ``delay`` and ``throttle``."""

from underbar.scheduling.protocol import Scheduler
from underbar.scheduling.asyncio_scheduler import AsyncioScheduler
from underbar.scheduling.manual import ManualScheduler

__all__ = [
    "Scheduler",
    "AsyncioScheduler",
    "ManualScheduler",
]
