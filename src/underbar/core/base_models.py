"""State models owned by function decorators and schedulers.

Each decorator builds exactly one state object at decoration time and keeps it
in the closure of the callable it returns; nothing else holds a reference to
it. The models are plain pydantic models with assignment left unvalidated, so
updating them on every call stays cheap.
"""

from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "OnceState",
    "MemoCache",
    "ThrottleState",
    "ScheduledTask",
]


class OnceState(BaseModel):
    """Run-once bookkeeping: whether the call succeeded and what it returned."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    called: bool = False
    result: Any = None


class MemoCache(BaseModel):
    """Results of a memoized function keyed by canonical argument key."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    entries: Dict[Any, Any] = Field(default_factory=dict)

    def __contains__(self, key: Tuple[type, Hashable]) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class ThrottleState(BaseModel):
    """Rate-limit bookkeeping for a throttled function.

    Attributes:
        last_invoked_ms: Scheduler time of the last real invocation, None before
            the first one.
        pending_args: Positional arguments of the latest call coalesced into
            the trailing invocation.
        pending_kwargs: Keyword arguments of that same call.
        trailing_scheduled: Whether a trailing invocation is queued.
        result: Return value of the most recent real invocation.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    last_invoked_ms: Optional[float] = None
    pending_args: Optional[Tuple[Any, ...]] = None
    pending_kwargs: Dict[str, Any] = Field(default_factory=dict)
    trailing_scheduled: bool = False
    result: Any = None


class ScheduledTask(BaseModel):
    """A deferred callback waiting in a scheduler queue.

    Tasks order by due time, then by the sequence number assigned when they
    were scheduled, so callbacks due at the same instant run first-in
    first-out.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    due_ms: float
    sequence: int
    callback: Callable[..., Any]
    args: Tuple[Any, ...] = ()

    @property
    def sort_key(self) -> Tuple[float, int]:
        return (self.due_ms, self.sequence)

    def run(self) -> Any:
        return self.callback(*self.args)
