"""Function decorators that change how a function is called.

Each decorator builds its state object once, when it wraps the function, and
only the returned wrapper ever touches it. Calls to one wrapper are assumed to
never overlap (single-threaded, cooperative scheduling), so no locking is
done.

Deferred work (``delay`` and the trailing edge of ``throttle``) goes through a
:class:`~underbar.scheduling.protocol.Scheduler`. Scheduled calls cannot be
cancelled.
"""

import functools
import math
from typing import Any, Callable, Optional, Tuple

from underbar.core.base_models import MemoCache, OnceState, ThrottleState
from underbar.core.enums import PrimitiveKind
from underbar.core.errors import ArgumentError
from underbar.core.types import validate_wait
from underbar.functional.iteration import primitive_kind
from underbar.logger.logger import get_logger
from underbar.scheduling.asyncio_scheduler import AsyncioScheduler
from underbar.scheduling.protocol import Scheduler

__all__ = [
    "once",
    "memoize",
    "memo_key",
    "delay",
    "throttle",
]

logger = get_logger(__name__)

# NaN never equals itself, so it cannot serve as its own dict key
_NAN_KEY = "nan"


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", repr(fn))


def once(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``fn`` so it runs at most once.

    The first call runs ``fn`` with the caller's arguments and stores the
    result; every later call returns that result without running ``fn``. If
    ``fn`` raises, nothing is stored and the next call tries again.

    Example:
        >>> initialize = once(lambda: print("init") or 42)
        >>> initialize()
        init
        42
        >>> initialize()
        42
    """
    state = OnceState()

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        if not state.called:
            try:
                result = fn(*args, **kwargs)
            except Exception:
                logger.warning(
                    f"{_name(fn)} raised inside once(); it will run again on the next call"
                )
                raise
            state.result = result
            state.called = True
        return state.result

    return wrapper


def memo_key(argument: Any) -> Tuple[Any, Any]:
    """Canonical cache key for a memoized call's first argument.

    Primitives are keyed by their primitive kind, so ``1`` and ``1.0`` share a
    slot while ``True`` and ``"1"`` each get their own. Every NaN shares one
    slot. Other hashable values are keyed by their type.

    Raises:
        ArgumentError: If the argument is not hashable.
    """
    try:
        hash(argument)
    except TypeError as e:
        raise ArgumentError(
            f"memoize keys must be hashable primitives, got {type(argument).__name__}"
        ) from e
    if isinstance(argument, float) and math.isnan(argument):
        return (PrimitiveKind.NUMBER, _NAN_KEY)
    return (primitive_kind(argument) or type(argument), argument)


def memoize(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Cache ``fn``'s results by its first argument.

    The wrapped function is called at most once per distinct first argument
    for the lifetime of the wrapper; further arguments do not take part in the
    key. A call that raises is not cached. The cache is reachable as
    ``wrapper.cache``.

    Raises:
        ArgumentError: When called without arguments or with an unhashable
            first argument.
    """
    cache = MemoCache()

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        if not args:
            raise ArgumentError(
                f"{_name(fn)} is memoized and needs a first positional argument"
            )
        key = memo_key(args[0])
        if key in cache:
            return cache.entries[key]

        logger.debug(f"memoize cache miss for {_name(fn)}({args[0]!r})")
        try:
            result = fn(*args, **kwargs)
        except Exception:
            logger.warning(
                f"{_name(fn)}({args[0]!r}) raised; result not cached"
            )
            raise
        cache.entries[key] = result
        return result

    wrapper.cache = cache
    return wrapper


def delay(
    fn: Callable[..., Any],
    wait_ms: float,
    *args: Any,
    scheduler: Optional[Scheduler] = None,
) -> None:
    """Call ``fn(*args)`` once, no sooner than ``wait_ms`` from now.

    Returns immediately; the result of ``fn`` is discarded. The call cannot be
    cancelled.

    Args:
        fn: Function to call later.
        wait_ms: Minimum delay in milliseconds.
        *args: Arguments captured now and passed to ``fn``.
        scheduler: Where to queue the call. Defaults to the running asyncio
            loop.

    Raises:
        ArgumentError: If ``wait_ms`` is negative or not a number.
        SchedulerError: If no scheduler is given and no asyncio loop is
            running.
    """
    wait_ms = validate_wait(wait_ms)
    if scheduler is None:
        scheduler = AsyncioScheduler()
    scheduler.call_later(wait_ms, fn, *args)


def throttle(
    fn: Callable[..., Any],
    wait_ms: float,
    scheduler: Optional[Scheduler] = None,
) -> Callable[..., Any]:
    """Wrap ``fn`` so it runs at most once per ``wait_ms`` window.

    A call made when no window is open runs ``fn`` immediately (leading edge)
    and opens a window. Calls made while the window is open do not run ``fn``;
    the arguments of the latest one are kept, and ``fn`` runs once with them
    when the window closes (trailing edge), which opens a new window.

    The wrapper returns the result of the most recent real invocation of
    ``fn``, which is None until the first one.

    Args:
        fn: Function to rate-limit.
        wait_ms: Window length in milliseconds.
        scheduler: Clock and queue for the trailing call. Defaults to an
            :class:`AsyncioScheduler`; the leading call runs without a loop,
            but queuing a trailing call needs a running one.

    Raises:
        ArgumentError: If ``wait_ms`` is negative or not a number.
    """
    wait_ms = validate_wait(wait_ms)
    if scheduler is None:
        scheduler = AsyncioScheduler()
    state = ThrottleState()

    def invoke(args, kwargs):
        started = scheduler.now()
        state.result = fn(*args, **kwargs)
        # A call that raises opens no window
        state.last_invoked_ms = started
        return state.result

    def trailing():
        state.trailing_scheduled = False
        args, kwargs = state.pending_args, state.pending_kwargs
        state.pending_args, state.pending_kwargs = None, {}
        if args is None:
            return
        logger.debug(f"throttle firing trailing call of {_name(fn)}")
        invoke(args, kwargs)

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        now = scheduler.now()
        window_open = (
            state.last_invoked_ms is not None
            and now - state.last_invoked_ms < wait_ms
        )
        if not window_open and not state.trailing_scheduled:
            return invoke(args, kwargs)

        state.pending_args, state.pending_kwargs = args, kwargs
        if not state.trailing_scheduled:
            state.trailing_scheduled = True
            remaining = wait_ms - (now - state.last_invoked_ms)
            scheduler.call_later(max(remaining, 0.0), trailing)
        return state.result

    return wrapper
