"""underbar: a functional utility belt for sequences, mappings and functions.

Example:
    >>> import underbar as _
    >>> _.uniq([1, 2, 2, 3, 1])
    [1, 2, 3]
    >>> _.chain([3, 1, 2]).sort_by(_.identity).map(lambda n: n * 10).value()
    [10, 20, 30]
"""

from underbar.functional import (
    classify,
    each,
    index_of,
    strict_equals,
    identity,
    first,
    last,
    filter,
    reject,
    uniq,
    map,
    pluck,
    invoke,
    reduce,
    contains,
    every,
    some,
    extend,
    defaults,
    once,
    memoize,
    delay,
    throttle,
    shuffle,
    sort_by,
    zip,
    flatten,
    intersection,
    difference,
    Chain,
    chain,
)
from underbar.core.errors import UnderbarError, ShapeError, ArgumentError, SchedulerError
from underbar.scheduling import Scheduler, AsyncioScheduler, ManualScheduler

__all__ = [
    "classify",
    "each",
    "index_of",
    "strict_equals",
    "identity",
    "first",
    "last",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "throttle",
    "shuffle",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
    "Chain",
    "chain",
    "UnderbarError",
    "ShapeError",
    "ArgumentError",
    "SchedulerError",
    "Scheduler",
    "AsyncioScheduler",
    "ManualScheduler",
]
