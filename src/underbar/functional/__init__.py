"""Functional primitives for underbar.

This package holds the whole operation set: the iteration core, collection
operations derived from it, mapping merges, function decorators, ordering and
set operations, and the fluent chain wrapper. Collection operations never
modify their inputs; decorators keep their state private to the wrapper they
return.
"""

from underbar.functional.iteration import classify, each, index_of, strict_equals
from underbar.functional.collections import (
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
)
from underbar.functional.objects import extend, defaults
from underbar.functional.decorators import once, memoize, delay, throttle
from underbar.functional.advanced import (
    shuffle,
    sort_by,
    zip,
    flatten,
    intersection,
    difference,
)
from underbar.functional.chain import Chain, chain

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
]
