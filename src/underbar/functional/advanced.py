"""Advanced collection operations: ordering, zipping and set algebra.

Set-like operations (:func:`intersection`, :func:`difference`) compare with
strict equality, so they work on unhashable elements and never coerce between
types. Their cost is quadratic in the input size, which is fine for the small
in-memory collections this library targets.
"""

import random
from typing import Any, Callable, Hashable, List, Optional, Sequence, Tuple, Union

from underbar.core.enums import CollectionKind
from underbar.core.types import Collection
from underbar.functional.collections import (
    contains,
    every,
    filter,
    identity,
    map,
    property_of,
    reject,
    some,
    uniq,
)
from underbar.functional.iteration import each, kind_of

__all__ = [
    "shuffle",
    "sort_by",
    "zip",
    "flatten",
    "intersection",
    "difference",
]


def shuffle(array: Collection, rng: Optional[random.Random] = None) -> List[Any]:
    """Return a uniformly random permutation of ``array``.

    Uses the Fisher-Yates algorithm on a copy; ``array`` itself is untouched.

    Args:
        array: Values to shuffle.
        rng: Random source, for reproducible shuffles. Defaults to the
            ``random`` module.

    Returns:
        A new list holding the same elements.
    """
    rng = rng or random
    shuffled = map(array, identity)
    for counter in range(len(shuffled) - 1, 0, -1):
        index = rng.randrange(counter + 1)
        shuffled[counter], shuffled[index] = shuffled[index], shuffled[counter]
    return shuffled


def sort_by(
    collection: Collection, criterion: Union[Callable[[Any], Any], Hashable]
) -> List[Any]:
    """Sort values ascending by a derived key.

    The sort is stable, and values whose key is None (including a missing
    property) go last, keeping their relative order.

    Args:
        collection: Values to sort; the collection itself is not modified.
        criterion: Function computing each value's key, or the name of the
            property to sort by.

    Returns:
        A new sorted list.

    Example:
        >>> sort_by([{"n": 3}, {"n": 1}, {"n": 2}], "n")
        [{'n': 1}, {'n': 2}, {'n': 3}]
    """
    def derive(value):
        if callable(criterion):
            return criterion(value)
        return property_of(value, criterion)

    keyed = map(collection, lambda value: (derive(value), value))
    present = [pair for pair in keyed if pair[0] is not None]
    missing = [pair[1] for pair in keyed if pair[0] is None]

    present.sort(key=lambda pair: pair[0])
    return [pair[1] for pair in present] + missing


def zip(*arrays: Sequence[Any]) -> List[Tuple[Any, ...]]:
    """Group elements sharing an index into tuples.

    The result is as long as the longest input; shorter inputs contribute None
    past their end.

    Example:
        >>> zip([1, 2, 3], [10, 20])
        [(1, 10), (2, 20), (3, None)]
    """
    columns = map(arrays, lambda array: map(array, identity))
    length = max(map(columns, len), default=0)
    return [
        tuple(column[index] if index < len(column) else None for column in columns)
        for index in range(length)
    ]


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and kind_of(value) is CollectionKind.SEQUENCE


def flatten(nested: Sequence[Any], shallow: bool = False) -> List[Any]:
    """Flatten nested lists and tuples into one list.

    Args:
        nested: Possibly nested sequence.
        shallow: Only remove one level of nesting.

    Returns:
        Leaf elements in left-to-right, depth-first order.

    Example:
        >>> flatten([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
        >>> flatten([1, [2, [3]]], shallow=True)
        [1, 2, [3]]
    """
    flat = []

    def visit(value):
        if not _is_nested(value):
            flat.append(value)
        elif shallow:
            flat.extend(value)
        else:
            each(value, visit)

    each(nested, visit)
    return flat


def intersection(*arrays: Sequence[Any]) -> List[Any]:
    """Values present in every array, once each, in first-array order.

    Example:
        >>> intersection([1, 2, 3], [2, 3, 4], [2, 5])
        [2]
    """
    if not arrays:
        return []
    head, others = arrays[0], arrays[1:]
    return uniq(
        filter(head, lambda value: every(others, lambda other: contains(other, value)))
    )


def difference(array: Sequence[Any], *others: Sequence[Any]) -> List[Any]:
    """Values of ``array`` found in none of ``others``.

    Order and duplicates of ``array`` are preserved.

    Example:
        >>> difference([1, 2, 3, 4], [2, 4])
        [1, 3]
    """
    return reject(array, lambda value: some(others, lambda other: contains(other, value)))
