"""Collection operations derived from the iteration core.

Nothing in this module inspects a collection's shape itself: traversal goes
through :func:`~underbar.functional.iteration.each` and lookups through
:func:`~underbar.functional.iteration.index_of`, so every operation accepts the
same sequences and mappings ``each`` does and fails the same way on anything
else.

Operations returning several values always return a new ``list``; the input is
never modified.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Hashable, Iterable, List, Optional

from underbar.core.errors import ArgumentError
from underbar.core.types import Collection, Iteratee, Predicate
from underbar.functional.iteration import (
    call_iteratee,
    callback_arity,
    each,
    index_of,
    kind_of,
    strict_equals,
)

__all__ = [
    "identity",
    "first",
    "last",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "property_of",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
]

_OMITTED = object()


def identity(value: Any) -> Any:
    """Return ``value`` unchanged."""
    return value


def first(array: Sequence[Any], n: Optional[int] = None) -> Any:
    """First element of ``array``, or a list of its first ``n`` elements.

    Without ``n`` an empty array yields None.
    """
    values = map(array, identity)
    if n is None:
        return values[0] if values else None
    return values[: max(n, 0)]


def last(array: Sequence[Any], n: Optional[int] = None) -> Any:
    """Last element of ``array``, or a list of its last ``n`` elements.

    Asking for more elements than the array holds returns all of them.
    """
    values = map(array, identity)
    if n is None:
        return values[-1] if values else None
    if n <= 0:
        return []
    return values[-n:]


def filter(collection: Collection, predicate: Predicate) -> List[Any]:
    """Values for which ``predicate`` is truthy, in encounter order."""
    arity = callback_arity(predicate)
    kept = []

    def visit(value, key, source):
        if call_iteratee(predicate, arity, value, key, source):
            kept.append(value)

    each(collection, visit)
    return kept


def reject(collection: Collection, predicate: Predicate) -> List[Any]:
    """Values for which ``predicate`` is falsy; the complement of :func:`filter`."""
    arity = callback_arity(predicate)
    return filter(
        collection,
        lambda value, key, source: not call_iteratee(
            predicate, arity, value, key, source
        ),
    )


def uniq(array: Collection) -> List[Any]:
    """Drop strictly-equal duplicates, keeping first occurrences in order.

    Example:
        >>> uniq([1, 2, 2, 3, 1])
        [1, 2, 3]
    """
    unique = []

    def visit(value):
        if index_of(unique, value) == -1:
            unique.append(value)

    each(array, visit)
    return unique


def map(collection: Collection, transform: Iteratee) -> List[Any]:
    """Apply ``transform(value, key, collection)`` to every element.

    Args:
        collection: An ordered sequence or a mapping.
        transform: Callback producing the new value.

    Returns:
        A list with one result per element, in iteration order.
    """
    arity = callback_arity(transform)
    results = []

    def visit(value, key, source):
        results.append(call_iteratee(transform, arity, value, key, source))

    each(collection, visit)
    return results


def property_of(record: Any, name: Hashable) -> Any:
    """Look up ``name`` on a record, returning None when it is missing.

    Mappings are read by key, sequences by integer position and any other
    object by attribute.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    if kind_of(record) is not None and isinstance(name, int):
        if -len(record) <= name < len(record):
            return record[name]
        return None
    if isinstance(name, str):
        return getattr(record, name, None)
    return None


def pluck(records: Collection, property_name: Hashable) -> List[Any]:
    """Project ``property_name`` out of every record.

    Example:
        >>> pluck([{"age": 30}, {"age": 41}], "age")
        [30, 41]
    """
    return map(records, lambda record: property_of(record, property_name))


def invoke(
    collection: Collection,
    method: Any,
    args: Iterable[Any] = (),
) -> List[Any]:
    """Call a method on every element and collect the results.

    Args:
        collection: Elements to call the method on.
        method: Either a callable, invoked as ``method(element, *args)`` so the
            element plays the receiver, or the name of a method looked up on
            each element.
        args: Arguments forwarded to every call.

    Returns:
        The list of call results.

    Raises:
        ArgumentError: If an element has no callable attribute named ``method``.
    """
    forwarded = tuple(args)

    if callable(method):
        return map(collection, lambda value: method(value, *forwarded))

    if not isinstance(method, str):
        raise ArgumentError(
            f"invoke expects a callable or a method name, got {type(method).__name__}"
        )

    def call(value):
        bound = getattr(value, method, None)
        if not callable(bound):
            raise ArgumentError(
                f"{type(value).__name__} object has no method '{method}'"
            )
        return bound(*forwarded)

    return map(collection, call)


def reduce(
    collection: Collection,
    combine: Callable[[Any, Any], Any],
    initial: Any = _OMITTED,
) -> Any:
    """Left fold: ``seed = combine(seed, value)`` for every element.

    When ``initial`` is omitted the fold starts from numeric zero, which is
    only meaningful for numeric accumulation.

    Args:
        collection: Values to fold.
        combine: Two-argument accumulator function.
        initial: Starting seed.

    Returns:
        The final seed; ``initial`` (or 0) for an empty collection.

    Raises:
        ArgumentError: If ``initial`` is omitted and folding the first value
            into 0 raises TypeError, meaning the accumulation is not numeric
            and needs an explicit seed.

    Example:
        >>> reduce([1, 2, 3], lambda total, number: total + number, 0)
        6
    """
    values = map(collection, identity)

    if initial is not _OMITTED:
        seed = initial
    elif not values:
        return 0
    else:
        try:
            seed = combine(0, values[0])
        except TypeError as e:
            raise ArgumentError(
                "reduce needs an explicit initial value for non-numeric "
                f"accumulation (combining 0 with {type(values[0]).__name__} failed)"
            ) from e
        values = values[1:]

    for value in values:
        seed = combine(seed, value)
    return seed


def contains(collection: Collection, target: Any) -> bool:
    """Whether any element strictly equals ``target``."""
    return reduce(
        collection,
        lambda was_found, item: was_found or strict_equals(item, target),
        False,
    )


def every(collection: Collection, predicate: Predicate = identity) -> bool:
    """Whether ``predicate`` is truthy for all elements; True when empty."""
    arity = callback_arity(predicate)
    outcome = True

    def visit(value, key, source):
        nonlocal outcome
        if outcome and not call_iteratee(predicate, arity, value, key, source):
            outcome = False

    each(collection, visit)
    return outcome


def some(collection: Collection, predicate: Predicate = identity) -> bool:
    """Whether ``predicate`` is truthy for any element; False when empty."""
    arity = callback_arity(predicate)
    return not every(
        collection,
        lambda value, key, source: not call_iteratee(
            predicate, arity, value, key, source
        ),
    )
