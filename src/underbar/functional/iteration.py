"""Iteration core.

Every other collection operation is written in terms of :func:`each` and
:func:`index_of`. This is the only module that decides whether a collection is
an ordered sequence or a key-value mapping; the decision is made once, by
:func:`classify`, at the boundary of each call.

Equality throughout the package is strict: primitives compare by kind and
value, everything else by identity (see :func:`strict_equals`).
"""

import functools
import inspect
import math
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional

from underbar.core.enums import CollectionKind, PrimitiveKind
from underbar.core.errors import ShapeError
from underbar.core.types import Collection, Iteratee

__all__ = [
    "classify",
    "kind_of",
    "each",
    "index_of",
    "strict_equals",
    "primitive_kind",
    "callback_arity",
    "call_iteratee",
]

# Strings are sequences to Python but scalars to this library
_TEXT_TYPES = (str, bytes, bytearray)


def kind_of(collection: Any) -> Optional[CollectionKind]:
    """Return the shape of ``collection``, or None when it has neither shape."""
    if isinstance(collection, Mapping):
        return CollectionKind.MAPPING
    if isinstance(collection, Sequence) and not isinstance(collection, _TEXT_TYPES):
        return CollectionKind.SEQUENCE
    return None


def classify(collection: Any) -> CollectionKind:
    """Decide the shape of a collection argument.

    Args:
        collection: Value passed as a collection.

    Returns:
        ``CollectionKind.SEQUENCE`` or ``CollectionKind.MAPPING``.

    Raises:
        ShapeError: If the value is neither a non-text sequence nor a mapping.
    """
    kind = kind_of(collection)
    if kind is None:
        raise ShapeError(
            f"Expected an ordered sequence or a mapping, got {type(collection).__name__}"
        )
    return kind


def primitive_kind(value: Any) -> Optional[PrimitiveKind]:
    if value is None:
        return PrimitiveKind.NONE
    if isinstance(value, bool):
        return PrimitiveKind.BOOLEAN
    if isinstance(value, (int, float)):
        return PrimitiveKind.NUMBER
    if isinstance(value, str):
        return PrimitiveKind.STRING
    if isinstance(value, bytes):
        return PrimitiveKind.BYTES
    return None


def strict_equals(left: Any, right: Any) -> bool:
    """Strict (``===``-style) equality.

    Two primitives are equal when they share a primitive kind and compare
    equal, so ``1 == 1.0`` holds while ``1 == True`` and ``1 == "1"`` do not,
    and NaN equals nothing. Any other pair is equal only when both names refer
    to the same object.
    """
    left_kind = primitive_kind(left)
    right_kind = primitive_kind(right)
    if left_kind is None or right_kind is None:
        return left is right
    if left_kind is not right_kind:
        return False
    if left_kind is PrimitiveKind.NUMBER and (
        _is_nan(left) or _is_nan(right)
    ):
        return False
    return left == right


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def callback_arity(callback: Callable[..., Any]) -> int:
    """Number of leading ``(value, key, collection)`` arguments to pass.

    Only Python functions, methods and partials are inspected; callables taking
    ``*args`` get all three. Builtins, method descriptors, classes and other
    callables get the value only, since their optional positional parameters
    (``str.strip``'s ``chars``, ``round``'s ``ndigits``) must not receive a key.
    """
    if not (
        inspect.isfunction(callback)
        or inspect.ismethod(callback)
        or isinstance(callback, functools.partial)
    ):
        return 1

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 3
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return min(positional, 3)


def call_iteratee(
    callback: Callable[..., Any], arity: int, value: Any, key: Any, collection: Any
) -> Any:
    return callback(*(value, key, collection)[:arity])


def each(collection: Collection, iterator: Iteratee) -> None:
    """Call ``iterator(value, key, collection)`` for every element.

    Sequences are visited by ascending index; mappings by key insertion order.
    The iterator receives only as many of those three arguments as it accepts.

    Args:
        collection: An ordered sequence or a mapping.
        iterator: Callback invoked once per element.

    Raises:
        ShapeError: If ``collection`` has neither shape.

    Example:
        >>> seen = []
        >>> each({"a": 1, "b": 2}, lambda value, key: seen.append((key, value)))
        >>> seen
        [('a', 1), ('b', 2)]
    """
    kind = classify(collection)
    arity = callback_arity(iterator)

    if kind is CollectionKind.SEQUENCE:
        for index in range(len(collection)):
            call_iteratee(iterator, arity, collection[index], index, collection)
    else:
        for key in list(collection.keys()):
            call_iteratee(iterator, arity, collection[key], key, collection)


def index_of(array: Sequence[Any], target: Any) -> int:
    """Index of the first element strictly equal to ``target``.

    Args:
        array: An ordered sequence.
        target: Value to look for.

    Returns:
        The first matching index, or -1 when absent.

    Raises:
        ShapeError: If ``array`` is a mapping or has no recognizable shape.
    """
    if not classify(array).is_indexable:
        raise ShapeError("index_of requires an ordered sequence, got a mapping")

    found = -1

    def visit(value, index):
        nonlocal found
        if found == -1 and strict_equals(value, target):
            found = index

    each(array, visit)
    return found
