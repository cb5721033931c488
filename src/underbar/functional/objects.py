"""Helpers for merging mappings."""

from collections.abc import Mapping, MutableMapping
from typing import Any

from underbar.core.errors import ShapeError

__all__ = ["extend", "defaults"]


def _check_mappings(target: Any, sources: tuple) -> None:
    if not isinstance(target, MutableMapping):
        raise ShapeError(
            f"Merge target must be a mutable mapping, got {type(target).__name__}"
        )
    for source in sources:
        if not isinstance(source, Mapping):
            raise ShapeError(
                f"Merge sources must be mappings, got {type(source).__name__}"
            )


def extend(target: MutableMapping, *sources: Mapping) -> MutableMapping:
    """Copy every key of every source into ``target``, overwriting.

    Sources are applied in argument order, so later sources win on collisions.

    Example:
        >>> extend({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}
    """
    _check_mappings(target, sources)
    for source in sources:
        for key in source:
            target[key] = source[key]
    return target


def defaults(target: MutableMapping, *sources: Mapping) -> MutableMapping:
    """Fill in keys missing from ``target`` without touching existing ones.

    The first source supplying a key wins.
    """
    _check_mappings(target, sources)
    for source in sources:
        for key in source:
            if key not in target:
                target[key] = source[key]
    return target
