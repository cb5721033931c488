"""Reusable type definitions for underbar.

Type Aliases:
    Collection: An ordered sequence or a key-value mapping.
    Iteratee: A callback receiving ``(value, key, collection)``.
    Predicate: An iteratee whose result is used for its truthiness.
    WaitMs: A finite, non-negative number of milliseconds.

``WaitMs`` is validated through a pydantic ``TypeAdapter`` so that decorators
reject negative or non-numeric waits before anything is scheduled.
"""

from typing import Annotated, Any, Callable, Hashable, Mapping, Sequence, Union
import annotated_types as at
from pydantic import Field, TypeAdapter, ValidationError

from .errors import ArgumentError

__all__ = [
    "Collection",
    "Iteratee",
    "Predicate",
    "Key",
    "WaitMs",
    "validate_wait",
]

Key = Hashable

Collection = Union[Sequence[Any], Mapping[Key, Any]]

Iteratee = Callable[..., Any]

Predicate = Callable[..., Any]

# A wait of zero means "as soon as the scheduler gets control back"
WaitMs = Annotated[float, at.Ge(0), Field(allow_inf_nan=False)]

_wait_adapter = TypeAdapter(WaitMs)


def validate_wait(wait_ms: Any) -> float:
    """Validate a wait duration.

    Args:
        wait_ms: Candidate duration in milliseconds.

    Returns:
        The duration as a float.

    Raises:
        ArgumentError: If the value is not a non-negative number.
    """
    # pydantic's lax mode would accept numeric strings
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, (int, float)):
        raise ArgumentError(f"wait_ms must be a number, got {wait_ms!r}")
    try:
        return _wait_adapter.validate_python(wait_ms)
    except ValidationError as e:
        raise ArgumentError(
            f"wait_ms must be a finite, non-negative number, got {wait_ms!r}"
        ) from e
