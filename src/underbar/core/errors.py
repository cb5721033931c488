"""Exception hierarchy for underbar.

All library errors derive from :class:`UnderbarError` and additionally from the
builtin exception a caller would naturally expect, so that ``except TypeError``
keeps working for shape violations.
"""

__all__ = [
    "UnderbarError",
    "ShapeError",
    "ArgumentError",
    "SchedulerError",
]


class UnderbarError(Exception):
    """Base class for every error raised by underbar."""


class ShapeError(UnderbarError, TypeError):
    """A collection argument is neither an ordered sequence nor a mapping."""


class ArgumentError(UnderbarError, ValueError):
    """An argument violates an operation's precondition."""


class SchedulerError(UnderbarError, RuntimeError):
    """No event loop is available to run deferred work."""
