"""Core data structures shared by the functional layers."""

from underbar.core.enums import CollectionKind, PrimitiveKind
from underbar.core.errors import (
    UnderbarError,
    ShapeError,
    ArgumentError,
    SchedulerError,
)
from underbar.core.base_models import OnceState, MemoCache, ThrottleState, ScheduledTask

__all__ = [
    "CollectionKind",
    "PrimitiveKind",
    "UnderbarError",
    "ShapeError",
    "ArgumentError",
    "SchedulerError",
    "OnceState",
    "MemoCache",
    "ThrottleState",
    "ScheduledTask",
]
