"""Enumerations for collection shapes and primitive kinds."""

from enum import Enum


class CollectionKind(Enum):
    """The two collection shapes every operation understands."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_indexable(self) -> bool:
        """Whether elements are addressed by integer position.

        Returns:
            True for sequences, False for mappings.
        """
        return self is CollectionKind.SEQUENCE


class PrimitiveKind(Enum):
    """Kinds of values compared by value rather than by identity.

    ``int`` and ``float`` share the NUMBER kind; ``bool`` is kept apart so that
    ``True`` never equals ``1``.
    """

    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
