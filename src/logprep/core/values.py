"""Type-erased attribute values.

Every attribute value attached to a log record is wrapped in an
``EncodableValue``: a closed tagged union over the shapes the logging
backend understands. Wrapping never fails; values with no JSON shape of
their own are carried as strings.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Variants of an EncodableValue."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class EncodableValue:
    """A wrapped attribute value.

    Attributes:
        kind: The variant of the wrapped value.
        value: The payload. For MAPPING this is a ``dict[str, EncodableValue]``,
            for SEQUENCE a ``tuple[EncodableValue, ...]``.

    Two wrapped values are equal iff they have the same kind and equal
    payloads, so ``wrap(1) == wrap(1.0)`` but ``wrap(True) != wrap(1)``.
    Values are unhashable: MAPPING payloads are dicts, so no variant
    offers a hash.
    """

    kind: ValueKind
    value: Any

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def wrap(cls, obj: object) -> "EncodableValue":
        """Wrap an arbitrary Python value.

        Args:
            obj: Any value. Nested mappings and sequences are wrapped
                 recursively; mapping keys are coerced to strings.

        Returns:
            EncodableValue of the matching kind.
        """
        if isinstance(obj, EncodableValue):
            return obj
        if obj is None:
            return cls(ValueKind.NULL, None)
        # bool is a subclass of int and must be classified first
        if isinstance(obj, bool):
            return cls(ValueKind.BOOLEAN, obj)
        if isinstance(obj, (int, float)):
            return cls(ValueKind.NUMBER, obj)
        if isinstance(obj, str):
            return cls(ValueKind.STRING, obj)
        if isinstance(obj, Enum):
            return cls.wrap(obj.value)
        if isinstance(obj, (datetime, date)):
            return cls(ValueKind.STRING, obj.isoformat())
        if isinstance(obj, Mapping):
            return cls(
                ValueKind.MAPPING,
                {str(key): cls.wrap(item) for key, item in obj.items()},
            )
        if isinstance(obj, (list, tuple, set, frozenset)):
            return cls(ValueKind.SEQUENCE, tuple(cls.wrap(item) for item in obj))
        return cls(ValueKind.STRING, str(obj))

    def to_native(self) -> Any:
        """Unwrap into plain JSON-compatible Python values.

        Returns:
            str, int, float, bool, None, dict or list.
        """
        if self.kind is ValueKind.MAPPING:
            return {key: item.to_native() for key, item in self.value.items()}
        if self.kind is ValueKind.SEQUENCE:
            return [item.to_native() for item in self.value]
        return self.value


def wrap_attributes(attributes: Mapping[str, object]) -> dict[str, EncodableValue]:
    """Wrap every value of an attribute mapping, keeping insertion order."""
    return {key: EncodableValue.wrap(value) for key, value in attributes.items()}
