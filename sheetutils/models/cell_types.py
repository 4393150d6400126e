"""Canonical cell value types."""
from enum import Enum

from .errors import InvalidArgumentError


class _Unset:
    """Marker for a cell value that was never provided."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Distinct from None: None is an empty cell, UNSET is "no value given".
UNSET = _Unset()


class CellValueType(Enum):
    """Canonical types a cell value can be normalized to."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"

    @classmethod
    def coerce(cls, value) -> "CellValueType":
        """
        Resolve a member from a member or its string value.

        Args:
            value: CellValueType member or one of 'string', 'integer',
                'float', 'boolean', 'date'

        Returns:
            Matching CellValueType

        Raises:
            InvalidArgumentError: If value is not a canonical type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(f"'type' must be one of: {allowed} (got {value!r})")


def is_absent(value) -> bool:
    """Return True for an empty (None) or unset cell value."""
    return value is None or value is UNSET
