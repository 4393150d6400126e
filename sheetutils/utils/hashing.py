"""SHA-256 hashing helpers returning base64 digests."""
import base64
import hashlib
import json
from datetime import date, datetime
from typing import Any

from ..models.errors import InvalidArgumentError
from .serialization import stringify_date


def hash_from_string(value: str) -> str:
    """
    SHA-256 hash of a non-empty string.

    Args:
        value: Non-blank string, hashed as UTF-8

    Returns:
        Base64-encoded digest

    Raises:
        InvalidArgumentError: If value is not a non-blank string
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("'value' must be a non-empty string")

    digest = hashlib.sha256(value.encode('utf-8')).digest()
    return base64.b64encode(digest).decode('ascii')


def hash_from_array(values: list) -> str:
    """SHA-256 hash of a non-empty list, serialized as compact JSON."""
    if not isinstance(values, (list, tuple)) or len(values) == 0:
        raise InvalidArgumentError("'values' must be a non-empty list")

    return hash_from_string(_to_json(list(values)))


def hash_from_object(value: dict) -> str:
    """SHA-256 hash of a dict, serialized as compact JSON."""
    if not isinstance(value, dict):
        raise InvalidArgumentError("'value' must be a dict")

    return hash_from_string(_to_json(value))


def _dates_as_iso(value: Any) -> str:
    if isinstance(value, datetime):
        return stringify_date(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _to_json(value: Any) -> str:
    try:
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=_dates_as_iso)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Value cannot be hashed: {e}") from e
