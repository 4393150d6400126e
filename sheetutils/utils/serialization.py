"""JSON serialization that round-trips datetimes."""
import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dateutil_parser

from ..models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DATE_TYPE_TAG = "Date"


def stringify_date(value: datetime) -> str:
    """
    Serialize a datetime as an ISO-8601 UTC string with milliseconds.

    Naive datetimes are taken as local time.

    Args:
        value: datetime to serialize

    Returns:
        String like '2020-01-01T00:00:00.000Z'

    Raises:
        InvalidArgumentError: If value is not a datetime
    """
    if not isinstance(value, datetime):
        raise InvalidArgumentError("'value' is not a valid datetime")

    utc = value.astimezone(timezone.utc)
    return utc.strftime('%Y-%m-%dT%H:%M:%S.') + f"{utc.microsecond // 1000:03d}Z"


def parse_iso_date(value: str) -> datetime:
    """
    Parse a string produced by stringify_date.

    Args:
        value: ISO-8601 string

    Returns:
        Timezone-aware datetime (naive if the string had no offset)

    Raises:
        InvalidArgumentError: If value is blank or not an ISO-8601 string
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("'value' is not a valid ISO date string")

    try:
        return dateutil_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        logger.error(f"Error parsing ISO date {value!r}: {e}")
        raise InvalidArgumentError(f"'value' is not a valid ISO date string: {value!r}") from e


def _tag_dates(value: Any) -> Any:
    """
    json.dumps default hook: datetimes become {'__type': 'Date', 'value': iso}.

    Naive datetimes also carry 'naive': true so they are restored as naive
    local time.
    """
    if isinstance(value, datetime):
        tagged = {'__type': DATE_TYPE_TAG, 'value': stringify_date(value)}
        if value.tzinfo is None:
            tagged['naive'] = True
        return tagged
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _untag_dates(obj: dict) -> Any:
    """json.loads object hook reversing _tag_dates."""
    if obj.get('__type') == DATE_TYPE_TAG and isinstance(obj.get('value'), str):
        parsed = parse_iso_date(obj['value'])
        if obj.get('naive') is True:
            return parsed.astimezone().replace(tzinfo=None)
        return parsed
    return obj


def stringify_object(value) -> str:
    """
    Serialize a dict or list to JSON, tagging nested datetimes.

    Raises:
        InvalidArgumentError: If value is not a dict or list
        TypeError: If value holds objects JSON cannot represent
    """
    if not isinstance(value, (dict, list)):
        raise InvalidArgumentError("'value' must be a dict or list")

    try:
        return json.dumps(value, default=_tag_dates, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Error in stringify_object: {e}")
        raise


def parse_object(text: str) -> Any:
    """
    Deserialize JSON produced by stringify_object, restoring datetimes.

    Raises:
        InvalidArgumentError: If text is blank
        json.JSONDecodeError: If text is not valid JSON
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidArgumentError("'text' must be a non-empty JSON string")

    try:
        return json.loads(text, object_hook=_untag_dates)
    except json.JSONDecodeError as e:
        logger.error(f"Error in parse_object: {e}")
        raise


def stringify_map(mapping: Mapping) -> str:
    """Serialize a mapping to JSON, tagging datetime values."""
    if not isinstance(mapping, Mapping):
        raise InvalidArgumentError("'mapping' is not a valid mapping")

    return stringify_object(dict(mapping))


def parse_map(text: str) -> dict:
    """
    Deserialize a mapping serialized with stringify_map.

    Raises:
        InvalidArgumentError: If text is blank or does not hold a JSON object
    """
    parsed = parse_object(text)
    if not isinstance(parsed, dict):
        raise InvalidArgumentError("'text' does not hold a serialized mapping")
    return parsed
