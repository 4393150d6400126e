"""
Best-effort conversion of raw cell values into canonical types.

Every normalizer accepts any raw value and returns either a value of its
canonical type or None when the input cannot be represented. Normalizers
never raise: unexpected failures are logged and reported as None so that
pipelines keep flowing over dirty spreadsheet data.
"""
import logging
import math
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, Optional

from ..config.settings import SPREADSHEET_EPOCH
from ..models import CellValueType, is_absent
from ..utils.date_parser import parse_date
from ..utils.number_parser import parse_localized_float, parse_integer_prefix

logger = logging.getLogger(__name__)

TRUE_STRINGS = frozenset({'true', '1', 'sí', 'si', 'yes', 'y'})
FALSE_STRINGS = frozenset({'false', '0', 'no', 'n'})


def is_number(value: Any) -> bool:
    """True for int and float values; bool is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_string(value: Any) -> str:
    """
    Normalize a cell value as a trimmed string.

    Absent values give ''. Booleans render as 'true'/'false', the way
    spreadsheets display them.
    """
    if is_absent(value):
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value).strip()


def normalize_integer(value: Any) -> Optional[int]:
    """
    Normalize a cell value as an integer.

    Strings give their leading integer ('42.9' -> 42); floats are
    truncated toward zero.

    Returns:
        int or None if value holds no integer
    """
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            return parse_integer_prefix(value)
        return None

    except (ValueError, OverflowError) as e:
        logger.warning(f"Error in normalize_integer: {e}")
        return None


def normalize_float(value: Any) -> Optional[float]:
    """
    Normalize a cell value as a decimal number.

    Numbers pass through unchanged. Strings may use English ('1,234.56')
    or Spanish ('1.234,56', '3,14') separators.

    Returns:
        Number or None if value is not a valid decimal
    """
    try:
        if is_number(value):
            return value
        if isinstance(value, str):
            return parse_localized_float(value)
        return None

    except Exception as e:
        logger.warning(f"Error in normalize_float: {e}")
        return None


def normalize_boolean(value: Any) -> Optional[bool]:
    """
    Normalize a cell value as a boolean.

    Accepts booleans, the numbers 1/0 and (case-insensitive) the strings
    true/1/sí/si/yes/y and false/0/no/n.

    Returns:
        bool or None if value has no boolean reading
    """
    try:
        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            text = value.strip().lower()
            if text in TRUE_STRINGS:
                return True
            if text in FALSE_STRINGS:
                return False

        if is_number(value):
            if value == 1:
                return True
            if value == 0:
                return False

        return None

    except Exception as e:
        logger.warning(f"Error in normalize_boolean: {e}")
        return None


def normalize_date(value: Any) -> Optional[datetime]:
    """
    Normalize a cell value as a date at local midnight.

    Sources:
        - date/datetime objects (aware datetimes are converted to local time)
        - ISO-8601 strings ('2023-08-14', '2023-08-14T12:34:56+03:00')
        - dd/mm/yyyy strings ('14/08/2023')
        - spreadsheet serial numbers, counted in days from 1899-12-30

    Returns:
        New naive datetime with the time reset to 00:00, or None
    """
    try:
        if isinstance(value, datetime):
            parsed = _to_local_naive(value)
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            parsed = parse_date(value)
            if parsed is not None:
                parsed = _to_local_naive(parsed)
        elif is_number(value):
            parsed = SPREADSHEET_EPOCH + timedelta(days=math.floor(value))
        else:
            return None

        if parsed is None:
            return None

        return parsed.replace(hour=0, minute=0, second=0, microsecond=0)

    except Exception as e:
        logger.warning(f"Error in normalize_date: {e}")
        return None


def _to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive ones are kept."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


NORMALIZERS: Dict[CellValueType, Callable[[Any], Any]] = {
    CellValueType.STRING: normalize_string,
    CellValueType.INTEGER: normalize_integer,
    CellValueType.FLOAT: normalize_float,
    CellValueType.BOOLEAN: normalize_boolean,
    CellValueType.DATE: normalize_date,
}


def get_normalizer(cell_type) -> Callable[[Any], Any]:
    """
    Get the normalizer for a canonical type.

    Args:
        cell_type: CellValueType or its string value ('string', 'float', ...)

    Returns:
        Normalizer function

    Raises:
        InvalidArgumentError: If cell_type is not a canonical type
    """
    return NORMALIZERS[CellValueType.coerce(cell_type)]


def normalize(cell_type, value: Any) -> Any:
    """Normalize value as cell_type. See get_normalizer."""
    return get_normalizer(cell_type)(value)
