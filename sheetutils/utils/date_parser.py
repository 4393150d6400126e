"""Strict date parsing for spreadsheet cell values."""
import logging
import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser

from ..models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# YYYY-MM-DD[Thh:mm:ss[.sss][Z|+hh:mm|-hh:mm]]
ISO_DATE_PATTERN = re.compile(
    r'([0-9]{4})-([0-9]{2})-([0-9]{2})'
    r'(?:T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.[0-9]{3})?'
    r'(Z|[+-]([0-9]{2}):([0-9]{2}))?)?'
)

DDMMYYYY_PATTERN = re.compile(r'([0-9]{2})/([0-9]{2})/([0-9]{4})')

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_date(value) -> bool:
    """Return True if value is a date or datetime object."""
    return isinstance(value, (datetime, date))


def is_leap_year(year: int) -> bool:
    """
    Check whether a year is a leap year in the Gregorian calendar.

    Args:
        year: Year as an integer

    Returns:
        True if the year is a leap year

    Raises:
        InvalidArgumentError: If year is not an integer
    """
    if not isinstance(year, int) or isinstance(year, bool):
        raise InvalidArgumentError(f"'year' must be an integer (got {year!r})")

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (1-12), leap-year aware."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def is_iso_date_string(value) -> bool:
    """
    Check whether value is a valid ISO-8601 date or date-time string.

    Accepts YYYY-MM-DD, optionally followed by Thh:mm:ss, fractional
    milliseconds and a Z or +/-hh:mm offset. Every component is range
    checked, so '2023-02-29' or '2023-01-01T24:00:00' are rejected.

    Args:
        value: Value to check

    Returns:
        True if value is a valid ISO date string
    """
    if not isinstance(value, str):
        return False

    match = ISO_DATE_PATTERN.fullmatch(value)
    if not match:
        return False

    year, month, day = (int(match.group(i)) for i in (1, 2, 3))
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(year, month):
        return False

    if match.group(4) is not None:
        hour, minute, second = (int(match.group(i)) for i in (4, 5, 6))
        if hour > 23 or minute > 59 or second > 59:
            return False

    if match.group(8) is not None:
        if int(match.group(8)) > 23 or int(match.group(9)) > 59:
            return False

    return True


def parse_iso_date_string(value) -> Optional[datetime]:
    """
    Parse a valid ISO-8601 string into a datetime.

    Strings without an offset give a naive datetime; 'Z' or +/-hh:mm give
    an aware one.

    Returns:
        datetime or None if value is not a valid ISO date string
    """
    if not is_iso_date_string(value):
        return None

    try:
        return dateutil_parser.isoparse(value)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse ISO date {value!r}: {e}")
        return None


def is_ddmmyyyy(value) -> bool:
    """
    Check whether value is a real calendar date written as dd/mm/yyyy.

    Impossible dates such as '31/02/2023' or '00/01/2023' are rejected.
    """
    return parse_ddmmyyyy(value) is not None


def parse_ddmmyyyy(value) -> Optional[datetime]:
    """
    Parse a dd/mm/yyyy string into a datetime at midnight.

    Args:
        value: String such as '14/08/2023'

    Returns:
        datetime or None if the string is malformed or not a real date
    """
    if not isinstance(value, str):
        return None

    match = DDMMYYYY_PATTERN.fullmatch(value)
    if not match:
        return None

    day, month, year = (int(part) for part in match.groups())

    # datetime() refuses components that do not form a real calendar date
    try:
        parsed = datetime(year, month, day)
    except ValueError:
        return None

    if (parsed.day, parsed.month, parsed.year) != (day, month, year):
        return None

    return parsed


def parse_date(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 or dd/mm/yyyy date string.

    ISO is tried first.

    Args:
        value: Date string

    Returns:
        datetime (aware if the ISO string carried an offset) or None
    """
    if not isinstance(value, str):
        return None

    value = value.strip()
    if not value:
        return None

    if is_iso_date_string(value):
        return parse_iso_date_string(value)

    return parse_ddmmyyyy(value)
