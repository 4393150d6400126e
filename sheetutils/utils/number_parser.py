"""Parse numbers written with English or Spanish separators."""
import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

INTEGER_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')
FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')


def normalize_decimal_separators(number_string: str) -> str:
    """
    Rewrite a number string so '.' is the only decimal separator.

    Handles:
    - 1,234.56 - comma thousands, point decimal (English)
    - 1.234,56 - point thousands, comma decimal (Spanish)
    - 3,14     - comma decimal
    - 3.14     - left as-is

    When both separators appear, the one appearing last is the decimal
    separator and every occurrence of the other one is dropped.

    Args:
        number_string: Trimmed string containing a number

    Returns:
        String with '.' as decimal separator and no thousands separators
    """
    if ',' in number_string and '.' in number_string:
        comma_pos = number_string.rfind(',')
        period_pos = number_string.rfind('.')

        if comma_pos > period_pos:
            # Spanish format: 1.234,56
            return number_string.replace('.', '').replace(',', '.')
        # English format: 1,234.56
        return number_string.replace(',', '')

    if ',' in number_string:
        # Only comma - decimal separator
        return number_string.replace(',', '.', 1)

    return number_string


def parse_float_prefix(number_string: str) -> Optional[float]:
    """
    Parse the longest leading floating point number in a string.

    '12.5kg' gives 12.5, 'abc' gives None.
    """
    match = FLOAT_PREFIX.match(number_string)
    if not match:
        return None
    try:
        return float(match.group(1))
    except (ValueError, OverflowError):
        return None


def parse_integer_prefix(number_string: str) -> Optional[int]:
    """
    Parse the longest leading integer in a string.

    '42.9' gives 42, '  -7 units' gives -7, 'abc' gives None.
    """
    match = INTEGER_PREFIX.match(number_string)
    if not match:
        return None
    return int(match.group(1))


def parse_localized_float(number_string: str) -> Optional[float]:
    """
    Parse a number written with English or Spanish separators.

    Args:
        number_string: String containing a number, e.g. '1.234,56'

    Returns:
        Float value or None if parsing fails
    """
    if not isinstance(number_string, str):
        return None

    cleaned = number_string.strip()
    if not cleaned:
        return None

    amount = parse_float_prefix(normalize_decimal_separators(cleaned))
    if amount is None:
        logger.debug(f"Could not parse number: {number_string!r}")
    return amount
