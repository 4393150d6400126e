"""Format timestamps with configurable placeholders and month names."""
import re
from datetime import datetime
from typing import Optional

from ..config.locale_loader import get_locale_loader
from ..config.settings import DEFAULT_TIMESTAMP_FORMAT
from ..models.errors import InvalidArgumentError

# Longest tokens first so MMMM wins over MM and M
TIMESTAMP_TOKENS = re.compile(r'(YYYY|YY|MMMM|MMM|MM|M|DD|D|HH|H|hh|h|mm|m|ss|s|AMPM|ampm)')


def get_timestamp(
    fmt: Optional[str] = None,
    locale: Optional[str] = None,
    now: Optional[datetime] = None
) -> str:
    """
    Build a timestamp string from a placeholder format.

    Placeholders:
        YYYY / YY     - full / two-digit year
        MMMM / MMM    - full / short month name (per locale)
        MM / M        - month, padded / unpadded
        DD / D        - day, padded / unpadded
        HH / H        - 24h hour, padded / unpadded
        hh / h        - 12h hour, padded / unpadded
        mm / m        - minutes, padded / unpadded
        ss / s        - seconds, padded / unpadded
        AMPM / ampm   - AM/PM upper / lower case

    Args:
        fmt: Format string (default 'YYYYMMDD HHmmss')
        locale: Locale code used for month names (default from settings)
        now: Moment to format (default: current local time)

    Returns:
        Formatted timestamp

    Raises:
        InvalidArgumentError: If fmt or locale is not a non-blank string
    """
    if fmt is not None and (not isinstance(fmt, str) or not fmt.strip()):
        raise InvalidArgumentError("'fmt' must be a non-empty string")
    if locale is not None and (not isinstance(locale, str) or not locale.strip()):
        raise InvalidArgumentError("'locale' must be a non-empty string")

    now = now or datetime.now()
    months = get_locale_loader().months_for(locale.strip() if locale else None)

    hour12 = now.hour % 12 or 12
    components = {
        'YYYY': f"{now.year:04d}",
        'YY': f"{now.year:04d}"[-2:],
        'MMMM': months.names[now.month - 1],
        'MMM': months.short_names[now.month - 1],
        'MM': f"{now.month:02d}",
        'M': str(now.month),
        'DD': f"{now.day:02d}",
        'D': str(now.day),
        'HH': f"{now.hour:02d}",
        'H': str(now.hour),
        'hh': f"{hour12:02d}",
        'h': str(hour12),
        'mm': f"{now.minute:02d}",
        'm': str(now.minute),
        'ss': f"{now.second:02d}",
        's': str(now.second),
        'AMPM': 'AM' if now.hour < 12 else 'PM',
        'ampm': 'am' if now.hour < 12 else 'pm',
    }

    return TIMESTAMP_TOKENS.sub(lambda m: components[m.group(1)], fmt or DEFAULT_TIMESTAMP_FORMAT)
