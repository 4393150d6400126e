"""Utility functions."""
from .logger import setup_logger
from .number_parser import parse_localized_float, parse_integer_prefix, normalize_decimal_separators
from .date_parser import (
    is_date,
    is_leap_year,
    is_iso_date_string,
    is_ddmmyyyy,
    parse_ddmmyyyy,
    parse_date
)
from .timestamp import get_timestamp
from .slug import to_slug, to_slug_memoized, SlugCache
from .hashing import hash_from_string, hash_from_array, hash_from_object
from .serialization import (
    stringify_date,
    parse_iso_date,
    stringify_object,
    parse_object,
    stringify_map,
    parse_map
)

__all__ = [
    'setup_logger',
    'parse_localized_float',
    'parse_integer_prefix',
    'normalize_decimal_separators',
    'is_date',
    'is_leap_year',
    'is_iso_date_string',
    'is_ddmmyyyy',
    'parse_ddmmyyyy',
    'parse_date',
    'get_timestamp',
    'to_slug',
    'to_slug_memoized',
    'SlugCache',
    'hash_from_string',
    'hash_from_array',
    'hash_from_object',
    'stringify_date',
    'parse_iso_date',
    'stringify_object',
    'parse_object',
    'stringify_map',
    'parse_map'
]
