"""Helpers for spreadsheet automation: cell normalization, dates, sheets and files."""
from .models import CellValueType, UNSET, InvalidArgumentError
from .cells import normalize, get_normalizer, detect_type, are_equal
from .utils.date_parser import parse_date, is_iso_date_string, is_ddmmyyyy, parse_ddmmyyyy, is_leap_year

__version__ = "0.1.0"

__all__ = [
    'CellValueType',
    'UNSET',
    'InvalidArgumentError',
    'normalize',
    'get_normalizer',
    'detect_type',
    'are_equal',
    'parse_date',
    'is_iso_date_string',
    'is_ddmmyyyy',
    'parse_ddmmyyyy',
    'is_leap_year'
]
