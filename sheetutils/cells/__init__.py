"""Cell value normalization and comparison."""
from .normalizer import (
    normalize,
    get_normalizer,
    normalize_string,
    normalize_integer,
    normalize_float,
    normalize_boolean,
    normalize_date,
    NORMALIZERS
)
from .comparator import detect_type, are_equal, resolve_type

__all__ = [
    'normalize',
    'get_normalizer',
    'normalize_string',
    'normalize_integer',
    'normalize_float',
    'normalize_boolean',
    'normalize_date',
    'NORMALIZERS',
    'detect_type',
    'are_equal',
    'resolve_type'
]
