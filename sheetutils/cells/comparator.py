"""Type detection and semantic equality of raw cell values."""
import logging
from datetime import date
from typing import Any, Optional

from ..models import CellValueType, InvalidArgumentError, is_absent
from .normalizer import NORMALIZERS, is_number

logger = logging.getLogger(__name__)


def detect_type(value: Any) -> Optional[CellValueType]:
    """
    Infer the canonical type of a raw value from its runtime type.

    Numbers are detected as FLOAT, never INTEGER.

    Returns:
        CellValueType or None for absent or unsupported values
    """
    if is_absent(value):
        return None
    if isinstance(value, date):
        return CellValueType.DATE
    if isinstance(value, bool):
        return CellValueType.BOOLEAN
    if is_number(value):
        return CellValueType.FLOAT
    if isinstance(value, str):
        return CellValueType.STRING
    return None


def is_comparable(value: Any) -> bool:
    """True for values are_equal accepts: absent, bool, number, str, date."""
    return is_absent(value) or isinstance(value, (bool, int, float, str, date))


def resolve_type(a: Any, b: Any, cell_type=None) -> Optional[CellValueType]:
    """
    Pick the type two values are compared under.

    An explicit type wins. Otherwise a's type is used unless it is STRING
    (or undetectable), then b's type, then STRING. A string first
    argument therefore defers to the second argument's type, while a
    non-string first argument does not:

        resolve_type('5', 5)  -> FLOAT
        resolve_type(5, '5')  -> FLOAT
        resolve_type(1, datetime(...)) -> FLOAT

    Returns None when no type is given and both values are absent.
    """
    if cell_type is not None:
        return CellValueType.coerce(cell_type)

    if is_absent(a) and is_absent(b):
        return None

    type_a = detect_type(a)
    type_b = detect_type(b)

    return (type_a if type_a is not CellValueType.STRING else None) or type_b or CellValueType.STRING


def are_equal(a: Any, b: Any, cell_type=None) -> Optional[bool]:
    """
    Compare two raw cell values for semantic equality.

    Both values are normalized under the resolved type (see resolve_type)
    before comparing, so '1.234,56' equals 1234.56 as FLOAT and two
    datetimes on the same calendar day are equal as DATE. Without a type,
    two absent values are equal only if they are the same kind of absent
    (None vs None, UNSET vs UNSET).

    Args:
        a: First value
        b: Second value
        cell_type: Optional CellValueType or its string value

    Returns:
        True/False, or None if the comparison failed unexpectedly

    Raises:
        InvalidArgumentError: If cell_type is not a canonical type, or a/b
            are not absent, bool, number, str or date values
    """
    if cell_type is not None:
        cell_type = CellValueType.coerce(cell_type)

    if not is_comparable(a) or not is_comparable(b):
        raise InvalidArgumentError(
            "'a' and 'b' must be comparable: str, int, float, bool, date, None or UNSET "
            f"(got {type(a).__name__} and {type(b).__name__})"
        )

    try:
        resolved = resolve_type(a, b, cell_type)
        if resolved is None:
            return a is b

        normalizer = NORMALIZERS[resolved]
        norm_a = normalizer(a)
        norm_b = normalizer(b)

        if resolved is CellValueType.DATE:
            if norm_a is None and norm_b is None:
                return True
            if norm_a is None or norm_b is None:
                return False
            return norm_a == norm_b

        if resolved in (CellValueType.FLOAT, CellValueType.INTEGER, CellValueType.BOOLEAN):
            return norm_a == norm_b

        return str(norm_a).strip() == str(norm_b).strip()

    except Exception as e:
        logger.warning(f"Error in are_equal: {e}")
        return None
