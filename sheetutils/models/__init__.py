"""Data models shared across sheetutils."""
from .cell_types import CellValueType, UNSET, is_absent
from .errors import InvalidArgumentError

__all__ = ['CellValueType', 'UNSET', 'is_absent', 'InvalidArgumentError']
