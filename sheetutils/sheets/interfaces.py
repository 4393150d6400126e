"""
Capability interfaces for spreadsheet collaborators.

The table helpers only need the handful of operations below, so any
backend (openpyxl workbooks, a remote spreadsheet API, in-memory fakes)
can be plugged in by implementing these protocols. Rows and columns are
1-based, as in spreadsheet notation.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Range(Protocol):
    """A rectangular block of cells."""

    def get_values(self) -> List[List[Any]]: ...

    def set_values(self, values: List[List[Any]]) -> None: ...

    def get_num_rows(self) -> int: ...

    def get_num_columns(self) -> int: ...

    def sort(self, criteria: List["SortCriterion"]) -> None: ...


@runtime_checkable
class Filter(Protocol):
    """A filter applied to a sheet's header row."""

    def remove(self) -> None: ...


@runtime_checkable
class Sheet(Protocol):
    """A single sheet (tab) of a spreadsheet."""

    def get_name(self) -> str: ...

    def get_range(self, row: int, column: int, num_rows: int = 1, num_columns: int = 1) -> Range: ...

    def get_data_range(self) -> Range: ...

    def get_last_row(self) -> int: ...

    def get_last_column(self) -> int: ...

    def append_row(self, values: List[Any]) -> None: ...

    def get_filter(self) -> Optional[Filter]: ...

    def create_filter(self, row: int, column: int, num_rows: int, num_columns: int) -> Filter: ...


@runtime_checkable
class Spreadsheet(Protocol):
    """A spreadsheet document holding named sheets."""

    def get_sheet_by_name(self, name: str) -> Optional[Sheet]: ...

    def insert_sheet(self, name: str) -> Sheet: ...


@dataclass(frozen=True)
class SortCriterion:
    """
    One sort key of a multi-column sort.

    Attributes:
        column: 1-based column number (A=1, B=2, ...)
        ascending: True for ascending order, False for descending
    """
    column: int
    ascending: bool = True


@dataclass
class ColumnHandlers:
    """
    Optional processing steps for get_values_from_column.

    Applied in order: filter_rows on every row, format_cell on the
    column's cells of the remaining rows, then filter_cells.
    """
    filter_rows: Optional[Callable[[List[Any]], bool]] = None
    format_cell: Optional[Callable[[Any], Any]] = None
    filter_cells: Optional[Callable[[Any], bool]] = None


@dataclass
class RowUpdate:
    """
    New values for the sheet row whose key column matches key.

    Cells set to UNSET are left untouched.
    """
    key: Any
    row: List[Any]
