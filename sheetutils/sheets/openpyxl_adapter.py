"""
openpyxl backend for the spreadsheet interfaces.

Wraps an openpyxl Workbook/Worksheet so the table helpers in
sheetutils.sheets.operations can work on local .xlsx files. Empty cells
are read as '' (the way spreadsheet APIs report them) and written back
as empty cells.
"""
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Optional, Union

import openpyxl
from openpyxl.utils import get_column_letter

from ..config.settings import SPREADSHEET_EPOCH
from .interfaces import SortCriterion

logger = logging.getLogger(__name__)


def _a1_range(row: int, column: int, num_rows: int, num_columns: int) -> str:
    start = f"{get_column_letter(column)}{row}"
    end = f"{get_column_letter(column + num_columns - 1)}{row + num_rows - 1}"
    return f"{start}:{end}"


def _is_blank(value: Any) -> bool:
    return value is None or value == ''


def _sort_key(value: Any) -> tuple:
    """
    Order mixed cell values: numbers and dates, then text, then booleans.

    Dates sort by their spreadsheet serial number so they interleave with
    numbers the way spreadsheets store them.
    """
    if isinstance(value, bool):
        return (2, int(value), '')
    if isinstance(value, (int, float)):
        return (0, value, '')
    if isinstance(value, datetime):
        return (0, (value.replace(tzinfo=None) - SPREADSHEET_EPOCH).total_seconds() / 86400, '')
    if isinstance(value, date):
        return (0, (datetime(value.year, value.month, value.day) - SPREADSHEET_EPOCH).days, '')
    return (1, 0, str(value).lower())


class RangeAdapter:
    """A rectangular block of cells of an openpyxl worksheet."""

    def __init__(self, worksheet, row: int, column: int, num_rows: int = 1, num_columns: int = 1):
        if min(row, column, num_rows, num_columns) < 1:
            raise ValueError("Range coordinates and sizes must be positive")
        self._ws = worksheet
        self.row = row
        self.column = column
        self.num_rows = num_rows
        self.num_columns = num_columns

    def get_num_rows(self) -> int:
        return self.num_rows

    def get_num_columns(self) -> int:
        return self.num_columns

    def get_a1_notation(self) -> str:
        return _a1_range(self.row, self.column, self.num_rows, self.num_columns)

    def get_values(self) -> List[List[Any]]:
        """Cell values row by row, with empty cells as ''."""
        rows = self._ws.iter_rows(
            min_row=self.row,
            max_row=self.row + self.num_rows - 1,
            min_col=self.column,
            max_col=self.column + self.num_columns - 1,
            values_only=True
        )
        return [['' if value is None else value for value in row] for row in rows]

    def set_values(self, values: List[List[Any]]) -> None:
        """
        Write values into the range.

        Raises:
            ValueError: If values do not match the range dimensions
        """
        if len(values) != self.num_rows or any(len(row) != self.num_columns for row in values):
            raise ValueError(
                f"Values do not match range {self.get_a1_notation()} "
                f"({self.num_rows}x{self.num_columns})"
            )

        for r, row_values in enumerate(values):
            for c, value in enumerate(row_values):
                self._ws.cell(
                    row=self.row + r,
                    column=self.column + c,
                    value=None if value == '' else value
                )

    def sort(self, criteria: List[SortCriterion]) -> None:
        """
        Sort the range's rows in place by several columns.

        Blank cells always go last for their key, in either direction.
        """
        rows = self.get_values()

        # Stable sorts applied from the least significant key up
        for criterion in reversed(criteria):
            index = criterion.column - self.column
            if not 0 <= index < self.num_columns:
                raise ValueError(f"Sort column {criterion.column} is outside range {self.get_a1_notation()}")

            filled = [row for row in rows if not _is_blank(row[index])]
            blank = [row for row in rows if _is_blank(row[index])]
            filled.sort(key=lambda row: _sort_key(row[index]), reverse=not criterion.ascending)
            rows = filled + blank

        self.set_values(rows)


class FilterAdapter:
    """The auto-filter of an openpyxl worksheet."""

    def __init__(self, worksheet):
        self._ws = worksheet

    @property
    def ref(self) -> Optional[str]:
        return self._ws.auto_filter.ref

    def remove(self) -> None:
        self._ws.auto_filter.ref = None


class WorksheetAdapter:
    """An openpyxl worksheet exposed through the Sheet interface."""

    def __init__(self, worksheet):
        self._ws = worksheet

    @property
    def worksheet(self):
        return self._ws

    def get_name(self) -> str:
        return self._ws.title

    def get_range(self, row: int, column: int, num_rows: int = 1, num_columns: int = 1) -> RangeAdapter:
        return RangeAdapter(self._ws, row, column, num_rows, num_columns)

    def get_data_range(self) -> RangeAdapter:
        """Range from A1 to the last row and column holding data (A1 if empty)."""
        return RangeAdapter(self._ws, 1, 1, max(self.get_last_row(), 1), max(self.get_last_column(), 1))

    def get_last_row(self) -> int:
        """1-based number of the last row holding data, or 0 for an empty sheet."""
        for row_number in range(self._ws.max_row, 0, -1):
            row = next(self._ws.iter_rows(min_row=row_number, max_row=row_number, values_only=True), ())
            if any(not _is_blank(value) for value in row):
                return row_number
        return 0

    def get_last_column(self) -> int:
        """1-based number of the last column holding data, or 0 for an empty sheet."""
        for column_number in range(self._ws.max_column, 0, -1):
            column = next(
                self._ws.iter_cols(min_col=column_number, max_col=column_number, values_only=True),
                ()
            )
            if any(not _is_blank(value) for value in column):
                return column_number
        return 0

    def append_row(self, values: List[Any]) -> None:
        """Write values into the row below the last row holding data."""
        row_number = self.get_last_row() + 1
        for c, value in enumerate(values, start=1):
            self._ws.cell(row=row_number, column=c, value=None if value == '' else value)

    def get_filter(self) -> Optional[FilterAdapter]:
        if not self._ws.auto_filter.ref:
            return None
        return FilterAdapter(self._ws)

    def create_filter(self, row: int, column: int, num_rows: int, num_columns: int) -> FilterAdapter:
        self._ws.auto_filter.ref = _a1_range(row, column, num_rows, num_columns)
        return FilterAdapter(self._ws)


class WorkbookAdapter:
    """An openpyxl workbook exposed through the Spreadsheet interface."""

    def __init__(self, workbook=None):
        self._wb = workbook if workbook is not None else openpyxl.Workbook()

    @classmethod
    def load(cls, path: Union[str, Path]) -> "WorkbookAdapter":
        """Open an existing .xlsx file."""
        logger.info(f"Loading workbook: {path}")
        return cls(openpyxl.load_workbook(str(path)))

    def save(self, path: Union[str, Path]) -> Path:
        """Save the workbook and return its path."""
        path = Path(path)
        self._wb.save(str(path))
        logger.info(f"Saved workbook: {path}")
        return path

    @property
    def workbook(self):
        return self._wb

    def get_sheet_names(self) -> List[str]:
        return list(self._wb.sheetnames)

    def get_sheet_by_name(self, name: str) -> Optional[WorksheetAdapter]:
        if name not in self._wb.sheetnames:
            return None
        return WorksheetAdapter(self._wb[name])

    def insert_sheet(self, name: str) -> WorksheetAdapter:
        return WorksheetAdapter(self._wb.create_sheet(title=name))
