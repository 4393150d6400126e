"""Spreadsheet interfaces, table helpers and the openpyxl backend."""
from .interfaces import Range, Filter, Sheet, Spreadsheet, SortCriterion, ColumnHandlers, RowUpdate
from .operations import (
    get_values_from_column,
    get_unique_values_from_column,
    write_table_to_sheet,
    get_or_create_sheet,
    column_to_letter,
    build_row_range_address,
    append_rows_to_sheet,
    update_rows_in_sheet,
    sort_sheet
)
from .openpyxl_adapter import WorkbookAdapter, WorksheetAdapter, RangeAdapter

__all__ = [
    'Range',
    'Filter',
    'Sheet',
    'Spreadsheet',
    'SortCriterion',
    'ColumnHandlers',
    'RowUpdate',
    'get_values_from_column',
    'get_unique_values_from_column',
    'write_table_to_sheet',
    'get_or_create_sheet',
    'column_to_letter',
    'build_row_range_address',
    'append_rows_to_sheet',
    'update_rows_in_sheet',
    'sort_sheet',
    'WorkbookAdapter',
    'WorksheetAdapter',
    'RangeAdapter'
]
