"""Read, write, update and sort tabular data through Sheet handles."""
import logging
from typing import Any, List, Optional, Set

from ..cells import are_equal, get_normalizer
from ..config.settings import ROW_PLACEHOLDER
from ..models import UNSET, CellValueType, InvalidArgumentError, is_absent
from .interfaces import ColumnHandlers, RowUpdate, Sheet, SortCriterion, Spreadsheet

logger = logging.getLogger(__name__)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _substitute_row_number(cell: Any, row_number: int) -> Any:
    """Replace __ROW__ in string cells (typically formulas) with the row number."""
    if isinstance(cell, str) and ROW_PLACEHOLDER in cell:
        return cell.replace(ROW_PLACEHOLDER, str(row_number))
    return cell


def get_values_from_column(
    sheet: Sheet,
    column: int,
    handlers: Optional[ColumnHandlers] = None
) -> Optional[List[Any]]:
    """
    Get the values of one column, optionally filtered and formatted.

    Processing order:
        1. handlers.filter_rows on every row of the data range
        2. handlers.format_cell on the column's cell of each remaining row
        3. handlers.filter_cells on the formatted cells

    Args:
        sheet: Sheet to read
        column: 0-based column index
        handlers: Optional processing steps

    Returns:
        List of values, [] for an empty sheet, or None if the sheet or
        column is invalid or the read fails
    """
    if not isinstance(sheet, Sheet):
        logger.warning("Parameter 'sheet' is not a valid Sheet")
        return None

    if not isinstance(column, int) or isinstance(column, bool) or column < 0:
        logger.warning(f"Parameter 'column' is not valid: {column!r}")
        return None

    handlers = handlers or ColumnHandlers()

    try:
        data_range = sheet.get_data_range()
        rows_count = data_range.get_num_rows()
        cols_count = data_range.get_num_columns()

        # A brand-new sheet reports a single 1x1 data range
        if rows_count == 0 or cols_count == 0 or (rows_count == 1 and cols_count == 1):
            return []

        rows = data_range.get_values()

        if column >= len(rows[0]):
            logger.warning(f"Column {column} does not exist in sheet '{sheet.get_name()}'")
            return None

        if handlers.filter_rows:
            rows = [row for row in rows if handlers.filter_rows(row)]

        cells = [row[column] for row in rows]
        if handlers.format_cell:
            cells = [handlers.format_cell(cell) for cell in cells]

        if handlers.filter_cells:
            cells = [cell for cell in cells if handlers.filter_cells(cell)]

        return cells

    except Exception as e:
        logger.warning(f"Error in get_values_from_column: {e}")
        return None


def get_unique_values_from_column(
    sheet: Sheet,
    column: int,
    handlers: Optional[ColumnHandlers] = None
) -> Optional[Set[Any]]:
    """Like get_values_from_column, returning the distinct values as a set."""
    values = get_values_from_column(sheet, column, handlers)
    return set(values) if values is not None else None


def write_table_to_sheet(
    sheet: Sheet,
    table: List[List[Any]],
    start_row: int = 1,
    start_col: int = 1
) -> None:
    """
    Write a table to a sheet in a single call.

    Rows may have different lengths; shorter rows are padded with ''.

    Args:
        sheet: Destination sheet
        table: List of rows
        start_row: 1-based row of the top-left cell
        start_col: 1-based column of the top-left cell

    Raises:
        InvalidArgumentError: If the sheet, table or start position is invalid
    """
    if not isinstance(sheet, Sheet):
        raise InvalidArgumentError("Parameter 'sheet' is not a valid Sheet")

    if not isinstance(table, list) or any(not isinstance(row, list) for row in table):
        raise InvalidArgumentError("Parameter 'table' is not a list of rows")

    if not _is_positive_int(start_row) or not _is_positive_int(start_col):
        raise InvalidArgumentError("'start_row' and 'start_col' must be positive integers")

    if not table:
        return

    max_width = max(len(row) for row in table)
    if max_width == 0:
        return

    output = [row + [''] * (max_width - len(row)) for row in table]

    try:
        sheet.get_range(start_row, start_col, len(output), max_width).set_values(output)
    except Exception as e:
        logger.error(f"Error in write_table_to_sheet: {e}")
        raise


def get_or_create_sheet(spreadsheet: Spreadsheet, sheet_name: str) -> Sheet:
    """
    Get a sheet by name, creating it if it does not exist.

    Raises:
        InvalidArgumentError: If spreadsheet is invalid or sheet_name is blank
    """
    if not isinstance(spreadsheet, Spreadsheet):
        raise InvalidArgumentError("Parameter 'spreadsheet' is not a valid Spreadsheet")

    if not isinstance(sheet_name, str) or not sheet_name.strip():
        raise InvalidArgumentError("Sheet name must be a non-empty string")

    try:
        sheet = spreadsheet.get_sheet_by_name(sheet_name)
        if sheet is None:
            logger.info(f"Creating sheet '{sheet_name}'")
            sheet = spreadsheet.insert_sheet(sheet_name)
        return sheet

    except Exception as e:
        logger.error(f"Error in get_or_create_sheet: {e}")
        raise


def column_to_letter(column: int) -> str:
    """
    Convert a 1-based column number to its A1 letters.

    Example:
        >>> column_to_letter(27)
        'AA'
    """
    letters = ''
    while column > 0:
        column, remainder = divmod(column - 1, 26)
        letters = chr(65 + remainder) + letters
    return letters


def build_row_range_address(sheet_name: str, row: int, start_col: int, length: int) -> str:
    """
    Build the A1 address of a horizontal range.

    Args:
        sheet_name: Sheet name
        row: 1-based row number
        start_col: 1-based column of the first cell
        length: Number of cells in the range

    Returns:
        Address such as 'Hoja 1!B2:D2', or 'Hoja 1!B2' for a single cell

    Raises:
        InvalidArgumentError: If sheet_name is blank or a number is not a
            positive integer
    """
    if not isinstance(sheet_name, str) or not sheet_name.strip():
        raise InvalidArgumentError("Parameter 'sheet_name' must be a non-empty string")
    if not _is_positive_int(row):
        raise InvalidArgumentError("Parameter 'row' must be a positive integer (1-based)")
    if not _is_positive_int(start_col):
        raise InvalidArgumentError("Parameter 'start_col' must be a positive integer (1-based)")
    if not _is_positive_int(length):
        raise InvalidArgumentError("Parameter 'length' must be a positive integer")

    start = f"{column_to_letter(start_col)}{row}"
    if length == 1:
        return f"{sheet_name}!{start}"

    end = f"{column_to_letter(start_col + length - 1)}{row}"
    return f"{sheet_name}!{start}:{end}"


def append_rows_to_sheet(sheet: Sheet, rows: List[List[Any]], column_titles: List[str]) -> None:
    """
    Append rows below the last row of a sheet.

    If the sheet is empty, column_titles are written first. '__ROW__' in
    string cells is replaced by the 1-based row number the cell lands on.

    Raises:
        InvalidArgumentError: If sheet, rows or column_titles are invalid
    """
    if not isinstance(sheet, Sheet):
        raise InvalidArgumentError("Parameter 'sheet' is not a valid Sheet")

    if not isinstance(rows, list) or any(not isinstance(row, list) for row in rows):
        raise InvalidArgumentError("Parameter 'rows' is not a list of rows")

    if not isinstance(column_titles, list) or any(not isinstance(t, str) for t in column_titles):
        raise InvalidArgumentError("Parameter 'column_titles' must be a list of strings")

    if not rows:
        return

    try:
        last_row = sheet.get_last_row()

        if last_row == 0 and column_titles:
            sheet.append_row(column_titles)
            last_row = 1

        processed = [
            [_substitute_row_number(cell, last_row + 1 + i) for cell in row]
            for i, row in enumerate(rows)
        ]

        sheet.get_range(last_row + 1, 1, len(processed), len(processed[0])).set_values(processed)

    except Exception as e:
        logger.error(f"Error appending rows to sheet '{sheet.get_name()}': {e}")
        raise


def update_rows_in_sheet(
    sheet: Sheet,
    key_column: int,
    key_type,
    rows_map: List[RowUpdate]
) -> int:
    """
    Update the rows whose key column matches each RowUpdate's key.

    The sheet is assumed to have a title row followed by data rows, with
    unique keys. Sheet keys and incoming keys are both normalized as
    key_type before matching. Cells set to UNSET keep their current
    value; a row is written only if some provided cell differs from the
    sheet (per are_equal). '__ROW__' in string cells is replaced by the
    row number.

    Rows are as wide as the first update's row. Shorter updates leave the
    remaining cells untouched; cells beyond that width are ignored.

    Args:
        sheet: Sheet to update
        key_column: 0-based index of the key column
        key_type: CellValueType (or its string value) of the keys
        rows_map: Updates to apply

    Returns:
        Number of rows written

    Raises:
        InvalidArgumentError: If any parameter is invalid
    """
    if not isinstance(sheet, Sheet):
        raise InvalidArgumentError("Parameter 'sheet' is not a valid Sheet")

    if not isinstance(key_column, int) or isinstance(key_column, bool) or key_column < 0:
        raise InvalidArgumentError("Parameter 'key_column' is not valid")

    normalize_key = get_normalizer(CellValueType.coerce(key_type))

    if not isinstance(rows_map, list) or any(not isinstance(u, RowUpdate) for u in rows_map):
        raise InvalidArgumentError("Parameter 'rows_map' must be a list of RowUpdate")

    if not rows_map:
        return 0

    try:
        last_row = sheet.get_last_row()
        if last_row < 2:
            return 0

        num_columns = len(rows_map[0].row)

        key_values = sheet.get_range(2, key_column + 1, last_row - 1, 1).get_values()

        # normalized key -> sheet row number (1-based, data starts at row 2)
        key_to_row = {}
        for offset, (key,) in enumerate(key_values):
            if key == '' or is_absent(key):
                continue
            normalized = normalize_key(key)
            if normalized is not None:
                key_to_row[normalized] = offset + 2

        updated = 0
        for update in rows_map:
            incoming_key = normalize_key(update.key)
            target_row = key_to_row.get(incoming_key) if incoming_key is not None else None
            if target_row is None:
                continue

            target_range = sheet.get_range(target_row, 1, 1, num_columns)
            original_row = target_range.get_values()[0]

            # Cells past the end of the incoming row keep their sheet value
            incoming = [update.row[i] if i < len(update.row) else UNSET for i in range(num_columns)]

            has_changes = any(
                value is not UNSET and not are_equal(value, original)
                for value, original in zip(incoming, original_row)
            )
            if not has_changes:
                continue

            final_row = [
                original if value is UNSET else _substitute_row_number(value, target_row)
                for value, original in zip(incoming, original_row)
            ]
            target_range.set_values([final_row])
            updated += 1

        logger.debug(f"Updated {updated} rows in sheet '{sheet.get_name()}'")
        return updated

    except Exception as e:
        logger.error(f"Error updating rows in sheet '{sheet.get_name()}': {e}")
        raise


def sort_sheet(sheet: Sheet, criteria: List[SortCriterion]) -> None:
    """
    Sort a sheet's data rows (everything below the title row) by several columns.

    An existing filter is removed for the sort and recreated afterwards.
    Sort failures are logged, not raised.

    Args:
        sheet: Sheet to sort
        criteria: Sort keys, most significant first

    Raises:
        InvalidArgumentError: If the sheet or any criterion is invalid
    """
    if not isinstance(sheet, Sheet):
        raise InvalidArgumentError("Parameter 'sheet' is not a valid Sheet")

    if not isinstance(criteria, list):
        raise InvalidArgumentError("Parameter 'criteria' is not valid")

    if not criteria:
        return

    column_count = sheet.get_last_column()

    for i, criterion in enumerate(criteria):
        if not isinstance(criterion, SortCriterion):
            raise InvalidArgumentError("Parameter 'criteria' is not valid")

        if not _is_positive_int(criterion.column) or criterion.column > column_count:
            raise InvalidArgumentError(f"Invalid sort criterion at position {i}: column out of range")

        if not isinstance(criterion.ascending, bool):
            raise InvalidArgumentError(f"Invalid sort criterion at position {i}: 'ascending' must be a bool")

    last_row = sheet.get_last_row()
    if last_row <= 1:
        logger.warning("Not enough rows to sort")
        return

    had_filter = sheet.get_filter() is not None
    if had_filter:
        sheet.get_filter().remove()

    try:
        sheet.get_range(2, 1, last_row - 1, column_count).sort(criteria)
    except Exception as e:
        logger.warning(f"Error sorting sheet '{sheet.get_name()}': {e}")
    finally:
        if had_filter:
            sheet.create_filter(1, 1, last_row, column_count)
