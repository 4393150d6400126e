"""Pytest configuration and fixtures."""
import pytest
from datetime import datetime


class FakeRange:
    """In-memory Range over a FakeSheet."""

    def __init__(self, sheet, row, column, num_rows=1, num_columns=1):
        self.sheet = sheet
        self.row = row
        self.column = column
        self.num_rows = num_rows
        self.num_columns = num_columns

    def get_values(self):
        return [
            [self.sheet.cell(self.row + r, self.column + c) for c in range(self.num_columns)]
            for r in range(self.num_rows)
        ]

    def set_values(self, values):
        self.sheet.writes.append({'row': self.row, 'column': self.column, 'values': values})
        for r, row_values in enumerate(values):
            for c, value in enumerate(row_values):
                self.sheet.put(self.row + r, self.column + c, value)

    def get_num_rows(self):
        return self.num_rows

    def get_num_columns(self):
        return self.num_columns

    def sort(self, criteria):
        self.sheet.sort_calls.append({'row': self.row, 'num_rows': self.num_rows, 'criteria': criteria})


class FakeFilter:
    """Filter that records its removal on the owning sheet."""

    def __init__(self, sheet):
        self.sheet = sheet

    def remove(self):
        self.sheet.filter = None
        self.sheet.filter_removed = True


class FakeSheet:
    """In-memory Sheet. rows is a list of lists; '' marks an empty cell."""

    def __init__(self, name="SheetMock", rows=None):
        self.name = name
        self.rows = [list(row) for row in (rows or [])]
        self.writes = []
        self.sort_calls = []
        self.filter = None
        self.filter_removed = False
        self.created_filters = []

    def cell(self, row, column):
        if row - 1 < len(self.rows) and column - 1 < len(self.rows[row - 1]):
            return self.rows[row - 1][column - 1]
        return ''

    def put(self, row, column, value):
        while len(self.rows) < row:
            self.rows.append([])
        target = self.rows[row - 1]
        while len(target) < column:
            target.append('')
        target[column - 1] = value

    def get_name(self):
        return self.name

    def get_range(self, row, column, num_rows=1, num_columns=1):
        return FakeRange(self, row, column, num_rows, num_columns)

    def get_data_range(self):
        return FakeRange(self, 1, 1, max(self.get_last_row(), 1), max(self.get_last_column(), 1))

    def get_last_row(self):
        for index in range(len(self.rows), 0, -1):
            if any(value != '' for value in self.rows[index - 1]):
                return index
        return 0

    def get_last_column(self):
        width = 0
        for row in self.rows:
            for index, value in enumerate(row, start=1):
                if value != '':
                    width = max(width, index)
        return width

    def append_row(self, values):
        self.rows = self.rows[:self.get_last_row()]
        self.rows.append(list(values))

    def get_filter(self):
        return self.filter

    def create_filter(self, row, column, num_rows, num_columns):
        self.created_filters.append((row, column, num_rows, num_columns))
        self.filter = FakeFilter(self)
        return self.filter


class FakeSpreadsheet:
    """In-memory Spreadsheet holding FakeSheets by name."""

    def __init__(self, sheets=None):
        self.sheets = {sheet.get_name(): sheet for sheet in (sheets or [])}
        self.inserted = []

    def get_sheet_by_name(self, name):
        return self.sheets.get(name)

    def insert_sheet(self, name):
        sheet = FakeSheet(name)
        self.sheets[name] = sheet
        self.inserted.append(name)
        return sheet


@pytest.fixture
def sheet_factory():
    """Build a FakeSheet from rows."""
    def _make(rows=None, name="SheetMock"):
        return FakeSheet(name=name, rows=rows)
    return _make


@pytest.fixture
def people_sheet():
    """Sheet with a title row and three keyed data rows."""
    return FakeSheet(name="People", rows=[
        ["Id", "Name", "Active", "Joined"],
        ["A1", "Ana", True, datetime(2024, 1, 15)],
        ["A2", "Bruno", False, datetime(2024, 3, 2)],
        ["A3", "Carla", True, datetime(2023, 11, 30)],
    ])


@pytest.fixture
def spreadsheet():
    """Spreadsheet with a single 'Existing' sheet."""
    return FakeSpreadsheet([FakeSheet(name="Existing")])


@pytest.fixture
def morning():
    """A datetime early in the day."""
    return datetime(2025, 8, 14, 0, 0, 0)


@pytest.fixture
def evening():
    """A datetime late on the same day."""
    return datetime(2025, 8, 14, 21, 30, 0)
