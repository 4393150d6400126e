"""Tests for JSON serialization helpers."""
import json
import pytest
from collections import OrderedDict
from datetime import datetime, timezone

from sheetutils.cells import normalize
from sheetutils.models import InvalidArgumentError
from sheetutils.utils.serialization import (
    stringify_date,
    parse_iso_date,
    stringify_object,
    parse_object,
    stringify_map,
    parse_map,
)

NEW_YEAR = datetime(2020, 1, 1, tzinfo=timezone.utc)


class TestDates:
    """Test datetime serialization."""

    def test_stringify_utc(self):
        """Test UTC datetimes with millisecond precision."""
        assert stringify_date(NEW_YEAR) == "2020-01-01T00:00:00.000Z"
        assert stringify_date(NEW_YEAR.replace(microsecond=123456)) == "2020-01-01T00:00:00.123Z"

    def test_stringify_naive_is_local(self):
        """Test naive datetimes are read as local time."""
        naive = datetime(2020, 6, 1, 12, 0)
        assert stringify_date(naive) == stringify_date(naive.astimezone())

    def test_stringify_invalid(self):
        """Test non-datetimes are rejected."""
        with pytest.raises(InvalidArgumentError):
            stringify_date("2020-01-01")

    def test_parse(self):
        """Test parsing gives an aware datetime."""
        assert parse_iso_date("2020-01-01T00:00:00.000Z") == NEW_YEAR

    @pytest.mark.parametrize("value", ["", "   ", None, "not a date"])
    def test_parse_invalid(self, value):
        """Test blank and malformed strings are rejected."""
        with pytest.raises(InvalidArgumentError):
            parse_iso_date(value)


class TestObjects:
    """Test object serialization with tagged dates."""

    def test_dates_are_tagged(self):
        """Test datetimes are written as tagged objects."""
        data = json.loads(stringify_object({"when": NEW_YEAR}))
        assert data == {"when": {"__type": "Date", "value": "2020-01-01T00:00:00.000Z"}}

    def test_round_trip_restores_dates(self):
        """Test nested datetimes come back as datetimes."""
        original = {"name": "Ana", "events": [{"at": NEW_YEAR}], "count": 3}
        assert parse_object(stringify_object(original)) == original

    def test_round_trip_naive_dates(self):
        """Test naive datetimes come back naive and equal."""
        joined = normalize("date", "14/08/2023")
        original = {"joined": joined, "seen": datetime(2024, 2, 29, 18, 45, 12)}

        restored = parse_object(stringify_object(original))

        assert restored == original
        assert restored["joined"].tzinfo is None

    def test_naive_dates_are_flagged(self):
        """Test naive datetimes carry the naive flag."""
        data = json.loads(stringify_object([datetime(2023, 8, 14)]))
        assert data[0]["naive"] is True

    def test_lists(self):
        """Test top-level lists are accepted."""
        assert parse_object(stringify_object([1, NEW_YEAR])) == [1, NEW_YEAR]

    def test_other_tags_untouched(self):
        """Test objects with a different tag stay dicts."""
        assert parse_object('{"__type": "Other", "value": "x"}') == {"__type": "Other", "value": "x"}

    def test_stringify_invalid(self):
        """Test non-containers and unserializable values."""
        with pytest.raises(InvalidArgumentError):
            stringify_object("text")
        with pytest.raises(TypeError):
            stringify_object({"s": {1, 2}})

    def test_parse_invalid(self):
        """Test blank input and malformed JSON."""
        with pytest.raises(InvalidArgumentError):
            parse_object("")
        with pytest.raises(json.JSONDecodeError):
            parse_object("{bad json")


class TestMaps:
    """Test mapping serialization."""

    def test_round_trip(self):
        """Test mappings round-trip as dicts."""
        mapping = OrderedDict([("b", 1), ("a", NEW_YEAR)])
        assert parse_map(stringify_map(mapping)) == {"b": 1, "a": NEW_YEAR}

    def test_invalid(self):
        """Test non-mappings and non-object JSON."""
        with pytest.raises(InvalidArgumentError):
            stringify_map([("a", 1)])
        with pytest.raises(InvalidArgumentError):
            parse_map("[1, 2]")
