"""Tests for timestamp formatting."""
import pytest
from datetime import datetime

from sheetutils.models import InvalidArgumentError
from sheetutils.utils.timestamp import get_timestamp

AFTERNOON = datetime(2024, 9, 5, 14, 7, 3)
MIDNIGHT = datetime(2024, 1, 2, 0, 5, 9)


class TestGetTimestamp:
    """Test placeholder substitution."""

    def test_default_format(self):
        """Test the default 'YYYYMMDD HHmmss' format."""
        assert get_timestamp(now=AFTERNOON) == "20240905 140703"

    def test_unpadded_components(self):
        """Test single-letter placeholders are not padded."""
        assert get_timestamp("D/M/YY H:m:s", now=AFTERNOON) == "5/9/24 14:7:3"

    def test_twelve_hour_clock(self):
        """Test 12h hours and AM/PM markers."""
        assert get_timestamp("hh:mm AMPM", now=AFTERNOON) == "02:07 PM"
        assert get_timestamp("h:mm ampm", now=MIDNIGHT) == "12:05 am"

    def test_month_names_english(self):
        """Test full and short English month names."""
        assert get_timestamp("MMMM/MMM", locale="en-us", now=AFTERNOON) == "September/Sep"

    def test_month_names_uruguay(self):
        """Test Uruguayan Spanish month names."""
        result = get_timestamp("DD de MMMM de YYYY", locale="es-uy", now=AFTERNOON)
        assert result == "05 de Setiembre de 2024"

    def test_month_names_spain(self):
        """Test Spanish month names."""
        assert get_timestamp("MMMM", locale="es", now=AFTERNOON) == "Septiembre"

    def test_locale_is_case_insensitive(self):
        """Test locale codes ignore case."""
        assert get_timestamp("MMM", locale="EN-US", now=AFTERNOON) == "Sep"

    def test_unknown_locale_falls_back(self):
        """Test unknown locales use the default locale."""
        assert get_timestamp("MMMM", locale="fr", now=AFTERNOON) == get_timestamp("MMMM", now=AFTERNOON)

    def test_literal_text_kept(self):
        """Test characters that are not placeholders survive."""
        assert get_timestamp("backup_YYYY", now=AFTERNOON) == "backup_2024"

    def test_uses_current_time(self):
        """Test the current time is used without 'now'."""
        assert get_timestamp("YYYY") == str(datetime.now().year)

    @pytest.mark.parametrize("fmt", ["", "   ", 42])
    def test_invalid_format(self, fmt):
        """Test blank or non-string formats are rejected."""
        with pytest.raises(InvalidArgumentError):
            get_timestamp(fmt)

    @pytest.mark.parametrize("locale", ["", "  ", 3])
    def test_invalid_locale(self, locale):
        """Test blank or non-string locales are rejected."""
        with pytest.raises(InvalidArgumentError):
            get_timestamp("YYYY", locale)
