"""Tests for locale loader."""
import pytest

from sheetutils.config.locale_loader import LocaleLoader, MonthNames, get_locale_loader

MONTHS = ["m1", "m2", "m3", "m4", "m5", "m6", "m7", "m8", "m9", "m10", "m11", "m12"]


@pytest.fixture
def months_file(tmp_path):
    """YAML file with one valid and one broken locale."""
    path = tmp_path / "months.yaml"
    path.write_text(
        "XX:\n"
        f"  names: [{', '.join(MONTHS)}]\n"
        f"  short_names: [{', '.join(MONTHS)}]\n"
        "broken:\n"
        "  names: [only, three, names]\n"
        "  short_names: [a, b, c]\n"
        "scalar: nope\n",
        encoding="utf-8"
    )
    return path


class TestLocaleLoader:
    """Test loading month names from YAML."""

    def test_loads_valid_locales(self, months_file):
        """Test valid locales are loaded with lowercase codes."""
        loader = LocaleLoader(months_file, default_locale="xx")

        assert loader.get_all_locales() == ["xx"]
        assert loader.get_locale("XX").names[8] == "m9"

    def test_months_for_falls_back_to_default(self, months_file):
        """Test unknown or missing locales use the default."""
        loader = LocaleLoader(months_file, default_locale="xx")

        assert loader.months_for("zz").locale == "xx"
        assert loader.months_for(None).locale == "xx"

    def test_missing_default_raises(self, months_file):
        """Test an unloaded default locale is an error."""
        loader = LocaleLoader(months_file, default_locale="yy")

        with pytest.raises(LookupError):
            loader.months_for("zz")

    def test_missing_file(self, tmp_path):
        """Test a missing file loads nothing."""
        loader = LocaleLoader(tmp_path / "absent.yaml")
        assert loader.get_all_locales() == []

    def test_bundled_locales(self):
        """Test the packaged file provides the shipped locales."""
        loader = get_locale_loader()

        assert {"en-us", "es", "es-uy"} <= set(loader.get_all_locales())
        assert loader.get_locale("es-uy").names[8] == "Setiembre"
        assert loader.get_locale("es").short_names[0] == "Ene"

    def test_singleton(self):
        """Test the loader is shared."""
        assert get_locale_loader() is get_locale_loader()


class TestMonthNames:
    """Test month name validation."""

    def test_requires_twelve_names(self):
        """Test short lists are rejected."""
        with pytest.raises(ValueError, match="12 month names"):
            MonthNames(locale="xx", names=("a",), short_names=tuple(MONTHS))
        with pytest.raises(ValueError, match="12 short month names"):
            MonthNames(locale="xx", names=tuple(MONTHS), short_names=("a",))
