"""Load month names per locale."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional
import yaml

from .settings import MONTH_NAMES_FILE, DEFAULT_LOCALE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthNames:
    """
    Month names for a single locale.

    Attributes:
        locale: Locale code (lowercase, e.g. 'es-uy')
        names: Twelve full month names, January first
        short_names: Twelve abbreviated month names, January first
    """
    locale: str
    names: tuple
    short_names: tuple

    def __post_init__(self):
        """Validate month name lists."""
        if len(self.names) != 12:
            raise ValueError(f"{self.locale}: expected 12 month names, got {len(self.names)}")
        if len(self.short_names) != 12:
            raise ValueError(f"{self.locale}: expected 12 short month names, got {len(self.short_names)}")


class LocaleLoader:
    """Loads and serves month names keyed by locale code."""

    def __init__(self, months_file: Path = MONTH_NAMES_FILE, default_locale: str = DEFAULT_LOCALE):
        """
        Initialize locale loader.

        Args:
            months_file: YAML file mapping locale code to names/short_names
            default_locale: Locale used when a requested one is unknown
        """
        self.months_file = months_file
        self.default_locale = default_locale.lower()
        self._locales: Dict[str, MonthNames] = {}
        self._load_locales()

    def _load_locales(self) -> None:
        """Load every locale from the YAML file."""
        if not self.months_file.exists():
            logger.warning(f"Month names file not found: {self.months_file}")
            return

        with open(self.months_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        for locale, entry in data.items():
            if not isinstance(entry, dict):
                logger.error(f"Invalid month names entry for locale {locale}")
                continue
            try:
                months = MonthNames(
                    locale=str(locale).lower(),
                    names=tuple(entry.get('names', [])),
                    short_names=tuple(entry.get('short_names', [])),
                )
            except ValueError as e:
                logger.error(f"Skipping locale {locale}: {e}")
                continue
            self._locales[months.locale] = months

        logger.debug(f"Loaded month names for {len(self._locales)} locales")

    def get_locale(self, locale: str) -> Optional[MonthNames]:
        """Get month names for a locale (case-insensitive), or None."""
        return self._locales.get(locale.lower())

    def months_for(self, locale: Optional[str] = None) -> MonthNames:
        """
        Get month names for a locale, falling back to the default locale.

        Args:
            locale: Locale code, or None for the default

        Returns:
            MonthNames for the locale

        Raises:
            LookupError: If neither the locale nor the default is loaded
        """
        if locale:
            months = self.get_locale(locale)
            if months:
                return months
        months = self._locales.get(self.default_locale)
        if months is None:
            raise LookupError(f"Default locale not loaded: {self.default_locale}")
        return months

    def get_all_locales(self) -> List[str]:
        """Get list of loaded locale codes."""
        return list(self._locales.keys())


# Singleton instance
_loader: Optional[LocaleLoader] = None


def get_locale_loader() -> LocaleLoader:
    """Get singleton instance of LocaleLoader."""
    global _loader
    if _loader is None:
        _loader = LocaleLoader()
    return _loader
