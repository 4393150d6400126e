"""Configuration management."""
from .settings import *
from .locale_loader import MonthNames, LocaleLoader, get_locale_loader

__all__ = ['MonthNames', 'LocaleLoader', 'get_locale_loader']
