"""Slug generation for range and file names."""
import re
import unicodedata
from collections import OrderedDict
from typing import Optional

from ..config.settings import SLUG_CACHE_SIZE

SYMBOL_REPLACEMENTS = {
    "<": "_lt_", ">": "_gt_", "+": "_plus_", "%": "_percent_",
    "&": "_and_", "/": "_slash_", "\\": "_backslash_", "=": "_eq_",
    "!": "_excl_", "?": "_q_", ":": "_colon_", ";": "_semicolon_",
    '"': "_dquote_", "'": "_apos_", ",": "_comma_", ".": "_dot_",
    "(": "_lpar_", ")": "_rpar_", "[": "_lbracket_", "]": "_rbracket_",
    "{": "_lbrace_", "}": "_rbrace_", "|": "_pipe_", "#": "_hash_",
    "@": "_at_", "^": "_caret_", "~": "_tilde_", "*": "_star_",
    "$": "_dollar_", "`": "_backtick_",
}

NON_SLUG_CHARS = re.compile(r'[^a-zA-Z0-9_]+')
REPEATED_UNDERSCORES = re.compile(r'_+')


def to_slug(text) -> str:
    """
    Convert text into a slug safe for names that reject special characters.

    Accents are stripped, symbols become words ('&' -> '_and_') and any
    other run of non-alphanumeric characters collapses to a single '_'.

    Args:
        text: Input text

    Returns:
        Lowercase slug, or '' if text is not a string

    Example:
        >>> to_slug("A&B+C=D")
        'a_and_b_plus_c_eq_d'
    """
    if not isinstance(text, str):
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    without_accents = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    replaced = "".join(SYMBOL_REPLACEMENTS.get(ch, ch) for ch in without_accents)

    slug = NON_SLUG_CHARS.sub("_", replaced).strip("_")
    return REPEATED_UNDERSCORES.sub("_", slug).lower()


class SlugCache:
    """Bounded least-recently-used cache of slugs."""

    def __init__(self, maxsize: int = SLUG_CACHE_SIZE):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._slugs: "OrderedDict[str, str]" = OrderedDict()

    def slug(self, text) -> str:
        """Slug for text, computed once per cached entry."""
        if not isinstance(text, str):
            return ""

        if text in self._slugs:
            self._slugs.move_to_end(text)
            return self._slugs[text]

        slug = to_slug(text)
        self._slugs[text] = slug
        if len(self._slugs) > self.maxsize:
            self._slugs.popitem(last=False)
        return slug

    def clear(self) -> None:
        self._slugs.clear()

    def __len__(self) -> int:
        return len(self._slugs)

    def __contains__(self, text) -> bool:
        return text in self._slugs


_default_cache = SlugCache()


def to_slug_memoized(text, cache: Optional[SlugCache] = None) -> str:
    """Like to_slug, but served from an LRU cache (module default if none given)."""
    if cache is None:
        cache = _default_cache
    return cache.slug(text)
