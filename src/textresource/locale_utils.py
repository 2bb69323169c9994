"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from textresource.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "coerce_locale_code",
    "get_babel_locale",
    "language_of",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    This function performs the necessary conversion for Babel API compatibility.

    Normalize at the system boundary (catalog registration, context creation)
    using this function, then use the normalized form for cache keys and
    lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Raises:
        ValueError: If locale_code is empty or whitespace-only

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    stripped = locale_code.strip()
    if not stripped:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    # Drop encoding suffixes such as "de_DE.UTF-8"
    return stripped.split(".")[0].replace("-", "_")


def coerce_locale_code(locale: str | Locale) -> str:
    """Return a normalized locale code for a code string or a Babel Locale.

    Example:
        >>> from babel import Locale
        >>> coerce_locale_code(Locale("fr", "FR"))
        'fr_FR'
        >>> coerce_locale_code("fr-FR")
        'fr_FR'
    """
    if isinstance(locale, str):
        return normalize_locale(locale)
    # babel.Locale renders as its POSIX identifier
    return normalize_locale(str(locale))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def language_of(locale_code: str) -> str:
    """Return the language subtag of a locale code.

    Uses Babel's parse result when the locale is known, so scripts and
    variants are handled the CLDR way. Unknown codes are split on the first
    separator.

    Example:
        >>> language_of("fr_CA")
        'fr'
        >>> language_of("zh-Hant-TW")
        'zh'
        >>> language_of("xx_YY")
        'xx'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return get_babel_locale(normalized).language
    except (UnknownLocaleError, ValueError):
        return normalized.split("_", 1)[0]
