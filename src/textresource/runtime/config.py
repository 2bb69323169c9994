"""Catalog configuration for ResourceCatalog.

Provides a single frozen dataclass that encapsulates lookup and fallback
parameters for the bundled resource environment.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from textresource.constants import DEFAULT_LOCALE, MAX_CONTEXT_CACHE_SIZE
from textresource.enums import PluralCategory
from textresource.locale_utils import normalize_locale

__all__ = ["CatalogConfig"]


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Immutable configuration for ResourceCatalog lookups.

    All fields have sensible defaults; constructing ``CatalogConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        default_locale: Locale consulted last in every fallback chain, the
            equivalent of a platform's unqualified resource directory
            (default: "en_US"). Stored in normalized POSIX form.
        use_language_fallback: Try the language-only locale ("fr" for
            "fr_CA") before the default locale (default: True).
        plural_fallback_category: Form used when a plurals set has no
            template for the selected CLDR category (default: "other").
        context_cache_size: Maximum ResourceContext instances cached per
            catalog by ResourceCatalog.context() (default: 64).

    Example:
        >>> config = CatalogConfig(default_locale="de-DE")
        >>> config.default_locale
        'de_DE'
        >>> catalog = ResourceCatalog(config)
    """

    default_locale: str = DEFAULT_LOCALE
    use_language_fallback: bool = True
    plural_fallback_category: PluralCategory = PluralCategory.OTHER
    context_cache_size: int = MAX_CONTEXT_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate and normalize configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty, context_cache_size is not
                positive, or plural_fallback_category is not a CLDR category.
        """
        object.__setattr__(self, "default_locale", normalize_locale(self.default_locale))
        if self.context_cache_size <= 0:
            msg = "context_cache_size must be positive"
            raise ValueError(msg)
        # Accept plain strings such as "other" and store the enum member
        object.__setattr__(
            self, "plural_fallback_category", PluralCategory(self.plural_fallback_category)
        )
