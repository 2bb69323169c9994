"""Tests for CatalogConfig validation and normalization."""

from __future__ import annotations

import dataclasses

import pytest

from textresource import CatalogConfig, PluralCategory
from textresource.constants import DEFAULT_LOCALE, MAX_CONTEXT_CACHE_SIZE


class TestCatalogConfig:
    """Defaults, normalization and validation."""

    def test_defaults(self) -> None:
        """CatalogConfig() is usable as-is."""
        config = CatalogConfig()
        assert config.default_locale == DEFAULT_LOCALE
        assert config.use_language_fallback is True
        assert config.plural_fallback_category is PluralCategory.OTHER
        assert config.context_cache_size == MAX_CONTEXT_CACHE_SIZE

    def test_default_locale_normalized(self) -> None:
        """BCP-47 default locales are stored in POSIX form."""
        assert CatalogConfig(default_locale="pt-BR").default_locale == "pt_BR"

    def test_empty_default_locale_rejected(self) -> None:
        """Whitespace-only locales are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            CatalogConfig(default_locale="  ")

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_cache_size_rejected(self, size: int) -> None:
        """The context cache needs room for at least one entry."""
        with pytest.raises(ValueError, match="must be positive"):
            CatalogConfig(context_cache_size=size)

    def test_plural_category_coerced(self) -> None:
        """Plain category names become PluralCategory members."""
        config = CatalogConfig(plural_fallback_category="many")  # type: ignore[arg-type]
        assert config.plural_fallback_category is PluralCategory.MANY

    def test_unknown_plural_category_rejected(self) -> None:
        """Names outside CLDR are rejected."""
        with pytest.raises(ValueError):
            CatalogConfig(plural_fallback_category="several")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Configuration cannot be changed after construction."""
        config = CatalogConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_locale = "de"  # type: ignore[misc]
