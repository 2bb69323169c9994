"""Tests for ResourceCatalog - registration, fallback chains and context cache.

Covers validation of registered resources, lookup through the locale
fallback chain, the LRU context cache, and snapshot copies.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType

import pytest
from babel import Locale

from textresource import CatalogConfig, PluralCategory, ResourceCatalog, ResourceNotFoundError
from textresource.enums import ResourceKind

# ============================================================================
# Registration
# ============================================================================


class TestRegistration:
    """add_string, add_strings, add_plurals and from_mapping."""

    def test_add_string_then_lookup(self) -> None:
        """A registered template is found for its locale."""
        catalog = ResourceCatalog()
        catalog.add_string("en", "hello", "Hello")
        assert catalog.lookup_string("en", "hello") == ("Hello", "en")

    def test_add_string_replaces(self) -> None:
        """Re-registering an ID replaces the template."""
        catalog = ResourceCatalog()
        catalog.add_string("en", "hello", "Hello")
        catalog.add_string("en", "hello", "Hi")
        assert catalog.lookup_string("en", "hello")[0] == "Hi"

    def test_locale_normalized(self) -> None:
        """BCP-47 codes and Babel Locales are stored in POSIX form."""
        catalog = ResourceCatalog()
        catalog.add_string("pt-BR", "hello", "Olá")
        catalog.add_string(Locale("de", "DE"), "hello", "Hallo")
        assert catalog.locales == ("de_DE", "pt_BR")

    @pytest.mark.parametrize("resource_id", ["", " hello", "hello\n"])
    def test_invalid_resource_id_rejected(self, resource_id: str) -> None:
        """Empty IDs and IDs with surrounding whitespace are rejected."""
        with pytest.raises(ValueError, match="Resource ID"):
            ResourceCatalog().add_string("en", resource_id, "x")

    def test_non_string_template_rejected(self) -> None:
        """Templates must be str."""
        with pytest.raises(TypeError, match="must be a str"):
            ResourceCatalog().add_string("en", "hello", 42)  # type: ignore[arg-type]

    def test_add_plurals_stores_read_only_forms(self) -> None:
        """Plural forms are keyed by PluralCategory and read-only."""
        catalog = ResourceCatalog()
        catalog.add_plurals("en", "apples", {"one": "%d apple", "other": "%d apples"})
        forms, code = catalog.lookup_plurals("en", "apples")
        assert code == "en"
        assert isinstance(forms, MappingProxyType)
        assert forms[PluralCategory.ONE] == "%d apple"
        assert forms["other"] == "%d apples"

    def test_plurals_source_mapping_is_copied(self) -> None:
        """Changing the caller's dict after registration has no effect."""
        source = {"other": "%d apples"}
        catalog = ResourceCatalog()
        catalog.add_plurals("en", "apples", source)
        source["other"] = "changed"
        assert catalog.lookup_plurals("en", "apples")[0]["other"] == "%d apples"

    def test_empty_plurals_rejected(self) -> None:
        """A plurals resource needs at least one form."""
        with pytest.raises(ValueError, match="at least one form"):
            ResourceCatalog().add_plurals("en", "apples", {})

    def test_unknown_category_rejected(self) -> None:
        """Only CLDR category names are accepted."""
        with pytest.raises(ValueError, match="Unknown plural category 'several'"):
            ResourceCatalog().add_plurals("en", "apples", {"several": "x"})

    def test_non_string_plural_template_rejected(self) -> None:
        """Plural templates must be str."""
        with pytest.raises(TypeError):
            ResourceCatalog().add_plurals("en", "apples", {"one": 1})  # type: ignore[dict-item]

    def test_from_mapping(self, catalog: ResourceCatalog) -> None:
        """from_mapping registers both sections for every locale."""
        assert catalog.locales == ("en", "fr", "ru")
        assert catalog.has_string("fr", "greeting")
        assert catalog.has_plurals("ru", "apples_count")

    def test_from_mapping_unknown_section(self) -> None:
        """Sections other than strings/plurals are rejected."""
        with pytest.raises(ValueError, match="Unknown catalog section"):
            ResourceCatalog.from_mapping({"en": {"arrays": {}}})

    def test_registration_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Registrations are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="textresource.runtime.catalog"):
            ResourceCatalog().add_string("en", "hello", "Hello")
        assert "Registered string 'hello' for en" in caplog.text


# ============================================================================
# Fallback chain and lookup
# ============================================================================


class TestFallback:
    """Lookups walk requested -> language -> default -> default language."""

    def test_chain_regional_locale(self) -> None:
        """Regional locales fall back to their language, then the default."""
        assert ResourceCatalog().fallback_chain("fr-CA") == ("fr_CA", "fr", "en_US", "en")

    def test_chain_deduplicated(self) -> None:
        """The default locale is not repeated."""
        assert ResourceCatalog().fallback_chain("en_US") == ("en_US", "en")

    def test_chain_without_language_fallback(self) -> None:
        """Disabling language fallback skips language-only entries."""
        catalog = ResourceCatalog(CatalogConfig(use_language_fallback=False))
        assert catalog.fallback_chain("fr_CA") == ("fr_CA", "en_US")

    def test_chain_custom_default(self) -> None:
        """The default locale comes from the config."""
        catalog = ResourceCatalog(CatalogConfig(default_locale="de-DE"))
        assert catalog.fallback_chain("fr") == ("fr", "de_DE", "de")

    def test_chain_unknown_locale(self) -> None:
        """Unknown locales are split on the separator."""
        assert ResourceCatalog().fallback_chain("xx_YY") == ("xx_YY", "xx", "en_US", "en")

    def test_regional_lookup_uses_language(self, catalog: ResourceCatalog) -> None:
        """fr_CA finds templates registered for fr."""
        assert catalog.lookup_string("fr_CA", "greeting") == ("Bonjour, %1$s", "fr")

    def test_missing_translation_uses_default(self, catalog: ResourceCatalog) -> None:
        """Untranslated IDs come from the default locale's language."""
        assert catalog.lookup_string("fr_FR", "hello_friends") == ("Hello %1$s and %2$s", "en")

    def test_fallback_logged(
        self, catalog: ResourceCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Resolving from a fallback locale is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="textresource.runtime.catalog"):
            catalog.lookup_string("fr_FR", "hello_friends")
        assert "from fallback locale en (requested fr_FR)" in caplog.text

    def test_missing_string_raises(self, catalog: ResourceCatalog) -> None:
        """No locale in the chain has the ID."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            catalog.lookup_string("fr_FR", "nope")
        error = exc_info.value
        assert error.resource_id == "nope"
        assert error.locale_code == "fr_FR"
        assert error.kind is ResourceKind.STRING

    def test_missing_plurals_raises(self, catalog: ResourceCatalog) -> None:
        """Plurals and strings live in separate namespaces."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            catalog.lookup_plurals("en", "greeting")
        assert exc_info.value.kind is ResourceKind.PLURALS

    def test_has_string_and_plurals(self, catalog: ResourceCatalog) -> None:
        """has_* mirror the lookups."""
        assert catalog.has_string("de_DE", "greeting")
        assert not catalog.has_string("en", "apples_count")
        assert catalog.has_plurals("en", "apples_count")
        assert not catalog.has_plurals("en", "nope")


# ============================================================================
# Contexts and copies
# ============================================================================


class TestContextCache:
    """context() caches ResourceContext instances per locale."""

    def test_same_locale_same_instance(self, catalog: ResourceCatalog) -> None:
        """Equivalent locale spellings share one context."""
        assert catalog.context("fr-FR") is catalog.context("fr_FR")

    def test_different_locales_different_instances(self, catalog: ResourceCatalog) -> None:
        """Each locale gets its own context."""
        assert catalog.context("en") is not catalog.context("fr")

    def test_lru_eviction(self) -> None:
        """The least recently used context is evicted at capacity."""
        catalog = ResourceCatalog(CatalogConfig(context_cache_size=2))
        en = catalog.context("en")
        fr = catalog.context("fr")
        assert catalog.context("en") is en
        catalog.context("de")
        # "fr" was least recently used
        assert catalog.context("en") is en
        assert catalog.context("fr") is not fr

    def test_context_reads_catalog_live(self) -> None:
        """Resources added after context creation are visible."""
        catalog = ResourceCatalog()
        context = catalog.context("en")
        catalog.add_string("en", "late", "Late arrival")
        assert context.format_string("late", ()) == "Late arrival"

    def test_concurrent_context_creation(self) -> None:
        """Threads asking for the same locale get one instance."""
        catalog = ResourceCatalog()
        results: list[object] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(catalog.context("de_DE"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len({id(result) for result in results}) == 1


class TestCopy:
    """copy() produces an independent snapshot."""

    def test_copy_has_same_resources(self, catalog: ResourceCatalog) -> None:
        """The snapshot answers the same lookups."""
        clone = catalog.copy()
        assert clone.locales == catalog.locales
        assert clone.lookup_string("fr", "greeting") == catalog.lookup_string("fr", "greeting")
        assert clone.config is catalog.config

    def test_copy_is_independent(self, catalog: ResourceCatalog) -> None:
        """Registrations on one side are invisible to the other."""
        clone = catalog.copy()
        clone.add_string("en", "only_in_clone", "x")
        catalog.add_string("en", "only_in_original", "y")
        assert not catalog.has_string("en", "only_in_clone")
        assert not clone.has_string("en", "only_in_original")

    def test_repr(self, catalog: ResourceCatalog) -> None:
        """repr summarizes locales and counts."""
        text = repr(catalog)
        assert "locales=['en', 'fr', 'ru']" in text
        assert "default_locale='en_US'" in text
