"""In-memory resource catalog with locale fallback chains.

ResourceCatalog stores string templates and plural template sets per locale
and answers lookups by walking a fallback chain, the way platform resource
systems fall back from a regional directory to the language and finally to
the unqualified defaults:

    fr_CA -> fr -> en_US -> en   (default_locale="en_US")

The catalog is a backing store for ResourceContext; it is populated from
Python mappings and never reads translation files.

Thread Safety:
    All operations are protected by an RLock. Registration and lookup may
    happen from different threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Mapping
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from textresource.diagnostics import ResourceNotFoundError
from textresource.enums import PluralCategory, ResourceKind
from textresource.locale_utils import coerce_locale_code, language_of
from textresource.runtime.config import CatalogConfig
from textresource.runtime.resource_context import ResourceContext

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["ResourceCatalog"]

logger = logging.getLogger(__name__)

type PluralForms = Mapping[PluralCategory, str]
"""Templates of one plurals resource keyed by CLDR category."""


class ResourceCatalog:
    """Per-locale store of string and plurals templates.

    Example:
        >>> catalog = ResourceCatalog()
        >>> catalog.add_string("en", "greeting", "Hello, %1$s")
        >>> catalog.add_string("fr", "greeting", "Bonjour, %1$s")
        >>> catalog.add_plurals("en", "apples", {"one": "%d apple", "other": "%d apples"})
        >>> formatted("greeting", "Derek").resolve(catalog.context("fr_FR"))
        'Bonjour, Derek'

    Example - From a mapping:
        >>> catalog = ResourceCatalog.from_mapping({
        ...     "en": {
        ...         "strings": {"greeting": "Hello, %1$s"},
        ...         "plurals": {"apples": {"one": "%d apple", "other": "%d apples"}},
        ...     },
        ... })
    """

    __slots__ = ("_config", "_contexts", "_lock", "_plurals", "_strings")

    def __init__(self, config: CatalogConfig | None = None) -> None:
        """Initialize an empty catalog.

        Args:
            config: Lookup configuration (default: CatalogConfig())
        """
        self._config = config if config is not None else CatalogConfig()
        self._lock = RLock()
        self._strings: dict[str, dict[str, str]] = {}
        self._plurals: dict[str, dict[str, PluralForms]] = {}
        self._contexts: OrderedDict[str, ResourceContext] = OrderedDict()

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Mapping[str, Mapping[str, object]]],
        config: CatalogConfig | None = None,
    ) -> ResourceCatalog:
        """Build a catalog from a nested mapping.

        Args:
            data: ``{locale: {"strings": {id: template}, "plurals": {id: {category: template}}}}``.
                Both sections are optional.
            config: Lookup configuration

        Raises:
            ValueError: If a locale entry contains an unknown section
        """
        catalog = cls(config)
        for locale, sections in data.items():
            unknown = set(sections) - {"strings", "plurals"}
            if unknown:
                msg = f"Unknown catalog section(s) for locale '{locale}': {sorted(unknown)}"
                raise ValueError(msg)
            catalog.add_strings(locale, sections.get("strings", {}))  # type: ignore[arg-type]
            for resource_id, forms in sections.get("plurals", {}).items():
                catalog.add_plurals(locale, resource_id, forms)  # type: ignore[arg-type]
        return catalog

    @property
    def config(self) -> CatalogConfig:
        """Lookup configuration (read-only)."""
        return self._config

    @property
    def locales(self) -> tuple[str, ...]:
        """Normalized locale codes that hold at least one resource, sorted."""
        with self._lock:
            return tuple(sorted(set(self._strings) | set(self._plurals)))

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_string(self, locale: str | Locale, resource_id: str, template: str) -> None:
        """Register a string template, replacing any previous one.

        Raises:
            ValueError: If resource_id is empty or has surrounding whitespace
            TypeError: If template is not a str
        """
        _validate_resource_id(resource_id)
        if not isinstance(template, str):
            msg = f"Template for '{resource_id}' must be a str, got {type(template).__name__}"
            raise TypeError(msg)
        code = coerce_locale_code(locale)
        with self._lock:
            self._strings.setdefault(code, {})[resource_id] = template
        logger.debug("Registered string '%s' for %s", resource_id, code)

    def add_strings(self, locale: str | Locale, templates: Mapping[str, str]) -> None:
        """Register several string templates for one locale."""
        for resource_id, template in templates.items():
            self.add_string(locale, resource_id, template)

    def add_plurals(
        self, locale: str | Locale, resource_id: str, forms: Mapping[str, str]
    ) -> None:
        """Register a plurals resource, replacing any previous one.

        Args:
            locale: Locale code or Babel Locale
            resource_id: Plurals ID
            forms: Templates keyed by CLDR category name ("one", "other", ...)

        Raises:
            ValueError: If forms is empty or uses an unknown category
            TypeError: If a template is not a str
        """
        _validate_resource_id(resource_id)
        if not forms:
            msg = f"Plurals '{resource_id}' must define at least one form"
            raise ValueError(msg)

        checked: dict[PluralCategory, str] = {}
        for category, template in forms.items():
            try:
                key = PluralCategory(category)
            except ValueError:
                valid = ", ".join(PluralCategory)
                msg = f"Unknown plural category '{category}' in '{resource_id}' (expected one of: {valid})"
                raise ValueError(msg) from None
            if not isinstance(template, str):
                msg = (
                    f"Template for '{resource_id}' [{category}] must be a str, "
                    f"got {type(template).__name__}"
                )
                raise TypeError(msg)
            checked[key] = template

        code = coerce_locale_code(locale)
        with self._lock:
            self._plurals.setdefault(code, {})[resource_id] = MappingProxyType(checked)
        logger.debug(
            "Registered plurals '%s' for %s: %s", resource_id, code, ", ".join(checked)
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def fallback_chain(self, locale: str | Locale) -> tuple[str, ...]:
        """Locales consulted, in order, for a lookup made for locale.

        Example:
            >>> ResourceCatalog().fallback_chain("fr-CA")
            ('fr_CA', 'fr', 'en_US', 'en')
        """
        requested = coerce_locale_code(locale)
        default = self._config.default_locale
        candidates = [requested]
        if self._config.use_language_fallback:
            candidates.append(language_of(requested))
        candidates.append(default)
        if self._config.use_language_fallback:
            candidates.append(language_of(default))
        # dict.fromkeys: dedupe, keep first occurrence
        return tuple(dict.fromkeys(candidates))

    def lookup_string(self, locale: str | Locale, resource_id: str) -> tuple[str, str]:
        """Find a string template.

        Returns:
            Tuple of (template, locale code that supplied it)

        Raises:
            ResourceNotFoundError: If no locale in the fallback chain has it
        """
        return self._lookup(self._strings, locale, resource_id, ResourceKind.STRING)

    def lookup_plurals(self, locale: str | Locale, resource_id: str) -> tuple[PluralForms, str]:
        """Find a plurals resource.

        Returns:
            Tuple of (read-only category -> template mapping, supplying locale)

        Raises:
            ResourceNotFoundError: If no locale in the fallback chain has it
        """
        return self._lookup(self._plurals, locale, resource_id, ResourceKind.PLURALS)

    def has_string(self, locale: str | Locale, resource_id: str) -> bool:
        """Check whether lookup_string() would succeed."""
        try:
            self.lookup_string(locale, resource_id)
        except ResourceNotFoundError:
            return False
        return True

    def has_plurals(self, locale: str | Locale, resource_id: str) -> bool:
        """Check whether lookup_plurals() would succeed."""
        try:
            self.lookup_plurals(locale, resource_id)
        except ResourceNotFoundError:
            return False
        return True

    def _lookup[T](
        self,
        table: dict[str, dict[str, T]],
        locale: str | Locale,
        resource_id: str,
        kind: ResourceKind,
    ) -> tuple[T, str]:
        chain = self.fallback_chain(locale)
        with self._lock:
            for code in chain:
                entries = table.get(code)
                if entries is not None and resource_id in entries:
                    if code != chain[0]:
                        logger.debug(
                            "Resolved %s '%s' from fallback locale %s (requested %s)",
                            kind,
                            resource_id,
                            code,
                            chain[0],
                        )
                    return entries[resource_id], code
        raise ResourceNotFoundError(resource_id, locale_code=chain[0], kind=kind)

    # ------------------------------------------------------------------
    # Contexts
    # ------------------------------------------------------------------

    def context(self, locale: str | Locale) -> ResourceContext:
        """Get the resolution context for locale, reusing cached instances.

        Contexts read the catalog live, so resources added after a context
        was created are visible through it.

        Thread Safety:
            Uses OrderedDict with RLock for LRU caching bounded by
            config.context_cache_size. Concurrent calls with the same locale
            return the same instance.
        """
        code = coerce_locale_code(locale)
        with self._lock:
            cached = self._contexts.get(code)
            if cached is not None:
                self._contexts.move_to_end(code)
                return cached

            context = ResourceContext(self, code)
            if len(self._contexts) >= self._config.context_cache_size:
                self._contexts.popitem(last=False)
            self._contexts[code] = context
            return context

    def copy(self) -> ResourceCatalog:
        """Independent snapshot with the same config and resources.

        Later registrations on either catalog do not affect the other.
        Cached contexts are not carried over.
        """
        clone = ResourceCatalog(self._config)
        with self._lock:
            clone._strings = {code: dict(entries) for code, entries in self._strings.items()}
            # Plural form mappings are read-only proxies; sharing them is safe
            clone._plurals = {code: dict(entries) for code, entries in self._plurals.items()}
        return clone

    def __repr__(self) -> str:
        with self._lock:
            strings = sum(len(entries) for entries in self._strings.values())
            plurals = sum(len(entries) for entries in self._plurals.values())
        return (
            f"ResourceCatalog(locales={list(self.locales)}, strings={strings}, "
            f"plurals={plurals}, default_locale='{self._config.default_locale}')"
        )


def _validate_resource_id(resource_id: str) -> None:
    """Reject empty IDs and IDs with leading/trailing whitespace."""
    if not isinstance(resource_id, str) or not resource_id:
        msg = f"Resource ID must be a non-empty str, got {resource_id!r}"
        raise ValueError(msg)
    if resource_id.strip() != resource_id:
        msg = f"Resource ID contains leading/trailing whitespace: {resource_id!r}"
        raise ValueError(msg)
