"""Locale-scoped resolution context over a ResourceCatalog.

ResourceContext is the bundled implementation of the ResolutionContext
protocol. It pins one locale and answers lookups from a catalog:

    format_string    -> catalog template, printf-style substitution
    quantity_string  -> CLDR plural category via Babel, then substitution

Descriptor arguments are resolved against the same context before
substitution, so descriptors compose:

    formatted("welcome", formatted("app_name"))

Design Principles:
    - Locale always explicit; no global or process locale is consulted
    - Reads the catalog live; holds no copy of its resources
    - Lookup failures raise ResourceNotFoundError, never a fallback string

Python 3.13+. Uses Babel for plural rules and number symbols.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from textresource.constants import FALLBACK_PLURAL_LOCALE
from textresource.descriptor import is_descriptor, resolve
from textresource.diagnostics import ResourceNotFoundError
from textresource.enums import ResourceKind
from textresource.locale_utils import coerce_locale_code, get_babel_locale
from textresource.runtime.formatting import format_template
from textresource.runtime.plural_rules import select_plural_category

if TYPE_CHECKING:
    from babel import Locale

    from textresource.runtime.catalog import ResourceCatalog

__all__ = ["ResourceContext"]

logger = logging.getLogger(__name__)


class ResourceContext:
    """Resolution context pinned to one locale of a ResourceCatalog.

    Obtain instances with ``catalog.context(locale)`` (cached) or construct
    directly for a one-off context.

    Unknown locales are accepted: lookups still walk the catalog's fallback
    chain, and plural selection falls back to en_US rules with a warning
    logged. ``is_fallback`` reports this.

    Example:
        >>> ctx = catalog.context("en-US")
        >>> ctx.format_string("greeting", ["Derek"])
        'Hello, Derek'
        >>> ctx.quantity_string("apples", 5, [5])
        '5 apples'
    """

    __slots__ = ("_catalog", "_is_fallback", "_locale_code", "_rules_locale")

    def __init__(self, catalog: ResourceCatalog, locale: str | Locale) -> None:
        """Initialize context.

        Args:
            catalog: Backing resource catalog
            locale: Locale code (BCP-47 or POSIX) or Babel Locale
        """
        self._catalog = catalog
        self._locale_code = coerce_locale_code(locale)
        try:
            get_babel_locale(self._locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s rules",
                self._locale_code,
                e,
                FALLBACK_PLURAL_LOCALE,
            )
            self._rules_locale = FALLBACK_PLURAL_LOCALE
            self._is_fallback = True
        else:
            self._rules_locale = self._locale_code
            self._is_fallback = False

    @property
    def locale_code(self) -> str:
        """Normalized locale code this context resolves for."""
        return self._locale_code

    @property
    def catalog(self) -> ResourceCatalog:
        """Backing catalog."""
        return self._catalog

    @property
    def is_fallback(self) -> bool:
        """True if the locale is unknown to CLDR and en_US rules are used."""
        return self._is_fallback

    def format_string(self, resource_id: str, args: Sequence[object]) -> str:
        """Look up a string template and substitute args.

        Raises:
            ResourceNotFoundError: If no locale in the fallback chain has resource_id
            TemplateFormatError: If args do not fit the template
        """
        template, _ = self._catalog.lookup_string(self._locale_code, resource_id)
        return format_template(template, self._resolve_args(args), self._rules_locale)

    def quantity_string(self, resource_id: str, quantity: int, args: Sequence[object]) -> str:
        """Select the plural form for quantity and substitute args.

        The form for the CLDR category of quantity is used when present,
        otherwise the catalog's plural_fallback_category form ("other").

        Raises:
            ResourceNotFoundError: If the plurals resource or a usable form is missing
            TemplateFormatError: If args do not fit the template
        """
        forms, _ = self._catalog.lookup_plurals(self._locale_code, resource_id)
        category = select_plural_category(quantity, self._rules_locale)
        template = forms.get(category)
        if template is None:
            fallback = self._catalog.config.plural_fallback_category
            template = forms.get(fallback)
            if template is None:
                raise ResourceNotFoundError(
                    resource_id, locale_code=self._locale_code, kind=ResourceKind.PLURALS
                )
            logger.debug(
                "Plurals '%s' has no '%s' form; using '%s'", resource_id, category, fallback
            )
        return format_template(template, self._resolve_args(args), self._rules_locale)

    def _resolve_args(self, args: Sequence[object]) -> tuple[object, ...]:
        return tuple(resolve(arg, self) if is_descriptor(arg) else arg for arg in args)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ResourceContext(locale_code='{self._locale_code}', is_fallback={self._is_fallback})"
