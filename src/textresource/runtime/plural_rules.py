"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.
Quantity templates are keyed by these category names.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from textresource.enums import PluralCategory
from textresource.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(n: int | float | Decimal, locale: str) -> PluralCategory:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: zero, one, two, few, many, or other

    Examples:
        >>> select_plural_category(0, "lv_LV")
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category(1, "en_US")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(5, "ru_RU")
        <PluralCategory.MANY: 'many'>
        >>> select_plural_category(42, "ja_JP")
        <PluralCategory.OTHER: 'other'>

    Architecture:
        Uses Babel's Locale.plural_form which provides CLDR-compliant plural
        rules for all supported locales, including the CLDR operands and
        automatic fallback to language-level rules.

        If locale parsing fails, falls back to a simple one/other rule.
        Negative quantities are categorized by their absolute value, the
        way CLDR operands are defined.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return PluralCategory.ONE if abs(n) == 1 else PluralCategory.OTHER

    return PluralCategory(locale_obj.plural_form(abs(n)))
