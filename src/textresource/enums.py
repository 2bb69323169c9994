"""Enumerations for textresource type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DescriptorKind(StrEnum):
    """Variant of a TextDescriptor.

    StrEnum provides automatic string conversion: str(DescriptorKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    """Raw string returned as-is: literal("Howdy")"""

    FORMATTED = "formatted"
    """Localized template with positional arguments: formatted("greeting", name)"""

    QUANTITY = "quantity"
    """Quantity-sensitive template: quantity("apples", count, count)"""

    CUSTOM = "custom"
    """Arbitrary resolver function: custom(lambda ctx: ...)"""


class ResourceKind(StrEnum):
    """Kind of resource looked up in a resolution context.

    StrEnum provides automatic string conversion: str(ResourceKind.STRING) == "string"
    """

    STRING = "string"
    """Single format template."""

    PLURALS = "plurals"
    """Set of templates keyed by CLDR plural category."""


class PluralCategory(StrEnum):
    """CLDR plural category.

    Values match the category names returned by Babel's plural rules.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


__all__ = [
    "DescriptorKind",
    "PluralCategory",
    "ResourceKind",
]
