"""Deferred text descriptors.

A TextDescriptor describes how to produce a string once a resolution
context (locale, resource lookup) is available. Application code builds
descriptors without any context and hands them to a rendering layer, which
resolves them at display time.

Variants:
    LiteralText   - Raw string, returned as-is
    FormattedText - Localized template at a resource ID plus positional args
    QuantityText  - Quantity-sensitive template plus positional args
    CustomText    - Arbitrary function of the resolution context

Equality:
    LiteralText, FormattedText and QuantityText compare structurally: two
    instances of the same variant are equal when every field is equal, with
    args compared element-wise in order. CustomText compares by identity:
    functions cannot be compared structurally, so two CustomText values are
    equal only when they are the same object, even if they wrap the very
    same function. Callers that need value semantics should use the
    factory variants.

Thread Safety:
    Descriptors are frozen and hold no reference to a context. Any number
    of threads may share and resolve the same instance.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, assert_never

from textresource.enums import DescriptorKind

if TYPE_CHECKING:
    from textresource.runtime.context import ResolutionContext

__all__ = [
    "CustomText",
    "FormatArg",
    "FormattedText",
    "LiteralText",
    "QuantityText",
    "ResourceId",
    "TextDescriptor",
    "custom",
    "formatted",
    "is_descriptor",
    "literal",
    "quantity",
    "resolve",
]

type ResourceId = str
"""Opaque identifier of a localized template (e.g., 'greeting', 'apples_count')."""

type FormatArg = object
"""Value substituted into a template: numbers, strings, dates, other descriptors."""


class _Resolvable:
    """Method form of resolve() shared by all variants."""

    __slots__ = ()

    def resolve(self, context: ResolutionContext) -> str:
        """Resolve this descriptor into a string using the given context.

        Args:
            context: Resolution context supplying localized lookups

        Returns:
            The resolved string for the context's configuration

        Raises:
            ResourceNotFoundError: If the context cannot locate the resource
        """
        return resolve(self, context)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class LiteralText(_Resolvable):
    """Raw, non-localized string.

    Attributes:
        value: The exact string returned on resolution
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.LITERAL

    value: str


@dataclass(frozen=True, slots=True)
class FormattedText(_Resolvable):
    """Reference to a localized format template.

    Attributes:
        resource_id: ID of the template in the resolution context
        args: Positional format arguments, captured at construction
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.FORMATTED

    resource_id: ResourceId
    args: tuple[FormatArg, ...] = ()


@dataclass(frozen=True, slots=True)
class QuantityText(_Resolvable):
    """Reference to a quantity-sensitive (plurals) template.

    Attributes:
        resource_id: ID of the plurals set in the resolution context
        quantity: Count used to select the plural form
        args: Positional format arguments, captured at construction
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.QUANTITY

    resource_id: ResourceId
    quantity: int
    args: tuple[FormatArg, ...] = ()


@dataclass(frozen=True, slots=True, eq=False)
class CustomText(_Resolvable):
    """Text produced by an arbitrary function of the resolution context.

    Uses identity equality and hashing (eq=False keeps object.__eq__ and
    object.__hash__).

    Attributes:
        resolver: Function called with the context on every resolution
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.CUSTOM

    resolver: Callable[[ResolutionContext], str]

    def __repr__(self) -> str:
        name = getattr(self.resolver, "__qualname__", None) or repr(self.resolver)
        return f"CustomText(resolver={name})"


type TextDescriptor = LiteralText | FormattedText | QuantityText | CustomText
"""Any deferred text value."""

_DESCRIPTOR_TYPES = (LiteralText, FormattedText, QuantityText, CustomText)


def is_descriptor(value: object) -> bool:
    """Return True if value is one of the TextDescriptor variants."""
    return isinstance(value, _DESCRIPTOR_TYPES)


# ============================================================================
# FACTORIES
# ============================================================================


def literal(value: str) -> LiteralText:
    """Create a descriptor for a raw, non-localized string.

    Any string is accepted, including the empty string.

    Args:
        value: The exact string to return on resolution

    Raises:
        TypeError: If value is not a str

    Example:
        >>> literal("Howdy").resolve(context)
        'Howdy'
    """
    if not isinstance(value, str):
        msg = f"literal() expects a str, got {type(value).__name__}"
        raise TypeError(msg)
    return LiteralText(value)


def formatted(resource_id: ResourceId, *args: FormatArg) -> FormattedText:
    """Create a descriptor for a localized format template.

    The resource is not looked up here; a missing ID surfaces as
    ResourceNotFoundError at resolution time.

    Args:
        resource_id: Template ID in the resolution context
        *args: Positional format arguments (copied into a tuple)

    Example:
        >>> title = formatted("app_title")
        >>> greeting = formatted("greeting", user_name)
    """
    return FormattedText(resource_id, tuple(args))


def quantity(resource_id: ResourceId, count: int, *args: FormatArg) -> QuantityText:
    """Create a descriptor for a quantity-sensitive template.

    Zero and negative counts are accepted; the resolution context's plural
    rules decide which form they select.

    Args:
        resource_id: Plurals ID in the resolution context
        count: Quantity used to select the plural form
        *args: Positional format arguments (copied into a tuple)

    Raises:
        TypeError: If count is not an int (bool is rejected)

    Example:
        >>> apples = quantity("apples_count", count, count)
    """
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"quantity count must be an int, got {type(count).__name__}"
        raise TypeError(msg)
    return QuantityText(resource_id, count, tuple(args))


def custom(resolver: Callable[[ResolutionContext], str]) -> CustomText:
    """Create a descriptor backed by an arbitrary resolver function.

    The function is stored as-is and called with the context on every
    resolution. The resulting descriptor compares by identity.

    Args:
        resolver: Function mapping a resolution context to a string

    Raises:
        TypeError: If resolver is not callable

    Example:
        >>> clock = custom(lambda ctx: ctx.format_string("time", now()))
    """
    if not callable(resolver):
        msg = f"custom() expects a callable, got {type(resolver).__name__}"
        raise TypeError(msg)
    return CustomText(resolver)


# ============================================================================
# RESOLUTION
# ============================================================================


def resolve(descriptor: TextDescriptor, context: ResolutionContext) -> str:
    """Resolve a descriptor into a string.

    Dispatch:
        LiteralText   -> stored value; context is never consulted
        FormattedText -> context.format_string(resource_id, args)
        QuantityText  -> context.quantity_string(resource_id, quantity, args)
        CustomText    -> resolver(context)

    Errors raised by the context (ResourceNotFoundError) or by a custom
    resolver propagate unchanged.

    Args:
        descriptor: Descriptor to resolve
        context: Resolution context supplying localized lookups

    Returns:
        The resolved string
    """
    match descriptor:
        case LiteralText(value=value):
            return value
        case FormattedText(resource_id=resource_id, args=args):
            return context.format_string(resource_id, args)
        case QuantityText(resource_id=resource_id, quantity=count, args=args):
            return context.quantity_string(resource_id, count, args)
        case CustomText(resolver=resolver):
            return resolver(context)
        case _:
            assert_never(descriptor)
