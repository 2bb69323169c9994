"""textresource - Deferred, locale-independent text descriptors.

Build text descriptions in application logic without a resource context,
and resolve them into strings at render time, when a locale is known.

Public API:
    literal, formatted, quantity, custom - Descriptor factories
    resolve - Resolve a descriptor against a ResolutionContext
    TextDescriptor - Union of the descriptor variants
    ResolutionContext - Protocol consumed by resolve()
    ResourceCatalog - In-memory per-locale templates with fallback chains
    ResourceContext - Locale-pinned ResolutionContext over a catalog
    CatalogConfig - Lookup configuration

Exceptions:
    TextResourceError - Base exception class
    ResourceNotFoundError - Referenced resource does not exist
    TemplateFormatError - Template and arguments do not fit

Submodules:
    textresource.reactive - Signals, render scopes, remember_descriptor, resolve_text
    textresource.testing - resolve_with_locale for deterministic tests
"""

from .descriptor import (
    CustomText,
    FormatArg,
    FormattedText,
    LiteralText,
    QuantityText,
    ResourceId,
    TextDescriptor,
    custom,
    formatted,
    is_descriptor,
    literal,
    quantity,
    resolve,
)
from .diagnostics import ResourceNotFoundError, TemplateFormatError, TextResourceError
from .enums import DescriptorKind, PluralCategory
from .runtime import CatalogConfig, ResolutionContext, ResourceCatalog, ResourceContext

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textresource")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogConfig",
    "CustomText",
    "DescriptorKind",
    "FormatArg",
    "FormattedText",
    "LiteralText",
    "PluralCategory",
    "QuantityText",
    "ResolutionContext",
    "ResourceCatalog",
    "ResourceContext",
    "ResourceId",
    "ResourceNotFoundError",
    "TemplateFormatError",
    "TextDescriptor",
    "TextResourceError",
    "__version__",
    "custom",
    "formatted",
    "is_descriptor",
    "literal",
    "quantity",
    "resolve",
]
