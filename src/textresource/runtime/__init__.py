"""Resolution runtime package.

Provides the ResolutionContext protocol consumed by descriptors and the
bundled resource environment implementing it: ResourceCatalog,
ResourceContext, printf-style formatting and CLDR plural rules.

Python 3.13+.
"""

from .catalog import ResourceCatalog
from .config import CatalogConfig
from .context import ResolutionContext
from .formatting import format_template
from .plural_rules import select_plural_category
from .resource_context import ResourceContext

__all__ = [
    "CatalogConfig",
    "ResolutionContext",
    "ResourceCatalog",
    "ResourceContext",
    "format_template",
    "select_plural_category",
]
