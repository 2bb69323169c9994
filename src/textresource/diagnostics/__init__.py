"""Error types for textresource.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    RenderLoopError,
    ResourceNotFoundError,
    TemplateFormatError,
    TextResourceError,
)

__all__ = [
    "RenderLoopError",
    "ResourceNotFoundError",
    "TemplateFormatError",
    "TextResourceError",
]
