"""textresource exception hierarchy.

All exceptions derive from TextResourceError and carry structured
attributes describing what failed, so callers can react without parsing
messages.

Python 3.13+. Zero external dependencies.
"""

from textresource.enums import ResourceKind

__all__ = [
    "RenderLoopError",
    "ResourceNotFoundError",
    "TemplateFormatError",
    "TextResourceError",
]


class TextResourceError(Exception):
    """Base exception for all textresource errors."""


class ResourceNotFoundError(TextResourceError, LookupError):
    """Referenced resource does not exist in the active resolution context.

    Raised by resolution contexts when a formatted or quantity descriptor
    names a resource ID that no locale in the fallback chain provides.
    Descriptors propagate it verbatim; it is never retried or swallowed.

    Attributes:
        resource_id: The ID that could not be found
        locale_code: Locale the lookup was made for
        kind: Whether a string template or a plurals set was requested

    Example:
        >>> try:
        ...     formatted("missing").resolve(context)
        ... except ResourceNotFoundError as e:
        ...     print(e.resource_id, e.kind)
        missing string
    """

    def __init__(
        self,
        resource_id: str,
        *,
        locale_code: str = "",
        kind: ResourceKind = ResourceKind.STRING,
    ) -> None:
        """Initialize ResourceNotFoundError.

        Args:
            resource_id: The ID that could not be found
            locale_code: Locale the lookup was made for
            kind: Kind of resource requested
        """
        where = f" for locale '{locale_code}'" if locale_code else ""
        super().__init__(f"No {kind} resource with ID '{resource_id}'{where}")
        self.resource_id = resource_id
        self.locale_code = locale_code
        self.kind = kind


class TemplateFormatError(TextResourceError, ValueError):
    """Template and arguments do not fit together.

    Raised by the bundled printf-style formatter when a conversion refers to
    a missing argument, receives a value of the wrong type, or the template
    contains a malformed conversion.

    Attributes:
        template: The template being formatted
        position: Character offset of the offending conversion (-1 if unknown)
    """

    def __init__(self, message: str, *, template: str = "", position: int = -1) -> None:
        """Initialize TemplateFormatError.

        Args:
            message: Human-readable description
            template: The template being formatted
            position: Character offset of the offending conversion
        """
        super().__init__(message)
        self.template = template
        self.position = position


class RenderLoopError(TextResourceError, RuntimeError):
    """Render scope kept invalidating itself.

    Raised when a render pass invalidates its own scope more than
    MAX_RENDER_PASSES times in a row, typically because the content writes a
    signal it also reads.

    Attributes:
        passes: Number of consecutive passes performed
    """

    def __init__(self, passes: int) -> None:
        """Initialize RenderLoopError.

        Args:
            passes: Number of consecutive passes performed
        """
        super().__init__(
            f"Render scope invalidated itself {passes} times in a row; "
            "content probably writes a signal it reads"
        )
        self.passes = passes
