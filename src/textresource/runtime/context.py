"""Resolution context protocol.

The narrow capability a TextDescriptor consumes when it resolves. Hosts
plug in their own resource system by implementing these two methods; the
descriptor layer assumes nothing about how templates are stored.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

__all__ = ["ResolutionContext"]


@runtime_checkable
class ResolutionContext(Protocol):
    """Protocol for locale-aware template lookups.

    This is a Protocol (structural typing) rather than ABC so any object
    with matching methods can be passed to resolve(), including test
    doubles.

    Raw strings need no method: LiteralText resolves without touching the
    context.

    Example:
        >>> class UpperContext:
        ...     def format_string(self, resource_id, args):
        ...         return resource_id.upper()
        ...     def quantity_string(self, resource_id, quantity, args):
        ...         return f"{quantity} {resource_id}"
        ...
        >>> formatted("hello").resolve(UpperContext())
        'HELLO'
    """

    def format_string(self, resource_id: str, args: Sequence[object]) -> str:
        """Look up the template at resource_id and substitute args positionally.

        Raises:
            ResourceNotFoundError: If resource_id does not exist
        """
        ...

    def quantity_string(
        self, resource_id: str, quantity: int, args: Sequence[object]
    ) -> str:
        """Select the template for quantity at resource_id and substitute args.

        Raises:
            ResourceNotFoundError: If resource_id does not exist
        """
        ...
