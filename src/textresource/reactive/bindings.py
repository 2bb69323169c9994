"""Descriptor helpers for render scopes.

Bridges context-free TextDescriptors into a RenderScope:

    remember_descriptor         - keep one descriptor instance across passes
    resolve_text                - resolve against the ambient context
    current_resolution_context  - read the ambient context

resolve_text() reads the scope's ambient signal on every pass. That read is
the dependency edge: when the host replaces the ambient context (a locale
switch, for instance), every scope that resolved text is invalidated and
re-renders, with no extra work in the content function.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from textresource.descriptor import resolve
from textresource.reactive.scope import current_scope, remember

if TYPE_CHECKING:
    from textresource.descriptor import TextDescriptor
    from textresource.runtime.context import ResolutionContext

__all__ = ["current_resolution_context", "remember_descriptor", "resolve_text"]


def remember_descriptor(factory: Callable[[], TextDescriptor], *keys: object) -> TextDescriptor:
    """Create a descriptor once and return the same instance on later passes.

    Without keys, factory runs once per scope epoch. With keys, it runs again
    (exactly once) whenever any key differs from the previous pass, or when
    the number of keys changes.

    Example:
        >>> def content():
        ...     title = remember_descriptor(lambda: formatted("app_title"))
        ...     greeting = remember_descriptor(lambda: formatted("greeting", user.value), user.value)
        ...     return resolve_text(title), resolve_text(greeting)

    Raises:
        RuntimeError: If called outside a render pass
    """
    return remember(factory, *keys)


def current_resolution_context() -> ResolutionContext:
    """Return the ambient resolution context of the current scope.

    Subscribes the scope to the ambient signal.

    Raises:
        RuntimeError: If called outside a render pass, or the scope has no
            resolution context
    """
    scope = current_scope()
    context = scope.ambient.value
    if context is None:
        msg = "Render scope has no resolution context; pass resolution_context= or call provide()"
        raise RuntimeError(msg)
    return context


def resolve_text(descriptor: TextDescriptor) -> str:
    """Resolve descriptor against the ambient context of the current scope.

    Failures (ResourceNotFoundError, custom resolver errors) propagate to the
    caller of render().

    Example:
        >>> scope = RenderScope(lambda: resolve_text(title), resolution_context=ctx)
        >>> scope.render()
        'My App'
    """
    return resolve(descriptor, current_resolution_context())
