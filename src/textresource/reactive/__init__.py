"""Reactive binding helpers.

Signals, render scopes with positional memoization, and the ambient
resolution call that re-resolves text when the resolution context changes.

Python 3.13+. Zero external dependencies.
"""

from textresource.diagnostics import RenderLoopError

from .bindings import current_resolution_context, remember_descriptor, resolve_text
from .scope import RenderScope, current_scope, remember
from .signal import Signal, observing

__all__ = [
    "RenderLoopError",
    "RenderScope",
    "Signal",
    "current_resolution_context",
    "current_scope",
    "observing",
    "remember",
    "remember_descriptor",
    "resolve_text",
]
