"""Shared constants for textresource.

Centralized configuration constants used across the descriptor, runtime
and reactive packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Locale used when nothing more specific is requested
- Cache limits: Memory bounds for caching subsystems
- Render limits: Protection against runaway re-render loops

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_PLURAL_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_CONTEXT_CACHE_SIZE",
    # Render limits
    "MAX_RENDER_PASSES",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale pinned by the deterministic test resolver and used as the last entry
# of every catalog fallback chain. POSIX form, as Babel expects.
DEFAULT_LOCALE: str = "en_US"

# Plural rules used when a context is created for an unknown locale.
FALLBACK_PLURAL_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Parsed Babel Locale objects kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# ResourceContext instances kept per catalog by ResourceCatalog.context().
MAX_CONTEXT_CACHE_SIZE: int = 64

# ============================================================================
# RENDER LIMITS
# ============================================================================

# Consecutive re-renders a RenderScope performs for invalidations raised
# during its own pass before giving up with RenderLoopError.
MAX_RENDER_PASSES: int = 100
