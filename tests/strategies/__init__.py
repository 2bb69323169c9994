"""Hypothesis strategies for textresource property-based testing.

Python 3.13+.
"""

from tests.strategies.descriptors import (
    descriptors,
    format_args,
    known_locales,
    literal_descriptors,
    resource_ids,
)

__all__ = [
    "descriptors",
    "format_args",
    "known_locales",
    "literal_descriptors",
    "resource_ids",
]
