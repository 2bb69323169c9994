"""Render scopes re-resolving text on a locale switch.

Shows the reactive helpers:
- remember_descriptor keeps one descriptor instance across render passes
- resolve_text reads the ambient resolution context
- replacing the ambient context re-renders every scope that resolved text
"""

import logging

from textresource import ResourceCatalog, formatted, quantity
from textresource.reactive import RenderScope, Signal, remember_descriptor, resolve_text

logging.basicConfig(level=logging.INFO)

catalog = ResourceCatalog.from_mapping({
    "en": {
        "strings": {"title": "Fruit Stand", "greeting": "Hello, %1$s"},
        "plurals": {"apples_count": {"one": "%d apple", "other": "%d apples"}},
    },
    "de": {
        "strings": {"title": "Obststand", "greeting": "Hallo, %1$s"},
        "plurals": {"apples_count": {"one": "%d Apfel", "other": "%d Äpfel"}},
    },
})

# One ambient context per window, shared by every scope in it
ambient = Signal(catalog.context("en_US"), name="locale")
basket = Signal(1, name="basket")


def header() -> str:
    title = remember_descriptor(lambda: formatted("title"))
    greeting = remember_descriptor(lambda: formatted("greeting", "Derek"))
    return f"{resolve_text(title)} | {resolve_text(greeting)}"


def body() -> str:
    count = basket.value
    apples = remember_descriptor(lambda: quantity("apples_count", count, count), count)
    return resolve_text(apples)


header_scope = RenderScope(header, resolution_context=ambient, name="header")
body_scope = RenderScope(body, resolution_context=ambient, name="body")

print(header_scope.render())
print(body_scope.render())
# Output: Fruit Stand | Hello, Derek
# Output: 1 apple

basket.value = 3
print(body_scope.result)
# Output: 3 apples

ambient.value = catalog.context("de_DE")
print(header_scope.result)
print(body_scope.result)
# Output: Obststand | Hallo, Derek
# Output: 3 Äpfel

header_scope.dispose()
body_scope.dispose()
