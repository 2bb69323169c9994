"""Quickstart example for textresource.

This example demonstrates building text descriptors without a locale and
resolving them once a resolution context is available.

Note: Examples use an in-memory catalog. Hosts with their own resource
system implement the two ResolutionContext methods instead.
"""

from textresource import (
    ResourceCatalog,
    ResourceNotFoundError,
    custom,
    formatted,
    literal,
    quantity,
)
from textresource.testing import resolve_with_locale

catalog = ResourceCatalog.from_mapping({
    "en": {
        "strings": {
            "greeting": "Hello, %1$s",
            "app_name": "Fruit Stand",
            "welcome": "Welcome to %1$s!",
            "total": "Total: %1$,.2f",
        },
        "plurals": {
            "apples_count": {"one": "%d apple", "other": "%d apples"},
        },
    },
    "fr": {
        "strings": {
            "greeting": "Bonjour, %1$s",
            "app_name": "Le Marché",
            "welcome": "Bienvenue à %1$s !",
            "total": "Total : %1$,.2f",
        },
        "plurals": {
            "apples_count": {"one": "%d pomme", "other": "%d pommes"},
        },
    },
})

# Example 1: Descriptors are plain values
print("=" * 50)
print("Example 1: Building Descriptors")
print("=" * 50)

greeting = formatted("greeting", "Derek")
print(greeting)
# Output: FormattedText(resource_id='greeting', args=('Derek',))

print(greeting == formatted("greeting", "Derek"))
# Output: True

# Example 2: Resolution
print("\n" + "=" * 50)
print("Example 2: Resolving Under Different Locales")
print("=" * 50)

for locale in ("en_US", "fr_FR"):
    context = catalog.context(locale)
    print(greeting.resolve(context))
# Output: Hello, Derek
# Output: Bonjour, Derek

# Example 3: Quantities
print("\n" + "=" * 50)
print("Example 3: Plural Forms")
print("=" * 50)

english = catalog.context("en_US")
for count in (1, 5):
    print(quantity("apples_count", count, count).resolve(english))
# Output: 1 apple
# Output: 5 apples

# Example 4: Nested descriptors and number formatting
print("\n" + "=" * 50)
print("Example 4: Nesting and Numbers")
print("=" * 50)

welcome = formatted("welcome", formatted("app_name"))
print(welcome.resolve(catalog.context("fr_FR")))
# Output: Bienvenue à Le Marché !

print(resolve_with_locale(formatted("total", 1234.5), "en_US", catalog=catalog))
# Output: Total: 1,234.50

# Example 5: Literal and custom text
print("\n" + "=" * 50)
print("Example 5: Literal and Custom Text")
print("=" * 50)

print(literal("Howdy").resolve(english))
# Output: Howdy

shout = custom(lambda ctx: ctx.format_string("greeting", ["Derek"]).upper())
print(shout.resolve(english))
# Output: HELLO, DEREK

# Example 6: Missing resources
print("\n" + "=" * 50)
print("Example 6: Missing Resources")
print("=" * 50)

try:
    formatted("missing_id").resolve(english)
except ResourceNotFoundError as e:
    print(f"{type(e).__name__}: {e}")
# Output: ResourceNotFoundError: No string resource with ID 'missing_id' for locale 'en_US'
