"""Pytest configuration for the textresource test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared fixtures:
- catalog: English/French catalog with greeting and apples resources
- english / french: Contexts of that catalog
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from textresource import ResourceCatalog, ResourceContext

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED RESOURCES
# =============================================================================

GREETING = "greeting"
APPLES = "apples_count"

CATALOG_DATA = {
    "en": {
        "strings": {
            GREETING: "Hello, %1$s",
            "hello": "Hello",
            "hello_friends": "Hello %1$s and %2$s",
            "app_name": "Fruit Stand",
            "welcome": "Welcome to %1$s!",
        },
        "plurals": {
            APPLES: {"one": "%d apple", "other": "%d apples"},
            "unread_messages": {
                "one": "%2$s, you have %1$d unread message",
                "other": "%2$s, you have %1$d unread messages",
            },
        },
    },
    "fr": {
        "strings": {
            GREETING: "Bonjour, %1$s",
            "hello": "Bonjour",
            "app_name": "Le Marché",
            "welcome": "Bienvenue à %1$s !",
        },
        "plurals": {
            APPLES: {"one": "%d pomme", "other": "%d pommes"},
        },
    },
    "ru": {
        "plurals": {
            APPLES: {
                "one": "%d яблоко",
                "few": "%d яблока",
                "many": "%d яблок",
                "other": "%d яблока",
            },
        },
    },
}


@pytest.fixture
def catalog() -> ResourceCatalog:
    """Fresh catalog with English, French and Russian resources."""
    return ResourceCatalog.from_mapping(CATALOG_DATA)


@pytest.fixture
def english(catalog: ResourceCatalog) -> ResourceContext:
    """US English context of the shared catalog."""
    return catalog.context("en_US")


@pytest.fixture
def french(catalog: ResourceCatalog) -> ResourceContext:
    """French (France) context of the shared catalog."""
    return catalog.context("fr_FR")
