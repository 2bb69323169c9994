"""Property-based tests for the enums module.

Tests all enum classes for completeness, serialization, and invariants.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from textresource.enums import DescriptorKind, PluralCategory, ResourceKind


class TestDescriptorKind:
    """DescriptorKind members and string behavior."""

    def test_members(self) -> None:
        """Exactly the four descriptor variants."""
        assert [member.value for member in DescriptorKind] == [
            "literal",
            "formatted",
            "quantity",
            "custom",
        ]

    @given(st.sampled_from(DescriptorKind))
    def test_str_returns_value(self, kind: DescriptorKind) -> None:
        """Property: str() is the value."""
        event(f"kind={kind}")
        assert str(kind) == kind.value


class TestResourceKind:
    """ResourceKind members."""

    def test_members(self) -> None:
        """Strings and plurals."""
        assert {member.value for member in ResourceKind} == {"string", "plurals"}


class TestPluralCategory:
    """PluralCategory mirrors CLDR category names."""

    def test_cldr_names(self) -> None:
        """All six CLDR categories exist."""
        assert {member.value for member in PluralCategory} == {
            "zero",
            "one",
            "two",
            "few",
            "many",
            "other",
        }

    @given(st.sampled_from(PluralCategory))
    def test_round_trip_from_value(self, category: PluralCategory) -> None:
        """Property: PluralCategory(value) returns the member."""
        assert PluralCategory(category.value) is category
