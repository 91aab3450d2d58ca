"""Unit tests for error kinds.

Tests:
- ErrorKind numeric values
- CustomErrorKind tagged variant
- resolve_error_kind() mapping of integers to kinds
"""

import dataclasses

import pytest

from erroror.core.enums import CustomErrorKind, ErrorKind, resolve_error_kind


@pytest.mark.unit
class TestErrorKind:
    """Test built-in ErrorKind enum."""

    def test_numeric_values(self):
        """Test each built-in kind has its fixed numeric value."""
        assert int(ErrorKind.FAILURE) == 0
        assert int(ErrorKind.UNEXPECTED) == 1
        assert int(ErrorKind.VALIDATION) == 2
        assert int(ErrorKind.CONFLICT) == 3
        assert int(ErrorKind.NOT_FOUND) == 4

    def test_enum_members(self):
        """Test the built-in set is closed at five kinds."""
        assert len(list(ErrorKind)) == 5


@pytest.mark.unit
class TestCustomErrorKind:
    """Test CustomErrorKind tagged variant."""

    def test_numeric_projection(self):
        """Test int() of a custom kind is its value."""
        assert int(CustomErrorKind(7)) == 7

    def test_name(self):
        """Test every custom kind shares the CUSTOM label."""
        assert CustomErrorKind(7).name == "CUSTOM"
        assert str(CustomErrorKind(7)) == "CUSTOM(7)"

    def test_structural_equality(self):
        """Test custom kinds compare by value."""
        assert CustomErrorKind(9) == CustomErrorKind(9)
        assert CustomErrorKind(9) != CustomErrorKind(10)
        assert hash(CustomErrorKind(9)) == hash(CustomErrorKind(9))

    def test_not_equal_to_builtin(self):
        """Test a custom kind never equals a built-in kind."""
        assert CustomErrorKind(5) not in list(ErrorKind)

    def test_is_frozen(self):
        """Test custom kinds are immutable."""
        kind = CustomErrorKind(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            kind.value = 6  # type: ignore[misc]


@pytest.mark.unit
class TestResolveErrorKind:
    """Test resolve_error_kind()."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_builtin_values_resolve_to_members(self, kind):
        """Test 0-4 resolve to the built-in member itself."""
        assert resolve_error_kind(int(kind)) is kind

    @pytest.mark.parametrize("value", [5, 42, 1000, -1])
    def test_other_values_resolve_to_custom(self, value):
        """Test any other integer becomes a CustomErrorKind."""
        kind = resolve_error_kind(value)

        assert kind == CustomErrorKind(value)
        assert int(kind) == value
