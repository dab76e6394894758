"""Tests for enumshift.core.valueset module.

Covers:
- ValueSet construction and lookups
- Definition-time validation (aliases, bool, mixed backing types, empty enums)
- typed_value_set decorator
"""

from enum import Enum, IntEnum

import pytest

from enumshift.core.errors import ValueSetDefinitionError
from enumshift.core.valueset import is_backing_value, typed_value_set, value_set


class TestValueSet:
    def test_members_in_definition_order(self, refund_mode):
        vs = value_set(refund_mode)
        assert vs.members == (refund_mode.PARTIAL, refund_mode.FULL)
        assert list(vs) == [refund_mode.PARTIAL, refund_mode.FULL]
        assert len(vs) == 2

    def test_backing_values(self, refund_mode):
        vs = value_set(refund_mode)
        assert vs.backing_values == frozenset({"partial", "full"})
        assert vs.backing_type is str
        assert vs.name == "RefundMode"

    def test_int_backing_type(self, priority):
        assert value_set(priority).backing_type is int

    def test_lookup_exact(self, refund_mode):
        vs = value_set(refund_mode)
        assert vs.lookup("partial") is refund_mode.PARTIAL
        assert vs.lookup("full") is refund_mode.FULL

    @pytest.mark.parametrize("value", ["Partial", "PARTIAL", " partial", "part", "", 1, None])
    def test_lookup_no_partial_matching(self, refund_mode, value):
        assert value_set(refund_mode).lookup(value) is None

    def test_lookup_rejects_bool_for_int(self, priority):
        vs = value_set(priority)
        assert vs.lookup(1) is priority.LOW
        assert vs.lookup(True) is None

    def test_lookup_rejects_float(self, priority):
        assert value_set(priority).lookup(1.0) is None

    def test_contains(self, refund_mode):
        vs = value_set(refund_mode)
        assert refund_mode.FULL in vs
        assert "full" in vs
        assert "bogus" not in vs

    def test_to_dict(self, refund_mode):
        assert value_set(refund_mode).to_dict() == {"PARTIAL": "partial", "FULL": "full"}

    def test_cached(self, refund_mode):
        assert value_set(refund_mode) is value_set(refund_mode)

    def test_plain_enum_without_mixin(self):
        class Color(Enum):
            RED = "red"
            BLUE = "blue"

        assert value_set(Color).lookup("red") is Color.RED

    def test_intenum(self):
        class Level(IntEnum):
            ONE = 1
            TWO = 2

        assert value_set(Level).lookup(2) is Level.TWO


class TestValueSetDefinition:
    def test_rejects_aliases(self):
        class Shipping(str, Enum):
            STANDARD = "standard"
            EXPRESS = "express"
            FAST = "express"

        with pytest.raises(ValueSetDefinitionError, match="FAST"):
            value_set(Shipping)

    def test_rejects_bool_values(self):
        class Toggle(Enum):
            ON = True
            OFF = False

        with pytest.raises(ValueSetDefinitionError, match="expected str or int"):
            value_set(Toggle)

    def test_rejects_tuple_values(self):
        class Point(Enum):
            ORIGIN = (0, 0)

        with pytest.raises(ValueSetDefinitionError):
            value_set(Point)

    def test_rejects_mixed_backing_types(self):
        class Mixed(Enum):
            A = "a"
            B = 2

        with pytest.raises(ValueSetDefinitionError, match="mixes str and int"):
            value_set(Mixed)

    def test_rejects_empty_enum(self):
        class Empty(Enum):
            pass

        with pytest.raises(ValueSetDefinitionError, match="no members"):
            value_set(Empty)

    def test_rejects_non_enum(self):
        with pytest.raises(ValueSetDefinitionError, match="not an Enum"):
            value_set(str)

    def test_error_carries_enum_name(self):
        class Mixed(Enum):
            A = "a"
            B = 2

        with pytest.raises(ValueSetDefinitionError) as exc_info:
            value_set(Mixed)
        assert exc_info.value.context.enum == "Mixed"


class TestTypedValueSetDecorator:
    def test_returns_class_unchanged(self):
        @typed_value_set
        class Mode(str, Enum):
            A = "a"

        assert Mode.A.value == "a"

    def test_fails_at_definition_time(self):
        with pytest.raises(ValueSetDefinitionError):

            @typed_value_set
            class Broken(Enum):
                A = 1
                B = 1


class TestIsBackingValue:
    @pytest.mark.parametrize("value", ["x", "", 0, 42])
    def test_primitives(self, value):
        assert is_backing_value(value) is True

    @pytest.mark.parametrize("value", [True, False, 1.5, None, b"x", ["x"]])
    def test_non_primitives(self, value):
        assert is_backing_value(value) is False

    def test_enum_member_is_not_a_backing_value(self, refund_mode):
        assert is_backing_value(refund_mode.FULL) is False
