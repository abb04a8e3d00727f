"""Unit tests for condition matching."""

import pytest

from jsongrep.exceptions import MatchError
from jsongrep.matcher import Condition, MatchKind, matches
from jsongrep.values import NULL, VArray, VBool, VFloat, VInt, VObject, VString


def exact(value):
    return Condition(MatchKind.EXACT, value)


def regex(pattern):
    return Condition(MatchKind.REGEX, VString(pattern))


class TestExact:
    """Test exact (structural) equality."""

    @pytest.mark.parametrize(
        "operand, target, want",
        [
            (NULL, NULL, True),
            (VBool(True), VBool(True), True),
            (VBool(True), VBool(False), False),
            (VInt(1), VInt(1), True),
            (VInt(1), VInt(2), False),
            (VFloat(1.0), VFloat(1.0), True),
            (VFloat(1.0), VFloat(1.1), False),
            (VString("black"), VString("black"), True),
            (VString("black"), VString("white"), False),
        ],
    )
    def test_scalars(self, operand, target, want):
        assert matches(exact(operand), target) is want

    def test_arrays_are_order_sensitive(self):
        cond = exact(VArray((VInt(1), VInt(2))))
        assert matches(cond, VArray((VInt(1), VInt(2))))
        assert not matches(cond, VArray((VInt(2), VInt(1))))

    def test_objects_ignore_key_order(self):
        cond = exact(VObject({"a": VInt(1), "b": NULL}))
        assert matches(cond, VObject({"b": NULL, "a": VInt(1)}))
        assert not matches(cond, VObject({"a": VInt(1)}))

    def test_nested_types_are_strict(self):
        cond = exact(VArray((VInt(1),)))
        assert not matches(cond, VArray((VFloat(1.0),)))

    def test_no_coercion(self):
        """1 never equals "1"."""
        with pytest.raises(MatchError):
            matches(exact(VInt(1)), VString("1"))

    def test_int_float_mismatch(self):
        with pytest.raises(MatchError):
            matches(exact(VInt(1)), VFloat(1.0))

    def test_mismatch_fields(self):
        cond = exact(NULL)
        with pytest.raises(MatchError) as exc_info:
            matches(cond, VBool(True))
        err = exc_info.value
        assert err.matcher_type == "Exact"
        assert err.matcher_value == "Null"
        assert err.target == "Bool(true)"
        assert err.by == str(cond)


class TestRegex:
    """Test pattern matching (unanchored search)."""

    @pytest.mark.parametrize(
        "pattern, target, want",
        [
            ("[sS]irius", "Sirius", True),
            ("[sS]irius", "sirius", True),
            ("[sS]irius", "xirius", False),
            ("dwarf", "dwarf", True),
            (r"s.*e", "slice", True),
            (r"s.*e", "slice ice", True),
            (r"^dwarf", "brown dwarf", False),
            ("irius", "Sirius B", True),
        ],
    )
    def test_search(self, pattern, target, want):
        assert matches(regex(pattern), VString(target)) is want

    def test_non_string_target(self):
        cond = regex("[sS]irius")
        with pytest.raises(MatchError) as exc_info:
            matches(cond, VInt(1))
        assert str(exc_info.value) == (
            'Matcher type mismatch (matcher_type "Regex", '
            'matcher_value "String([sS]irius)", target "Int(1)", '
            'by "Condition(Regex, String([sS]irius))")'
        )

    def test_non_string_operand(self):
        with pytest.raises(MatchError):
            matches(Condition(MatchKind.REGEX, VInt(1)), VString("1"))

    def test_invalid_pattern_rejected_on_construction(self):
        with pytest.raises(ValueError, match=r"Invalid regex \(\[\)"):
            regex("[")


class TestContain:
    """Test plain substring matching."""

    @pytest.mark.parametrize(
        "needle, target, want",
        [
            ("dwarf", "dwarf", True),
            ("dwarf", "giant", False),
            ("dwarf", "white dwarf", True),
            ("[s]", "[s]irius", True),
        ],
    )
    def test_contain(self, needle, target, want):
        cond = Condition(MatchKind.CONTAIN, VString(needle))
        assert matches(cond, VString(target)) is want

    def test_non_string_target(self):
        cond = Condition(MatchKind.CONTAIN, VString("1"))
        with pytest.raises(MatchError) as exc_info:
            matches(cond, VInt(1))
        assert exc_info.value.matcher_type == "Contain"


class TestOrdered:
    """Test greater-than / less-than conditions."""

    @pytest.mark.parametrize(
        "operand, target, want",
        [
            (VBool(False), VBool(True), True),
            (VBool(True), VBool(False), False),
            (VInt(1), VInt(2), True),
            (VInt(1), VInt(0), False),
            (VInt(1), VInt(1), False),
            (VFloat(1.1), VFloat(1.2), True),
            (VString("nebula"), VString("quasar"), True),
            (VString("nebula"), VString("galaxy"), False),
        ],
    )
    def test_greater_than(self, operand, target, want):
        cond = Condition(MatchKind.GREATER_THAN, operand)
        assert matches(cond, target) is want

    @pytest.mark.parametrize(
        "operand, target, want",
        [
            (VBool(True), VBool(False), True),
            (VInt(1), VInt(0), True),
            (VInt(1), VInt(2), False),
            (VFloat(1.1), VFloat(1.0), True),
            (VString("nebula"), VString("galaxy"), True),
        ],
    )
    def test_less_than(self, operand, target, want):
        cond = Condition(MatchKind.LESS_THAN, operand)
        assert matches(cond, target) is want

    @pytest.mark.parametrize(
        "operand, target",
        [
            (NULL, NULL),
            (VInt(1), VBool(True)),
            (VInt(1), VFloat(2.0)),
            (VArray(()), VArray(())),
        ],
    )
    def test_unordered_types(self, operand, target):
        with pytest.raises(MatchError):
            matches(Condition(MatchKind.GREATER_THAN, operand), target)
