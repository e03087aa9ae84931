"""Tests for fieldcheck.rules — predicates, rule factories and RuleChain."""

import re

import pytest

from fieldcheck.errors import ConfigurationError
from fieldcheck.rules import (
    CharClass,
    RuleChain,
    char_class,
    integer,
    is_non_empty_string,
    is_positive_number,
    is_valid_email,
    length_range,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    required,
)

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


class TestPredicates:
    @pytest.mark.parametrize(("value", "expected"), [("a", True), ("  ", False), ("", False), (3, False)])
    def test_non_empty_string(self, value: object, expected: bool) -> None:
        assert is_non_empty_string(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, True), (0.5, True), (0, False), (-2, False), (True, False), ("5", False)],
    )
    def test_positive_number(self, value: object, expected: bool) -> None:
        assert is_positive_number(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("a@b.co", True), ("a b@c.de", False), ("a@b", False), ("@b.co", False), (None, False)],
    )
    def test_valid_email(self, value: object, expected: bool) -> None:
        assert is_valid_email(value) is expected


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestRequired:
    def test_empty_string(self) -> None:
        assert required("") == "This field is required"

    def test_whitespace_only(self) -> None:
        assert required("   ") is not None

    def test_valid(self) -> None:
        assert required("hello") is None


class TestLength:
    def test_max(self) -> None:
        assert max_length(5)("12345") is None
        assert max_length(5)("123456") == "Must be at most 5 characters"

    def test_min(self) -> None:
        assert min_length(3)("abc") is None
        assert min_length(3)("ab") == "Must be at least 3 characters"

    def test_range(self) -> None:
        rule = length_range(2, 4)
        assert rule("ab") is None
        assert rule("abcd") is None
        assert rule("a") == "Must be between 2 and 4 characters"
        assert rule("abcde") is not None

    def test_range_bounds_checked(self) -> None:
        with pytest.raises(ConfigurationError):
            length_range(5, 2)


class TestCharClass:
    @pytest.mark.parametrize(
        ("selector", "good", "bad"),
        [
            (CharClass.ALPHANUMERIC, "abc123", "abc_123"),
            (CharClass.DIGITS, "0042", "42a"),
            (CharClass.LETTERS, "abcXYZ", "abc1"),
            (CharClass.SPECIAL, "!@#", "!a"),
        ],
    )
    def test_selectors(self, selector: CharClass, good: str, bad: str) -> None:
        rule = char_class(selector)
        assert rule(good) is None
        assert rule(bad) == f"Must contain only {selector.value} characters"

    def test_string_selector(self) -> None:
        assert char_class("digits")("123") is None

    def test_unknown_selector(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported character class"):
            char_class("emoji")


class TestMatches:
    def test_match(self) -> None:
        assert matches(r"\d{3}")("123") is None

    def test_anchored_at_start_only(self) -> None:
        assert matches(r"\d{3}")("123abc") is None
        assert matches(r"\d{3}")("abc123") is not None

    def test_default_message(self) -> None:
        assert matches(r"\d+")("x") == r"Must match pattern: \d+"

    def test_custom_message(self) -> None:
        assert matches(re.compile(r"[A-Z]"), "Must be uppercase")("a") == "Must be uppercase"


class TestOneOf:
    def test_valid(self) -> None:
        assert one_of("red", "green")("red") is None

    def test_invalid_lists_sorted_choices(self) -> None:
        assert one_of("red", "green")("blue") == "Must be one of: green, red"

    def test_case_insensitive(self) -> None:
        assert one_of("Red", case_sensitive=False)("RED") is None
        assert one_of("Red")("red") is not None


class TestNumeric:
    @pytest.mark.parametrize("value", ["42", "-7", " 3 "])
    def test_integer_valid(self, value: str) -> None:
        assert integer(value) is None

    @pytest.mark.parametrize("value", ["4.2", "abc", ""])
    def test_integer_invalid(self, value: str) -> None:
        assert integer(value) == "Must be a whole number"

    @pytest.mark.parametrize("value", ["4.2", "1e3", "-1"])
    def test_number_valid(self, value: str) -> None:
        assert number(value) is None

    def test_number_invalid(self) -> None:
        assert number("four") == "Must be a number"


# ---------------------------------------------------------------------------
# RuleChain
# ---------------------------------------------------------------------------


class TestRuleChain:
    def test_empty_chain_passes(self) -> None:
        assert RuleChain().validate("anything")

    def test_first_failure_wins(self) -> None:
        chain = RuleChain().string().min_len(3).allow(CharClass.DIGITS)
        assert chain.check("a") == "Must be at least 3 characters"
        assert chain.check("abc") == "Must contain only digits characters"
        assert chain.check("123") is None

    def test_string_rule(self) -> None:
        assert RuleChain().string().check(42) == "Must be a string"  # type: ignore[arg-type]

    def test_max_len(self) -> None:
        assert not RuleChain().max_len(2).validate("abc")

    def test_case_insensitive_applies_to_earlier_rules(self) -> None:
        chain = RuleChain().allow("letters")
        chain.case_insensitive()
        assert chain.validate("AbC")

    def test_custom_rule(self) -> None:
        chain = RuleChain().rule(lambda v: None if v.startswith("x") else "Must start with x")
        assert chain.validate("xyz")
        assert chain.check("abc") == "Must start with x"

    def test_rules_snapshot(self) -> None:
        chain = RuleChain().string().min_len(1)
        assert len(chain.rules) == 2
        assert isinstance(chain.rules, tuple)

    def test_unknown_selector(self) -> None:
        with pytest.raises(ConfigurationError):
            RuleChain().allow("emoji")
