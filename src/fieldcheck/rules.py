"""Composable string rules and primitive predicates.

Each rule is a callable with the signature::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized rules are factory functions that return a rule::

    def max_length(n: int) -> Rule:
        def check(value: str) -> str | None:
            if len(value) > n:
                return f"Must be at most {n} characters"
            return None
        return check

Rules are plain functions, so they compose by listing them. ``RuleChain``
collects them fluently for ad hoc checks::

    username = RuleChain().string().min_len(3).max_len(16).allow(CharClass.ALPHANUMERIC)
    username.validate("alice42")  # True
    username.check("al")          # "Must be at least 3 characters"

Custom rules follow the same protocol; any callable matching
``(str) -> str | None`` works with ``RuleChain.rule()`` and
``fieldcheck.records.validate_record``.
"""

import re
from collections.abc import Callable
from enum import StrEnum
from typing import Self

from fieldcheck.base import compile_pattern, lowered
from fieldcheck.errors import ConfigurationError, check_bounds

type Rule = Callable[[str], str | None]


class CharClass(StrEnum):
    ALPHANUMERIC = "alphanumeric"
    DIGITS = "digits"
    LETTERS = "letters"
    SPECIAL = "special"


_CHAR_CLASS_PATTERNS: dict[CharClass, str] = {
    CharClass.ALPHANUMERIC: r"[a-zA-Z0-9]*",
    CharClass.DIGITS: r"[0-9]*",
    CharClass.LETTERS: r"[a-zA-Z]*",
    CharClass.SPECIAL: r"[!@#$%^&*]*",
}


def _char_class(selector: CharClass | str) -> CharClass:
    try:
        return CharClass(selector)
    except ValueError:
        msg = f"Unsupported character class: {selector!r}"
        raise ConfigurationError(msg) from None


# ---------------------------------------------------------------------------
# Primitive predicates
# ---------------------------------------------------------------------------

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_non_empty_string(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_positive_number(value: object) -> bool:
    """True for an int or float greater than zero. Booleans are not numbers."""
    return isinstance(value, int | float) and not isinstance(value, bool) and value > 0


def is_valid_email(value: object) -> bool:
    """Loose shape check: something@something.something, no whitespace."""
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: str) -> str | None:
    """Field must be present and non-empty."""
    if not value or not value.strip():
        return "This field is required"
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Rule:
    """String must be at most *n* characters."""

    def check(value: str) -> str | None:
        if len(value) > n:
            return f"Must be at most {n} characters"
        return None

    return check


def min_length(n: int) -> Rule:
    """String must be at least *n* characters."""

    def check(value: str) -> str | None:
        if len(value) < n:
            return f"Must be at least {n} characters"
        return None

    return check


def length_range(low: int, high: int) -> Rule:
    """String length must lie in ``[low, high]``."""
    check_bounds("length", low, high)

    def check(value: str) -> str | None:
        if not low <= len(value) <= high:
            return f"Must be between {low} and {high} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def char_class(selector: CharClass | str, *, case_sensitive: bool = True) -> Rule:
    """Every character must belong to *selector*.

    Raises ``ConfigurationError`` for an unknown selector.
    """
    cls = _char_class(selector)
    compiled = re.compile(
        _CHAR_CLASS_PATTERNS[cls], 0 if case_sensitive else re.IGNORECASE
    )

    def check(value: str) -> str | None:
        if not compiled.fullmatch(value):
            return f"Must contain only {cls.value} characters"
        return None

    return check


def matches(pattern: str | re.Pattern[str], message: str | None = None) -> Rule:
    """Value must match the given regex pattern."""
    compiled = compile_pattern(pattern)

    def check(value: str) -> str | None:
        if not compiled.match(value):
            return message or f"Must match pattern: {compiled.pattern}"
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str, case_sensitive: bool = True) -> Rule:
    """Value must be one of the given choices."""
    allowed = frozenset(choices if case_sensitive else lowered(choices))

    def check(value: str) -> str | None:
        candidate = value if case_sensitive else value.lower()
        if candidate not in allowed:
            options = ", ".join(sorted(choices))
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def integer(value: str) -> str | None:
    """Value must be a valid integer."""
    try:
        int(value)
    except (ValueError, TypeError):
        return "Must be a whole number"
    return None


def number(value: str) -> str | None:
    """Value must be a valid number (int or float)."""
    try:
        float(value)
    except (ValueError, TypeError):
        return "Must be a number"
    return None


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------


def _is_string(value: object) -> str | None:
    if not isinstance(value, str):
        return "Must be a string"
    return None


class RuleChain:
    """Ordered list of rules built fluently; the first failure wins.

    ``case_insensitive()`` applies to every character-class rule in the
    chain, including those added before it.
    """

    __slots__ = ("_case_sensitive", "_rules")

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._case_sensitive = True

    def rule(self, rule: Rule) -> Self:
        self._rules.append(rule)
        return self

    def string(self) -> Self:
        return self.rule(_is_string)

    def min_len(self, n: int) -> Self:
        return self.rule(min_length(n))

    def max_len(self, n: int) -> Self:
        return self.rule(max_length(n))

    def allow(self, selector: CharClass | str) -> Self:
        sensitive = char_class(selector)
        insensitive = char_class(selector, case_sensitive=False)

        def check(value: str) -> str | None:
            return sensitive(value) if self._case_sensitive else insensitive(value)

        return self.rule(check)

    def case_insensitive(self) -> Self:
        self._case_sensitive = False
        return self

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def check(self, value: str) -> str | None:
        """First error message, or None when every rule passes."""
        for rule in self._rules:
            error = rule(value)
            if error is not None:
                return error
        return None

    def validate(self, value: str) -> bool:
        return self.check(value) is None
