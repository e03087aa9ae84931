"""Age validation, from a number or from a birth date.

Usage::

    validator = AgeValidator(
        min_age=18,
        age_ranges=[AgeRange("adult", 18, 64), AgeRange("senior", 65, 120)],
    )
    result = validator.validate(70)
    result.age_category  # "senior"

    AgeValidator(validate_from_date=True).validate(date(1990, 5, 17))
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any

from fieldcheck.base import configure, freeze, reject
from fieldcheck.codes import AgeErrorCode as Code
from fieldcheck.dates import AgeBreakdown, age_breakdown, as_date
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success


@dataclass(frozen=True, slots=True)
class AgeRange:
    """A named, inclusive age category."""

    name: str
    min: float
    max: float


@dataclass(frozen=True, slots=True)
class AgeConfig:
    """Age policy.

    ``reference_date`` replaces today when computing an age from a birth
    date.
    """

    min_age: float = 0
    max_age: float = 120
    allow_decimals: bool = False
    age_ranges: tuple[AgeRange, ...] = ()
    validate_from_date: bool = False
    reference_date: date | None = None

    def __post_init__(self) -> None:
        freeze(self, "age_ranges")
        check_bounds("age", self.min_age, self.max_age)


@dataclass(frozen=True, slots=True)
class AgeValidationResult(ValidationResult[float]):
    """Age result with the matched category and date-derived details."""

    age_category: str | None = None
    calculated_age: float | None = None
    detailed: AgeBreakdown | None = None


class AgeValidator:
    __slots__ = ("_config",)

    def __init__(self, config: AgeConfig | None = None, **overrides: Any) -> None:
        self._config = configure(AgeConfig, config, overrides)

    @property
    def config(self) -> AgeConfig:
        return self._config

    def validate(self, value: float | date | None) -> AgeValidationResult:
        cfg = self._config
        if value is None:
            return reject(self, Code.AGE_REQUIRED, "Age is required", AgeValidationResult)

        detailed: AgeBreakdown | None = None
        if isinstance(value, date):
            if not cfg.validate_from_date:
                return reject(
                    self,
                    Code.DATE_NOT_ALLOWED,
                    "Expected age as number, received date",
                    AgeValidationResult,
                )
            birth = as_date(value)
            reference = as_date(cfg.reference_date or date.today())
            if birth > reference:
                return reject(
                    self,
                    Code.FUTURE_DATE,
                    "Birth date cannot be in the future",
                    AgeValidationResult,
                )
            detailed = age_breakdown(birth, reference)
            age: float = detailed.decimal_years if cfg.allow_decimals else detailed.years
        else:
            age = value

        if isinstance(age, bool) or not isinstance(age, int | float):
            return reject(self, Code.INVALID_AGE, "Age must be a valid number", AgeValidationResult)
        # Only floats can be NaN; float() of a huge int overflows.
        if isinstance(age, float) and math.isnan(age):
            return reject(self, Code.INVALID_AGE, "Age must be a valid number", AgeValidationResult)

        if not cfg.allow_decimals and isinstance(age, float) and not age.is_integer():
            return reject(
                self, Code.DECIMALS_NOT_ALLOWED, "Age must be a whole number", AgeValidationResult
            )

        if age < cfg.min_age:
            return reject(
                self,
                Code.AGE_BELOW_MINIMUM,
                f"Age must be at least {cfg.min_age} years",
                AgeValidationResult,
            )
        if age > cfg.max_age:
            return reject(
                self,
                Code.AGE_ABOVE_MAXIMUM,
                f"Age must not exceed {cfg.max_age} years",
                AgeValidationResult,
            )

        category = next((r.name for r in cfg.age_ranges if r.min <= age <= r.max), None)
        return success(
            age,
            AgeValidationResult,
            age_category=category,
            calculated_age=age if detailed is not None else None,
            detailed=detailed,
        )

    def is_in_age_range(self, age: float, category: str) -> bool:
        """True if *age* falls inside the configured range named *category*."""
        for age_range in self._config.age_ranges:
            if age_range.name == category:
                return age_range.min <= age <= age_range.max
        return False
