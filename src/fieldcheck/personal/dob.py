"""Date-of-birth validation with age breakdown.

Accepts a ``date``/``datetime`` or a string in one of the formats
understood by ``fieldcheck.dates.parse_date``. On success the result
always carries the age at the reference date::

    result = DOBValidator(min_age=18).validate("1990-05-17")
    result.age.years, result.is_legal_age
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from fieldcheck.base import configure, freeze, reject
from fieldcheck.codes import DOBErrorCode as Code
from fieldcheck.dates import AgeBreakdown, age_breakdown, as_date, parse_date
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

_DEFAULT_LEGAL_AGE = 18


@dataclass(frozen=True, slots=True)
class DateRange:
    """A named, inclusive range of acceptable birth dates."""

    name: str
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", as_date(self.start_date))
        object.__setattr__(self, "end_date", as_date(self.end_date))


@dataclass(frozen=True, slots=True)
class DOBConfig:
    """Date-of-birth policy.

    When ``valid_ranges`` is non-empty the date must fall in one of them.
    ``reference_date`` replaces today for every age computation.
    """

    min_age: int = 0
    max_age: int = 120
    allow_future_dates: bool = False
    reference_date: date | None = None
    valid_ranges: tuple[DateRange, ...] = ()

    def __post_init__(self) -> None:
        freeze(self, "valid_ranges")
        check_bounds("age", self.min_age, self.max_age)


@dataclass(frozen=True, slots=True)
class DOBValidationResult(ValidationResult[date]):
    age: AgeBreakdown | None = None
    category: str | None = None
    is_legal_age: bool | None = None


class DOBValidator:
    __slots__ = ("_config",)

    def __init__(self, config: DOBConfig | None = None, **overrides: Any) -> None:
        self._config = configure(DOBConfig, config, overrides)

    @property
    def config(self) -> DOBConfig:
        return self._config

    def _reference(self) -> date:
        return as_date(self._config.reference_date or date.today())

    def validate(self, value: str | date | None) -> DOBValidationResult:
        cfg = self._config
        if value is None or (isinstance(value, str) and not value.strip()):
            return reject(self, Code.DOB_REQUIRED, "Date of birth is required", DOBValidationResult)

        if isinstance(value, str):
            parsed = parse_date(value)
            if parsed is None:
                return reject(
                    self, Code.INVALID_DATE_FORMAT, "Invalid date format", DOBValidationResult
                )
            dob = parsed
        elif isinstance(value, date):
            dob = as_date(value)
        else:
            return reject(
                self,
                Code.INVALID_INPUT_TYPE,
                "Date of birth must be a string or date object",
                DOBValidationResult,
            )

        reference = self._reference()
        if not cfg.allow_future_dates and dob > reference:
            return reject(
                self, Code.FUTURE_DATE, "Date of birth cannot be in the future", DOBValidationResult
            )

        age = age_breakdown(dob, reference)
        # An allowed future date has no age yet; the bounds do not apply.
        born = dob <= reference
        if born and age.years < cfg.min_age:
            return reject(
                self,
                Code.BELOW_MINIMUM_AGE,
                f"Age must be at least {cfg.min_age} years",
                DOBValidationResult,
            )
        if born and age.years > cfg.max_age:
            return reject(
                self,
                Code.ABOVE_MAXIMUM_AGE,
                f"Age must not exceed {cfg.max_age} years",
                DOBValidationResult,
            )

        category: str | None = None
        if cfg.valid_ranges:
            category = next(
                (r.name for r in cfg.valid_ranges if r.start_date <= dob <= r.end_date), None
            )
            if category is None:
                return reject(
                    self,
                    Code.OUTSIDE_VALID_RANGES,
                    "Date of birth does not fall within any valid range",
                    DOBValidationResult,
                )

        return success(
            dob,
            DOBValidationResult,
            age=age,
            category=category,
            is_legal_age=age.years >= cfg.min_age,
        )

    def is_legal_age(self, dob: date, min_age: int | None = None) -> bool:
        """True if the person born on *dob* has reached *min_age*.

        Falls back to the configured ``min_age``, then to 18 when that
        is 0.
        """
        threshold = min_age or self._config.min_age or _DEFAULT_LEGAL_AGE
        return self.age_at(dob).years >= threshold

    def age_at(self, dob: date, reference_date: date | None = None) -> AgeBreakdown:
        """Age of someone born on *dob* at *reference_date* (default: reference/today)."""
        return age_breakdown(as_date(dob), as_date(reference_date or self._reference()))
