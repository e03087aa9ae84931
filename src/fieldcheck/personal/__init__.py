"""Personal-data validators: age, date of birth, gender, name, passport."""

from fieldcheck.codes import (
    AgeErrorCode,
    DOBErrorCode,
    GenderErrorCode,
    NameErrorCode,
    PassportErrorCode,
)
from fieldcheck.personal.age import AgeConfig, AgeRange, AgeValidationResult, AgeValidator
from fieldcheck.personal.dob import DateRange, DOBConfig, DOBValidationResult, DOBValidator
from fieldcheck.personal.gender import (
    DEFAULT_ABBREVIATIONS,
    GenderConfig,
    GenderOption,
    GenderValidationResult,
    GenderValidator,
)
from fieldcheck.personal.name import NameConfig, NameValidator
from fieldcheck.personal.passport import (
    PASSPORT_FORMATS,
    PassportAuthority,
    PassportConfig,
    PassportData,
    PassportValidationResult,
    PassportValidator,
)

__all__ = [
    "DEFAULT_ABBREVIATIONS",
    "PASSPORT_FORMATS",
    "AgeConfig",
    "AgeErrorCode",
    "AgeRange",
    "AgeValidationResult",
    "AgeValidator",
    "DOBConfig",
    "DOBErrorCode",
    "DOBValidationResult",
    "DOBValidator",
    "DateRange",
    "GenderConfig",
    "GenderErrorCode",
    "GenderOption",
    "GenderValidationResult",
    "GenderValidator",
    "NameConfig",
    "NameErrorCode",
    "NameValidator",
    "PassportAuthority",
    "PassportConfig",
    "PassportData",
    "PassportErrorCode",
    "PassportValidationResult",
    "PassportValidator",
]
