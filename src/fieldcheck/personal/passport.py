"""Passport number validation by issuing authority.

The number alone is enough; the authority is then detected from its
shape, first matching format wins::

    PassportValidator().validate("AB123456").authority  # "CAN"

Pass a ``PassportData`` to pin the authority and to check expiration::

    PassportValidator(validate_expiration=True).validate(
        PassportData("123456789", authority="GBR", expiration_date=date(2031, 1, 1))
    )

The checksum rules are simplified digit sums, not the ICAO 9303
algorithm; leave ``validate_checksums`` off for real documents.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from fieldcheck.base import (
    as_record,
    blank,
    compile_pattern,
    configure,
    freeze,
    freeze_mapping,
    reject,
)
from fieldcheck.codes import PassportErrorCode as Code
from fieldcheck.dates import as_date, parse_date
from fieldcheck.result import ValidationResult, success

GENERIC = "generic"


class PassportAuthority(StrEnum):
    """ISO 3166-1 alpha-3 codes of the built-in issuing authorities."""

    USA = "USA"
    GBR = "GBR"
    CAN = "CAN"
    AUS = "AUS"
    NZL = "NZL"
    DEU = "DEU"
    FRA = "FRA"
    ESP = "ESP"
    ITA = "ITA"
    JPN = "JPN"
    CHN = "CHN"
    IND = "IND"
    RUS = "RUS"
    BRA = "BRA"
    ZAF = "ZAF"


PASSPORT_FORMATS: Mapping[str, re.Pattern[str]] = {
    PassportAuthority.USA: re.compile(r"[A-Z0-9]{9}"),
    PassportAuthority.GBR: re.compile(r"[0-9]{9}"),
    PassportAuthority.CAN: re.compile(r"[A-Z]{2}[0-9]{6}"),
    PassportAuthority.AUS: re.compile(r"[A-Z][0-9]{7}"),
    PassportAuthority.NZL: re.compile(r"[A-Z][0-9]{7}"),
    PassportAuthority.DEU: re.compile(r"[A-Z0-9]{10}"),
    PassportAuthority.FRA: re.compile(r"[0-9]{9}"),
    PassportAuthority.ESP: re.compile(r"[A-Z]{3}[0-9]{6}"),
    PassportAuthority.ITA: re.compile(r"[A-Z]{2}[0-9]{7}"),
    PassportAuthority.JPN: re.compile(r"[A-Z]{2}[0-9]{7}"),
    PassportAuthority.CHN: re.compile(r"[EG][0-9]{8}"),
    PassportAuthority.IND: re.compile(r"[A-Z][0-9]{7}"),
    PassportAuthority.RUS: re.compile(r"[0-9]{9}"),
    PassportAuthority.BRA: re.compile(r"[A-Z]{2}[0-9]{6}"),
    PassportAuthority.ZAF: re.compile(r"[A-Z][0-9]{8}"),
    GENERIC: re.compile(r"[A-Z0-9]{5,12}"),
}


@dataclass(frozen=True, slots=True)
class PassportData:
    number: str | None = None
    authority: str | None = None
    expiration_date: date | str | None = None
    issue_date: date | str | None = None


@dataclass(frozen=True, slots=True)
class PassportConfig:
    """Passport policy.

    ``additional_formats`` extends or overrides ``PASSPORT_FORMATS``
    (patterns are matched against the whole number). Expiration and
    issue-date checks run only with ``validate_expiration`` and only
    when the input carries an expiration date.
    """

    allowed_authorities: tuple[str, ...] = tuple(PassportAuthority)
    normalize: bool = True
    validate_expiration: bool = False
    minimum_validity_days: int = 180
    additional_formats: (
        Mapping[str, str | re.Pattern[str]] | tuple[tuple[str, str | re.Pattern[str]], ...] | None
    ) = None
    validate_checksums: bool = False
    max_passport_age: int = 10
    allow_unknown_authorities: bool = True

    def __post_init__(self) -> None:
        freeze(self, "allowed_authorities")
        freeze_mapping(self, "additional_formats")
        # Authorities are compared upper-cased.
        object.__setattr__(
            self, "allowed_authorities", tuple(str(a).upper() for a in self.allowed_authorities)
        )
        if self.additional_formats is not None:
            object.__setattr__(
                self,
                "additional_formats",
                tuple((name.upper(), pattern) for name, pattern in self.additional_formats),
            )


@dataclass(frozen=True, slots=True)
class PassportValidationResult(ValidationResult[str]):
    normalized_value: str | None = None
    authority: str | None = None
    has_valid_expiration: bool | None = None
    days_to_expiration: int | None = None
    checksum_valid: bool | None = None


def _alphanumeric_sum_valid(number: str) -> bool:
    return sum(ord(char) % 10 for char in number) % 10 == 0


def _digit_sum_valid(number: str) -> bool:
    return sum(int(digit) for digit in number if digit.isdigit()) % 10 == 0


_CHECKSUMS = {
    PassportAuthority.USA: _alphanumeric_sum_valid,
    PassportAuthority.GBR: _digit_sum_valid,
}


def _to_date(value: date | str | None) -> date | None:
    if isinstance(value, date):
        return as_date(value)
    if isinstance(value, str):
        return parse_date(value)
    return None


class PassportValidator:
    __slots__ = ("_config", "_formats")

    def __init__(self, config: PassportConfig | None = None, **overrides: Any) -> None:
        cfg = configure(PassportConfig, config, overrides)
        self._config = cfg
        extra = {
            name: compile_pattern(pattern)
            for name, pattern in cfg.additional_formats or ()
        }
        self._formats: dict[str, re.Pattern[str]] = {**PASSPORT_FORMATS, **extra}

    @property
    def config(self) -> PassportConfig:
        return self._config

    def supported_authorities(self) -> list[str]:
        return [str(name) for name in self._formats if name != GENERIC]

    def detect_authority(self, number: str) -> str | None:
        """First authority whose format matches *number*, if any."""
        for name, pattern in self._formats.items():
            if name != GENERIC and pattern.fullmatch(number):
                return str(name)
        return None

    def checksum(self, number: str, authority: str | None) -> bool | None:
        """Checksum verdict, or None when *authority* has no checksum rule."""
        rule = _CHECKSUMS.get(authority) if authority else None
        return rule(number) if rule is not None else None

    def _format_valid(self, number: str, authority: str) -> bool:
        pattern = self._formats.get(authority, self._formats[GENERIC])
        return pattern.fullmatch(number) is not None

    def validate(
        self, value: str | PassportData | Mapping[str, Any] | None
    ) -> PassportValidationResult:
        cfg = self._config
        if isinstance(value, str):
            if blank(value):
                return reject(
                    self,
                    Code.PASSPORT_REQUIRED,
                    "Passport information is required",
                    PassportValidationResult,
                )
            data = PassportData(number=value)
        else:
            resolved = as_record(PassportData, value)
            if resolved is None:
                return reject(
                    self,
                    Code.PASSPORT_REQUIRED,
                    "Passport information is required",
                    PassportValidationResult,
                )
            if resolved.number is None or blank(resolved.number):
                return reject(
                    self,
                    Code.PASSPORT_NUMBER_REQUIRED,
                    "Passport number is required",
                    PassportValidationResult,
                )
            data = resolved

        number = data.number or ""
        authority = data.authority
        if cfg.normalize:
            number = number.strip().upper()
            authority = authority.strip().upper() if authority else authority
        authority = authority or self.detect_authority(number)

        if authority:
            if cfg.allowed_authorities and authority not in cfg.allowed_authorities:
                return reject(
                    self,
                    Code.PASSPORT_AUTHORITY_NOT_ALLOWED,
                    f"Passport issuing authority {authority} is not in the list "
                    "of allowed authorities",
                    PassportValidationResult,
                )
            if not self._format_valid(number, authority):
                return reject(
                    self,
                    Code.INVALID_PASSPORT_FORMAT,
                    f"Passport number format is invalid for {authority}",
                    PassportValidationResult,
                )
            if cfg.validate_checksums and self.checksum(number, authority) is False:
                return reject(
                    self,
                    Code.INVALID_PASSPORT_CHECKSUM,
                    f"Passport number checksum validation failed for {authority}",
                    PassportValidationResult,
                )
        elif not cfg.allow_unknown_authorities:
            return reject(
                self,
                Code.UNKNOWN_PASSPORT_AUTHORITY,
                "Could not determine passport issuing authority "
                "and unknown authorities are not allowed",
                PassportValidationResult,
            )
        elif not self._format_valid(number, GENERIC):
            return reject(
                self,
                Code.INVALID_PASSPORT_FORMAT,
                "Passport number format is invalid for generic validation",
                PassportValidationResult,
            )

        has_valid_expiration: bool | None = None
        days_to_expiration: int | None = None
        if cfg.validate_expiration and data.expiration_date is not None:
            expires = _to_date(data.expiration_date)
            if expires is None:
                return reject(
                    self,
                    Code.INVALID_EXPIRATION_DATE,
                    "Passport expiration date is invalid",
                    PassportValidationResult,
                )
            today = date.today()
            days_to_expiration = (expires - today).days
            has_valid_expiration = days_to_expiration >= cfg.minimum_validity_days
            if not has_valid_expiration:
                return reject(
                    self,
                    Code.INSUFFICIENT_PASSPORT_VALIDITY,
                    f"Passport must be valid for at least {cfg.minimum_validity_days} more days",
                    PassportValidationResult,
                )

            # An unparseable issue date is ignored.
            issued = _to_date(data.issue_date)
            if cfg.max_passport_age and issued is not None:
                if (today - issued).days / 365 > cfg.max_passport_age:
                    return reject(
                        self,
                        Code.PASSPORT_TOO_OLD,
                        f"Passport exceeds maximum age of {cfg.max_passport_age} years",
                        PassportValidationResult,
                    )

        return success(
            number,
            PassportValidationResult,
            normalized_value=number,
            authority=authority,
            has_valid_expiration=has_valid_expiration,
            days_to_expiration=days_to_expiration,
            checksum_valid=self.checksum(number, authority) if cfg.validate_checksums else None,
        )
