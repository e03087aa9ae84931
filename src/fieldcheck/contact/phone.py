"""Phone number validation: loose international format, E.164 length."""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import blank, configure, freeze, reject
from fieldcheck.codes import PhoneErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

_PHONE_RE = re.compile(r"\+?[0-9\s\-()]+")
_PHONE_WITH_EXTENSION_RE = re.compile(r"\+?[0-9\s\-()]+?\s*(?:x|ext\.?)\s*[0-9]+", re.IGNORECASE)
_EXTENSION_SPLIT_RE = re.compile(r"x|ext\.?", re.IGNORECASE)
_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class PhoneConfig:
    """Phone validation policy.

    ``min_length``/``max_length`` count digits only. With
    ``allow_extension`` an ``x``/``ext`` suffix is accepted and its
    digits do not count towards ``max_length``.
    """

    allowed_country_codes: tuple[str, ...] = ()
    require_country_code: bool = False
    min_length: int = 7
    max_length: int = 15  # E.164
    allow_extension: bool = True

    def __post_init__(self) -> None:
        freeze(self, "allowed_country_codes")
        check_bounds("phone length", self.min_length, self.max_length)


def split_extension(phone: str) -> tuple[str, str | None]:
    """Split ``"555-1234 x89"`` into ``("555-1234 ", "89")``."""
    parts = _EXTENSION_SPLIT_RE.split(phone, maxsplit=1)
    if len(parts) == 1:
        return phone, None
    return parts[0], parts[1].strip()


class PhoneValidator:
    """Validate a phone number and return it trimmed."""

    __slots__ = ("_config",)

    def __init__(self, config: PhoneConfig | None = None, **overrides: Any) -> None:
        self._config = configure(PhoneConfig, config, overrides)

    @property
    def config(self) -> PhoneConfig:
        return self._config

    def validate(self, phone: str | None) -> ValidationResult[str]:
        cfg = self._config
        if phone is None or blank(phone):
            return reject(self, Code.PHONE_REQUIRED, "Phone number is required")

        phone = phone.strip()
        if not _PHONE_RE.fullmatch(phone) and not (
            cfg.allow_extension and _PHONE_WITH_EXTENSION_RE.fullmatch(phone)
        ):
            return reject(self, Code.INVALID_PHONE_FORMAT, "Phone number format is invalid")

        if cfg.require_country_code and not phone.startswith("+"):
            return reject(
                self,
                Code.COUNTRY_CODE_REQUIRED,
                "Phone number must include a country code (e.g., +1)",
            )

        main, extension = split_extension(phone)
        main_digits = _NON_DIGITS.sub("", main)

        if phone.startswith("+") and cfg.allowed_country_codes:
            if not any(
                main_digits.startswith(code.lstrip("+")) for code in cfg.allowed_country_codes
            ):
                return reject(
                    self,
                    Code.COUNTRY_CODE_NOT_ALLOWED,
                    "Phone number country code is not in the list of allowed country codes",
                )

        total_digits = len(_NON_DIGITS.sub("", phone))
        if total_digits < cfg.min_length:
            return reject(
                self,
                Code.PHONE_TOO_SHORT,
                f"Phone number must have at least {cfg.min_length} digits",
            )

        if total_digits > cfg.max_length:
            if extension is None:
                return reject(
                    self,
                    Code.PHONE_TOO_LONG,
                    f"Phone number must not exceed {cfg.max_length} digits",
                )
            if len(main_digits) > cfg.max_length:
                return reject(
                    self,
                    Code.PHONE_TOO_LONG,
                    f"Phone number must not exceed {cfg.max_length} digits (excluding extension)",
                )

        return success(phone)
