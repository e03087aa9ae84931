"""Two-factor code validation."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from time import time
from typing import Any

from fieldcheck.base import as_record, blank, configure, freeze, reject
from fieldcheck.codes import TwoFactorErrorCode as Code
from fieldcheck.result import ValidationResult, success

_DIGITS = re.compile(r"[0-9]+")


class TwoFactorType(StrEnum):
    TOTP = "totp"
    SMS = "sms"
    EMAIL = "email"
    APP = "app"


@dataclass(frozen=True, slots=True)
class TwoFactorConfig:
    """Two-factor policy.

    ``expiration`` is the validity window in seconds after the code's
    ``timestamp``; 0 disables the check. ``exact_length`` of 0 disables
    the length check.
    """

    digit_only: bool = True
    exact_length: int = 6
    allowed_types: tuple[str, ...] = tuple(TwoFactorType)
    expiration: int = 300

    def __post_init__(self) -> None:
        freeze(self, "allowed_types")


@dataclass(frozen=True, slots=True)
class TwoFactorData:
    code: str | None = None
    type: str | None = None
    timestamp: int | None = None  # Unix seconds when the code was issued


class TwoFactorValidator:
    __slots__ = ("_config",)

    def __init__(self, config: TwoFactorConfig | None = None, **overrides: Any) -> None:
        self._config = configure(TwoFactorConfig, config, overrides)

    @property
    def config(self) -> TwoFactorConfig:
        return self._config

    def validate(
        self, value: TwoFactorData | Mapping[str, Any] | None
    ) -> ValidationResult[TwoFactorData]:
        cfg = self._config
        data = as_record(TwoFactorData, value)
        if data is None:
            return reject(
                self, Code.TWOFACTOR_REQUIRED, "Two-factor authentication data is required"
            )

        if data.code is None or blank(data.code):
            return reject(
                self, Code.TWOFACTOR_CODE_REQUIRED, "Two-factor authentication code is required"
            )

        code = data.code.strip()
        if cfg.exact_length and len(code) != cfg.exact_length:
            return reject(
                self,
                Code.INVALID_TWOFACTOR_LENGTH,
                f"Two-factor code must be exactly {cfg.exact_length} characters",
            )

        if cfg.digit_only and not _DIGITS.fullmatch(code):
            return reject(
                self, Code.INVALID_TWOFACTOR_FORMAT, "Two-factor code must contain only digits"
            )

        if data.type and data.type not in cfg.allowed_types:
            allowed = ", ".join(cfg.allowed_types)
            return reject(
                self, Code.INVALID_TWOFACTOR_TYPE, f"Two-factor type must be one of: {allowed}"
            )

        if (
            data.timestamp is not None
            and cfg.expiration
            and int(time()) > data.timestamp + cfg.expiration
        ):
            return reject(self, Code.TWOFACTOR_EXPIRED, "Two-factor code has expired")

        return success(TwoFactorData(code=code, type=data.type, timestamp=data.timestamp))
