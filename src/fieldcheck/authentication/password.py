"""Password strength validation.

Accepts a bare password or a ``PasswordInput`` carrying the username,
so the password can be checked for containing it::

    validator = PasswordValidator()
    validator.validate("Passw0rd!")
    validator.validate(PasswordInput("Al1ce-rocks!", username="alice"))
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import as_record, compile_pattern, configure, freeze, lowered, reject
from fieldcheck.codes import PasswordErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")

# Usernames this short are too likely to appear by accident
_MIN_USERNAME_MATCH_LENGTH = 3


@dataclass(frozen=True, slots=True)
class PasswordConfig:
    """Password policy. Each character class is toggled independently."""

    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    special_chars_pattern: str | re.Pattern[str] = r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]+"
    disallow_common_passwords: bool = True
    prevent_username_in_password: bool = True
    common_passwords: tuple[str, ...] = ("password", "123456", "qwerty", "admin")

    def __post_init__(self) -> None:
        freeze(self, "common_passwords")
        check_bounds("password length", self.min_length, self.max_length)


@dataclass(frozen=True, slots=True)
class PasswordInput:
    password: str | None = None
    username: str | None = None


class PasswordValidator:
    """Validate a password against the configured policy.

    The password is returned unchanged on success.
    """

    __slots__ = ("_common", "_config", "_special")

    def __init__(self, config: PasswordConfig | None = None, **overrides: Any) -> None:
        self._config = configure(PasswordConfig, config, overrides)
        self._special = compile_pattern(self._config.special_chars_pattern)
        self._common = frozenset(lowered(self._config.common_passwords))

    @property
    def config(self) -> PasswordConfig:
        return self._config

    def validate(
        self, value: str | PasswordInput | Mapping[str, Any] | None
    ) -> ValidationResult[str]:
        cfg = self._config
        if isinstance(value, str):
            password, username = value, None
        else:
            data = as_record(PasswordInput, value) or PasswordInput()
            password, username = data.password, data.username

        if not password:
            return reject(self, Code.PASSWORD_REQUIRED, "Password is required")

        if len(password) < cfg.min_length:
            return reject(
                self,
                Code.PASSWORD_TOO_SHORT,
                f"Password must be at least {cfg.min_length} characters",
            )
        if len(password) > cfg.max_length:
            return reject(
                self,
                Code.PASSWORD_TOO_LONG,
                f"Password must not exceed {cfg.max_length} characters",
            )

        if cfg.require_uppercase and not _UPPERCASE.search(password):
            return reject(
                self,
                Code.PASSWORD_REQUIRES_UPPERCASE,
                "Password must contain at least one uppercase letter",
            )
        if cfg.require_lowercase and not _LOWERCASE.search(password):
            return reject(
                self,
                Code.PASSWORD_REQUIRES_LOWERCASE,
                "Password must contain at least one lowercase letter",
            )
        if cfg.require_numbers and not _DIGIT.search(password):
            return reject(
                self, Code.PASSWORD_REQUIRES_NUMBER, "Password must contain at least one number"
            )
        if cfg.require_special_chars and not self._special.search(password):
            return reject(
                self,
                Code.PASSWORD_REQUIRES_SPECIAL_CHAR,
                "Password must contain at least one special character",
            )

        if cfg.disallow_common_passwords and password.lower() in self._common:
            return reject(
                self, Code.PASSWORD_TOO_COMMON, "Password is too common and easily guessed"
            )

        if (
            cfg.prevent_username_in_password
            and username
            and len(username) >= _MIN_USERNAME_MATCH_LENGTH
            and username.lower() in password.lower()
        ):
            return reject(
                self, Code.PASSWORD_CONTAINS_USERNAME, "Password should not contain your username"
            )

        return success(password)
