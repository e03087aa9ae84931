"""Personal name validation."""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import blank, configure, reject
from fieldcheck.codes import NameErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

_LETTERS_RE = re.compile(r"[a-zA-Z\s]+")
_LETTERS_AND_PUNCTUATION_RE = re.compile(r"[a-zA-Z\s'-]+")


@dataclass(frozen=True, slots=True)
class NameConfig:
    """Name policy. ``allow_special_chars`` admits apostrophes and hyphens."""

    min_length: int = 2
    max_length: int = 50
    allow_special_chars: bool = False

    def __post_init__(self) -> None:
        check_bounds("name length", self.min_length, self.max_length)


class NameValidator:
    __slots__ = ("_config", "_pattern")

    def __init__(self, config: NameConfig | None = None, **overrides: Any) -> None:
        self._config = configure(NameConfig, config, overrides)
        self._pattern = (
            _LETTERS_AND_PUNCTUATION_RE if self._config.allow_special_chars else _LETTERS_RE
        )

    @property
    def config(self) -> NameConfig:
        return self._config

    def validate(self, value: str | None) -> ValidationResult[str]:
        cfg = self._config
        if value is None or blank(value):
            return reject(self, Code.NAME_REQUIRED, "Name is required")

        name = value.strip()
        if len(name) < cfg.min_length:
            return reject(
                self, Code.NAME_TOO_SHORT, f"Name must be at least {cfg.min_length} characters"
            )
        if len(name) > cfg.max_length:
            return reject(
                self, Code.NAME_TOO_LONG, f"Name must not exceed {cfg.max_length} characters"
            )

        if not self._pattern.fullmatch(name):
            return reject(self, Code.INVALID_NAME_FORMAT, "Name contains invalid characters")

        return success(name)
