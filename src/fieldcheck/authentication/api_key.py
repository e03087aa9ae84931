"""API key shape validation."""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import blank, compile_pattern, configure, freeze, reject
from fieldcheck.codes import ApiKeyErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success


@dataclass(frozen=True, slots=True)
class ApiKeyConfig:
    min_length: int = 16
    max_length: int = 64
    pattern: str | re.Pattern[str] = r"^[a-zA-Z0-9_-]+$"
    prefix_required: str = ""
    allowed_prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        freeze(self, "allowed_prefixes")
        check_bounds("API key length", self.min_length, self.max_length)


class ApiKeyValidator:
    __slots__ = ("_config", "_pattern")

    def __init__(self, config: ApiKeyConfig | None = None, **overrides: Any) -> None:
        self._config = configure(ApiKeyConfig, config, overrides)
        self._pattern = compile_pattern(self._config.pattern)

    @property
    def config(self) -> ApiKeyConfig:
        return self._config

    def validate(self, api_key: str | None) -> ValidationResult[str]:
        cfg = self._config
        if api_key is None or blank(api_key):
            return reject(self, Code.APIKEY_REQUIRED, "API key is required")

        api_key = api_key.strip()
        if len(api_key) < cfg.min_length:
            return reject(
                self, Code.APIKEY_TOO_SHORT, f"API key must be at least {cfg.min_length} characters"
            )
        if len(api_key) > cfg.max_length:
            return reject(
                self, Code.APIKEY_TOO_LONG, f"API key must not exceed {cfg.max_length} characters"
            )

        if not self._pattern.match(api_key):
            return reject(self, Code.INVALID_APIKEY_FORMAT, "API key format is invalid")

        if cfg.prefix_required and not api_key.startswith(cfg.prefix_required):
            return reject(
                self, Code.INVALID_APIKEY_PREFIX, f"API key must start with {cfg.prefix_required}"
            )

        if cfg.allowed_prefixes and not api_key.startswith(cfg.allowed_prefixes):
            return reject(
                self,
                Code.INVALID_APIKEY_PREFIX,
                "API key prefix is not in the list of allowed prefixes",
            )

        return success(api_key)
