"""Authentication token validation: length, prefix, JWT shape, expiry.

A token may arrive bare or with its timestamps::

    TokenValidator().validate("Bearer abc.def.ghi")
    TokenValidator().validate(TokenData("Bearer abc.def.ghi", expires_at=1_900_000_000))
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from time import time
from typing import Any

from fieldcheck.base import as_record, blank, configure, freeze, reject
from fieldcheck.codes import TokenErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

# header.payload.signature; the signature may be empty for unsigned tokens
_JWT_RE = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """Token policy.

    ``allowed_prefixes`` are stripped before the JWT shape check. An
    empty tuple accepts tokens without any prefix.
    """

    min_length: int = 8
    max_length: int = 2048
    allowed_prefixes: tuple[str, ...] = ("Bearer ", "Token ")
    validate_jwt: bool = False
    validate_expiry: bool = True

    def __post_init__(self) -> None:
        freeze(self, "allowed_prefixes")
        check_bounds("token length", self.min_length, self.max_length)


@dataclass(frozen=True, slots=True)
class TokenData:
    """A token with optional Unix timestamps (seconds)."""

    token: str | None = None
    issued_at: int | None = None
    expires_at: int | None = None


class TokenValidator:
    __slots__ = ("_config",)

    def __init__(self, config: TokenConfig | None = None, **overrides: Any) -> None:
        self._config = configure(TokenConfig, config, overrides)

    @property
    def config(self) -> TokenConfig:
        return self._config

    def strip_prefix(self, token: str) -> str:
        """Remove the first matching allowed prefix from *token*."""
        for prefix in self._config.allowed_prefixes:
            if token.startswith(prefix):
                return token[len(prefix) :]
        return token

    def validate(
        self, value: str | TokenData | Mapping[str, Any] | None
    ) -> ValidationResult[TokenData]:
        cfg = self._config
        data = TokenData(token=value) if isinstance(value, str) else as_record(TokenData, value)
        if data is None or data.token is None or blank(data.token):
            return reject(self, Code.TOKEN_REQUIRED, "Authentication token is required")

        token = data.token.strip()
        if len(token) < cfg.min_length:
            return reject(
                self, Code.TOKEN_TOO_SHORT, f"Token must be at least {cfg.min_length} characters"
            )
        if len(token) > cfg.max_length:
            return reject(
                self, Code.TOKEN_TOO_LONG, f"Token must not exceed {cfg.max_length} characters"
            )

        if cfg.validate_jwt and not _JWT_RE.fullmatch(self.strip_prefix(token)):
            return reject(self, Code.INVALID_JWT_FORMAT, "Token is not in valid JWT format")

        if cfg.allowed_prefixes and not token.startswith(cfg.allowed_prefixes):
            prefixes = ", ".join(cfg.allowed_prefixes)
            return reject(
                self, Code.INVALID_TOKEN_PREFIX, f"Token must start with one of: {prefixes}"
            )

        if cfg.validate_expiry and data.expires_at is not None and int(time()) > data.expires_at:
            return reject(self, Code.TOKEN_EXPIRED, "Authentication token has expired")

        return success(TokenData(token=token, issued_at=data.issued_at, expires_at=data.expires_at))
