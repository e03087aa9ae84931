"""Username validation."""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import blank, compile_pattern, configure, freeze, lowered, reject
from fieldcheck.codes import UsernameErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.result import ValidationResult, success

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True, slots=True)
class UsernameConfig:
    """Username policy.

    Unless ``case_sensitive`` is set, usernames are lower-cased before
    checking and the blocklist is compared case-insensitively.
    """

    min_length: int = 3
    max_length: int = 30
    pattern: str | re.Pattern[str] | None = r"^[a-zA-Z0-9_.-]+$"
    blocked_usernames: tuple[str, ...] = ("admin", "root", "system", "moderator")
    allow_spaces: bool = False
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        freeze(self, "blocked_usernames")
        check_bounds("username length", self.min_length, self.max_length)


class UsernameValidator:
    """Validate a username and return it trimmed (and case-folded)."""

    __slots__ = ("_blocked", "_config", "_pattern")

    def __init__(self, config: UsernameConfig | None = None, **overrides: Any) -> None:
        self._config = configure(UsernameConfig, config, overrides)
        cfg = self._config
        self._pattern = compile_pattern(cfg.pattern) if cfg.pattern is not None else None
        self._blocked = frozenset(
            cfg.blocked_usernames if cfg.case_sensitive else lowered(cfg.blocked_usernames)
        )

    @property
    def config(self) -> UsernameConfig:
        return self._config

    def validate(self, username: str | None) -> ValidationResult[str]:
        cfg = self._config
        if username is None or blank(username):
            return reject(self, Code.USERNAME_REQUIRED, "Username is required")

        processed = username.strip()
        if not cfg.case_sensitive:
            processed = processed.lower()

        if len(processed) < cfg.min_length:
            return reject(
                self,
                Code.USERNAME_TOO_SHORT,
                f"Username must be at least {cfg.min_length} characters",
            )
        if len(processed) > cfg.max_length:
            return reject(
                self,
                Code.USERNAME_TOO_LONG,
                f"Username must not exceed {cfg.max_length} characters",
            )

        if not cfg.allow_spaces and _WHITESPACE.search(processed):
            return reject(self, Code.USERNAME_CONTAINS_SPACES, "Username cannot contain spaces")

        if self._pattern is not None and not self._pattern.match(processed):
            return reject(
                self,
                Code.INVALID_USERNAME_FORMAT,
                "Username format is invalid. Use only letters, numbers, "
                "and the following characters: _ . -",
            )

        if processed in self._blocked:
            return reject(self, Code.USERNAME_BLOCKED, "This username is not allowed")

        return success(processed)
