"""Email address validation.

Simple mode checks the common ``local@domain.tld`` shape. Strict mode
accepts quoted local parts and bracketed IPv4 domains per RFC 5322.
Neither mode checks deliverability.
"""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import blank, configure, freeze, lowered, reject
from fieldcheck.codes import EmailErrorCode as Code
from fieldcheck.result import ValidationResult, success

_SIMPLE_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
_STRICT_EMAIL_RE = re.compile(
    r"(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)

# RFC 5321 maximum path length
_MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True, slots=True)
class EmailConfig:
    """Email validation policy.

    Domain lists match the exact domain and, when ``allow_subdomains``
    is set, any subdomain of it.
    """

    allowed_domains: tuple[str, ...] = ()
    blocked_domains: tuple[str, ...] = ()
    max_length: int = _MAX_EMAIL_LENGTH
    strict_mode: bool = False
    allow_subdomains: bool = True

    def __post_init__(self) -> None:
        freeze(self, "allowed_domains", "blocked_domains")


def domain_matches(domain: str, candidates: tuple[str, ...], *, subdomains: bool) -> bool:
    """True if *domain* equals a candidate or, optionally, is a subdomain of one."""
    for candidate in candidates:
        if domain == candidate:
            return True
        if subdomains and domain.endswith(f".{candidate}"):
            return True
    return False


class EmailValidator:
    """Validate and normalize an email address (trimmed, lower-cased)."""

    __slots__ = ("_allowed", "_blocked", "_config", "_pattern")

    def __init__(self, config: EmailConfig | None = None, **overrides: Any) -> None:
        self._config = configure(EmailConfig, config, overrides)
        self._allowed = lowered(self._config.allowed_domains)
        self._blocked = lowered(self._config.blocked_domains)
        self._pattern = _STRICT_EMAIL_RE if self._config.strict_mode else _SIMPLE_EMAIL_RE

    @property
    def config(self) -> EmailConfig:
        return self._config

    def validate(self, email: str | None) -> ValidationResult[str]:
        cfg = self._config
        if email is None or blank(email):
            return reject(self, Code.EMAIL_REQUIRED, "Email address is required")

        email = email.strip()
        if len(email) > cfg.max_length:
            return reject(
                self, Code.EMAIL_TOO_LONG, f"Email must not exceed {cfg.max_length} characters"
            )

        if not self._pattern.fullmatch(email):
            return reject(self, Code.INVALID_EMAIL_FORMAT, "Email format is invalid")

        domain = email.rpartition("@")[2].lower()

        if self._allowed and not domain_matches(
            domain, self._allowed, subdomains=cfg.allow_subdomains
        ):
            return reject(
                self,
                Code.DOMAIN_NOT_ALLOWED,
                "Email domain is not in the list of allowed domains",
            )

        if self._blocked and domain_matches(domain, self._blocked, subdomains=True):
            return reject(self, Code.DOMAIN_BLOCKED, "Email domain is blocked")

        return success(email.lower())
