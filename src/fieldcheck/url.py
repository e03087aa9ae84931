"""URL validation, parsing and normalization.

Unlike the field validators, ``URLValidator.validate`` answers with a
bool and keeps the reason for the last rejection on the instance::

    validator = URLValidator(allowed_domains=["example.com"])
    if not validator.validate(link):
        flash(validator.error_message)
        validator.reset_error()

Because of that message, a ``URLValidator`` is not safe to share
between threads. ``parse_url`` and ``normalize_url`` are pure and also
available at module level.
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import SplitResult, parse_qsl, urlsplit, urlunsplit

from fieldcheck.base import compile_pattern, configure, freeze, logger

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ssh": 22,
    "telnet": 23,
    "smtp": 25,
    "pop3": 110,
    "imap": 143,
    "ldap": 389,
}

# Schemes that cannot be parsed without a host.
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


@dataclass(frozen=True, slots=True)
class URLConfig:
    """URL policy.

    Schemes are given without the trailing colon (``"https"``); a colon
    is tolerated and ignored. ``None`` for a list option disables that
    check. ``path_pattern`` is searched in the path, it need not match
    the whole of it.
    """

    require_protocol: bool = True
    allowed_protocols: tuple[str, ...] = ("http", "https")
    allowed_domains: tuple[str, ...] | None = None
    allowed_tlds: tuple[str, ...] | None = None
    allow_subdomains: bool = True
    allow_ip_addresses: bool = False
    require_specific_port: bool = False
    allowed_ports: tuple[int, ...] | None = None
    disallowed_ports: tuple[int, ...] | None = None
    require_path: bool = False
    path_pattern: str | re.Pattern[str] | None = None
    max_path_segments: int | None = None
    allow_query: bool = True
    required_query_params: tuple[str, ...] | None = None
    allowed_query_params: tuple[str, ...] | None = None
    allow_fragment: bool = True
    allow_auth: bool = False
    max_length: int = 2083
    error_message: str = "Invalid URL"

    def __post_init__(self) -> None:
        freeze(
            self,
            "allowed_protocols",
            "allowed_domains",
            "allowed_tlds",
            "allowed_ports",
            "disallowed_ports",
            "required_query_params",
            "allowed_query_params",
        )
        object.__setattr__(
            self, "allowed_protocols", tuple(p.lower().rstrip(":") for p in self.allowed_protocols)
        )


@dataclass(frozen=True, slots=True)
class ParsedURL:
    """Components of an absolute URL.

    ``port`` falls back to the scheme's default port, or None when the
    scheme has none.
    """

    scheme: str
    hostname: str
    port: int | None
    path: str
    query: str
    fragment: str
    username: str
    password: str
    is_ip_address: bool
    query_params: tuple[tuple[str, str], ...]


def is_ip_address(hostname: str) -> bool:
    """True for an IPv4 or IPv6 literal (brackets allowed)."""
    try:
        ipaddress.ip_address(hostname.strip("[]"))
    except ValueError:
        return False
    return True


def _split(url: str) -> SplitResult | None:
    """Split an absolute URL, or None when it cannot be one."""
    if not isinstance(url, str) or any(char.isspace() for char in url.strip()):
        return None
    try:
        parts = urlsplit(url.strip())
        _ = parts.port  # ValueError for a malformed port
    except ValueError:
        return None
    if not parts.scheme:
        return None
    if parts.scheme in _HOST_SCHEMES and not parts.hostname:
        return None
    return parts


def _explicit_port(parts: SplitResult) -> int | None:
    """The port written in the URL, unless it is the scheme's default."""
    port = parts.port
    if port is not None and port == DEFAULT_PORTS.get(parts.scheme):
        return None
    return port


def _path(parts: SplitResult) -> str:
    if not parts.path and parts.scheme in _HOST_SCHEMES:
        return "/"
    return parts.path


def parse_url(url: str) -> ParsedURL | None:
    """Break *url* into its components; None if it is not an absolute URL."""
    parts = _split(url)
    if parts is None:
        return None
    hostname = parts.hostname or ""
    return ParsedURL(
        scheme=parts.scheme,
        hostname=hostname,
        port=parts.port if parts.port is not None else DEFAULT_PORTS.get(parts.scheme),
        path=_path(parts),
        query=parts.query,
        fragment=parts.fragment,
        username=parts.username or "",
        password=parts.password or "",
        is_ip_address=is_ip_address(hostname),
        query_params=tuple(parse_qsl(parts.query, keep_blank_values=True)),
    )


def normalize_url(url: str) -> str | None:
    """Canonical form of *url*: lower-cased host, no default port, no bare ``/`` path.

    Returns None if *url* is not an absolute URL.
    """
    parts = _split(url)
    if parts is None:
        return None
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    userinfo = ""
    if parts.username or parts.password:
        userinfo = parts.username or ""
        if parts.password:
            userinfo += f":{parts.password}"
        userinfo += "@"
    port = _explicit_port(parts)
    netloc = f"{userinfo}{host}" + (f":{port}" if port is not None else "")
    path = "" if parts.path == "/" else parts.path
    return urlunsplit((parts.scheme, netloc, path, parts.query, parts.fragment))


class URLValidator:
    __slots__ = ("_config", "_last_error", "_path_pattern")

    def __init__(self, config: URLConfig | None = None, **overrides: Any) -> None:
        self._config = configure(URLConfig, config, overrides)
        pattern = self._config.path_pattern
        self._path_pattern = compile_pattern(pattern) if pattern is not None else None
        self._last_error = self._config.error_message

    @property
    def config(self) -> URLConfig:
        return self._config

    @property
    def error_message(self) -> str:
        """Why the last ``validate`` call failed, or the default message."""
        return self._last_error

    def reset_error(self) -> None:
        self._last_error = self._config.error_message

    def _fail(self, message: str) -> bool:
        logger.debug("%s rejected input: %s", type(self).__name__, message)
        self._last_error = message
        return False

    def validate(self, value: str) -> bool:
        cfg = self._config
        if not isinstance(value, str):
            return self._fail("URL must be a string")

        if len(value) > cfg.max_length:
            return self._fail(f"URL exceeds maximum length of {cfg.max_length} characters")

        parts = _split(value)
        if parts is None:
            if cfg.require_protocol and "://" not in value:
                return self._fail("URL must include a protocol (e.g., http://, https://)")
            return self._fail("Invalid URL format")

        return (
            self._check_protocol(parts)
            and self._check_domain(parts)
            and self._check_port(parts)
            and self._check_path(parts)
            and self._check_query(parts)
            and self._check_fragment(parts)
            and self._check_auth(parts)
        )

    def _check_protocol(self, parts: SplitResult) -> bool:
        allowed = self._config.allowed_protocols
        if allowed and parts.scheme not in allowed:
            return self._fail(f"URL protocol must be one of: {', '.join(allowed)}")
        return True

    def _check_domain(self, parts: SplitResult) -> bool:
        cfg = self._config
        hostname = parts.hostname or ""
        if is_ip_address(hostname):
            if not cfg.allow_ip_addresses:
                return self._fail("IP addresses are not allowed in URLs")
            return True

        if cfg.allowed_domains is not None:
            matched = any(
                hostname == domain
                or (cfg.allow_subdomains and hostname.endswith(f".{domain}"))
                for domain in cfg.allowed_domains
            )
            if not matched:
                message = f"URL domain must be one of: {', '.join(cfg.allowed_domains)}"
                if cfg.allow_subdomains:
                    message += " or their subdomains"
                return self._fail(message)

        if cfg.allowed_tlds is not None and not hostname.endswith(cfg.allowed_tlds):
            return self._fail(
                f"URL must end with one of these TLDs: {', '.join(cfg.allowed_tlds)}"
            )
        return True

    def _check_port(self, parts: SplitResult) -> bool:
        cfg = self._config
        port = _explicit_port(parts)
        if port is None:
            if cfg.require_specific_port:
                return self._fail("URL must specify a port")
            return True
        if cfg.allowed_ports is not None and port not in cfg.allowed_ports:
            allowed = ", ".join(str(p) for p in cfg.allowed_ports)
            return self._fail(f"URL port must be one of: {allowed}")
        if cfg.disallowed_ports is not None and port in cfg.disallowed_ports:
            disallowed = ", ".join(str(p) for p in cfg.disallowed_ports)
            return self._fail(f"URL port cannot be one of: {disallowed}")
        return True

    def _check_path(self, parts: SplitResult) -> bool:
        cfg = self._config
        path = _path(parts)
        if cfg.require_path and path in ("", "/"):
            return self._fail("URL must include a path")
        if self._path_pattern is not None and path != "/" and not self._path_pattern.search(path):
            return self._fail("URL path does not match the required pattern")
        if cfg.max_path_segments is not None:
            segments = [segment for segment in path.split("/") if segment]
            if len(segments) > cfg.max_path_segments:
                return self._fail(
                    f"URL path exceeds maximum of {cfg.max_path_segments} segments"
                )
        return True

    def _check_query(self, parts: SplitResult) -> bool:
        cfg = self._config
        if not parts.query:
            return True
        if not cfg.allow_query:
            return self._fail("Query parameters are not allowed in the URL")

        names = [name for name, _ in parse_qsl(parts.query, keep_blank_values=True)]
        for required in cfg.required_query_params or ():
            if required not in names:
                return self._fail(f"URL must include the required query parameter: {required}")
        if cfg.allowed_query_params is not None:
            for name in names:
                if name not in cfg.allowed_query_params:
                    allowed = ", ".join(cfg.allowed_query_params)
                    return self._fail(
                        f"Query parameter '{name}' is not allowed. "
                        f"Allowed parameters are: {allowed}"
                    )
        return True

    def _check_fragment(self, parts: SplitResult) -> bool:
        if parts.fragment and not self._config.allow_fragment:
            return self._fail("Fragments (hash) are not allowed in the URL")
        return True

    def _check_auth(self, parts: SplitResult) -> bool:
        if (parts.username or parts.password) and not self._config.allow_auth:
            return self._fail("Authentication credentials are not allowed in the URL")
        return True

    def parse_url(self, url: str) -> ParsedURL | None:
        return parse_url(url)

    def normalize_url(self, url: str) -> str | None:
        return normalize_url(url)
