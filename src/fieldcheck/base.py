"""Validator protocol and the helpers every validator is built from.

A validator is any object with a ``validate`` method returning a
``ValidationResult``. No base class required; the library checks the
shape, not the lineage::

    class ZipValidator:
        def validate(self, value: str) -> ValidationResult[str]:
            if not value:
                return reject(self, "ZIP_REQUIRED", "ZIP code is required")
            return success(value.strip())

Configuration follows one pattern across the library: a frozen
``<Name>Config`` dataclass, overridable per field at construction::

    EmailValidator(strict_mode=True)
    EmailValidator(EmailConfig(max_length=100), strict_mode=True)
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass, replace
from typing import Any, Protocol, runtime_checkable

from fieldcheck.result import ValidationResult, failure

logger = logging.getLogger("fieldcheck.validators")


@runtime_checkable
class Validator[I, R](Protocol):
    """Protocol for fieldcheck validators."""

    def validate(self, value: I, /) -> ValidationResult[R]: ...


def configure[C](config_cls: type[C], config: C | None, overrides: Mapping[str, Any]) -> C:
    """Merge keyword *overrides* shallowly over *config* (or the defaults).

    Unknown override names raise ``TypeError`` from ``dataclasses.replace``.
    """
    base = config if config is not None else config_cls()
    if overrides:
        return replace(base, **overrides)  # type: ignore[type-var]
    return base


def reject[R: ValidationResult[Any]](
    source: object,
    code: str,
    message: str,
    cls: type[R] = ValidationResult,  # type: ignore[assignment]
) -> R:
    """Log the violated rule and build a failed result."""
    # The rejected value is never logged; it may be a secret.
    logger.debug("%s rejected input: %s", type(source).__name__, code)
    return failure(code, message, cls)


def as_record[D](record_cls: type[D], value: object) -> D | None:
    """Resolve a structured input given as a dataclass or a mapping.

    Mapping keys that are not fields of *record_cls* are ignored.
    Anything else resolves to None and is reported as missing.
    """
    if isinstance(value, record_cls):
        return value
    if isinstance(value, Mapping) and is_dataclass(record_cls):
        names = {f.name for f in fields(record_cls)}
        return record_cls(**{k: v for k, v in value.items() if k in names})
    return None


def freeze(obj: object, *names: str) -> None:
    """Coerce sequence fields of a frozen config to tuples in place."""
    for name in names:
        current = getattr(obj, name)
        if current is not None and not isinstance(current, tuple):
            object.__setattr__(obj, name, tuple(current))


def freeze_mapping(obj: object, *names: str) -> None:
    """Coerce mapping fields of a frozen config to tuples of pairs in place."""
    for name in names:
        current = getattr(obj, name)
        if current is not None and not isinstance(current, tuple):
            object.__setattr__(obj, name, tuple(dict(current).items()))


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Accept either a pattern string or an already compiled pattern."""
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def lowered(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(v.lower() for v in values)


def blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return not value or not value.strip()


def trimmed(value: str | None) -> str | None:
    return value.strip() if value is not None else None
