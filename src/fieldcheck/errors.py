"""Fieldcheck exception hierarchy.

Validators never raise for bad input; they return a failed result.
Exceptions here signal programmer error: a configuration that cannot
be honoured, or a rule builder asked for something it does not support.
"""


class FieldcheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldcheckError):
    """Raised when a validator or rule configuration is invalid.

    Typically raised while constructing a config dataclass, so the
    mistake surfaces at import/startup time rather than on first use.
    """


def check_bounds(name: str, low: float, high: float) -> None:
    """Raise ``ConfigurationError`` unless ``low <= high``."""
    if low > high:
        msg = f"{name}: minimum ({low}) must not exceed maximum ({high})"
        raise ConfigurationError(msg)
