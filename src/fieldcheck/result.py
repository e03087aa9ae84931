"""Validation result: immutable container for a normalized value or errors.

Every validator returns a ``ValidationResult`` (or a subclass carrying
validator-specific metadata). Exactly one side is populated::

    result = EmailValidator().validate(form["email"])
    if not result:
        return render(errors=result.errors)
    email = result.value
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single rule violation.

    ``code`` is the stable, upper-snake-case identifier callers branch
    on. ``message`` is for display. ``field`` is set when the error was
    produced by record validation.
    """

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult[T]:
    """The outcome of one ``validate()`` call.

    ``is_valid`` is True exactly when ``value`` holds the normalized
    input and ``errors`` is None. A failed result has a non-empty
    ``errors`` tuple and no value. The result is falsy when invalid::

        if not result:
            code = result.code
    """

    is_valid: bool
    value: T | None = None
    errors: tuple[ValidationError, ...] | None = None

    def __post_init__(self) -> None:
        if self.is_valid:
            if self.value is None or self.errors is not None:
                msg = "a valid result must carry a value and no errors"
                raise ValueError(msg)
        elif not self.errors or self.value is not None:
            msg = "an invalid result must carry errors and no value"
            raise ValueError(msg)

    def __bool__(self) -> bool:
        """Falsy when invalid, so ``if not result:`` reads naturally."""
        return self.is_valid

    @property
    def error(self) -> ValidationError | None:
        """The first error, or None on success."""
        return self.errors[0] if self.errors else None

    @property
    def code(self) -> str | None:
        """Code of the first error, or None on success."""
        return self.errors[0].code if self.errors else None


def success[R: ValidationResult[Any]](
    value: Any,
    cls: type[R] = ValidationResult,  # type: ignore[assignment]
    **meta: Any,
) -> R:
    """Build a successful result of type *cls* with optional metadata."""
    return cls(is_valid=True, value=value, **meta)


def failure[R: ValidationResult[Any]](
    code: str,
    message: str,
    cls: type[R] = ValidationResult,  # type: ignore[assignment]
) -> R:
    """Build a failed result carrying a single error."""
    return cls(is_valid=False, errors=(ValidationError(code, message),))
