"""Record validation: run one validator per field of a mapping.

Usage::

    from fieldcheck.records import validate_record

    result = validate_record(form, {
        "email": EmailValidator(),
        "password": PasswordValidator(min_length=12),
        "nickname": [required, max_length(30)],
    })
    if not result:
        return render("signup.html", form=form, errors=result.errors)
    # result.data has normalized values

A field is checked either by a validator (anything with ``validate``
returning a ``ValidationResult``), by a ``RuleChain``, or by a list of
string rules from ``fieldcheck.rules``.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from fieldcheck.base import Validator
from fieldcheck.result import ValidationError, ValidationResult
from fieldcheck.rules import Rule, RuleChain, required

RULE_REQUIRED = "FIELD_REQUIRED"
RULE_VIOLATION = "FIELD_INVALID"

type FieldCheck = Validator[Any, Any] | RuleChain | Sequence[Rule]


@dataclass(frozen=True, slots=True)
class RecordResult:
    """The outcome of validating a record.

    ``data`` maps each field to its normalized value and is only
    populated when every field passed. ``errors`` maps failing fields
    to their errors, each with ``field`` set::

        {"email": (ValidationError("INVALID_EMAIL_FORMAT", "...", "email"),)}
    """

    data: dict[str, Any]
    errors: dict[str, tuple[ValidationError, ...]]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when any field failed."""
        return self.is_valid


def _run_rules(rules: Sequence[Rule], value: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for rule in rules:
        message = rule(value)
        if message is not None:
            code = RULE_REQUIRED if rule is required else RULE_VIOLATION
            errors.append(ValidationError(code, message))
            # No point running length checks on an empty string
            if rule is required:
                break
    return errors


def validate_record(
    data: Mapping[str, Any],
    validators: Mapping[str, FieldCheck],
) -> RecordResult:
    """Validate each field of *data* named in *validators*.

    Fields of *data* without an entry in *validators* are ignored. A
    missing field is passed to its validator as None (as ``""`` to a rule
    list), so the validator's own required check reports it.

    Raises ``TypeError`` when a validator returns something other than a
    ``ValidationResult``, such as the bool of ``URLValidator``.
    """
    errors: dict[str, tuple[ValidationError, ...]] = {}
    cleaned: dict[str, Any] = {}

    for field_name, check in validators.items():
        # RuleChain also has a validate(), but it answers with a bool.
        if isinstance(check, RuleChain):
            check = check.rules
        if isinstance(check, Validator):
            result = check.validate(data.get(field_name))
            if not isinstance(result, ValidationResult):
                msg = (
                    f"{type(check).__name__}.validate() returned "
                    f"{type(result).__name__}, not a ValidationResult"
                )
                raise TypeError(msg)
            field_errors = list(result.errors or ())
            value = result.value
        else:
            value = data.get(field_name) or ""
            field_errors = _run_rules(check, value)

        if field_errors:
            errors[field_name] = tuple(replace(e, field=field_name) for e in field_errors)
        else:
            cleaned[field_name] = value

    return RecordResult(data={} if errors else cleaned, errors=errors)
