"""fieldcheck: field-level input validators with stable error codes.

Every validator takes a value and returns a ``ValidationResult``, which
is falsy on failure and carries one error with a machine-readable code::

    from fieldcheck import EmailValidator

    result = EmailValidator(blocked_domains=["mailinator.com"]).validate(form["email"])
    if not result:
        if result.code == "DOMAIN_BLOCKED":
            ...
        return render(errors=result.errors)
    email = result.value

Validators are grouped by domain in ``fieldcheck.contact``,
``fieldcheck.authentication``, ``fieldcheck.financial`` and
``fieldcheck.personal``; the most used names are importable from here.
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "AddressValidator",
    "AgeValidator",
    "ApiKeyValidator",
    "BankAccountValidator",
    "CharClass",
    "ConfigurationError",
    "CreditCardValidator",
    "DOBValidator",
    "EmailValidator",
    "FieldcheckError",
    "GenderValidator",
    "NameValidator",
    "PassportValidator",
    "PasswordValidator",
    "PhoneValidator",
    "RecordResult",
    "RuleChain",
    "TokenValidator",
    "TwoFactorValidator",
    "URLValidator",
    "UsernameValidator",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "normalize_url",
    "parse_url",
    "validate_record",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ValidationError": "fieldcheck.result",
    "ValidationResult": "fieldcheck.result",
    "Validator": "fieldcheck.base",
    "FieldcheckError": "fieldcheck.errors",
    "ConfigurationError": "fieldcheck.errors",
    "AddressValidator": "fieldcheck.contact",
    "EmailValidator": "fieldcheck.contact",
    "PhoneValidator": "fieldcheck.contact",
    "ApiKeyValidator": "fieldcheck.authentication",
    "PasswordValidator": "fieldcheck.authentication",
    "TokenValidator": "fieldcheck.authentication",
    "TwoFactorValidator": "fieldcheck.authentication",
    "UsernameValidator": "fieldcheck.authentication",
    "BankAccountValidator": "fieldcheck.financial",
    "CreditCardValidator": "fieldcheck.financial",
    "AgeValidator": "fieldcheck.personal",
    "DOBValidator": "fieldcheck.personal",
    "GenderValidator": "fieldcheck.personal",
    "NameValidator": "fieldcheck.personal",
    "PassportValidator": "fieldcheck.personal",
    "URLValidator": "fieldcheck.url",
    "normalize_url": "fieldcheck.url",
    "parse_url": "fieldcheck.url",
    "CharClass": "fieldcheck.rules",
    "RuleChain": "fieldcheck.rules",
    "RecordResult": "fieldcheck.records",
    "validate_record": "fieldcheck.records",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldcheck`` fast while providing a clean top-level API.
    """
    module = _LAZY_IMPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
