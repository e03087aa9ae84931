"""Tests for fieldcheck.__init__ — lazy import registry and the Validator protocol."""

import pytest

import fieldcheck
from fieldcheck.base import Validator
from fieldcheck.result import ValidationResult


@pytest.mark.parametrize("name", fieldcheck.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(fieldcheck, name)
    assert obj is not None, f"fieldcheck.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    missing = set(fieldcheck.__all__) - set(fieldcheck._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    extras = set(fieldcheck._LAZY_IMPORTS) - set(fieldcheck.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        fieldcheck.__getattr__("ThisDoesNotExist")


@pytest.mark.parametrize(
    "name",
    [
        "AddressValidator",
        "AgeValidator",
        "ApiKeyValidator",
        "BankAccountValidator",
        "CreditCardValidator",
        "DOBValidator",
        "EmailValidator",
        "GenderValidator",
        "NameValidator",
        "PassportValidator",
        "PasswordValidator",
        "PhoneValidator",
        "TokenValidator",
        "TwoFactorValidator",
        "UsernameValidator",
    ],
)
def test_validators_satisfy_protocol(name: str) -> None:
    validator = getattr(fieldcheck, name)()
    assert isinstance(validator, Validator)


def test_custom_validator_satisfies_protocol() -> None:
    class ZipValidator:
        def validate(self, value: str) -> ValidationResult[str]:
            return ValidationResult(is_valid=True, value=value)

    assert isinstance(ZipValidator(), Validator)


def test_unknown_config_option() -> None:
    with pytest.raises(TypeError):
        fieldcheck.EmailValidator(no_such_option=True)
