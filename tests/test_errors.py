"""Tests for fieldcheck.errors — exception hierarchy and bound checks."""

import pytest

from fieldcheck.authentication import PasswordValidator
from fieldcheck.errors import ConfigurationError, FieldcheckError, check_bounds
from fieldcheck.financial import CreditCardValidator
from fieldcheck.rules import char_class


class TestHierarchy:
    def test_configuration_error_is_fieldcheck_error(self) -> None:
        assert issubclass(ConfigurationError, FieldcheckError)

    def test_fieldcheck_error_is_exception(self) -> None:
        assert issubclass(FieldcheckError, Exception)


class TestCheckBounds:
    def test_equal_bounds_ok(self) -> None:
        check_bounds("length", 5, 5)

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="length"):
            check_bounds("length", 10, 5)


class TestConfigurationMistakes:
    def test_inverted_password_bounds(self) -> None:
        with pytest.raises(ConfigurationError):
            PasswordValidator(min_length=20, max_length=10)

    def test_unknown_card_type(self) -> None:
        with pytest.raises(ConfigurationError, match="card type"):
            CreditCardValidator(allowed_card_types=["visa", "bitcoin"])

    def test_unsupported_char_class(self) -> None:
        with pytest.raises(ConfigurationError, match="character class"):
            char_class("emoji")

    def test_unknown_override_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            PasswordValidator(min_lenght=10)


class TestInvalidInputNeverRaises:
    @pytest.mark.parametrize("value", [None, "", "   ", "x" * 500])
    def test_password(self, value: str | None) -> None:
        result = PasswordValidator().validate(value)
        assert not result
