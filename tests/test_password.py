"""Tests for fieldcheck.authentication.password."""

import pytest

from fieldcheck.authentication import PasswordErrorCode, PasswordInput, PasswordValidator


class TestPasswordValidator:
    def test_strong_password(self) -> None:
        result = PasswordValidator().validate("Passw0rd!")
        assert result.is_valid
        assert result.value == "Passw0rd!"

    def test_password_literal_fails_on_first_rule(self) -> None:
        result = PasswordValidator().validate("password")
        assert not result.is_valid
        assert result.code == PasswordErrorCode.PASSWORD_REQUIRES_UPPERCASE

    def test_common_password_with_classes_relaxed(self) -> None:
        validator = PasswordValidator(
            require_uppercase=False, require_numbers=False, require_special_chars=False
        )
        assert validator.validate("password").code == "PASSWORD_TOO_COMMON"
        assert validator.validate("QWERTYUI").code == "PASSWORD_REQUIRES_LOWERCASE"

    @pytest.mark.parametrize("value", [None, "", PasswordInput(), {"username": "alice"}])
    def test_required(self, value: object) -> None:
        assert PasswordValidator().validate(value).code == "PASSWORD_REQUIRED"  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("password", "code"),
        [
            ("Pa0!", "PASSWORD_TOO_SHORT"),
            ("Pa0!" * 33, "PASSWORD_TOO_LONG"),
            ("passw0rd!", "PASSWORD_REQUIRES_UPPERCASE"),
            ("PASSW0RD!", "PASSWORD_REQUIRES_LOWERCASE"),
            ("Password!", "PASSWORD_REQUIRES_NUMBER"),
            ("Passw0rdX", "PASSWORD_REQUIRES_SPECIAL_CHAR"),
        ],
    )
    def test_check_order(self, password: str, code: str) -> None:
        assert PasswordValidator().validate(password).code == code

    def test_custom_special_pattern(self) -> None:
        validator = PasswordValidator(special_chars_pattern=r"[~]")
        assert validator.validate("Passw0rd!").code == "PASSWORD_REQUIRES_SPECIAL_CHAR"
        assert validator.validate("Passw0rd~")


class TestUsernameInPassword:
    def test_contains_username(self) -> None:
        result = PasswordValidator().validate(PasswordInput("Alice-rocks1!", username="alice"))
        assert result.code == "PASSWORD_CONTAINS_USERNAME"

    def test_mapping_input(self) -> None:
        result = PasswordValidator().validate({"password": "Alice-rocks1!", "username": "ALICE"})
        assert result.code == "PASSWORD_CONTAINS_USERNAME"

    def test_short_username_ignored(self) -> None:
        assert PasswordValidator().validate(PasswordInput("Alice-rocks1!", username="al"))

    def test_check_disabled(self) -> None:
        validator = PasswordValidator(prevent_username_in_password=False)
        assert validator.validate(PasswordInput("Alice-rocks1!", username="alice"))
