"""Tests for fieldcheck.authentication.token."""

from time import time

import pytest

from fieldcheck.authentication import TokenData, TokenValidator


class TestTokenValidator:
    def test_bearer_token(self) -> None:
        result = TokenValidator().validate("Bearer abc.def.ghi")
        assert result
        assert result.value == TokenData(token="Bearer abc.def.ghi")

    @pytest.mark.parametrize("value", [None, "", "   ", TokenData(), {"issued_at": 1}])
    def test_required(self, value: object) -> None:
        assert TokenValidator().validate(value).code == "TOKEN_REQUIRED"  # type: ignore[arg-type]

    def test_too_short(self) -> None:
        assert TokenValidator().validate("Bearer").code == "TOKEN_TOO_SHORT"

    def test_too_long(self) -> None:
        assert TokenValidator().validate("Bearer " + "a" * 2048).code == "TOKEN_TOO_LONG"

    def test_prefix_required(self) -> None:
        assert TokenValidator().validate("abcdefghijkl").code == "INVALID_TOKEN_PREFIX"

    def test_no_prefixes_accepts_bare(self) -> None:
        assert TokenValidator(allowed_prefixes=()).validate("abcdefghijkl")

    def test_jwt_shape(self) -> None:
        validator = TokenValidator(validate_jwt=True)
        assert validator.validate("Bearer abc.def.ghi")
        assert validator.validate("Bearer abc.def.")
        assert validator.validate("Bearer abc.def").code == "INVALID_JWT_FORMAT"

    def test_jwt_checked_before_prefix(self) -> None:
        result = TokenValidator(validate_jwt=True).validate("Basic abcdefgh")
        assert result.code == "INVALID_JWT_FORMAT"

    def test_strip_prefix(self) -> None:
        validator = TokenValidator()
        assert validator.strip_prefix("Token xyz") == "xyz"
        assert validator.strip_prefix("xyz") == "xyz"


class TestExpiry:
    def test_expired(self) -> None:
        data = TokenData("Bearer abc.def.ghi", expires_at=int(time()) - 10)
        assert TokenValidator().validate(data).code == "TOKEN_EXPIRED"

    def test_not_expired(self) -> None:
        data = {"token": "Bearer abc.def.ghi", "expires_at": int(time()) + 3600}
        result = TokenValidator().validate(data)
        assert result
        assert result.value.expires_at == data["expires_at"]

    def test_expiry_check_disabled(self) -> None:
        data = TokenData("Bearer abc.def.ghi", expires_at=int(time()) - 10)
        assert TokenValidator(validate_expiry=False).validate(data)
