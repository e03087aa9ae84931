"""Tests for fieldcheck.contact.phone."""

import pytest

from fieldcheck.contact import PhoneValidator
from fieldcheck.contact.phone import split_extension


class TestPhoneValidator:
    @pytest.mark.parametrize(
        "phone", ["555-123-4567", "(555) 123-4567", "+1 555 123 4567", "5551234567"]
    )
    def test_valid(self, phone: str) -> None:
        assert PhoneValidator().validate(phone)

    def test_trimmed(self) -> None:
        assert PhoneValidator().validate("  555-123-4567 ").value == "555-123-4567"

    @pytest.mark.parametrize("phone", [None, "", "   "])
    def test_required(self, phone: str | None) -> None:
        assert PhoneValidator().validate(phone).code == "PHONE_REQUIRED"

    @pytest.mark.parametrize("phone", ["555-CALL-NOW", "555.123.4567", "++15551234567"])
    def test_invalid_format(self, phone: str) -> None:
        assert PhoneValidator().validate(phone).code == "INVALID_PHONE_FORMAT"

    def test_country_code_required(self) -> None:
        validator = PhoneValidator(require_country_code=True)
        assert validator.validate("555-123-4567").code == "COUNTRY_CODE_REQUIRED"
        assert validator.validate("+1 555 123 4567")

    def test_allowed_country_codes(self) -> None:
        validator = PhoneValidator(allowed_country_codes=["1", "+44"])
        assert validator.validate("+1 555 123 4567")
        assert validator.validate("+44 20 7946 0958")
        assert validator.validate("+33 1 23 45 67 89").code == "COUNTRY_CODE_NOT_ALLOWED"

    def test_country_codes_ignored_without_plus(self) -> None:
        validator = PhoneValidator(allowed_country_codes=["44"])
        assert validator.validate("555-123-4567")

    def test_too_short(self) -> None:
        assert PhoneValidator().validate("123-45").code == "PHONE_TOO_SHORT"

    def test_too_long(self) -> None:
        assert PhoneValidator().validate("1234567890123456").code == "PHONE_TOO_LONG"


class TestExtensions:
    @pytest.mark.parametrize(
        "phone", ["555-123-4567 x89", "555-123-4567 ext. 89", "555-123-4567 EXT 89"]
    )
    def test_accepted(self, phone: str) -> None:
        assert PhoneValidator().validate(phone)

    def test_rejected_when_disabled(self) -> None:
        result = PhoneValidator(allow_extension=False).validate("555-123-4567 x89")
        assert result.code == "INVALID_PHONE_FORMAT"

    def test_extension_digits_not_counted_toward_max(self) -> None:
        assert PhoneValidator().validate("+44 20 7946 0958 x12345")

    def test_main_number_still_bounded(self) -> None:
        result = PhoneValidator().validate("1234567890123456 x12")
        assert result.code == "PHONE_TOO_LONG"

    def test_split(self) -> None:
        assert split_extension("555-1234 x89") == ("555-1234 ", "89")
        assert split_extension("555-1234") == ("555-1234", None)
