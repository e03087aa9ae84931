"""Tests for fieldcheck.financial.credit_card."""

from datetime import date

import pytest

from fieldcheck.financial import (
    CardType,
    CreditCardData,
    CreditCardErrorCode,
    CreditCardValidator,
    detect_card_type,
    expiry_month_end,
    mask_card_number,
)

FUTURE_EXPIRY = f"12/{(date.today().year + 3) % 100:02d}"


def card(**fields: str) -> dict[str, str]:
    data = {"number": "4111111111111111", "expiry": FUTURE_EXPIRY, "cvv": "123"}
    data.update(fields)
    return data


class TestDetectCardType:
    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            ("4111111111111111", CardType.VISA),
            ("4222222222222", CardType.VISA),
            ("5500000000000004", CardType.MASTERCARD),
            ("2221000000000009", CardType.MASTERCARD),
            ("340000000000009", CardType.AMEX),
            ("6011000000000004", CardType.DISCOVER),
            ("30000000000004", CardType.DINERS),
            ("3530111333300000", CardType.JCB),
            ("9999999999999999", CardType.UNKNOWN),
        ],
    )
    def test_brands(self, number: str, expected: CardType) -> None:
        assert detect_card_type(number) is expected


class TestMasking:
    def test_sixteen_digits(self) -> None:
        assert mask_card_number("4111111111111111") == "**** **** **** 1111"

    def test_fifteen_digits(self) -> None:
        assert mask_card_number("340000000000009") == "**** **** ***0 009"

    def test_short_unchanged(self) -> None:
        assert mask_card_number("123") == "123"

    @pytest.mark.parametrize("length", range(4, 20))
    def test_shape(self, length: int) -> None:
        number = "1234567890123456789"[:length]
        masked = mask_card_number(number)
        assert masked.replace(" ", "")[-4:] == number[-4:]
        groups = masked.split(" ")
        assert all(len(g) == 4 for g in groups[:-1])
        assert 1 <= len(groups[-1]) <= 4
        assert "  " not in masked


class TestExpiryMonthEnd:
    def test_two_digit_year(self) -> None:
        assert expiry_month_end("02/28") == date(2028, 2, 29)

    def test_four_digit_year(self) -> None:
        assert expiry_month_end("11/2031") == date(2031, 11, 30)

    @pytest.mark.parametrize("value", ["13/30", "1/30", "12-30", "12/3", "", "12/0000"])
    def test_bad_format(self, value: str) -> None:
        assert expiry_month_end(value) is None


class TestCreditCardValidator:
    def test_documented_example(self) -> None:
        result = CreditCardValidator().validate(
            {"number": "4111111111111111", "expiry": FUTURE_EXPIRY, "cvv": "123"}
        )
        assert result.is_valid
        assert result.value.card_type == "visa"
        assert result.value.number == "**** **** **** 1111"

    def test_dataclass_input(self) -> None:
        result = CreditCardValidator().validate(
            CreditCardData(number="4111 1111-1111 1111", expiry=FUTURE_EXPIRY, cvv=" 123 ")
        )
        assert result
        assert result.value.cvv == "123"

    def test_none(self) -> None:
        assert CreditCardValidator().validate(None).code == CreditCardErrorCode.CREDIT_CARD_REQUIRED

    def test_not_a_record(self) -> None:
        assert CreditCardValidator().validate(42).code == "CREDIT_CARD_REQUIRED"  # type: ignore[arg-type]

    def test_number_required(self) -> None:
        result = CreditCardValidator().validate(card(number="  "))
        assert result.code == "CARD_NUMBER_REQUIRED"

    def test_type_not_allowed_before_unknown(self) -> None:
        result = CreditCardValidator(allowed_card_types=["mastercard"]).validate(card())
        assert result.code == "CARD_TYPE_NOT_ALLOWED"

    def test_unknown_format(self) -> None:
        result = CreditCardValidator().validate(card(number="9999999999999999"))
        assert result.code == "INVALID_CARD_NUMBER_FORMAT"

    def test_bad_checksum(self) -> None:
        result = CreditCardValidator().validate(card(number="4111111111111112"))
        assert result.code == "INVALID_CARD_NUMBER_CHECKSUM"

    def test_checksum_can_be_disabled(self) -> None:
        result = CreditCardValidator(validate_luhn=False).validate(card(number="4111111111111112"))
        assert result

    def test_expiry_required(self) -> None:
        assert CreditCardValidator().validate(card(expiry="")).code == "EXPIRY_REQUIRED"

    def test_expiry_format(self) -> None:
        assert CreditCardValidator().validate(card(expiry="2030-12")).code == "INVALID_EXPIRY_FORMAT"

    def test_year_zero_expiry(self) -> None:
        result = CreditCardValidator().validate(card(expiry="12/0000"))
        assert result.code == "INVALID_EXPIRY_FORMAT"

    def test_expired(self) -> None:
        assert CreditCardValidator().validate(card(expiry="01/20")).code == "EXPIRED_CARD"

    def test_current_month_not_expired(self) -> None:
        today = date.today()
        result = CreditCardValidator().validate(card(expiry=f"{today.month:02d}/{today.year}"))
        assert result

    def test_cvv_required(self) -> None:
        assert CreditCardValidator().validate(card(cvv="")).code == "CVV_REQUIRED"

    @pytest.mark.parametrize("cvv", ["12", "1234", "12a"])
    def test_invalid_cvv(self, cvv: str) -> None:
        assert CreditCardValidator().validate(card(cvv=cvv)).code == "INVALID_CVV"

    def test_amex_needs_four_digit_cvv(self) -> None:
        validator = CreditCardValidator()
        assert validator.validate(card(number="340000000000009", cvv="123")).code == "INVALID_CVV"
        assert validator.validate(card(number="340000000000009", cvv="1234"))

    def test_cardholder_name(self) -> None:
        validator = CreditCardValidator(name_required=True)
        assert validator.validate(card()).code == "CARDHOLDER_NAME_REQUIRED"
        result = validator.validate(card(name="  Jane Doe "))
        assert result.value.name == "Jane Doe"

    def test_optional_parts_skipped(self) -> None:
        validator = CreditCardValidator(expiry_required=False, cvv_required=False)
        result = validator.validate({"number": "5500000000000004"})
        assert result
        assert result.value.expiry is None
        assert result.value.card_type is CardType.MASTERCARD

    def test_deterministic(self) -> None:
        validator = CreditCardValidator()
        assert validator.validate(card()) == validator.validate(card())
