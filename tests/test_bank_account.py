"""Tests for fieldcheck.financial.bank_account."""

import pytest

from fieldcheck.financial import AccountType, BankAccountData, BankAccountValidator


def account(**fields: str) -> dict[str, str]:
    data = {"account_number": "12345678", "routing_number": "021000021", "account_name": "J Doe"}
    data.update(fields)
    return data


class TestBankAccountValidator:
    def test_documented_example(self) -> None:
        result = BankAccountValidator().validate(account())
        assert result.is_valid
        assert result.value == BankAccountData(
            account_number="12345678", routing_number="021000021", account_name="J Doe"
        )

    def test_none(self) -> None:
        assert BankAccountValidator().validate(None).code == "BANK_ACCOUNT_REQUIRED"

    def test_account_number_required(self) -> None:
        assert BankAccountValidator().validate(account(account_number="")).code == (
            "ACCOUNT_NUMBER_REQUIRED"
        )

    def test_digits_counted_not_characters(self) -> None:
        result = BankAccountValidator().validate(account(account_number="12-34"))
        assert result.code == "ACCOUNT_NUMBER_TOO_SHORT"

    def test_too_long(self) -> None:
        result = BankAccountValidator().validate(account(account_number="1" * 18))
        assert result.code == "ACCOUNT_NUMBER_TOO_LONG"

    def test_routing_required(self) -> None:
        result = BankAccountValidator().validate(account(routing_number=" "))
        assert result.code == "ROUTING_NUMBER_REQUIRED"

    @pytest.mark.parametrize("routing", ["02100002", "02100002a", "0210000210"])
    def test_routing_format(self, routing: str) -> None:
        result = BankAccountValidator().validate(account(routing_number=routing))
        assert result.code == "INVALID_ROUTING_NUMBER_FORMAT"

    def test_routing_checksum(self) -> None:
        result = BankAccountValidator().validate(account(routing_number="021000022"))
        assert result.code == "INVALID_ROUTING_NUMBER_CHECKSUM"

    def test_routing_checksum_disabled(self) -> None:
        validator = BankAccountValidator(validate_routing_checksum=False)
        assert validator.validate(account(routing_number="021000022"))

    def test_account_name_required(self) -> None:
        result = BankAccountValidator().validate(account(account_name=""))
        assert result.code == "ACCOUNT_NAME_REQUIRED"

    def test_bank_name_required(self) -> None:
        validator = BankAccountValidator(bank_name_required=True)
        assert validator.validate(account()).code == "BANK_NAME_REQUIRED"

    def test_account_type_required(self) -> None:
        validator = BankAccountValidator(account_type_required=True)
        assert validator.validate(account()).code == "ACCOUNT_TYPE_REQUIRED"

    def test_account_type_case_insensitive(self) -> None:
        result = BankAccountValidator().validate(account(account_type=" Savings "))
        assert result.value.account_type == AccountType.SAVINGS

    def test_account_type_not_allowed(self) -> None:
        result = BankAccountValidator().validate(account(account_type="money_market"))
        assert result.code == "ACCOUNT_TYPE_NOT_ALLOWED"

    def test_empty_allowed_types_accepts_any(self) -> None:
        validator = BankAccountValidator(allowed_account_types=())
        assert validator.validate(account(account_type="crypto"))

    def test_fields_trimmed(self) -> None:
        result = BankAccountValidator().validate(
            account(account_name="  J Doe  ", routing_number=" 021000021 ")
        )
        assert result.value.account_name == "J Doe"
        assert result.value.routing_number == "021000021"
