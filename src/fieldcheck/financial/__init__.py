"""Financial validators: credit cards and bank accounts.

Usage::

    from fieldcheck.financial import BankAccountValidator, CreditCardValidator

    card = CreditCardValidator(allowed_card_types=["visa", "mastercard"])
    result = card.validate({"number": "4111111111111111", "expiry": "12/30", "cvv": "123"})
"""

from fieldcheck.codes import BankAccountErrorCode, CreditCardErrorCode
from fieldcheck.financial.bank_account import (
    AccountType,
    BankAccountConfig,
    BankAccountData,
    BankAccountValidator,
)
from fieldcheck.financial.checksums import aba_checksum_valid, luhn_check_digit, luhn_checksum_valid
from fieldcheck.financial.credit_card import (
    CardType,
    CreditCardConfig,
    CreditCardData,
    CreditCardDetails,
    CreditCardValidator,
    detect_card_type,
    expiry_month_end,
    mask_card_number,
)

__all__ = [
    "AccountType",
    "BankAccountConfig",
    "BankAccountData",
    "BankAccountErrorCode",
    "BankAccountValidator",
    "CardType",
    "CreditCardConfig",
    "CreditCardData",
    "CreditCardDetails",
    "CreditCardErrorCode",
    "CreditCardValidator",
    "aba_checksum_valid",
    "detect_card_type",
    "expiry_month_end",
    "luhn_check_digit",
    "luhn_checksum_valid",
    "mask_card_number",
]
