"""Credit card validation: brand detection, Luhn checksum, expiry, CVV.

Usage::

    from fieldcheck.financial import CreditCardValidator

    result = CreditCardValidator().validate(
        {"number": "4111 1111 1111 1111", "expiry": "12/30", "cvv": "123"}
    )
    result.value.card_type  # CardType.VISA
    result.value.number     # "**** **** **** 1111"
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from fieldcheck.base import as_record, blank, configure, reject, trimmed
from fieldcheck.codes import CreditCardErrorCode as Code
from fieldcheck.errors import ConfigurationError
from fieldcheck.financial.checksums import luhn_checksum_valid
from fieldcheck.result import ValidationResult, success


class CardType(StrEnum):
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    DISCOVER = "discover"
    DINERS = "diners"
    JCB = "jcb"
    UNKNOWN = "unknown"


# Checked in order; the first matching brand wins.
_CARD_PATTERNS: tuple[tuple[CardType, re.Pattern[str]], ...] = (
    (CardType.VISA, re.compile(r"^4[0-9]{12}(?:[0-9]{3})?$")),
    (
        CardType.MASTERCARD,
        re.compile(
            r"^(5[1-5][0-9]{14}"
            r"|2(22[1-9][0-9]{12}|2[3-9][0-9]{13}|[3-6][0-9]{14}|7[0-1][0-9]{13}|720[0-9]{12}))$"
        ),
    ),
    (CardType.AMEX, re.compile(r"^3[47][0-9]{13}$")),
    (CardType.DISCOVER, re.compile(r"^6(?:011|5[0-9]{2})[0-9]{12}$")),
    (CardType.DINERS, re.compile(r"^3(?:0[0-5]|[68][0-9])[0-9]{11}$")),
    (CardType.JCB, re.compile(r"^(?:2131|1800|35[0-9]{3})[0-9]{11}$")),
)

_SEPARATORS = re.compile(r"[\s-]")
_EXPIRY = re.compile(r"^(0[1-9]|1[0-2])/([0-9]{2}|[0-9]{4})$")
_DIGITS = re.compile(r"^[0-9]+$")

_AMEX_CVV_LENGTH = 4
_DEFAULT_CVV_LENGTH = 3


def detect_card_type(number: str) -> CardType:
    """Classify a stripped card number, or ``CardType.UNKNOWN``."""
    for card_type, pattern in _CARD_PATTERNS:
        if pattern.match(number):
            return card_type
    return CardType.UNKNOWN


def mask_card_number(number: str) -> str:
    """Mask all but the last four digits and group in blocks of four.

    Numbers shorter than four characters are returned unchanged::

        >>> mask_card_number("4111111111111111")
        '**** **** **** 1111'
    """
    if len(number) < 4:
        return number
    masked = "*" * (len(number) - 4) + number[-4:]
    return " ".join(masked[i : i + 4] for i in range(0, len(masked), 4))


def expiry_month_end(expiry: str) -> date | None:
    """Last day of the month named by ``MM/YY`` or ``MM/YYYY``, or None."""
    match = _EXPIRY.match(expiry)
    if match is None:
        return None
    month = int(match.group(1))
    year_text = match.group(2)
    year = 2000 + int(year_text) if len(year_text) == 2 else int(year_text)
    try:
        return date(year, month, calendar.monthrange(year, month)[1])
    except ValueError:
        # Year 0000 matches the pattern but is not a calendar year.
        return None


@dataclass(frozen=True, slots=True)
class CreditCardConfig:
    """Credit card validation policy."""

    number_required: bool = True
    expiry_required: bool = True
    cvv_required: bool = True
    name_required: bool = False
    allowed_card_types: tuple[CardType, ...] = tuple(
        t for t in CardType if t is not CardType.UNKNOWN
    )
    validate_luhn: bool = True

    def __post_init__(self) -> None:
        try:
            types = tuple(CardType(t) for t in self.allowed_card_types)
        except ValueError as exc:
            msg = f"Unsupported card type in allowed_card_types: {exc}"
            raise ConfigurationError(msg) from exc
        object.__setattr__(self, "allowed_card_types", types)


@dataclass(frozen=True, slots=True)
class CreditCardData:
    number: str | None = None
    expiry: str | None = None
    cvv: str | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class CreditCardDetails:
    """Normalized card data returned on success. ``number`` is masked."""

    number: str
    card_type: CardType
    expiry: str | None = None
    cvv: str | None = None
    name: str | None = None


class CreditCardValidator:
    """Validate card number, expiry, CVV and cardholder name.

    Checks run in a fixed order and stop at the first failure: number
    presence, brand detection and allow-list, Luhn checksum, expiry
    presence, format and date, CVV presence and length, name presence.
    """

    __slots__ = ("_allowed", "_config")

    def __init__(self, config: CreditCardConfig | None = None, **overrides: Any) -> None:
        self._config = configure(CreditCardConfig, config, overrides)
        self._allowed = frozenset(self._config.allowed_card_types)

    @property
    def config(self) -> CreditCardConfig:
        return self._config

    def validate(
        self, card: CreditCardData | dict[str, Any] | None
    ) -> ValidationResult[CreditCardDetails]:
        cfg = self._config
        data = as_record(CreditCardData, card)
        if data is None:
            return reject(self, Code.CREDIT_CARD_REQUIRED, "Credit card data is required")

        if cfg.number_required and blank(data.number):
            return reject(self, Code.CARD_NUMBER_REQUIRED, "Card number is required")

        number = _SEPARATORS.sub("", data.number or "")
        card_type = CardType.UNKNOWN

        if number:
            card_type = detect_card_type(number)
            if card_type is not CardType.UNKNOWN and card_type not in self._allowed:
                return reject(
                    self, Code.CARD_TYPE_NOT_ALLOWED, f"Card type {card_type} is not accepted"
                )
            if card_type is CardType.UNKNOWN:
                return reject(
                    self, Code.INVALID_CARD_NUMBER_FORMAT, "Card number format is not recognized"
                )
            if cfg.validate_luhn and not luhn_checksum_valid(number):
                return reject(
                    self,
                    Code.INVALID_CARD_NUMBER_CHECKSUM,
                    "Card number failed checksum validation",
                )

        expiry = trimmed(data.expiry)
        if cfg.expiry_required and not expiry:
            return reject(self, Code.EXPIRY_REQUIRED, "Expiration date is required")

        if expiry:
            month_end = expiry_month_end(expiry)
            if month_end is None:
                return reject(
                    self,
                    Code.INVALID_EXPIRY_FORMAT,
                    "Expiration date must be in MM/YY or MM/YYYY format",
                )
            if month_end < date.today():
                return reject(self, Code.EXPIRED_CARD, "Credit card has expired")

        cvv = trimmed(data.cvv)
        if cfg.cvv_required and not cvv:
            return reject(self, Code.CVV_REQUIRED, "CVV is required")

        if cvv:
            length = _AMEX_CVV_LENGTH if card_type is CardType.AMEX else _DEFAULT_CVV_LENGTH
            if not _DIGITS.match(cvv) or len(cvv) != length:
                return reject(
                    self, Code.INVALID_CVV, f"CVV must be {length} digits for {card_type} cards"
                )

        if cfg.name_required and blank(data.name):
            return reject(self, Code.CARDHOLDER_NAME_REQUIRED, "Cardholder name is required")

        return success(
            CreditCardDetails(
                number=mask_card_number(number),
                card_type=card_type,
                expiry=expiry,
                cvv=cvv,
                name=trimmed(data.name),
            )
        )
