"""US bank account validation with ABA routing-number checksum."""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from fieldcheck.base import (
    as_record,
    blank,
    compile_pattern,
    configure,
    freeze,
    lowered,
    reject,
    trimmed,
)
from fieldcheck.codes import BankAccountErrorCode as Code
from fieldcheck.errors import check_bounds
from fieldcheck.financial.checksums import aba_checksum_valid
from fieldcheck.result import ValidationResult, success


class AccountType(StrEnum):
    CHECKING = "checking"
    SAVINGS = "savings"
    BUSINESS = "business"
    MONEY_MARKET = "money_market"
    CERTIFICATE = "certificate"
    OTHER = "other"


_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class BankAccountConfig:
    """Bank account validation policy.

    An empty ``allowed_account_types`` accepts any account type.
    """

    account_number_required: bool = True
    routing_number_required: bool = True
    account_name_required: bool = True
    bank_name_required: bool = False
    account_type_required: bool = False
    allowed_account_types: tuple[str, ...] = ("checking", "savings", "business")
    min_account_number_length: int = 5
    max_account_number_length: int = 17
    routing_number_pattern: str | re.Pattern[str] = r"^[0-9]{9}$"
    validate_routing_checksum: bool = True

    def __post_init__(self) -> None:
        freeze(self, "allowed_account_types")
        check_bounds(
            "account number length", self.min_account_number_length, self.max_account_number_length
        )


@dataclass(frozen=True, slots=True)
class BankAccountData:
    account_number: str | None = None
    routing_number: str | None = None
    account_name: str | None = None
    bank_name: str | None = None
    account_type: str | None = None


class BankAccountValidator:
    """Validate account number, routing number, holder name and type."""

    __slots__ = ("_allowed_types", "_config", "_routing_pattern")

    def __init__(self, config: BankAccountConfig | None = None, **overrides: Any) -> None:
        self._config = configure(BankAccountConfig, config, overrides)
        self._routing_pattern = compile_pattern(self._config.routing_number_pattern)
        self._allowed_types = lowered(self._config.allowed_account_types)

    @property
    def config(self) -> BankAccountConfig:
        return self._config

    def validate(
        self, account: BankAccountData | dict[str, Any] | None
    ) -> ValidationResult[BankAccountData]:
        cfg = self._config
        data = as_record(BankAccountData, account)
        if data is None:
            return reject(self, Code.BANK_ACCOUNT_REQUIRED, "Bank account data is required")

        if cfg.account_number_required and blank(data.account_number):
            return reject(self, Code.ACCOUNT_NUMBER_REQUIRED, "Account number is required")

        if data.account_number:
            digit_count = len(_NON_DIGITS.sub("", data.account_number))
            if digit_count < cfg.min_account_number_length:
                return reject(
                    self,
                    Code.ACCOUNT_NUMBER_TOO_SHORT,
                    f"Account number must have at least {cfg.min_account_number_length} digits",
                )
            if digit_count > cfg.max_account_number_length:
                return reject(
                    self,
                    Code.ACCOUNT_NUMBER_TOO_LONG,
                    f"Account number must not exceed {cfg.max_account_number_length} digits",
                )

        routing = trimmed(data.routing_number)
        if cfg.routing_number_required and not routing:
            return reject(self, Code.ROUTING_NUMBER_REQUIRED, "Routing number is required")

        if routing:
            if not self._routing_pattern.match(routing):
                return reject(
                    self,
                    Code.INVALID_ROUTING_NUMBER_FORMAT,
                    "Routing number format is invalid. Must be 9 digits.",
                )
            if cfg.validate_routing_checksum and not aba_checksum_valid(routing):
                return reject(
                    self,
                    Code.INVALID_ROUTING_NUMBER_CHECKSUM,
                    "Routing number checksum validation failed",
                )

        if cfg.account_name_required and blank(data.account_name):
            return reject(self, Code.ACCOUNT_NAME_REQUIRED, "Account name is required")

        if cfg.bank_name_required and blank(data.bank_name):
            return reject(self, Code.BANK_NAME_REQUIRED, "Bank name is required")

        account_type = data.account_type.strip().lower() if data.account_type else None
        if cfg.account_type_required and not account_type:
            return reject(self, Code.ACCOUNT_TYPE_REQUIRED, "Account type is required")

        if account_type and self._allowed_types and account_type not in self._allowed_types:
            allowed = ", ".join(cfg.allowed_account_types)
            return reject(
                self, Code.ACCOUNT_TYPE_NOT_ALLOWED, f"Account type must be one of: {allowed}"
            )

        return success(
            BankAccountData(
                account_number=trimmed(data.account_number),
                routing_number=routing,
                account_name=trimmed(data.account_name),
                bank_name=trimmed(data.bank_name),
                account_type=account_type,
            )
        )
