"""Postal address validation."""

import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.base import as_record, blank, compile_pattern, configure, reject, trimmed
from fieldcheck.codes import AddressErrorCode as Code
from fieldcheck.result import ValidationResult, success


@dataclass(frozen=True, slots=True)
class AddressConfig:
    """Address validation policy. Every field is required by default."""

    street_required: bool = True
    city_required: bool = True
    state_required: bool = True
    postal_code_required: bool = True
    country_required: bool = True
    max_street_length: int = 100
    max_city_length: int = 50
    max_state_length: int = 50
    postal_code_pattern: str | re.Pattern[str] = r"^[a-zA-Z0-9\s-]{3,10}$"


@dataclass(frozen=True, slots=True)
class AddressData:
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class AddressValidator:
    """Validate an address field by field, in street-to-country order."""

    __slots__ = ("_config", "_postal_pattern")

    def __init__(self, config: AddressConfig | None = None, **overrides: Any) -> None:
        self._config = configure(AddressConfig, config, overrides)
        self._postal_pattern = compile_pattern(self._config.postal_code_pattern)

    @property
    def config(self) -> AddressConfig:
        return self._config

    def validate(
        self, address: AddressData | dict[str, Any] | None
    ) -> ValidationResult[AddressData]:
        cfg = self._config
        data = as_record(AddressData, address)
        if data is None:
            return reject(self, Code.ADDRESS_REQUIRED, "Address data is required")

        street, city, state = trimmed(data.street), trimmed(data.city), trimmed(data.state)
        postal_code, country = trimmed(data.postal_code), trimmed(data.country)

        if cfg.street_required and blank(street):
            return reject(self, Code.STREET_REQUIRED, "Street address is required")
        if street and len(street) > cfg.max_street_length:
            return reject(
                self,
                Code.STREET_TOO_LONG,
                f"Street address must not exceed {cfg.max_street_length} characters",
            )

        if cfg.city_required and blank(city):
            return reject(self, Code.CITY_REQUIRED, "City is required")
        if city and len(city) > cfg.max_city_length:
            return reject(
                self, Code.CITY_TOO_LONG, f"City must not exceed {cfg.max_city_length} characters"
            )

        if cfg.state_required and blank(state):
            return reject(self, Code.STATE_REQUIRED, "State/Province is required")
        if state and len(state) > cfg.max_state_length:
            return reject(
                self,
                Code.STATE_TOO_LONG,
                f"State/Province must not exceed {cfg.max_state_length} characters",
            )

        if cfg.postal_code_required and blank(postal_code):
            return reject(self, Code.POSTAL_CODE_REQUIRED, "Postal code is required")
        if postal_code and not self._postal_pattern.match(postal_code):
            return reject(self, Code.INVALID_POSTAL_CODE, "Postal code format is invalid")

        if cfg.country_required and blank(country):
            return reject(self, Code.COUNTRY_REQUIRED, "Country is required")

        return success(
            AddressData(
                street=street,
                city=city,
                state=state,
                postal_code=postal_code,
                country=country,
            )
        )
