"""Gender field validation: standard options, abbreviations, custom entries."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from fieldcheck.base import blank, configure, freeze, freeze_mapping, lowered, reject
from fieldcheck.codes import GenderErrorCode as Code
from fieldcheck.result import ValidationResult, success


class GenderOption(StrEnum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"


DEFAULT_ABBREVIATIONS: Mapping[str, str] = {
    "m": GenderOption.MALE,
    "f": GenderOption.FEMALE,
    "nb": GenderOption.NON_BINARY,
    "o": GenderOption.OTHER,
    "x": GenderOption.OTHER,
    "pnts": GenderOption.PREFER_NOT_TO_SAY,
    "prefer not": GenderOption.PREFER_NOT_TO_SAY,
}


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Gender policy.

    ``abbreviation_map`` entries are merged over ``DEFAULT_ABBREVIATIONS``.
    With ``allow_custom`` any value up to ``custom_max_length`` characters
    is accepted once the listed values and abbreviations have been tried.
    """

    allowed_values: tuple[str, ...] = tuple(GenderOption)
    allow_custom: bool = False
    custom_max_length: int = 50
    normalize: bool = True
    case_sensitive: bool = False
    allow_abbreviations: bool = True
    abbreviation_map: Mapping[str, str] | tuple[tuple[str, str], ...] | None = None

    def __post_init__(self) -> None:
        freeze(self, "allowed_values")
        freeze_mapping(self, "abbreviation_map")


@dataclass(frozen=True, slots=True)
class GenderValidationResult(ValidationResult[str]):
    normalized_value: str | None = None
    expanded_value: str | None = None
    is_standard_option: bool | None = None


class GenderValidator:
    __slots__ = ("_abbreviations", "_allowed", "_config", "_standard")

    def __init__(self, config: GenderConfig | None = None, **overrides: Any) -> None:
        cfg = configure(GenderConfig, config, overrides)
        self._config = cfg
        self._abbreviations = {**DEFAULT_ABBREVIATIONS, **dict(cfg.abbreviation_map or ())}
        if cfg.case_sensitive:
            self._allowed = frozenset(cfg.allowed_values)
            self._standard = frozenset(GenderOption)
        else:
            self._allowed = frozenset(lowered(cfg.allowed_values))
            self._standard = frozenset(lowered(GenderOption))

    @property
    def config(self) -> GenderConfig:
        return self._config

    def _fold(self, value: str) -> str:
        return value if self._config.case_sensitive else value.lower()

    def _expand(self, value: str) -> str | None:
        if self._config.case_sensitive:
            return self._abbreviations.get(value)
        folded = value.lower()
        for key, full in self._abbreviations.items():
            if key.lower() == folded:
                return full
        return None

    def validate(self, value: str | None) -> GenderValidationResult:
        cfg = self._config
        if value is None or blank(str(value)):
            return reject(
                self, Code.GENDER_REQUIRED, "Gender value is required", GenderValidationResult
            )

        processed = str(value)
        if cfg.normalize:
            processed = processed.strip()
            if not cfg.case_sensitive:
                processed = processed.lower()

        if self._fold(processed) in self._allowed:
            return success(
                processed,
                GenderValidationResult,
                normalized_value=processed,
                is_standard_option=self._fold(processed) in self._standard,
            )

        if cfg.allow_abbreviations:
            expanded = self._expand(processed)
            if expanded is not None and self._fold(expanded) in self._allowed:
                return success(
                    str(expanded),
                    GenderValidationResult,
                    normalized_value=processed,
                    expanded_value=str(expanded),
                    is_standard_option=self._fold(expanded) in self._standard,
                )

        if cfg.allow_custom:
            if len(processed) > cfg.custom_max_length:
                return reject(
                    self,
                    Code.GENDER_TOO_LONG,
                    f"Custom gender value cannot exceed {cfg.custom_max_length} characters",
                    GenderValidationResult,
                )
            return success(
                processed,
                GenderValidationResult,
                normalized_value=processed,
                is_standard_option=False,
            )

        return reject(
            self,
            Code.INVALID_GENDER,
            f"Gender must be one of: {', '.join(cfg.allowed_values)}",
            GenderValidationResult,
        )

    def standard_options(self) -> list[str]:
        return [str(option) for option in GenderOption]

    def abbreviations(self) -> dict[str, str]:
        """Abbreviation → full value table in effect, defaults included."""
        return {key: str(full) for key, full in self._abbreviations.items()}
