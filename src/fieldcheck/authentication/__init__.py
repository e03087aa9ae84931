"""Authentication validators: usernames, passwords, API keys, tokens, 2FA codes."""

from fieldcheck.authentication.api_key import ApiKeyConfig, ApiKeyValidator
from fieldcheck.authentication.password import PasswordConfig, PasswordInput, PasswordValidator
from fieldcheck.authentication.token import TokenConfig, TokenData, TokenValidator
from fieldcheck.authentication.two_factor import (
    TwoFactorConfig,
    TwoFactorData,
    TwoFactorType,
    TwoFactorValidator,
)
from fieldcheck.authentication.username import UsernameConfig, UsernameValidator
from fieldcheck.codes import (
    ApiKeyErrorCode,
    PasswordErrorCode,
    TokenErrorCode,
    TwoFactorErrorCode,
    UsernameErrorCode,
)

__all__ = [
    "ApiKeyConfig",
    "ApiKeyErrorCode",
    "ApiKeyValidator",
    "PasswordConfig",
    "PasswordErrorCode",
    "PasswordInput",
    "PasswordValidator",
    "TokenConfig",
    "TokenData",
    "TokenErrorCode",
    "TokenValidator",
    "TwoFactorConfig",
    "TwoFactorData",
    "TwoFactorErrorCode",
    "TwoFactorType",
    "TwoFactorValidator",
    "UsernameConfig",
    "UsernameErrorCode",
    "UsernameValidator",
]
