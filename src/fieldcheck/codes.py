"""Error codes: the stable public contract of every validator.

Codes are ``StrEnum`` members, so they compare equal to their plain
string value::

    result.code == EmailErrorCode.EMAIL_REQUIRED == "EMAIL_REQUIRED"

Never rename a member; add new ones instead.
"""

from enum import StrEnum

# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


class EmailErrorCode(StrEnum):
    EMAIL_REQUIRED = "EMAIL_REQUIRED"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMAIL_TOO_LONG = "EMAIL_TOO_LONG"
    DOMAIN_NOT_ALLOWED = "DOMAIN_NOT_ALLOWED"
    DOMAIN_BLOCKED = "DOMAIN_BLOCKED"


class PhoneErrorCode(StrEnum):
    PHONE_REQUIRED = "PHONE_REQUIRED"
    INVALID_PHONE_FORMAT = "INVALID_PHONE_FORMAT"
    PHONE_TOO_SHORT = "PHONE_TOO_SHORT"
    PHONE_TOO_LONG = "PHONE_TOO_LONG"
    COUNTRY_CODE_REQUIRED = "COUNTRY_CODE_REQUIRED"
    COUNTRY_CODE_NOT_ALLOWED = "COUNTRY_CODE_NOT_ALLOWED"


class AddressErrorCode(StrEnum):
    ADDRESS_REQUIRED = "ADDRESS_REQUIRED"
    STREET_REQUIRED = "STREET_REQUIRED"
    CITY_REQUIRED = "CITY_REQUIRED"
    STATE_REQUIRED = "STATE_REQUIRED"
    POSTAL_CODE_REQUIRED = "POSTAL_CODE_REQUIRED"
    COUNTRY_REQUIRED = "COUNTRY_REQUIRED"
    STREET_TOO_LONG = "STREET_TOO_LONG"
    CITY_TOO_LONG = "CITY_TOO_LONG"
    STATE_TOO_LONG = "STATE_TOO_LONG"
    INVALID_POSTAL_CODE = "INVALID_POSTAL_CODE"


# ---------------------------------------------------------------------------
# Financial
# ---------------------------------------------------------------------------


class CreditCardErrorCode(StrEnum):
    CREDIT_CARD_REQUIRED = "CREDIT_CARD_REQUIRED"
    CARD_NUMBER_REQUIRED = "CARD_NUMBER_REQUIRED"
    INVALID_CARD_NUMBER_FORMAT = "INVALID_CARD_NUMBER_FORMAT"
    INVALID_CARD_NUMBER_CHECKSUM = "INVALID_CARD_NUMBER_CHECKSUM"
    CARD_TYPE_NOT_ALLOWED = "CARD_TYPE_NOT_ALLOWED"
    EXPIRY_REQUIRED = "EXPIRY_REQUIRED"
    INVALID_EXPIRY_FORMAT = "INVALID_EXPIRY_FORMAT"
    EXPIRED_CARD = "EXPIRED_CARD"
    CVV_REQUIRED = "CVV_REQUIRED"
    INVALID_CVV = "INVALID_CVV"
    CARDHOLDER_NAME_REQUIRED = "CARDHOLDER_NAME_REQUIRED"


class BankAccountErrorCode(StrEnum):
    BANK_ACCOUNT_REQUIRED = "BANK_ACCOUNT_REQUIRED"
    ACCOUNT_NUMBER_REQUIRED = "ACCOUNT_NUMBER_REQUIRED"
    ACCOUNT_NUMBER_TOO_SHORT = "ACCOUNT_NUMBER_TOO_SHORT"
    ACCOUNT_NUMBER_TOO_LONG = "ACCOUNT_NUMBER_TOO_LONG"
    ROUTING_NUMBER_REQUIRED = "ROUTING_NUMBER_REQUIRED"
    INVALID_ROUTING_NUMBER_FORMAT = "INVALID_ROUTING_NUMBER_FORMAT"
    INVALID_ROUTING_NUMBER_CHECKSUM = "INVALID_ROUTING_NUMBER_CHECKSUM"
    ACCOUNT_NAME_REQUIRED = "ACCOUNT_NAME_REQUIRED"
    BANK_NAME_REQUIRED = "BANK_NAME_REQUIRED"
    ACCOUNT_TYPE_REQUIRED = "ACCOUNT_TYPE_REQUIRED"
    ACCOUNT_TYPE_NOT_ALLOWED = "ACCOUNT_TYPE_NOT_ALLOWED"


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class UsernameErrorCode(StrEnum):
    USERNAME_REQUIRED = "USERNAME_REQUIRED"
    USERNAME_TOO_SHORT = "USERNAME_TOO_SHORT"
    USERNAME_TOO_LONG = "USERNAME_TOO_LONG"
    USERNAME_CONTAINS_SPACES = "USERNAME_CONTAINS_SPACES"
    INVALID_USERNAME_FORMAT = "INVALID_USERNAME_FORMAT"
    USERNAME_BLOCKED = "USERNAME_BLOCKED"


class PasswordErrorCode(StrEnum):
    PASSWORD_REQUIRED = "PASSWORD_REQUIRED"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_TOO_LONG = "PASSWORD_TOO_LONG"
    PASSWORD_REQUIRES_UPPERCASE = "PASSWORD_REQUIRES_UPPERCASE"
    PASSWORD_REQUIRES_LOWERCASE = "PASSWORD_REQUIRES_LOWERCASE"
    PASSWORD_REQUIRES_NUMBER = "PASSWORD_REQUIRES_NUMBER"
    PASSWORD_REQUIRES_SPECIAL_CHAR = "PASSWORD_REQUIRES_SPECIAL_CHAR"
    PASSWORD_TOO_COMMON = "PASSWORD_TOO_COMMON"
    PASSWORD_CONTAINS_USERNAME = "PASSWORD_CONTAINS_USERNAME"


class ApiKeyErrorCode(StrEnum):
    APIKEY_REQUIRED = "APIKEY_REQUIRED"
    APIKEY_TOO_SHORT = "APIKEY_TOO_SHORT"
    APIKEY_TOO_LONG = "APIKEY_TOO_LONG"
    INVALID_APIKEY_FORMAT = "INVALID_APIKEY_FORMAT"
    INVALID_APIKEY_PREFIX = "INVALID_APIKEY_PREFIX"


class TokenErrorCode(StrEnum):
    TOKEN_REQUIRED = "TOKEN_REQUIRED"
    TOKEN_TOO_SHORT = "TOKEN_TOO_SHORT"
    TOKEN_TOO_LONG = "TOKEN_TOO_LONG"
    INVALID_JWT_FORMAT = "INVALID_JWT_FORMAT"
    INVALID_TOKEN_PREFIX = "INVALID_TOKEN_PREFIX"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"


class TwoFactorErrorCode(StrEnum):
    TWOFACTOR_REQUIRED = "TWOFACTOR_REQUIRED"
    TWOFACTOR_CODE_REQUIRED = "TWOFACTOR_CODE_REQUIRED"
    INVALID_TWOFACTOR_LENGTH = "INVALID_TWOFACTOR_LENGTH"
    INVALID_TWOFACTOR_FORMAT = "INVALID_TWOFACTOR_FORMAT"
    INVALID_TWOFACTOR_TYPE = "INVALID_TWOFACTOR_TYPE"
    TWOFACTOR_EXPIRED = "TWOFACTOR_EXPIRED"


# ---------------------------------------------------------------------------
# Personal
# ---------------------------------------------------------------------------


class AgeErrorCode(StrEnum):
    AGE_REQUIRED = "AGE_REQUIRED"
    DATE_NOT_ALLOWED = "DATE_NOT_ALLOWED"
    FUTURE_DATE = "FUTURE_DATE"
    INVALID_AGE = "INVALID_AGE"
    DECIMALS_NOT_ALLOWED = "DECIMALS_NOT_ALLOWED"
    AGE_BELOW_MINIMUM = "AGE_BELOW_MINIMUM"
    AGE_ABOVE_MAXIMUM = "AGE_ABOVE_MAXIMUM"


class DOBErrorCode(StrEnum):
    DOB_REQUIRED = "DOB_REQUIRED"
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    FUTURE_DATE = "FUTURE_DATE"
    BELOW_MINIMUM_AGE = "BELOW_MINIMUM_AGE"
    ABOVE_MAXIMUM_AGE = "ABOVE_MAXIMUM_AGE"
    OUTSIDE_VALID_RANGES = "OUTSIDE_VALID_RANGES"


class GenderErrorCode(StrEnum):
    GENDER_REQUIRED = "GENDER_REQUIRED"
    GENDER_TOO_LONG = "GENDER_TOO_LONG"
    INVALID_GENDER = "INVALID_GENDER"


class NameErrorCode(StrEnum):
    NAME_REQUIRED = "NAME_REQUIRED"
    NAME_TOO_SHORT = "NAME_TOO_SHORT"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    INVALID_NAME_FORMAT = "INVALID_NAME_FORMAT"


class PassportErrorCode(StrEnum):
    PASSPORT_REQUIRED = "PASSPORT_REQUIRED"
    PASSPORT_NUMBER_REQUIRED = "PASSPORT_NUMBER_REQUIRED"
    PASSPORT_AUTHORITY_NOT_ALLOWED = "PASSPORT_AUTHORITY_NOT_ALLOWED"
    INVALID_PASSPORT_FORMAT = "INVALID_PASSPORT_FORMAT"
    INVALID_PASSPORT_CHECKSUM = "INVALID_PASSPORT_CHECKSUM"
    UNKNOWN_PASSPORT_AUTHORITY = "UNKNOWN_PASSPORT_AUTHORITY"
    INVALID_EXPIRATION_DATE = "INVALID_EXPIRATION_DATE"
    INSUFFICIENT_PASSPORT_VALIDITY = "INSUFFICIENT_PASSPORT_VALIDITY"
    PASSPORT_TOO_OLD = "PASSPORT_TOO_OLD"
