"""Contact validators: email, phone, postal address."""

from fieldcheck.codes import AddressErrorCode, EmailErrorCode, PhoneErrorCode
from fieldcheck.contact.address import AddressConfig, AddressData, AddressValidator
from fieldcheck.contact.email import EmailConfig, EmailValidator
from fieldcheck.contact.phone import PhoneConfig, PhoneValidator

__all__ = [
    "AddressConfig",
    "AddressData",
    "AddressErrorCode",
    "AddressValidator",
    "EmailConfig",
    "EmailErrorCode",
    "EmailValidator",
    "PhoneConfig",
    "PhoneErrorCode",
    "PhoneValidator",
]
