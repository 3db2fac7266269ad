"""Email address parsing backed by the email-validator library.

Entries are handed to the validator exactly as configured. Surrounding
whitespace is not trimmed, so `"a@x.com, b@y.com"` rejects its second entry.
"""

from __future__ import annotations

from typing import Final

from email_validator import EmailNotValidError, validate_email

from report_settings.domain import EmailAddress
from report_settings.errors import EmailAddressError

EMAIL_ADDRESS_SEPARATOR: Final[str] = ","


def mail_parse_address(raw_address: str, display_name: str | None = None) -> EmailAddress:
    """Validate one raw email address.

    Args:
        raw_address: Address text exactly as configured.
        display_name: Optional display name attached to the parsed address.

    Returns:
        EmailAddress: Address in the validator's normalized form.

    Raises:
        EmailAddressError: Raised when the validator rejects the address.
    """

    try:
        validated_email = validate_email(raw_address, check_deliverability=False)
    except EmailNotValidError as error:
        raise EmailAddressError(
            f"Invalid email address {raw_address!r}: {error}",
            invalid_address=raw_address,
        ) from error
    return EmailAddress(address=validated_email.normalized, display_name=display_name)


def mail_parse_address_list(raw_addresses: str) -> list[EmailAddress]:
    """Split a comma-separated address list and validate every entry.

    Order and duplicates are preserved. The first invalid entry fails the
    whole list.

    Args:
        raw_addresses: Comma-separated address list.

    Returns:
        list[EmailAddress]: Parsed addresses in configured order.

    Raises:
        EmailAddressError: Raised when any entry fails validation.
    """

    return [mail_parse_address(raw_address) for raw_address in raw_addresses.split(EMAIL_ADDRESS_SEPARATOR)]
