"""Mail layer package for email address parsing."""

from .addresses import EMAIL_ADDRESS_SEPARATOR, mail_parse_address, mail_parse_address_list

__all__ = ["EMAIL_ADDRESS_SEPARATOR", "mail_parse_address", "mail_parse_address_list"]
