"""Project-native typed exceptions for settings loading and translation failures."""

from __future__ import annotations


class SettingsError(Exception):
    """Base exception for report settings failures."""


class ConfigurationError(SettingsError, RuntimeError):
    """Settings blob is missing, unreadable, or cannot be deserialized.

    Always fatal to the caller's startup sequence.
    """


class EmailAddressError(SettingsError, ValueError):
    """Configured email address failed validation.

    Attributes:
        invalid_address: Raw address entry that failed parsing.
    """

    def __init__(self, message: str, invalid_address: str):
        super().__init__(message)
        self.invalid_address = invalid_address
