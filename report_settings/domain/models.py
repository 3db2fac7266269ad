"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between the settings, mail and database layers.
"""

from dataclasses import dataclass
from email.utils import formataddr


@dataclass(frozen=True)
class EmailAddress:
    """Validated email address with optional display name.

    Attributes:
        address: Normalized address as returned by the email validator.
        display_name: Optional human-readable name shown in mail headers.
    """

    address: str
    display_name: str | None = None

    def formatted(self) -> str:
        """Render the address for use in a mail header.

        Returns:
            str: `Name <address>` when a display name is present, else the bare address.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if not self.display_name:
            return self.address
        return formataddr((self.display_name, self.address))


@dataclass(frozen=True)
class DatabaseHealthReport:
    """Outcome of one successful connectivity check against the report database.

    Attributes:
        status: Check outcome label, `ok` for a reachable database.
        server: Database server host that answered the check.
        database: Database name the check connected to.
        application_name: Application name reported to the server.
        encrypted: Whether the checked connection was encrypted.
        trust_server_certificate: Whether server certificate validation was skipped.
        detail: Operator-facing summary including the transport posture.
    """

    status: str
    server: str
    database: str
    application_name: str
    encrypted: bool
    trust_server_certificate: bool
    detail: str
