"""Typed report settings loaded from a JSON secret blob with startup validation."""

from __future__ import annotations

import logging
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError
from pydantic.alias_generators import to_pascal
from pydantic_settings import BaseSettings, SettingsConfigDict

from report_settings.db import (
    SQL_SERVER_DEFAULT_DRIVER,
    SQL_TRANSPORT_POLICY_LEGACY,
    SqlConnectionConfig,
    SqlTransportPolicy,
)
from report_settings.domain import EmailAddress
from report_settings.errors import ConfigurationError
from report_settings.mail import mail_parse_address, mail_parse_address_list

logger = logging.getLogger(__name__)

SECRET_BLOB_ENV_VAR: Final[str] = "SecretBlob"


class ReportSettings(BaseModel):
    """Settings record deserialized from the secret blob.

    JSON keys are the PascalCase form of the attribute names.
    Example: `database_server` reads from `DatabaseServer`.

    Attributes:
        database_server: SQL Server host.
        database_name: Database name.
        database_username: SQL Server authentication login.
        database_password: SQL Server authentication password.
        log_webhook_uri: Destination for log delivery.
        sendgrid_api_key: Credential for the email-delivery provider.
        email_from_name: Sender display name for outgoing email.
        email_from_address: Sender address for outgoing email.
        email_to_addresses: Comma-separated destination addresses.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        frozen=True,
        strict=True,
        extra="ignore",
    )

    database_server: str
    database_name: str
    database_username: str
    database_password: str = Field(repr=False)
    log_webhook_uri: str
    sendgrid_api_key: str = Field(repr=False)
    email_from_name: str
    email_from_address: str
    email_to_addresses: str

    def get_sql_settings(
        self,
        application_name: str,
        transport: SqlTransportPolicy | None = None,
        driver: str = SQL_SERVER_DEFAULT_DRIVER,
    ) -> SqlConnectionConfig:
        """Build the SQL Server connection configuration.

        Args:
            application_name: Label reported to the server for connection identification.
            transport: Optional transport policy. Defaults to encryption off
                with certificate trust on.
            driver: ODBC driver name.

        Returns:
            SqlConnectionConfig: Connection configuration with SQL Server authentication.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        resolved_transport = transport or SQL_TRANSPORT_POLICY_LEGACY
        if not resolved_transport.encrypt:
            logger.warning(
                "SQL transport encryption disabled for application=%s server=%s",
                application_name,
                self.database_server,
            )
        return SqlConnectionConfig(
            host=self.database_server,
            database=self.database_name,
            application_name=application_name,
            username=self.database_username,
            password=self.database_password,
            encrypt=resolved_transport.encrypt,
            trust_server_certificate=resolved_transport.trust_server_certificate,
            driver=driver,
        )

    def get_email_destinations(self) -> list[EmailAddress]:
        """Parse the configured destination addresses.

        Returns:
            list[EmailAddress]: Destinations in configured order, duplicates kept.

        Raises:
            EmailAddressError: Raised when any entry fails validation.
        """

        destinations = mail_parse_address_list(self.email_to_addresses)
        logger.debug("Parsed %d email destinations", len(destinations))
        return destinations

    def get_email_sender(self) -> EmailAddress:
        """Parse the configured sender identity.

        Returns:
            EmailAddress: Sender address carrying `email_from_name` as display name.

        Raises:
            EmailAddressError: Raised when the sender address fails validation.
        """

        return mail_parse_address(self.email_from_address, display_name=self.email_from_name)


class SecretBlobEnvironment(BaseSettings):
    """Environment view holding the raw secret blob.

    The variable name is case-sensitive and may also come from `.env`.

    Attributes:
        secret_blob: Raw JSON settings blob.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    secret_blob: SecretStr = Field(validation_alias=SECRET_BLOB_ENV_VAR)


def config_read_secret_blob() -> str:
    """Read the raw secret blob from environment and dotenv.

    Returns:
        str: Raw JSON settings blob.

    Raises:
        ConfigurationError: Raised when the variable is missing or unreadable.
    """

    try:
        environment = SecretBlobEnvironment()
    except ValidationError as error:
        raise ConfigurationError(f"Error getting env variable {SECRET_BLOB_ENV_VAR}: {error}") from error
    return environment.secret_blob.get_secret_value()


def config_parse_settings(secret_blob: str) -> ReportSettings:
    """Deserialize the secret blob into report settings.

    Args:
        secret_blob: JSON object with PascalCase keys.

    Returns:
        ReportSettings: Validated immutable settings record.

    Raises:
        ConfigurationError: Raised when the JSON is malformed or fields are missing or mistyped.
    """

    try:
        return ReportSettings.model_validate_json(secret_blob)
    except ValidationError as error:
        raise ConfigurationError(f"Could not deserialize settings blob: {error}") from error


def config_load_settings(secret_blob: str | None = None) -> ReportSettings:
    """Load report settings from an explicit blob or from the environment.

    Args:
        secret_blob: Optional raw blob. When omitted the `SecretBlob`
            environment variable is read.

    Returns:
        ReportSettings: Validated immutable settings record.

    Raises:
        ConfigurationError: Raised when the blob cannot be read or deserialized.
    """

    resolved_secret_blob = config_read_secret_blob() if secret_blob is None else secret_blob
    settings = config_parse_settings(resolved_secret_blob)
    logger.info(
        "Loaded report settings for database=%s on server=%s",
        settings.database_name,
        settings.database_server,
    )
    return settings
