"""SQL Server connection configuration rendered as SQLAlchemy URLs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from sqlalchemy.engine import URL

SQL_SERVER_DIALECT: Final[str] = "mssql+pyodbc"
SQL_SERVER_DEFAULT_DRIVER: Final[str] = "ODBC Driver 18 for SQL Server"


def _db_render_flag(value: bool) -> str:
    return "yes" if value else "no"


@dataclass(frozen=True)
class SqlTransportPolicy:
    """Transport security flags for SQL Server connections.

    Attributes:
        encrypt: Whether the connection is encrypted with TLS.
        trust_server_certificate: Whether server certificate validation is skipped.
    """

    encrypt: bool = False
    trust_server_certificate: bool = True

    @classmethod
    def strict(cls) -> SqlTransportPolicy:
        """Return a policy with encryption on and certificate validation on.

        Returns:
            SqlTransportPolicy: Policy for verified TLS connections.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return cls(encrypt=True, trust_server_certificate=False)


# Encryption off, any server certificate accepted.
SQL_TRANSPORT_POLICY_LEGACY: Final[SqlTransportPolicy] = SqlTransportPolicy()


@dataclass(frozen=True)
class SqlConnectionConfig:
    """Connection parameters for one SQL Server database.

    Attributes:
        host: Database server host, optionally with `,port` or `\\instance`.
        database: Database name.
        application_name: Label reported to the server for connection identification.
        username: SQL Server authentication login.
        password: SQL Server authentication password.
        encrypt: Whether the connection is encrypted.
        trust_server_certificate: Whether server certificate validation is skipped.
        driver: ODBC driver name passed to pyodbc.
    """

    host: str
    database: str
    application_name: str
    username: str
    password: str = field(repr=False)
    encrypt: bool
    trust_server_certificate: bool
    driver: str = SQL_SERVER_DEFAULT_DRIVER

    def db_render_url(self) -> URL:
        """Render the configuration as a SQLAlchemy URL.

        Returns:
            URL: `mssql+pyodbc` URL carrying credentials and transport options.

        Raises:
            ValueError: Raised when SQLAlchemy rejects URL components.
        """

        return URL.create(
            SQL_SERVER_DIALECT,
            username=self.username,
            password=self.password,
            host=self.host,
            database=self.database,
            query={
                "driver": self.driver,
                "Encrypt": _db_render_flag(self.encrypt),
                "TrustServerCertificate": _db_render_flag(self.trust_server_certificate),
                "APP": self.application_name,
            },
        )

    def db_target_label(self) -> str:
        """Describe the target and transport posture without credentials.

        Returns:
            str: Label such as `db1/sales application=reportgen encrypt=no trust_server_certificate=yes`.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return (
            f"{self.host}/{self.database} application={self.application_name} "
            f"encrypt={_db_render_flag(self.encrypt)} "
            f"trust_server_certificate={_db_render_flag(self.trust_server_certificate)}"
        )
