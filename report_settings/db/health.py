"""Connectivity check for the configured SQL Server target."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from report_settings.domain import DatabaseHealthReport

from .connection import SqlConnectionConfig


def db_check_health(engine: Engine, sql_config: SqlConnectionConfig) -> DatabaseHealthReport:
    """Run a lightweight query against the database described by `sql_config`.

    The engine is normally built from the same configuration with
    `db_create_engine`. It is passed separately so callers own its disposal.

    Args:
        engine: SQLAlchemy engine connected to the target.
        sql_config: Connection configuration the engine was built from.

    Returns:
        DatabaseHealthReport: Checked target, transport posture and summary.

    Raises:
        ConnectionError: Raised when the query fails; the message names the target.
    """

    target_label = sql_config.db_target_label()
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as error:
        raise ConnectionError(f"database connectivity check failed for {target_label}") from error

    return DatabaseHealthReport(
        status="ok",
        server=sql_config.host,
        database=sql_config.database,
        application_name=sql_config.application_name,
        encrypted=sql_config.encrypt,
        trust_server_certificate=sql_config.trust_server_certificate,
        detail=f"connectivity verified for {target_label}",
    )
