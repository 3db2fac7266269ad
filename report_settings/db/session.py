"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine

from .connection import SqlConnectionConfig


def db_create_engine(sql_config: SqlConnectionConfig) -> Engine:
    """Create the SQLAlchemy engine for a SQL Server database.

    Args:
        sql_config: Connection configuration built from report settings.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the configuration has a blank host.
    """

    if not sql_config.host.strip():
        raise ValueError("sql_config.host must not be blank")

    return create_engine(sql_config.db_render_url(), pool_pre_ping=True)
