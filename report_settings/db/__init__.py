"""Database layer package for SQL Server connectivity boundaries."""

from .connection import (
	SQL_SERVER_DEFAULT_DRIVER,
	SQL_SERVER_DIALECT,
	SQL_TRANSPORT_POLICY_LEGACY,
	SqlConnectionConfig,
	SqlTransportPolicy,
)
from .health import db_check_health
from .session import db_create_engine

__all__ = [
	"SQL_SERVER_DEFAULT_DRIVER",
	"SQL_SERVER_DIALECT",
	"SQL_TRANSPORT_POLICY_LEGACY",
	"SqlConnectionConfig",
	"SqlTransportPolicy",
	"db_check_health",
	"db_create_engine",
]
