"""Tests for SQL Server connection configuration and connectivity checks."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from report_settings.config import ReportSettings, config_parse_settings
from report_settings.db import (
    SQL_SERVER_DEFAULT_DRIVER,
    SqlConnectionConfig,
    SqlTransportPolicy,
    db_check_health,
    db_create_engine,
)


def _db_build_settings() -> ReportSettings:
    """Build settings with deterministic database credentials.

    Returns:
        ReportSettings: Parsed settings record.

    Raises:
        ConfigurationError: Never raised for this fixed payload.
    """

    return config_parse_settings(
        json.dumps(
            {
                "DatabaseServer": "db1",
                "DatabaseName": "sales",
                "DatabaseUsername": "u",
                "DatabasePassword": "p@ss;word",
                "LogWebhookUri": "https://hooks.example.test/log",
                "SendgridApiKey": "SG.secret",
                "EmailFromName": "Report Bot",
                "EmailFromAddress": "reports@x.com",
                "EmailToAddresses": "a@x.com",
            }
        )
    )


def test_db_get_sql_settings_maps_fields_with_legacy_transport() -> None:
    """Map settings fields and apply encryption off with certificate trust on.

    Returns:
        None: Assertions validate field mapping and default transport flags.

    Raises:
        AssertionError: Raised when mapping or transport flags are incorrect.
    """

    sql_config = _db_build_settings().get_sql_settings("reportgen")

    assert sql_config.host == "db1"
    assert sql_config.database == "sales"
    assert sql_config.application_name == "reportgen"
    assert sql_config.username == "u"
    assert sql_config.password == "p@ss;word"
    assert sql_config.encrypt is False
    assert sql_config.trust_server_certificate is True
    assert sql_config.driver == SQL_SERVER_DEFAULT_DRIVER


def test_db_get_sql_settings_logs_disabled_encryption(caplog: pytest.LogCaptureFixture) -> None:
    """Warn when the resulting connection is not encrypted."""

    with caplog.at_level(logging.WARNING, logger="report_settings.config.settings"):
        _db_build_settings().get_sql_settings("reportgen")

    assert "encryption disabled" in caplog.text
    assert "p@ss;word" not in caplog.text


def test_db_get_sql_settings_strict_transport_overrides_defaults() -> None:
    """Apply an explicit transport policy and driver override.

    Returns:
        None: Assertions validate strict transport flags.

    Raises:
        AssertionError: Raised when the override is ignored.
    """

    sql_config = _db_build_settings().get_sql_settings(
        "reportgen",
        transport=SqlTransportPolicy.strict(),
        driver="ODBC Driver 17 for SQL Server",
    )

    assert sql_config.encrypt is True
    assert sql_config.trust_server_certificate is False
    assert sql_config.db_render_url().query["Encrypt"] == "yes"
    assert sql_config.db_render_url().query["TrustServerCertificate"] == "no"
    assert sql_config.db_render_url().query["driver"] == "ODBC Driver 17 for SQL Server"


def test_db_render_url_carries_credentials_and_transport_options() -> None:
    """Render a pyodbc URL with SQL Server authentication and query options.

    Returns:
        None: Assertions validate URL components.

    Raises:
        AssertionError: Raised when URL rendering is incorrect.
    """

    url = _db_build_settings().get_sql_settings("reportgen").db_render_url()

    assert url.drivername == "mssql+pyodbc"
    assert url.host == "db1"
    assert url.database == "sales"
    assert url.username == "u"
    assert url.password == "p@ss;word"
    assert dict(url.query) == {
        "driver": SQL_SERVER_DEFAULT_DRIVER,
        "Encrypt": "no",
        "TrustServerCertificate": "yes",
        "APP": "reportgen",
    }
    assert "p@ss;word" not in url.render_as_string(hide_password=True)


def test_db_sql_connection_config_repr_hides_password() -> None:
    """Keep the password out of the dataclass representation."""

    sql_config = _db_build_settings().get_sql_settings("reportgen")

    assert "p@ss;word" not in repr(sql_config)


def test_db_create_engine_rejects_blank_host() -> None:
    """Reject configurations without a server host.

    Returns:
        None: Assertions validate argument checking.

    Raises:
        AssertionError: Raised when a blank host is accepted.
    """

    sql_config = SqlConnectionConfig(
        host="  ",
        database="sales",
        application_name="reportgen",
        username="u",
        password="p",
        encrypt=False,
        trust_server_certificate=True,
    )

    with pytest.raises(ValueError, match="host must not be blank"):
        db_create_engine(sql_config)


def test_db_target_label_names_target_and_transport_without_password() -> None:
    """Describe server, database, application and transport flags."""

    sql_config = _db_build_settings().get_sql_settings("reportgen")

    assert sql_config.db_target_label() == (
        "db1/sales application=reportgen encrypt=no trust_server_certificate=yes"
    )
    assert "p@ss;word" not in sql_config.db_target_label()


def test_db_check_health_reports_checked_target_for_reachable_engine() -> None:
    """Return the checked target and transport posture when the query succeeds.

    Returns:
        None: Assertions validate the health report.

    Raises:
        AssertionError: Raised when the report does not describe the checked target.
    """

    sql_config = _db_build_settings().get_sql_settings("reportgen", transport=SqlTransportPolicy.strict())
    engine = create_engine("sqlite://")
    try:
        health_report = db_check_health(engine, sql_config)
    finally:
        engine.dispose()

    assert health_report.status == "ok"
    assert health_report.server == "db1"
    assert health_report.database == "sales"
    assert health_report.application_name == "reportgen"
    assert health_report.encrypted is True
    assert health_report.trust_server_certificate is False
    assert health_report.detail == (
        "connectivity verified for db1/sales application=reportgen encrypt=yes trust_server_certificate=no"
    )


def test_db_check_health_maps_sqlalchemy_errors_to_connection_error(tmp_path: Path) -> None:
    """Raise ConnectionError naming the target when the database cannot be opened.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when error mapping is incorrect.
    """

    sql_config = _db_build_settings().get_sql_settings("reportgen")
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'report.db'}")
    try:
        with pytest.raises(ConnectionError, match="check failed for db1/sales application=reportgen") as error_info:
            db_check_health(engine, sql_config)
    finally:
        engine.dispose()

    assert isinstance(error_info.value.__cause__, SQLAlchemyError)
    assert "p@ss;word" not in str(error_info.value)
