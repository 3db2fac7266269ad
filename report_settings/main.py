"""Main module entrypoint for settings verification.

This module loads the secret blob from the environment and reports the derived
database target and email configuration.
"""

import argparse
import logging
from typing import Sequence

from report_settings.config import config_load_settings
from report_settings.db import SqlTransportPolicy, db_check_health, db_create_engine
from report_settings.errors import EmailAddressError
from report_settings.log_webhook import log_configure

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_NAME = "report-settings"


def main(argv: Sequence[str] | None = None) -> None:
    """Run selected command with validated startup configuration.

    Args:
        argv: Optional argument list. Defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        ConfigurationError: Raised when the secret blob cannot be loaded.
        SystemExit: Raised with code 1 when a command fails.
    """

    argument_parser = argparse.ArgumentParser(description="Report settings verification entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="check",
        choices=("check", "db-health"),
        help="Runtime command: `check` prints derived configuration, `db-health` verifies database connectivity",
        type=str,
    )
    argument_parser.add_argument(
        "--application-name",
        dest="application_name",
        default=DEFAULT_APPLICATION_NAME,
        type=str,
        help="Application name reported to the database server",
    )
    argument_parser.add_argument(
        "--strict-transport",
        dest="strict_transport",
        action="store_true",
        help="Encrypt the database connection and validate the server certificate",
    )
    argument_parser.add_argument(
        "--webhook-logging",
        dest="webhook_logging",
        action="store_true",
        help="Deliver error log records to the configured log webhook. Handlers attach once "
        "settings are loaded, so settings-loading records are not delivered",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    if parsed_arguments.webhook_logging:
        log_configure(settings)
        logger.info(
            "Webhook logging configured for command=%s application=%s database=%s",
            parsed_arguments.command,
            parsed_arguments.application_name,
            settings.database_name,
        )
    transport = SqlTransportPolicy.strict() if parsed_arguments.strict_transport else None
    sql_config = settings.get_sql_settings(parsed_arguments.application_name, transport=transport)

    if parsed_arguments.command == "db-health":
        engine = db_create_engine(sql_config)
        try:
            health_report = db_check_health(engine, sql_config)
        except ConnectionError as error:
            print(f"DATABASE_UNAVAILABLE: {error}")
            raise SystemExit(1) from error
        finally:
            engine.dispose()
        print(f"DATABASE_{health_report.status.upper()}: {health_report.detail}")
        return

    print("database:", sql_config.db_render_url().render_as_string(hide_password=True))
    try:
        sender = settings.get_email_sender()
        destinations = settings.get_email_destinations()
    except EmailAddressError as error:
        print("INVALID_EMAIL_ADDRESS:", error)
        raise SystemExit(1) from error
    print("sender:", sender.formatted())
    for destination in destinations:
        print("destination:", destination.address)


if __name__ == "__main__":
    main()
