"""Logging setup with webhook delivery to the configured log endpoint."""

from __future__ import annotations

import json
import logging
from typing import Final
from urllib.request import Request, urlopen

from report_settings.config import ReportSettings

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_ROOT_NAME: Final[str] = "report_settings"


class WebhookLogHandler(logging.Handler):
    """Logging handler that posts each record as JSON to a webhook.

    The payload is `{"text": <formatted record>}`. Formatting and delivery
    failures are routed through `logging.Handler.handleError`, matching the
    standard library handlers.
    """

    _USER_AGENT: Final[str] = "report-settings/0.1"

    def __init__(self, webhook_uri: str, timeout_seconds: float = 10.0, level: int = logging.NOTSET):
        """Initialize webhook handler.

        Args:
            webhook_uri: Endpoint receiving log records.
            timeout_seconds: HTTP request timeout in seconds.
            level: Minimum record level delivered by this handler.

        Raises:
            ValueError: Raised when the URI is blank or the timeout is not positive.
        """

        normalized_webhook_uri = webhook_uri.strip()
        if not normalized_webhook_uri:
            raise ValueError("webhook_uri must not be blank")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        super().__init__(level=level)
        self._webhook_uri = normalized_webhook_uri
        self._timeout_seconds = timeout_seconds

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.dumps({"text": self.format(record)}).encode("utf-8")
            request = Request(
                self._webhook_uri,
                data=payload,
                method="POST",
                headers={"Content-Type": "application/json", "User-Agent": self._USER_AGENT},
            )
            with urlopen(request, timeout=self._timeout_seconds) as response:
                status_code = int(response.getcode() or 200)
            if status_code >= 400:
                raise ConnectionError(f"Log webhook returned HTTP {status_code}")
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def log_configure(
    settings: ReportSettings,
    level: int = logging.INFO,
    webhook_level: int = logging.ERROR,
) -> logging.Logger:
    """Configure the package logger with console and webhook output.

    Calling this again after handlers were attached returns the logger unchanged.

    Args:
        settings: Loaded report settings providing the webhook URI.
        level: Minimum level for the package logger and console output.
        webhook_level: Minimum level delivered to the webhook.

    Returns:
        logging.Logger: Configured `report_settings` logger.

    Raises:
        ValueError: Raised when the configured webhook URI is blank.
    """

    logger = logging.getLogger(LOG_ROOT_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    webhook_handler = WebhookLogHandler(settings.log_webhook_uri, level=webhook_level)
    webhook_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(webhook_handler)
    logger.propagate = False
    return logger
