"""Logging and error reporting setup."""

import logging
from importlib.metadata import PackageNotFoundError, version
from logging import handlers
from pathlib import Path

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from pastebin_client import constants

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

_ROOT_NAME = "pastebin_client"


def setup() -> None:
    """Set up the package logger, for applications using this package. Calling it again has no further effect."""
    root_log = logging.getLogger(_ROOT_NAME)
    if root_log.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_log.addHandler(stream_handler)

    if constants.FILE_LOGS:
        log_file = Path("logs", f"{_ROOT_NAME}.log")
        log_file.parent.mkdir(exist_ok=True)
        file_handler = handlers.RotatingFileHandler(log_file, maxBytes=5 * 2**20, backupCount=10, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_log.addHandler(file_handler)

    root_log.setLevel(logging.DEBUG if constants.DEBUG_MODE else logging.INFO)


def setup_sentry() -> None:
    """
    Set up the Sentry SDK, if a DSN is configured.

    Meant for applications using this package. Nothing is done if a Sentry client is already active.
    """
    if not constants.Sentry.dsn or sentry_sdk.get_client().is_active():
        return

    sentry_logging = LoggingIntegration(level=logging.DEBUG, event_level=logging.WARNING)

    sentry_sdk.init(
        dsn=constants.Sentry.dsn,
        environment=constants.Sentry.environment or None,
        integrations=[
            sentry_logging,
        ],
        release=f"{constants.Sentry.release_prefix}@{_version()}",
    )


def _version() -> str:
    try:
        return version("pastebin-client")
    except PackageNotFoundError:
        return "development"
