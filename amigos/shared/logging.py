"""
Logging configuration for the application.

One stdout handler for everything: application modules, uvicorn and
SQLAlchemy statement logging all share the same format.
Never logs message contents or raw payloads.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.pool")
SQL_LOGGER = "sqlalchemy.engine"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure application logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        sql_echo: Emit every SQL statement at INFO through the shared handler.
    """
    root_level = logging.getLevelName(level.upper())
    if not isinstance(root_level, int):
        root_level = logging.INFO

    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Statement logging is driven by level, never by engine echo.
    logging.getLogger(SQL_LOGGER).setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
