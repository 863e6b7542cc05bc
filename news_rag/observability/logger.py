"""
Process-wide logging setup.

Called once by the app lifespan and by the ingestion command. Modules log
through logging.getLogger(__name__) and inherit this configuration.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "google_genai")


def configure_logging(level: str = "INFO") -> None:
    """
    Route all records to stdout with a single handler.

    Safe to call more than once; previous root handlers are replaced.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.getLevelName(level.upper()) if level else logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
