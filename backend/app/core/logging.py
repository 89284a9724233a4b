"""Process-wide logging setup for the contact backend.

Everything goes to stdout in one line per record so container logs stay
greppable. Library loggers that chatter per request or per statement are
held at WARNING unless the service runs with DEBUG enabled.
"""

import logging
import sys
from typing import Iterable, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

QUIET_LOGGERS = (
    "httpx",
    "httpcore",
    "uvicorn.access",
    "sqlalchemy.engine",
    "aiosqlite",
    "aiosmtplib",
)


def setup_logging(
    level: LogLevel = "INFO",
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Install the stdout handler on the root logger.

    Replaces handlers installed earlier (by uvicorn or a previous app in
    the same process), so calling it again applies the new level.

    Args:
        level: Root logging level.
        quiet_loggers: Library loggers capped at WARNING when ``level`` is
            not DEBUG.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    library_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
