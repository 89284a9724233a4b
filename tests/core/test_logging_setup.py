"""Tests for setup_logging."""

import logging
from typing import Iterator

import pytest

from app.core.config import Settings
from app.core.logging import LOG_FORMAT, QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Put the root and library loggers back the way pytest left them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    library_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, library_level in library_levels.items():
        logging.getLogger(name).setLevel(library_level)


class TestSetupLogging:
    def test_installs_single_stdout_handler(self) -> None:
        setup_logging("INFO")

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT

    def test_library_loggers_quiet_outside_debug(self) -> None:
        setup_logging("INFO")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("aiosmtplib").level == logging.WARNING

    def test_debug_opens_library_loggers(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_second_call_applies_new_level(self) -> None:
        setup_logging("INFO")
        setup_logging("ERROR")

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1


class TestLogLevelSetting:
    def test_defaults_to_info(self) -> None:
        assert Settings(_env_file=None).log_level == "INFO"

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, log_level="LOUD")
