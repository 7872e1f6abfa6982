"""
Tests for application logging setup.
"""

import logging

import pytest

from logging_config import (
    LogContext, SUBSYSTEM_LOGGERS, configure_module_logger, configure_subsystem,
    log_exception, setup_logging
)
from scheduling.scheduling_exceptions import GamePlacementError


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:

    def test_console_only(self, restore_root_logger):
        setup_logging(level="WARNING", enable_console=True, enable_file=False)

        root = restore_root_logger
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_file_handlers(self, restore_root_logger, tmp_path):
        setup_logging(level="DEBUG", log_dir=str(tmp_path), enable_console=False, enable_file=True)

        assert len(restore_root_logger.handlers) == 3
        assert (tmp_path / "gridiron_gm.log").exists()
        assert (tmp_path / "gridiron_gm_debug.log").exists()
        assert (tmp_path / "gridiron_gm_error.log").exists()

    def test_unknown_level(self, restore_root_logger):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD", enable_console=False)


class TestModuleLoggers:

    def test_configure_module_logger(self):
        logger = configure_module_logger("scheduling.placement", level="DEBUG")
        try:
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(logging.NOTSET)

    def test_configure_subsystem(self):
        loggers = configure_subsystem("playoffs", level="ERROR")
        try:
            assert [logger.name for logger in loggers] == SUBSYSTEM_LOGGERS['playoffs']
            assert all(logger.level == logging.ERROR for logger in loggers)
        finally:
            for logger in loggers:
                logger.setLevel(logging.NOTSET)

    def test_unknown_subsystem(self):
        with pytest.raises(KeyError):
            configure_subsystem("broadcast")

    def test_log_context_restores_level(self):
        logger = logging.getLogger("season.season_simulator")
        original = logger.level

        with LogContext(logger, "DEBUG"):
            assert logger.level == logging.DEBUG
        assert logger.level == original


class TestLogException:

    def test_includes_error_code(self, caplog):
        logger = logging.getLogger("tests.log_exception")
        error = GamePlacementError("No week accepts game", seed=4)

        with caplog.at_level(logging.ERROR, logger="tests.log_exception"):
            log_exception(logger, error, context={"year": 2025})

        assert "year=2025" in caplog.text
        assert "error_code=SCHED_PLACE_002" in caplog.text
        assert "GamePlacementError" in caplog.text
