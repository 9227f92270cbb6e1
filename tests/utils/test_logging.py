"""Tests for the logging helpers."""

import logging

import pytest

from spatialclust.utils.logging import QUIET_LOGGERS, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_log_file_directories_are_created(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "run" / "clustering.log"
    setup_logging("INFO", str(log_file))

    get_logger("spatialclust.tests").warning("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file.exists()
    assert "WARNING - written to file" in log_file.read_text()


def test_debug_run_keeps_plotting_loggers_quiet(restore_logging):
    setup_logging("debug")
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_unknown_level(restore_logging):
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_get_logger_uses_module_name():
    assert get_logger("spatialclust.core").name == "spatialclust.core"
