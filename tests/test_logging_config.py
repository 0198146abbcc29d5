"""
Tests for logging setup and diagnostic reporting.
"""
import logging
import logging.handlers

import pytest

import logging_config
from error_handler import ErrorHandler
from logging_config import ErrorRaisingHandler, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def logging_settings(monkeypatch, tmp_path):
    """Patch the config's logging section to write under tmp_path."""
    settings = {
        "level": "DEBUG",
        "file": str(tmp_path / "logs" / "deskmap.log"),
        "maxBytes": 1024,
        "backupCount": 1,
        "console": False,
        "raiseOnError": False,
    }
    monkeypatch.setattr(
        logging_config.config, "get_logging_setting",
        lambda key, default=None: settings.get(key, default),
    )
    return settings


def test_setup_logging_writes_rotating_file(restore_root_logger, logging_settings, tmp_path):
    setup_logging()

    root = restore_root_logger
    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert not any(isinstance(h, ErrorRaisingHandler) for h in root.handlers)

    logging.getLogger("deskmap.test").info("hello from the viewport")
    file_handlers[0].flush()
    text = (tmp_path / "logs" / "deskmap.log").read_text()
    assert "hello from the viewport" in text
    assert "deskmap.test - INFO" in text


def test_console_handler_level(restore_root_logger, logging_settings):
    logging_settings["console"] = True
    logging_settings["consoleLevel"] = "WARNING"
    setup_logging()

    console = [h for h in restore_root_logger.handlers
               if type(h) is logging.StreamHandler]
    assert len(console) == 1
    assert console[0].level == logging.WARNING


def test_raise_on_error(restore_root_logger, logging_settings):
    setup_logging(raise_on_error=True)

    with pytest.raises(RuntimeError, match="boom"):
        logging.getLogger("deskmap.test").error("boom")

    # Warnings pass through
    ErrorHandler.show_warning("just a warning")


def test_error_handler_formats_title(caplog):
    with caplog.at_level(logging.INFO, logger="deskmap.error_handler"):
        ErrorHandler.show_warning("viewport has zero width", title="Viewport")
        ErrorHandler.show_info("loaded")

    messages = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.WARNING, "[Viewport] viewport has zero width") in messages
    assert (logging.INFO, "[Info] loaded") in messages


def test_unwritable_log_file_keeps_running(restore_root_logger, logging_settings, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    logging_settings["file"] = str(blocker / "deskmap.log")

    setup_logging()

    assert not any(isinstance(h, logging.handlers.RotatingFileHandler)
                   for h in restore_root_logger.handlers)
    assert "Could not open desk map log file" in capsys.readouterr().out
