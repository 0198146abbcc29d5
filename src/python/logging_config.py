"""
Logging setup for the desk map viewer.

The viewport core only ever logs through module loggers: gesture transitions
at DEBUG, rejected updates and unusable viewports at WARNING. This module
wires those loggers to their outputs once, at startup, from the ``logging``
section of config.json:

    level          Root level for the desk map (default INFO)
    file           Rotating log file (default logs/deskmap.log)
    maxBytes       Size at which the file rotates
    backupCount    Rotated files to keep
    console        Echo records to stderr
    consoleLevel   Threshold for the stderr echo (default CRITICAL, so the
                   viewer stays quiet in a terminal)
    raiseOnError   Turn ERROR records into RuntimeError during development
"""

import logging
import logging.handlers
from pathlib import Path
from config_manager import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ErrorRaisingHandler(logging.Handler):
    """Handler that raises on ERROR or CRITICAL records.

    Warnings from the viewport (degenerate viewports, rejected zooms) pass
    through; only genuine errors such as a broken config stop the viewer.
    """

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            raise RuntimeError(f"Logger error: {record.getMessage()}")


def _level(name: str, fallback: int) -> int:
    return getattr(logging, str(name).upper(), fallback)


def _rotating_file_handler(log_file: str, level: int, formatter: logging.Formatter) -> logging.Handler | None:
    """Rotating file handler for ``log_file``, or None if it can't be opened."""
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.get_logging_setting("maxBytes", 1048576),
            backupCount=config.get_logging_setting("backupCount", 3),
            encoding='utf-8'
        )
    except OSError as e:
        # The viewer still runs without a log file
        print(f"Warning: Could not open desk map log file {log_file}: {e}")
        return None
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(raise_on_error: bool = None):
    """Configure the root logger for the desk map viewer.

    Replaces any existing root handlers, so calling it again (for example
    after ``--debug``) starts from a clean slate.

    Args:
        raise_on_error: Overrides the config's ``raiseOnError`` when given
    """
    level_name = config.get_logging_setting("level", "INFO")
    log_level = _level(level_name, logging.INFO)
    log_file = config.get_logging_setting("file", "logs/deskmap.log")

    if raise_on_error is None:
        raise_on_error = config.get_logging_setting("raiseOnError", True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if config.get_logging_setting("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(config.get_logging_setting("consoleLevel", "CRITICAL"), logging.CRITICAL))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    file_handler = _rotating_file_handler(log_file, log_level, formatter)
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    if raise_on_error:
        root_logger.addHandler(ErrorRaisingHandler())

    root_logger.info("Desk map logging ready - level %s, file %s, raise on error %s",
                     level_name, log_file if file_handler is not None else "(none)", raise_on_error)
