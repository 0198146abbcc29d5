"""
Desk map error handler module.

Provides a consistent pattern for reporting problems from the viewport core
and its host. The core never raises for bad runtime input; it reports a
diagnostic here and degrades to a no-op.
"""

import logging

logger = logging.getLogger("deskmap.error_handler")


class ErrorHandler:
    """Centralized diagnostic reporting for the desk map."""

    @staticmethod
    def show_warning(message: str, title: str = "Warning") -> None:
        """Log a warning message."""
        logger.warning(f"[{title}] {message}")

    @staticmethod
    def show_info(message: str, title: str = "Info") -> None:
        """Log an info message."""
        logger.info(f"[{title}] {message}")
