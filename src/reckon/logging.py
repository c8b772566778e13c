"""
reckon logging setup.

Console output on stderr so log lines never mix with printed results.
Colours follow the log level and are dropped when NO_COLOR is set or the
stream is not a terminal.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import TextIO

# =============================================================================
# Terminal Colors (respects NO_COLOR)
# =============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"

    DEBUG = "\033[36m"  # Cyan
    INFO = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"  # Red
    CRITICAL = "\033[35m"  # Magenta


def _use_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def __init__(self, color: bool = False) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level_name = record.levelname

        if self.color:
            level_color = self.LEVEL_COLORS.get(record.levelno, "")
            prefix = (
                f"{Colors.DIM}{timestamp}{Colors.RESET} "
                f"{level_color}{level_name}{Colors.RESET} [{record.name}]"
            )
        else:
            prefix = f"[{timestamp}] {level_name} [{record.name}]"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


# =============================================================================
# Logger Setup
# =============================================================================


def configure_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a console handler to the ``reckon`` logger.

    Calling it again replaces the previous handler, so the CLI can apply
    the configured level after reading reckon.toml.

    Args:
        level: Minimum log level (number or name)
        stream: Output stream (default: stderr)

    Returns:
        The configured ``reckon`` logger
    """
    stream = stream or sys.stderr

    root_logger = logging.getLogger("reckon")
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ConsoleFormatter(color=_use_color(stream)))
    handler.setLevel(level)
    root_logger.addHandler(handler)

    return root_logger
