from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides specialized handler factories, the ANSI console formatter and the
internal tagging mechanism that lets the application distinguish its own
logging infrastructure from external or library-injected handlers.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional, TextIO

from treeseed.infra.logging.config import SUCCESS

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_treeseed_handler"

_RESET = "\033[0m"
_LEVEL_COLORS: Dict[int, str] = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[34m",
    SUCCESS: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}


# ==============================================================================
# FORMATTERS
# ==============================================================================

class ColorFormatter(logging.Formatter):
    """
    Wrap each formatted record in the ANSI color of its level.

    Records flagged with `plain=True` (see SeedLogger.plain) are left
    uncolored.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if getattr(record, "plain", False):
            return message
        color = _LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{_RESET}"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed application handler.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was initialized by this diagnostic module.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(
        level_int: int,
        fmt: str,
        color: bool,
        stream: Optional[TextIO] = None,
) -> logging.StreamHandler:
    """
    Initialize the stderr handler, colorized only when attached to a TTY.
    """
    target = stream or sys.stderr
    sh = logging.StreamHandler(target)
    sh.setLevel(level_int)
    use_color = color and hasattr(target, "isatty") and target.isatty()
    sh.setFormatter(ColorFormatter(fmt) if use_color else logging.Formatter(fmt))
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler with robust error handling.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if I/O fails.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
        fh.setLevel(level_int)
        fh.setFormatter(formatter)
        _tag_handler(fh)
        return fh
    except OSError as e:
        sys.stderr.write(f"WARNING: Log file unavailable at '{log_file}': {e}\n")
        return None


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    """
    Safely create the parent directory hierarchy for a target file.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
