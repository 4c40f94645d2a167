from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem and provides the
SeedLogger collaborator handed to the planting engine. Records are routed
through a Queue so that file writes never block the planting walk.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Any, List, Optional

from treeseed.infra.logging.config import _LEVEL_MAP, SUCCESS, LoggingConfig
from treeseed.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_treeseed_configured"
_QUEUE_LISTENER_ATTR: str = "_treeseed_queue_listener"


# ==============================================================================
# LOGGER COLLABORATOR
# ==============================================================================

class SeedLogger(logging.LoggerAdapter):
    """
    Leveled, printf-style logger passed explicitly to each planting run.

    Adds the SUCCESS level and uncolored 'plain' messages on top of the
    standard logging.Logger methods.
    """

    def __init__(self, logger: logging.Logger):
        super().__init__(logger, {})

    def process(self, msg: Any, kwargs: Any) -> Any:
        return msg, kwargs

    def success(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(SUCCESS, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.warning(msg, *args, **kwargs)

    def plain(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Informational message rendered without level color."""
        extra = dict(kwargs.pop("extra", None) or {})
        extra["plain"] = True
        self.info(msg, *args, extra=extra, **kwargs)


def get_seed_logger(name: str = "treeseed") -> SeedLogger:
    """
    Build a fresh SeedLogger over the named standard logger.

    Args:
        name: Hierarchical logger name.

    Returns:
        SeedLogger: A new adapter; no state is shared between instances.
    """
    return SeedLogger(logging.getLogger(name))


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the root logger using non-blocking I/O.

    Checks internal flags to avoid redundant handler attachments unless
    explicit re-configuration is requested.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    # 1. Idempotency Check
    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    # 2. Handler Definition
    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(_create_console_handler(level_int, cfg.console_fmt, cfg.color))

    if cfg.log_file:
        file_formatter = logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt)
        # The file keeps the full DEBUG trail regardless of console verbosity
        fh = _create_rotating_file_handler(
            cfg.log_file,
            logging.DEBUG,
            file_formatter,
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)
            root.setLevel(logging.DEBUG)

    if not handlers_list:
        return root

    # 3. Queue-Based Orchestration (Non-blocking I/O)
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """Stop the listener and detach our handlers, flushing queued records."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers from the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    The internal thread is set to None after a stop, so atexit hooks and
    explicit shutdowns can both run without error.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()

