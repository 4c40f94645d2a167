from __future__ import annotations

from .config import SUCCESS, LoggingConfig
from .core import (
    SeedLogger,
    configure_logging,
    get_logger,
    get_seed_logger,
    shutdown_logging,
)

__all__ = [
    "SUCCESS",
    "LoggingConfig",
    "SeedLogger",
    "configure_logging",
    "get_logger",
    "get_seed_logger",
    "shutdown_logging",
]
