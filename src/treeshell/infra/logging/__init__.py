from __future__ import annotations

from .config import LoggingConfig, parse_level
from .core import (
    active_listener,
    configure_logging,
    get_default_log_path,
    get_logger,
    shutdown_logging,
)
from .handlers import is_tagged

__all__ = [
    "LoggingConfig",
    "active_listener",
    "configure_logging",
    "get_default_log_path",
    "get_logger",
    "is_tagged",
    "parse_level",
    "shutdown_logging",
]
