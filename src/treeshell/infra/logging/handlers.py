from __future__ import annotations

"""
Logging Handler Factories.

Builds the sink handlers (stderr console, rotating log file) drained by the
queue listener, and tags them so reconfiguration only detaches handlers the
shell installed itself.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from treeshell.infra.logging.config import LoggingConfig, parse_level

HANDLER_TAG = "_treeshell_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_TAG, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG, False))


def build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create every sink requested by 'cfg'.

    A log file that cannot be opened is reported on stderr and left out,
    so a bad '--log-file' path never prevents the shell from starting.

    Args:
        cfg: Logging settings.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    root_level = parse_level(cfg.level)
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(parse_level(cfg.console_level, default=root_level))
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(tag_handler(console))

    if cfg.log_file:
        file_handler = _open_log_file(cfg)
        if file_handler is not None:
            file_handler.setLevel(root_level)
            file_handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            sinks.append(tag_handler(file_handler))

    return sinks


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    path = os.path.abspath(cfg.log_file or "")
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{path}': {e}\n")
        return None
