from __future__ import annotations

"""
Logging Lifecycle.

Installs a single QueueHandler on the root logger and drains it through a
QueueListener, so writing the log file never delays the prompt. The
listener is remembered on the root logger, which makes configuration
idempotent and lets shutdown_logging() undo it cleanly.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from treeshell.infra.fs import get_user_data_dir
from treeshell.infra.logging.config import LoggingConfig, parse_level
from treeshell.infra.logging.handlers import build_handlers, is_tagged, tag_handler

_LISTENER_ATTR = "_treeshell_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "treeshell.log") -> str:
    """Location of the log file used by '--log-file' without a path."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route the root logger through a queue to the sinks described by 'cfg'.

    Repeated calls are no-ops unless 'force' is set, in which case the
    previous listener and handlers are torn down first.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if active_listener() is not None and not force:
        return root

    shutdown_logging()
    try:
        sinks = build_handlers(cfg)
        if not sinks:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
        listener.start()

        root.setLevel(parse_level(cfg.level))
        root.addHandler(tag_handler(QueueHandler(log_queue)))
        setattr(root, _LISTENER_ATTR, listener)
        atexit.register(_stop_listener, listener)
    except Exception:
        _install_emergency_console(root)

    return root


def shutdown_logging() -> None:
    """Flush and stop the listener, then detach the shell's handlers."""
    root = logging.getLogger()
    _stop_listener(getattr(root, _LISTENER_ATTR, None))
    setattr(root, _LISTENER_ATTR, None)

    for handler in [h for h in root.handlers if is_tagged(h)]:
        root.removeHandler(handler)
        handler.close()


def active_listener() -> Optional[QueueListener]:
    """The running QueueListener, or None when logging is not configured."""
    return getattr(logging.getLogger(), _LISTENER_ATTR, None)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() fails on a listener whose thread was already joined
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()


def _install_emergency_console(root: logging.Logger) -> None:
    shutdown_logging()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("LOGGING FALLBACK | %(levelname)s | %(message)s"))
    root.setLevel(logging.INFO)
    root.addHandler(tag_handler(console))
    root.warning("Logging setup failed, using a plain console handler.")
