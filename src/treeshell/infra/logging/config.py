from __future__ import annotations

"""
Logging Configuration Models.

Immutable settings for the logging subsystem, plus the preset used by the
interactive shell where the console must stay free of routine log lines.
"""

import logging
from dataclasses import dataclass
from typing import Optional


def parse_level(level: Optional[str], default: int = logging.INFO) -> int:
    """Translate a severity name ('debug', 'WARN', ...) into its numeric value."""
    if not level:
        return default
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity captured by the root logger (and the file).
        console: Flag to enable stderr stream output.
        console_level: Optional stricter level for the console stream only.
        log_file: Optional path for persistent, rotating file storage.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Structural format for terminal output.
        file_fmt: Structural format for file entries.
        datefmt: Timestamp format for file entries.
    """
    level: str = "INFO"
    console: bool = True
    console_level: Optional[str] = None
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "[%(levelname)s] %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_shell(cls, *, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """
        Build the configuration used by an interactive session.

        Command output shares stdout/stderr with the console handler, so the
        console only reports warnings unless 'debug' is set. The log file,
        when given, always receives the full 'level'.
        """
        return cls(
            level="DEBUG" if debug else "INFO",
            console=True,
            console_level=None if debug else "WARNING",
            log_file=log_file,
        )
