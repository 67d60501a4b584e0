from __future__ import annotations

"""
Shell Domain Data Models.

Defines the closed set of shell commands and the result object exchanged
between the command dispatcher and the REPL, together with its factories.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from treeshell.domain.errors import ErrorKind

# -----------------------------------------------------------------------------
# COMMAND SET
# -----------------------------------------------------------------------------

class Command(str, Enum):
    """Every command understood by the shell, keyed by its keyword."""
    MKDIR = "mkdir"
    RMDIR = "rmdir"
    LS = "ls"
    CD = "cd"
    PWD = "pwd"
    CREAT = "creat"
    RM = "rm"
    SAVE = "save"
    RELOAD = "reload"
    MENU = "menu"
    QUIT = "quit"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional[Command]:
        """Look up a command by keyword (case-insensitive), None if unknown."""
        try:
            return cls(keyword.strip().lower())
        except ValueError:
            return None

    @property
    def requires_argument(self) -> bool:
        return self in _ARGUMENT_REQUIRED


_ARGUMENT_REQUIRED = frozenset({Command.MKDIR, Command.RMDIR, Command.CREAT, Command.RM})

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a single dispatched shell command.

    Attributes:
        ok: Flag indicating success or failure.
        output: Human readable lines to print on stdout.
        error: Descriptive message in case of failure.
        error_kind: Failure classification, None on success.
    """
    ok: bool
    output: List[str] = field(default_factory=list)
    error: str = ""
    error_kind: Optional[ErrorKind] = None

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(output: Optional[List[str]] = None) -> CommandResult:
    """
    Create a successful command result.

    Args:
        output: Lines produced by the command, if any.

    Returns:
        CommandResult: An immutable success result object.
    """
    return CommandResult(ok=True, output=list(output or []))


def create_error_result(
        kind: ErrorKind,
        error: str,
        output: Optional[List[str]] = None,
) -> CommandResult:
    """
    Create a failed command result.

    Args:
        kind: Failure classification.
        error: Detailed error description.
        output: Lines produced before the failure, if any.

    Returns:
        CommandResult: An immutable error result object.
    """
    return CommandResult(ok=False, output=list(output or []), error=error, error_kind=kind)
