from __future__ import annotations

"""
Namespace Error Models.

Every recoverable failure of the namespace core is raised as a
NamespaceError tagged with an ErrorKind. The shell dispatcher catches it at
the operation boundary and reports it as a failed CommandResult.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of recoverable namespace failures."""
    INVALID_PATHNAME = "invalid_pathname"
    NOT_A_DIRECTORY = "not_a_directory"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    NOT_EMPTY = "not_empty"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_DIRECTORY = "invalid_directory"
    PERSISTENCE_FAILURE = "persistence_failure"
    INVALID_RECORD = "invalid_record"
    INVALID_COMMAND = "invalid_command"


class NamespaceError(Exception):
    """
    Recoverable failure raised by a namespace operation.

    Attributes:
        kind: Failure classification.
        message: Human readable description.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.message!r})"


class PersistenceError(NamespaceError):
    """Reading or writing the persisted namespace file failed."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.PERSISTENCE_FAILURE, message)
