"""
Result values returned by file system operations and command handlers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

from file_explorer.entities.session import Session

T = TypeVar("T")


class ErrorKind(Enum):
    """Why an operation or command did not succeed."""

    USAGE = "usage"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    OPERATION_FAILED = "operation_failed"
    UNKNOWN_COMMAND = "unknown_command"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class FsResult(Generic[T]):
    """Outcome of a single file system call: a value or an error kind."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "FsResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> "FsResult[T]":
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CommandResult:
    """What a command hands back to the loop: next state and lines to print."""

    session: Session
    lines: list[str] = field(default_factory=list)
    finished: bool = False
    error: Optional[ErrorKind] = None

    @classmethod
    def message(
        cls, session: Session, text: str, error: Optional[ErrorKind] = None
    ) -> "CommandResult":
        return cls(session=session, lines=[text], error=error)
