"""
Command handler port interface.
"""

from abc import ABC, abstractmethod

from file_explorer.entities.result import CommandResult
from file_explorer.entities.session import Session


class CommandHandlerPort(ABC):
    """A single shell command: a function of (session, argument) to a result."""

    name: str
    usage: str
    description: str

    @abstractmethod
    def execute(self, session: Session, argument: str) -> CommandResult:
        """
        Run the command.

        Args:
            session: Current session state
            argument: Trimmed remainder of the input line, possibly empty

        Returns:
            CommandResult carrying the next session and the output lines
        """
        pass
