"""
Use case for changing the session's current directory.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort

PARENT = ".."


class ChangeDirectoryUseCase(CommandHandlerPort):
    """Use case behind ``cd``; the only command that produces a new session."""

    name = "cd"
    usage = "cd <dir>"
    description = "Change current directory"

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def _target(self, session: Session, argument: str) -> Optional[str]:
        if argument == PARENT:
            return self._file_system.parent(session.current_directory)
        return self._file_system.resolve(session.current_directory, argument)

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        """
        Move to ``argument``, resolved against the current directory.

        Args:
            session: Current session state
            argument: Relative or absolute directory, or ``..``

        Returns:
            CommandResult with the new session, or the old one and an error line
        """
        if not argument:
            return CommandResult.message(
                session, "Please specify a directory name.", ErrorKind.USAGE
            )

        target = self._target(session, argument)
        if (
            target is not None
            and self._file_system.exists(target)
            and self._file_system.is_directory(target)
        ):
            self._logger.info(f"Changing directory to: {target}")
            return CommandResult(session=session.with_directory(target))

        self._logger.info(f"Directory not found: {argument} (resolved to {target})")
        return CommandResult.message(
            session, f"Directory not found: {argument}", ErrorKind.NOT_FOUND
        )
