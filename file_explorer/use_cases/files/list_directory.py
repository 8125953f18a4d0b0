"""
Use case for listing the current directory.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort

EMPTY_MESSAGE = "Directory is empty."


class ListDirectoryUseCase(CommandHandlerPort):
    """Use case behind ``ls``."""

    name = "ls"
    usage = "ls"
    description = "List directory contents"

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for file system operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        """
        List the immediate children of the session's directory.

        The argument is ignored. An unreadable directory and an empty one
        both print the same message.
        """
        directory = session.current_directory
        self._logger.info(f"Listing files in directory: {directory}")
        result = self._file_system.list_entries(directory)
        if not result.ok or not result.value:
            if not result.ok:
                self._logger.warning(f"Listing failed: {result.message}")
            return CommandResult.message(session, EMPTY_MESSAGE, result.error)

        self._logger.info(f"Found {len(result.value)} entries")
        return CommandResult(
            session=session, lines=[entry.display_line() for entry in result.value]
        )
