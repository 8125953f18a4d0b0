"""
Use case for deleting a file or an empty directory.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort


class DeleteEntryUseCase(CommandHandlerPort):
    """Use case behind ``rm``."""

    name = "rm"
    usage = "rm <name>"
    description = "Delete file or directory"

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        """
        Delete ``argument``. Non-empty directories are refused, not emptied.
        """
        if not argument:
            return CommandResult.message(
                session,
                "Please specify a file or directory to delete.",
                ErrorKind.USAGE,
            )

        path = self._file_system.resolve(session.current_directory, argument)
        if not self._file_system.exists(path):
            return CommandResult.message(
                session, "File or directory not found.", ErrorKind.NOT_FOUND
            )

        self._logger.info(f"Deleting: {path}")
        result = self._file_system.delete(path)
        if result.ok:
            return CommandResult.message(session, f"Deleted: {os.path.basename(path)}")

        self._logger.warning(f"rm failed for {path}: {result.message}")
        return CommandResult.message(
            session,
            "Could not delete. Make sure it's empty or not locked.",
            ErrorKind.OPERATION_FAILED,
        )
