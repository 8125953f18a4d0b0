"""
Use case for creating a single directory level.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort


class MakeDirectoryUseCase(CommandHandlerPort):
    """Use case behind ``mkdir``."""

    name = "mkdir"
    usage = "mkdir <name>"
    description = "Create a new directory"

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
        Create one directory; parents are never created.

        Every failure cause (exists, missing parent, permission) is reported
        with the same message.
        """
        if not argument:
            return CommandResult.message(
                session, "Please provide a name for the directory.", ErrorKind.USAGE
            )

        path = self._file_system.resolve(session.current_directory, argument)
        self._logger.info(f"Creating directory: {path}")
        result = self._file_system.create_directory(path)
        if result.ok:
            return CommandResult.message(
                session, f"Directory created: {os.path.basename(path)}"
            )

        self._logger.warning(f"mkdir failed for {path}: {result.message}")
        return CommandResult.message(
            session,
            "Failed to create directory. It may already exist.",
            ErrorKind.OPERATION_FAILED,
        )
