"""
Use case for creating an empty file.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort


class CreateFileUseCase(CommandHandlerPort):
    """Use case behind ``touch``. Existing files are left untouched."""

    name = "touch"
    usage = "touch <name>"
    description = "Create a new file"

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        if not argument:
            return CommandResult.message(
                session, "Please provide a file name.", ErrorKind.USAGE
            )

        path = self._file_system.resolve(session.current_directory, argument)
        self._logger.info(f"Creating file: {path}")
        result = self._file_system.create_file(path)
        if result.ok:
            return CommandResult.message(
                session, f"File created: {os.path.basename(path)}"
            )
        if result.error is ErrorKind.ALREADY_EXISTS:
            return CommandResult.message(
                session, "File already exists.", ErrorKind.ALREADY_EXISTS
            )

        self._logger.warning(f"touch failed for {path}: {result.message}")
        return CommandResult.message(
            session,
            f"Could not create file: {result.message}",
            ErrorKind.OPERATION_FAILED,
        )
