"""
Use case for displaying file metadata.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.ports.file_system_port import FileSystemPort


class FileInfoUseCase(CommandHandlerPort):
    """Use case behind ``info``."""

    name = "info"
    usage = "info <name>"
    description = "Show file details"

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
                session, "Please specify a file name.", ErrorKind.USAGE
            )

        path = self._file_system.resolve(session.current_directory, argument)
        result = self._file_system.stat(path)
        if result.error is ErrorKind.NOT_FOUND:
            return CommandResult.message(session, "File not found.", ErrorKind.NOT_FOUND)
        if not result.ok or result.value is None:
            return CommandResult.message(
                session, f"Error: {result.message}", ErrorKind.UNEXPECTED
            )

        return CommandResult(session=session, lines=result.value.display_lines())
