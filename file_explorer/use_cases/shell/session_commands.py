"""
Commands that act on the shell itself rather than on the file system.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.result import CommandResult
from file_explorer.entities.session import Session
from file_explorer.ports.command_handler_port import CommandHandlerPort
from file_explorer.use_cases.shell.registry import CommandRegistry

USAGE_COLUMN = 16


class HelpUseCase(CommandHandlerPort):
    """Print one usage line per registered command."""

    name = "help"
    usage = "help"
    description = "Show this help message"

    def __init__(
        self, registry: CommandRegistry, logger: Optional[logging.Logger] = None
    ) -> None:
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def help_lines(self) -> list[str]:
        lines = ["Available commands:"]
        for handler in self._registry.handlers():
            lines.append(f"  {handler.usage:<{USAGE_COLUMN}}{handler.description}")
        # trailing blank line after the block
        lines.append("")
        return lines

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        self._logger.info("Showing help")
        return CommandResult(session=session, lines=self.help_lines())


class ExitUseCase(CommandHandlerPort):
    name = "exit"
    usage = "exit"
    description = "Exit the program"

    @override
    def execute(self, session: Session, argument: str) -> CommandResult:
        return CommandResult(session=session, lines=["Goodbye."], finished=True)
