"""
The read-eval-print loop of the explorer.
"""

import logging
import sys
from typing import Optional, TextIO

from file_explorer.entities.command import Command
from file_explorer.entities.result import CommandResult, ErrorKind
from file_explorer.entities.session import Session
from file_explorer.ui.console import ConsoleWriter, PlainConsoleWriter
from file_explorer.use_cases.shell.registry import CommandRegistry

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' to see the list of commands."


class CommandLoop:
    """
    Reads lines, dispatches them to registered commands and prints the result.

    The session is never stored on the loop: ``step`` takes the current
    session and returns the next one inside its CommandResult, and ``run``
    threads that value from one iteration to the next.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        writer: Optional[ConsoleWriter] = None,
        app_name: str = "Python File Explorer",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._writer = writer or PlainConsoleWriter()
        self._app_name = app_name
        self._logger = logger or logging.getLogger(__name__)

    @property
    def banner(self) -> list[str]:
        return [f"Welcome to {self._app_name}. Type help for available commands.", ""]

    def step(self, session: Session, line: str) -> Optional[CommandResult]:
        """
        Interpret one input line.

        Args:
            session: Session before the command
            line: Raw input line

        Returns:
            The command's result, or None for a blank line
        """
        command = Command.parse(line)
        if command is None:
            return None

        handler = self._registry.get(command.key)
        if handler is None:
            self._logger.info(f"Unknown command: {command.name}")
            return CommandResult.message(
                session, UNKNOWN_COMMAND_MESSAGE, ErrorKind.UNKNOWN_COMMAND
            )

        try:
            return handler.execute(session, command.argument)
        except Exception as e:
            self._logger.error(f"Command '{command.key}' failed: {e}")
            return CommandResult.message(session, f"Error: {e}", ErrorKind.UNEXPECTED)

    def run(self, session: Session, stdin: Optional[TextIO] = None) -> int:
        """
        Run until ``exit`` or end of input.

        Args:
            session: Initial session
            stdin: Stream to read commands from (defaults to sys.stdin)

        Returns:
            Process exit status
        """
        stream = stdin or sys.stdin
        for text in self.banner:
            self._writer.write_line(text)

        while True:
            self._writer.write_prompt(session.prompt)
            try:
                line = stream.readline()
            except UnicodeDecodeError as e:
                self._logger.warning(f"Unreadable input line: {e}")
                self._writer.write_line(f"Error: {e}")
                continue
            if not line:
                self._logger.info("End of input, leaving the shell")
                return 0

            result = self.step(session, line)
            if result is None:
                continue
            for text in result.lines:
                self._writer.write_line(text)
            session = result.session
            if result.finished:
                return 0
