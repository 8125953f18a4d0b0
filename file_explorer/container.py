"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import TextIO

from file_explorer.adapters.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.ports.file_system_port import FileSystemPort
from file_explorer.ui.console import (
    ConsoleWriter,
    PlainConsoleWriter,
    RichConsoleWriter,
)
from file_explorer.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.files.create_file import CreateFileUseCase
from file_explorer.use_cases.files.delete_entry import DeleteEntryUseCase
from file_explorer.use_cases.files.file_info import FileInfoUseCase
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.make_directory import MakeDirectoryUseCase
from file_explorer.use_cases.shell.command_loop import CommandLoop
from file_explorer.use_cases.shell.registry import CommandRegistry
from file_explorer.use_cases.shell.session_commands import ExitUseCase, HelpUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_command_registry(self) -> CommandRegistry:
        """
        Get the registry with every shell command, in help order.

        Returns:
            Configured CommandRegistry
        """
        if "command_registry" not in self._instances:
            fs = self.get_file_system()
            registry = CommandRegistry(
                ListDirectoryUseCase(fs, self._logger),
                ChangeDirectoryUseCase(fs, self._logger),
                MakeDirectoryUseCase(fs, self._logger),
                CreateFileUseCase(fs, self._logger),
                DeleteEntryUseCase(fs, self._logger),
                FileInfoUseCase(fs, self._logger),
            )
            registry.register(HelpUseCase(registry, self._logger))
            registry.register(ExitUseCase())
            self._instances["command_registry"] = registry
        return self._instances["command_registry"]

    def get_console_writer(
        self, pretty: bool = False, stream: TextIO | None = None
    ) -> ConsoleWriter:
        """
        Get a console writer; not cached since the stream may differ per call.
        """
        if pretty:
            return RichConsoleWriter(stream)
        return PlainConsoleWriter(stream)

    def get_command_loop(
        self,
        writer: ConsoleWriter | None = None,
        app_name: str = "Python File Explorer",
    ) -> CommandLoop:
        """
        Get the command loop with injected dependencies.

        Only the default-writer loop is cached; passing a writer always
        builds a new loop bound to it.

        Returns:
            Configured CommandLoop
        """
        if writer is not None:
            return CommandLoop(
                self.get_command_registry(),
                writer=writer,
                app_name=app_name,
                logger=self._logger,
            )
        if "command_loop" not in self._instances:
            self._instances["command_loop"] = CommandLoop(
                self.get_command_registry(),
                writer=self.get_console_writer(),
                app_name=app_name,
                logger=self._logger,
            )
        return self._instances["command_loop"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
