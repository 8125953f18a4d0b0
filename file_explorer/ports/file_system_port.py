"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from file_explorer.entities.file import DirectoryEntry, FileMetadata
from file_explorer.entities.result import FsResult


class FileSystemPort(ABC):
    """Port interface for the file system operations the explorer needs."""

    @abstractmethod
    def resolve(self, base: str, name: str) -> str:
        """
        Resolve a user-supplied name against a base directory.

        Args:
            base: Absolute directory the name is relative to
            name: Relative or absolute path as typed by the user

        Returns:
            Absolute, normalized path
        """
        pass

    @abstractmethod
    def parent(self, path: str) -> Optional[str]:
        """
        Get the parent directory of a path.

        Returns:
            The parent path, or None when path is a filesystem root
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> FsResult[list[DirectoryEntry]]:
        """
        List the immediate children of a directory in native order.

        Args:
            directory: Path of the directory to list

        Returns:
            Result holding the entries, or NOT_FOUND / OPERATION_FAILED
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> FsResult[str]:
        """
        Create exactly one directory level.

        Args:
            path: Directory path to create; its parent must exist

        Returns:
            Result holding the created path
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> FsResult[str]:
        """
        Create an empty regular file.

        Args:
            path: File path to create

        Returns:
            Result holding the created path, ALREADY_EXISTS if something is
            already there, OPERATION_FAILED with the OS message otherwise
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> FsResult[str]:
        """
        Delete a file or an empty directory, never recursively.

        Args:
            path: Path to delete

        Returns:
            Result holding the deleted path
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> FsResult[FileMetadata]:
        """
        Read display metadata for a path.

        Args:
            path: Path to inspect

        Returns:
            Result holding the metadata
        """
        pass
