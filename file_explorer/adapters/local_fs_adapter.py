"""
Local file system adapter implementation for file operations.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from file_explorer.entities.file import DirectoryEntry, FileMetadata
from file_explorer.entities.result import ErrorKind, FsResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _os_message(e: OSError | ValueError) -> str:
        # ValueError covers names the OS cannot take at all, e.g. an embedded NUL
        return getattr(e, "strerror", None) or str(e)

    @staticmethod
    def _entry_is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir()
        except OSError:
            return False

    @staticmethod
    def _has_parent_step(name: str) -> bool:
        parts = name.replace(os.altsep or os.sep, os.sep).split(os.sep)
        return os.pardir in parts

    @override
    def resolve(self, base: str, name: str) -> str:
        # an absolute name replaces the base
        joined = os.path.join(base, name)
        if self._has_parent_step(name):
            # ".." after a symlink goes to the link target's parent, as the OS does
            return os.path.realpath(joined)
        return os.path.abspath(joined)

    @override
    def parent(self, path: str) -> Optional[str]:
        parent = os.path.dirname(os.path.abspath(path))
        if parent == os.path.abspath(path):
            return None
        return parent

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def list_entries(self, directory: str) -> FsResult[list[DirectoryEntry]]:
        """
        List the immediate children of a directory in native order.

        Args:
            directory: Path of the directory to list

        Returns:
            Result holding the entries, or NOT_FOUND / OPERATION_FAILED

        Raises:
            FileRepositoryError: If listing fails for a non-OS reason
        """
        try:
            with os.scandir(directory) as it:
                entries = [
                    DirectoryEntry(name=entry.name, is_dir=self._entry_is_dir(entry))
                    for entry in it
                ]
            return FsResult.success(entries)
        except FileNotFoundError as e:
            self._logger.warning(f"Directory does not exist: {directory}")
            return FsResult.failure(ErrorKind.NOT_FOUND, self._os_message(e))
        except (OSError, ValueError) as e:
            self._logger.warning(f"Cannot read directory {directory}: {e}")
            return FsResult.failure(ErrorKind.OPERATION_FAILED, self._os_message(e))
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def create_directory(self, path: str) -> FsResult[str]:
        try:
            os.mkdir(path)
            return FsResult.success(path)
        except FileExistsError as e:
            self._logger.warning(f"Directory not created, path exists: {path}")
            return FsResult.failure(ErrorKind.ALREADY_EXISTS, self._os_message(e))
        except (OSError, ValueError) as e:
            self._logger.warning(f"Could not create directory {path}: {e}")
            return FsResult.failure(ErrorKind.OPERATION_FAILED, self._os_message(e))
        except Exception as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")

    @override
    def create_file(self, path: str) -> FsResult[str]:
        if os.path.exists(path):
            return FsResult.failure(ErrorKind.ALREADY_EXISTS, "File already exists")
        try:
            # "x" fails instead of truncating if the path appeared meanwhile
            with open(path, "x"):
                pass
            return FsResult.success(path)
        except FileExistsError as e:
            return FsResult.failure(ErrorKind.ALREADY_EXISTS, self._os_message(e))
        except (OSError, ValueError) as e:
            self._logger.warning(f"Could not create file {path}: {e}")
            return FsResult.failure(ErrorKind.OPERATION_FAILED, self._os_message(e))
        except Exception as e:
            raise FileRepositoryError(f"Failed to create file {path}: {str(e)}")

    @override
    def delete(self, path: str) -> FsResult[str]:
        if not os.path.exists(path):
            return FsResult.failure(ErrorKind.NOT_FOUND, f"No such file: {path}")
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.remove(path)
            return FsResult.success(path)
        except (OSError, ValueError) as e:
            self._logger.warning(f"Could not delete {path}: {e}")
            return FsResult.failure(ErrorKind.OPERATION_FAILED, self._os_message(e))
        except Exception as e:
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")

    @override
    def stat(self, path: str) -> FsResult[FileMetadata]:
        if not os.path.exists(path):
            return FsResult.failure(ErrorKind.NOT_FOUND, f"No such file: {path}")
        try:
            return FsResult.success(FileMetadata.from_path(path))
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            return FsResult.failure(ErrorKind.UNEXPECTED, str(e))
