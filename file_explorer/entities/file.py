"""
File system entry entities.
"""

import os
from dataclasses import dataclass

from file_explorer.exceptions import FileRepositoryError


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory."""

    name: str
    is_dir: bool

    def display_line(self) -> str:
        prefix = "[DIR] " if self.is_dir else "      "
        return f"{prefix}{self.name}"


@dataclass(frozen=True)
class FileMetadata:
    """
    Snapshot of a file or directory's metadata, used only for display.

    ``modified`` is the raw last-modified time in milliseconds since the epoch.
    """

    name: str
    path: str
    is_dir: bool
    readable: bool
    writable: bool
    size: int
    modified: int

    @classmethod
    def from_path(cls, path: str) -> "FileMetadata":
        """
        Build the metadata for an existing path.

        Args:
            path: Path to the file or directory

        Returns:
            A FileMetadata snapshot

        Raises:
            FileRepositoryError: If path is empty or cannot be stat'ed
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        abs_path = os.path.abspath(path)
        try:
            st = os.stat(abs_path)
        except (OSError, ValueError) as e:
            raise FileRepositoryError(
                f"Cannot read metadata of {abs_path}: {getattr(e, 'strerror', None) or e}"
            )

        return cls(
            name=os.path.basename(abs_path),
            path=abs_path,
            is_dir=os.path.isdir(abs_path),
            readable=os.access(abs_path, os.R_OK),
            writable=os.access(abs_path, os.W_OK),
            size=st.st_size,
            modified=st.st_mtime_ns // 1_000_000,
        )

    @property
    def type_label(self) -> str:
        return "Directory" if self.is_dir else "File"

    def display_lines(self) -> list[str]:
        """
        Render the metadata one field per line, labels padded to a fixed column.

        Returns:
            Lines ready to print
        """
        return [
            f"Name:      {self.name}",
            f"Path:      {self.path}",
            f"Type:      {self.type_label}",
            f"Readable:  {str(self.readable).lower()}",
            f"Writable:  {str(self.writable).lower()}",
            f"Size:      {self.size} bytes",
            f"Modified:  {self.modified}",
        ]
