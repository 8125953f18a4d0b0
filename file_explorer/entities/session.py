"""
Session state entity.
"""

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Session:
    """The explorer's only state: the directory commands are resolved against."""

    current_directory: str

    @classmethod
    def from_cwd(cls) -> "Session":
        return cls(current_directory=os.path.abspath(os.getcwd()))

    def with_directory(self, directory: str) -> "Session":
        return replace(self, current_directory=directory)

    @property
    def prompt(self) -> str:
        return f"{self.current_directory} > "
