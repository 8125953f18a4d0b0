"""
Command entity parsed from one line of user input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Command name plus the single untokenized argument that follows it."""

    name: str
    argument: str = ""

    @classmethod
    def parse(cls, raw: str) -> "Command | None":
        """
        Split a line on its first whitespace run.

        Args:
            raw: Line as read from the terminal

        Returns:
            The parsed Command, or None for a blank line
        """
        parts = raw.strip().split(maxsplit=1)
        if not parts:
            return None
        if len(parts) == 1:
            return cls(name=parts[0])
        return cls(name=parts[0], argument=parts[1].strip())

    @property
    def key(self) -> str:
        # command names are case-insensitive
        return self.name.lower()
