"""
Console writers used by the command loop to print results and prompts.
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from typing_extensions import override

DIR_PREFIX = "[DIR] "


class ConsoleWriter(ABC):
    """Where the shell's output goes."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        pass

    @abstractmethod
    def write_prompt(self, text: str) -> None:
        """Write ``text`` without a newline and flush so it shows before input."""
        pass


class PlainConsoleWriter(ConsoleWriter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    @override
    def write_line(self, text: str) -> None:
        self._stream.write(text + "\n")

    @override
    def write_prompt(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()


class RichConsoleWriter(ConsoleWriter):
    """
    Writer backed by a rich Console.

    Markup, emoji and highlighting are disabled so that names such as
    ``[DIR]`` or ``:memo:`` print literally; only directory lines get a style.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        from rich.console import Console

        self._console = Console(
            file=stream or sys.stdout,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    @override
    def write_line(self, text: str) -> None:
        style = "bold blue" if text.startswith(DIR_PREFIX) else None
        self._console.print(text, style=style)

    @override
    def write_prompt(self, text: str) -> None:
        self._console.print(text, end="", style="green")
        self._console.file.flush()
