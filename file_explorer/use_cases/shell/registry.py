"""
Registry of shell commands, keyed by case-insensitive name.
"""

from file_explorer.exceptions import CommandError
from file_explorer.ports.command_handler_port import CommandHandlerPort


class CommandRegistry:
    """Combine several command handlers and look them up by name."""

    def __init__(self, *handlers: CommandHandlerPort) -> None:
        self._handlers: dict[str, CommandHandlerPort] = {}
        for h in handlers:
            self.register(h)

    def register(self, handler: CommandHandlerPort) -> None:
        key = handler.name.lower()
        if key in self._handlers:
            raise CommandError(f"Command already registered: {handler.name}")
        self._handlers[key] = handler

    def get(self, name: str) -> CommandHandlerPort | None:
        return self._handlers.get(name.lower())

    def handlers(self) -> list[CommandHandlerPort]:
        # registration order is the order shown by help
        return list(self._handlers.values())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers
