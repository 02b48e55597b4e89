"""Named commands, a registry to look them up, and command-line splitting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Command(ABC):
    """A named command that can be evaluated for a sender."""

    def __init__(self, name: str, completions: list[str] | None = None) -> None:
        self.name = name
        self.loaded = False
        self.completions = list(completions or [])

    def load(self) -> None:
        """Called when the command is registered."""
        self.loaded = True

    def kill(self) -> None:
        """Called when the command is shut down."""
        self.loaded = False

    @abstractmethod
    def evaluate(self, sender: Any, params: list[str]) -> None:
        """Run the command."""

    def complete(self, sender: Any, params: list[str]) -> list[str]:
        """Known completions that start with the last parameter typed so far."""
        prefix = params[-1] if params else ""
        return [word for word in self.completions if word.startswith(prefix)]


class SimpleCommand(Command):
    """A command backed by a plain function."""

    def __init__(self, name: str, evaluate: Callable[[Any, list[str]], Any]) -> None:
        super().__init__(name)
        self._evaluate = evaluate

    def evaluate(self, sender: Any, params: list[str]) -> None:
        self._evaluate(sender, params)


class CommandManager:
    """Holds registered commands by name."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] | None = {}

    def load(self) -> None:
        """Make the manager ready to accept registrations."""
        if self._commands is None:
            self._commands = {}

    def kill(self) -> None:
        """Drop every command; the manager accepts no more registrations."""
        self._commands = None

    def register_command(self, command: Command) -> None:
        if self._commands is None:
            raise RuntimeError("command manager has been killed")
        self._commands[command.name] = command
        command.load()

    def register(self, name: str, evaluate: Callable[[Any, list[str]], Any]) -> None:
        self.register_command(SimpleCommand(name, evaluate))

    def search(self, named: str) -> Command | None:
        """The command whose name matches ``named`` ignoring case, or None."""
        if not self._commands:
            return None
        wanted = named.casefold()
        return next(
            (command for name, command in self._commands.items() if name.casefold() == wanted),
            None,
        )


def parse_command(command: str) -> tuple[str, list[str]]:
    """Split a command line on single spaces into the name and its arguments."""
    name, *args = command.split(" ")
    return name, args