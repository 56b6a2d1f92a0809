"""Command parser for interpreting console input as button presses."""

from abc import ABC
from dataclasses import dataclass

from .controls import ControlKind


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class PressCommand(Command):
    """Command to press one of the pagination buttons."""

    kind: ControlKind


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents an invalid or unrecognized command."""

    original_input: str
    reason: str = "Unknown command"


class CommandParser:
    """Parses user input strings into Command objects."""

    # Command mappings
    BUTTON_COMMANDS = {
        ControlKind.FIRST: {"f", "first", "<<"},
        ControlKind.PREVIOUS: {"p", "prev", "previous", "<"},
        ControlKind.STOP: {"s", "stop", "q", "quit"},
        ControlKind.NEXT: {"n", "next", ">"},
        ControlKind.LAST: {"l", "last", ">>"},
    }
    HELP_COMMANDS = {"?", "help"}

    def parse(self, input_str: str) -> Command:
        """
        Parse a user input string into a Command object.

        Args:
            input_str: The raw input line from the user.

        Returns:
            A Command object representing the parsed input.
        """
        cleaned = input_str.strip().lower()

        if not cleaned:
            return InvalidCommand(original_input=input_str, reason="Empty input")

        if cleaned in self.HELP_COMMANDS:
            return HelpCommand()

        for kind, aliases in self.BUTTON_COMMANDS.items():
            if cleaned in aliases:
                return PressCommand(kind=kind)

        return InvalidCommand(original_input=input_str, reason="Unknown command")
