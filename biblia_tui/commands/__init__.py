"""Command parsing and handling for biblia-tui."""

from biblia_tui.commands.parser import parse_command, ParsedCommand
from biblia_tui.commands.handlers import CommandHandler, CommandResult

__all__ = ["parse_command", "ParsedCommand", "CommandHandler", "CommandResult"]
