"""Command handlers for biblia-tui."""

from dataclasses import dataclass
from typing import Callable, Optional

from biblia_tui.commands.parser import ParsedCommand
from biblia_tui.data.types import CorpusDocument
from biblia_tui.search import search

HELP_TEXT = """
Commands:
  :quit, :q            - Quit
  :goto <reference>    - Show a verse or range (genesis 1:2, juan 3:16-18)
  :reload [--path=..]  - Reload the corpus file
  :version             - Show the loaded Bible version
  :yank, :y            - Copy the shown passage

Keys:
  /, r    - Reference
  :       - Command
  j/k     - Scroll
  y       - Copy
  ctrl+r  - Reload
  q       - Quit
"""


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit", "show", "reload", ...
    data: Optional[dict] = None


class CommandHandler:
    """Handles command execution against the currently loaded corpus."""

    def __init__(self, get_document: Callable[[], Optional[CorpusDocument]]) -> None:
        self._get_document = get_document

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Args:
            cmd: Parsed command

        Returns:
            CommandResult with status and message
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        handler = getattr(self, f"_cmd_{cmd.name.replace('-', '_')}", None)
        if handler:
            return handler(cmd)
        return CommandResult(success=False, message=f"Unknown command: {cmd.name}")

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :quit command."""
        return CommandResult(success=True, action="quit")

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :help command."""
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_goto(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :goto command."""
        if not cmd.text.strip():
            return CommandResult(success=False, message="Usage: :goto <reference>")
        return self.lookup(cmd.text)

    def _cmd_reload(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :reload command."""
        data = {"path": cmd.options["path"]} if "path" in cmd.options else {}
        return CommandResult(success=True, action="reload", data=data)

    def _cmd_version(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :version command."""
        document = self._get_document()
        if document is None:
            return CommandResult(success=False, message="No corpus loaded")
        return CommandResult(
            success=True,
            message=f"{document.bible_version} ({len(document.books)} books)",
        )

    def _cmd_yank(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :yank command."""
        return CommandResult(success=True, action="yank")

    def lookup(self, query: str) -> CommandResult:
        """Search the loaded corpus and wrap the QueryResult."""
        document = self._get_document()
        if document is None:
            return CommandResult(success=False, message="No corpus loaded")

        result = search(document, query)
        if not result.success:
            return CommandResult(success=False, message=result.error)
        return CommandResult(success=True, action="show", data={"result": result})
