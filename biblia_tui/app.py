"""Main Textual application for biblia-tui."""

from pathlib import Path
from typing import Optional

import pyperclip
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Header

from biblia_tui.commands import CommandHandler, CommandResult, parse_command
from biblia_tui.commands.parser import get_command_names
from biblia_tui.config import Config, get_config
from biblia_tui.corpus import load_corpus
from biblia_tui.data.types import CorpusDocument, CorpusLoadError, QueryResult
from biblia_tui.search import plain_text
from biblia_tui.widgets import CommandInput, PassageView, StatusBar


class BibliaApp(App):
    """Terminal Bible reader over a JSON corpus document."""

    TITLE = "Biblia-TUI"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("slash", "query", "Reference", show=False),
        Binding("r", "query", "Reference", show=False),
        Binding("colon", "command", "Command", show=False),
        Binding("j", "next_verse", "Next verse", show=False),
        Binding("k", "prev_verse", "Prev verse", show=False),
        Binding("y", "yank", "Copy", show=False),
        Binding("ctrl+r", "reload", "Reload corpus", show=False),
    ]

    def __init__(
        self,
        corpus_path: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> None:
        super().__init__()
        self._config = config or get_config()
        self._corpus_path = corpus_path or self._config.corpus_path
        self._corpus: Optional[CorpusDocument] = None
        self._in_command_mode = False
        self._command_handler = CommandHandler(lambda: self._corpus)

    @property
    def document(self) -> Optional[CorpusDocument]:
        """Get the loaded corpus document."""
        return self._corpus

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        with VerticalScroll(id="passage-scroll"):
            yield PassageView(id="passage-view")
        yield CommandInput(commands=get_command_names(), id="command-input")
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Load the corpus and show the default reference."""
        self.query_one("#command-input").display = False
        self.query_one("#status-bar", StatusBar).set_mode("normal")

        if self._reload_corpus():
            self._lookup(self._config.default_reference)

        self.query_one("#passage-scroll").focus()

    # ==================== Actions ====================

    def action_query(self) -> None:
        """Open the reference input."""
        self._enter_input_mode("/")

    def action_command(self) -> None:
        """Open the command input."""
        self._enter_input_mode(":")

    def action_next_verse(self) -> None:
        """Move the cursor to the next verse."""
        self.query_one("#passage-view", PassageView).next_verse()
        self._update_status()

    def action_prev_verse(self) -> None:
        """Move the cursor to the previous verse."""
        self.query_one("#passage-view", PassageView).prev_verse()
        self._update_status()

    def action_yank(self) -> None:
        """Copy the shown passage to the clipboard."""
        status = self.query_one("#status-bar", StatusBar)
        result = self.query_one("#passage-view", PassageView).result
        if result is None or not result.success:
            status.show_message("Nothing to copy", error=True)
            return

        try:
            pyperclip.copy(f"{result.reference}\n{plain_text(result)}")
            status.show_message(f"Copied: {result.reference}")
        except pyperclip.PyperclipException:
            status.show_message("Clipboard not available", error=True)

    def action_reload(self) -> None:
        """Reload the corpus file."""
        if self._reload_corpus():
            view = self.query_one("#passage-view", PassageView)
            if view.result is not None:
                self._lookup(view.result.reference)

    # ==================== Input mode ====================

    def _enter_input_mode(self, prefix: str) -> None:
        if self._in_command_mode:
            return
        self._in_command_mode = True
        self.query_one("#status-bar", StatusBar).set_mode("command")
        cmd_input = self.query_one("#command-input", CommandInput)
        cmd_input.display = True
        cmd_input.reset(prefix)
        cmd_input.focus()

    def _close_input_mode(self) -> None:
        self._in_command_mode = False
        self.query_one("#command-input", CommandInput).display = False
        self.query_one("#status-bar", StatusBar).set_mode("normal")
        self.query_one("#passage-scroll").focus()

    def on_command_input_command_submitted(
        self, event: CommandInput.CommandSubmitted
    ) -> None:
        """Handle a submitted query or command."""
        self._close_input_mode()
        if not event.command:
            return

        if event.prefix == "/":
            self._lookup(event.command)
        else:
            result = self._command_handler.execute(parse_command(event.command))
            self._handle_command_result(result)

    def on_command_input_command_cancelled(
        self, event: CommandInput.CommandCancelled
    ) -> None:
        """Handle cancelled input."""
        self._close_input_mode()

    # ==================== Helpers ====================

    def _lookup(self, query: str) -> None:
        self._handle_command_result(self._command_handler.lookup(query))

    def _handle_command_result(self, result: CommandResult) -> None:
        status = self.query_one("#status-bar", StatusBar)
        if not result.success:
            status.show_message(result.message, error=True)
            return

        action = result.action
        data = result.data or {}

        if action == "quit":
            self.exit()
        elif action == "show":
            self._show(data["result"])
        elif action == "reload":
            if "path" in data:
                self._corpus_path = data["path"]
            self.action_reload()
        elif action == "yank":
            self.action_yank()
        elif result.message:
            status.show_message(result.message)

    def _show(self, result: QueryResult) -> None:
        self.query_one("#passage-view", PassageView).show_result(result)
        self.query_one("#passage-scroll", VerticalScroll).scroll_home()
        self._update_status()

    def _reload_corpus(self) -> bool:
        """Load a fresh document and swap it in; the old one stays on failure."""
        status = self.query_one("#status-bar", StatusBar)
        if not self._corpus_path:
            status.show_message("No corpus configured (use --corpus)", error=True)
            return False

        try:
            document = load_corpus(Path(self._corpus_path).expanduser())
        except CorpusLoadError as exc:
            status.show_message(str(exc), error=True)
            return False

        self._corpus = document
        self.sub_title = document.bible_version
        status.set_version(document.bible_version)
        self.query_one("#command-input", CommandInput).set_books(document.book_names())
        return True

    def _update_status(self) -> None:
        view = self.query_one("#passage-view", PassageView)
        status = self.query_one("#status-bar", StatusBar)
        status.set_reference(view.current_reference(), view.verse_count)
