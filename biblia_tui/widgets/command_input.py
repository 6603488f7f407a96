"""Query (``/``) and command (``:``) input line."""

from typing import Dict, List, Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from biblia_tui.data.normalize import display_name

MAX_HISTORY = 100


class InputHistory:
    """Submitted lines for one prefix, recalled newest first.

    Walking back remembers the unsubmitted draft so that walking forward
    past the newest entry restores it.
    """

    def __init__(self, limit: int = MAX_HISTORY) -> None:
        self.limit = limit
        self.entries: List[str] = []
        self._cursor: Optional[int] = None
        self._draft = ""

    def add(self, line: str) -> None:
        """Record a submitted line; repeats of the newest entry are ignored."""
        if not self.entries or self.entries[-1] != line:
            self.entries.append(line)
            del self.entries[:-self.limit]
        self.rewind()

    def rewind(self) -> None:
        """Forget the recall position."""
        self._cursor = None
        self._draft = ""

    def back(self, current: str) -> Optional[str]:
        """Return the previous entry, or None when there is nothing older."""
        if not self.entries:
            return None
        if self._cursor is None:
            self._draft = current
            self._cursor = len(self.entries) - 1
        elif self._cursor > 0:
            self._cursor -= 1
        return self.entries[self._cursor]

    def forward(self) -> Optional[str]:
        """Return the next entry, the saved draft, or None if not recalling."""
        if self._cursor is None:
            return None
        if self._cursor < len(self.entries) - 1:
            self._cursor += 1
            return self.entries[self._cursor]
        draft = self._draft
        self.rewind()
        return draft


def common_prefix(words: List[str]) -> str:
    """Return the longest prefix shared by all words."""
    if not words:
        return ""
    prefix = words[0]
    for word in words[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
    return prefix


def complete_word(
    value: str, candidates: List[str], first_word: bool = True
) -> Optional[str]:
    """Complete ``value`` against ``candidates``.

    With ``first_word`` only the text up to the first space is completed
    and the rest is kept; otherwise the whole value is the word, as book
    names may contain spaces.

    Returns the new input value, or None when nothing can be added.
    """
    if first_word:
        head, _, rest = value.lstrip().partition(" ")
    else:
        head, rest = value.lstrip(), ""
    if not head:
        return None
    matches = [c for c in candidates if c.startswith(head.lower())]
    if len(matches) == 1:
        return f"{matches[0]} {rest}"
    common = common_prefix(matches)
    if len(common) > len(head):
        return f"{common} {rest}" if rest else common
    return None


class CommandInput(Widget):
    """One-line input docked at the bottom of the reader.

    ``/`` reads a reference query and completes book names; ``:`` reads a
    command and completes command names. Each prefix has its own history.
    """

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > #cmd-prefix {
        width: 1;
    }

    CommandInput > #cmd-input {
        width: 1fr;
        border: none;
        padding: 0;
        background: $surface;
    }
    """

    class CommandSubmitted(Message):
        """Posted with the entered line and the prefix it was typed after."""

        def __init__(self, command: str, prefix: str) -> None:
            super().__init__()
            self.command = command
            self.prefix = prefix

    class CommandCancelled(Message):
        """Posted when the input is closed with escape."""

    def __init__(self, commands: Optional[List[str]] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._books: List[str] = []
        self._histories: Dict[str, InputHistory] = {}
        self._prefix = "/"

    def compose(self) -> ComposeResult:
        yield Static(self._prefix, id="cmd-prefix")
        yield Input(id="cmd-input")

    @property
    def _input(self) -> Input:
        return self.query_one("#cmd-input", Input)

    @property
    def history(self) -> InputHistory:
        """History of the active prefix."""
        return self._histories.setdefault(self._prefix, InputHistory())

    def set_books(self, names: List[str]) -> None:
        """Set the book names offered for completion."""
        self._books = [display_name(name) for name in names]

    def reset(self, prefix: str = "/") -> None:
        """Clear the line and switch to ``prefix``."""
        self._prefix = prefix
        self.query_one("#cmd-prefix", Static).update(prefix)
        self._input.value = ""
        self.history.rewind()

    def focus(self, scroll_visible: bool = True) -> None:
        self._input.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        line = self._input.value.strip()
        if line:
            self.history.add(line)
        self.post_message(self.CommandSubmitted(line, self._prefix))

    def on_key(self, event) -> None:
        if event.key == "escape":
            self.post_message(self.CommandCancelled())
        elif event.key == "up":
            self._replace(self.history.back(self._input.value))
        elif event.key == "down":
            self._replace(self.history.forward())
        elif event.key == "tab":
            self._replace(self._completion())
        else:
            return
        event.prevent_default()
        event.stop()

    def _completion(self) -> Optional[str]:
        value = self._input.value
        if self._prefix == ":":
            return complete_word(value, self._commands)
        # Book names only, before any chapter:verse
        if ":" in value:
            return None
        return complete_word(value, self._books, first_word=False)

    def _replace(self, value: Optional[str]) -> None:
        if value is not None:
            self._input.value = value
