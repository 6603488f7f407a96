"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the current reference, version and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    HINTS = {
        "normal": [
            ("/", "ref"),
            (":", "cmd"),
            ("j/k", "verse"),
            ("y", "copy"),
            ("q", "quit"),
        ],
        "command": [
            ("Enter", "run"),
            ("Tab", "complete"),
            ("Esc", "cancel"),
        ],
    }

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._mode = "normal"
        self._reference = ""
        self._version = ""
        self._count = 0
        self._message: Optional[str] = None
        self._is_error = False

    def set_mode(self, mode: str) -> None:
        """Set the current mode: normal or command."""
        self._mode = mode
        self._message = None
        self._update()

    def set_reference(self, reference: str, count: int = 1) -> None:
        """Set the reference currently shown."""
        self._reference = reference
        self._count = count
        self._update()

    def set_version(self, version: str) -> None:
        """Set the loaded Bible version label."""
        self._version = version
        self._update()

    def show_message(self, message: str, error: bool = False) -> None:
        """Show a temporary message."""
        self._message = message
        self._is_error = error
        self._update()

    def clear_message(self) -> None:
        """Clear the temporary message."""
        self._message = None
        self._update()

    @property
    def message(self) -> Optional[str]:
        """Get the message currently shown."""
        return self._message

    def _update(self) -> None:
        text = Text()

        if self._reference:
            text.append(self._reference, style="bold")
            if self._count > 1:
                text.append(f" ({self._count} vs)", style="dim")

        if self._version:
            text.append(" | ")
            text.append(f"[{self._version}]", style="cyan")

        if self._message:
            text.append("  ")
            text.append(self._message, style="bold red" if self._is_error else "yellow")
        else:
            hints = self.HINTS.get(self._mode, [])
            if hints:
                text.append("  ")
                for i, (key, desc) in enumerate(hints):
                    if i > 0:
                        text.append(" ", style="dim")
                    text.append(key, style="bold yellow")
                    text.append(f" {desc}", style="dim")

        self.update(text)
