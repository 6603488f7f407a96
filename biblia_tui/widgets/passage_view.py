"""Passage view widget."""

from typing import List, Optional

from rich.text import Text
from textual.containers import Vertical
from textual.widgets import Static

from biblia_tui.data.normalize import display_name
from biblia_tui.data.types import QueryResult, RangeVerse
from biblia_tui.search.formatter import expand_line_breaks


def result_verses(result: QueryResult) -> List[RangeVerse]:
    """Return the verses of a successful result as a list."""
    if not result.success:
        return []
    if result.verses is not None:
        return list(result.verses)
    return [RangeVerse(result.chapter or 0, result.verse or 0, result.text or "")]


class VerseRow(Static):
    """Single verse display widget."""

    DEFAULT_CSS = """
    VerseRow {
        width: 100%;
        padding: 0 2;
        background: $surface;
    }
    VerseRow.current {
        background: $surface-lighten-1;
    }
    """

    def __init__(self, item: RangeVerse, show_chapter: bool = False, **kwargs):
        super().__init__("", **kwargs)
        self.item = item
        self._show_chapter = show_chapter
        self._is_current = False

    def set_current(self, is_current: bool) -> None:
        """Update the cursor state and re-render."""
        self._is_current = is_current
        self._render_verse()
        self.set_class(is_current, "current")

    def _render_verse(self) -> None:
        text = Text()

        if self._is_current:
            text.append("▶ ", style="bold cyan")
        else:
            text.append("  ")

        number = self.item.position if self._show_chapter else str(self.item.verse)
        style = "bold black on cyan" if self._is_current else "bold yellow"
        text.append(number, style=style)
        text.append(". ", style="dim")
        text.append(expand_line_breaks(self.item.text))
        self.update(text)


class PassageView(Vertical):
    """Widget that displays the verses of the last successful lookup."""

    DEFAULT_CSS = """
    PassageView {
        width: 100%;
        background: $surface;
    }
    PassageView > .passage-title {
        padding: 1 2 0 2;
        text-style: bold;
        color: $accent;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._result: Optional[QueryResult] = None
        self._items: List[RangeVerse] = []
        self._rows: List[VerseRow] = []
        self._current = 0

    @property
    def result(self) -> Optional[QueryResult]:
        """Get the result currently shown."""
        return self._result

    @property
    def current_index(self) -> int:
        """Get the cursor position within the shown verses."""
        return self._current

    @property
    def verse_count(self) -> int:
        """Get total number of verses shown."""
        return len(self._items)

    def show_result(self, result: QueryResult) -> None:
        """Replace the displayed passage."""
        self._result = result
        self._items = result_verses(result)
        self._current = 0
        self._rebuild_widgets()

    def _rebuild_widgets(self) -> None:
        self._rows = []
        self.remove_children()

        if self._result is None:
            return
        self.mount(Static(self._result.reference, classes="passage-title"))

        chapters = {item.chapter for item in self._items}
        for index, item in enumerate(self._items):
            row = VerseRow(item, show_chapter=len(chapters) > 1)
            row.set_current(index == self._current)
            self._rows.append(row)
            self.mount(row)

    def _move(self, index: int) -> bool:
        if not self._rows or not 0 <= index < len(self._rows):
            return False
        self._rows[self._current].set_current(False)
        self._current = index
        self._rows[index].set_current(True)
        self._rows[index].scroll_visible()
        return True

    def next_verse(self) -> bool:
        """Move to next verse. Returns True if moved, False if at end."""
        return self._move(self._current + 1)

    def prev_verse(self) -> bool:
        """Move to previous verse. Returns True if moved, False if at start."""
        return self._move(self._current - 1)

    def current_item(self) -> Optional[RangeVerse]:
        """Get the verse under the cursor."""
        if not self._items:
            return None
        return self._items[self._current]

    def current_reference(self) -> str:
        """Return the citation of the verse under the cursor."""
        item = self.current_item()
        if item is None or self._result is None:
            return ""
        return f"{display_name(self._result.book)} {item.position}"
