"""Textual widgets for biblia-tui."""

from biblia_tui.widgets.passage_view import PassageView, VerseRow
from biblia_tui.widgets.command_input import CommandInput
from biblia_tui.widgets.status_bar import StatusBar

__all__ = [
    "PassageView",
    "VerseRow",
    "CommandInput",
    "StatusBar",
]
