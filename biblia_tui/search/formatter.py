"""Display formatting for query results."""

from biblia_tui.data.normalize import display_name
from biblia_tui.data.types import QueryResult

# Stored verbatim in verse text; becomes a real line break only on display
LINE_BREAK_MARKER = "/n"


def expand_line_breaks(text: str) -> str:
    """Replace line-break markers with newlines."""
    return text.replace(LINE_BREAK_MARKER, "\n")


def format_result(result: QueryResult) -> str:
    """Format a result for display.

    Single verses render as the citation followed by the text; ranges as
    the range label followed by one ``<book> <chapter>:<verse> - <text>``
    line per verse.
    """
    if not result.success:
        return f"Error: {result.error}"

    if result.verses is not None:
        book = display_name(result.book)
        lines = [result.reference, ""]
        for item in result.verses:
            lines.append(f"{book} {item.position} - {expand_line_breaks(item.text)}")
        return "\n".join(lines)

    return f"{result.reference}\n{expand_line_breaks(result.text or '')}"


def plain_text(result: QueryResult) -> str:
    """Return only the verse text(s) of a successful result, one per line."""
    if not result.success:
        return ""
    if result.verses is not None:
        return "\n".join(expand_line_breaks(item.text) for item in result.verses)
    return expand_line_breaks(result.text or "")
