"""Reference parsing, resolution and formatting."""

from biblia_tui.search.parser import parse_query, normalize_query, SYNTAX_HELP
from biblia_tui.search.resolver import Resolver, resolve, search, range_label
from biblia_tui.search.formatter import (
    LINE_BREAK_MARKER,
    expand_line_breaks,
    format_result,
    plain_text,
)

__all__ = [
    "parse_query",
    "normalize_query",
    "SYNTAX_HELP",
    "Resolver",
    "resolve",
    "search",
    "range_label",
    "LINE_BREAK_MARKER",
    "expand_line_breaks",
    "format_result",
    "plain_text",
]
