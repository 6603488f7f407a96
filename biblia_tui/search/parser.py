"""Reference query parser."""

import re
from typing import Union

from biblia_tui.data.types import (
    CrossChapterRange,
    ParseError,
    ParsedReference,
    SameChapterRange,
    SingleVerse,
)

SYNTAX_HELP = (
    'Invalid format. Use: "book chapter:verse" (e.g., "genesis 1:2" or '
    '"1 samuel 1:1") or "book chapter:verse-[chapter:]verse" '
    '(e.g., "genesis 1:1-3" or "genesis 1:30 - 2:2")'
)

_WHITESPACE = re.compile(r"\s+")

# Chapter and verse numbers; longer digit runs are a syntax error
_NUMBER = r"\d{1,9}"

# Tried first: a dash must never end up inside a single-verse match.
# Pattern: book chapter:verse-[chapter:]verse
_RANGE_PATTERN = re.compile(
    rf"^(?P<book>.+?)\s+(?P<chapter>{_NUMBER})\s*:\s*(?P<verse>{_NUMBER})"
    rf"\s*-\s*(?:(?P<chapter_end>{_NUMBER})\s*:\s*)?(?P<verse_end>{_NUMBER})$",
    re.ASCII,
)

# Pattern: book chapter:verse
_VERSE_PATTERN = re.compile(
    rf"^(?P<book>.+?)\s+(?P<chapter>{_NUMBER})\s*:\s*(?P<verse>{_NUMBER})$",
    re.ASCII,
)


def normalize_query(raw: str) -> str:
    """Trim, lowercase and collapse internal whitespace to single spaces."""
    return _WHITESPACE.sub(" ", raw.strip().lower())


def parse_query(raw: str) -> Union[ParsedReference, ParseError]:
    """Parse a free-form reference query.

    Supports:
    - "genesis 1:2" -> SingleVerse
    - "1 samuel 1:1-5" -> SameChapterRange
    - "genesis 1:2 - 1:5" -> SameChapterRange
    - "genesis 1:30-2:2" -> CrossChapterRange

    Args:
        raw: Query string as typed by the user

    Returns:
        The parsed reference, or a ParseError naming the accepted shapes
    """
    query = normalize_query(raw)

    match = _RANGE_PATTERN.match(query)
    if match:
        book = match.group("book")
        chapter = int(match.group("chapter"))
        verse_start = int(match.group("verse"))
        verse_end = int(match.group("verse_end"))
        chapter_end = (
            int(match.group("chapter_end")) if match.group("chapter_end") else chapter
        )
        if chapter_end == chapter:
            return SameChapterRange(book, chapter, verse_start, verse_end)
        return CrossChapterRange(book, chapter, verse_start, chapter_end, verse_end)

    match = _VERSE_PATTERN.match(query)
    if match:
        return SingleVerse(
            match.group("book"),
            int(match.group("chapter")),
            int(match.group("verse")),
        )

    return ParseError(SYNTAX_HELP)
