"""Resolve parsed references against a corpus document."""

from typing import List, Optional, Union

from biblia_tui.data.normalize import BookIndex, display_name
from biblia_tui.data.types import (
    ChapterVerses,
    CorpusDocument,
    CrossChapterRange,
    ErrorKind,
    ParseError,
    ParsedReference,
    QueryResult,
    RangeVerse,
    SameChapterRange,
    SingleVerse,
)
from biblia_tui.search.parser import parse_query


def _verse_at(verses: ChapterVerses, verse: int) -> Optional[str]:
    """Return the text at a verse position; None for gaps and empty text."""
    if verse < 1 or verse > len(verses):
        return None
    return verses[verse - 1] or None


def range_label(book: str, reference: Union[SameChapterRange, CrossChapterRange]) -> str:
    """Return ``<book> <chapter>:<verse>-<chapter>:<verse>``."""
    return (
        f"{display_name(book)} {reference.chapter_start}:{reference.verse_start}"
        f"-{reference.chapter_end}:{reference.verse_end}"
    )


class Resolver:
    """Looks up references in one corpus document.

    The book index is built once per document; the document itself is
    never modified.
    """

    def __init__(self, document: CorpusDocument) -> None:
        self.document = document
        self._index = BookIndex(document.book_names())

    def resolve(self, reference: ParsedReference) -> QueryResult:
        """Resolve a parsed reference to a QueryResult."""
        book = self._index.resolve(reference.book_fragment)
        if book is None:
            return QueryResult.failure(
                ErrorKind.BOOK_NOT_FOUND,
                f'Book "{reference.book_fragment}" not found.',
            )

        if isinstance(reference, SingleVerse):
            return self._resolve_verse(book, reference)
        if isinstance(reference, SameChapterRange):
            return self._resolve_same_chapter(book, reference)
        return self._resolve_cross_chapter(book, reference)

    def search(self, query: str) -> QueryResult:
        """Parse and resolve a query string."""
        parsed = parse_query(query)
        if isinstance(parsed, ParseError):
            return QueryResult.failure(ErrorKind.PARSE_SYNTAX, parsed.message)
        return self.resolve(parsed)

    def _resolve_verse(self, book: str, reference: SingleVerse) -> QueryResult:
        chapter, verse = reference.chapter, reference.verse
        verses = self.document.books[book].get(chapter)
        if verses is None:
            return _chapter_not_found(book, chapter)

        text = _verse_at(verses, verse)
        if text is None:
            return QueryResult.failure(
                ErrorKind.VERSE_NOT_FOUND,
                f"Verse {verse} not found in {book} chapter {chapter}.",
            )

        return QueryResult(
            success=True,
            book=book,
            chapter=chapter,
            verse=verse,
            text=text,
            reference=f"{display_name(book)} {chapter}:{verse}",
        )

    def _resolve_same_chapter(self, book: str, reference: SameChapterRange) -> QueryResult:
        verses = self.document.books[book].get(reference.chapter)
        if verses is None:
            return _chapter_not_found(book, reference.chapter)

        collected = self._collect(
            reference.chapter, verses, reference.verse_start, reference.verse_end
        )
        return self._range_result(book, reference, collected)

    def _resolve_cross_chapter(self, book: str, reference: CrossChapterRange) -> QueryResult:
        chapters = self.document.books[book]
        collected: List[RangeVerse] = []

        # Only stored chapters are visited; missing ones are skipped
        in_range = sorted(
            c for c in chapters if reference.chapter_start <= c <= reference.chapter_end
        )
        for chapter in in_range:
            verses = chapters[chapter]
            start = reference.verse_start if chapter == reference.chapter_start else 1
            end = reference.verse_end if chapter == reference.chapter_end else len(verses)
            collected.extend(self._collect(chapter, verses, start, end))

        return self._range_result(book, reference, collected)

    @staticmethod
    def _collect(chapter: int, verses: ChapterVerses, start: int, end: int) -> List[RangeVerse]:
        """Collect present verses from start to end inclusive; gaps are skipped."""
        collected: List[RangeVerse] = []
        for verse in range(max(start, 1), min(end, len(verses)) + 1):
            text = _verse_at(verses, verse)
            if text is not None:
                collected.append(RangeVerse(chapter, verse, text))
        return collected

    @staticmethod
    def _range_result(
        book: str,
        reference: Union[SameChapterRange, CrossChapterRange],
        collected: List[RangeVerse],
    ) -> QueryResult:
        label = range_label(book, reference)
        if not collected:
            return QueryResult.failure(
                ErrorKind.EMPTY_RANGE, f"No verses found in range {label}."
            )
        return QueryResult(success=True, book=book, verses=collected, reference=label)


def _chapter_not_found(book: str, chapter: int) -> QueryResult:
    return QueryResult.failure(
        ErrorKind.CHAPTER_NOT_FOUND, f"Chapter {chapter} not found in {book}."
    )


def resolve(document: CorpusDocument, reference: ParsedReference) -> QueryResult:
    """Resolve a parsed reference against a document."""
    return Resolver(document).resolve(reference)


def search(document: CorpusDocument, query: str) -> QueryResult:
    """Parse a query string and resolve it against a document.

    Never raises for string input; every failure is a QueryResult with
    ``success=False`` and an ErrorKind.
    """
    return Resolver(document).search(query)
