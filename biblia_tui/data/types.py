"""Data types for biblia-tui."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# Positional verse texts of one chapter; None marks an absent verse
ChapterVerses = Tuple[Optional[str], ...]
Book = Mapping[int, ChapterVerses]

# Highest chapter or verse number a corpus may hold (Psalms has 150
# chapters, Psalm 119 has 176 verses)
MAX_POSITION = 1000


class CorpusLoadError(Exception):
    """Raised when a corpus file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class VerseRecord:
    """A single verse as read from raw input, before assembly."""

    book: int
    chapter: int
    verse: int
    text: str


@dataclass(frozen=True)
class IngestionWarning:
    """A record that was dropped while building a corpus."""

    book: int
    chapter: int
    verse: int
    message: str

    def __str__(self) -> str:
        """Return the warning message."""
        return self.message


@dataclass(frozen=True)
class CorpusDocument:
    """Hierarchical book -> chapter -> verse document.

    Read-only after construction: ``books`` and each chapter mapping are
    mapping proxies and every chapter is a tuple. Verse ``n`` of a chapter
    lives at position ``n - 1``.
    """

    bible_version: str
    books: Mapping[str, Book]
    warnings: Tuple[IngestionWarning, ...] = field(default=(), compare=False)

    @classmethod
    def create(
        cls,
        bible_version: str,
        books: Dict[str, Dict[int, List[Optional[str]]]],
        warnings: Tuple[IngestionWarning, ...] = (),
    ) -> "CorpusDocument":
        """Freeze plain nested dicts/lists into a document."""
        frozen = {
            name: MappingProxyType(
                {chapter: tuple(verses) for chapter, verses in chapters.items()}
            )
            for name, chapters in books.items()
        }
        return cls(
            bible_version=bible_version,
            books=MappingProxyType(frozen),
            warnings=tuple(warnings),
        )

    def book_names(self) -> List[str]:
        """Return stored book names in insertion order."""
        return list(self.books)

    def chapter(self, book: str, chapter: int) -> Optional[ChapterVerses]:
        """Return the verses of a chapter, or None if absent."""
        chapters = self.books.get(book)
        if chapters is None:
            return None
        return chapters.get(chapter)

    def verse_text(self, book: str, chapter: int, verse: int) -> Optional[str]:
        """Return a verse's text, or None if the position holds no verse."""
        verses = self.chapter(book, chapter)
        if verses is None or verse < 1 or verse > len(verses):
            return None
        return verses[verse - 1] or None

    @property
    def verse_count(self) -> int:
        """Count the verses actually present in the document."""
        return sum(
            1
            for chapters in self.books.values()
            for verses in chapters.values()
            for text in verses
            if text
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "bible_version": self.bible_version,
            "books": {
                name: {
                    str(chapter): list(verses)
                    for chapter, verses in chapters.items()
                }
                for name, chapters in self.books.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Any) -> "CorpusDocument":
        """Create from a parsed JSON document.

        Raises:
            CorpusLoadError: if the data does not have the document shape
        """
        if not isinstance(data, dict):
            raise CorpusLoadError("Corpus document must be a JSON object")
        books = data.get("books")
        if not isinstance(books, dict):
            raise CorpusLoadError('Corpus document has no "books" object')
        version = data.get("bible_version", "")
        if not isinstance(version, str):
            raise CorpusLoadError('"bible_version" must be a string')

        parsed: Dict[str, Dict[int, List[Optional[str]]]] = {}
        for name, chapters in books.items():
            if not isinstance(chapters, dict):
                raise CorpusLoadError(f'Book "{name}" must map chapters to verses')
            parsed[name] = {}
            for key, verses in chapters.items():
                try:
                    chapter = int(key)
                except (TypeError, ValueError):
                    raise CorpusLoadError(
                        f'Invalid chapter "{key}" in book "{name}"'
                    ) from None
                if not 1 <= chapter <= MAX_POSITION:
                    raise CorpusLoadError(f'Invalid chapter "{key}" in book "{name}"')
                if chapter in parsed[name]:
                    raise CorpusLoadError(
                        f'Duplicate chapter "{key}" in book "{name}"'
                    )
                if (
                    not isinstance(verses, list)
                    or len(verses) > MAX_POSITION
                    or not all(v is None or isinstance(v, str) for v in verses)
                ):
                    raise CorpusLoadError(
                        f"Chapter {key} of {name} must be a list of at most "
                        f"{MAX_POSITION} verse texts"
                    )
                parsed[name][chapter] = verses
        return cls.create(version, parsed)


@dataclass(frozen=True)
class SingleVerse:
    """A reference to one verse: ``genesis 1:2``."""

    book_fragment: str
    chapter: int
    verse: int


@dataclass(frozen=True)
class SameChapterRange:
    """A verse range inside one chapter: ``genesis 1:1-3``."""

    book_fragment: str
    chapter: int
    verse_start: int
    verse_end: int

    @property
    def chapter_start(self) -> int:
        return self.chapter

    @property
    def chapter_end(self) -> int:
        return self.chapter


@dataclass(frozen=True)
class CrossChapterRange:
    """A verse range spanning chapters: ``genesis 1:30-2:2``."""

    book_fragment: str
    chapter_start: int
    verse_start: int
    chapter_end: int
    verse_end: int


ParsedReference = Union[SingleVerse, SameChapterRange, CrossChapterRange]


@dataclass(frozen=True)
class ParseError:
    """A query that matched neither reference grammar."""

    message: str


class ErrorKind(Enum):
    """Kinds of query failure."""

    PARSE_SYNTAX = "parse_syntax"
    BOOK_NOT_FOUND = "book_not_found"
    CHAPTER_NOT_FOUND = "chapter_not_found"
    VERSE_NOT_FOUND = "verse_not_found"
    EMPTY_RANGE = "empty_range"


@dataclass(frozen=True)
class RangeVerse:
    """One verse collected while resolving a range."""

    chapter: int
    verse: int
    text: str

    @property
    def position(self) -> str:
        """Return ``chapter:verse``."""
        return f"{self.chapter}:{self.verse}"


@dataclass
class QueryResult:
    """Result of a reference lookup.

    On success either the single-verse fields (``chapter``, ``verse``,
    ``text``) or ``verses`` is set; ``reference`` holds the citation or
    the range label.
    """

    success: bool
    book: str = ""
    chapter: Optional[int] = None
    verse: Optional[int] = None
    text: Optional[str] = None
    verses: Optional[List[RangeVerse]] = None
    reference: str = ""
    error: str = ""
    kind: Optional[ErrorKind] = None

    @property
    def is_range(self) -> bool:
        """Check if this is a successful range result."""
        return self.success and self.verses is not None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "QueryResult":
        """Create a failed result."""
        return cls(success=False, error=message, kind=kind)
