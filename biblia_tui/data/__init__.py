"""Data types, book catalog and name normalization."""

from biblia_tui.data.types import (
    MAX_POSITION,
    CorpusDocument,
    CorpusLoadError,
    CrossChapterRange,
    ErrorKind,
    IngestionWarning,
    ParseError,
    ParsedReference,
    QueryResult,
    RangeVerse,
    SameChapterRange,
    SingleVerse,
    VerseRecord,
)
from biblia_tui.data.catalog import (
    BOOK_CATALOG,
    BOOK_ORDER,
    CatalogBook,
    book_id,
    book_index,
    book_name,
    duplicate_names,
)
from biblia_tui.data.normalize import BookIndex, display_name, normalize_book_fragment

__all__ = [
    "MAX_POSITION",
    "CorpusDocument",
    "CorpusLoadError",
    "CrossChapterRange",
    "ErrorKind",
    "IngestionWarning",
    "ParseError",
    "ParsedReference",
    "QueryResult",
    "RangeVerse",
    "SameChapterRange",
    "SingleVerse",
    "VerseRecord",
    "BOOK_CATALOG",
    "BOOK_ORDER",
    "CatalogBook",
    "book_id",
    "book_index",
    "book_name",
    "duplicate_names",
    "BookIndex",
    "display_name",
    "normalize_book_fragment",
]
