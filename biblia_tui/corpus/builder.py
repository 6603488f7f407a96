"""Corpus builder: raw verse records -> CorpusDocument."""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from biblia_tui.data.catalog import book_name
from biblia_tui.data.types import (
    MAX_POSITION,
    CorpusDocument,
    IngestionWarning,
    VerseRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_BIBLE_VERSION = "Nueva Reina Valera 2000"

# Pattern: (46, 1, 1, 'text'); numbers longer than nine digits never match
_RECORD_PATTERN = re.compile(
    r"\((\d{1,9}),\s*(\d{1,9}),\s*(\d{1,9}),\s*'([^']*)'\)", re.ASCII
)

RawInput = Union[str, Sequence[Any]]


def parse_records(text: str) -> List[VerseRecord]:
    """Extract every ``(book, chapter, verse, 'text')`` tuple from a string.

    Anything between tuples is ignored, and so are malformed or partial
    tuples. Text is kept verbatim, including ``/n`` line-break markers.
    """
    return [
        VerseRecord(
            book=int(match.group(1)),
            chapter=int(match.group(2)),
            verse=int(match.group(3)),
            text=match.group(4),
        )
        for match in _RECORD_PATTERN.finditer(text)
    ]


def _coerce_record(item: Any) -> Optional[VerseRecord]:
    """Convert a structured record (sequence or mapping) to a VerseRecord."""
    if isinstance(item, VerseRecord):
        return item
    try:
        if isinstance(item, Mapping):
            book, chapter, verse, text = (
                item["book"], item["chapter"], item["verse"], item["text"]
            )
        else:
            book, chapter, verse, text = item
        return VerseRecord(int(book), int(chapter), int(verse), str(text))
    except (KeyError, TypeError, ValueError):
        logger.warning("Skipping malformed record: %r", item)
        return None


def iter_records(raw_input: RawInput) -> Iterable[VerseRecord]:
    """Yield verse records from either supported input shape."""
    if isinstance(raw_input, str):
        yield from parse_records(raw_input)
        return
    for item in raw_input:
        record = _coerce_record(item)
        if record is not None:
            yield record


class CorpusBuilder:
    """Assembles verse records into a document.

    Records are applied in the order they are added. A record for a
    ``(book, chapter, verse)`` that is already filled replaces the earlier
    text (last write wins).
    """

    def __init__(self, bible_version: str = DEFAULT_BIBLE_VERSION) -> None:
        self.bible_version = bible_version
        self._books: Dict[str, Dict[int, List[Optional[str]]]] = {}
        self._warnings: List[IngestionWarning] = []

    @property
    def warnings(self) -> List[IngestionWarning]:
        """Get warnings collected so far."""
        return self._warnings.copy()

    def add(self, record: VerseRecord) -> bool:
        """Add one record. Returns False if it was dropped.

        Records with an unknown book, or a chapter or verse outside
        1..MAX_POSITION, are dropped with a warning.
        """
        name = book_name(record.book)
        if name is None:
            self._warn(record, f"Unknown book number: {record.book}")
            return False
        if not (
            1 <= record.chapter <= MAX_POSITION and 1 <= record.verse <= MAX_POSITION
        ):
            self._warn(
                record,
                f"Invalid position {record.chapter}:{record.verse} in book {record.book}",
            )
            return False

        verses = self._books.setdefault(name, {}).setdefault(record.chapter, [])
        index = record.verse - 1
        if index >= len(verses):
            verses.extend([None] * (index + 1 - len(verses)))
        elif verses[index] is not None:
            logger.debug(
                "Overwriting %s %d:%d", name, record.chapter, record.verse
            )
        verses[index] = record.text
        return True

    def add_all(self, records: Iterable[VerseRecord]) -> int:
        """Add records in order. Returns the number accepted."""
        return sum(1 for record in records if self.add(record))

    def build(self) -> CorpusDocument:
        """Freeze the collected records into a document."""
        return CorpusDocument.create(self.bible_version, self._books, tuple(self._warnings))

    def _warn(self, record: VerseRecord, message: str) -> None:
        logger.warning(message)
        self._warnings.append(
            IngestionWarning(record.book, record.chapter, record.verse, message)
        )


def build_corpus(
    raw_input: RawInput, bible_version: str = DEFAULT_BIBLE_VERSION
) -> CorpusDocument:
    """Build a corpus document from raw text or structured records.

    Args:
        raw_input: A string of ``(book, chapter, verse, 'text')`` tuples, or
            a sequence of 4-element records / mappings
        bible_version: Free-form version label stored in the document

    Returns:
        A read-only CorpusDocument; dropped records are listed in its
        ``warnings``
    """
    builder = CorpusBuilder(bible_version)
    accepted = builder.add_all(iter_records(raw_input))
    document = builder.build()
    logger.info(
        "Built corpus %r: %d records, %d books, %d dropped",
        bible_version,
        accepted,
        len(document.books),
        len(document.warnings),
    )
    return document
