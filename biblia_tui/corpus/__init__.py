"""Corpus ingestion and corpus files."""

from biblia_tui.corpus.builder import (
    DEFAULT_BIBLE_VERSION,
    CorpusBuilder,
    build_corpus,
    parse_records,
)
from biblia_tui.corpus.loader import (
    find_text_files,
    load_corpus,
    merge_corpus_files,
    read_corpus_text,
    save_corpus,
)

__all__ = [
    "DEFAULT_BIBLE_VERSION",
    "CorpusBuilder",
    "build_corpus",
    "parse_records",
    "find_text_files",
    "load_corpus",
    "merge_corpus_files",
    "read_corpus_text",
    "save_corpus",
]
