"""Corpus files: discovery, conversion, JSON load and save."""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from biblia_tui.corpus.builder import DEFAULT_BIBLE_VERSION, build_corpus
from biblia_tui.data.types import CorpusDocument, CorpusLoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def find_text_files(directory: PathLike) -> List[Path]:
    """Return all ``.txt`` files under a directory, recursively, sorted."""
    root = Path(directory)
    files: List[Path] = []
    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        logger.error("Error reading directory %s: %s", root, exc)
        return files

    for entry in entries:
        try:
            if entry.is_dir():
                files.extend(find_text_files(entry))
            elif entry.is_file() and entry.suffix == ".txt":
                files.append(entry)
        except OSError as exc:
            logger.warning("Error checking file %s: %s", entry, exc)
    return files


def read_corpus_text(paths: Iterable[PathLike]) -> str:
    """Concatenate the contents of the given files, space separated."""
    chunks: List[str] = []
    for path in paths:
        path = Path(path)
        chunks.append(path.read_text(encoding="utf-8"))
        logger.info("Processed: %s", path.name)
    return " ".join(chunks)


def save_corpus(document: CorpusDocument, path: PathLike) -> None:
    """Write a document as JSON, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document.to_dict(), f, indent=2, ensure_ascii=False)


def merge_corpus_files(
    input_dir: PathLike,
    output_path: PathLike,
    bible_version: str = DEFAULT_BIBLE_VERSION,
) -> CorpusDocument:
    """Convert a directory of raw ``.txt`` verse files into one JSON corpus.

    Args:
        input_dir: Directory searched recursively for ``.txt`` files
        output_path: Destination JSON file
        bible_version: Version label stored in the document

    Returns:
        The document that was written

    Raises:
        CorpusLoadError: if no text files are found or one cannot be read
    """
    files = find_text_files(input_dir)
    if not files:
        raise CorpusLoadError(f"No .txt files found in {input_dir}")
    logger.info("Found %d files to process", len(files))

    try:
        text = read_corpus_text(files)
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(f"Cannot read corpus files: {exc}") from exc

    document = build_corpus(text, bible_version)
    save_corpus(document, output_path)
    logger.info("JSON file created: %s (%d books)", output_path, len(document.books))
    return document


def load_corpus(path: PathLike) -> CorpusDocument:
    """Load a JSON corpus document.

    Raises:
        CorpusLoadError: if the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CorpusLoadError(f"Corpus file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(f"Cannot read corpus file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CorpusLoadError(f"Invalid JSON in {path}: {exc}") from exc

    document = CorpusDocument.from_dict(data)
    logger.info("Loaded corpus %r from %s", document.bible_version, path)
    return document
