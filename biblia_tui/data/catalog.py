"""Canonical book catalog - numeric book ids and canonical names."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class CatalogBook:
    """A book of the canon, identified by its position in the source data."""

    id: int
    name: str


# Standard 66-book order with Spanish names (lowercase, words joined by "_")
_CATALOG_TABLE: Sequence[CatalogBook] = (
    # Old Testament
    CatalogBook(1, "genesis"),
    CatalogBook(2, "exodo"),
    CatalogBook(3, "levitico"),
    CatalogBook(4, "numeros"),
    CatalogBook(5, "deuteronomio"),
    CatalogBook(6, "josue"),
    CatalogBook(7, "jueces"),
    CatalogBook(8, "rut"),
    CatalogBook(9, "1_samuel"),
    CatalogBook(10, "2_samuel"),
    CatalogBook(11, "1_reyes"),
    CatalogBook(12, "2_reyes"),
    CatalogBook(13, "1_cronicas"),
    CatalogBook(14, "2_cronicas"),
    CatalogBook(15, "esdras"),
    CatalogBook(16, "nehemias"),
    CatalogBook(17, "ester"),
    CatalogBook(18, "job"),
    CatalogBook(19, "salmos"),
    CatalogBook(20, "proverbios"),
    CatalogBook(21, "eclesiastes"),
    CatalogBook(22, "cantares"),
    CatalogBook(23, "isaias"),
    CatalogBook(24, "jeremias"),
    CatalogBook(25, "lamentaciones"),
    CatalogBook(26, "ezequiel"),
    CatalogBook(27, "daniel"),
    CatalogBook(28, "oseas"),
    CatalogBook(29, "joel"),
    CatalogBook(30, "amos"),
    CatalogBook(31, "abdias"),
    CatalogBook(32, "jonas"),
    CatalogBook(33, "miqueas"),
    CatalogBook(34, "nahum"),
    CatalogBook(35, "habacuc"),
    CatalogBook(36, "sofonias"),
    CatalogBook(37, "hageo"),
    CatalogBook(38, "zacarias"),
    CatalogBook(39, "malaquias"),
    # New Testament
    CatalogBook(40, "mateo"),
    CatalogBook(41, "marcos"),
    CatalogBook(42, "lucas"),
    CatalogBook(43, "juan"),
    CatalogBook(44, "hechos"),
    CatalogBook(45, "romanos"),
    CatalogBook(46, "1_corintios"),
    CatalogBook(47, "2_corintios"),
    CatalogBook(48, "galatas"),
    CatalogBook(49, "efesios"),
    CatalogBook(50, "filipenses"),
    CatalogBook(51, "colosenses"),
    CatalogBook(52, "1_tesalonicenses"),
    CatalogBook(53, "2_tesalonicenses"),
    CatalogBook(54, "1_timoteo"),
    CatalogBook(55, "2_timoteo"),
    CatalogBook(56, "tito"),
    CatalogBook(57, "filemon"),
    CatalogBook(58, "hebreos"),
    CatalogBook(59, "santiago"),
    CatalogBook(60, "1_pedro"),
    CatalogBook(61, "2_pedro"),
    CatalogBook(62, "1_juan"),
    CatalogBook(63, "2_juan"),
    CatalogBook(64, "3_juan"),
    CatalogBook(65, "judas"),
    CatalogBook(66, "apocalipsis"),
)

# Book order list
BOOK_ORDER: List[str] = [book.name for book in _CATALOG_TABLE]

# Read-only id -> name lookup
BOOK_CATALOG: Mapping[int, str] = MappingProxyType(
    {book.id: book.name for book in _CATALOG_TABLE}
)

_ID_BY_NAME: Dict[str, int] = {}
for book in _CATALOG_TABLE:
    _ID_BY_NAME.setdefault(book.name, book.id)


def book_name(book_id: int) -> Optional[str]:
    """Return the canonical name for a numeric book id."""
    return BOOK_CATALOG.get(book_id)


def book_id(name: str) -> Optional[int]:
    """Return the numeric id of a canonical book name."""
    return _ID_BY_NAME.get(name)


def book_index(name: str) -> int:
    """Return the index of a book in the canon (0-based)."""
    try:
        return BOOK_ORDER.index(name)
    except ValueError:
        return -1


def duplicate_names() -> Dict[str, List[int]]:
    """Return every name that is bound to more than one book id.

    An empty result means the catalog is consistent.
    """
    ids_by_name: Dict[str, List[int]] = {}
    for entry in _CATALOG_TABLE:
        ids_by_name.setdefault(entry.name, []).append(entry.id)
    return {name: ids for name, ids in ids_by_name.items() if len(ids) > 1}
