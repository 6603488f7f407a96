"""Book name normalization and lookup."""

import re
from typing import Dict, Iterable, List, Optional

from biblia_tui.data.catalog import BOOK_ORDER, book_index

_SEPARATORS = re.compile(r"[\s_]+")


def normalize_book_fragment(raw: str) -> str:
    """Return the lookup key for a book name or fragment.

    Lowercases and collapses every run of whitespace or underscores into
    a single underscore, so "1 Samuel", "1_samuel" and "1   SAMUEL" all
    become "1_samuel".
    """
    return _SEPARATORS.sub("_", raw.lower())


def display_name(name: str) -> str:
    """Return a stored book name with spaces instead of underscores."""
    return name.replace("_", " ")


def _catalog_order(names: Iterable[str]) -> List[str]:
    """Sort names by canon position; unknown names keep their order at the end."""
    indexed = list(enumerate(names))
    indexed.sort(
        key=lambda item: (
            book_index(item[1]) if book_index(item[1]) >= 0 else len(BOOK_ORDER),
            item[0],
        )
    )
    return [name for _, name in indexed]


class BookIndex:
    """Exact-after-normalization lookup over stored book names.

    When two stored names share a normalized key, the one that comes
    first in catalog order wins.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._keys: Dict[str, str] = {}
        for name in _catalog_order(names):
            self._keys.setdefault(normalize_book_fragment(name), name)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, fragment: object) -> bool:
        return isinstance(fragment, str) and self.resolve(fragment) is not None

    def resolve(self, fragment: str) -> Optional[str]:
        """Return the stored book name matching a user fragment."""
        return self._keys.get(normalize_book_fragment(fragment))
