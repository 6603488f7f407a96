"""Shared fixtures."""

import pytest

from biblia_tui.corpus import build_corpus


def _sample_records():
    # Genesis 1 has 31 verses, chapter 2 has 1-3, chapter 4 has 1 and 3
    records = [(1, 1, v, f"Genesis uno {v}") for v in range(1, 32)]
    records += [(1, 2, v, f"Genesis dos {v}") for v in range(1, 4)]
    records += [(1, 4, 1, "Genesis cuatro 1"), (1, 4, 3, "Genesis cuatro 3")]
    records += [(9, 1, v, f"Samuel {v}") for v in range(1, 6)]
    records += [(46, 13, 4, "El amor es sufrido")]
    records += [(19, 23, 1, "Jehová es mi pastor;/nnada me faltará.")]
    return records


@pytest.fixture
def records():
    return _sample_records()


@pytest.fixture
def corpus(records):
    return build_corpus(records, "Prueba")
