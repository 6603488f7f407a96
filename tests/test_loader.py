"""Tests for corpus files."""

import json

import pytest

from biblia_tui.corpus import (
    find_text_files,
    load_corpus,
    merge_corpus_files,
    read_corpus_text,
    save_corpus,
)
from biblia_tui.data.types import CorpusDocument, CorpusLoadError


class TestFindTextFiles:
    """Test recursive discovery."""

    def test_recursive_and_filtered(self, tmp_path):
        (tmp_path / "nt").mkdir()
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        (tmp_path / "nt" / "b.txt").write_text("b", encoding="utf-8")
        (tmp_path / "notes.md").write_text("x", encoding="utf-8")

        files = find_text_files(tmp_path)
        assert [f.name for f in files] == ["a.txt", "b.txt"]

    def test_missing_directory(self, tmp_path):
        assert find_text_files(tmp_path / "missing") == []

    def test_read_concatenates(self, tmp_path):
        (tmp_path / "a.txt").write_text("(1, 1, 1, 'a')", encoding="utf-8")
        (tmp_path / "b.txt").write_text("(1, 1, 2, 'b')", encoding="utf-8")
        text = read_corpus_text(find_text_files(tmp_path))
        assert text == "(1, 1, 1, 'a') (1, 1, 2, 'b')"


class TestMergeCorpusFiles:
    """Test directory -> JSON conversion."""

    def test_merge(self, tmp_path):
        src = tmp_path / "src"
        (src / "ot").mkdir(parents=True)
        (src / "ot" / "genesis.txt").write_text(
            "(1, 1, 1, 'En el principio'), (1, 1, 2, 'Y la tierra')", encoding="utf-8"
        )
        (src / "gal.txt").write_text("(48, 1, 1, 'Pablo, apóstol')", encoding="utf-8")
        out = tmp_path / "out" / "bible.json"

        document = merge_corpus_files(src, out, "RV2000")

        assert out.exists()
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["bible_version"] == "RV2000"
        assert data["books"]["genesis"]["1"] == ["En el principio", "Y la tierra"]
        assert data["books"]["galatas"]["1"] == ["Pablo, apóstol"]
        assert document.verse_count == 3

    def test_no_files(self, tmp_path):
        with pytest.raises(CorpusLoadError):
            merge_corpus_files(tmp_path, tmp_path / "out.json")


class TestLoadCorpus:
    """Test loading JSON documents."""

    def test_save_then_load(self, tmp_path, corpus):
        path = tmp_path / "bible.json"
        save_corpus(corpus, path)
        loaded = load_corpus(path)
        assert loaded == corpus
        assert loaded.verse_text("genesis", 4, 3) == "Genesis cuatro 3"
        assert loaded.verse_text("genesis", 4, 2) is None

    def test_holes_serialize_as_null(self, corpus):
        assert corpus.to_dict()["books"]["genesis"]["4"] == [
            "Genesis cuatro 1",
            None,
            "Genesis cuatro 3",
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CorpusLoadError, match="not found"):
            load_corpus(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CorpusLoadError, match="Invalid JSON"):
            load_corpus(path)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"bible_version": "x"},
            {"books": []},
            {"books": {"genesis": []}},
            {"books": {"genesis": {"uno": ["a"]}}},
            {"books": {"genesis": {"0": ["a"]}}},
            {"books": {"genesis": {"1001": ["a"]}}},
            {"books": {"genesis": {"9" * 5000: ["a"]}}},
            {"books": {"genesis": {"1": ["a"] * 1001}}},
            {"books": {"genesis": {"1": ["a"], "01": ["b"]}}},
            {"books": {"genesis": {"1": "a"}}},
            {"books": {"genesis": {"1": [1, 2]}}},
            {"bible_version": 3, "books": {}},
        ],
    )
    def test_malformed_document(self, data):
        with pytest.raises(CorpusLoadError):
            CorpusDocument.from_dict(data)

    def test_version_defaults_to_empty(self):
        document = CorpusDocument.from_dict({"books": {"genesis": {"1": ["a"]}}})
        assert document.bible_version == ""
        assert document.books["genesis"][1] == ("a",)

    def test_duplicate_chapter_key_named(self):
        with pytest.raises(CorpusLoadError, match='Duplicate chapter "01"'):
            CorpusDocument.from_dict({"books": {"genesis": {"1": ["a"], "01": ["b"]}}})
