"""Tests for the command line interface."""

import json

import pytest

from biblia_tui import config as config_module
from biblia_tui.cli import main
from biblia_tui.corpus import save_corpus


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "no-config.json")


@pytest.fixture
def corpus_file(tmp_path, corpus):
    path = tmp_path / "bible.json"
    save_corpus(corpus, path)
    return path


class TestLookup:
    def test_single_verse(self, corpus_file, capsys):
        assert main(["lookup", "--corpus", str(corpus_file), "genesis", "1:2"]) == 0
        assert capsys.readouterr().out == "genesis 1:2\nGenesis uno 2\n"

    def test_range(self, corpus_file, capsys):
        assert main(["lookup", "--corpus", str(corpus_file), "genesis 1:30-2:1"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("genesis 1:30-2:1\n")
        assert "genesis 2:1 - Genesis dos 1" in out

    def test_failure_exit_status(self, corpus_file, capsys):
        assert main(["lookup", "--corpus", str(corpus_file), "nogospel 1:1"]) == 1
        assert 'Book "nogospel" not found.' in capsys.readouterr().out

    def test_missing_corpus(self, tmp_path):
        assert main(["lookup", "--corpus", str(tmp_path / "none.json"), "genesis 1:1"]) == 1

    def test_no_corpus_configured(self):
        assert main(["lookup", "genesis 1:1"]) == 1


class TestConvert:
    def test_convert(self, tmp_path, capsys):
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.txt").write_text("(1, 1, 1, 'a') (77, 1, 1, 'b')", encoding="utf-8")
        out = tmp_path / "bible.json"

        assert main(["convert", str(src), str(out), "--bible-version", "RV"]) == 0

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data == {"bible_version": "RV", "books": {"genesis": {"1": ["a"]}}}
        printed = capsys.readouterr().out
        assert "1 books, 1 verses" in printed
        assert "Unknown book number: 77" in printed

    def test_convert_empty_dir(self, tmp_path):
        assert main(["convert", str(tmp_path), str(tmp_path / "out.json")]) == 1
