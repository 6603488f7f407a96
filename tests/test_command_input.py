"""Tests for input history and completion."""

from biblia_tui.widgets.command_input import InputHistory, common_prefix, complete_word


class TestInputHistory:
    """Test recall of submitted lines."""

    def test_back_then_forward_restores_draft(self):
        history = InputHistory()
        history.add("genesis 1:1")
        history.add("juan 3:16")

        assert history.back("sal") == "juan 3:16"
        assert history.back("ignored") == "genesis 1:1"
        assert history.back("ignored") == "genesis 1:1"
        assert history.forward() == "juan 3:16"
        assert history.forward() == "sal"
        assert history.forward() is None

    def test_empty(self):
        history = InputHistory()
        assert history.back("x") is None
        assert history.forward() is None

    def test_repeat_and_limit(self):
        history = InputHistory(limit=2)
        for line in ["a", "b", "b", "c"]:
            history.add(line)
        assert history.entries == ["b", "c"]


class TestCompletion:
    """Test tab completion helpers."""

    def test_common_prefix(self):
        assert common_prefix(["1 samuel", "1 reyes"]) == "1 "
        assert common_prefix([]) == ""

    def test_unique_command(self):
        assert complete_word("ver", ["version", "goto"]) == "version "

    def test_keeps_rest_of_line(self):
        assert complete_word("go genesis", ["goto", "quit"]) == "goto genesis"

    def test_multi_word_book(self):
        books = ["1 samuel", "1 reyes", "genesis"]
        assert complete_word("1 s", books, first_word=False) == "1 samuel "
        assert complete_word("1", books, first_word=False) == "1 "

    def test_nothing_to_add(self):
        assert complete_word("x", ["goto"]) is None
        assert complete_word("", ["goto"]) is None
        assert complete_word("1 ", ["1 samuel", "1 reyes"], first_word=False) is None
