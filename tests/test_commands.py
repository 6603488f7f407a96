"""Tests for command parsing and handling."""

from biblia_tui.commands import CommandHandler, parse_command
from biblia_tui.commands.parser import COMMAND_ALIASES, get_command_names


class TestParseCommand:
    """Test command parsing."""

    def test_simple_command(self):
        cmd = parse_command("quit")
        assert cmd.name == "quit"
        assert cmd.text == ""
        assert cmd.options == {}

    def test_command_alias(self):
        assert parse_command("q").name == "quit"
        assert parse_command("G genesis 1:1").name == "goto"

    def test_query_text_kept_verbatim(self):
        cmd = parse_command("goto  genesis  1:30 - 2:2 ")
        assert cmd.name == "goto"
        assert cmd.text == "genesis  1:30 - 2:2"

    def test_quotes_are_not_stripped(self):
        assert parse_command('goto "genesis 1:1').text == '"genesis 1:1'

    def test_options(self):
        cmd = parse_command("reload --path=/tmp/bible.json")
        assert cmd.name == "reload"
        assert cmd.options == {"path": "/tmp/bible.json"}

    def test_quoted_option_and_bare_flag(self):
        cmd = parse_command('reload --path="my bible.json" --force')
        assert cmd.options == {"path": "my bible.json", "force": "true"}

    def test_range_dash_is_not_an_option(self):
        assert parse_command("goto genesis 1:1 -3").options == {}

    def test_empty_command(self):
        assert parse_command("   ").name == ""

    def test_command_names(self):
        names = get_command_names()
        assert "goto" in names
        assert set(COMMAND_ALIASES.values()) <= set(names)


class TestCommandHandler:
    """Test command execution."""

    def test_goto(self, corpus):
        handler = CommandHandler(lambda: corpus)
        result = handler.execute(parse_command("goto genesis 1:1-3"))
        assert result.success
        assert result.action == "show"
        assert len(result.data["result"].verses) == 3

    def test_goto_spaced_range(self, corpus):
        handler = CommandHandler(lambda: corpus)
        result = handler.execute(parse_command("goto Genesis  1 : 30  -  2 : 1"))
        assert result.data["result"].reference == "genesis 1:30-2:1"

    def test_goto_failure_message(self, corpus):
        handler = CommandHandler(lambda: corpus)
        result = handler.execute(parse_command("goto nogospel 1:1"))
        assert not result.success
        assert "nogospel" in result.message

    def test_goto_without_args(self, corpus):
        result = CommandHandler(lambda: corpus).execute(parse_command("goto"))
        assert not result.success

    def test_no_corpus(self):
        handler = CommandHandler(lambda: None)
        assert not handler.lookup("genesis 1:1").success
        assert not handler.execute(parse_command("version")).success

    def test_version(self, corpus):
        result = CommandHandler(lambda: corpus).execute(parse_command("v"))
        assert result.message == "Prueba (4 books)"

    def test_reload_path(self, corpus):
        result = CommandHandler(lambda: corpus).execute(
            parse_command("reload --path=other.json")
        )
        assert result.action == "reload"
        assert result.data == {"path": "other.json"}

    def test_quit_and_unknown(self, corpus):
        handler = CommandHandler(lambda: corpus)
        assert handler.execute(parse_command("q")).action == "quit"
        result = handler.execute(parse_command("frobnicate"))
        assert not result.success
        assert "frobnicate" in result.message
