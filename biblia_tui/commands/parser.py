"""Parser for ex-style ``:`` commands.

A command line is a name followed by free text. The text is kept exactly
as typed so that reference queries reach the search layer untouched;
``--key=value`` options are read from it separately.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List

COMMAND_ALIASES: Dict[str, str] = {
    "q": "quit",
    "h": "help",
    "g": "goto",
    "go": "goto",
    "v": "version",
    "y": "yank",
    "r": "reload",
}

# --path=/tmp/bible.json, --path="my bible.json" or a bare --force
_OPTION_PATTERN = re.compile(
    r'(?:^|\s)--(?P<key>[\w-]+)(?:=(?:"(?P<quoted>[^"]*)"|(?P<value>\S*)))?'
)


@dataclass
class ParsedCommand:
    """A command name and the rest of its line."""

    name: str
    text: str = ""
    options: Dict[str, str] = field(default_factory=dict)


def parse_command(line: str) -> ParsedCommand:
    """Split a command line (without the leading ``:``).

    Examples:
        "goto 1 samuel 1:1-5"      -> name "goto", text "1 samuel 1:1-5"
        "reload --path=bible.json" -> name "reload", options {"path": "bible.json"}
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return ParsedCommand(name="")

    name = parts[0].lower()
    text = parts[1] if len(parts) > 1 else ""
    options = {
        match.group("key"): _option_value(match)
        for match in _OPTION_PATTERN.finditer(text)
    }
    return ParsedCommand(COMMAND_ALIASES.get(name, name), text, options)


def _option_value(match: "re.Match[str]") -> str:
    for group in ("quoted", "value"):
        if match.group(group) is not None:
            return match.group(group)
    return "true"


def get_command_names() -> List[str]:
    """Command names offered for completion."""
    return ["quit", "help", "goto", "reload", "version", "yank"]
