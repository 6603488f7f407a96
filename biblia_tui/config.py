"""Configuration management for biblia-tui."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from biblia_tui.corpus.builder import DEFAULT_BIBLE_VERSION


CONFIG_DIR = Path.home() / ".config" / "biblia-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_REFERENCE = "genesis 1:1"


@dataclass
class Config:
    """Application configuration."""

    corpus_path: Optional[str] = None
    bible_version: str = DEFAULT_BIBLE_VERSION
    default_reference: str = DEFAULT_REFERENCE

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    corpus_path=data.get("corpus_path"),
                    bible_version=data.get("bible_version", DEFAULT_BIBLE_VERSION),
                    default_reference=data.get("default_reference", DEFAULT_REFERENCE),
                )
        except (json.JSONDecodeError, OSError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "corpus_path": self.corpus_path,
            "bible_version": self.bible_version,
            "default_reference": self.default_reference,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
