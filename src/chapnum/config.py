"""Configuration management for chapnum."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from chapnum.recognition import ChapterNumberParser

# Default configuration directory
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "chapnum"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"

DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Application configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from file."""
        if self.config_path.exists():
            with open(self.config_path) as f:
                self._data = json.load(f)
        else:
            self._data = {}

    def _save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self._data, f, indent=2)

    @property
    def log_level(self) -> str:
        """Get the logging level name."""
        return self._data.get("log_level", DEFAULT_LOG_LEVEL).upper()

    @log_level.setter
    def log_level(self, value: str) -> None:
        """Set the logging level name."""
        self._data["log_level"] = value.upper()
        self._save()

    @property
    def extra_noise_words(self) -> list[str]:
        """Get the words stripped in addition to version and volume markers."""
        return list(self._data.get("extra_noise_words", []))

    @extra_noise_words.setter
    def extra_noise_words(self, value: list[str]) -> None:
        """Set the extra noise words."""
        self._data["extra_noise_words"] = list(value)
        self._save()

    def get_parser(self) -> ChapterNumberParser:
        """Build a chapter number parser from this configuration."""
        return ChapterNumberParser(self.extra_noise_words)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
