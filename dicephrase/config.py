"""
Dicephrase persistent configuration.

Loads/saves settings from ~/.dicephrase/config.json.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Optional

from dicephrase.core.entropy import RandomSource
from dicephrase.core.generator import PassphraseOptions
from dicephrase.core.log import get_logger
from dicephrase.core.wordlist import WORDLISTS

logger = get_logger('config')


DEFAULTS = {
    "generator": {
        "word_count": 6,
        "separator": " ",
        "wordlist": "eff-long",
        "enhance_entropy": False,
        "count": 1,
    },
    "logging": {
        "level": "WARNING",
    },
}

CONFIG_DIR = Path.home() / ".dicephrase"
CONFIG_FILE = CONFIG_DIR / "config.json"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning a new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _same_type(value: Any, default: Any) -> bool:
    # bool is an int subclass, so compare exact types
    return type(value) is type(default)


class Config:
    """Persistent configuration with deep-merge defaults."""

    def __init__(self, config_file: Optional[Path] = None):
        self._file = Path(config_file) if config_file else CONFIG_FILE
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._file

    def _load(self) -> dict:
        """Load config from file, deep-merged with defaults."""
        if self._file.exists():
            try:
                with open(self._file, 'r') as f:
                    user_data = json.load(f)
                if isinstance(user_data, dict):
                    return self._validate(_deep_merge(DEFAULTS, user_data))
                logger.warning("Ignoring %s: top level is not an object", self._file)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._file, e)
        return copy.deepcopy(DEFAULTS)

    def _validate(self, data: dict) -> dict:
        """Replace values whose type does not match the defaults."""
        for section, defaults in DEFAULTS.items():
            if not isinstance(data.get(section), dict):
                logger.warning("Ignoring section '%s' in %s: not an object", section, self._file)
                data[section] = copy.deepcopy(defaults)
                continue
            for key, default in defaults.items():
                value = data[section].get(key)
                if not _same_type(value, default):
                    logger.warning("Ignoring %s.%s=%r in %s: expected %s",
                                   section, key, value, self._file, type(default).__name__)
                    data[section][key] = default

        level = data["logging"]["level"]
        if not isinstance(logging.getLevelName(level.upper()), int):
            logger.warning("Ignoring logging.level=%r in %s: unknown level", level, self._file)
            data["logging"]["level"] = DEFAULTS["logging"]["level"]
        else:
            data["logging"]["level"] = level.upper()
        return data

    def _checked(self, section: str, key: str) -> Any:
        """Get a value, or its default if it has the wrong type."""
        value = self.get(section, key)
        default = DEFAULTS[section][key]
        if not _same_type(value, default):
            logger.warning("Ignoring %s.%s=%r: expected %s",
                           section, key, value, type(default).__name__)
            return default
        return value

    def get(self, section: str, key: str) -> Any:
        """Get a config value."""
        return self._data.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a config value."""
        if section not in self._data:
            self._data[section] = {}
        self._data[section][key] = value

    def save(self) -> None:
        """Save config to file."""
        self._file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file, 'w') as f:
            json.dump(self._data, f, indent=2)

    def options(self, random_source: Optional[RandomSource] = None) -> PassphraseOptions:
        """
        Build PassphraseOptions from the generator section.

        Args:
            random_source: Source to use instead of the system CSPRNG

        Raises:
            ValueError: If the configured wordlist name is unknown
        """
        name = self._checked("generator", "wordlist")
        if name not in WORDLISTS:
            raise ValueError(
                f"Unknown wordlist '{name}' (choose from: {', '.join(sorted(WORDLISTS))})"
            )

        options = PassphraseOptions(
            word_count=self._checked("generator", "word_count"),
            separator=self._checked("generator", "separator"),
            wordlist=WORDLISTS[name],
            enhance_entropy=self._checked("generator", "enhance_entropy"),
        )
        if random_source is not None:
            options.random_source = random_source
        return options
