"""
Settings for the chord engine.

Loads a TOML file and validates every tunable against fixed bounds. Missing
sections or parameters fall back to defaults.

Example ``songchords.toml``::

    [annotator]
    cache_capacity = 100
    max_cacheable_length = 10000
    default_key = "C"

    [parser]
    classifier = "heuristic"
    max_chord_line_words = 6

    [transpose]
    spelling = "sign"
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import toml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SONGCHORDS_CONFIG"
DEFAULT_CONFIG_PATH = "songchords.toml"


class Settings:
    """Settings loader and validator."""

    PARAM_BOUNDS = {
        "annotator": {
            "cache_capacity": (1, 10_000),
            "max_cacheable_length": (1, 1_000_000),
        },
        "parser": {
            "max_chord_line_words": (1, 32),
        },
    }

    PARAM_CHOICES = {
        "parser": {
            "classifier": ("heuristic", "bracketed"),
        },
        "transpose": {
            "spelling": ("sign", "key"),
        },
    }

    DEFAULT_CONFIG = {
        "annotator": {
            "cache_capacity": 100,
            "max_cacheable_length": 10_000,
            "default_key": "C",
        },
        "parser": {
            "classifier": "heuristic",
            "max_chord_line_words": 6,
        },
        "transpose": {
            "spelling": "sign",
        },
    }

    def __init__(self, config_dict: dict[str, Any] | None = None, source: str = "<defaults>"):
        self.source = source
        self.data = copy.deepcopy(config_dict) if config_dict is not None else {}
        self._fill_defaults()
        self._validate()

    @classmethod
    def load(cls, config_path: str | None = None) -> "Settings":
        """
        Load settings from a TOML file.

        Args:
            config_path: Path to a TOML file. If None, uses the SONGCHORDS_CONFIG
                         env var, then ``songchords.toml`` in the working directory.

        Returns:
            Settings instance.

        Raises:
            ConfigError: If the file cannot be parsed or a value is out of bounds.
        """
        explicit = config_path is not None or CONFIG_ENV_VAR in os.environ
        if config_path is None:
            config_path = os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)

        path = Path(config_path)

        if not path.exists():
            if explicit:
                logger.warning(f"Config file not found: {path}. Using defaults.")
            else:
                logger.debug(f"No {path} in working directory. Using defaults.")
            return cls()

        try:
            config_dict = toml.load(path)
        except (toml.TomlDecodeError, OSError) as e:
            raise ConfigError(str(path), str(e)) from e

        logger.info(f"Loaded config from {path}")
        return cls(config_dict, source=str(path))

    def _fill_defaults(self) -> None:
        for section, params in self.DEFAULT_CONFIG.items():
            section_data = self.data.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigError(self.source, f"[{section}] must be a table")
            for param, default_val in params.items():
                section_data.setdefault(param, default_val)

    def _validate(self) -> None:
        """
        Validate numeric bounds and enumerated choices.

        Raises:
            ConfigError: If any parameter is out of bounds.
        """
        for section, params in self.PARAM_BOUNDS.items():
            for param, (min_val, max_val) in params.items():
                value = self.data[section][param]
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(
                        self.source, f"{section}.{param} must be an integer, got {value!r}"
                    )
                if not (min_val <= value <= max_val):
                    raise ConfigError(
                        self.source,
                        f"{section}.{param}={value} out of bounds [{min_val}, {max_val}]",
                    )

        for section, params in self.PARAM_CHOICES.items():
            for param, choices in params.items():
                value = self.data[section][param]
                if value not in choices:
                    raise ConfigError(
                        self.source,
                        f"{section}.{param}={value!r} must be one of {', '.join(choices)}",
                    )

        if not isinstance(self.data["annotator"]["default_key"], str):
            raise ConfigError(self.source, "annotator.default_key must be a string")

        logger.debug(f"Config validation passed ({self.source})")

    def get(self, section: str, param: str, default: Any = None) -> Any:
        """Get a config parameter safely."""
        return self.data.get(section, {}).get(param, default)

    def __repr__(self) -> str:
        return f"Settings(source={self.source})"
