"""Configuration management for the nameit CLI."""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigError, ConfigNotFoundError
from .generator import DEFAULT_RANDOM_CHARS, DEFAULT_RANDOM_LENGTH, DEFAULT_SEPARATOR, FormatOptions
from .lists import Mode
from .wordsource import parse_word_list


logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".nameit.yaml"
ENV_PREFIX = "NAMEIT_"

_TRUE = {"1", "true", "yes", "on", "y"}
_FALSE = {"0", "false", "no", "off", "n", ""}


def default_config_path() -> Path:
    """Return $HOME/.nameit.yaml."""
    return Path.home() / CONFIG_FILENAME


class Config:
    """Default option values read from a YAML config file.

    The file holds a single mapping whose keys are option names, written
    with hyphens as on the command line (``append-random``) or with
    underscores (``append_random``).
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config.

        Args:
            config_path: Config file requested with --config. If None, the
                         default $HOME/.nameit.yaml is used when it exists.

        Raises:
            ConfigNotFoundError: If config_path is given but does not exist
            ConfigError: If the file is not valid YAML or not a mapping
        """
        self.required = config_path is not None
        self.config_path = Path(config_path) if config_path else default_config_path()
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if not self.config_path.exists():
            if self.required:
                raise ConfigNotFoundError(f"Config file not found: {self.config_path}")
            self._data = {}
            return

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {self.config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a mapping of option names")

        self._data = {str(k).replace("_", "-"): v for k, v in data.items()}
        logger.warning(f"Using config file: {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by option name (hyphens or underscores)."""
        return self._data.get(key.replace("_", "-"), default)

    def __contains__(self, key: str) -> bool:
        return key.replace("_", "-") in self._data


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for '{key}': {value!r}")


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid integer for '{key}': {value!r}")
    try:
        number = int(str(value).strip())
    except ValueError as e:
        raise ConfigError(f"Invalid integer for '{key}': {value!r}") from e
    if number < 0:
        raise ConfigError(f"'{key}' must be >= 0, got {number}")
    return number


def _to_mode(key: str, value: Any) -> Mode:
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).strip().lower())
    except ValueError as e:
        choices = ", ".join(m.value for m in Mode)
        raise ConfigError(f"Invalid {key} '{value}'. Must be: {choices}") from e


def _to_path(key: str, value: Any) -> Optional[Path]:
    if value is None or str(value).strip() == "":
        return None
    return Path(str(value)).expanduser()


def _to_words(key: str, value: Any) -> Tuple[str, ...]:
    if value is not None and not isinstance(value, (str, list, tuple)):
        raise ConfigError(f"Invalid word list for '{key}': {value!r}")
    return tuple(parse_word_list(value))


def _to_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(f"Invalid value for '{key}': {value!r}")
    return str(value)


_COERCE = {
    "mode": _to_mode,
    "count": _to_int,
    "prefix": _to_str,
    "separator": _to_str,
    "output": _to_str,
    "append_random": _to_bool,
    "random_chars": _to_str,
    "random_length": _to_int,
    "adjectives_list": _to_words,
    "nouns_list": _to_words,
    "adjectives_file": _to_path,
    "nouns_file": _to_path,
}

# Options that select the word source for each kind
WORD_SOURCE_FIELDS = {
    "adjectives": ("adjectives_list", "adjectives_file"),
    "nouns": ("nouns_list", "nouns_file"),
}


@dataclass(frozen=True)
class Settings:
    """Fully resolved options for one nameit run.

    Built once by Settings.resolve and passed explicitly to the word
    source, generator and formatter.
    """
    mode: Mode = Mode.modern
    count: int = 1
    prefix: str = ""
    separator: str = DEFAULT_SEPARATOR
    output: str = "text"
    append_random: bool = False
    random_chars: str = DEFAULT_RANDOM_CHARS
    random_length: int = DEFAULT_RANDOM_LENGTH
    adjectives_list: Tuple[str, ...] = ()
    nouns_list: Tuple[str, ...] = ()
    adjectives_file: Optional[Path] = None
    nouns_file: Optional[Path] = None

    @classmethod
    def resolve(
        cls,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Config] = None,
        environment: Optional[Mapping[str, Any]] = None,
    ) -> Settings:
        """Merge option values by precedence.

        Word sources are resolved per kind, not per field: once a layer names
        a source for adjectives or nouns (``mode``, ``<kind>_list`` or
        ``<kind>_file``), list and file values for that kind in lower layers
        are ignored.

        Args:
            overrides: Values given on the command line, keyed by field name
            config: Config file defaults
            environment: Values given via NAMEIT_* environment variables

        Returns:
            Settings with overrides > environment > config > built-in defaults

        Raises:
            ConfigError: If a value cannot be converted to the option's type
        """
        layers = [dict(overrides or {}), dict(environment or {})]
        for layer in layers:
            unknown = set(layer) - set(_COERCE)
            if unknown:
                raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        if config is not None:
            layers.append({name: config.get(name) for name in _COERCE if name in config})

        for source_fields in WORD_SOURCE_FIELDS.values():
            for i, layer in enumerate(layers):
                if "mode" in layer or any(name in layer for name in source_fields):
                    for lower in layers[i + 1:]:
                        for name in source_fields:
                            lower.pop(name, None)
                    break

        values: Dict[str, Any] = {}
        for f in fields(cls):
            for layer in layers:
                if f.name in layer:
                    values[f.name] = _COERCE[f.name](f.name.replace("_", "-"), layer[f.name])
                    break

        return cls(**values)

    def format_options(self) -> FormatOptions:
        """Build the FormatOptions for the generator."""
        return FormatOptions(
            separator=self.separator,
            prefix=self.prefix,
            append_random=self.append_random,
            random_chars=self.random_chars,
            random_length=self.random_length,
        )
