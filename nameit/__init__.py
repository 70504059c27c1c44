"""
nameit: memorable random name generator.

This package provides core primitives:
- synthesize / generate_batch: build names like "quiet-forest-042" from word lists.
- FormatOptions: immutable knobs for separator, prefix and random suffix.
- RandomSource: pluggable random index provider (SystemRandomSource by default).
- WordSource: built-in, inline or file-backed word lists.
- format_names / write_names: text, JSON or YAML output.
- Settings / Config: option resolution from flags, environment and $HOME/.nameit.yaml.
"""

__version__ = "0.1.0"

from .errors import (
    NameitError,
    WordListLoadError,
    WordListNotFoundError,
    WordListReadError,
    EmptyWordListError,
    OutputEncodingError,
    ConfigError,
    ConfigNotFoundError,
    UnknownOutputFormatWarning,
)
from .lists import Mode, builtin_lists
from .generator import FormatOptions, RandomSource, SystemRandomSource, synthesize, generate_batch
from .wordsource import WordSource, MemoryWordSource, FileWordSource, select_word_source, load_word_lists
from .output import OutputFormat, format_names, write_names
from .config import Config, Settings

__all__ = [
    "__version__",
    # Errors
    "NameitError",
    "WordListLoadError",
    "WordListNotFoundError",
    "WordListReadError",
    "EmptyWordListError",
    "OutputEncodingError",
    "ConfigError",
    "ConfigNotFoundError",
    "UnknownOutputFormatWarning",
    # Word lists
    "Mode",
    "builtin_lists",
    "WordSource",
    "MemoryWordSource",
    "FileWordSource",
    "select_word_source",
    "load_word_lists",
    # Generation
    "FormatOptions",
    "RandomSource",
    "SystemRandomSource",
    "synthesize",
    "generate_batch",
    # Output
    "OutputFormat",
    "format_names",
    "write_names",
    # Configuration
    "Config",
    "Settings",
]
