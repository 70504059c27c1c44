"""Exception types raised by nameit."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class NameitError(Exception):
    """Base class for all nameit errors."""


class WordListLoadError(NameitError):
    """Raised when a word list file cannot be loaded"""
    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class WordListNotFoundError(WordListLoadError):
    """Raised when a word list file does not exist"""


class WordListReadError(WordListLoadError):
    """Raised when a word list file exists but cannot be read or decoded"""


class EmptyWordListError(NameitError):
    """Raised when a word list resolves to zero words"""
    def __init__(self, source: Optional[str] = None):
        self.source = source
        if source:
            super().__init__(f"Word list from {source} is empty")
        else:
            super().__init__("Word list is empty")


class OutputEncodingError(NameitError):
    """Raised when generated names cannot be serialized"""


class ConfigError(NameitError):
    """Raised when the config file is unreadable or holds invalid values"""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist"""


class UnknownOutputFormatWarning(UserWarning):
    """Issued when an unrecognized output format falls back to text"""
