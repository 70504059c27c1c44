"""
Word sources for name generation.

A WordSource provides an ordered, non-empty tuple of words. Built-in
lists and inline --*-list values are held in memory; --*-file values are
read from disk, one word per line.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .errors import EmptyWordListError, WordListNotFoundError, WordListReadError
from .lists import Mode, builtin_lists


logger = logging.getLogger(__name__)

ADJECTIVES = "adjectives"
NOUNS = "nouns"


def _clean(words: Iterable[str]) -> Tuple[str, ...]:
    stripped = (w.strip() for w in words)
    return tuple(w for w in stripped if w)


def parse_word_list(value: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """Split a comma-separated flag value into words.

    Also accepts an iterable of strings (as read from YAML config), in which
    case each item may itself be comma-separated.

    Example:
        >>> parse_word_list("red, blue,,green")
        ['red', 'blue', 'green']
    """
    if value is None:
        return []
    items = [value] if isinstance(value, str) else list(value)
    words: List[str] = []
    for item in items:
        words.extend(_clean(str(item).split(",")))
    return words


class WordSource(ABC):
    """Abstract provider of a word list."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable origin used in errors and logs."""

    @abstractmethod
    def _read(self) -> Iterable[str]:
        """Return raw words, before trimming."""

    def load(self) -> Tuple[str, ...]:
        """Load the words, trimmed and with blanks removed.

        Raises:
            EmptyWordListError: If no words remain
            WordListLoadError: If the underlying file cannot be read
        """
        words = _clean(self._read())
        if not words:
            raise EmptyWordListError(self.description)
        logger.debug(f"Loaded {len(words)} words from {self.description}")
        return words


class MemoryWordSource(WordSource):
    """Words held in memory: built-in lists or inline flag values."""

    def __init__(self, words: Iterable[str], description: str = "inline list") -> None:
        self.words = tuple(words)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def _read(self) -> Iterable[str]:
        return self.words


class FileWordSource(WordSource):
    """Words read from a UTF-8 text file, one per line."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    @property
    def description(self) -> str:
        return f"file {self.path}"

    def _read(self) -> Iterable[str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                return f.read().splitlines()
        except FileNotFoundError as e:
            raise WordListNotFoundError(self.path, "no such file") from e
        except IsADirectoryError as e:
            raise WordListReadError(self.path, "is a directory") from e
        except (OSError, UnicodeDecodeError) as e:
            raise WordListReadError(self.path, str(e)) from e


def select_word_source(
    kind: str,
    mode: Union[Mode, str] = Mode.modern,
    words: Optional[Iterable[str]] = None,
    path: Optional[Union[str, Path]] = None,
) -> WordSource:
    """Pick the source for one word kind ("adjectives" or "nouns").

    Precedence: inline words, then file, then the built-in list for mode.
    """
    if kind not in (ADJECTIVES, NOUNS):
        raise ValueError(f"Unknown word kind '{kind}'. Must be: {ADJECTIVES} or {NOUNS}")

    words = list(words or [])
    if words:
        return MemoryWordSource(words, description=f"inline {kind} list")
    if path:
        return FileWordSource(path)

    mode = Mode(mode)
    adjectives, nouns = builtin_lists(mode)
    builtin = adjectives if kind == ADJECTIVES else nouns
    return MemoryWordSource(builtin, description=f"built-in {mode.value} {kind}")


def load_word_lists(
    mode: Union[Mode, str] = Mode.modern,
    adjectives_list: Optional[Iterable[str]] = None,
    nouns_list: Optional[Iterable[str]] = None,
    adjectives_file: Optional[Union[str, Path]] = None,
    nouns_file: Optional[Union[str, Path]] = None,
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Resolve and load the (adjectives, nouns) pair.

    Raises:
        WordListLoadError: If a word file cannot be read
        EmptyWordListError: If a selected source holds no words
    """
    adjective_source = select_word_source(ADJECTIVES, mode, adjectives_list, adjectives_file)
    noun_source = select_word_source(NOUNS, mode, nouns_list, nouns_file)
    logger.info(f"Using {adjective_source.description} and {noun_source.description}")
    return adjective_source.load(), noun_source.load()
