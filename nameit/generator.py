"""
Name synthesis.

Builds memorable names like "quiet-forest" or "app-quiet-forest-042" from
an adjective list, a noun list and a set of FormatOptions.
"""
from __future__ import annotations

import logging
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import EmptyWordListError


logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "-"
DEFAULT_RANDOM_CHARS = "0123456789"
DEFAULT_RANDOM_LENGTH = 3


@dataclass(frozen=True)
class FormatOptions:
    """Controls the shape of a generated name.

    Attributes:
        separator: String placed between every part of the name
        prefix: Leading part, omitted when empty
        append_random: Whether to add a random suffix
        random_chars: Alphabet the suffix is drawn from
        random_length: Number of suffix characters
    """
    separator: str = DEFAULT_SEPARATOR
    prefix: str = ""
    append_random: bool = False
    random_chars: str = DEFAULT_RANDOM_CHARS
    random_length: int = DEFAULT_RANDOM_LENGTH

    def __post_init__(self) -> None:
        if self.random_length < 0:
            raise ValueError(f"random_length must be >= 0, got {self.random_length}")

    @property
    def has_suffix(self) -> bool:
        """True when a random suffix will be appended."""
        return self.append_random and bool(self.random_chars) and self.random_length > 0


class RandomSource(ABC):
    """Provides random indexes for word and character selection."""

    @abstractmethod
    def index(self, upper: int) -> int:
        """Return an index in the range [0, upper)."""


class SystemRandomSource(RandomSource):
    """RandomSource backed by random.Random, seeded from the clock by default."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(time.time_ns() if seed is None else seed)

    def index(self, upper: int) -> int:
        return self._random.randrange(upper)


def _pick(items: Sequence[str], rng: RandomSource) -> str:
    return items[rng.index(len(items))]


def _check_words(adjectives: Sequence[str], nouns: Sequence[str]) -> None:
    if not adjectives:
        raise EmptyWordListError("adjectives")
    if not nouns:
        raise EmptyWordListError("nouns")


def synthesize(
    adjectives: Sequence[str],
    nouns: Sequence[str],
    options: Optional[FormatOptions] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generate one name in the format: [prefix-]adjective-noun[-suffix]

    Examples:
        - quiet-forest
        - app-quiet-forest
        - quiet-forest-381

    Args:
        adjectives: Candidate adjectives (non-empty)
        nouns: Candidate nouns (non-empty)
        options: Formatting options (defaults to FormatOptions())
        rng: Random index provider (defaults to a fresh SystemRandomSource)

    Returns:
        The generated name

    Raises:
        EmptyWordListError: If either word list is empty
    """
    _check_words(adjectives, nouns)
    options = options or FormatOptions()
    rng = rng or SystemRandomSource()

    adjective = _pick(adjectives, rng)
    noun = _pick(nouns, rng)
    parts = [adjective, noun]

    if options.prefix:
        parts.insert(0, options.prefix)

    if options.has_suffix:
        parts.append("".join(_pick(options.random_chars, rng) for _ in range(options.random_length)))

    return options.separator.join(parts)


def generate_batch(
    adjectives: Sequence[str],
    nouns: Sequence[str],
    options: Optional[FormatOptions] = None,
    count: int = 1,
    rng: Optional[RandomSource] = None,
) -> List[str]:
    """Generate `count` names in generation order.

    A single RandomSource is shared across the batch. Duplicates are not
    removed.

    Raises:
        EmptyWordListError: If either word list is empty (checked even for count=0)
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    _check_words(adjectives, nouns)
    rng = rng or SystemRandomSource()

    names = [synthesize(adjectives, nouns, options, rng) for _ in range(count)]
    logger.debug(f"Generated {len(names)} names from {len(adjectives)} adjectives and {len(nouns)} nouns")
    return names
