"""Dictionary: a named, length-bucketed word collection.

A Dictionary owns a WordSet and a ``sorted`` flag. Mutating operations
return the Dictionary itself so calls can be chained:

    d = Dictionary(name="small").append_all(["this", "is", "a"]).sort()

Aliasing:
    ``share_handle()`` (or plain assignment) gives a second reference to the
    same storage. ``deep_copy()`` gives independent storage; ``clone()`` and
    ``dup()`` are the same operation under older names.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Optional

from .errors import DictionaryError, ErrorKind
from .normalizer import DELIMITERS, normalize_token, tokenize
from .schema import Row
from .wordset import WordSet

logger = logging.getLogger(__name__)

# Minimum distinct words and distinct lengths a dictionary needs to
# generate length-exact output
MIN_DISTINCT_WORDS = 300
MIN_DISTINCT_LENGTHS = 2


@dataclass
class DictionaryStats:
    """Word counts of a dictionary."""

    total_words: int = 0
    distinct_words: int = 0
    by_length: dict[int, int] = field(default_factory=dict)


class Dictionary:
    """Words bucketed by length, with a name and a sorted flag."""

    def __init__(
        self,
        name: Optional[str] = None,
        words: Optional[Iterable[str]] = None,
        delimiters: str = DELIMITERS,
    ):
        """Initialize dictionary.

        Args:
            name: Optional display name.
            words: Words to insert loosely.
            delimiters: Delimiter set used by strict insertion and clean().
        """
        self.name = name
        self.delimiters = delimiters
        self._words = WordSet(words)
        self._sorted = False

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[str],
        name: Optional[str] = None,
        delimiters: str = DELIMITERS,
    ) -> "Dictionary":
        """Build a dictionary by strict placement of pre-split tokens."""
        return cls(name=name, delimiters=delimiters).place_all(tokens)

    @classmethod
    def from_text(
        cls,
        text: str,
        name: Optional[str] = None,
        delimiters: str = DELIMITERS,
    ) -> "Dictionary":
        """Build a dictionary from source text split on ``delimiters``."""
        return cls.from_tokens(tokenize(text, delimiters), name, delimiters)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def append(self, word: str) -> "Dictionary":
        """Loose insert: no validation, duplicates allowed."""
        self._words.insert(word)
        self._sorted = False
        return self

    def append_all(self, words: Iterable[str]) -> "Dictionary":
        for word in words:
            self.append(word)
        return self

    def place(self, word: str) -> "Dictionary":
        """Strict insert: normalize first, silently drop empty tokens.

        Duplicates are still allowed; use prune() or clean() to remove them.
        """
        normalized = normalize_token(word, self.delimiters)
        if normalized is not None:
            self._words.insert(normalized)
            self._sorted = False
        return self

    def place_all(self, words: Iterable[str]) -> "Dictionary":
        for word in words:
            self.place(word)
        return self

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def sort(self) -> "Dictionary":
        """Order Rows by ascending length.

        The sort is stable: words of equal length keep their insertion order.
        """
        self._words.sort()
        self._sorted = True
        return self

    def is_sorted(self) -> bool:
        """Current sorted flag (not recomputed)."""
        return self._sorted

    def prune(self) -> "Dictionary":
        """Remove duplicate words within each Row, keeping first occurrences.

        Removing duplicates from sorted Rows keeps them sorted, so the flag
        is left as is.
        """
        self._words.prune()
        return self

    def clean(self) -> "Dictionary":
        """Re-normalize every word, then prune and drop empty Rows."""
        delimiters = self.delimiters
        self._words.map_words(lambda w: normalize_token(w, delimiters) or "")
        self._words.prune()
        self._sorted = False
        return self

    def map_words(self, fn: Callable[[str], str]) -> "Dictionary":
        """Apply ``fn`` to every word, rebuilding each Row.

        Words whose length changes move to the matching Row; words mapped to
        the empty string are dropped.
        """
        self._words.map_words(fn)
        self._sorted = False
        return self

    tweak = map_words

    def close(self) -> "Dictionary":
        """Discard all words. A closed dictionary behaves as empty."""
        self._words.clear()
        self._sorted = False
        return self

    # ------------------------------------------------------------------
    # Copies and identity
    # ------------------------------------------------------------------

    def share_handle(self) -> "Dictionary":
        """Another reference to the same storage."""
        return self

    def deep_copy(self) -> "Dictionary":
        """Independent copy of every Row and word."""
        copy = Dictionary(name=self.name, delimiters=self.delimiters)
        copy._words = self._words.copy()
        copy._sorted = self._sorted
        return copy

    clone = deep_copy
    dup = deep_copy

    def equal(self, other: "Dictionary") -> bool:
        """True iff ``other`` is a handle to the same storage."""
        return self is other

    def inequal(self, other: "Dictionary") -> bool:
        return not self.equal(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self.name == other.name and self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def include(self, word: str) -> bool:
        return self._words.contains(word)

    def exclude(self, word: str) -> bool:
        return not self.include(word)

    def __contains__(self, word: object) -> bool:
        return self._words.contains(word)

    def length(self) -> int:
        """Total word count, duplicates included."""
        return self._words.count()

    size = length
    count = length

    def __len__(self) -> int:
        return self._words.count()

    def distinct(self) -> int:
        return self._words.distinct()

    def largest(self) -> int:
        """Longest word length present, or 0."""
        return self._words.largest()

    def sample(self, rng: Optional[random.Random] = None) -> str:
        """Random word, weighted by Row population.

        Raises:
            IndexError: If the dictionary is empty.
        """
        return self._words.sample(rng or random.Random())

    def rows(self) -> list[Row]:
        return self._words.rows()

    def row(self, length: int) -> Optional[Row]:
        return self._words.row(length)

    def words(self) -> Iterator[str]:
        return self._words.words()

    @property
    def word_set(self) -> WordSet:
        return self._words

    def stats(self) -> DictionaryStats:
        """Word counts overall and per length."""
        stats = DictionaryStats()
        for row in self._words:
            stats.total_words += len(row)
            stats.by_length[row.length] = stats.by_length.get(row.length, 0) + len(row)
        stats.distinct_words = self._words.distinct()
        return stats

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Check the dictionary can serve length-exact generation.

        Raises:
            DictionaryError: DICT_UNSORTABLE when empty or the words cannot be
                ordered, DICT_UNKNOWN when the Rows are inconsistent with their
                lengths or the word count, DICT_TOO_SMALL when there are too few
                distinct words or lengths.
        """
        rows = self._words.rows()
        if not rows or self._words.count() == 0:
            raise DictionaryError(ErrorKind.DICT_UNSORTABLE, "dictionary is empty")

        row_words = [word for row in rows for word in row]
        try:
            sorted(row_words)
        except TypeError as e:
            raise DictionaryError(ErrorKind.DICT_UNSORTABLE, str(e)) from e

        if len(row_words) != self._words.count():
            raise DictionaryError(
                ErrorKind.DICT_UNKNOWN,
                f"rows hold {len(row_words)} words, expected {self._words.count()}",
            )
        for row in rows:
            for word in row:
                if not isinstance(word, str) or len(word) != row.length:
                    raise DictionaryError(
                        ErrorKind.DICT_UNKNOWN,
                        f"word {word!r} stored in {row.label} row",
                    )

        distinct = len(set(row_words))
        if distinct < MIN_DISTINCT_WORDS:
            raise DictionaryError(
                ErrorKind.DICT_TOO_SMALL,
                f"{distinct} distinct words, need {MIN_DISTINCT_WORDS}",
            )
        if len(rows) < MIN_DISTINCT_LENGTHS:
            raise DictionaryError(
                ErrorKind.DICT_TOO_SMALL,
                f"{len(rows)} distinct word lengths, need {MIN_DISTINCT_LENGTHS}",
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except DictionaryError:
            return False
        return True

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def join(self, separator: str = " ") -> str:
        """All words across all Rows, one separator between each."""
        return separator.join(self._words.words())

    def __str__(self) -> str:
        groups = (", ".join(str(w) for w in row.words) for row in self._words)
        return "[" + ", ".join(f"[{group}]" for group in groups) + "]"

    def __repr__(self) -> str:
        return (
            f"Dictionary({self.name!r}: {self.length()} words, "
            f"{len(self._words.lengths())} rows, sorted={self._sorted})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        stats = self.stats()
        return {
            "name": self.name,
            "sorted": self._sorted,
            "word_count": stats.total_words,
            "by_length": {f"{k}-c": v for k, v in stats.by_length.items()},
            "words": list(self._words.words()),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dictionary":
        """Create from dictionary. A true ``sorted`` flag re-sorts the words."""
        d = cls(name=data.get("name"), words=data.get("words", []))
        if data.get("sorted", False):
            d.sort()
        return d

    def save(self, filepath: Path | str) -> None:
        """Save dictionary to JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: Path | str) -> "Dictionary":
        """Load dictionary from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        d = cls.from_dict(data)
        logger.debug("Loaded %r from %s", d, filepath)
        return d
