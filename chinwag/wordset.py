"""Length-bucketed word storage.

Words are kept in insertion order and indexed into Rows keyed by character
length, so the generator can ask for "a word of exactly N characters"
without scanning the whole vocabulary.

Sorting is stable by length: Rows come out in ascending length order and
each Row keeps the order its words were inserted in.
"""

import random
from typing import Callable, Iterable, Iterator, Optional

from .schema import Row


class WordSet:
    """Words in insertion order, indexed by length. Rows are never empty."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._order: list[str] = []
        # length -> Row
        self._rows: dict[int, Row] = {}
        if words is not None:
            for word in words:
                self.insert(word)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows.values())

    def __contains__(self, word: object) -> bool:
        return self.contains(word)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordSet):
            return NotImplemented
        return self._order == other._order

    def insert(self, word: str) -> None:
        """Append a word, creating its length's Row if absent."""
        length = len(word)
        if length < 1:
            return
        self._order.append(word)
        row = self._rows.get(length)
        if row is None:
            row = self._rows[length] = Row(length=length)
        row.append(word)

    def rows(self) -> list[Row]:
        """Rows in current iteration order."""
        return list(self._rows.values())

    def row(self, length: int) -> Optional[Row]:
        """Row for a given length, or None."""
        return self._rows.get(length)

    def lengths(self) -> list[int]:
        """Row keys in current iteration order."""
        return list(self._rows.keys())

    def words(self) -> Iterator[str]:
        """All words in storage order."""
        return iter(self._order)

    def count(self) -> int:
        """Total word count, duplicates included."""
        return len(self._order)

    def distinct(self) -> int:
        """Number of distinct words."""
        return len(set(self._order))

    def largest(self) -> int:
        """Longest Row key, or 0 when empty."""
        return max(self._rows, default=0)

    def contains(self, word: object) -> bool:
        """Exact-match membership."""
        if not isinstance(word, str):
            return False
        row = self._rows.get(len(word))
        return row is not None and word in row

    def sample(self, rng: random.Random) -> str:
        """Uniformly chosen word, weighted by Row population.

        Raises:
            IndexError: If the set is empty.
        """
        if not self._order:
            raise IndexError("cannot sample from an empty word set")
        # Uniform over the whole population is Row-population weighting
        return rng.choice(self._order)

    def sample_at_least(self, length: int, rng: random.Random) -> str:
        """Uniformly chosen word among those with at least ``length`` characters.

        Raises:
            IndexError: If no word is that long.
        """
        rows = [row for key, row in self._rows.items() if key >= length]
        return self._pick(rows, rng)

    @staticmethod
    def _pick(rows: list[Row], rng: random.Random) -> str:
        total = sum(len(row) for row in rows)
        if total == 0:
            raise IndexError("cannot sample from an empty word set")
        index = rng.randrange(total)
        for row in rows:
            if index < len(row):
                return row.words[index]
            index -= len(row)
        raise IndexError("sample index out of range")

    def sort(self) -> None:
        """Stable sort by length; Rows end up in ascending order."""
        self._order.sort(key=len)
        self._reindex()

    def prune(self) -> None:
        """Drop exact duplicates, keeping first occurrences."""
        self._order = list(dict.fromkeys(self._order))
        self._reindex()

    def map_words(self, fn: Callable[[str], str]) -> None:
        """Replace every word with ``fn(word)``.

        Words whose length changes move to the matching Row; words mapped to
        an empty string are dropped.

        Raises:
            TypeError: If ``fn`` returns something other than a string.
        """
        mapped = []
        for word in self._order:
            result = fn(word)
            if not isinstance(result, str):
                raise TypeError(
                    f"word transform returned {type(result).__name__}, expected str"
                )
            mapped.append(result)
        self._order = [word for word in mapped if word]
        self._reindex()

    def clear(self) -> None:
        self._order = []
        self._rows = {}

    def copy(self) -> "WordSet":
        """Independent copy: new Rows, new word lists."""
        clone = WordSet()
        clone._order = list(self._order)
        clone._rows = {key: row.copy() for key, row in self._rows.items()}
        return clone

    def _reindex(self) -> None:
        self._rows = {}
        for word in self._order:
            row = self._rows.get(len(word))
            if row is None:
                row = self._rows[len(word)] = Row(length=len(word))
            row.append(word)
