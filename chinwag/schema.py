"""Core data structures for chinwag.

Core concept:
    - Words are bucketed into Rows by character length
    - A Dictionary holds at most one Row per length, never an empty Row
    - Output is measured in one of four granularities

Example:
    ["a", "is", "of", "this", "test"] →
    Row(1): ["a"], Row(2): ["is", "of"], Row(4): ["this", "test"]
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class OutputType(Enum):
    """Output granularity."""

    LETTERS = "letters"
    WORDS = "words"
    SENTENCES = "sentences"
    PARAGRAPHS = "paragraphs"

    @classmethod
    def from_name(cls, name: Any) -> Optional["OutputType"]:
        """Resolve an OutputType from an enum member or a case-insensitive name."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lower()
        for member in cls:
            if member.value == key or member.value.rstrip("s") == key:
                return member
        return None


@dataclass
class Row:
    """Words sharing one character length."""

    length: int
    words: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    @property
    def label(self) -> str:
        """Length label, e.g. "5-c"."""
        return f"{self.length}-c"

    def append(self, word: str) -> None:
        self.words.append(word)

    def copy(self) -> "Row":
        return Row(length=self.length, words=list(self.words))

