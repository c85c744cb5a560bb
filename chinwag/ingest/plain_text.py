"""Plain text ingestor.

Any text file: every run of non-delimiter characters is a candidate word.
Lines starting with a comment character are skipped.

Use for:
- Word lists (one word per line)
- Prose to harvest vocabulary from
- The embedded dictionaries shipped with chinwag
"""

from pathlib import Path
from typing import Iterator, Optional

from ..dictionary import Dictionary
from ..normalizer import DELIMITERS, tokenize
from .base import Ingestor, IngestResult


class PlainTextIngestor(Ingestor):
    """Ingestor for plain text sources."""

    def __init__(
        self,
        delimiters: str = DELIMITERS,
        name: Optional[str] = None,
        prune: bool = False,
        comment_char: Optional[str] = None,
    ):
        super().__init__(delimiters, name, prune)
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse plain text into tokens.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (token, line_number).
        """
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                if self.comment_char and line.lstrip().startswith(self.comment_char):
                    continue

                for token in tokenize(line, self.delimiters):
                    yield token, line_num


def ingest(
    filepath: Path | str,
    name: Optional[str] = None,
    delimiters: str = DELIMITERS,
    prune: bool = False,
    comment_char: Optional[str] = None,
) -> IngestResult:
    """Convenience function to ingest a plain text file.

    Args:
        filepath: Path to text file.
        name: Dictionary name (defaults to file stem).
        delimiters: Characters separating tokens.
        prune: Drop duplicate words.
        comment_char: Character that starts a comment line.

    Returns:
        IngestResult with the dictionary.
    """
    ingestor = PlainTextIngestor(
        delimiters=delimiters,
        name=name,
        prune=prune,
        comment_char=comment_char,
    )
    return ingestor.ingest(filepath)


def open_with_tokens(
    filepath: Path | str,
    name: Optional[str] = None,
    delimiters: str = DELIMITERS,
) -> Dictionary:
    """Open a dictionary from a text file, keeping duplicates."""
    return ingest(filepath, name=name, delimiters=delimiters).dictionary
