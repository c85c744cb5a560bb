"""Base ingestor interface for dictionary sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for turning any source into a Dictionary.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from ..dictionary import Dictionary
from ..errors import DictionaryLoadError
from ..normalizer import DELIMITERS, normalize_token

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    dictionary: Dictionary
    source_path: str
    dict_name: str
    total_raw: int = 0          # Candidate tokens in source
    total_valid: int = 0        # Tokens placed after normalization
    total_duplicates: int = 0   # Repeats of an already placed word

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes)"
        )


class Ingestor(ABC):
    """Base class for dictionary ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (token, line_number) tuples

    The ingest() method handles normalization and strict placement.
    """

    def __init__(
        self,
        delimiters: str = DELIMITERS,
        name: Optional[str] = None,
        prune: bool = False,
    ):
        """Initialize ingestor.

        Args:
            delimiters: Characters separating and stripped from tokens.
            name: Dictionary name. Defaults to the source file stem.
            prune: Drop duplicate words after loading.
        """
        self.delimiters = delimiters
        self.name = name
        self.prune = prune

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (token, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (token, line_number).
        """
        pass

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return self.name or filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with the dictionary and statistics.

        Raises:
            DictionaryLoadError: If the file cannot be read.
        """
        filepath = Path(filepath)
        dict_name = self.get_dict_name(filepath)
        dictionary = Dictionary(name=dict_name, delimiters=self.delimiters)

        seen: set[str] = set()
        total_raw = 0
        total_valid = 0
        duplicates = 0

        try:
            for token, _line_num in self.parse(filepath):
                total_raw += 1

                normalized = normalize_token(token, self.delimiters)
                if normalized is None:
                    continue

                if normalized in seen:
                    duplicates += 1
                    if self.prune:
                        continue
                seen.add(normalized)

                dictionary.place(normalized)
                total_valid += 1
        except OSError as e:
            raise DictionaryLoadError(f"Cannot read {filepath}: {e}") from e

        logger.debug(
            "Ingested %s: %d/%d tokens, %d duplicates",
            dict_name, total_valid, total_raw, duplicates,
        )
        return IngestResult(
            dictionary=dictionary,
            source_path=str(filepath.resolve()),
            dict_name=dict_name,
            total_raw=total_raw,
            total_valid=total_valid,
            total_duplicates=duplicates,
        )
