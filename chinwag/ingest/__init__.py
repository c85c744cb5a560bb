"""Dictionary ingestion module.

Provides ingestors that turn sources into Dictionaries:
- Plain text files (word lists or prose)
- Embedded dictionaries shipped with the package

Usage:
    from chinwag.ingest import embedded, plain_text

    latin = embedded.open_embedded("Latin")
    custom = plain_text.open_with_tokens("path/to/words.txt", name="custom")
"""

from .base import Ingestor, IngestResult
from . import embedded
from . import plain_text

__all__ = [
    "Ingestor",
    "IngestResult",
    "embedded",
    "plain_text",
]
