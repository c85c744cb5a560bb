"""Dictionaries shipped with chinwag.

Word lists live in chinwag/data as plain text and are loaded through the
plain text ingestor with the default delimiters.
"""

from pathlib import Path
from typing import Optional

from ..dictionary import Dictionary
from .plain_text import ingest

DATA_DIR = Path(__file__).parent.parent / "data"

# canonical name -> data file
EMBEDDED_FILES = {
    "Latin": "latin.txt",
    "Seussian": "seussian.txt",
}

ALIASES = {
    "latin": "Latin",
    "seussian": "Seussian",
    "seuss": "Seussian",
}


def canonical_name(name: str) -> Optional[str]:
    """Canonical embedded dictionary name, or None if not embedded."""
    if name in EMBEDDED_FILES:
        return name
    return ALIASES.get(name.lower())


def embedded_names() -> list[str]:
    return sorted(EMBEDDED_FILES)


def open_embedded(name: str) -> Dictionary:
    """Open an embedded dictionary by name.

    Args:
        name: "Latin"/"latin" or "Seussian"/"seussian"/"Seuss"/"seuss".

    Returns:
        A fresh Dictionary. Unknown names give an empty Dictionary carrying
        that name.
    """
    canonical = canonical_name(name)
    if canonical is None:
        return Dictionary(name=name)
    return ingest(DATA_DIR / EMBEDDED_FILES[canonical], name=canonical).dictionary
