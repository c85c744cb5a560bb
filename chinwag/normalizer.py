"""Token normalization for chinwag.

Tokens are cleaned against a delimiter set: every delimiter character is
removed, and a token that ends up empty is rejected. The same delimiter set
splits raw source text into candidate tokens.
"""

import re
from functools import lru_cache
from typing import Iterator, Optional

# Whitespace and ASCII punctuation that separate words in source text
DELIMITERS = "\n\r\t\v\f '\",.;:-_!?~`+=<>/|\\*&^%$#@(){}[]"


@lru_cache(maxsize=32)
def _split_pattern(delimiters: str) -> re.Pattern:
    return re.compile("[" + re.escape(delimiters) + "]+")


def strip_delimiters(token: str, delimiters: str = DELIMITERS) -> str:
    """Remove every delimiter character from a token.

    Args:
        token: Raw candidate token.
        delimiters: Characters to strip.

    Returns:
        Token with delimiters removed (may be empty).
    """
    if not delimiters:
        return token
    return "".join(c for c in token if c not in delimiters)


def normalize_token(token: str, delimiters: str = DELIMITERS) -> Optional[str]:
    """Normalize a token and return it if usable, else None.

    Args:
        token: Raw token.
        delimiters: Characters to strip.

    Returns:
        Cleaned token or None if nothing is left.
    """
    cleaned = strip_delimiters(token, delimiters)
    return cleaned or None


def tokenize(text: str, delimiters: str = DELIMITERS) -> Iterator[str]:
    """Split source text into candidate tokens.

    Args:
        text: Source text.
        delimiters: Characters that separate tokens.

    Yields:
        Non-empty tokens in source order.
    """
    if not delimiters:
        if text:
            yield text
        return
    for token in _split_pattern(delimiters).split(text):
        if token:
            yield token
