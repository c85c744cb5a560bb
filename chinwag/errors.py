"""Error kinds, exception hierarchy and presentation helpers for chinwag.

Every failure the core can report maps onto one of seven ErrorKind values.
The core raises; it never logs at warning level or terminates. warn() and
fatal() are opt-in wrappers for callers that want console presentation.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .dictionary import Dictionary

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Closed set of error identifiers."""

    INVALID_OUTPUT_TYPE = "CWError.InvalidOutputType"
    MIN_LESS_THAN_ONE = "CWError.MinLessThanOne"
    MAX_LESS_THAN_MIN = "CWError.MaxLessThanMin"
    MAX_TOO_HIGH = "CWError.MaxTooHigh"
    DICT_TOO_SMALL = "CWError.DictTooSmall"
    DICT_UNSORTABLE = "CWError.DictUnsortable"
    DICT_UNKNOWN = "CWError.DictUnknown"

    @property
    def is_dictionary_error(self) -> bool:
        return self in _DICTIONARY_KINDS


_DICTIONARY_KINDS = frozenset({
    ErrorKind.DICT_TOO_SMALL,
    ErrorKind.DICT_UNSORTABLE,
    ErrorKind.DICT_UNKNOWN,
})


class ChinwagError(Exception):
    """Base exception for all chinwag errors.

    ``kind`` is None for failures outside the seven generation error kinds,
    such as a dictionary source that cannot be read.
    """

    def __init__(self, kind: Optional[ErrorKind], detail: str = ""):
        self.kind = kind
        self.detail = detail
        if kind is None:
            message = detail
        else:
            message = f"{kind.value}: {detail}" if detail else kind.value
        super().__init__(message)


class OutputRangeError(ChinwagError):
    """Bad generation request (unknown kind, malformed [min, max])."""


class DictionaryError(ChinwagError):
    """Dictionary cannot serve generation (too small, unsortable, corrupt)."""


class DictionaryLoadError(ChinwagError):
    """Dictionary source could not be loaded (missing or unreadable file)."""

    def __init__(self, detail: str):
        super().__init__(None, detail)


def _label(dictionary: Optional["Dictionary"]) -> str:
    if dictionary is None:
        return "dictionary"
    name = dictionary.name
    return f'dictionary "{name}"' if name else "unnamed dictionary"


def error_message(dictionary: Optional["Dictionary"], kind: ErrorKind) -> str:
    """Human-readable message for an error kind.

    Args:
        dictionary: Dictionary involved, used for context in the message.
        kind: Error kind.

    Returns:
        Message text without the identifier prefix.
    """
    label = _label(dictionary)
    if kind is ErrorKind.INVALID_OUTPUT_TYPE:
        return "invalid output type (expected letters, words, sentences or paragraphs)"
    if kind is ErrorKind.MIN_LESS_THAN_ONE:
        return "minimum output amount must be at least one"
    if kind is ErrorKind.MAX_LESS_THAN_MIN:
        return "maximum output amount is less than the minimum"
    if kind is ErrorKind.MAX_TOO_HIGH:
        return "maximum output amount exceeds the allowed ceiling"
    if kind is ErrorKind.DICT_TOO_SMALL:
        return (
            f"{label} is too small to generate from "
            f"({dictionary.distinct() if dictionary is not None else 0} distinct words)"
        )
    if kind is ErrorKind.DICT_UNSORTABLE:
        return f"{label} is empty or contains words that cannot be ordered"
    return f"{label} is in an unknown or corrupted state"


def error_string(dictionary: Optional["Dictionary"], error: ChinwagError | ErrorKind) -> str:
    """Format an error as ``"<identifier> : <message>"``."""
    kind = error.kind if isinstance(error, ChinwagError) else error
    if kind is None:
        return str(error)
    return f"{kind.value} : {error_message(dictionary, kind)}"


def warn(dictionary: Optional["Dictionary"], error: ChinwagError | ErrorKind) -> None:
    """Log an error and continue."""
    logger.warning(error_string(dictionary, error))


def fatal(dictionary: Optional["Dictionary"], error: ChinwagError | ErrorKind) -> None:
    """Log an error and terminate the process with status 1."""
    logger.critical(error_string(dictionary, error))
    sys.exit(1)
