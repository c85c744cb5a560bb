"""chinwag - Length-exact filler text generator.

Generates placeholder text whose size is guaranteed: exactly N letters,
words, sentences or paragraphs, with N drawn from a requested range.

Core concepts:
    - A Dictionary buckets its words into Rows by character length
    - Rows let the generator close a letter budget with an exact-length word
    - Every request is validated before any text is built

Example:
    generate(latin, "letters", 1500, 1500) → text of exactly 1500 characters

Usage:
    from chinwag import Dictionary, Generator, open_embedded

    latin = open_embedded("Latin")
    text = Generator(seed=7).generate(latin, "sentences", 3, 5)

    mine = Dictionary(name="mine").place_all(["some", "tokens"]).prune()
    print(mine.join(", "))
"""

from .dictionary import Dictionary, DictionaryStats
from .errors import (
    ChinwagError,
    DictionaryError,
    DictionaryLoadError,
    ErrorKind,
    OutputRangeError,
    error_string,
    fatal,
    warn,
)
from .generator import Generator, gen, generate
from .ingest.embedded import open_embedded
from .ingest.plain_text import open_with_tokens
from .normalizer import DELIMITERS
from .schema import OutputType

__version__ = "1.2.3"

__all__ = [
    "DELIMITERS",
    "ChinwagError",
    "Dictionary",
    "DictionaryError",
    "DictionaryLoadError",
    "DictionaryStats",
    "ErrorKind",
    "Generator",
    "OutputRangeError",
    "OutputType",
    "error_string",
    "fatal",
    "gen",
    "generate",
    "open_embedded",
    "open_with_tokens",
    "warn",
]
