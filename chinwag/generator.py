"""Length-exact text generation.

Every request picks a target T uniformly from [min, max] and builds text
whose measured size is exactly T:

    letters     code points, spaces included
    words       whitespace-separated tokens
    sentences   terminal punctuation marks (. ! ?)
    paragraphs  blocks separated by a blank line

Preconditions are checked before any text is built, in this order: output
type, min >= 1, max >= min, max <= ceiling, dictionary validity.
"""

import logging
import random
from typing import Any, Optional

from . import config as cfg
from .dictionary import Dictionary
from .errors import ErrorKind, OutputRangeError
from .ingest.embedded import open_embedded
from .schema import OutputType

logger = logging.getLogger(__name__)

TERMINATORS = ".!?"
SENTENCE_SEPARATOR = " "
PARAGRAPH_SEPARATOR = "\n\n"

# Chance that an interior word of a sentence is followed by a comma
COMMA_CHANCE = 0.08


class Generator:
    """Generates text from a dictionary with an injectable random source."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        max_output: Optional[int] = None,
        sentence_words: Optional[tuple[int, int]] = None,
        paragraph_sentences: Optional[tuple[int, int]] = None,
    ):
        """Initialize generator.

        Args:
            rng: Random source. Takes precedence over ``seed``.
            seed: Seed for a private random source.
            max_output: Ceiling for ``max``. Defaults to config.
            sentence_words: (min, max) words per sentence. Defaults to config.
            paragraph_sentences: (min, max) sentences per paragraph.
                Defaults to config.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_output = max_output if max_output is not None else cfg.max_output_ceiling()
        self.sentence_words = sentence_words or cfg.sentence_word_range()
        self.paragraph_sentences = paragraph_sentences or cfg.paragraph_sentence_range()

        for low, high in (self.sentence_words, self.paragraph_sentences):
            if low < 1 or high < low:
                raise ValueError(f"invalid sub-range: ({low}, {high})")

    def generate(
        self,
        dictionary: Dictionary,
        kind: Any,
        min_output: int,
        max_output: int,
    ) -> str:
        """Generate text of an exact size chosen from [min_output, max_output].

        Args:
            dictionary: Source of words. Never modified.
            kind: OutputType or its name ("letters", "words", ...).
            min_output: Smallest acceptable size, at least 1.
            max_output: Largest acceptable size.

        Returns:
            Generated text.

        Raises:
            OutputRangeError: Bad output type or range.
            DictionaryError: Dictionary is too small, unsortable or corrupt.
        """
        output_type = self.check(dictionary, kind, min_output, max_output)

        target = self.rng.randint(min_output, max_output)
        logger.debug(
            "Generating %d %s from %r", target, output_type.value, dictionary
        )

        if output_type is OutputType.LETTERS:
            return self.letters(dictionary, target)
        if output_type is OutputType.WORDS:
            return self.words(dictionary, target)
        if output_type is OutputType.SENTENCES:
            return self.sentences(dictionary, target)
        return self.paragraphs(dictionary, target)

    def check(
        self,
        dictionary: Dictionary,
        kind: Any,
        min_output: int,
        max_output: int,
    ) -> OutputType:
        """Run the precondition checks and return the resolved output type."""
        output_type = OutputType.from_name(kind)
        if output_type is None:
            raise OutputRangeError(ErrorKind.INVALID_OUTPUT_TYPE, repr(kind))
        if min_output < 1:
            raise OutputRangeError(ErrorKind.MIN_LESS_THAN_ONE, f"min={min_output}")
        if max_output < min_output:
            raise OutputRangeError(
                ErrorKind.MAX_LESS_THAN_MIN, f"min={min_output} max={max_output}"
            )
        if max_output > self.max_output:
            raise OutputRangeError(
                ErrorKind.MAX_TOO_HIGH, f"max={max_output} ceiling={self.max_output}"
            )
        dictionary.validate()
        return output_type

    # ------------------------------------------------------------------
    # Granularities
    # ------------------------------------------------------------------

    def letters(self, dictionary: Dictionary, target: int) -> str:
        """Space-joined words totalling exactly ``target`` characters."""
        words = dictionary.word_set
        largest = words.largest()
        parts: list[str] = []
        remaining = target

        while remaining > 0:
            budget = remaining - (1 if parts else 0)

            if budget <= largest:
                parts.append(self._closing_word(dictionary, budget))
                break

            word = words.sample(self.rng)
            # Leave room for a separator plus at least one character
            if budget - len(word) < 2:
                word = word[: budget - 2]
            parts.append(word)
            remaining = budget - len(word)

        return " ".join(parts)

    def _closing_word(self, dictionary: Dictionary, length: int) -> str:
        row = dictionary.row(length)
        if row is not None:
            return self.rng.choice(row.words)
        return dictionary.word_set.sample_at_least(length, self.rng)[:length]

    def words(self, dictionary: Dictionary, target: int) -> str:
        """Exactly ``target`` space-separated words."""
        return " ".join(self._pick_words(dictionary, target))

    def sentence(self, dictionary: Dictionary) -> str:
        """One capitalized sentence ending in terminal punctuation."""
        count = self.rng.randint(*self.sentence_words)
        words = self._pick_words(dictionary, count)

        for i in range(len(words) - 1):
            if self.rng.random() < COMMA_CHANCE:
                words[i] += ","

        words[0] = words[0][:1].upper() + words[0][1:]
        return " ".join(words) + self.rng.choice(TERMINATORS)

    def sentences(self, dictionary: Dictionary, target: int) -> str:
        """Exactly ``target`` sentences."""
        return SENTENCE_SEPARATOR.join(
            self.sentence(dictionary) for _ in range(target)
        )

    def paragraphs(self, dictionary: Dictionary, target: int) -> str:
        """Exactly ``target`` paragraphs separated by blank lines."""
        paragraphs = []
        for _ in range(target):
            count = self.rng.randint(*self.paragraph_sentences)
            paragraphs.append(self.sentences(dictionary, count))
        return PARAGRAPH_SEPARATOR.join(paragraphs)

    def _pick_words(self, dictionary: Dictionary, count: int) -> list[str]:
        words = dictionary.word_set
        return [words.sample(self.rng) for _ in range(count)]


def generate(
    dictionary: Dictionary,
    kind: Any,
    min_output: int,
    max_output: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate text with a one-off Generator.

    Args:
        dictionary: Source of words.
        kind: OutputType or its name.
        min_output: Smallest acceptable size.
        max_output: Largest acceptable size.
        rng: Optional random source for reproducible output.

    Returns:
        Generated text.
    """
    return Generator(rng=rng).generate(dictionary, kind, min_output, max_output)


def gen(rng: Optional[random.Random] = None) -> str:
    """Generate text using the configured default dictionary, type and range."""
    dictionary = open_embedded(cfg.default_dictionary())
    return generate(
        dictionary,
        cfg.default_output_type(),
        cfg.default_min_output(),
        cfg.default_max_output(),
        rng=rng,
    )
