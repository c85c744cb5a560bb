"""Configuration loader for chinwag.

Loads defaults from chinwag.json at project root, with hardcoded fallbacks.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "chinwag.json"

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "output_type": "letters",
    "min_output": 1,
    "max_output": 160,
    "dictionary": "Seussian",
    "max_output_ceiling": 10000,
    "sentence_min_words": 3,
    "sentence_max_words": 12,
    "paragraph_min_sentences": 2,
    "paragraph_max_sentences": 7,
    "verbose": False,
}

FALLBACK_DICTIONARIES = ["Latin", "Seussian"]

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find chinwag.json near the package or the working directory."""
    paths = [
        Path(__file__).parent.parent / CONFIG_FILENAME,  # chinwag -> root
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from chinwag.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                logger.debug("Loaded configuration from %s", config_path)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.debug("Ignoring unreadable %s: %s", config_path, e)

    # Fallback
    _config = {
        "defaults": FALLBACK_DEFAULTS,
        "available_dictionaries": FALLBACK_DICTIONARIES,
    }
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def get_available_dictionaries() -> list[str]:
    """Get list of embedded dictionary names."""
    cfg = load()
    return cfg.get("available_dictionaries", FALLBACK_DICTIONARIES)


# Convenience accessors
def default_output_type() -> str:
    return get_default("output_type", FALLBACK_DEFAULTS["output_type"])


def default_min_output() -> int:
    return int(get_default("min_output", FALLBACK_DEFAULTS["min_output"]))


def default_max_output() -> int:
    return int(get_default("max_output", FALLBACK_DEFAULTS["max_output"]))


def default_dictionary() -> str:
    return get_default("dictionary", FALLBACK_DEFAULTS["dictionary"])


def max_output_ceiling() -> int:
    return int(get_default("max_output_ceiling", FALLBACK_DEFAULTS["max_output_ceiling"]))


def sentence_word_range() -> tuple[int, int]:
    return (
        int(get_default("sentence_min_words", FALLBACK_DEFAULTS["sentence_min_words"])),
        int(get_default("sentence_max_words", FALLBACK_DEFAULTS["sentence_max_words"])),
    )


def paragraph_sentence_range() -> tuple[int, int]:
    return (
        int(get_default("paragraph_min_sentences", FALLBACK_DEFAULTS["paragraph_min_sentences"])),
        int(get_default("paragraph_max_sentences", FALLBACK_DEFAULTS["paragraph_max_sentences"])),
    )
