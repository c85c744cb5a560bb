"""Pytest configuration and fixtures."""

import pytest
import random
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chinwag import config
from chinwag.dictionary import Dictionary
from chinwag.ingest.embedded import open_embedded


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload configuration for every test."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def latin():
    """Embedded Latin dictionary."""
    return open_embedded("Latin")


@pytest.fixture
def seuss():
    """Embedded Seussian dictionary."""
    return open_embedded("Seussian")


@pytest.fixture
def small_mess():
    """Small unsorted dictionary built by loose insertion."""
    return Dictionary().append_all(
        ["this", "is", "a", "quick", "test", "of", "sorting"]
    )


@pytest.fixture
def flooder():
    """Words placed repeatedly to create duplicates."""
    return ["this", "is", "a", "string", "that", "will", "be", "duplicated"]


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list."""
    return """# Word list
hello
world, again!
test-case
sample
hello
"""
