"""Tests for WordSet and Row storage."""

import random

import pytest

from chinwag.schema import OutputType, Row
from chinwag.wordset import WordSet


class TestRow:
    """Tests for Row dataclass."""

    def test_label(self):
        """Test length label."""
        assert Row(length=5).label == "5-c"

    def test_copy_is_independent(self):
        """Test copying a Row copies its word list."""
        row = Row(length=3, words=["cat", "hat"])
        copy = row.copy()
        copy.append("bat")
        assert row.words == ["cat", "hat"]
        assert len(copy) == 3


class TestOutputType:
    """Tests for OutputType lookup."""

    def test_from_name(self):
        """Test case-insensitive and singular names."""
        assert OutputType.from_name("letters") is OutputType.LETTERS
        assert OutputType.from_name("Words") is OutputType.WORDS
        assert OutputType.from_name("sentence") is OutputType.SENTENCES
        assert OutputType.from_name(OutputType.PARAGRAPHS) is OutputType.PARAGRAPHS

    def test_unknown(self):
        """Test unknown names resolve to None."""
        assert OutputType.from_name("chapters") is None
        assert OutputType.from_name(4) is None
        assert OutputType.from_name(None) is None


class TestWordSet:
    """Tests for WordSet."""

    def test_insert_buckets_by_length(self):
        """Test words land in the Row matching their length."""
        ws = WordSet(["this", "is", "a", "test"])
        assert ws.row(4).words == ["this", "test"]
        assert ws.row(2).words == ["is"]
        assert ws.row(1).words == ["a"]
        assert ws.row(3) is None
        for row in ws:
            assert all(len(w) == row.length for w in row)

    def test_insert_ignores_empty(self):
        """Test empty words never create a Row."""
        ws = WordSet([""])
        assert ws.count() == 0
        assert ws.rows() == []

    def test_duplicates_allowed(self):
        """Test insertion keeps duplicates."""
        ws = WordSet(["more", "more", "more"])
        assert ws.count() == 3
        assert ws.distinct() == 1

    def test_largest(self):
        """Test largest Row key."""
        assert WordSet().largest() == 0
        assert WordSet(["a", "abcde", "abc"]).largest() == 5

    def test_contains(self):
        """Test exact-match membership."""
        ws = WordSet(["hello", "world"])
        assert ws.contains("hello")
        assert "world" in ws
        assert not ws.contains("Hello")
        assert not ws.contains("hell")
        assert not ws.contains(5)

    def test_words_keep_insertion_order(self):
        """Test flat iteration follows insertion order."""
        words = ["this", "is", "a", "quick", "test"]
        assert list(WordSet(words).words()) == words

    def test_sort_is_stable_by_length(self):
        """Test sorting orders Rows and keeps insertion order within a Row."""
        ws = WordSet(["this", "is", "a", "quick", "test", "of", "sorting"])
        ws.sort()
        assert ws.lengths() == [1, 2, 4, 5, 7]
        assert list(ws.words()) == ["a", "is", "of", "this", "test", "quick", "sorting"]

    def test_prune(self):
        """Test pruning keeps first occurrences only."""
        ws = WordSet(["b", "a", "b", "cc", "a", "cc"])
        ws.prune()
        assert list(ws.words()) == ["b", "a", "cc"]
        assert ws.row(1).words == ["b", "a"]

    def test_map_words_rebuckets(self):
        """Test mapped words move to the Row matching their new length."""
        ws = WordSet(["ab", "cd", "efg"])
        ws.map_words(lambda w: w + "x" if w == "ab" else w)
        assert ws.row(2).words == ["cd"]
        assert ws.row(3).words == ["abx", "efg"]

    def test_map_words_drops_empty(self):
        """Test words mapped to empty strings disappear with their Row."""
        ws = WordSet(["ab", "c"])
        ws.map_words(lambda w: "" if w == "c" else w)
        assert ws.lengths() == [2]

    def test_map_words_requires_strings(self):
        """Test non-string transform results are rejected."""
        ws = WordSet(["ab"])
        with pytest.raises(TypeError):
            ws.map_words(lambda w: None)

    def test_sample_is_member(self, rng):
        """Test samples come from the set."""
        ws = WordSet(["one", "two", "three", "four"])
        for _ in range(50):
            assert ws.contains(ws.sample(rng))

    def test_sample_weighted_by_population(self):
        """Test a crowded Row is sampled more often than a sparse one."""
        ws = WordSet(["x"] + [f"w{i:03d}" for i in range(99)])
        rng = random.Random(5)
        hits = sum(1 for _ in range(2000) if ws.sample(rng) == "x")
        assert hits < 100

    def test_sample_empty_raises(self, rng):
        """Test sampling an empty set raises."""
        with pytest.raises(IndexError):
            WordSet().sample(rng)

    def test_sample_at_least(self, rng):
        """Test sampling with a minimum length."""
        ws = WordSet(["a", "bb", "ccc", "dddd"])
        for _ in range(20):
            assert len(ws.sample_at_least(3, rng)) >= 3
        with pytest.raises(IndexError):
            ws.sample_at_least(5, rng)

    def test_copy_is_deep(self):
        """Test copies share no Rows or lists."""
        ws = WordSet(["abc", "de"])
        copy = ws.copy()
        copy.insert("fgh")
        ws.clear()
        assert ws.count() == 0
        assert list(copy.words()) == ["abc", "de", "fgh"]
        assert copy.row(3).words == ["abc", "fgh"]

    def test_equality(self):
        """Test equality compares content and order."""
        assert WordSet(["a", "b"]) == WordSet(["a", "b"])
        assert WordSet(["a", "b"]) != WordSet(["b", "a"])
