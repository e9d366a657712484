"""
Unit tests for SpellCheckContext.
"""
import threading
from unittest.mock import patch

import pytest

from wordcheck.config import Settings
from wordcheck.services.context import SpellCheckContext
from wordcheck.services.dictionary import Dictionary, DictionaryLoadError


class TestCheckAndSuggest:
    """Tests for read operations."""

    def test_check(self, context):
        words = [t.word for t in context.check("This is an exmple text with som wrds.")]
        assert words == ["exmple", "som", "wrds"]

    def test_suggest(self, context):
        assert "example" in context.suggest("exmple")
        assert context.suggest("example") == []

    def test_is_correct(self, context):
        assert context.is_correct("Example") is True
        assert context.is_correct("exmple") is False

    def test_suggestion_count_respected(self):
        context = SpellCheckContext(
            Dictionary.load(["tab", "tac", "tad"]),
            max_edit_distance=2,
            suggestion_count=2,
            cache_enabled=True,
        )
        assert context.suggest("tax") == ["tab", "tac"]

    def test_cache_disabled(self, dictionary):
        context = SpellCheckContext(dictionary, cache_enabled=False)
        context.check("som wrds")
        assert len(context.cache) == 0


class TestMutations:
    """Tests for dictionary and ignore-set changes."""

    def test_add_word_clears_stale_results(self, context):
        """Test a word flagged before being added is accepted afterwards."""
        assert [t.word for t in context.check("som")] == ["som"]
        assert context.add_word("Som") is True
        assert context.check("som") == []
        assert context.check("SOM") == []
        assert context.suggest("som") == []

    def test_add_word_duplicate(self, context):
        assert context.add_word("example") is False
        assert context.added_words == []

    def test_added_words_tracked_lowercase(self, context):
        context.add_word("Kafka")
        context.add_word("redis")
        assert context.added_words == ["kafka", "redis"]

    def test_add_word_clears_cache(self, context):
        context.check("som wrds")
        assert len(context.cache) > 0
        context.add_word("wrds")
        assert len(context.cache) == 0

    def test_ignore_word(self, context):
        """Test ignored words stop being reported."""
        context.check("exmple som")
        assert context.ignore_word("som") is True
        assert [t.word for t in context.check("exmple som")] == ["exmple"]
        assert context.ignored_words == ["som"]

    def test_ignore_word_duplicate_and_blank(self, context):
        assert context.ignore_word("som") is True
        assert context.ignore_word("som") is False
        assert context.ignore_word("") is False
        assert context.ignored_words == ["som"]

    def test_remove_ignored_word(self, context):
        context.ignore_word("som")
        assert context.remove_ignored_word("som") is True
        assert [t.word for t in context.check("som")] == ["som"]
        assert context.remove_ignored_word("som") is False

    def test_initial_ignored_words(self, dictionary):
        context = SpellCheckContext(dictionary, ignored_words=["som", ""])
        assert context.ignored_words == ["som"]
        assert context.check("som") == []

    def test_independent_contexts(self):
        """Test contexts do not share state."""
        first = SpellCheckContext(Dictionary.load(["alpha"]))
        second = SpellCheckContext(Dictionary.load(["alpha"]))
        first.add_word("beta")
        assert first.check("beta") == []
        assert [t.word for t in second.check("beta")] == ["beta"]


class TestFromSettings:
    """Tests for building a context from configuration."""

    def test_loads_dictionary_and_replays_word_lists(self, wordlist_path):
        test_settings = Settings(
            SPELLCHECK_DICTIONARY_PATH=str(wordlist_path),
            SPELLCHECK_ADDED_WORDS="Kafka, redis,,",
            SPELLCHECK_IGNORED_WORDS="teh",
            SPELLCHECK_SUGGESTION_COUNT=3,
        )
        with patch("wordcheck.services.context.settings", test_settings):
            context = SpellCheckContext.from_settings()

        assert context.word_count == 6
        assert context.added_words == ["kafka", "redis"]
        assert context.ignored_words == ["teh"]
        assert context.check("Example Kafka teh") == []

    def test_missing_word_list_raises(self, tmp_path):
        test_settings = Settings(SPELLCHECK_DICTIONARY_PATH=str(tmp_path / "none.txt"))
        with patch("wordcheck.services.context.settings", test_settings):
            with pytest.raises(DictionaryLoadError):
                SpellCheckContext.from_settings()


def test_concurrent_checks_and_mutations(context):
    """Test readers and writers can interleave without errors."""
    errors = []
    text = "This is an exmple text with som wrds."

    def reader():
        try:
            for _ in range(50):
                result = context.check(text)
                assert all(text[t.offset:t.end] == t.word for t in result)
                context.suggest("exmple")
        except Exception as e:
            errors.append(e)

    def writer():
        try:
            for i in range(20):
                context.add_word(f"word{'x' * i}")
                context.ignore_word(f"ignored{'y' * i}")
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(4)] + [threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert errors == []
    assert context.check("wordxx") == []


def test_cache_capacity_passed_through(dictionary):
    context = SpellCheckContext(dictionary, cache_enabled=True, cache_max_entries=3)
    context.check("aaa bbb ccc ddd eee")
    assert len(context.cache) == 3
