"""
Spell-check context: the dictionary, correctness cache and ignore set a host
shares across check and suggestion requests.
"""
from typing import Iterable, List, Optional, Set

from wordcheck.config import settings
from wordcheck.schemas.spellcheck import Token
from wordcheck.services.cache import CorrectnessCache
from wordcheck.services.checker import check
from wordcheck.services.dictionary import Dictionary, load_dictionary_file, normalize_word
from wordcheck.services.suggestions import suggest
from wordcheck.utils.logger import get_logger
from wordcheck.utils.rwlock import ReadWriteLock


logger = get_logger("services.context")


class SpellCheckContext:
    """
    Owns the mutable spell-check state for one host.

    Checks and suggestions run concurrently under a shared lock; adding or
    ignoring a word takes the lock exclusively and clears the whole
    correctness cache.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        ignored_words: Iterable[str] = (),
        max_edit_distance: Optional[int] = None,
        suggestion_count: Optional[int] = None,
        cache_enabled: Optional[bool] = None,
        cache_max_entries: Optional[int] = None,
    ):
        """
        Initialize spell-check context.

        Args:
            dictionary: Loaded dictionary; the context takes ownership
            ignored_words: Initial ignore set (exact case)
            max_edit_distance: Suggestion distance bound (default from config)
            suggestion_count: Maximum suggestions per word (default from config)
            cache_enabled: Whether to memoize correctness results (default from config)
            cache_max_entries: Correctness cache capacity (default from config)
        """
        self._dictionary = dictionary
        self._ignored: Set[str] = {word for word in ignored_words if word}
        self._added: Set[str] = set()
        self._cache = CorrectnessCache(
            cache_max_entries if cache_max_entries is not None else settings.SPELLCHECK_CACHE_MAX_ENTRIES
        )
        self._lock = ReadWriteLock()

        self._max_edit_distance = (
            max_edit_distance if max_edit_distance is not None else settings.SPELLCHECK_MAX_EDIT_DISTANCE
        )
        self._suggestion_count = (
            suggestion_count if suggestion_count is not None else settings.SPELLCHECK_SUGGESTION_COUNT
        )
        self._cache_enabled = cache_enabled if cache_enabled is not None else settings.SPELLCHECK_CACHE_ENABLED

    @classmethod
    def from_settings(cls) -> "SpellCheckContext":
        """
        Load the configured word list and replay host-persisted word lists.

        Raises:
            DictionaryLoadError: if the word list cannot be read
        """
        context = cls(
            load_dictionary_file(settings.SPELLCHECK_DICTIONARY_PATH),
            ignored_words=settings.ignored_words_list,
        )
        for word in settings.added_words_list:
            context.add_word(word)

        logger.info(
            "Spell-check context initialized",
            dictionary_words=context.word_count,
            added_words=len(context.added_words),
            ignored_words=len(context.ignored_words),
            max_edit_distance=context._max_edit_distance,
            suggestion_count=context._suggestion_count,
            cache_enabled=context._cache_enabled,
        )
        return context

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def cache(self) -> CorrectnessCache:
        return self._cache

    @property
    def word_count(self) -> int:
        with self._lock.read_locked():
            return len(self._dictionary)

    @property
    def added_words(self) -> List[str]:
        """Words added during this session, for the host to persist."""
        with self._lock.read_locked():
            return sorted(self._added)

    @property
    def ignored_words(self) -> List[str]:
        """Current ignore set, for the host to persist."""
        with self._lock.read_locked():
            return sorted(self._ignored)

    def check(self, text: str) -> List[Token]:
        """Misspelled occurrences in ``text``, in document order."""
        with self._lock.read_locked():
            return check(
                text,
                self._dictionary,
                self._ignored,
                self._cache if self._cache_enabled else None,
            )

    def is_correct(self, word: str) -> bool:
        with self._lock.read_locked():
            if self._cache_enabled:
                return self._cache.is_correct(word, self._dictionary)
            return self._dictionary.contains(word)

    def suggest(self, word: str) -> List[str]:
        """Up to the configured number of corrections for ``word``."""
        with self._lock.read_locked():
            return suggest(
                word,
                self._dictionary,
                max_edit_distance=self._max_edit_distance,
                max_suggestions=self._suggestion_count,
            )

    def add_word(self, word: str) -> bool:
        """
        Add a word to the dictionary.

        Returns:
            True if the dictionary changed
        """
        with self._lock.write_locked():
            added = self._dictionary.add_word(word)
            if added:
                self._added.add(normalize_word(word))
                self._cache.clear()

        if added:
            logger.info("Word added to dictionary", word=word)
        return added

    def ignore_word(self, word: str) -> bool:
        """
        Suppress reports of ``word`` (exact case).

        Returns:
            True if the ignore set changed
        """
        if not word:
            return False
        with self._lock.write_locked():
            if word in self._ignored:
                return False
            self._ignored.add(word)
            self._cache.clear()

        logger.info("Word ignored", word=word)
        return True

    def remove_ignored_word(self, word: str) -> bool:
        """
        Report ``word`` again.

        Returns:
            True if the word was in the ignore set
        """
        with self._lock.write_locked():
            if word not in self._ignored:
                return False
            self._ignored.discard(word)
            self._cache.clear()

        logger.info("Word removed from ignore set", word=word)
        return True
