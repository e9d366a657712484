"""
Word dictionary with case-insensitive membership and prefix enumeration.
"""
import time
from bisect import bisect_left, insort
from pathlib import Path
from typing import Iterable, Iterator, List, Set, Union

from wordcheck.utils.logger import get_logger


logger = get_logger("services.dictionary")


class DictionaryLoadError(Exception):
    """Raised when a word list cannot be read."""

    pass


def normalize_word(word: str) -> str:
    """Dictionary key form of a word: trimmed and lowercased."""
    return word.strip().lower()


class Dictionary:
    """
    Set of lowercase word keys.

    Membership goes through a hash set; a parallel sorted list answers prefix
    queries with a binary search instead of a vocabulary scan.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: Set[str] = {key for key in map(normalize_word, words) if key}
        self._sorted: List[str] = sorted(self._words)

    @classmethod
    def load(cls, words: Iterable[str]) -> "Dictionary":
        """
        Build a dictionary from a sequence of words.

        Entries are lowercased; empty entries are discarded.
        """
        return cls(words)

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.lower() in self._words

    def add_word(self, word: str) -> bool:
        """
        Insert a word.

        Returns:
            True if the word was new, False if it was empty or already present
        """
        key = normalize_word(word)
        if not key or key in self._words:
            return False
        self._words.add(key)
        insort(self._sorted, key)
        return True

    def words_with_prefix(self, prefix: str) -> Iterator[str]:
        """
        Yield every stored key starting with ``prefix``.

        Each call returns a fresh generator. Keys come out in sorted order.
        """
        index = bisect_left(self._sorted, prefix)
        while index < len(self._sorted) and self._sorted[index].startswith(prefix):
            yield self._sorted[index]
            index += 1

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sorted))


def read_word_list(path: Union[str, Path]) -> List[str]:
    """
    Read a newline-delimited UTF-8 word list.

    Lines are trimmed; blank lines are skipped.

    Raises:
        DictionaryLoadError: if the file cannot be read or decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            "Failed to read word list",
            error=str(e),
            wordlist_path=str(path),
        )
        raise DictionaryLoadError(f"Cannot load word list {path}: {e}") from e


def load_dictionary_file(path: Union[str, Path]) -> Dictionary:
    """
    Build a Dictionary from a word list file.

    The whole load fails if the file cannot be read; no partial dictionary
    is produced.
    """
    start_time = time.time()
    words = read_word_list(path)
    dictionary = Dictionary.load(words)

    logger.info(
        "Dictionary loaded from word list",
        word_count=len(dictionary),
        load_time_seconds=round(time.time() - start_time, 3),
        wordlist_path=str(path),
    )
    return dictionary
