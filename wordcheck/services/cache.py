"""
Memo table of per-token correctness results.
"""
import threading
from collections import OrderedDict

from wordcheck.services.dictionary import Dictionary


DEFAULT_MAX_ENTRIES = 10000


class CorrectnessCache:
    """
    Maps a token exactly as typed to whether the dictionary knows it.

    Holds at most ``max_entries`` tokens; the least recently used entry is
    evicted first. Entries go stale when the dictionary or the ignore set
    changes; owners must call ``invalidate`` or ``clear`` after any such
    mutation.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: "OrderedDict[str, bool]" = OrderedDict()
        self._lock = threading.Lock()

    def is_correct(self, word: str, dictionary: Dictionary) -> bool:
        with self._lock:
            cached = self._entries.get(word)
            if cached is not None:
                self._entries.move_to_end(word)
                return cached

        correct = dictionary.contains(word.lower())
        with self._lock:
            self._entries[word] = correct
            self._entries.move_to_end(word)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
        return correct

    def invalidate(self, word: str) -> None:
        with self._lock:
            self._entries.pop(word, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, word: str) -> bool:
        with self._lock:
            return word in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
