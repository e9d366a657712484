"""
Edit-distance suggestions for misspelled words.
"""
from typing import List

from wordcheck.services.dictionary import Dictionary
from wordcheck.utils.logger import get_logger


logger = get_logger("services.suggestions")

MAX_EDIT_DISTANCE = 2
MAX_SUGGESTIONS = 5


def levenshtein_distance(source: str, target: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``source`` into ``target``.

    Classic dynamic-programming table, kept one row at a time.

    Example:
        >>> levenshtein_distance("exmple", "example")
        1
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def suggest(
    word: str,
    dictionary: Dictionary,
    max_edit_distance: int = MAX_EDIT_DISTANCE,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> List[str]:
    """
    Rank dictionary words close to ``word``.

    Candidates share the query's first letter and lie within
    ``max_edit_distance`` edits. Ties keep dictionary enumeration order.

    Args:
        word: Word to find corrections for
        dictionary: Dictionary to draw candidates from
        max_edit_distance: Largest edit distance a candidate may have
        max_suggestions: Length cap of the returned list

    Returns:
        Candidates sorted by ascending edit distance; empty if ``word`` is
        already known or blank
    """
    query = word.strip().lower()
    if not query or dictionary.contains(query):
        return []

    scored = []
    for candidate in dictionary.words_with_prefix(query[0]):
        # Distance is at least the length difference
        if abs(len(candidate) - len(query)) > max_edit_distance:
            continue
        distance = levenshtein_distance(query, candidate)
        if distance <= max_edit_distance:
            scored.append((distance, candidate))

    # sort() is stable, so equal distances keep enumeration order
    scored.sort(key=lambda item: item[0])
    suggestions = [candidate for _, candidate in scored[:max_suggestions]]

    logger.debug(
        "Suggestions computed",
        word=word,
        candidates=len(scored),
        returned=len(suggestions),
    )
    return suggestions
