"""
Document spell check: tokenize, classify, collect misspelled occurrences.
"""
from typing import AbstractSet, Iterable, List, Optional

from wordcheck.schemas.spellcheck import Diagnostic, Token
from wordcheck.services.cache import CorrectnessCache
from wordcheck.services.dictionary import Dictionary
from wordcheck.services.tokenizer import tokenize


DIAGNOSTIC_MESSAGE = "Misspelled word: {word}"


def check(
    text: str,
    dictionary: Dictionary,
    ignored: AbstractSet[str] = frozenset(),
    cache: Optional[CorrectnessCache] = None,
) -> List[Token]:
    """
    Find misspelled words in ``text``.

    Args:
        text: Document text
        dictionary: Known words
        ignored: Words (exact case) never reported
        cache: Correctness memo; the dictionary is queried directly when None

    Returns:
        Misspelled tokens in document order, one per occurrence
    """
    misspelled = []
    for token in tokenize(text):
        if token.word in ignored:
            continue
        if cache is not None:
            correct = cache.is_correct(token.word, dictionary)
        else:
            correct = dictionary.contains(token.word)
        if not correct:
            misspelled.append(token)
    return misspelled


def to_diagnostics(tokens: Iterable[Token]) -> List[Diagnostic]:
    """Project misspelled tokens to error markers spanning each word."""
    return [
        Diagnostic(
            word=token.word,
            start=token.offset,
            end=token.end,
            message=DIAGNOSTIC_MESSAGE.format(word=token.word),
            severity="error",
        )
        for token in tokens
    ]
