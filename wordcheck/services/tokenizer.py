"""
Text tokenization for spell checking.

Extracts alphabetic words with their character offsets, skipping URLs and
markdown code spans.
"""
import re
from typing import Iterator, List, Pattern, Tuple

from wordcheck.schemas.spellcheck import Token
from wordcheck.utils.logger import get_logger


logger = get_logger("services.tokenizer")

URL_PATTERN = re.compile(r"\b(?:https?://|www\.)(?:\S*\w)?", re.IGNORECASE)

# Fenced blocks first so ``` is not read as three inline spans
CODE_PATTERN = re.compile(r"```[\s\S]*?```|`[\s\S]*?`")

# Letters only, not touching a word character, '*', '_' or '-'
WORD_PATTERN = re.compile(r"(?<![\w*\-])[^\W\d_]+(?![\w*\-])")


def _remove_spans(text: str, origins: List[int], pattern: Pattern) -> Tuple[str, List[int]]:
    """
    Drop every match of ``pattern`` from ``text``.

    ``origins[i]`` is the index in the original text of ``text[i]``; the
    returned list keeps that mapping for the surviving characters.
    """
    kept_text = []
    kept_origins: List[int] = []
    position = 0
    for match in pattern.finditer(text):
        kept_text.append(text[position:match.start()])
        kept_origins.extend(origins[position:match.start()])
        position = match.end()
    kept_text.append(text[position:])
    kept_origins.extend(origins[position:])
    return "".join(kept_text), kept_origins


def tokenize(text: str) -> Iterator[Token]:
    """
    Yield word tokens of ``text`` in document order.

    URLs and code spans are removed from a working copy before words are
    extracted; each token's offset points into the original ``text``, so
    ``text[token.offset:token.offset + len(token.word)] == token.word``.
    A run of letters that only exists because a span was removed between
    its halves has no position in the original and is skipped.

    Args:
        text: Raw document text

    Yields:
        Token objects (word as typed, offset into original text)
    """
    working, origins = _remove_spans(text, list(range(len(text))), URL_PATTERN)
    working, origins = _remove_spans(working, origins, CODE_PATTERN)

    for match in WORD_PATTERN.finditer(working):
        word = match.group()
        offset = origins[match.start()]
        if text[offset:offset + len(word)] != word:
            logger.debug("Skipping token joined across a removed span", word=word, offset=offset)
            continue
        yield Token(word=word, offset=offset)
