"""Word segmentation, filtering and normalization."""

from __future__ import annotations

import re
from typing import Iterator

# Combining diacritical mark blocks. A mark stays with the word before it.
_MARKS = "\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
_WORD_PART = rf"\w[\w{_MARKS}]*"

# A word is a run of word characters, optionally joined by an inner
# apostrophe or dot ("don't", "3.14"). Whitespace runs and any other single
# character are boundary units of their own.
_CANDIDATE_RE = re.compile(
    rf"{_WORD_PART}(?:['’.]{_WORD_PART})*"
    r"|\s+|"
    r".",
    re.DOTALL,
)


def iter_word_candidates(sentence: str) -> Iterator[str]:
    """Yield every boundary unit of ``sentence``, punctuation included."""
    for m in _CANDIDATE_RE.finditer(sentence):
        yield m.group()


def is_word(candidate: str) -> bool:
    """True if the candidate starts with an alphabetic character."""
    return bool(candidate) and candidate[0].isalpha()


def normalize(word: str) -> str:
    return word.lower()


def iter_words(sentence: str) -> Iterator[str]:
    """Yield the normalized words of ``sentence`` in order of appearance."""
    for candidate in iter_word_candidates(sentence):
        if is_word(candidate):
            yield normalize(candidate)
