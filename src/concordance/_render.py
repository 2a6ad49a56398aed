"""Concordance listing: one padded line per distinct word."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, TextIO

from ._label import encode_label

if TYPE_CHECKING:
    from ._index import FrequencyIndex
    from ._types import WordStat

# Minimum width of the word column
MIN_WORD_PADDING = 30

LABEL_WIDTH = 4


def column_width(words: Iterable[str]) -> int:
    """Width of the word column: the longest word, at least MIN_WORD_PADDING."""
    return max(MIN_WORD_PADDING, max((len(w) for w in words), default=0))


def format_entry(rank: int, word: str, stat: WordStat, width: int) -> str:
    """Format one list item, e.g. ``"a.   cat    {1:1}"``."""
    label = encode_label(rank)
    return (
        f"{label:<{LABEL_WIDTH}} {word:<{width}} "
        f"{{{stat.count}:{stat.sentence_number_string()}}}"
    )


def render_lines(index: FrequencyIndex) -> Iterator[str]:
    """Yield the formatted lines of ``index`` in rank order."""
    words = index.sorted_words()
    width = column_width(words)
    for rank, word in enumerate(words, 1):
        yield format_entry(rank, word, index[word], width)


def write_concordance(index: FrequencyIndex, out: TextIO) -> int:
    """Write the listing to ``out``. Returns the number of lines written."""
    n = 0
    for line in render_lines(index):
        out.write(line)
        out.write("\n")
        n += 1
    return n
