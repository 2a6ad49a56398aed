"""Concordance: alphabetical word listing with frequencies and sentence numbers."""

from __future__ import annotations

from ._concordance import build_index, generate, read_document
from ._errors import ConcordanceError, InputReadError
from ._index import FrequencyIndex
from ._label import OUT_OF_BOUND_LIST_MARKER, encode_label
from ._render import MIN_WORD_PADDING, format_entry, render_lines, write_concordance
from ._sentence import iter_sentences, split_sentences
from ._tokenizer import is_word, iter_word_candidates, iter_words, normalize
from ._types import WordStat

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConcordanceError",
    "FrequencyIndex",
    "InputReadError",
    "MIN_WORD_PADDING",
    "OUT_OF_BOUND_LIST_MARKER",
    "WordStat",
    "build_index",
    "encode_label",
    "format_entry",
    "generate",
    "is_word",
    "iter_sentences",
    "iter_word_candidates",
    "iter_words",
    "normalize",
    "read_document",
    "render_lines",
    "split_sentences",
    "write_concordance",
]
