"""Lightweight regex-based English sentence segmenter."""

from __future__ import annotations

import re
from typing import Iterator

# Terminator run, optional closing quotes/brackets, then whitespace.
# Negative lookbehinds for common abbreviations. A blank line always breaks.
_BREAK_RE = re.compile(
    r"(?P<term>"
    r"(?<!\bMr)(?<!\bMrs)(?<!\bMs)(?<!\bDr)(?<!\bProf)(?<!\bSt)"
    r"(?<!\bJr)(?<!\bSr)(?<!\bGen)(?<!\bRev)(?<!\bInc)(?<!\bLtd)"
    r"(?<!\bCorp)(?<!\bvs)(?<!\betc)"
    r"(?P<stop>[.!?]+)[\"'”’)\]]*\s+"
    r")"
    r"|(?P<para>\n[ \t]*\n\s*)"
)

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")


def _continues(m: re.Match[str], next_char: str) -> bool:
    """True if a terminator match does not end the sentence.

    Only a run of periods followed by a lowercase letter continues the
    sentence, and never across a blank line.
    """
    if not m.group("term") or not next_char.islower():
        return False
    if m.group("stop").strip("."):
        return False
    return _BLANK_LINE_RE.search(m.group()) is None


def iter_sentences(text: str) -> Iterator[str]:
    """Yield contiguous sentence spans of ``text`` in order.

    Spans keep their trailing whitespace, so joining them gives back
    ``text`` exactly. Empty input yields nothing.
    """
    if not text:
        return

    start = 0
    n = len(text)
    for m in _BREAK_RE.finditer(text):
        end = m.end()
        if end >= n:
            break
        # "e.g. the" and "3 p.m. and" continue the same sentence
        if _continues(m, text[end]):
            continue
        yield text[start:end]
        start = end

    yield text[start:]


def split_sentences(text: str) -> list[str]:
    """Split text into sentence spans."""
    return list(iter_sentences(text))
