"""Alphabetical list markers: 1 -> "a.", 26 -> "z.", 27 -> "aa."."""

from __future__ import annotations

MAX_LIST_MARKER_CHARS = 3

# Ranks past 26 * MAX_LIST_MARKER_CHARS all share this marker.
OUT_OF_BOUND_LIST_MARKER = "zzz"

_ALPHABET_SIZE = 26


def encode_label(rank: int) -> str:
    """Return the list marker for a 1-based rank.

    Each full pass over the alphabet repeats the letter once more, so
    27 -> "aa.", 28 -> "bb.", 53 -> "aaa.". Ranks above 78 collapse to the
    bare ``"zzz"`` marker, without the trailing dot.
    """
    if rank < 1:
        raise ValueError(f"rank must be >= 1, got {rank}")
    if rank > _ALPHABET_SIZE * MAX_LIST_MARKER_CHARS:
        return OUT_OF_BOUND_LIST_MARKER

    width = 1
    remaining = rank
    while remaining > _ALPHABET_SIZE:
        remaining -= _ALPHABET_SIZE
        width += 1
    return chr(ord("a") + remaining - 1) * width + "."
