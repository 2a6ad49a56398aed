"""Tests for concordance formatting."""

import io

from concordance._index import FrequencyIndex
from concordance._render import (
    MIN_WORD_PADDING,
    column_width,
    format_entry,
    render_lines,
    write_concordance,
)
from concordance._types import WordStat


def test_column_width_minimum():
    assert column_width(["cat", "dog"]) == MIN_WORD_PADDING == 30
    assert column_width([]) == 30


def test_column_width_long_word():
    assert column_width(["a" * 42, "b"]) == 42


def test_format_entry():
    stat = WordStat(count=2, sentence_numbers=[1, 2])
    line = format_entry(3, "sat", stat, 30)
    assert line == "c.   sat" + " " * 28 + "{2:1,2}"


def test_format_entry_sentinel_label():
    stat = WordStat.first_seen(9)
    line = format_entry(100, "word", stat, 30)
    assert line.startswith("zzz  word ")
    assert line.endswith("{1:9}")


def test_render_lines_sorted():
    index = FrequencyIndex()
    index.scan_text("Cat sat. Dog sat.")
    lines = list(render_lines(index))
    assert [line.split()[1] for line in lines] == ["cat", "dog", "sat"]
    assert [line.split()[0] for line in lines] == ["a.", "b.", "c."]


def test_long_word_widens_column():
    word = "pneumonoultramicroscopicsilicovolcanoconiosis"
    index = FrequencyIndex()
    index.scan_text(f"A {word}.")
    lines = list(render_lines(index))
    assert lines[0] == "a.   a" + " " * len(word) + "{1:1}"
    assert lines[1] == f"b.   {word} {{1:1}}"


def test_write_concordance():
    index = FrequencyIndex()
    index.scan_text("Cat sat. Dog sat.")
    out = io.StringIO()
    assert write_concordance(index, out) == 3
    text = out.getvalue()
    assert text.endswith("\n")
    assert len(text.splitlines()) == 3
