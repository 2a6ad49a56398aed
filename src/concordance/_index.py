"""Frequency index: normalized word -> WordStat."""

from __future__ import annotations

from typing import Iterator

from ._sentence import iter_sentences
from ._tokenizer import iter_words
from ._types import WordStat


class FrequencyIndex:
    """Word statistics accumulated over one scan of a document.

    Built fresh for every document; read-only once the scan is done.
    """

    __slots__ = ("_stats",)

    def __init__(self) -> None:
        self._stats: dict[str, WordStat] = {}

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, word: object) -> bool:
        return word in self._stats

    def __getitem__(self, word: str) -> WordStat:
        return self._stats[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._stats)

    def record_occurrence(self, word: str, sentence_number: int) -> None:
        stat = self._stats.get(word)
        if stat is None:
            self._stats[word] = WordStat.first_seen(sentence_number)
        else:
            stat.add_sentence_number(sentence_number)

    def scan_sentence(self, sentence: str, sentence_number: int) -> None:
        """Record every word of one sentence."""
        for word in iter_words(sentence):
            self.record_occurrence(word, sentence_number)

    def scan_text(self, text: str) -> int:
        """Record every word of ``text``, numbering sentences from 1.

        Returns the number of sentences scanned.
        """
        sentence_number = 0
        for sentence_number, sentence in enumerate(iter_sentences(text), 1):
            self.scan_sentence(sentence, sentence_number)
        return sentence_number

    def sorted_words(self) -> list[str]:
        """Distinct words in code-point order."""
        return sorted(self._stats)
