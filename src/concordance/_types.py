"""Data structures for concordance."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class WordStat:
    """Occurrence count and sentence references for one normalized word."""

    count: int = 0
    sentence_numbers: list[int] = field(default_factory=list)

    @classmethod
    def first_seen(cls, sentence_number: int) -> WordStat:
        stat = cls()
        stat.add_sentence_number(sentence_number)
        return stat

    def add_sentence_number(self, sentence_number: int) -> None:
        """Count one more occurrence, seen in ``sentence_number``."""
        self.count += 1
        self.sentence_numbers.append(sentence_number)

    def sentence_number_string(self) -> str:
        return ",".join(str(n) for n in self.sentence_numbers)
