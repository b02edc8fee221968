"""Word frequency table and report rendering."""

from __future__ import annotations

import json
from collections import Counter
from typing import IO, Iterable, Iterator, List, Mapping, Tuple

WordCount = Tuple[str, int]


class FrequencyTable:
    """Mapping from word to occurrence count, iterated in key order.

    Counts only grow: the sole mutation is `increment`.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    @classmethod
    def from_mapping(cls, counts: Mapping[str, int]) -> "FrequencyTable":
        table = cls()
        table._counts.update(counts)
        return table

    def increment(self, word: str) -> None:
        self._counts[word] += 1

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            self.increment(word)

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def snapshot(self) -> List[WordCount]:
        """Return all (word, count) pairs in ascending word order."""
        return sorted(self._counts.items())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._counts))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrequencyTable):
            return dict(self._counts) == dict(other._counts)
        if isinstance(other, Mapping):
            return dict(self._counts) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self.snapshot())!r})"


def sort_frequencies(pairs: Iterable[WordCount]) -> List[WordCount]:
    """Sort by count descending, then word ascending."""
    return sorted(pairs, key=lambda kv: (-kv[1], kv[0]))


def format_report(pairs: Iterable[WordCount]) -> List[str]:
    return [f"{word}: {count}" for word, count in pairs]


def write_report(pairs: Iterable[WordCount], stream: IO[str]) -> None:
    for line in format_report(pairs):
        stream.write(f"{line}\n")


def report_as_json(pairs: Iterable[WordCount]) -> str:
    data = [{"word": word, "count": count} for word, count in pairs]
    return json.dumps(data, ensure_ascii=False)
