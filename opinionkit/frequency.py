"""Term-frequency tables aggregated over a corpus."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

import pandas as pd

from .corpus import Corpus


@dataclass(frozen=True)
class TermFrequencyTable:
    """Word counts sorted by count descending, ties broken by word ascending."""

    label: str
    entries: Tuple[Tuple[str, int], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    @property
    def distinct_words(self) -> int:
        return len(self.entries)

    def as_dict(self) -> Dict[str, int]:
        return dict(self.entries)

    def ratios(self) -> Dict[str, float]:
        """Counts divided by the number of distinct words in the table.

        The denominator is the distinct-word count, not the token total.
        """

        distinct = self.distinct_words
        if not distinct:
            return {}
        return {word: count / distinct for word, count in self.entries}

    def top(self, n: int) -> List[Tuple[str, int]]:
        return list(self.entries[: max(n, 0)])

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(list(self.entries), columns=["word", "count"])
        frame["ratio"] = frame["count"] / self.distinct_words if self.distinct_words else 0.0
        return frame


def sort_counts(counts: Dict[str, int]) -> Tuple[Tuple[str, int], ...]:
    return tuple(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def term_frequency(corpus: Corpus) -> TermFrequencyTable:
    """Sum token occurrences across every document of ``corpus``."""

    counter: Counter[str] = Counter()
    for document in corpus:
        counter.update(document)
    return TermFrequencyTable(label=corpus.label, entries=sort_counts(dict(counter)))


__all__ = ["TermFrequencyTable", "sort_counts", "term_frequency"]
