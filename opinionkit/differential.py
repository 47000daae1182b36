"""Signed word-usage differences between the oppose and support groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from .frequency import TermFrequencyTable

_COLUMNS = ["word", "support_ratio", "oppose_ratio", "diff"]


@dataclass(frozen=True)
class DifferentialEntry:
    word: str
    diff: float

    def as_dict(self) -> Dict[str, object]:
        return {"word": self.word, "diff": self.diff}


def _ratio_frame(table: TermFrequencyTable, column: str, sign: float) -> pd.DataFrame:
    ratios = table.ratios()
    return pd.DataFrame(
        {"word": list(ratios.keys()), column: [sign * value for value in ratios.values()]},
        columns=["word", column],
    )


def differential_frame(oppose: TermFrequencyTable, support: TermFrequencyTable) -> pd.DataFrame:
    """Outer-merge both tables by word and sort by summed ratio, descending.

    Oppose ratios are negated; a word missing from one side contributes zero there.
    Ties are broken by word ascending.
    """

    merged = pd.merge(
        _ratio_frame(support, "support_ratio", 1.0),
        _ratio_frame(oppose, "oppose_ratio", -1.0),
        on="word",
        how="outer",
    )
    if merged.empty:
        return pd.DataFrame(columns=_COLUMNS)
    merged[["support_ratio", "oppose_ratio"]] = (
        merged[["support_ratio", "oppose_ratio"]].astype(float).fillna(0.0)
    )
    merged["diff"] = merged["support_ratio"] + merged["oppose_ratio"]
    merged = merged.sort_values(["diff", "word"], ascending=[False, True], kind="mergesort")
    return merged[_COLUMNS].reset_index(drop=True)


def diff_frequency(
    oppose: TermFrequencyTable,
    support: TermFrequencyTable,
    neg_count: int,
    pos_count: int,
) -> List[DifferentialEntry]:
    """Return the ``pos_count`` most support-skewed then ``neg_count`` most oppose-skewed words.

    Both slices keep descending order. The oppose slice never repeats a word
    already taken by the support slice.
    """

    if neg_count < 0 or pos_count < 0:
        raise ValueError("neg_count and pos_count must be non-negative")
    frame = differential_frame(oppose, support)
    top = frame.iloc[:pos_count]
    remainder = frame.iloc[len(top):]
    bottom = remainder.iloc[len(remainder) - min(neg_count, len(remainder)):]
    selected = pd.concat([top, bottom])
    return [
        DifferentialEntry(word=str(row.word), diff=float(row.diff))
        for row in selected.itertuples(index=False)
    ]


__all__ = ["DifferentialEntry", "differential_frame", "diff_frequency"]
