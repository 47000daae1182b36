"""Valence-lexicon sentiment scoring and ranking of responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .ingest import Response, ResponseSet

ValenceLexicon = Mapping[str, float]

_WORD = re.compile(r"[^\W_]+(?:-[^\W_]+)*")


@dataclass(frozen=True)
class SentimentRecord:
    index: int
    score: float

    def as_dict(self) -> Dict[str, float]:
        return {"index": self.index, "score": self.score}


def sentiment_score(text: Optional[str], lexicon: ValenceLexicon) -> float:
    """Sum the lexicon weight of every word in ``text``; unknown words count zero."""

    if not text:
        return 0.0
    return float(sum(float(lexicon.get(token, 0.0)) for token in _WORD.findall(text.lower())))


def rank_responses(responses: Iterable[Response], lexicon: ValenceLexicon) -> List[SentimentRecord]:
    """Score each response and order ascending by score, then by index."""

    records = [
        SentimentRecord(index=response.index, score=sentiment_score(response.cleaned_text, lexicon))
        for response in responses
    ]
    if not records:
        return []
    order = np.lexsort(
        (
            np.array([record.index for record in records]),
            np.array([record.score for record in records], dtype=float),
        )
    )
    return [records[position] for position in order]


def most_negative(records: Sequence[SentimentRecord], k: int) -> List[SentimentRecord]:
    return list(records[: k]) if k > 0 else []


def most_positive(records: Sequence[SentimentRecord], k: int) -> List[SentimentRecord]:
    """Highest-scoring ``k`` records, still in ascending order."""

    return list(records[-k:]) if k > 0 else []


def ranked_report(
    records: Sequence[SentimentRecord],
    responses: ResponseSet,
    k: int,
) -> Dict[str, List[Tuple[int, str, float]]]:
    """``(index, original text, score)`` triples for the extremes of a ranking."""

    def triples(selection: List[SentimentRecord]) -> List[Tuple[int, str, float]]:
        return [
            (record.index, responses.lookup_original(record.index), record.score)
            for record in selection
        ]

    return {
        "most_negative": triples(most_negative(records, k)),
        "most_positive": triples(most_positive(records, k)),
    }


__all__ = [
    "ValenceLexicon",
    "SentimentRecord",
    "sentiment_score",
    "rank_responses",
    "most_negative",
    "most_positive",
    "ranked_report",
]
