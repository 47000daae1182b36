"""Turn a survey frame into indexed, filtered responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from .normalize import Lemmatizer, normalize

HEADER_ROWS = 2
SCORE_RANGE = (1, 5)


@dataclass(frozen=True)
class Response:
    """A retained survey answer; ``index`` links it back to the original row."""

    index: int
    raw_text: str
    opinion_score: int
    cleaned_text: str


@dataclass(frozen=True)
class ResponseSet:
    responses: Tuple[Response, ...]
    originals: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    total_rows: int = 0

    def __len__(self) -> int:
        return len(self.responses)

    @property
    def yield_pct(self) -> float:
        return compute_yield(len(self.responses), self.total_rows)

    def lookup_original(self, index: int) -> str:
        """Return the unmodified text stored for ``index``."""

        try:
            return self.originals[index]
        except KeyError:
            raise KeyError(f"No original response stored for index {index}") from None


def compute_yield(post_filter: int, pre_filter: int) -> float:
    """Percentage of rows surviving filtering, rounded to three decimals."""

    if pre_filter <= 0:
        return 0.0
    return round(post_filter / pre_filter * 100, 3)


def _text_or_none(value: Any) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)


def _parse_score(value: Any) -> Optional[int]:
    if isinstance(value, (bool, np.bool_)):
        return None
    number = pd.to_numeric(pd.Series([value]), errors="coerce").iloc[0]
    if pd.isna(number) or not math.isfinite(number) or float(number) != int(number):
        return None
    score = int(number)
    low, high = SCORE_RANGE
    return score if low <= score <= high else None


def ingest(
    frame: pd.DataFrame,
    text_column: str,
    score_column: str,
    *,
    lemmatizer: Optional[Lemmatizer] = None,
    header_rows: int = HEADER_ROWS,
) -> ResponseSet:
    """Drop header rows, index every row, keep originals and filter incomplete answers.

    Rows are excluded when the text is null or blank, normalizes to nothing, or the
    score is not an integer between 1 and 5. Excluded rows still count toward
    ``total_rows``.
    """

    rows = frame.iloc[header_rows:][[text_column, score_column]]
    originals: Dict[int, str] = {}
    responses = []
    for index, (raw_value, raw_score) in enumerate(rows.itertuples(index=False, name=None)):
        text = _text_or_none(raw_value)
        if text is None:
            continue
        originals[index] = text
        if not text.strip():
            continue
        score = _parse_score(raw_score)
        if score is None:
            continue
        cleaned = normalize(text, lemmatizer)
        if cleaned is None:
            continue
        responses.append(
            Response(index=index, raw_text=text, opinion_score=score, cleaned_text=cleaned)
        )
    return ResponseSet(
        responses=tuple(responses),
        originals=MappingProxyType(originals),
        total_rows=len(rows),
    )


__all__ = ["HEADER_ROWS", "Response", "ResponseSet", "compute_yield", "ingest"]
