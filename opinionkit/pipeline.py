"""End-to-end vocabulary and sentiment analysis of a survey frame."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from .corpus import OPPOSE, SUPPORT, Corpus, build_corpus
from .differential import DifferentialEntry, diff_frequency
from .frequency import TermFrequencyTable, term_frequency
from .ingest import HEADER_ROWS, ResponseSet, ingest
from .resources import LinguisticResources
from .segmentation import SCORES, Segments, segment
from .sentiment import SentimentRecord, rank_responses, ranked_report


@dataclass
class AnalysisConfig:
    """Column names, slice sizes and resource paths for one analysis run."""

    text_column: str = "response"
    score_column: str = "score"
    header_rows: int = HEADER_ROWS
    neg_count: int = 10
    pos_count: int = 10
    top_k: int = 5
    word_cloud_size: int = 100
    stopwords: Optional[Path] = None
    lexicon: Optional[Path] = None
    lemmas: Optional[Path] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "AnalysisConfig":
        data = mapping.get("data", {}) or {}
        analysis = mapping.get("analysis", {}) or {}
        resources = mapping.get("resources", {}) or {}

        def _path(value: Any) -> Optional[Path]:
            return Path(value) if value else None

        return cls(
            text_column=data.get("text_column", cls.text_column),
            score_column=data.get("score_column", cls.score_column),
            header_rows=int(data.get("header_rows", HEADER_ROWS)),
            neg_count=int(analysis.get("neg_count", cls.neg_count)),
            pos_count=int(analysis.get("pos_count", cls.pos_count)),
            top_k=int(analysis.get("top_k", cls.top_k)),
            word_cloud_size=int(analysis.get("word_cloud_size", cls.word_cloud_size)),
            stopwords=_path(resources.get("stopwords")),
            lexicon=_path(resources.get("lexicon")),
            lemmas=_path(resources.get("lemmas")),
        )


@dataclass(frozen=True)
class AnalysisResult:
    responses: ResponseSet
    segments: Segments
    corpora: Mapping[str, Corpus]
    frequencies: Mapping[str, TermFrequencyTable]
    differential: Tuple[DifferentialEntry, ...]
    ranking: Tuple[SentimentRecord, ...]
    top_k: int = 5
    word_cloud_size: int = 100

    @property
    def yield_pct(self) -> float:
        return self.responses.yield_pct

    def word_cloud(self, label: str) -> List[Tuple[str, int]]:
        return self.frequencies[label].top(self.word_cloud_size)

    def sentiment_report(self) -> Dict[str, List[Tuple[int, str, float]]]:
        return ranked_report(self.ranking, self.responses, self.top_k)

    def summary(self) -> Dict[str, Any]:
        return {
            "total_rows": self.responses.total_rows,
            "retained": len(self.responses),
            "yield": self.yield_pct,
            "segments": self.segments.counts(),
            "distinct_words": {label: table.distinct_words for label, table in self.frequencies.items()},
        }


def build_corpora(segments: Segments, stopwords: AbstractSet[str]) -> Dict[str, Corpus]:
    """One corpus per score bucket plus the merged support and oppose corpora."""

    groups = {str(score): segments.bucket(score) for score in SCORES}
    groups[SUPPORT] = segments.support
    groups[OPPOSE] = segments.oppose
    return {
        label: build_corpus((response.cleaned_text for response in responses), label, stopwords)
        for label, responses in groups.items()
    }


def analyse(
    frame: pd.DataFrame,
    config: AnalysisConfig,
    resources: LinguisticResources,
) -> AnalysisResult:
    """Run ingestion, segmentation, frequency contrast and sentiment ranking."""

    responses = ingest(
        frame,
        config.text_column,
        config.score_column,
        lemmatizer=resources.lemmatizer,
        header_rows=config.header_rows,
    )
    segments = segment(responses.responses)
    corpora = build_corpora(segments, resources.stopwords)
    frequencies = {label: term_frequency(corpus) for label, corpus in corpora.items()}
    differential = diff_frequency(
        frequencies[OPPOSE],
        frequencies[SUPPORT],
        config.neg_count,
        config.pos_count,
    )
    ranking = rank_responses(responses.responses, resources.lexicon)
    return AnalysisResult(
        responses=responses,
        segments=segments,
        corpora=corpora,
        frequencies=frequencies,
        differential=tuple(differential),
        ranking=tuple(ranking),
        top_k=config.top_k,
        word_cloud_size=config.word_cloud_size,
    )


__all__ = ["AnalysisConfig", "AnalysisResult", "build_corpora", "analyse"]
