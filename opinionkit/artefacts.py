"""Persist analysis outputs for the chart and report collaborators."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .pipeline import AnalysisResult


def differential_table(result: AnalysisResult) -> pd.DataFrame:
    return pd.DataFrame([entry.as_dict() for entry in result.differential], columns=["word", "diff"])


def word_cloud_table(result: AnalysisResult, label: str) -> pd.DataFrame:
    return pd.DataFrame(result.word_cloud(label), columns=["word", "count"])


def sentiment_payload(result: AnalysisResult) -> Dict[str, List[Dict[str, object]]]:
    report = result.sentiment_report()
    return {
        key: [{"index": index, "text": text, "score": score} for index, text, score in triples]
        for key, triples in report.items()
    }


def write_artefacts(result: AnalysisResult, out_dir: Path) -> Dict[str, Path]:
    """Write differential, word-cloud, sentiment and summary files under ``out_dir``."""

    freq_dir = out_dir / "frequencies"
    freq_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}

    diff_path = out_dir / "differential.csv"
    differential_table(result).to_csv(diff_path, index=False)
    written["differential"] = diff_path

    for label in result.frequencies:
        path = freq_dir / f"{label}.csv"
        word_cloud_table(result, label).to_csv(path, index=False)
        written[f"frequencies_{label}"] = path

    ranking_path = out_dir / "sentiment_ranking.json"
    ranking_path.write_text(
        json.dumps(sentiment_payload(result), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    written["sentiment_ranking"] = ranking_path

    summary_path = out_dir / "summary.json"
    summary_path.write_text(json.dumps(result.summary(), indent=2), encoding="utf-8")
    written["summary"] = summary_path
    return written


__all__ = ["differential_table", "word_cloud_table", "sentiment_payload", "write_artefacts"]
