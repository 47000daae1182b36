"""Command-line entrypoint for the opinionkit vocabulary and sentiment analysis."""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import yaml

from opinionkit.artefacts import write_artefacts
from opinionkit.pipeline import AnalysisConfig, analyse
from opinionkit.resources import load_resources
from opinionkit.validate_data import ValidationError, save_summary, validate_frame


class AuditLogger:
    """Minimal JSONL audit logger."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, level: str = "INFO", **fields: Any) -> None:
        record = {"ts": time.time(), "level": level, **fields}
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, sort_keys=True, default=str) + "\n")


def load_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def load_data(cfg: Dict[str, Any]) -> pd.DataFrame:
    data_cfg = cfg.get("data", {})
    csv_path = Path(data_cfg.get("input_csv", "responses.csv"))
    if not csv_path.exists():
        raise FileNotFoundError(f"Input CSV not found: {csv_path}")
    return pd.read_csv(csv_path, keep_default_na=False, na_values=[""])


def main(args: Optional[List[str]] = None) -> Path:
    parser = argparse.ArgumentParser(description="Contrast support and oppose vocabulary in survey answers")
    parser.add_argument("config", type=Path, help="Path to the analysis config YAML")
    namespace = parser.parse_args(args=args)

    cfg = load_config(namespace.config)
    out_dir = Path(cfg.get("outputs", {}).get("dir", "outputs"))
    out_dir.mkdir(parents=True, exist_ok=True)

    audit = AuditLogger(out_dir / "audit.jsonl")
    audit.log(event="pipeline_start", config=str(namespace.config))

    config = AnalysisConfig.from_mapping(cfg)
    df = load_data(cfg)
    audit.log(event="data_loaded", rows=len(df))

    try:
        report = validate_frame(
            df,
            config.text_column,
            config.score_column,
            header_rows=config.header_rows,
            log_path=out_dir / "audit" / "validation.jsonl",
        )
    except ValidationError as exc:
        audit.log(level="ERROR", event="data_validation_failed", message=str(exc))
        raise
    save_summary(report, out_dir / "audit" / "validation_summary.json")
    audit.log(
        event="data_validated",
        data_signature=report.data_signature,
        warnings=len(report.warnings),
    )
    for issue in report.warnings:
        audit.log(level="WARN", event="data_warning", column=issue.column, message=issue.message)

    resources = load_resources(config.stopwords, config.lexicon, config.lemmas)
    audit.log(
        event="resources_loaded",
        stopwords=len(resources.stopwords),
        lexicon=len(resources.lexicon),
    )

    result = analyse(df, config, resources)
    audit.log(
        event="responses_ingested",
        total_rows=result.responses.total_rows,
        retained=len(result.responses),
        yield_pct=result.yield_pct,
    )
    audit.log(event="segments_built", counts=result.segments.counts())
    audit.log(event="differential_computed", entries=len(result.differential))
    audit.log(event="sentiment_ranked", records=len(result.ranking))

    written = write_artefacts(result, out_dir)
    audit.log(event="artefacts_written", paths={name: str(path) for name, path in written.items()})
    audit.log(event="pipeline_complete")
    return out_dir


if __name__ == "__main__":  # pragma: no cover
    main()
