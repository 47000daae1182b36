"""Structural checks on the survey frame before ingestion."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd


class ValidationError(RuntimeError):
    """Raised when validation detects blocking issues."""


@dataclass
class ValidationIssue:
    level: str
    column: Optional[str]
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "column": self.column,
            "message": self.message,
            "context": self.context,
        }


@dataclass
class ValidationReport:
    """Structured validation result with helper accessors."""

    issues: List[ValidationIssue]
    data_signature: str
    validated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.level == "ERROR"]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.level == "WARN"]

    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issues": [issue.as_dict() for issue in self.issues],
            "data_signature": self.data_signature,
            "validated_at": self.validated_at.isoformat(),
        }


def _hash_dataframe(df: pd.DataFrame) -> str:
    csv_bytes = df.to_csv(index=False).encode("utf-8")
    return hashlib.sha256(csv_bytes).hexdigest()


def validate_frame(
    df: pd.DataFrame,
    text_column: str,
    score_column: str,
    *,
    header_rows: int = 2,
    log_path: Optional[Path] = None,
    halt_on_error: bool = True,
) -> ValidationReport:
    """Check that the response text and opinion score columns are usable."""

    issues: List[ValidationIssue] = []
    for name in (text_column, score_column):
        if name not in df.columns:
            issues.append(ValidationIssue(level="ERROR", column=name, message="Missing required column"))

    if len(df) <= header_rows:
        issues.append(
            ValidationIssue(
                level="WARN",
                column=None,
                message="No rows after header rows",
                context={"rows": len(df), "header_rows": header_rows},
            )
        )
    elif score_column in df.columns:
        scores = pd.to_numeric(df[score_column].iloc[header_rows:], errors="coerce")
        numeric = scores.dropna()
        out_of_range = numeric[~numeric.between(1, 5)]
        if numeric.empty:
            issues.append(
                ValidationIssue(level="WARN", column=score_column, message="No numeric scores present")
            )
        elif not out_of_range.empty:
            issues.append(
                ValidationIssue(
                    level="WARN",
                    column=score_column,
                    message="Scores outside 1-5 will be excluded",
                    context={"count": int(len(out_of_range))},
                )
            )

    report = ValidationReport(issues=issues, data_signature=_hash_dataframe(df))

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(report.to_dict(), default=str) + "\n")

    if halt_on_error and report.has_errors():
        raise ValidationError(f"Validation failed with {len(report.errors)} error(s)")

    return report


def save_summary(report: ValidationReport, destination: Path) -> None:
    """Persist a human-readable audit summary."""

    destination.parent.mkdir(parents=True, exist_ok=True)
    summary = {
        "validated_at": report.validated_at.isoformat(),
        "data_signature": report.data_signature,
        "error_count": len(report.errors),
        "warning_count": len(report.warnings),
        "issues": [issue.as_dict() for issue in report.issues],
    }
    destination.write_text(json.dumps(summary, indent=2), encoding="utf-8")


__all__ = [
    "ValidationError",
    "ValidationIssue",
    "ValidationReport",
    "validate_frame",
    "save_summary",
]
