"""Opinionkit: vocabulary and sentiment contrast for scored survey answers."""

from . import artefacts, corpus, differential, frequency, ingest, normalize, pipeline, resources, segmentation, sentiment, validate_data

__all__ = [
    "artefacts",
    "corpus",
    "differential",
    "frequency",
    "ingest",
    "normalize",
    "pipeline",
    "resources",
    "segmentation",
    "sentiment",
    "validate_data",
]
