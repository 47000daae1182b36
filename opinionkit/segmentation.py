"""Partition responses by opinion score."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .corpus import OPPOSE, SUPPORT
from .ingest import Response

SCORES = (1, 2, 3, 4, 5)
SUPPORT_SCORES = (4, 5)
OPPOSE_SCORES = (1, 2)


@dataclass(frozen=True)
class Segments:
    buckets: Mapping[int, Tuple[Response, ...]]

    def bucket(self, score: int) -> Tuple[Response, ...]:
        if score not in SCORES:
            raise KeyError(f"Unknown opinion score bucket: {score}")
        return self.buckets[score]

    def _union(self, scores: Tuple[int, ...]) -> Tuple[Response, ...]:
        merged = [response for score in scores for response in self.buckets[score]]
        return tuple(sorted(merged, key=lambda response: response.index))

    @property
    def support(self) -> Tuple[Response, ...]:
        return self._union(SUPPORT_SCORES)

    @property
    def oppose(self) -> Tuple[Response, ...]:
        return self._union(OPPOSE_SCORES)

    def counts(self) -> Dict[str, int]:
        sizes = {str(score): len(self.buckets[score]) for score in SCORES}
        sizes[SUPPORT] = len(self.support)
        sizes[OPPOSE] = len(self.oppose)
        return sizes


def segment(responses: Iterable[Response]) -> Segments:
    """Split responses into the five score buckets; every bucket exists."""

    grouped: Dict[int, list] = {score: [] for score in SCORES}
    for response in responses:
        grouped[response.opinion_score].append(response)
    return Segments(
        buckets=MappingProxyType(
            {
                score: tuple(sorted(items, key=lambda response: response.index))
                for score, items in grouped.items()
            }
        )
    )


__all__ = ["SCORES", "SUPPORT_SCORES", "OPPOSE_SCORES", "Segments", "segment"]
