"""Tokenized, stopword-filtered document sets per respondent group."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Iterator, Optional, Tuple

SUPPORT = "support"
OPPOSE = "oppose"

_DIGITS = re.compile(r"\d+")
_PUNCTUATION = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Corpus:
    """Ordered token lists, one per document, tagged with a group label."""

    label: str
    documents: Tuple[Tuple[str, ...], ...] = ()

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.documents)

    def is_empty(self) -> bool:
        return not self.documents

    def tokens(self) -> Iterator[str]:
        for document in self.documents:
            yield from document


def tokenize(text: str, stopwords: AbstractSet[str]) -> Tuple[str, ...]:
    """Strip digits and punctuation, lowercase, split and drop stopwords."""

    stripped = _PUNCTUATION.sub("", _DIGITS.sub("", text))
    collapsed = _WHITESPACE.sub(" ", stripped).strip().lower()
    return tuple(token for token in collapsed.split(" ") if token and token not in stopwords)


def build_corpus(
    texts: Iterable[Optional[str]],
    label: str,
    stopwords: AbstractSet[str] = frozenset(),
) -> Corpus:
    """Build a :class:`Corpus` from cleaned response strings."""

    documents = tuple(tokenize(text, stopwords) for text in texts if text is not None)
    return Corpus(label=label, documents=documents)


__all__ = ["SUPPORT", "OPPOSE", "Corpus", "tokenize", "build_corpus"]
