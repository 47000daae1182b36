"""Stopword sets, valence lexicons and lemmatizers used by the analysis.

Every resource can be loaded from a plain file so fixtures and deployments can
substitute a controlled vocabulary. When no file is configured the NLTK corpora
(English stopwords, the VADER lexicon) and TextBlob's WordNet lemmatizer are used;
the corpora are downloaded on first use if they are missing.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Optional

import nltk
import pandas as pd
from textblob import Word

from .normalize import DictionaryLemmatizer, Lemmatizer
from .sentiment import ValenceLexicon

# Tried in order; the first part of speech with a different base form wins.
_WORDNET_POSITIONS = ("v", "n", "a")
_WRAPPED_WORD = re.compile(r"^(\W*)([^\W\d_]+)(\W*)$")


@dataclass(frozen=True)
class LinguisticResources:
    stopwords: FrozenSet[str]
    lexicon: ValenceLexicon
    lemmatizer: Lemmatizer


def ensure_nltk_resource(resource_path: str, download_name: str) -> None:
    """Make sure an NLTK resource is installed, downloading it when missing."""

    try:
        nltk.data.find(resource_path)
    except LookupError:
        if not nltk.download(download_name, quiet=True):
            raise LookupError(f"Unable to download NLTK resource '{download_name}'") from None


def _read_table(path: Path, columns: int) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Resource file not found: {path}")
    frame = pd.read_csv(
        path,
        sep="\t",
        header=None,
        usecols=list(range(columns)),
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        comment=None,
        engine="python",
    )
    return frame[frame[0].str.strip() != ""]


# ---------------------------------------------------------------------------
# File loaders
# ---------------------------------------------------------------------------


def load_stopwords(path: Path) -> FrozenSet[str]:
    """One stopword per line; blank lines and ``#`` comments are ignored."""

    if not path.exists():
        raise FileNotFoundError(f"Stopword file not found: {path}")
    words = set()
    for line in path.read_text(encoding="utf-8").splitlines():
        word = line.strip().lower()
        if word and not word.startswith("#"):
            words.add(word)
    return frozenset(words)


def load_lexicon(path: Path) -> ValenceLexicon:
    """Read ``word<TAB>weight`` rows; extra columns (as in the VADER file) are ignored."""

    frame = _read_table(path, columns=2)
    missing = frame[frame[1].isna() | (frame[1].str.strip() == "")]
    if not missing.empty:
        row = missing.index[0]
        raise ValueError(f"Lexicon row {row + 1} in {path} has no weight: {missing.iloc[0, 0]!r}")
    weights = pd.to_numeric(frame[1], errors="raise")
    lexicon: Dict[str, float] = {
        str(word).strip().lower(): float(weight) for word, weight in zip(frame[0], weights)
    }
    return MappingProxyType(lexicon)


def load_lemmas(path: Path) -> DictionaryLemmatizer:
    """Read ``token<TAB>lemma`` rows into a dictionary lemmatizer."""

    frame = _read_table(path, columns=2)
    return DictionaryLemmatizer(
        {str(token).strip(): str(lemma).strip() for token, lemma in zip(frame[0], frame[1])}
    )


# ---------------------------------------------------------------------------
# NLTK / TextBlob defaults
# ---------------------------------------------------------------------------


def default_stopwords() -> FrozenSet[str]:
    ensure_nltk_resource("corpora/stopwords", "stopwords")
    from nltk.corpus import stopwords

    return frozenset(word.lower() for word in stopwords.words("english"))


def default_lexicon() -> ValenceLexicon:
    ensure_nltk_resource("sentiment/vader_lexicon.zip", "vader_lexicon")
    from nltk.sentiment.vader import SentimentIntensityAnalyzer

    return MappingProxyType(dict(SentimentIntensityAnalyzer().lexicon))


@lru_cache(maxsize=None)
def wordnet_lemma(token: str) -> str:
    """WordNet base form of ``token``, or ``token`` itself when none is known."""

    match = _WRAPPED_WORD.match(token)
    if match is None:
        return token
    prefix, word, suffix = match.groups()
    lowered = word.lower()
    for pos in _WORDNET_POSITIONS:
        base = Word(lowered).lemmatize(pos)
        if base != lowered:
            return prefix + base + suffix
    return token


def default_lemmatizer() -> Lemmatizer:
    ensure_nltk_resource("corpora/wordnet", "wordnet")
    return wordnet_lemma


def load_resources(
    stopwords: Optional[Path] = None,
    lexicon: Optional[Path] = None,
    lemmas: Optional[Path] = None,
) -> LinguisticResources:
    """Load configured resource files, falling back to the NLTK defaults per resource."""

    return LinguisticResources(
        stopwords=load_stopwords(stopwords) if stopwords else default_stopwords(),
        lexicon=load_lexicon(lexicon) if lexicon else default_lexicon(),
        lemmatizer=load_lemmas(lemmas) if lemmas else default_lemmatizer(),
    )


__all__ = [
    "LinguisticResources",
    "ensure_nltk_resource",
    "load_stopwords",
    "load_lexicon",
    "load_lemmas",
    "default_stopwords",
    "default_lexicon",
    "default_lemmatizer",
    "wordnet_lemma",
    "load_resources",
]
