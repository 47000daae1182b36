"""Cleaning and lemmatization of individual survey responses."""

from __future__ import annotations

import re
from typing import Callable, Dict, Mapping, Optional

Lemmatizer = Callable[[str], str]

_LINE_BREAKS = re.compile(r"<br\s*/?>|\r\n|\r|\n", re.IGNORECASE)
_APOSTROPHES = ("'", "’", "‘")
# Removed as literal characters.
_TERMINAL_PUNCTUATION = (".", "?", "!")


class DictionaryLemmatizer:
    """Explicit ``token -> base form`` lookup with identity fallback."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping: Dict[str, str] = {str(k).lower(): str(v) for k, v in mapping.items()}

    def __len__(self) -> int:
        return len(self._mapping)

    def __call__(self, token: str) -> str:
        return self._mapping.get(token.lower(), token)


def identity_lemmatizer(token: str) -> str:
    return token


_MAX_LEMMA_STEPS = 5


def base_form(token: str, lemmatizer: Lemmatizer) -> str:
    """Apply ``lemmatizer`` until the token stops changing."""

    for _ in range(_MAX_LEMMA_STEPS):
        lemma = lemmatizer(token) or token
        if lemma == token:
            break
        token = lemma
    return token


def lemmatize_text(text: str, lemmatizer: Lemmatizer) -> str:
    """Lemmatize whitespace-delimited tokens, keeping their order."""

    return " ".join(base_form(token, lemmatizer) for token in text.split())


def normalize(text: Optional[str], lemmatizer: Optional[Lemmatizer] = None) -> Optional[str]:
    """Return the cleaned, lemmatized form of ``text`` or ``None`` if nothing is left."""

    if text is None:
        return None
    cleaned = _LINE_BREAKS.sub(" ", str(text))
    for char in _APOSTROPHES + _TERMINAL_PUNCTUATION:
        cleaned = cleaned.replace(char, "")
    cleaned = lemmatize_text(cleaned, lemmatizer or identity_lemmatizer)
    return cleaned or None


__all__ = [
    "Lemmatizer",
    "DictionaryLemmatizer",
    "identity_lemmatizer",
    "base_form",
    "lemmatize_text",
    "normalize",
]
