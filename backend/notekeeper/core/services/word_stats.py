from __future__ import annotations

import unicodedata
from collections import Counter

FrequencyTable = list[tuple[str, int]]


def _is_word_char(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category.startswith("L") or category == "Nd"


def tokenize(text: str) -> list[str]:
    """Split lower-cased text into maximal runs of letters and decimal digits.

    Everything else (whitespace, punctuation, symbols, underscores) is a
    delimiter, so no empty tokens are produced.
    """
    tokens: list[str] = []
    current: list[str] = []
    for ch in text.lower():
        if _is_word_char(ch):
            current.append(ch)
        elif current:
            tokens.append("".join(current))
            current = []
    if current:
        tokens.append("".join(current))
    return tokens


def count_words(text: str | None) -> FrequencyTable:
    """Return ``(word, count)`` pairs ordered by count desc, then word asc.

    Blank or missing text yields an empty table.
    """
    if text is None or not text.strip():
        return []
    counts = Counter(tokenize(text))
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
