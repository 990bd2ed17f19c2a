from pathlib import Path
from typing import List, Optional

from app.errors import NgramSourceError

# Most frequent English bigrams and trigrams, most common first.
DEFAULT_NGRAMS: List[str] = [
    "th", "he", "in", "er", "an", "re", "the", "on", "at", "en",
    "nd", "ti", "es", "or", "te", "and", "of", "ed", "is", "it",
    "al", "ar", "st", "to", "nt", "ing", "ng", "se", "ha", "as",
    "ou", "io", "le", "ve", "co", "me", "de", "hi", "ion", "ri",
    "ro", "ic", "ne", "ea", "ra", "ce", "ent", "li", "ch", "ll",
    "be", "ma", "si", "om", "ur", "tio", "for", "nde", "has", "nce",
]


def _parse_line(line: str):
    parts = line.split()
    ngram = parts[0]
    # only letters can be typed into a lesson
    if not ngram.isalpha():
        raise NgramSourceError(f"n-gram must be letters only: {line!r}")
    if len(parts) == 1:
        return ngram, None
    try:
        return ngram, int(parts[1])
    except ValueError:
        raise NgramSourceError(f"bad count in n-gram line: {line!r}")


def load_ngrams(path: str) -> List[str]:
    """
    Read a ranked n-gram list: one n-gram per line, optionally followed by a count.
    Lines with counts are re-ranked by descending count.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise NgramSourceError(f"cannot read n-gram file {path}: {e}")

    entries = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(_parse_line(line))

    if not entries:
        raise NgramSourceError(f"no n-grams found in {path}")
    if any(count is not None for _, count in entries):
        entries.sort(key=lambda e: -(e[1] or 0))
    return [ngram for ngram, _ in entries]


def resolve_ngrams(path: Optional[str]) -> List[str]:
    if path is None:
        return list(DEFAULT_NGRAMS)
    return load_ngrams(path)
