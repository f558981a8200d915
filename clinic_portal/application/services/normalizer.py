"""Query and text normalization for search.

Case-folds, strips combining diacritics and tokenizes on whitespace.
No stemming and no edit distance: matching is plain substring logic on
the normalized text.
"""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """Return value stripped of surrounding whitespace ('' for None)."""
    return (value or "").strip()


def normalize_text(value: str | None) -> str:
    """Lowercase and diacritic-fold value ('Ärztin' -> 'arztin')."""
    decomposed = unicodedata.normalize("NFD", normalize(value).lower())
    return "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")


def tokenize(query: str | None) -> list[str]:
    """Split a normalized query into non-empty whitespace-separated tokens.

    An empty or whitespace-only query yields no tokens.
    """
    return [token for token in _WHITESPACE_RE.split(normalize_text(query)) if token]


UNKNOWN_PERSON_LABEL = "Unbekannt"


def format_display_name(
    first_name: str | None,
    last_name: str | None,
    fallback: str | None = None,
) -> str:
    """'Last First' when both are set, else whichever is set, else fallback.

    >>> format_display_name("Anna", "Huber")
    'Huber Anna'
    """
    first = normalize(first_name)
    last = normalize(last_name)
    if first and last:
        return f"{last} {first}"
    if last:
        return last
    if first:
        return first
    return normalize(fallback) or UNKNOWN_PERSON_LABEL
