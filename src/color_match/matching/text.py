"""Label canonicalization helpers."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_VOWELS = re.compile(r"[aeiou]", flags=re.IGNORECASE)
# "navyBlue" -> "navy Blue", "TNFBlack" -> "TNF Black"
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def normalize_color(value: str | None) -> str:
    """Lowercase and keep only ASCII letters and digits."""
    if not value:
        return ""
    return _NON_ALNUM.sub("", value.lower())


def consonant_key(key: str) -> str:
    """Drop vowels so abbreviations like "dkgy" line up with "darkgrey"."""
    return _VOWELS.sub("", key)


def tokenize_color(value: str | None) -> str:
    """Word-preserving variant of normalize_color.

    Case changes and punctuation become single spaces, so token-order aware
    scorers still see the words. Removing the spaces gives normalize_color(value).
    """
    if not value:
        return ""
    spaced = _WORD_BOUNDARY.sub(" ", value)
    return _NON_ALNUM_RUN.sub(" ", spaced.lower()).strip()
