"""Pairwise similarity scoring over an ordered candidate list."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable

from rapidfuzz import fuzz

from color_match.exceptions import ScoringError

Scorer = Callable[[str, str], float]


@dataclass(frozen=True)
class ScoredChoice:
    choice: str
    score: int
    index: int


def token_sort_ratio(left: str, right: str) -> int:
    """Similarity of the two strings after sorting their whitespace tokens."""
    return round_score(fuzz.token_sort_ratio(left, right))


def ratio(left: str, right: str) -> int:
    """Order-sensitive normalized edit similarity."""
    return round_score(fuzz.ratio(left, right))


def extract(
    query: str,
    choices: Sequence[str],
    *,
    scorer: Scorer,
    limit: int | None = 3,
    score_cutoff: int = 0,
) -> list[ScoredChoice]:
    """Return the best `limit` choices for `query`, highest score first.

    Choices scoring below `score_cutoff` are dropped. Equal scores keep the
    candidate list order, so the earlier index wins.
    """
    scored: list[ScoredChoice] = []
    for index, choice in enumerate(choices):
        try:
            score = round_score(scorer(query, choice))
        except (TypeError, ValueError) as exc:
            raise ScoringError(f"scorer failed on choice #{index}: {exc}") from exc
        if score < score_cutoff:
            continue
        scored.append(ScoredChoice(choice=choice, score=score, index=index))

    scored.sort(key=lambda item: (-item.score, item.index))
    return scored[:limit] if limit is not None else scored


def round_score(score: float) -> int:
    """Clamp to [0, 100] and round .5 up."""
    return max(0, min(100, math.floor(score + 0.5)))
