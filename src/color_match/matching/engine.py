"""Tiered matching engine for supplier color labels."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass

from color_match.matching.scorer import ScoredChoice, extract, ratio, round_score, token_sort_ratio
from color_match.matching.text import consonant_key, normalize_color, tokenize_color
from color_match.matching.types import MAX_ALTERNATIVES, Alternative, MatchResult, Method

logger = logging.getLogger(__name__)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class MatchConfig:
    threshold: int = 74
    fuzzy_cutoff: int = 50
    consonant_gate: int = 75
    # consonant score must exceed fuzzy by more than this
    consonant_margin: int = 10
    review_below: int = 90
    result_limit: int = 3
    word_boundaries: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.result_limit <= MAX_ALTERNATIVES:
            raise ValueError(f"result_limit must be between 1 and {MAX_ALTERNATIVES}")

    @classmethod
    def from_env(cls) -> "MatchConfig":
        threshold = _safe_int(os.getenv("COLOR_MATCH_THRESHOLD"), cls.threshold)
        if not 0 <= threshold <= 100:
            threshold = cls.threshold
        return cls(
            threshold=threshold,
            word_boundaries=_parse_bool(os.getenv("COLOR_MATCH_WORD_BOUNDARIES"), False),
        )


@dataclass(frozen=True)
class Candidate:
    label: str
    key: str


def build_candidate_set(their_colors: Sequence[str | None]) -> list[Candidate]:
    return [Candidate(label=color or "", key=normalize_color(color)) for color in their_colors]


def decide(
    best_color: str,
    confidence: float,
    method: Method,
    *,
    threshold: int,
    alternatives: Sequence[Alternative] = (),
    review_below: int = 90,
) -> MatchResult:
    """Apply the match threshold and the review flag to a winning candidate."""
    score = round_score(confidence)
    matched = score >= threshold
    return MatchResult(
        matched=matched,
        matchedColor=best_color if matched else None,
        confidence=score,
        method=method,
        needsReview=score < review_below,
        alternatives=list(alternatives),
    )


class ColorMatcher:
    """Exact, then token fuzzy, then consonant-skeleton matching."""

    def __init__(self, config: MatchConfig | None = None):
        self.config = config or MatchConfig()

    def match(
        self,
        our_color: str | None,
        their_colors: Sequence[str | None],
        threshold: int | None = None,
    ) -> MatchResult:
        resolved_threshold = self.config.threshold if threshold is None else threshold
        query = normalize_color(our_color)
        candidates = build_candidate_set(their_colors)

        exact = self._match_exact(query, candidates)
        if exact:
            logger.info("Matching %r -> %r (exact)", our_color, exact.label)
            return MatchResult(
                matched=True,
                matchedColor=exact.label,
                confidence=100,
                method="exact",
                needsReview=False,
            )

        fuzzy_results = self._score_fuzzy(our_color, query, candidates)
        if not fuzzy_results:
            logger.info("No candidate for %r cleared cutoff %d", our_color, self.config.fuzzy_cutoff)
            return MatchResult(
                matched=False,
                matchedColor=None,
                confidence=0,
                method="none",
                needsReview=True,
                alternatives=[],
            )

        top = fuzzy_results[0]
        best_color = candidates[top.index].label
        confidence = top.score
        method: Method = "fuzzy"

        if confidence < self.config.consonant_gate:
            consonant = self._score_consonant(query, candidates)
            if consonant is not None:
                adopt = consonant.score > confidence + self.config.consonant_margin
                logger.debug(
                    "Consonant candidate %r scored %d vs fuzzy %d (adopted=%s)",
                    candidates[consonant.index].label,
                    consonant.score,
                    confidence,
                    adopt,
                )
                if adopt:
                    best_color = candidates[consonant.index].label
                    confidence = consonant.score
                    method = "consonant"

        alternatives = [
            Alternative(color=candidates[item.index].label, confidence=item.score)
            for item in fuzzy_results
        ]
        logger.info("Matching %r -> %r (%d%% confidence, %s)", our_color, best_color, confidence, method)
        return decide(
            best_color,
            confidence,
            method,
            threshold=resolved_threshold,
            alternatives=alternatives,
            review_below=self.config.review_below,
        )

    def _match_exact(self, query: str, candidates: list[Candidate]) -> Candidate | None:
        for candidate in candidates:
            if candidate.key == query:
                return candidate
        return None

    def _score_fuzzy(
        self,
        our_color: str | None,
        query: str,
        candidates: list[Candidate],
    ) -> list[ScoredChoice]:
        if self.config.word_boundaries:
            query_text = tokenize_color(our_color)
            choices = [tokenize_color(candidate.label) for candidate in candidates]
        else:
            query_text = query
            choices = [candidate.key for candidate in candidates]
        return extract(
            query_text,
            choices,
            scorer=token_sort_ratio,
            limit=self.config.result_limit,
            score_cutoff=self.config.fuzzy_cutoff,
        )

    def _score_consonant(self, query: str, candidates: list[Candidate]) -> ScoredChoice | None:
        results = extract(
            consonant_key(query),
            [consonant_key(candidate.key) for candidate in candidates],
            scorer=ratio,
            limit=self.config.result_limit,
            score_cutoff=self.config.fuzzy_cutoff,
        )
        return results[0] if results else None


def match_color(
    our_color: str | None,
    their_colors: Sequence[str | None],
    threshold: int | None = None,
    *,
    word_boundaries: bool = False,
) -> MatchResult:
    """Match one label against a supplier list with default policy values."""

    matcher = ColorMatcher(config=MatchConfig(word_boundaries=word_boundaries))
    return matcher.match(our_color, their_colors, threshold)
