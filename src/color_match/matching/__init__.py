"""Matching utilities for color-match."""

from color_match.matching.engine import ColorMatcher, MatchConfig, decide, match_color
from color_match.matching.text import consonant_key, normalize_color, tokenize_color
from color_match.matching.types import Alternative, MatchResult

__all__ = [
    "Alternative",
    "ColorMatcher",
    "MatchConfig",
    "MatchResult",
    "consonant_key",
    "decide",
    "match_color",
    "normalize_color",
    "tokenize_color",
]
