"""color-match: Resolve internal color labels to supplier color names."""

from color_match.core import match
from color_match.fixtures import FixtureResult, run_fixture_suite
from color_match.matching import MatchConfig, MatchResult, normalize_color

__version__ = "0.1.0"

__all__ = [
    "match",
    "run_fixture_suite",
    "normalize_color",
    "FixtureResult",
    "MatchConfig",
    "MatchResult",
    "__version__",
]
