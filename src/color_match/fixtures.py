"""Built-in labeled examples used as a smoke test."""

from pydantic import BaseModel, Field

from color_match.matching import ColorMatcher, MatchConfig
from color_match.matching.types import Method

FIXTURE_CASES: list[tuple[str, list[str]]] = [
    ("HeatheredRoyalGray", ["Heather Royal Gray", "Royal Blue", "Heathered Royal Gry"]),
    ("NavyBlazer", ["Navy Blazer", "Navy Blue", "Black"]),
    ("TNFBlack", ["TNF Black", "The North Face Black", "Black"]),
    ("JetBlack", ["Jet Black", "Black", "True Black"]),
    ("TNFDarkGreyHeathe", ["TNFDkGyH", "TNF Black", "Dark Grey"]),
]


class FixtureResult(BaseModel):
    input: str
    options: list[str] = Field(default_factory=list)
    matched: str | None = None
    confidence: int = 0
    method: Method = "none"


def run_fixture_suite(config: MatchConfig | None = None) -> list[FixtureResult]:
    """Run the full matcher over FIXTURE_CASES.

    Cases below the threshold report `matched=None`, not the best label.
    """
    matcher = ColorMatcher(config=config)
    results: list[FixtureResult] = []
    for our_color, their_colors in FIXTURE_CASES:
        result = matcher.match(our_color, their_colors)
        results.append(
            FixtureResult(
                input=our_color,
                options=list(their_colors),
                matched=result.matchedColor,
                confidence=result.confidence,
                method=result.method,
            )
        )
    return results
