"""Core match function."""

from collections.abc import Sequence

from color_match.exceptions import InvalidRequestError
from color_match.matching import ColorMatcher, MatchConfig, MatchResult


def _validate(our_color: object, their_colors: object, threshold: object) -> None:
    if our_color is None:
        raise InvalidRequestError("Missing required field: ourColor (string)")
    if not isinstance(our_color, str):
        raise InvalidRequestError("ourColor must be a string")
    if their_colors is None:
        raise InvalidRequestError("Missing required field: theirColors (array)")
    if isinstance(their_colors, (str, bytes)) or not isinstance(their_colors, Sequence):
        raise InvalidRequestError("theirColors must be an array of strings")
    for index, color in enumerate(their_colors):
        if color is not None and not isinstance(color, str):
            raise InvalidRequestError(f"theirColors[{index}] must be a string")
    if threshold is not None:
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise InvalidRequestError("threshold must be an integer")
        if not 0 <= threshold <= 100:
            raise InvalidRequestError("threshold must be between 0 and 100")


def match(
    our_color: str,
    their_colors: Sequence[str | None],
    threshold: int | None = None,
    *,
    config: MatchConfig | None = None,
) -> MatchResult:
    """Resolve one of our color labels to the closest supplier label.

    Args:
        our_color: Internal color label, e.g. "TNFDarkGreyHeathe".
        their_colors: Supplier labels in catalog order. Earlier entries win ties.
        threshold: Minimum confidence for `matched`. Defaults to the config
            threshold, which reads `COLOR_MATCH_THRESHOLD` and then falls back to 74.
        config: Policy overrides. Defaults to `MatchConfig.from_env()`.

    Returns:
        MatchResult with confidence, method, review flag and alternatives.

    Raises:
        InvalidRequestError: If a required input is missing or malformed.
        ScoringError: If the similarity scorer fails.
    """
    _validate(our_color, their_colors, threshold)
    matcher = ColorMatcher(config=config or MatchConfig.from_env())
    return matcher.match(our_color, list(their_colors), threshold)
