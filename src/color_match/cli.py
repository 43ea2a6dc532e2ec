"""Command-line interface for color-match."""

import argparse
import json
import logging
import sys
from dataclasses import replace

from color_match import __version__, match, run_fixture_suite
from color_match.exceptions import ColorMatchError
from color_match.matching import MatchConfig


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="color-match",
        description="Match an internal color label against supplier color names",
    )
    parser.add_argument("our_color", nargs="?", help="Our color label, e.g. TNFDarkGreyHeathe")
    parser.add_argument("their_colors", nargs="*", help="Supplier color names to match against")
    parser.add_argument(
        "--threshold",
        type=int,
        help="Minimum confidence to count as matched (default: COLOR_MATCH_THRESHOLD or 74)",
    )
    parser.add_argument(
        "--word-boundaries",
        action="store_true",
        help="Keep word boundaries for the token-sort fuzzy stage",
    )
    parser.add_argument(
        "--fixtures",
        action="store_true",
        help="Run the built-in fixture suite instead of a single match",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log matching decisions to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"color-match {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = MatchConfig.from_env()
    if args.word_boundaries:
        config = replace(config, word_boundaries=True)

    if args.fixtures:
        results = run_fixture_suite(config)
        if args.json:
            print(json.dumps({"testResults": [item.model_dump() for item in results]}, indent=2))
        else:
            for item in results:
                print(f"  {item.input:<20} -> {item.matched or '-'} ({item.confidence}%, {item.method})")
        return 0

    if not args.our_color or not args.their_colors:
        parser.error("our_color and at least one their_color are required")

    try:
        result = match(args.our_color, args.their_colors, args.threshold, config=config)
    except ColorMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        _print_formatted(args.our_color, result)

    return 0


def _print_formatted(our_color: str, result) -> None:
    """Print result in human-readable format."""
    print()
    print("  color-match")
    print()

    fields = [
        ("Input", our_color),
        ("Matched", result.matchedColor),
        ("Confidence", f"{result.confidence}%"),
        ("Method", result.method),
        ("Review", "yes" if result.needsReview else "no"),
        ("Alternatives", _format_alternatives(result.alternatives)),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


def _format_alternatives(alternatives) -> str | None:
    """Format alternatives as a comma-separated string."""
    if not alternatives:
        return None
    return ", ".join(f"{item.color} ({item.confidence}%)" for item in alternatives)


if __name__ == "__main__":
    sys.exit(main())
