"""Command-line interface for Route Copier.

WHY: Users need a quick way to turn a saved map page (or pasted panel
text) into copy-ready directions from the terminal, and scripts need the
same thing in a pipe.

HOW: Uses argparse to accept an input path (or stdin), an optional page
URL, marker overrides, and a selection policy. HTML input goes through
the source locator; plain text goes straight to the core. URL input goes
through the same handler the HTTP bridge uses. Status messages go to
stderr; the route text goes to stdout (or --output).

RULES:
- Positional argument: input file path, "-" or omitted for stdin
- --url fetches the page instead of reading input
- HTML is auto-detected; --text forces plain-text lines
- Repeatable marker flags replace the matching default set
- Exit codes: 0 = route text or NO_ROUTE_MESSAGE printed,
  1 = source not found / unreachable / unreadable input
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from route_copier.bridge.handler import build_options, handle_route_request
from route_copier.bridge.models import RouteOptionsPayload, RouteRequest
from route_copier.config import (
    DEFAULT_SELECTION_POLICY,
    SOURCE_NOT_FOUND_MESSAGE,
    SOURCE_UNREACHABLE_MESSAGE,
    WRONG_PAGE_MESSAGE,
)
from route_copier.core.pipeline import normalize_route
from route_copier.locators import (
    SelectionPolicy,
    find_candidate_region,
    looks_like_html,
    text_to_lines,
)

_FAILURE_MESSAGES = frozenset({
    SOURCE_NOT_FOUND_MESSAGE,
    SOURCE_UNREACHABLE_MESSAGE,
    WRONG_PAGE_MESSAGE,
})


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _options_payload(args: argparse.Namespace) -> RouteOptionsPayload:
    return RouteOptionsPayload(
        start_markers=args.start_marker,
        end_markers=args.end_marker,
        mode_words=args.mode_word,
        currency_markers=args.currency,
        arrival_markers=args.arrival,
    )


def extract(args: argparse.Namespace) -> str:
    """Run the extraction described by parsed arguments.

    Returns:
        The route text or one of the outcome messages.
    """
    payload = _options_payload(args)
    policy = SelectionPolicy(args.policy)

    if args.url:
        _status("Fetching {}...".format(args.url))
        request = RouteRequest(url=args.url, policy=policy, options=payload)
        response = asyncio.run(handle_route_request(request))
        return response.data

    raw = _read_input(args.input_file)
    options = build_options(payload)

    if args.text or not looks_like_html(raw):
        _status("Reading plain-text lines...")
        return normalize_route(text_to_lines(raw), options)

    _status("Searching page for route details...")
    region = find_candidate_region(raw, policy=policy)
    if not region.found:
        return SOURCE_NOT_FOUND_MESSAGE
    _status("  Found {} lines via {}".format(len(region.lines), region.strategy))
    return normalize_route(region.lines, options)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect it without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="route_copier",
        description="Extract copy-ready transit directions (one line per step) "
                    "from a saved map page or pasted directions text.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="HTML page or text file to read; '-' or omitted reads stdin.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Fetch this Google Maps page instead of reading input.",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Treat input as plain text lines even if it looks like HTML.",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in SelectionPolicy],
        default=DEFAULT_SELECTION_POLICY,
        help="Which candidate list wins when several contain a time "
             "(default: %(default)s).",
    )
    parser.add_argument(
        "--start-marker",
        action="append",
        default=None,
        help="Start-of-region marker substring. Repeatable; replaces defaults.",
    )
    parser.add_argument(
        "--end-marker",
        action="append",
        default=None,
        help="End-of-region marker substring. Repeatable; replaces defaults.",
    )
    parser.add_argument(
        "--mode-word",
        action="append",
        default=None,
        help="Transport mode shown as a [tag]. Repeatable; replaces defaults.",
    )
    parser.add_argument(
        "--currency",
        action="append",
        default=None,
        help="Fare currency marker. Repeatable; replaces defaults.",
    )
    parser.add_argument(
        "--arrival",
        action="append",
        default=None,
        help="Arrival status marker. Repeatable; replaces defaults.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the route text to this file instead of stdout.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log locator and fetch details to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        result = extract(args)
    except (OSError, UnicodeDecodeError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if result in _FAILURE_MESSAGES:
        print(result, file=sys.stderr)
        sys.exit(1)

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        _status("Wrote route to {}".format(args.output))
    else:
        sys.stdout.write(result if result.endswith("\n") else result + "\n")


if __name__ == "__main__":
    main()
