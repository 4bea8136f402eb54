"""Top-level entry point: raw lines in, copy-ready route text out.

WHY: Every surface (CLI, HTTP bridge, desktop GUI) needs the same
trim → reassemble → join sequence and the same empty-result sentinel.
Centralizing it here keeps those surfaces thin.

HOW: normalize_route() drops blank lines, trims to the marker region,
reassembles steps, and joins them. format_steps() does the join so the
GUI can reuse it on already-reassembled steps.

RULES:
- Each step is followed by "\\n" (including the last one)
- Zero steps → the literal NO_ROUTE_MESSAGE, never an empty string
- Never raises for any sequence of strings
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from route_copier.config import NO_ROUTE_MESSAGE
from route_copier.core.options import RouteOptions
from route_copier.core.reassembler import reassemble
from route_copier.core.trimmer import trim

__all__ = ["NO_ROUTE_MESSAGE", "format_steps", "normalize_lines", "normalize_route"]


def normalize_lines(raw_lines: Iterable[str]) -> list[str]:
    """Collapse internal whitespace runs and drop empty lines."""
    result = []
    for raw in raw_lines:
        line = " ".join(raw.split())
        if line:
            result.append(line)
    return result


def format_steps(steps: Sequence[str]) -> str:
    """Join formatted steps into the final output string."""
    if not steps:
        return NO_ROUTE_MESSAGE
    return "".join(step + "\n" for step in steps)


def normalize_route(
    raw_lines: Iterable[str],
    options: Optional[RouteOptions] = None,
) -> str:
    """Extract copy-ready directions from an ordered sequence of lines.

    Args:
        raw_lines: Lines of visible text from the directions region.
        options: Marker and classification sets; defaults to RouteOptions().

    Returns:
        One line per step, each terminated by a newline, or
        NO_ROUTE_MESSAGE when no step could be built.
    """
    if options is None:
        options = RouteOptions()

    lines = normalize_lines(raw_lines)
    trimmed = trim(lines, options.start_markers, options.end_markers)
    steps = reassemble(trimmed, options)
    return format_steps(steps)
