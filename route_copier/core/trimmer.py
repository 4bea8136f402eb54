"""Boundary trimming: cut the line sequence down to the steps region.

WHY: The flattened panel text carries page chrome on both sides of the
route: summary rows and share buttons above, fare tables below. The
panel reliably shows an "add to calendar" row just above the first step
and a "tickets and information" header just below the last one.

HOW: Scan forward for the first line containing a start marker and keep
everything after it. Within what remains, scan for the first line
containing an end marker and keep everything before it.

RULES:
- First match wins on each side; scanning follows input order
- The marker lines themselves are excluded
- The end marker is only searched for AFTER the start marker
- A missing marker is normal and simply leaves that side open
- Pure: the input sequence is never mutated
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import List, Optional

from route_copier.core.classify import contains_any


def _find_first(lines: Sequence[str], markers: Collection[str]) -> Optional[int]:
    for index, line in enumerate(lines):
        if contains_any(line, markers):
            return index
    return None


def trim(
    lines: Sequence[str],
    start_markers: Collection[str],
    end_markers: Collection[str],
) -> List[str]:
    """Return the lines strictly between the start and end markers.

    Args:
        lines: Ordered, already-normalized lines.
        start_markers: Substrings identifying the header above the steps.
        end_markers: Substrings identifying the header below the steps.

    Returns:
        A new list holding the trimmed range (the whole input when no
        marker is found).
    """
    start_index = _find_first(lines, start_markers)
    remaining = list(lines[start_index + 1:]) if start_index is not None else list(lines)

    end_index = _find_first(remaining, end_markers)
    if end_index is not None:
        remaining = remaining[:end_index]

    return remaining
