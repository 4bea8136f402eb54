"""Line classification predicates for the step reassembler.

WHY: A directions panel flattens to a mix of anchors (clock times),
annotations (mode icons, fares, arrival status), noise (internal IDs),
and plain content (stations, addresses, line names, durations). The
reassembler only needs to know which bucket a line falls in.

HOW: Each predicate is a pure function of one line plus the relevant
configured set. A line that matches nothing falls through to verbatim
handling in the reassembler.

RULES:
- Timestamp: the WHOLE line is a clock time, optional " AM"/"PM"
- Mode tag: the line EQUALS one of the mode words
- Fare/arrival: the line CONTAINS a currency or arrival marker
- Identifier noise: the line STARTS WITH "ID:"
- Every predicate is total: any str in, a bool out
"""

from __future__ import annotations

import re
from collections.abc import Collection

# One or two digit hour, two digit minute, optional meridiem.
_TIMESTAMP_RE = re.compile(r"^\d{1,2}:\d{2}(?:\s?[AP]M)?$", re.ASCII)

_IDENTIFIER_PREFIX = "ID:"


def is_timestamp(line: str) -> bool:
    """True if the line is exactly a clock time such as "6:40" or "6:40 PM"."""
    return bool(_TIMESTAMP_RE.match(line.strip()))


def is_mode_tag(line: str, mode_words: Collection[str]) -> bool:
    """True if the line is exactly one of the configured transport modes."""
    return line in mode_words


def is_fare_or_arrival(
    line: str,
    currency_markers: Collection[str],
    arrival_markers: Collection[str],
) -> bool:
    """True if the line mentions a fare currency or an arrival status."""
    return any(marker in line for marker in currency_markers) or any(
        marker in line for marker in arrival_markers
    )


def is_identifier_noise(line: str) -> bool:
    return line.startswith(_IDENTIFIER_PREFIX)


def contains_any(line: str, markers: Collection[str]) -> bool:
    """True if any marker is a substring of the line (used for region bounds)."""
    return any(marker in line for marker in markers)
