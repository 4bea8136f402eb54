"""Route Copier: turn a transit directions panel into copy-ready text.

WHY: Map directions panels render a route as dozens of tiny visual rows
(times, station names, mode icons, fares, opaque IDs). Copying that text
by hand produces a ragged, one-word-per-line mess. This package rebuilds
it into one readable line per step, each anchored by its departure time.

HOW: Three-stage pipeline: locate (find the directions region in a page
and flatten it to lines), trim (cut to the region between the calendar
and ticket headers), reassemble (re-segment lines into timestamped
steps). Each stage is independently testable.

RULES:
- The core (trim + reassemble) is pure and never raises
- Page probing lives in pluggable locator strategies, not in the core
- Classification words and markers are configuration, not code
"""

__version__ = "0.1.0"
