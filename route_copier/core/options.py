"""Configuration data for trimming and classifying route lines.

WHY: Locale markers and mode words change far more often than the
reassembly algorithm. Passing them as one immutable value keeps every
core function free of hidden globals, so concurrent calls with different
locales cannot interfere.

RULES:
- All fields are frozensets (unordered; matching never depends on order)
- Defaults come from route_copier.config (which honours .env overrides)
- with_overrides() replaces a field only when a non-empty value is given
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Optional

from route_copier.config import (
    DEFAULT_ARRIVAL_MARKERS,
    DEFAULT_CURRENCY_MARKERS,
    DEFAULT_END_MARKERS,
    DEFAULT_MODE_WORDS,
    DEFAULT_START_MARKERS,
)


@dataclass(frozen=True)
class RouteOptions:
    """Marker and classification sets used by one normalize_route() call.

    Attributes:
        start_markers: Substrings of the header line just above the steps.
        end_markers: Substrings of the header line just below the steps.
        mode_words: Exact lines rendered as a transport-mode tag.
        currency_markers: Substrings that flag a fare line.
        arrival_markers: Substrings that flag an arrival status line.
    """

    start_markers: frozenset[str] = field(default=DEFAULT_START_MARKERS)
    end_markers: frozenset[str] = field(default=DEFAULT_END_MARKERS)
    mode_words: frozenset[str] = field(default=DEFAULT_MODE_WORDS)
    currency_markers: frozenset[str] = field(default=DEFAULT_CURRENCY_MARKERS)
    arrival_markers: frozenset[str] = field(default=DEFAULT_ARRIVAL_MARKERS)

    def with_overrides(
        self,
        start_markers: Optional[Iterable[str]] = None,
        end_markers: Optional[Iterable[str]] = None,
        mode_words: Optional[Iterable[str]] = None,
        currency_markers: Optional[Iterable[str]] = None,
        arrival_markers: Optional[Iterable[str]] = None,
    ) -> RouteOptions:
        """Return a copy with each non-empty argument replacing its field."""
        changes = {}
        for name, value in (
            ("start_markers", start_markers),
            ("end_markers", end_markers),
            ("mode_words", mode_words),
            ("currency_markers", currency_markers),
            ("arrival_markers", arrival_markers),
        ):
            if value:
                changes[name] = frozenset(value)
        return replace(self, **changes)
