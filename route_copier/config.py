"""Configuration constants, locale marker sets, and .env loading.

WHY: The words that bound and classify a directions panel differ per
locale and per transit region (a Tokyo route shows "JPY" fares, a London
route does not). Keeping them as plain data here means a new locale is a
one-line change, never an edit to the reassembly algorithm.

HOW: python-dotenv loads the .env file on import. Defaults are defined
as module-level frozensets. Every set can be overridden by an environment
variable holding a comma-separated list.

RULES:
- Defaults mirror what the Google Maps panel shows in English and Japanese
- Override variables replace a default set entirely (they do not extend it)
- Empty override values fall back to the default
- Marker matching is case-sensitive substring containment
- An unknown selection policy name falls back to "longest" with a warning
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from the project root (where the script is run from)
load_dotenv()

SELECTION_POLICIES = ("longest", "first")


def parse_marker_list(raw: str) -> frozenset[str]:
    """Split a comma-separated override value into a marker set.

    Entries are stripped; empty entries are dropped.
    """
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def _env_markers(name: str, default: frozenset[str]) -> frozenset[str]:
    value = parse_marker_list(os.getenv(name, ""))
    return value or default


def parse_selection_policy(raw: Optional[str]) -> str:
    """Normalize a selection policy name, falling back to "longest".

    Unknown names are logged and replaced so a typo in .env never reaches
    the locator.
    """
    value = (raw or "").strip().lower()
    if not value:
        return SELECTION_POLICIES[0]
    if value not in SELECTION_POLICIES:
        logger.warning(
            "Unknown selection policy %r; expected one of %s. Using %r.",
            raw, ", ".join(SELECTION_POLICIES), SELECTION_POLICIES[0],
        )
        return SELECTION_POLICIES[0]
    return value


# ---------------------------------------------------------------------------
# Region markers
# ---------------------------------------------------------------------------

DEFAULT_START_MARKERS: frozenset[str] = _env_markers(
    "ROUTE_COPIER_START_MARKERS",
    frozenset({"カレンダーに追加", "Add to Calendar", "Calendar"}),
)
"""Section header just above the first step ("add to calendar")."""

DEFAULT_END_MARKERS: frozenset[str] = _env_markers(
    "ROUTE_COPIER_END_MARKERS",
    frozenset({"乗車券などの情報", "Tickets and information"}),
)
"""Section header just below the last step ("tickets and information")."""

# ---------------------------------------------------------------------------
# Line classification words
# ---------------------------------------------------------------------------

DEFAULT_MODE_WORDS: frozenset[str] = _env_markers(
    "ROUTE_COPIER_MODE_WORDS",
    frozenset({"Walk", "Train", "Bus"}),
)

DEFAULT_CURRENCY_MARKERS: frozenset[str] = _env_markers(
    "ROUTE_COPIER_CURRENCY_MARKERS",
    frozenset({"JPY"}),
)

DEFAULT_ARRIVAL_MARKERS: frozenset[str] = _env_markers(
    "ROUTE_COPIER_ARRIVAL_MARKERS",
    frozenset({"Arrive"}),
)

# ---------------------------------------------------------------------------
# Source locator and server defaults
# ---------------------------------------------------------------------------

DEFAULT_SELECTION_POLICY = parse_selection_policy(os.getenv("ROUTE_COPIER_SELECTION_POLICY"))
FETCH_TIMEOUT_S = float(os.getenv("ROUTE_COPIER_FETCH_TIMEOUT", "20"))
SERVER_HOST = os.getenv("ROUTE_COPIER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("ROUTE_COPIER_PORT", "8000"))

# ---------------------------------------------------------------------------
# User-facing outcome messages
# ---------------------------------------------------------------------------

NO_ROUTE_MESSAGE = "No route details extracted."
SOURCE_NOT_FOUND_MESSAGE = (
    "Could not find route details. "
    "Please make sure a route is selected and details are visible."
)
SOURCE_UNREACHABLE_MESSAGE = "Error: Please refresh the Google Maps page and try again."
WRONG_PAGE_MESSAGE = "Please open Google Maps to use this extension."
