"""Source locator registry: ordered region-finding strategies.

WHY: The CLI, GUI, and HTTP bridge all need the same "find the directions
in this page" step. A single ordered list of strategies makes it trivial
to add or reprioritize a probe when the page layout changes.

HOW: LOCATORS lists strategy *classes* in priority order.
find_candidate_region() parses the document once, instantiates each
strategy, and returns the first non-empty result.

RULES:
- Order of LOCATORS is the order strategies are tried
- The first strategy returning at least one line wins
- Nothing found → LocatorResult(found=False); callers show
  SOURCE_NOT_FOUND_MESSAGE instead of running the core
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional, Union

from route_copier.config import DEFAULT_SELECTION_POLICY
from route_copier.locators.base import (
    BaseLocator,
    LocatorResult,
    SelectionPolicy,
    parse_document,
    text_to_lines,
)
from route_copier.locators.main_region import MainRegionLocator
from route_copier.locators.role_list import RoleListLocator

logger = logging.getLogger(__name__)

_HTML_HINTS = ("<!doctype", "<html", "<body", "<div")

LOCATORS: list[type[BaseLocator]] = [
    RoleListLocator,
    MainRegionLocator,
]

__all__ = [
    "LOCATORS",
    "BaseLocator",
    "LocatorResult",
    "SelectionPolicy",
    "find_candidate_region",
    "looks_like_html",
    "resolve_policy",
    "text_to_lines",
]


def resolve_policy(value: Union[str, SelectionPolicy, None]) -> SelectionPolicy:
    """Turn a policy name (or None for the configured default) into an enum.

    Raises:
        ValueError: If the name is not a known policy.
    """
    if isinstance(value, SelectionPolicy):
        return value
    return SelectionPolicy((value or DEFAULT_SELECTION_POLICY).lower())


def looks_like_html(raw: str) -> bool:
    """True if the text appears to be an HTML document or fragment."""
    head = raw.lstrip()[:512].lower()
    return head.startswith("<") and any(tag in head for tag in _HTML_HINTS)


def find_candidate_region(
    html: str,
    strategies: Optional[Sequence[BaseLocator]] = None,
    policy: Union[str, SelectionPolicy, None] = None,
) -> LocatorResult:
    """Search an HTML snapshot for the directions region.

    Args:
        html: The page (or fragment) markup.
        strategies: Strategy instances to try; defaults to LOCATORS.
        policy: Tie-break policy passed to each strategy.

    Returns:
        LocatorResult with the winning strategy's lines, or found=False.
    """
    resolved = resolve_policy(policy)
    if strategies is None:
        strategies = [cls() for cls in LOCATORS]

    soup = parse_document(html)
    for strategy in strategies:
        lines = strategy.locate(soup, resolved)
        if lines:
            logger.info("Route region found by %s (%d lines)", strategy.name, len(lines))
            return LocatorResult(found=True, lines=lines, strategy=strategy.name)

    logger.info("No route region found (%d strategies tried)", len(strategies))
    return LocatorResult(found=False)
