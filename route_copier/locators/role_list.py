"""Locator strategy: the directions list inside the side pane.

WHY: The selected route's step-by-step details render inside the side
pane as a ``div[role="list"]``. The pane also holds other lists (route
alternatives, nearby places), so a list only qualifies if its text
contains a clock time.

HOW: Pick the pane (``#qa-pane``, then ``#pane``, then ``<body>``),
flatten every ``div[role="list"]`` inside it, keep those with a time,
and choose one by the selection policy.

RULES:
- LONGEST (default): most characters of visible text wins; earlier
  list wins a tie
- FIRST: first qualifying list in document order wins
- No qualifying list → None
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from route_copier.locators.base import (
    TIME_PATTERN,
    BaseLocator,
    SelectionPolicy,
    text_to_lines,
    visible_text,
)

logger = logging.getLogger(__name__)

_PANE_SELECTORS = ("#qa-pane", "#pane")


class RoleListLocator(BaseLocator):
    """Finds the time-bearing ``role="list"`` block in the side pane."""

    @property
    def name(self) -> str:
        return "role_list"

    def locate(
        self,
        soup: BeautifulSoup,
        policy: SelectionPolicy = SelectionPolicy.LONGEST,
    ) -> Optional[List[str]]:
        pane = None
        for selector in _PANE_SELECTORS:
            pane = soup.select_one(selector)
            if pane is not None:
                break
        if pane is None:
            pane = soup.body or soup

        best_text: Optional[str] = None
        for candidate in pane.select('div[role="list"]'):
            text = visible_text(candidate)
            if not TIME_PATTERN.search(text):
                continue
            if policy is SelectionPolicy.FIRST:
                best_text = text
                break
            if best_text is None or len(text) > len(best_text):
                best_text = text

        if best_text is None:
            return None

        lines = text_to_lines(best_text)
        logger.debug("role_list matched a list with %d lines", len(lines))
        return lines
