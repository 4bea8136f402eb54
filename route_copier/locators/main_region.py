"""Locator strategy: fall back to the page's main region."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup

from route_copier.locators.base import (
    TIME_PATTERN,
    BaseLocator,
    SelectionPolicy,
    text_to_lines,
    visible_text,
)


class MainRegionLocator(BaseLocator):
    """Uses ``[role="main"]`` when it mentions a clock time.

    Only one main region exists per page, so the selection policy has
    nothing to break a tie between and is ignored.
    """

    @property
    def name(self) -> str:
        return "main_region"

    def locate(
        self,
        soup: BeautifulSoup,
        policy: SelectionPolicy = SelectionPolicy.LONGEST,
    ) -> Optional[List[str]]:
        main = soup.select_one('[role="main"]')
        if main is None:
            return None
        text = visible_text(main)
        if not TIME_PATTERN.search(text):
            return None
        return text_to_lines(text)
