"""Abstract base locator, locator result, and visible-text flattening.

WHY: Finding the directions region in a live map page is heuristic and
brittle: the page's class names are obfuscated and change often. Each
heuristic is therefore a separate, swappable strategy behind one small
interface, so a broken probe can be replaced without touching the core.

HOW: BaseLocator is an ABC with a ``name`` property and a ``locate()``
method that receives a parsed BeautifulSoup document and returns the
lines of the region it found (or None). LocatorResult bundles the
outcome of a full strategy search.

RULES:
- Subclasses MUST implement ``name`` and ``locate()``
- ``locate()`` returns None when it finds nothing: never raises for a
  document that merely lacks the expected structure
- Returned lines are stripped and non-empty, in document order
- Flattening skips script/style/noscript/svg/template content
"""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

# A clock time anywhere in a block of text (region detection only).
TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}", re.ASCII)

INVISIBLE_TAGS = ("script", "style", "noscript", "svg", "template")

# Tags that start a new visual row when rendered.
_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "section", "table",
    "td", "th", "tr", "ul",
})


class SelectionPolicy(str, enum.Enum):
    """Tie-break used when several candidate regions contain a time."""

    LONGEST = "longest"
    FIRST = "first"


@dataclass
class LocatorResult:
    """Outcome of searching a document for the directions region.

    Attributes:
        found: True if some strategy produced lines.
        lines: The flattened region lines (empty when not found).
        strategy: Name of the strategy that matched, or None.
    """

    found: bool
    lines: List[str] = field(default_factory=list)
    strategy: Optional[str] = None


def text_to_lines(raw: str) -> List[str]:
    """Split raw text into stripped, non-empty lines."""
    return [line.strip() for line in raw.split("\n") if line.strip()]


def visible_text(element: Tag) -> str:
    """Approximate a browser's rendered text for an element.

    Block-level elements are separated by newlines; inline text is kept
    on the same row.
    """
    pieces: List[str] = []

    def _walk(node: Tag) -> None:
        for child in node.children:
            if isinstance(child, Tag):
                if child.name in INVISIBLE_TAGS:
                    continue
                is_block = child.name in _BLOCK_TAGS
                if is_block:
                    pieces.append("\n")
                _walk(child)
                if is_block:
                    pieces.append("\n")
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                pieces.append(re.sub(r"\s+", " ", str(child)))

    _walk(element)
    return "".join(pieces)


def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML snapshot with the lxml parser."""
    return BeautifulSoup(html, "lxml")


class BaseLocator(ABC):
    """Abstract base for all region-finding strategies.

    To add a new strategy:
    1. Create a new file in locators/
    2. Subclass BaseLocator
    3. Implement name and locate()
    4. Register it in LOCATORS in locators/__init__.py (order = priority)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier, e.g. 'role_list'."""

    @abstractmethod
    def locate(
        self,
        soup: BeautifulSoup,
        policy: SelectionPolicy = SelectionPolicy.LONGEST,
    ) -> Optional[List[str]]:
        """Find the directions region and return its visible lines.

        Args:
            soup: The parsed page document.
            policy: Tie-break when more than one candidate qualifies.

        Returns:
            The region's lines, or None if this strategy found nothing.
        """
