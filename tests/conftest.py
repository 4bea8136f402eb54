"""Shared test fixtures for the route_copier test suite.

WHY: Several test modules need the same directions panel: as flattened
lines for the core and as page markup for the locators and bridge.
Centralizing the sample here keeps every layer tested against one route.

HOW: Pytest fixtures provide the scenario line sequence, its expected
output, and a map page snapshot whose side pane holds a short summary
list and a longer detailed list (both containing times).

RULES:
- SCENARIO_LINES and SCENARIO_OUTPUT are the canonical worked example
- The detailed list flattens to exactly SCENARIO_LINES
- The summary list contains a time but is shorter than the detailed list
"""

from typing import List

import pytest

SCENARIO_LINES: List[str] = [
    "Add to Calendar",
    "6:40",
    "Station A",
    "Walk",
    "6:52",
    "Station B",
    "Train",
    "JPY 210",
    "Tickets and information",
    "extra",
]

SCENARIO_OUTPUT = "6:40 Station A [Walk]\n6:52 Station B [Train] [JPY 210]\n"

SUMMARY_LIST_HTML = """
<div role="list" id="summary">
  <div>6:40 - 7:05</div>
  <div>25 min</div>
</div>
"""

DETAILED_LIST_HTML = """
<div role="list" id="details">
  <div><span>Add to Calendar</span></div>
  <div>6:40</div>
  <div>Station A</div>
  <div>Walk</div>
  <div>6:52</div>
  <div>Station B</div>
  <div>Train</div>
  <div>JPY 210</div>
  <div><h2>Tickets and information</h2></div>
  <div>extra</div>
  <script>var t = "9:99";</script>
</div>
"""

MAPS_PAGE_HTML = """<!DOCTYPE html>
<html>
<head><title>Google Maps</title><style>.x { color: red; }</style></head>
<body>
  <div id="pane">
    <div role="list" id="nearby"><div>Coffee shop</div><div>Bakery</div></div>
    {summary}
    {details}
  </div>
</body>
</html>
""".replace("{summary}", SUMMARY_LIST_HTML).replace("{details}", DETAILED_LIST_HTML)


@pytest.fixture
def scenario_lines():
    """The canonical worked example, marker lines included."""
    return list(SCENARIO_LINES)


@pytest.fixture
def scenario_output():
    return SCENARIO_OUTPUT


@pytest.fixture
def maps_page_html():
    """A map page snapshot whose detailed list flattens to SCENARIO_LINES."""
    return MAPS_PAGE_HTML
