"""Tests for the source locator strategies and registry.

WHY: The locator is the most brittle layer: it depends on page
structure that the map vendor changes without notice. These tests pin
the heuristics that survive: time-bearing role="list" blocks in the side
pane, the longest-wins tie-break, and the role="main" fallback.

HOW: Parse small hand-written snapshots (see conftest.py) and check the
lines and strategy each search returns.
"""

from route_copier.locators import (
    LOCATORS,
    LocatorResult,
    SelectionPolicy,
    find_candidate_region,
    looks_like_html,
    resolve_policy,
)
from route_copier.locators.base import parse_document, text_to_lines, visible_text
from route_copier.locators.main_region import MainRegionLocator
from route_copier.locators.role_list import RoleListLocator


class TestVisibleText:
    def test_block_elements_become_lines(self):
        soup = parse_document("<div><div>6:40</div><div>Station <b>A</b></div></div>")
        assert text_to_lines(visible_text(soup)) == ["6:40", "Station A"]

    def test_invisible_content_skipped(self):
        html = "<div><script>x = '1:00'</script><style>p{}</style><div>Walk</div><!-- 2:00 --></div>"
        assert text_to_lines(visible_text(parse_document(html))) == ["Walk"]

    def test_text_to_lines(self):
        assert text_to_lines(" a \n\n b\n") == ["a", "b"]


class TestRoleListLocator:
    def test_longest_list_wins(self, maps_page_html, scenario_lines):
        lines = RoleListLocator().locate(parse_document(maps_page_html))
        assert lines == scenario_lines

    def test_first_policy(self, maps_page_html):
        lines = RoleListLocator().locate(parse_document(maps_page_html), SelectionPolicy.FIRST)
        assert lines == ["6:40 - 7:05", "25 min"]

    def test_lists_without_times_ignored(self):
        html = '<body><div role="list"><div>Coffee shop</div></div></body>'
        assert RoleListLocator().locate(parse_document(html)) is None

    def test_non_ascii_digit_times_ignored(self):
        html = '<body><div role="list"><div>٦:٤٠</div><div>Station</div></div></body>'
        assert RoleListLocator().locate(parse_document(html)) is None

    def test_qa_pane_preferred(self):
        html = (
            '<body><div id="qa-pane"><div role="list"><div>8:00</div></div></div>'
            '<div id="pane"><div role="list"><div>9:00</div><div>Much longer list</div></div></div></body>'
        )
        assert RoleListLocator().locate(parse_document(html)) == ["8:00"]

    def test_falls_back_to_body(self):
        html = '<body><div role="list"><div>8:00</div><div>Station</div></div></body>'
        assert RoleListLocator().locate(parse_document(html)) == ["8:00", "Station"]


class TestMainRegionLocator:
    def test_main_with_time(self):
        html = '<body><div role="main"><div>6:40</div><div>Station A</div></div></body>'
        assert MainRegionLocator().locate(parse_document(html)) == ["6:40", "Station A"]

    def test_main_without_time(self):
        html = '<body><div role="main"><div>Search results</div></div></body>'
        assert MainRegionLocator().locate(parse_document(html)) is None

    def test_no_main(self):
        assert MainRegionLocator().locate(parse_document("<body></body>")) is None


class TestFindCandidateRegion:
    def test_registry_order(self):
        assert LOCATORS == [RoleListLocator, MainRegionLocator]

    def test_role_list_found(self, maps_page_html, scenario_lines):
        result = find_candidate_region(maps_page_html)
        assert result == LocatorResult(found=True, lines=scenario_lines, strategy="role_list")

    def test_main_region_fallback(self):
        html = '<html><body><div role="main"><div>6:40</div><div>Station A</div></div></body></html>'
        result = find_candidate_region(html)
        assert result.found
        assert result.strategy == "main_region"

    def test_nothing_found(self):
        result = find_candidate_region("<html><body><p>Hello</p></body></html>")
        assert result == LocatorResult(found=False)
        assert result.lines == []

    def test_policy_by_name(self, maps_page_html):
        result = find_candidate_region(maps_page_html, policy="first")
        assert result.lines == ["6:40 - 7:05", "25 min"]

    def test_custom_strategy_list(self, maps_page_html):
        result = find_candidate_region(maps_page_html, strategies=[MainRegionLocator()])
        assert not result.found


class TestHelpers:
    def test_resolve_policy(self):
        assert resolve_policy("LONGEST") is SelectionPolicy.LONGEST
        assert resolve_policy(SelectionPolicy.FIRST) is SelectionPolicy.FIRST
        assert resolve_policy(None) is SelectionPolicy.LONGEST

    def test_looks_like_html(self, maps_page_html):
        assert looks_like_html(maps_page_html)
        assert looks_like_html("<div role='list'></div>")
        assert not looks_like_html("6:40\nStation A")
        assert not looks_like_html("<3 this route")
