"""Tests for the GUI's extraction helper.

WHY: The window itself needs a display, but the text it shows comes from
extract_text(), which must route markup through the locator and pasted
panel text straight to the core. The Copy action is checked against a
mocked Tk root, so no display is needed either.
"""

from unittest.mock import MagicMock

import pytest

pytest.importorskip("tkinter")

from route_copier.config import SOURCE_NOT_FOUND_MESSAGE  # noqa: E402
from route_copier.gui import _STATUS_CLEAR_MS, RouteCopierApp, extract_text  # noqa: E402


class TestExtractText:
    def test_pasted_text(self, scenario_lines, scenario_output):
        assert extract_text("\n".join(scenario_lines) + "\n") == scenario_output

    def test_page_markup(self, maps_page_html, scenario_output):
        assert extract_text(maps_page_html) == scenario_output

    def test_markup_without_route(self):
        assert extract_text("<html><body><p>Hi</p></body></html>") == SOURCE_NOT_FOUND_MESSAGE


def _headless_app(output_text: str) -> RouteCopierApp:
    """A RouteCopierApp whose Tk root and widgets are mocks."""
    app = RouteCopierApp.__new__(RouteCopierApp)
    app._root = MagicMock()
    app._root.after.side_effect = ["after#1", "after#2"]
    app._output = MagicMock()
    app._output.get.return_value = output_text
    app._status = MagicMock()
    app._clear_job = None
    return app


class TestCopy:
    def test_copies_output_and_flashes_status(self, scenario_output):
        app = _headless_app(scenario_output)
        app._copy()
        app._root.clipboard_clear.assert_called_once_with()
        app._root.clipboard_append.assert_called_once_with(scenario_output)
        app._status.configure.assert_called_once_with(text="Copied!")
        app._root.after.assert_called_once_with(_STATUS_CLEAR_MS, app._clear_status)
        assert _STATUS_CLEAR_MS == 2000

    def test_second_copy_restarts_timer(self):
        app = _headless_app("6:40 Station A\n")
        app._copy()
        app._copy()
        app._root.after_cancel.assert_called_once_with("after#1")
        assert app._clear_job == "after#2"

    def test_status_clears(self):
        app = _headless_app("6:40 Station A\n")
        app._copy()
        app._clear_status()
        app._status.configure.assert_called_with(text="")
        assert app._clear_job is None
