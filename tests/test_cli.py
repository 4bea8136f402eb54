"""Tests for the command-line interface.

WHY: The CLI is how route text gets into shell pipelines. Its contract
is: route text on stdout, status on stderr, and a non-zero exit only
when the source itself could not be found or read.

HOW: main() is called with explicit argv; capsys captures the streams.
Input files are written to tmp_path.
"""

from __future__ import annotations

import io
from unittest.mock import AsyncMock, patch

import pytest

from route_copier.bridge.models import RouteResponse
from route_copier.cli import build_parser, main
from route_copier.config import NO_ROUTE_MESSAGE, SOURCE_NOT_FOUND_MESSAGE


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.input_file == "-"
        assert args.policy == "longest"
        assert args.mode_word is None

    def test_repeatable_markers(self):
        args = build_parser().parse_args(["--mode-word", "Ferry", "--mode-word", "Tram"])
        assert args.mode_word == ["Ferry", "Tram"]

    def test_invalid_policy(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--policy", "shortest"])


class TestTextInput:
    def test_plain_text_file(self, tmp_path, capsys, scenario_lines, scenario_output):
        path = tmp_path / "panel.txt"
        path.write_text("\n".join(scenario_lines), encoding="utf-8")
        main([str(path)])
        captured = capsys.readouterr()
        assert captured.out == scenario_output

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("6:40\nStation A\nBus\n"))
        main(["-"])
        assert capsys.readouterr().out == "6:40 Station A [Bus]\n"

    def test_nothing_extracted_exits_zero(self, tmp_path, capsys):
        path = tmp_path / "noise.txt"
        path.write_text("ID: 1\n", encoding="utf-8")
        main([str(path)])
        assert capsys.readouterr().out == NO_ROUTE_MESSAGE + "\n"

    def test_marker_override(self, tmp_path, capsys):
        path = tmp_path / "panel.txt"
        path.write_text("Intro\nSTART\n6:40\nStation A\n", encoding="utf-8")
        main([str(path), "--start-marker", "START"])
        assert capsys.readouterr().out == "6:40 Station A\n"


class TestHtmlInput:
    def test_html_file(self, tmp_path, capsys, maps_page_html, scenario_output):
        path = tmp_path / "page.html"
        path.write_text(maps_page_html, encoding="utf-8")
        main([str(path)])
        captured = capsys.readouterr()
        assert captured.out == scenario_output
        assert "role_list" in captured.err

    def test_source_not_found_exits_one(self, tmp_path, capsys):
        path = tmp_path / "page.html"
        path.write_text("<html><body><p>Hello</p></body></html>", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(path)])
        assert exc.value.code == 1
        assert SOURCE_NOT_FOUND_MESSAGE in capsys.readouterr().err

    def test_text_flag_skips_locator(self, tmp_path, capsys):
        path = tmp_path / "page.html"
        path.write_text("<div>\n6:40\nStation A\n</div>", encoding="utf-8")
        main([str(path), "--text"])
        assert capsys.readouterr().out == "<div>\n6:40 Station A </div>\n"


class TestOutputAndErrors:
    def test_output_file(self, tmp_path, capsys, scenario_lines, scenario_output):
        src = tmp_path / "panel.txt"
        src.write_text("\n".join(scenario_lines), encoding="utf-8")
        dest = tmp_path / "route.txt"
        main([str(src), "--output", str(dest)])
        assert dest.read_text(encoding="utf-8") == scenario_output
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.html")])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_url_uses_handler(self, capsys):
        with patch(
            "route_copier.cli.handle_route_request",
            new=AsyncMock(return_value=RouteResponse(data="6:40 Station A\n")),
        ) as handler:
            main(["--url", "https://www.google.com/maps/dir/A/B"])
        assert capsys.readouterr().out == "6:40 Station A\n"
        request = handler.await_args.args[0]
        assert request.url == "https://www.google.com/maps/dir/A/B"
