"""Unit tests for utility functions (scaffoldkit.utils).

Tests cover:
- load_json / dump_json (use tmp_path)
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from scaffoldkit.utils import (
    dump_json,
    load_json,
    print_error,
    print_success,
    print_summary_table,
)


class TestJson:
    @pytest.mark.unit
    def test_load_missing_returns_default(self, tmp_path: Path):
        assert load_json(tmp_path / "nope.json") is None
        assert load_json(tmp_path / "nope.json", {}) == {}

    @pytest.mark.unit
    def test_load_any_document(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == [1, 2]

    @pytest.mark.unit
    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)

    @pytest.mark.unit
    def test_dump_uses_tabs_and_trailing_newline(self):
        assert dump_json({"a": 1}) == '{\n\t"a": 1\n}\n'

    @pytest.mark.unit
    def test_dump_keeps_unicode_and_order(self):
        assert dump_json({"z": "é", "a": 1}, indent=2) == '{\n  "z": "é",\n  "a": 1\n}\n'


class TestRichHelpers:
    @pytest.mark.unit
    def test_messages_are_escaped(self):
        with patch("scaffoldkit.utils.console") as console:
            print_error("Invalid tags option '[a]'")
        console.print.assert_called_once_with("[bold red]Invalid tags option '\\[a]'[/bold red]")

    @pytest.mark.unit
    def test_print_helpers_do_not_raise(self, capsys):
        print_success("done")
        print_error("failed")
        print_summary_table({"README.md": "written"}, title="Files")
        out = capsys.readouterr().out
        assert "done" in out
        assert "failed" in out
        assert "README.md" in out

    @pytest.mark.unit
    def test_print_error_on_given_console(self):
        target = Console(record=True, width=80)
        with patch("scaffoldkit.utils.console") as shared:
            print_error("failed here", target=target)
        shared.print.assert_not_called()
        assert "failed here" in target.export_text()
