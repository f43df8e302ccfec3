"""Tests for parse_tree orchestration and the CLI."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from syntree.cli import main
from syntree.exceptions import LoadError, ParseError
from syntree.generator import TreeOptions, children_of, parse_tree


class TestParseTree:
    """Tests for parse_tree function."""

    def test_parses_inline_data(self, simple_sentence: str) -> None:
        """Inline text is parsed directly."""
        elements = parse_tree(data=simple_sentence)

        assert [e.content for e in elements] == ["S", "NP", "the", "dog", "VP", "barks"]

    def test_parses_file(self, tmp_path: Path, simple_sentence: str) -> None:
        """A path is loaded before parsing."""
        path = tmp_path / "tree.txt"
        path.write_text(simple_sentence, encoding="utf-8")

        assert len(parse_tree(data_path=path)) == 6

    def test_options_control_subscripts(self) -> None:
        """Subscripting follows TreeOptions."""
        text = "[NP the dog][NP a cat]"

        on = parse_tree(data=text, options=TreeOptions(auto_subscript=True))
        off = parse_tree(data=text, options=TreeOptions(auto_subscript=False))

        assert on[3].content == "NP_1"
        assert off[3].content == "NP"

    @pytest.mark.parametrize(
        "kwargs",
        [{}, {"data": "[S a]", "data_path": "tree.txt"}],
    )
    def test_requires_exactly_one_source(self, kwargs: dict) -> None:
        """Neither or both sources is a usage error."""
        with pytest.raises(ValueError, match="exactly one"):
            parse_tree(**kwargs)

    def test_invalid_data_raises_parse_error(self) -> None:
        """Validation failures reach the caller."""
        with pytest.raises(ParseError):
            parse_tree(data="[ ]")

    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        """Load failures reach the caller."""
        with pytest.raises(LoadError):
            parse_tree(data_path=tmp_path / "missing.txt")


class TestChildrenOf:
    """Tests for children_of function."""

    def test_rebuilds_child_lists(self, simple_sentence: str) -> None:
        """Children are found by scanning parent ids."""
        elements = parse_tree(data=simple_sentence)

        assert [e.content for e in children_of(elements, 0)] == ["S"]
        assert [e.content for e in children_of(elements, 1)] == ["NP", "VP"]
        assert [e.content for e in children_of(elements, 2)] == ["the", "dog"]
        assert children_of(elements, 6) == []


class TestCli:
    """Tests for the syntree command."""

    def test_prints_json_for_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--data is parsed and printed as a JSON array."""
        exit_code = main(["--data", "[NP the dog][NP a cat]"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert [item["content"] for item in payload] == ["NP", "the", "dog", "NP_1", "a", "cat"]
        assert payload[0]["element_type"] == "branch"

    def test_no_auto_subscript_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The flag keeps repeated labels as written."""
        main(["--no-auto-subscript", "--data", "[NP a][NP b]"])

        payload = json.loads(capsys.readouterr().out)
        assert [item["content"] for item in payload] == ["NP", "a", "NP", "b"]

    def test_reads_source_file(
        self, tmp_path: Path, simple_sentence: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A positional source is loaded from disk."""
        path = tmp_path / "tree.txt"
        path.write_text(simple_sentence, encoding="utf-8")

        assert main([str(path)]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 6

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without a source the annotation comes from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("[S a]"))

        assert main([]) == 0
        assert [item["content"] for item in json.loads(capsys.readouterr().out)] == ["S", "a"]

    def test_invalid_input_exits_with_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Parse errors go to stderr with exit status 1."""
        exit_code = main(["--data", "[ ]"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "invalid data provided to parser" in captured.err
        assert captured.out == ""
