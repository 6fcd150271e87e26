"""Tests for the hyperdoc command line."""

import json

import pytest

from hyperdoc.cli.main import create_parser, main


def run(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    captured = capsys.readouterr()
    return exc_info.value.code, captured.out, captured.err


class TestParser:
    """Tests for argument parsing."""

    def test_help_lists_commands(self, capsys):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--help"])

        out = capsys.readouterr().out
        for command in ("resource", "property", "state"):
            assert command in out

    def test_rejects_unknown_value_type(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["property", "doc.json", "name", "--as", "xml"])


class TestCommands:
    """Tests for command execution against a file."""

    def test_resource_first_match(self, team_file, capsys):
        code, out, _ = run(["resource", str(team_file), "lead"], capsys)

        assert code == 0
        assert json.loads(out) == {
            "uri": "https://example.com/employees/123",
            "state_included": True,
            "path": "/lead",
        }

    def test_resource_all_matches(self, team_file, capsys):
        code, out, _ = run(["resource", str(team_file), "member", "--all"], capsys)

        assert code == 0
        assert [item["uri"] for item in json.loads(out)] == [
            "https://example.com/employees/5",
            "https://example.com/employees/6",
        ]

    def test_resource_omitted_state(self, team_file, capsys):
        code, out, _ = run(["resource", str(team_file), "parent"], capsys)

        assert code == 0
        assert json.loads(out) == {
            "uri": "https://example.com/departments/2",
            "state_included": False,
        }

    def test_missing_relation_exits_with_error(self, team_file, capsys):
        code, out, err = run(["resource", str(team_file), "sibling"], capsys)

        assert code == 1
        assert out == ""
        assert "sibling" in err

    def test_blank_relation_exits_with_error(self, team_file, capsys):
        code, _, err = run(["resource", str(team_file), " lead"], capsys)

        assert code == 1
        assert "whitespace" in err

    def test_property_as_json(self, team_file, capsys):
        code, out, _ = run(["property", str(team_file), "name"], capsys)

        assert code == 0
        assert json.loads(out) == "Platform"

    def test_property_type_mismatch(self, team_file, capsys):
        code, _, err = run(["property", str(team_file), "lead", "--as", "string"], capsys)

        assert code == 1
        assert "must be a string" in err

    def test_state_links(self, tmp_path, capsys):
        path = tmp_path / "list.json"
        path.write_text(
            json.dumps({"@state": [{"@link": "https://x/1"}, "https://x/2"]}),
            encoding="utf-8",
        )

        code, out, _ = run(["state", str(path), "--links"], capsys)

        assert code == 0
        assert [item["uri"] for item in json.loads(out)] == ["https://x/1", "https://x/2"]

    def test_state_container(self, tmp_path, capsys):
        path = tmp_path / "strings.json"
        path.write_text(json.dumps({"@state": ["a", "b"]}), encoding="utf-8")

        code, out, _ = run(["state", str(path)], capsys)

        assert code == 0
        assert json.loads(out) == ["a", "b"]

    def test_unreadable_file(self, tmp_path, capsys):
        code, _, err = run(["state", str(tmp_path / "missing.json")], capsys)

        assert code == 1
        assert err.startswith("Error:")

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "\xff"}')

        code, _, err = run(["property", str(path), "name"], capsys)

        assert code == 1
        assert err.startswith("Error:")

    def test_no_command_prints_help(self, capsys):
        code, out, _ = run([], capsys)

        assert code == 0
        assert "usage" in out
