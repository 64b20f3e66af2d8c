"""Tests for the flowlint CLI commands."""

import json

from click.testing import CliRunner

from flowlint import __version__
from flowlint.cli.main import cli


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write(tmp_path, name: str, data) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def _foo_snapshot(tmp_path) -> str:
    return _write(tmp_path, "page.json", {"elements": [{"id": "e1", "classes": ["foo"]}]})


def _client_first_snapshot(tmp_path) -> str:
    return _write(
        tmp_path,
        "cf.json",
        {
            "elements": [
                {"id": "m", "classes": ["main-wrapper"]},
                {"id": "s", "parent": "m", "classes": ["section_hero"]},
            ]
        },
    )


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------

class TestGroup:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        for command in ["lint", "presets", "rules", "export-config"]:
            assert command in result.output


# ---------------------------------------------------------------------------
# lint
# ---------------------------------------------------------------------------

class TestLint:
    def test_errors_exit_one(self, tmp_path):
        result = CliRunner().invoke(cli, ["lint", _foo_snapshot(tmp_path)])
        assert result.exit_code == 1
        assert "lumos:naming:class-format" in result.output
        assert "Summary (lumos): 2 error(s), 0 warning(s), 0 suggestion(s)" in result.output

    def test_clean_page_exits_zero(self, tmp_path):
        result = CliRunner().invoke(
            cli, ["lint", _client_first_snapshot(tmp_path), "--preset", "client-first"]
        )
        assert result.exit_code == 0, result.output
        assert "Summary (client-first): 0 error(s)" in result.output

    def test_json_format(self, tmp_path):
        result = CliRunner().invoke(cli, ["lint", _foo_snapshot(tmp_path), "--format", "json"])
        data = json.loads(result.output)
        assert data["presetId"] == "lumos"
        assert [v["ruleId"] for v in data["violations"]] == [
            "lumos:naming:class-format",
            "canonical:main-singleton",
        ]

    def test_single_element(self, tmp_path):
        result = CliRunner().invoke(
            cli, ["lint", _foo_snapshot(tmp_path), "--element", "e1", "--format", "json"]
        )
        data = json.loads(result.output)
        assert data["elementId"] == "e1"
        assert [v["ruleId"] for v in data["violations"]] == ["lumos:naming:class-format"]

    def test_unknown_element(self, tmp_path):
        result = CliRunner().invoke(cli, ["lint", _foo_snapshot(tmp_path), "--element", "x"])
        assert result.exit_code == 2

    def test_config_file(self, tmp_path):
        config = _write(
            tmp_path,
            "rules.json",
            {
                "version": 1,
                "rules": [
                    {"ruleId": "lumos:naming:class-format", "enabled": False},
                    {"ruleId": "canonical:main-singleton", "enabled": False},
                ],
            },
        )
        result = CliRunner().invoke(
            cli, ["lint", _foo_snapshot(tmp_path), "--config", config]
        )
        assert result.exit_code == 0, result.output

    def test_invalid_config_file(self, tmp_path):
        config = _write(tmp_path, "rules.json", {"version": 7, "rules": []})
        result = CliRunner().invoke(
            cli, ["lint", _foo_snapshot(tmp_path), "--config", config]
        )
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_malformed_snapshot(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{nope", encoding="utf-8")
        result = CliRunner().invoke(cli, ["lint", str(path)])
        assert result.exit_code == 2

    def test_mode_choice_validated(self, tmp_path):
        result = CliRunner().invoke(cli, ["lint", _foo_snapshot(tmp_path), "--mode", "wild"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# presets / rules / export-config
# ---------------------------------------------------------------------------

class TestInfoCommands:
    def test_presets_marks_default(self):
        result = CliRunner().invoke(cli, ["presets"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("* lumos")
        assert lines[1].startswith("  client-first")

    def test_rules_reflect_mode(self):
        result = CliRunner().invoke(cli, ["rules", "--mode", "strict"])
        assert result.exit_code == 0
        line = next(l for l in result.output.splitlines() if "canonical:main-children" in l)
        assert "error" in line
        disabled = next(
            l for l in result.output.splitlines()
            if "lumos:property:utility-duplicate-properties" in l
        )
        assert "[off]" in disabled

    def test_export_config(self):
        result = CliRunner().invoke(cli, ["export-config", "--preset", "client-first"])
        assert result.exit_code == 0
        document = json.loads(result.output)
        assert any(r["ruleId"] == "cf:naming:class-format" for r in document["rules"])


# ---------------------------------------------------------------------------
# lint with style properties
# ---------------------------------------------------------------------------

class TestLintWithStyles:
    def test_exact_duplicate(self, tmp_path):
        snapshot = _write(
            tmp_path,
            "styled.json",
            {
                "elements": [
                    {"id": "main", "tag": "main", "classes": ["page_main"]},
                    {"id": "e1", "parent": "main", "classes": ["hero_wrap", "u-mt"]},
                    {"id": "e2", "parent": "main", "classes": ["card_wrap", "u-margin-top"]},
                ],
                "styles": [
                    {"id": "s1", "name": "u-mt", "properties": {"margin-top": "1rem"}},
                    {"id": "s2", "name": "u-margin-top", "properties": {"margin-top": "1rem"}},
                ],
            },
        )
        result = CliRunner().invoke(cli, ["lint", snapshot, "--format", "json"])
        assert result.exit_code == 1, result.output
        data = json.loads(result.output)
        duplicates = [
            v["className"]
            for v in data["violations"]
            if v["ruleId"] == "lumos:property:exact-duplicate"
        ]
        assert duplicates == ["u-mt", "u-margin-top"]

    def test_prefer_rem(self, tmp_path):
        snapshot = _write(
            tmp_path,
            "cf-styled.json",
            {
                "elements": [
                    {"id": "m", "classes": ["main-wrapper"]},
                    {"id": "s", "parent": "m", "classes": ["section_hero"]},
                    {"id": "t", "parent": "s", "classes": ["hero_title"]},
                ],
                "styles": [
                    {"id": "s1", "name": "hero_title", "properties": {"font-size": "24px"}},
                ],
            },
        )
        result = CliRunner().invoke(cli, ["lint", snapshot, "--preset", "client-first"])
        assert result.exit_code == 0, result.output
        assert "cf:property:prefer-rem" in result.output
        assert "1.5rem" in result.output
