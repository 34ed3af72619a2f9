from __future__ import annotations

import json
import re
from pathlib import Path

from typer.testing import CliRunner

from frontpress.cli import app


def _write_post(name: str, title: str, date: str, *, draft: bool = False, body: str = "Body.") -> None:
    path = Path("content/posts") / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"+++\ntitle = '{title}'\ndate = {date}\ndraft = {'true' if draft else 'false'}\n+++\n{body}\n",
        encoding="utf-8",
    )


def test_new_post_scaffolds_toml_front_matter() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["new", "My First Post"])
        assert result.exit_code == 0, result.output

        post_path = Path("content/posts/my-first-post.md")
        content = post_path.read_text(encoding="utf-8")
        assert content.startswith("+++\n")
        assert "title = 'My First Post'" in content
        assert "draft = true" in content
        assert re.search(r"date = \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", content)
        assert "slug normalized" in result.output


def test_new_command_aborts_when_target_exists() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        first = runner.invoke(app, ["new", "duplicate-post"])
        assert first.exit_code == 0, first.output

        second = runner.invoke(app, ["new", "duplicate-post"])
        assert second.exit_code != 0
        assert "Cannot scaffold" in second.output


def test_lint_clean_when_content_is_valid() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("ready.md", "Ready", "2024-01-01T00:00:00Z")

        result = runner.invoke(app, ["lint"])
        assert result.exit_code == 0, result.output
        assert "Lint clean" in result.output


def test_lint_flags_broken_front_matter() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        path = Path("content/posts/broken.md")
        path.parent.mkdir(parents=True)
        path.write_text("+++\ndate = 2024-01-01T00:00:00Z\n+++\nBody\n", encoding="utf-8")

        result = runner.invoke(app, ["lint"])
        assert result.exit_code == 1, result.output
        assert "ERROR" in result.output
        assert re.search(r"MissingRequiredField:\s+Missing\s+required\s+field\s+'title'", result.output)


def test_lint_strict_treats_warnings_as_errors() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("draft.md", "Draft", "2024-01-01T00:00:00Z", draft=True)

        relaxed = runner.invoke(app, ["lint"])
        assert relaxed.exit_code == 0, relaxed.output

        strict = runner.invoke(app, ["lint", "--strict"])
        assert strict.exit_code == 1, strict.output
        assert "WARNING" in strict.output


def test_list_json_orders_publishable_items_newest_first() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("march.md", "March", "2024-03-22T10:10:47+01:00")
        _write_post("old.md", "Old", "2023-01-01T00:00:00Z")
        _write_post("june.md", "June", "2024-06-01T00:00:00Z")
        _write_post("wip.md", "Work In Progress", "2024-07-01T00:00:00Z", draft=True)

        result = runner.invoke(app, ["list", "--json"])
        assert result.exit_code == 0, result.output

        payload = json.loads(result.output)
        assert [entry["title"] for entry in payload] == ["June", "March", "Old"]
        assert payload[1]["date"] == "2024-03-22T10:10:47+01:00"
        assert payload[1]["slug"] == "march"


def test_list_drafts_includes_everything() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("old.md", "Old", "2023-01-01T00:00:00Z")
        _write_post("wip.md", "Draft", "2024-07-01T00:00:00Z", draft=True)

        result = runner.invoke(app, ["list", "--drafts", "--json"])
        assert result.exit_code == 0, result.output
        assert [entry["draft"] for entry in json.loads(result.output)] == [True, False]


def test_list_table_output() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("aliases.md", "Aliases", "2024-03-22T10:10:47+01:00")

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0, result.output
        assert "Aliases" in result.output
        assert "Listed" in result.output


def test_list_halts_on_broken_file_by_default() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_post("ok.md", "Fine", "2024-01-01T00:00:00Z")
        Path("content/posts/zz-broken.md").write_text("no fence\n", encoding="utf-8")

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert "Load failed" in result.output
        assert "MissingFrontMatter" in result.output


def test_list_skips_broken_file_when_configured() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("frontpress.yml").write_text("on_error: skip\n", encoding="utf-8")
        _write_post("ok.md", "Fine", "2024-01-01T00:00:00Z")
        Path("content/posts/zz-broken.md").write_text("no fence\n", encoding="utf-8")

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0, result.output
        assert "Fine" in result.output
        assert "Skipped" in result.output


def test_missing_config_file_is_a_usage_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["lint", "--config", "missing.yml"])
        assert result.exit_code == 2
