"""Tests for the ernctl subcommands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ernkit.cli import cli
from ernkit.domain.ern import Ern

SAMPLE = "ern:custom:service:account123:root/resource/subresource"


def _json(runner: CliRunner, *args: str) -> dict:
    result = runner.invoke(cli, ["--json", *args])
    return {"exit_code": result.exit_code, **json.loads(result.stdout)}


class TestNewCommand:
    def test_defaults(self, cli_runner: CliRunner) -> None:
        payload = _json(cli_runner, "new")
        assert payload["exit_code"] == 0
        assert payload["data"]["ern"].startswith("ern:acton:reactive:acton-internal:root_")

    def test_components(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "new", "-d", "billing", "-c", "inv", "-a", "acme", "-r", "x", "-p", "a", "-p", "b"]
        )
        assert result.exit_code == 0
        ern = Ern.parse(result.stdout.strip())
        assert ern.domain.as_str() == "billing"
        assert ern.root.base == "x"
        assert ern.parts.as_strings() == ["a", "b"]

    def test_config_defaults(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "ernkit.toml").write_text('[defaults]\ndomain = "tenant"\nroot = "job"\n')
        result = cli_runner.invoke(cli, ["-q", "new"])
        assert result.exit_code == 0
        assert result.stdout.startswith("ern:tenant:reactive:acton-internal:job_")

    def test_invalid_part_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "-p", "bad/part"])
        assert result.exit_code == 1
        assert "INVALID_FORMAT" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "--examples"])
        assert result.exit_code == 0
        assert "  $ ernctl new --root invoice" in result.output
        assert result.output.startswith("Examples for")


class TestParseCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", SAMPLE])
        assert result.exit_code == 0
        assert SAMPLE in result.output
        assert "account: account123" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        payload = _json(cli_runner, "parse", SAMPLE)
        assert payload["ok"] is True
        assert payload["data"]["parts"] == ["resource", "subresource"]

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "invalid:ern:format"])
        assert result.exit_code == 1
        assert "ERROR" in result.output


class TestPathCommands:
    def test_child(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "child", "ern:d:c:a:r", "team", "member"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "ern:d:c:a:r/team/member"

    def test_parent(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parent", SAMPLE])
        assert result.exit_code == 0
        assert result.stdout.strip() == "ern:custom:service:account123:root/resource"

    def test_parent_of_root_level_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parent", "ern:d:c:a:r"])
        assert result.exit_code == 1
        assert "NO_PARENT" in result.output

    def test_join(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "join", "ern:d:c:a:p/a", "ern:x:y:z:c/x"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "ern:d:c:a:p/a/x"

    def test_check_child(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check-child", "ern:d:c:a:r/a/b", "ern:d:c:a:r/a"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "true"


class TestSortCommand:
    def test_sort(self, cli_runner: CliRunner) -> None:
        erns = [str(Ern.with_root(base)) for base in ("zeta", "alpha")]
        result = cli_runner.invoke(cli, ["-q", "sort", erns[1], erns[0]])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == erns

    def test_human_table_prints_erns_verbatim(self, cli_runner: CliRunner) -> None:
        erns = ["ern:d:c:a:r1", "ern:d:c:acct:r2/[bold]x"]
        result = cli_runner.invoke(cli, ["sort", *erns])
        assert result.exit_code == 0
        for text in erns:
            assert text in result.output
