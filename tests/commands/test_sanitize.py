"""Tests for the sanitize CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pdvkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestSanitizeCommand:
    def test_trims(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sanitize", "  sem cebola  "])
        assert result.exit_code == 0
        assert result.stdout == "sem cebola\n"

    def test_plain_keeps_markup(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "sanitize", " <b>X</b> "])
        data = json.loads(result.stdout)
        assert data["data"]["sanitized"] == "<b>X</b>"
        assert data["data"]["markup"] is False

    def test_markup(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "sanitize", "--markup", "<b>X-Burger</b>  & fritas"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["sanitized"] == "X-Burger &amp; fritas"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sanitize", " mesa 4 "])
        assert result.exit_code == 0
        assert "sanitized: mesa 4" in result.output
