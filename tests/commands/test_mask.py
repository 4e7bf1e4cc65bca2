"""Tests for the mask CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pdvkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestMaskCommand:
    def test_mask_phone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["mask", "phone", "11987654321"])
        assert result.exit_code == 0
        assert "masked: (11) 98765-4321" in result.output

    def test_mask_is_idempotent(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "mask", "phone", "(11) 98765-4321"])
        assert result.exit_code == 0
        assert result.stdout == "(11) 98765-4321\n"

    def test_mask_cpf_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "mask", "cpf", "52998224725"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "mask"
        assert data["data"]["masked"] == "529.982.247-25"

    def test_partial_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "mask", "phone", "1198"])
        assert result.stdout.strip() == "(11) 98"

    def test_email_has_no_mask(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["mask", "email", "a@b.co"])
        assert result.exit_code == 2
