"""Tests for PdvSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from pdvkit.config.settings import PdvSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("PDVKIT_CONFIG", "PDVKIT_QUIET", "PDVKIT_VALIDATION__PASSWORD_MIN_LENGTH"):
        monkeypatch.delenv(var, raising=False)


class TestPdvSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PdvSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.validation.password_min_length == 6
        assert "pronto" in settings.status.allowed

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PdvSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "pdvkit.toml"
        toml.write_text(
            '[validation]\npassword_min_length = 8\n[status]\nallowed = ["livre", "ocupada"]\n'
        )
        settings = PdvSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.validation.password_min_length == 8
        assert settings.validation.phone_min_digits == 10  # default preserved
        assert settings.status.allowed == ["livre", "ocupada"]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        toml = tmp_path / "custom.toml"
        toml.write_text("[customer]\nnome_max = 40\n")
        settings = PdvSettings.from_cli(config_path=str(toml))
        assert settings.customer.nome_max == 40

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = PdvSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.customer.nome_max == 100

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pdvkit.toml").write_text("[validation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PdvSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_over_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pdvkit.toml").write_text("[validation]\npassword_min_length = 8\n")
        monkeypatch.setenv("PDVKIT_VALIDATION__PASSWORD_MIN_LENGTH", "12")
        settings = PdvSettings.from_cli(start=tmp_path)
        assert settings.validation.password_min_length == 12

    def test_cli_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDVKIT_QUIET", "false")
        settings = PdvSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True
