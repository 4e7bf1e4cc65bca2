"""Shared pytest fixtures and test helpers for pdvkit tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from pdvkit.config.settings import PdvSettings
from pdvkit.services.validate import ValidationService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray pdvkit.toml is discovered."""
    monkeypatch.delenv("PDVKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PdvSettings:
    """Default settings with config discovery pinned to an empty directory."""
    monkeypatch.delenv("PDVKIT_CONFIG", raising=False)
    return PdvSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: PdvSettings) -> ValidationService:
    return ValidationService(settings)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (CLI runs reconfigure it)."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pdv = logging.getLogger("pdvkit")
    pdv_level = pdv.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pdv.setLevel(pdv_level)


@pytest.fixture
def make_customer() -> Callable[..., dict[str, Any]]:
    """Factory for a valid customer record, with keyword overrides applied."""

    def _make(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "nome": "Maria Silva",
            "telefone": "(11) 98765-4321",
            "email": "maria@exemplo.com.br",
            "cpf": "529.982.247-25",
            "endereco": "Rua das Flores, 123",
            "observacoes": "Sem cebola",
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` enables telemetry for the current context; switch it back off."""
    from pdvkit.services.telemetry import _current_span, disable_telemetry

    yield
    disable_telemetry()
    _current_span.set(None)
