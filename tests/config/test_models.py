"""Tests for configuration models."""

import pytest

from pdvkit.config.models import (
    CustomerConfig,
    SanitizerConfig,
    StatusConfig,
    ValidationConfig,
)


class TestDefaults:
    def test_validation_defaults(self) -> None:
        cfg = ValidationConfig()
        assert cfg.phone_min_digits == 10
        assert cfg.phone_max_digits == 11
        assert cfg.password_min_length == 6

    def test_status_defaults_to_order_lifecycle(self) -> None:
        assert StatusConfig().allowed == [
            "aguardando",
            "preparando",
            "pronto",
            "entregue",
            "cancelado",
        ]

    def test_customer_and_sanitizer_defaults(self) -> None:
        customer = CustomerConfig()
        assert customer.nome_max == 100
        assert customer.endereco_max == 300
        assert customer.observacoes_max == 500
        assert SanitizerConfig().max_depth == 10


class TestValidate:
    def test_sparse_override(self) -> None:
        cfg = ValidationConfig.model_validate({"password_min_length": 8})
        assert cfg.password_min_length == 8
        assert cfg.phone_min_digits == 10

    def test_frozen(self) -> None:
        cfg = ValidationConfig()
        with pytest.raises(Exception):
            cfg.password_min_length = 1  # type: ignore[misc]
