"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pdvkit.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pdvkit.domain.contact import PHONE_MAX_DIGITS, PHONE_MIN_DIGITS
from pdvkit.domain.fields import PASSWORD_MIN_LENGTH
from pdvkit.domain.markup import DEFAULT_MAX_DEPTH
from pdvkit.domain.types import OrderStatus

# --- pdvkit.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    phone_min_digits: int = PHONE_MIN_DIGITS
    phone_max_digits: int = PHONE_MAX_DIGITS
    password_min_length: int = PASSWORD_MIN_LENGTH


class StatusConfig(BaseModel):
    """[status] section."""

    model_config = {"frozen": True}

    allowed: list[str] = Field(default_factory=lambda: [s.value for s in OrderStatus])


class CustomerConfig(BaseModel):
    """[customer] section — field length limits for customer records."""

    model_config = {"frozen": True}

    nome_max: int = 100
    endereco_max: int = 300
    observacoes_max: int = 500


class SanitizerConfig(BaseModel):
    """[sanitizer] section."""

    model_config = {"frozen": True}

    max_depth: int = DEFAULT_MAX_DEPTH

