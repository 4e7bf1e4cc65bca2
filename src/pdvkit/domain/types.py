"""Field kinds and order status enums."""

from __future__ import annotations

from enum import StrEnum


class FieldKind(StrEnum):
    """Input kinds the validation service knows how to check."""

    CPF = "cpf"
    PHONE = "phone"
    EMAIL = "email"
    PASSWORD = "password"
    TEXT = "text"
    PRICE = "price"
    QUANTITY = "quantity"
    STATUS = "status"


class MaskKind(StrEnum):
    """Input kinds with a display mask."""

    PHONE = "phone"
    CPF = "cpf"


class OrderStatus(StrEnum):
    """Default order lifecycle used as the status allow-list."""

    AGUARDANDO = "aguardando"
    PREPARANDO = "preparando"
    PRONTO = "pronto"
    ENTREGUE = "entregue"
    CANCELADO = "cancelado"
