"""Display helpers for receipts, order tickets, and customer names."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

_CENTS = Decimal("0.01")


def format_price(value: Any) -> str:
    """Format *value* as Brazilian reais.

    Examples:
        >>> format_price(1234.5)
        'R$ 1.234,50'
        >>> format_price(-1)
        '-R$ 1,00'
        >>> format_price(float("nan"))
        'R$ NaN'
    """
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return "R$ NaN"
    if amount.is_nan():
        return "R$ NaN"
    if amount.is_infinite():
        return "-R$ ∞" if amount < 0 else "R$ ∞"
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        magnitude = abs(amount)
    sign = "-" if amount < 0 else ""
    # "1,234.56" -> "1.234,56"
    text = f"{magnitude:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def format_order_number(value: Any) -> str:
    """Left-pad an order number to three characters: ``7`` -> ``"007"``."""
    return str(value).rjust(3, "0")


def capitalize_words(value: str) -> str:
    """Upper-case the first letter of each space-separated word, lower the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split(" "))
