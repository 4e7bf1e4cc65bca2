"""Scalar field rules: password, free text, price, quantity, status."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from numbers import Integral, Real
from typing import Any

PASSWORD_MIN_LENGTH = 6


def validate_password(value: Any, *, min_length: int = PASSWORD_MIN_LENGTH) -> bool:
    """Non-empty string of at least *min_length* characters. No complexity rules."""
    if not isinstance(value, str) or not value:
        return False
    return len(value) >= min_length


def sanitize_text(value: Any) -> str:
    """Trim surrounding whitespace; falsy input becomes ``""``."""
    if not value:
        return ""
    return str(value).strip()


def _is_number(value: Any) -> bool:
    # bool is an Integral subclass but never a price or a quantity.
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def validate_price(value: Any) -> bool:
    """Any non-negative number, zero and fractions included. NaN is rejected."""
    if not _is_number(value):
        return False
    try:
        return value >= 0
    except (TypeError, ArithmeticError):
        return False


def validate_quantity(value: Any) -> bool:
    """A whole number strictly above zero.

    Integral floats and Decimals count as whole numbers (``3.0`` is valid).
    """
    if not _is_number(value):
        return False
    if isinstance(value, Integral):
        return value > 0
    if isinstance(value, float) and not math.isfinite(value):
        return False
    if isinstance(value, Decimal) and not value.is_finite():
        return False
    return value == int(value) and value > 0


def validate_status(value: Any, allowed: Iterable[Any] | None) -> bool:
    """Membership test against a caller-supplied allow-list.

    A string is not an allow-list: ``validate_status("pro", "pronto")`` is
    False. Anything that is not a collection yields False.
    """
    if isinstance(allowed, (str, bytes)) or not isinstance(allowed, Iterable):
        return False
    try:
        return value in allowed
    except TypeError:
        pass
    # e.g. an unhashable value against a set
    try:
        return any(value == item for item in allowed)
    except TypeError:
        return False
