"""Digit extraction shared by the phone and CPF rules."""

from __future__ import annotations

import re
from typing import Any

_NON_DIGIT = re.compile(r"[^0-9]")


def strip_non_digits(value: Any) -> str:
    """Return only the ASCII digits of *value*, in order.

    Non-string input yields an empty string.

    Examples:
        >>> strip_non_digits("(11) 98765-4321")
        '11987654321'
        >>> strip_non_digits(None)
        ''
    """
    if not isinstance(value, str):
        return ""
    return _NON_DIGIT.sub("", value)
