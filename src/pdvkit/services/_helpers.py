"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any


def parse_number(value: Any) -> Any:
    """Turn CLI/JSON text into an int or float; other values pass through.

    Accepts a decimal comma (``"2,5"``). Returns None when *value* is a
    string that does not parse.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if "," in text and "." not in text:
        text = text.replace(",", ".")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None
