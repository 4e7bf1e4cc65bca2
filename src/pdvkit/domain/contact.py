"""Email and phone rules, plus the phone input mask.

Phone numbers are Brazilian: a two-digit area code (DDD) followed by an
8-digit landline or a 9-digit mobile number.
"""

from __future__ import annotations

import re
from typing import Any

from pdvkit.domain.digits import strip_non_digits

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MASKED_PHONE_PATTERN = re.compile(r"^\(\d{2}\) \d{4,5}-\d{4}$", re.ASCII)

PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 11


def validate_email(value: Any) -> bool:
    """Syntactic ``local@domain.tld`` check. Does not trim *value*."""
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_phone(
    value: Any,
    *,
    min_digits: int = PHONE_MIN_DIGITS,
    max_digits: int = PHONE_MAX_DIGITS,
) -> bool:
    """Check that *value* carries 10 or 11 digits once punctuation is removed.

    The area code is not checked against the list of real regions.
    """
    if not isinstance(value, str):
        return False
    return min_digits <= len(strip_non_digits(value)) <= max_digits


def mask_phone(value: Any) -> str:
    """Format the digits of *value* as ``(AA) NNNNN-NNNN``.

    Punctuation already present is discarded first, so re-masking a masked
    value returns it unchanged. Partial numbers are formatted as typed;
    digits past the eleventh are dropped.

    Examples:
        >>> mask_phone("11987654321")
        '(11) 98765-4321'
        >>> mask_phone("(11) 98765-4321")
        '(11) 98765-4321'
        >>> mask_phone("1132")
        '(11) 32'
    """
    digits = strip_non_digits(value)[:PHONE_MAX_DIGITS]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 6:
        return f"({digits[:2]}) {digits[2:]}"
    if len(digits) <= 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"


def is_masked_phone(value: Any) -> bool:
    """Check whether *value* is already in ``(AA) NNNN[N]-NNNN`` shape."""
    if not isinstance(value, str):
        return False
    return MASKED_PHONE_PATTERN.fullmatch(value) is not None
