"""CPF (Cadastro de Pessoas Físicas) rules.

The CPF is eleven digits: nine base digits followed by two check digits,
each computed with a weighted modulo-11 sum over the digits before it.

INVARIANT: a CPF made of one repeated digit is rejected before any
checksum arithmetic runs.
"""

from __future__ import annotations

import re
from typing import Any

from pdvkit.domain.digits import strip_non_digits

CPF_LENGTH = 11
MASKED_CPF_PATTERN = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$", re.ASCII)


def cpf_check_digit(digits: str) -> int:
    """Compute the check digit that follows *digits*.

    Weights run from ``len(digits) + 1`` down to 2. A remainder of 10 or
    11 collapses to 0.

    Examples:
        >>> cpf_check_digit("529982247")
        2
        >>> cpf_check_digit("5299822472")
        5
    """
    first_weight = len(digits) + 1
    total = sum(int(d) * (first_weight - i) for i, d in enumerate(digits))
    remainder = 11 - (total % 11)
    return 0 if remainder in (10, 11) else remainder


def validate_cpf(value: Any) -> bool:
    """Check whether *value* holds a valid CPF.

    Formatting characters are ignored; only the digit sequence counts.
    """
    digits = strip_non_digits(value)
    if len(digits) != CPF_LENGTH:
        return False
    if len(set(digits)) == 1:
        return False
    if cpf_check_digit(digits[:9]) != int(digits[9]):
        return False
    return cpf_check_digit(digits[:10]) == int(digits[10])


def mask_cpf(value: Any) -> str:
    """Format the digits of *value* as ``XXX.XXX.XXX-XX``.

    Partial input is formatted progressively; digits past the eleventh
    are dropped.
    """
    digits = strip_non_digits(value)[:CPF_LENGTH]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}.{digits[3:]}"
    if len(digits) <= 9:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def is_masked_cpf(value: Any) -> bool:
    """Check whether *value* is already in ``XXX.XXX.XXX-XX`` shape."""
    if not isinstance(value, str):
        return False
    return MASKED_CPF_PATTERN.fullmatch(value) is not None
