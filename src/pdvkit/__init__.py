"""pdvkit — validation and sanitization for point-of-sale input."""

from pdvkit.domain.contact import is_masked_phone, mask_phone, validate_email, validate_phone
from pdvkit.domain.cpf import is_masked_cpf, mask_cpf, validate_cpf
from pdvkit.domain.digits import strip_non_digits
from pdvkit.domain.fields import (
    sanitize_text,
    validate_password,
    validate_price,
    validate_quantity,
    validate_status,
)
from pdvkit.domain.formatting import capitalize_words, format_order_number, format_price
from pdvkit.domain.markup import find_suspicious, is_suspicious, sanitize_markup, sanitize_payload

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "capitalize_words",
    "find_suspicious",
    "format_order_number",
    "format_price",
    "is_masked_cpf",
    "is_masked_phone",
    "is_suspicious",
    "mask_cpf",
    "mask_phone",
    "sanitize_markup",
    "sanitize_payload",
    "sanitize_text",
    "strip_non_digits",
    "validate_cpf",
    "validate_email",
    "validate_password",
    "validate_phone",
    "validate_price",
    "validate_quantity",
    "validate_status",
]
