"""ValidationService — runs the domain validators and shapes their results.

Invalid user data is never an error here: a CPF that fails its checksum
is a successful ``validate`` operation whose ``valid`` flag is False.
Errors are reserved for requests the service cannot interpret at all
(unknown kind, a record that is not a mapping).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

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
from pdvkit.domain.markup import find_suspicious, sanitize_markup, sanitize_payload
from pdvkit.domain.types import FieldKind, MaskKind
from pdvkit.services._helpers import parse_number
from pdvkit.services.base import BaseService
from pdvkit.services.result import ServiceResult
from pdvkit.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)

REDACTED = "***"

CUSTOMER_FIELDS = ("nome", "telefone", "email", "cpf", "endereco", "observacoes")


def _issue(field: str, code: str, message: str, value: Any = None) -> dict[str, Any]:
    return {"field": field, "code": code, "message": message, "value": value}


class ValidationService(BaseService):
    """Validates single values, customer records, and request payloads."""

    # ------------------------------------------------------------------
    # Single values
    # ------------------------------------------------------------------

    @traced
    def check(
        self,
        kind: str,
        value: Any,
        *,
        allowed: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Validate *value* as a *kind* field.

        ``allowed`` overrides the configured status allow-list for the
        ``status`` kind and is ignored otherwise.
        """
        try:
            field_kind = FieldKind(kind)
        except ValueError:
            return ServiceResult.failure(
                "validate",
                "UNKNOWN_KIND",
                f"Unknown field kind: {kind}",
                kinds=[k.value for k in FieldKind],
            )

        warnings: list[str] = []
        cfg = self._settings.validation
        normalized: Any = value

        if field_kind is FieldKind.CPF:
            valid = validate_cpf(value)
            normalized = strip_non_digits(value)
        elif field_kind is FieldKind.PHONE:
            valid = validate_phone(
                value,
                min_digits=cfg.phone_min_digits,
                max_digits=cfg.phone_max_digits,
            )
            normalized = strip_non_digits(value)
        elif field_kind is FieldKind.EMAIL:
            valid = validate_email(value)
        elif field_kind is FieldKind.PASSWORD:
            valid = validate_password(value, min_length=cfg.password_min_length)
            normalized = REDACTED
        elif field_kind is FieldKind.TEXT:
            normalized = sanitize_text(value)
            valid = bool(normalized)
        elif field_kind is FieldKind.STATUS:
            allow_list = self._settings.status.allowed if allowed is None else allowed
            valid = validate_status(value, allow_list)
        else:
            normalized = parse_number(value)
            if normalized is None:
                warnings.append(f"Could not parse {value!r} as a number")
            if field_kind is FieldKind.PRICE:
                valid = validate_price(normalized)
            else:
                valid = validate_quantity(normalized)

        span = get_current_span()
        if span is not None:
            span.annotate("kind", field_kind.value)
        logger.debug("validate kind=%s valid=%s", field_kind.value, valid)
        return ServiceResult(
            ok=True,
            op="validate",
            data={
                "kind": field_kind.value,
                "value": REDACTED if field_kind is FieldKind.PASSWORD else value,
                "valid": valid,
                "normalized": normalized,
            },
            warnings=warnings,
        )

    @traced
    def mask(self, kind: str, value: str) -> ServiceResult:
        """Apply the display mask for *kind* (``phone`` or ``cpf``)."""
        try:
            mask_kind = MaskKind(kind)
        except ValueError:
            return ServiceResult.failure(
                "mask",
                "UNKNOWN_KIND",
                f"No mask for field kind: {kind}",
                kinds=[k.value for k in MaskKind],
            )
        masked = mask_phone(value) if mask_kind is MaskKind.PHONE else mask_cpf(value)
        return ServiceResult(
            ok=True,
            op="mask",
            data={"kind": mask_kind.value, "value": value, "masked": masked},
        )

    def sanitize(self, value: str, *, markup: bool = False) -> ServiceResult:
        """Trim *value*; with *markup* also strip tags and escape HTML."""
        sanitized = sanitize_markup(value) if markup else sanitize_text(value)
        return ServiceResult(
            ok=True,
            op="sanitize",
            data={"value": value, "sanitized": sanitized, "markup": markup},
        )

    # ------------------------------------------------------------------
    # Customer records
    # ------------------------------------------------------------------

    @traced
    def check_customer(self, record: Any) -> ServiceResult:
        """Validate a customer record as submitted by the cashier screen.

        Required: ``nome`` and ``telefone`` in ``(AA) NNNNN-NNNN`` shape.
        Optional: ``email``, ``cpf`` in ``XXX.XXX.XXX-XX`` shape with a
        valid checksum, ``endereco``, ``observacoes``.
        """
        if not isinstance(record, Mapping):
            return ServiceResult.failure(
                "check_customer",
                "INVALID_RECORD",
                "Customer record must be a JSON object",
                type=type(record).__name__,
            )

        limits = self._settings.customer
        issues: list[dict[str, Any]] = []
        cleaned: dict[str, Any] = {}
        warnings = [f"Ignored unknown field: {key}" for key in record if key not in CUSTOMER_FIELDS]

        with trace_span("required_fields") as span:
            nome = record.get("nome")
            if not isinstance(nome, str) or not nome.strip():
                issues.append(_issue("nome", "required", "Name is required", nome))
            elif len(nome) > limits.nome_max:
                issues.append(
                    _issue(
                        "nome",
                        "too_long",
                        f"Name must be at most {limits.nome_max} characters",
                        nome,
                    )
                )
            else:
                cleaned["nome"] = nome.strip()

            telefone = record.get("telefone")
            if not isinstance(telefone, str) or not telefone.strip():
                issues.append(_issue("telefone", "required", "Phone is required", telefone))
            elif not is_masked_phone(telefone.strip()):
                issues.append(
                    _issue(
                        "telefone",
                        "format",
                        "Phone must look like (XX) XXXXX-XXXX",
                        telefone,
                    )
                )
            else:
                cleaned["telefone"] = telefone.strip()
            if span is not None:
                span.annotate("issues", len(issues))

        required_issues = len(issues)
        with trace_span("optional_fields") as span:
            email = record.get("email")
            if email is not None:
                if isinstance(email, str) and validate_email(email.strip()):
                    cleaned["email"] = email.strip()
                else:
                    issues.append(_issue("email", "format", "Invalid email", email))

            cpf = record.get("cpf")
            if cpf is not None:
                if not is_masked_cpf(cpf):
                    issues.append(
                        _issue("cpf", "format", "CPF must look like XXX.XXX.XXX-XX", cpf)
                    )
                elif not validate_cpf(cpf):
                    issues.append(_issue("cpf", "checksum", "CPF check digits do not match", cpf))
                else:
                    cleaned["cpf"] = cpf

            for key, limit in (
                ("endereco", limits.endereco_max),
                ("observacoes", limits.observacoes_max),
            ):
                text = record.get(key)
                if text is None:
                    continue
                if not isinstance(text, str):
                    issues.append(_issue(key, "type", f"{key} must be a string", text))
                elif len(text) > limit:
                    issues.append(
                        _issue(key, "too_long", f"{key} must be at most {limit} characters", text)
                    )
                else:
                    cleaned[key] = text.strip()
            if span is not None:
                span.annotate("issues", len(issues) - required_issues)

        logger.debug("check_customer issues=%d", len(issues))
        return ServiceResult(
            ok=True,
            op="check_customer",
            data={
                "valid": not issues,
                "count": len(issues),
                "issues": issues,
                "record": cleaned,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Request payloads
    # ------------------------------------------------------------------

    @traced
    def scan(self, payload: Any) -> ServiceResult:
        """Report injection patterns in *payload* and return a sanitized copy."""
        matches = find_suspicious(payload)
        if matches:
            logger.warning("Suspicious payload detected: %s", ", ".join(matches))
        sanitized = sanitize_payload(payload, max_depth=self._settings.sanitizer.max_depth)
        return ServiceResult(
            ok=True,
            op="scan",
            data={
                "suspicious": bool(matches),
                "matches": matches,
                "sanitized": sanitized,
            },
        )
