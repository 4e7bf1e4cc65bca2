"""Command: validate a single field value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdvkit.commands._base import PdvCommand
from pdvkit.domain.types import FieldKind

if TYPE_CHECKING:
    from pdvkit.commands._context import AppContext


@click.command(
    cls=PdvCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  pdvkit validate cpf 529.982.247-25
  pdvkit validate phone "(11) 91234-5678"
  pdvkit validate email cliente@exemplo.com.br
  pdvkit validate quantity 3
  pdvkit validate price -- -1
  pdvkit validate status pronto
  pdvkit validate status mesa_livre --allowed livre,ocupada,reservada
  pdvkit -q validate cpf 111.444.777-35""",
)
@click.argument("kind", type=click.Choice([k.value for k in FieldKind]))
@click.argument("value")
@click.option(
    "--allowed",
    default=None,
    help="Comma-separated allow-list for the status kind (overrides config).",
)
@click.option("--no-fail", is_flag=True, help="Exit 0 even when the value is invalid.")
@click.pass_obj
def validate(
    app: AppContext,
    kind: str,
    value: str,
    allowed: str | None,
    no_fail: bool,
) -> None:
    """Check VALUE as a KIND field. Exits 1 when the value is invalid."""
    allow_list = [s.strip() for s in allowed.split(",") if s.strip()] if allowed else None
    result = app.service.check(kind, value, allowed=allow_list)
    app.emit(result)
    if not result.data.get("valid") and not no_fail:
        raise SystemExit(1)
