"""Command: validate a customer record read from JSON."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from pdvkit.commands._base import PdvCommand

if TYPE_CHECKING:
    from pdvkit.commands._context import AppContext


@click.command(
    cls=PdvCommand,
    examples="""\
  pdvkit record cliente.json
  cat cliente.json | pdvkit --json record
  pdvkit -v record cliente.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--no-fail", is_flag=True, help="Exit 0 even when the record has issues.")
@click.pass_obj
def record(app: AppContext, source: IO[str], no_fail: bool) -> None:
    """Validate the customer record in SOURCE (a file, or - for stdin).

    SOURCE must contain a JSON object with at least "nome" and "telefone".
    """
    data = app.load_json(source, op="check_customer")
    result = app.service.check_customer(data)
    app.emit(result)
    if not result.data.get("valid") and not no_fail:
        raise SystemExit(1)
