"""Command: scan a request payload for injection patterns."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from pdvkit.commands._base import PdvCommand

if TYPE_CHECKING:
    from pdvkit.commands._context import AppContext


@click.command(
    cls=PdvCommand,
    examples="""\
  pdvkit scan pedido.json
  echo '{"obs": "1 OR 1=1"}' | pdvkit --json scan
  pdvkit -v scan pedido.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--no-fail", is_flag=True, help="Exit 0 even when the payload is suspicious.")
@click.pass_obj
def scan(app: AppContext, source: IO[str], no_fail: bool) -> None:
    """Report suspicious patterns in the JSON payload in SOURCE and print a sanitized copy."""
    payload = app.load_json(source, op="scan")
    result = app.service.scan(payload)
    app.emit(result)
    if result.data.get("suspicious") and not no_fail:
        raise SystemExit(1)
