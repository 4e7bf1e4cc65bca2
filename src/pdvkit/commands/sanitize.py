"""Command: clean free text before it is stored."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdvkit.commands._base import PdvCommand

if TYPE_CHECKING:
    from pdvkit.commands._context import AppContext


@click.command(
    cls=PdvCommand,
    examples="""\
  pdvkit sanitize "  sem cebola  "
  pdvkit sanitize --markup "<b>X-Burger</b> & fritas"
  pdvkit -q sanitize "  mesa 4  \"""",
)
@click.argument("value")
@click.option("--markup", is_flag=True, help="Also strip HTML tags and escape specials.")
@click.pass_obj
def sanitize(app: AppContext, value: str, markup: bool) -> None:
    """Trim VALUE, optionally stripping markup."""
    app.emit(app.service.sanitize(value, markup=markup))
