"""Command: apply a display mask to a phone number or CPF."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pdvkit.commands._base import PdvCommand
from pdvkit.domain.types import MaskKind

if TYPE_CHECKING:
    from pdvkit.commands._context import AppContext


@click.command(
    cls=PdvCommand,
    examples="""\
  pdvkit mask phone 11987654321
  pdvkit mask cpf 52998224725
  pdvkit -q mask phone "(11) 98765-4321\"""",
)
@click.argument("kind", type=click.Choice([k.value for k in MaskKind]))
@click.argument("value")
@click.pass_obj
def mask(app: AppContext, kind: str, value: str) -> None:
    """Format VALUE with the KIND input mask."""
    app.emit(app.service.mask(kind, value))
