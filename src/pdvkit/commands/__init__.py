"""Subcommand modules for pdvkit.

Provides register_commands() which uses deferred imports to keep
``pdvkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pdvkit.commands.mask import mask
    from pdvkit.commands.record import record
    from pdvkit.commands.sanitize import sanitize
    from pdvkit.commands.scan import scan
    from pdvkit.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(mask)
    cli.add_command(sanitize)
    cli.add_command(record)
    cli.add_command(scan)
