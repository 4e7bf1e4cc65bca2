"""Click command class for pdvkit subcommands.

``--help`` stays short; ``--examples`` prints ready-to-paste invocations
and exits before any argument is required.
"""

from __future__ import annotations

from typing import Any

import click


class PdvCommand(click.Command):
    """A click Command that takes an ``examples`` text block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )
