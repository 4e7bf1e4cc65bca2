"""``pdvkit`` command-line entry point."""

from __future__ import annotations

import click

from pdvkit import __version__
from pdvkit.commands import register_commands
from pdvkit.commands._context import AppContext
from pdvkit.config.settings import PdvSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pdvkit")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the verdict or value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing spans.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this pdvkit.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """pdvkit: validate and clean point-of-sale input."""
    ctx.obj = AppContext(PdvSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
