"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the validation service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from pdvkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pdvkit.config.settings import PdvSettings
    from pdvkit.services.result import ServiceResult
    from pdvkit.services.validate import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: PdvSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from pdvkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from pdvkit.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from pdvkit.services.validate import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def load_json(self, source: IO[str], *, op: str) -> Any:
        """Decode a JSON document from *source*, emitting an error result on failure."""
        try:
            return json.load(source)
        except json.JSONDecodeError as exc:
            from pdvkit.services.result import ServiceResult

            self.emit(
                ServiceResult.failure(op, "INVALID_JSON", f"Error reading {source.name}: {exc}")
            )
