"""AppContext — the object every subcommand receives via ``@click.pass_obj``.

Built by the root group from the resolved settings. It configures logging
once, hands out the evaluation service, and owns the mapping from a
ServiceResult to output streams and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from compval.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from compval.config.settings import CompvalSettings
    from compval.services.evaluate import EvaluationService
    from compval.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by the root group and its commands."""

    def __init__(self, settings: CompvalSettings) -> None:
        self.settings = settings

        from compval.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def evaluation(self) -> EvaluationService:
        from compval.services.evaluate import EvaluationService

        return EvaluationService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 unless the value was valid.

        A valid result goes to stdout. Anything else goes to stderr, except
        in JSON mode where the payload is the answer and stays on stdout.
        Warnings are echoed to stderr unless JSON mode already carries them.
        """
        output_settings = self.output_settings
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

        click.echo(
            format_result(result, settings=output_settings),
            err=not (result.ok or output_settings.json_output),
        )
        if not result.ok:
            raise SystemExit(1)
