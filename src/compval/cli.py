"""compval command line: one subcommand per rule, one line of output per check."""

from __future__ import annotations

import click

from compval import __version__
from compval.commands import register_commands
from compval.commands._context import AppContext
from compval.config.settings import CompvalSettings

EPILOG = """\
Exit status is 0 when the value passes, 1 when it fails or the rule cannot
run (bad options, unusable context), and 2 on usage errors.

Defaults for --inclusive, --strict, --literal and the failure messages come
from compval.toml or [tool.compval] in pyproject.toml, found by walking up
from the working directory, and from COMPVAL_* environment variables.
"""


@click.group(
    invoke_without_command=True,
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="compval")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only 'valid' or 'invalid: CODE'.")
@click.option("-v", "--verbose", is_flag=True, help="Show context use and log every failure.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this TOML file instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Check values against comparison rules.

    \b
    less-than  VALUE below an upper bound
    identical  VALUE equal to a token, or to a field of a JSON or query context
    """
    ctx.obj = AppContext(
        CompvalSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
