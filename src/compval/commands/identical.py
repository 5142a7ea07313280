"""Command: check a value against a token, optionally resolved from context."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from compval.commands._base import CompvalCommand
from compval.commands._values import VALUE_TYPES, parse_path, parse_value, read_context

if TYPE_CHECKING:
    from compval.commands._context import AppContext


@click.command(
    cls=CompvalCommand,
    examples="""\
  compval identical foo --token foo
  compval identical 123 --token '"123"' --loose
  compval identical john@doe.com --path user.email --context form.json
  compval identical john@doe.com --path email --query 'email=john%40doe.com'
  echo '{"pw": "s3cret"}' | compval identical s3cret --token pw --context -
  compval --json identical bar --token '{"foo": "bar"}' --literal""",
)
@click.argument("value")
@click.option("--token", default=None, help="Reference value or context key (parsed like VALUE).")
@click.option("--path", default=None, help="Dotted path into the context, e.g. user.email.")
@click.option(
    "--context",
    "context_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="JSON file holding the context ('-' for stdin).",
)
@click.option("--query", default=None, help="Context as a URL query string.")
@click.option(
    "--strict/--loose",
    default=None,
    help="Identity or coerced equality. Defaults to [identical] strict.",
)
@click.option(
    "--literal/--no-literal",
    default=None,
    help="Never resolve the token from context. Defaults to [identical] literal.",
)
@click.option(
    "--type",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="auto",
    show_default=True,
    help="How to parse VALUE and --token.",
)
@click.pass_obj
def identical(
    app: AppContext,
    value: str,
    token: str | None,
    path: str | None,
    context_file: IO[str] | None,
    query: str | None,
    strict: bool | None,
    literal: bool | None,
    value_type: str,
) -> None:
    """Check that VALUE matches --token (or the context entry at --path)."""
    if token is not None and path is not None:
        msg = "--token and --path are mutually exclusive"
        raise click.UsageError(msg)

    if path is not None:
        reference = parse_path(path)
    elif token is not None:
        reference = parse_value(token, value_type, param_hint="--token")
    else:
        reference = None

    result = app.evaluation.identical(
        parse_value(value, value_type),
        token=reference,
        context=read_context(context_file, query),
        strict=strict,
        literal=literal,
    )
    app.emit(result)
