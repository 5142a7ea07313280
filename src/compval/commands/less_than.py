"""Command: check a value against an upper bound."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from compval.commands._base import CompvalCommand
from compval.commands._values import VALUE_TYPES, parse_value

if TYPE_CHECKING:
    from compval.commands._context import AppContext


@click.command(
    "less-than",
    cls=CompvalCommand,
    examples="""\
  compval less-than 5 --max 10
  compval less-than 10 --max 10 --inclusive
  compval less-than 2.50 --max 2.5 --type decimal
  compval less-than apple --max banana --type str
  compval --json less-than 11 --max 10""",
)
@click.argument("value")
@click.option("--max", "bound", required=True, help="Upper bound (parsed like VALUE).")
@click.option(
    "--inclusive/--exclusive",
    default=None,
    help="Accept values equal to the bound. Defaults to [less_than] inclusive.",
)
@click.option(
    "--type",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="auto",
    show_default=True,
    help="How to parse VALUE and --max.",
)
@click.pass_obj
def less_than(
    app: AppContext,
    value: str,
    bound: str,
    inclusive: bool | None,
    value_type: str,
) -> None:
    """Check that VALUE is less than --max."""
    result = app.evaluation.less_than(
        parse_value(value, value_type),
        bound=parse_value(bound, value_type, param_hint="--max"),
        inclusive=inclusive,
    )
    app.emit(result)
