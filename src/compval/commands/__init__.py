"""Subcommand modules for compval.

Provides register_commands() which uses deferred imports to keep
``compval --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every rule command on the root CLI group."""
    from compval.commands.identical import identical
    from compval.commands.less_than import less_than

    cli.add_command(less_than)
    cli.add_command(identical)
