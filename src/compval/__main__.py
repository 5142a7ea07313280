"""Allow ``python -m compval``."""

from compval.cli import cli

cli()
