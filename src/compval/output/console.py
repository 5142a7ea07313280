"""Rich console and theme used by the renderers.

Renderers draw into an in-memory Console and hand back a string, so the
CLI decides where output goes. Rich drops color codes on its own when the
buffer is not a terminal, which covers tests and pipes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COMPVAL_THEME = Theme(
    {
        "cv.ok": "bold green",
        "cv.error": "bold red",
        "cv.warning": "bold yellow",
        "cv.op": "bold cyan",
        "cv.key": "dim",
        "cv.code": "bold magenta",
        "cv.rule": "bold blue",
        "cv.value": "bold",
    }
)

OUTCOME_STYLES: dict[str, str] = {
    "VALID": "cv.ok",
    "INVALID": "cv.error",
    "ERROR": "cv.error",
}


def create_console(*, width: int = 120) -> Console:
    """Return a Console writing to a fresh StringIO buffer."""
    return Console(file=StringIO(), theme=COMPVAL_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    """Return everything *console* has rendered so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_outcome(label: str) -> str:
    return OUTCOME_STYLES.get(label, "")
