"""Rich renderers for evaluation results.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Three outcomes render differently:

- VALID    — the value passed the rule
- INVALID  — the value failed the rule (a rule error code)
- ERROR    — the rule could not run (bad options or context)
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from compval.output.console import create_console, get_output, style_for_outcome

if TYPE_CHECKING:
    from rich.console import Console

    from compval.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_valid(result, console, verbose=verbose)
    elif "valid" in result.data:
        _render_invalid(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.ok:
        return "valid"
    code = result.error.code if result.error else "UNKNOWN"
    return f"invalid: {code}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, label: str, result: ServiceResult) -> None:
    """Print the VALID/INVALID status line."""
    label_text = Text(label, style=style_for_outcome(label))
    console.print(label_text, Text(f"  {result.op}", style="cv.op"), sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, default=str, separators=(",", ":"))
    k = Text(f"  {key}: ", style="cv.key")
    console.print(k, Text(str(value), style=style), sep="", end="")
    console.print()


def _summary(console: Console, result: ServiceResult) -> None:
    if "rule" in result.data:
        _field(console, "rule", result.data["rule"], "cv.rule")
    if "value" in result.data:
        _field(console, "value", result.data["value"], "cv.value")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_valid(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, "VALID", result)
    _summary(console, result)
    if verbose and "with_context" in result.data:
        _field(console, "with_context", result.data["with_context"])


def _render_invalid(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    _status_line(console, "INVALID", result)
    _summary(console, result)
    if err:
        _field(console, "code", err.code, "cv.code")
        _field(console, "message", err.message)
    if verbose and "with_context" in result.data:
        _field(console, "with_context", result.data["with_context"])


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style=style_for_outcome("ERROR"))
    op = Text(f"  {result.op}", style="cv.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err:
        _field(console, "code", err.code, "cv.code")
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")
