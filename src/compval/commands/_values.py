"""Parsing helpers turning CLI strings into typed values and contexts."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import IO, Any

import click

from compval.domain.parameters import Parameters

VALUE_TYPES = ("auto", "str", "int", "float", "decimal", "json")


def parse_value(raw: str, value_type: str = "auto", *, param_hint: str = "VALUE") -> Any:
    """Convert *raw* according to *value_type*.

    ``auto`` reads *raw* as a JSON literal when possible (``42``, ``true``,
    ``{"a": 1}``) and falls back to the plain string.
    """
    try:
        if value_type == "str":
            return raw
        if value_type == "int":
            return int(raw)
        if value_type == "float":
            return float(raw)
        if value_type == "decimal":
            return Decimal(raw)
        if value_type == "json":
            return json.loads(raw)
    except (ValueError, InvalidOperation) as exc:
        msg = f"{raw!r} is not a valid {value_type}"
        raise click.BadParameter(msg, param_hint=param_hint) from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_path(dotted: str) -> list[str | int]:
    """Split ``user.emails.0`` into ``["user", "emails", 0]``."""
    if not dotted or any(not part for part in dotted.split(".")):
        msg = f"{dotted!r} is not a dotted path"
        raise click.BadParameter(msg, param_hint="--path")
    return [int(part) if part.isdigit() else part for part in dotted.split(".")]


def read_context(stream: IO[str] | None, query: str | None) -> Any:
    """Load the evaluation context from a JSON stream or a query string.

    The JSON document is returned as parsed, even when it is not an object,
    so that the rule itself reports an unusable context.
    """
    if stream is not None and query is not None:
        msg = "--context and --query are mutually exclusive"
        raise click.UsageError(msg)
    if query is not None:
        return Parameters.from_query_string(query)
    if stream is None:
        return None
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        msg = f"Context is not valid JSON: {exc}"
        raise click.BadParameter(msg, param_hint="--context") from exc
