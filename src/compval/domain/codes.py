"""Failure codes reported by comparison rules.

The string values are part of the public contract: external message
catalogs key off them, so they never change once released.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable identifiers for every validation failure."""

    NOT_LESS = "notLessThan"
    NOT_LESS_INCLUSIVE = "notLessThanInclusive"
    MISSING_TOKEN = "missingToken"
    NOT_SAME = "notSame"
