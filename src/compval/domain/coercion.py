"""Strict and loose equality over heterogeneous values.

Loose equality follows an explicit coercion table instead of leaning on
Python's ``==`` (which already treats ``True == 1`` but never ``1 == "1"``):

    ============  =====  ==============  =================  ===========================
    left/right    None   bool            number             string
    ============  =====  ==============  =================  ===========================
    None          equal  ``not b``       ``n == 0``         ``s == ""``
    bool                 ``==``          ``b == bool(n)``   ``b == truthy(s)``
    number                               numeric ``==``     numeric if *s* is numeric,
                                                            else ``text(n) == s``
    string                                                  numeric if both numeric,
                                                            else ``==``
    ============  =====  ==============  =================  ===========================

Composites (mappings, lists, tuples) only ever equal other composites:
same key set, values compared recursively with the same mode. Lists and
tuples are keyed by position, so ``["a"]`` and ``{0: "a"}`` are equal.

Decimals count as numbers. Anything else (dates, arbitrary objects) compares with
``==`` in loose mode and ``type(a) is type(b) and a == b`` in strict mode.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from enum import IntEnum
from numbers import Real
from typing import Any

_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


class ValueKind(IntEnum):
    """Coercion classes, ordered so the lower kind is always on the left."""

    NONE = 0
    BOOL = 1
    NUMBER = 2
    STRING = 3
    COMPOSITE = 4
    OTHER = 5

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify *value* for the coercion table."""
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, (Real, Decimal)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if is_composite(value):
            return cls.COMPOSITE
        return cls.OTHER


def is_composite(value: Any) -> bool:
    """True for mappings, lists and tuples."""
    return isinstance(value, (Mapping, list, tuple))


def as_mapping(value: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> dict[Any, Any]:
    """Return a composite as a key -> value dict (positions become keys)."""
    if isinstance(value, Mapping):
        return dict(value)
    return dict(enumerate(value))


def parse_numeric(text: str) -> int | float | Decimal | None:
    """Parse a numeric string, or return None if *text* is not numeric.

    Examples:
        >>> parse_numeric(" 42 ")
        42
        >>> parse_numeric("1e3")
        1000.0
        >>> parse_numeric("abc") is None
        True

    Integers too long for ``int()`` come back as a Decimal.
    """
    match = _NUMERIC_PATTERN.match(text)
    if match is None:
        return None
    stripped = text.strip()
    if "." in stripped or match.group(1):
        return float(stripped)
    try:
        return int(stripped)
    except ValueError:
        # Above sys.get_int_max_str_digits().
        return Decimal(stripped)


def truthy(value: Any) -> bool:
    """Truthiness used when a bool is compared with another scalar.

    Same as ``bool()`` except that the string ``"0"`` is false.
    """
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def number_text(value: Real | Decimal) -> str:
    """Render a number the way it is compared against a non-numeric string."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int):
        return int_text(value)
    return str(value)


def int_text(value: int) -> str:
    """Decimal digits of *value*, however many there are."""
    try:
        return str(value)
    except ValueError:
        return str(Decimal(value))


def _composite_equals(
    left: Any,
    right: Any,
    leaf: Callable[[Any, Any], bool],
) -> bool:
    lmap = as_mapping(left)
    rmap = as_mapping(right)
    if lmap.keys() != rmap.keys():
        return False
    return all(leaf(lmap[key], rmap[key]) for key in lmap)


def strict_equals(left: Any, right: Any) -> bool:
    """Type-and-value identity; composites compare structurally."""
    lkind = ValueKind.of(left)
    rkind = ValueKind.of(right)
    if lkind is ValueKind.COMPOSITE or rkind is ValueKind.COMPOSITE:
        if lkind is not rkind:
            return False
        return _composite_equals(left, right, strict_equals)
    if type(left) is not type(right):
        return False
    return bool(left == right)


def loose_equals(left: Any, right: Any) -> bool:
    """Equality after the type coercions listed in the module docstring."""
    lkind = ValueKind.of(left)
    rkind = ValueKind.of(right)
    if lkind > rkind:
        left, right = right, left
        lkind, rkind = rkind, lkind

    if rkind is ValueKind.OTHER:
        return bool(left == right)
    if rkind is ValueKind.COMPOSITE:
        if lkind is not ValueKind.COMPOSITE:
            return False
        return _composite_equals(left, right, loose_equals)

    if lkind is ValueKind.NONE:
        if rkind is ValueKind.NONE:
            return True
        if rkind is ValueKind.STRING:
            return right == ""
        return not right
    if lkind is ValueKind.BOOL:
        return left == truthy(right)
    if lkind is ValueKind.NUMBER:
        if rkind is ValueKind.NUMBER:
            return bool(left == right)
        parsed = parse_numeric(right)
        if parsed is None:
            return number_text(left) == right
        return bool(left == parsed)

    # Both strings.
    lnum = parse_numeric(left)
    rnum = parse_numeric(right)
    if lnum is not None and rnum is not None:
        return lnum == rnum
    return bool(left == right)


def values_equal(left: Any, right: Any, *, strict: bool = True) -> bool:
    """Dispatch to :func:`strict_equals` or :func:`loose_equals`."""
    if strict:
        return strict_equals(left, right)
    return loose_equals(left, right)
