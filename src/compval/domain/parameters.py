"""Context containers accepted by token resolution.

A context is either a plain :class:`~collections.abc.Mapping` or any object
offering keyed lookup (the :class:`KeyedLookup` capability). Everything
else is rejected at the boundary with :class:`InvalidArgumentError`.

:class:`Parameters` is the typed wrapper used for request-style data, e.g.
a submitted form parsed from a query string.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qsl

from compval.errors import InvalidArgumentError

_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


@runtime_checkable
class KeyedLookup(Protocol):
    """Keyed lookup returning an optional value."""

    def get(self, key: Any, default: Any = None) -> Any: ...

    def __contains__(self, key: object) -> bool: ...


class Parameters(Mapping[str, Any]):
    """Read-only parameter bag.

    Lookups never mutate the wrapped data; :meth:`to_dict` hands out a
    deep copy.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Parameters({self._values!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the wrapped values."""
        return copy.deepcopy(self._values)

    @classmethod
    def from_query_string(cls, query: str) -> Parameters:
        """Build parameters from a URL-encoded query string.

        Bracketed names nest, and an empty bracket appends to a list::

            user[email]=a%40b.c&tags[]=x&tags[]=y
            -> {"user": {"email": "a@b.c"}, "tags": ["x", "y"]}

        Repeated plain names keep the last value.
        """
        values: dict[str, Any] = {}
        for name, value in parse_qsl(query, keep_blank_values=True):
            _assign(values, split_key(name), value)
        return cls(values)


def split_key(name: str) -> list[str]:
    """Split ``a[b][c]`` into ``["a", "b", "c"]``.

    Names that are not well-formed bracket notation stay a single key.
    """
    head, bracket, _ = name.partition("[")
    if not bracket or not head:
        return [name]
    rest = name[len(head) :]
    segments = _SEGMENT.findall(rest)
    if "".join(f"[{segment}]" for segment in segments) != rest:
        return [name]
    return [head, *segments]


def _assign(target: dict[str, Any], keys: list[str], value: str) -> None:
    node = target
    for index, key in enumerate(keys[:-1]):
        if keys[index + 1] == "":
            bucket = node.get(key)
            if not isinstance(bucket, list):
                bucket = node[key] = []
            bucket.append(value)
            return
        child = node.get(key)
        if not isinstance(child, dict):
            child = node[key] = {}
        node = child
    node[keys[-1]] = value


def is_context(obj: object) -> bool:
    """True if *obj* can serve as a resolution context."""
    if isinstance(obj, (str, bytes)):
        return False
    return isinstance(obj, (Mapping, KeyedLookup))


def ensure_context(obj: Any) -> Mapping[Any, Any] | KeyedLookup | None:
    """Return *obj* unchanged if it is a usable context, else raise.

    ``None`` is accepted and means "no context".
    """
    if obj is None or is_context(obj):
        return obj
    msg = f"Context must be a mapping or keyed lookup, got {type(obj).__name__}"
    raise InvalidArgumentError(msg)
