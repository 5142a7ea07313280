"""Token resolution — turn a configured token into a comparison value.

A token is either a literal reference value or a path into the context.
Path-shaped tokens:

- a single ``str`` or ``int`` key (``"email"``),
- a non-empty list or tuple of such keys (``["user", "email"]``),
- a chain of single-key mappings (``{"user": "email"}``), equivalent to the
  list form.

INVARIANT: resolution never mutates the context, and a missing key is a
"not found" result, never an exception. Only a context of unsupported
shape raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from compval.domain.parameters import KeyedLookup, ensure_context

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a token against an optional context."""

    value: Any
    used_context: bool = False
    found: bool = True


def _is_key(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def token_path(token: Any) -> tuple[str | int, ...] | None:
    """Return the key path a token describes, or None for a literal.

    Examples:
        >>> token_path("email")
        ('email',)
        >>> token_path({"user": {"profile": "email"}})
        ('user', 'profile', 'email')
        >>> token_path({"one": "two", "three": "four"}) is None
        True
    """
    if _is_key(token):
        return (token,)
    if isinstance(token, (list, tuple)):
        if token and all(_is_key(key) for key in token):
            return tuple(token)
        return None
    if isinstance(token, Mapping):
        keys: list[str | int] = []
        node: Any = token
        while isinstance(node, Mapping):
            if len(node) != 1:
                return None
            key, node = next(iter(node.items()))
            if not _is_key(key):
                return None
            keys.append(key)
        if not _is_key(node):
            return None
        keys.append(node)
        return tuple(keys)
    return None


def _lookup(node: Any, key: str | int) -> Any:
    if isinstance(node, Mapping):
        return node[key] if key in node else _MISSING
    # Positional access only below the top level; the root is always keyed.
    if isinstance(node, (list, tuple)):
        if isinstance(key, int) and 0 <= key < len(node):
            return node[key]
        return _MISSING
    if isinstance(node, KeyedLookup):
        return node.get(key, _MISSING) if key in node else _MISSING
    return _MISSING


def lookup_path(context: Any, path: Sequence[str | int]) -> Resolution:
    """Walk *context* key by key along *path*."""
    node = context
    for depth, key in enumerate(path):
        node = _lookup(node, key)
        if node is _MISSING:
            logger.debug("Token path %r not found at depth %d", list(path), depth)
            return Resolution(value=None, used_context=True, found=False)
    return Resolution(value=node, used_context=True)


def resolve_token(token: Any, context: Any = None, *, literal: bool = False) -> Resolution:
    """Resolve *token* against *context*.

    Args:
        token: The configured literal value or path.
        context: Optional mapping or keyed lookup.
        literal: Treat *token* as a literal value even when path-shaped.

    Raises:
        InvalidArgumentError: *context* is present but not a recognized
            container.
    """
    context = ensure_context(context)
    if literal or context is None:
        return Resolution(value=token)
    path = token_path(token)
    if path is None:
        return Resolution(value=token)
    return lookup_path(context, path)
