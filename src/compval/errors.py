"""Exception hierarchy for compval.

Validation failures are never exceptions: a rule returns ``False`` and
records an error code. Exceptions are reserved for caller mistakes.
"""

from __future__ import annotations


class CompvalError(Exception):
    """Base class for all compval exceptions."""


class InvalidConfigurationError(CompvalError, ValueError):
    """A rule was constructed with missing or malformed options.

    Raised only at construction time, never from ``is_valid``.
    """


class InvalidArgumentError(CompvalError, TypeError):
    """A caller passed an argument of an unsupported shape.

    Raised from ``is_valid`` when the context is neither absent, a mapping,
    nor a keyed-lookup object.
    """
