"""Identical — equality against a literal or context-resolved token.

With a context, a path-shaped token (``"email"``, ``["user", "email"]`` or
``{"user": "email"}``) is looked up in the context and the value found there
is the reference. ``literal=True`` disables the lookup.
"""

from __future__ import annotations

from typing import Any, ClassVar

from compval.domain.codes import ErrorCode
from compval.domain.coercion import values_equal
from compval.domain.tokens import resolve_token
from compval.rules.base import ComparisonRule
from compval.rules.options import IdenticalOptions


class Identical(ComparisonRule):
    """Valid when the value equals the token (identically, if ``strict``).

    Usage::

        rule = Identical(["user", "email"])
        rule.is_valid("a@b.c", {"user": {"email": "a@b.c"}})  # True

        Identical(token=123, strict=False).is_valid("123")  # True
    """

    options_model = IdenticalOptions
    positional = ("token", "strict", "literal")
    message_templates: ClassVar[dict[str, str]] = {
        ErrorCode.NOT_SAME: "The two given tokens do not match",
        ErrorCode.MISSING_TOKEN: "No token was provided to match against",
    }
    message_variables: ClassVar[dict[str, str]] = {"token": "token"}

    @property
    def token(self) -> Any:
        return self._options.token

    @token.setter
    def token(self, token: Any) -> None:
        self._set_option("token", token)

    @property
    def strict(self) -> bool:
        return bool(self._options.strict)

    @strict.setter
    def strict(self, strict: bool) -> None:
        self._set_option("strict", strict)

    @property
    def literal(self) -> bool:
        return bool(self._options.literal)

    @literal.setter
    def literal(self, literal: bool) -> None:
        self._set_option("literal", literal)

    def is_valid(self, value: Any, context: Any = None) -> bool:
        """Return True if *value* matches the (resolved) token.

        Raises:
            InvalidArgumentError: *context* is present but is neither a
                mapping nor a keyed lookup.
        """
        self._begin(value)
        resolution = resolve_token(self.token, context, literal=self.literal)

        if self.token is None:
            return self._error(ErrorCode.MISSING_TOKEN)
        if not resolution.found:
            return self._error(ErrorCode.NOT_SAME)
        if not values_equal(value, resolution.value, strict=self.strict):
            return self._error(ErrorCode.NOT_SAME)
        return True
