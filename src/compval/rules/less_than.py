"""LessThan — ordinal bound check against a configured maximum."""

from __future__ import annotations

from typing import Any, ClassVar

from compval.domain.codes import ErrorCode
from compval.rules.base import ComparisonRule
from compval.rules.options import LessThanOptions


def exceeds(value: Any, bound: Any, *, inclusive: bool) -> bool:
    """True if *value* breaks the bound.

    Inclusive bounds require ``value <= bound``; exclusive bounds require
    ``value < bound``. Values that cannot be ordered against the bound
    (None, mismatched types, NaN) always break it.
    """
    try:
        return not (value <= bound if inclusive else value < bound)
    except (TypeError, ArithmeticError):
        return True


class LessThan(ComparisonRule):
    """Valid when the value is below ``max`` (or equal, if ``inclusive``).

    ``max`` is required at construction::

        >>> LessThan(10).is_valid(9)
        True
        >>> LessThan(max=10, inclusive=True).is_valid(10)
        True
    """

    options_model = LessThanOptions
    positional = ("max", "inclusive")
    message_templates: ClassVar[dict[str, str]] = {
        ErrorCode.NOT_LESS: "The input is not less than '%max%'",
        ErrorCode.NOT_LESS_INCLUSIVE: "The input is not less or equal than '%max%'",
    }
    message_variables: ClassVar[dict[str, str]] = {"max": "max"}

    @property
    def max(self) -> Any:
        return self._options.max

    @max.setter
    def max(self, bound: Any) -> None:
        self._set_option("max", bound)

    @property
    def inclusive(self) -> bool:
        return bool(self._options.inclusive)

    @inclusive.setter
    def inclusive(self, inclusive: bool) -> None:
        self._set_option("inclusive", inclusive)

    def is_valid(self, value: Any, context: Any = None) -> bool:
        """Return True if *value* is below the bound.

        *context* is accepted for a uniform rule signature and ignored.
        """
        self._begin(value)
        if exceeds(value, self.max, inclusive=self.inclusive):
            code = ErrorCode.NOT_LESS_INCLUSIVE if self.inclusive else ErrorCode.NOT_LESS
            return self._error(code)
        return True
