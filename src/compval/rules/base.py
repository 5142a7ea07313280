"""ComparisonRule — abstract foundation for every validation rule.

A rule owns its configuration (a frozen options model) and the state of
its most recent evaluation: the last value seen and at most one failure
message keyed by error code.

INVARIANT: every failing ``is_valid`` call records exactly one code, and
every call starts from an empty error state.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import ValidationError

from compval.domain.coercion import int_text
from compval.errors import InvalidArgumentError, InvalidConfigurationError
from compval.rules.options import RuleOptions

logger = logging.getLogger(__name__)


def render_value(value: Any) -> str:
    """Render a value for interpolation into a message template."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, default=str, separators=(",", ":"))
        except (TypeError, ValueError):
            # Non-string keys or a reference cycle.
            return repr(value)
    if isinstance(value, int):
        return int_text(value)
    return str(value)


class ComparisonRule(ABC):
    """Abstract base for comparison rules.

    Subclasses declare:

    * ``options_model`` — the pydantic model validating their options,
    * ``positional`` — option names accepted positionally, in order,
    * ``message_templates`` — default template per error code,
    * ``message_variables`` — ``%name%`` placeholder -> attribute name.

    Construction accepts keyword options, one options mapping, an instance
    of ``options_model``, or positional arguments::

        LessThan(max=10, inclusive=True)
        LessThan({"max": 10, "inclusive": True})
        LessThan(10, True)
    """

    options_model: ClassVar[type[RuleOptions]] = RuleOptions
    positional: ClassVar[tuple[str, ...]] = ()
    message_templates: ClassVar[Mapping[str, str]] = {}
    message_variables: ClassVar[Mapping[str, str]] = {}

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._options = self._parse_options(args, kwargs)
        self._templates: dict[str, str] = dict(self.message_templates)
        for code, template in self._options.messages.items():
            self.set_message(template, code)
        self._messages: dict[str, str] = {}
        self.value: Any = None

    # --- Option parsing ---

    @classmethod
    def _parse_options(cls, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if len(args) == 1 and not kwargs:
            (only,) = args
            if isinstance(only, cls.options_model):
                return only
            if isinstance(only, Mapping) and set(only) <= set(cls.options_model.model_fields):
                return cls._validate_options(dict(only))

        if len(args) > len(cls.positional):
            msg = f"{cls.__name__} accepts at most {len(cls.positional)} positional arguments"
            raise InvalidConfigurationError(msg)
        data = dict(zip(cls.positional, args, strict=False))
        for name, value in kwargs.items():
            if name in data:
                msg = f"{cls.__name__} got multiple values for option '{name}'"
                raise InvalidConfigurationError(msg)
            data[name] = value
        return cls._validate_options(data)

    @classmethod
    def _validate_options(cls, data: dict[str, Any]) -> Any:
        try:
            return cls.options_model.model_validate(data)
        except ValidationError as exc:
            msg = f"Invalid {cls.__name__} options: {exc}"
            raise InvalidConfigurationError(msg) from exc

    def _set_option(self, name: str, value: Any) -> None:
        self._options = self._options.model_copy(update={name: value})

    @property
    def options(self) -> Any:
        """The current (frozen) options model."""
        return self._options

    def replace(self, **changes: Any) -> Self:
        """Return a new rule with *changes* applied; this rule is untouched.

        Message overrides made with :meth:`set_message` carry over unless
        ``messages`` is among the changes.
        """
        data = {**self._options.model_dump(), **changes}
        rule = type(self)(self._validate_options(data))
        if "messages" not in changes:
            rule._templates = dict(self._templates)
        return rule

    # --- Evaluation ---

    @abstractmethod
    def is_valid(self, value: Any, context: Any = None) -> bool:
        """Return True if *value* satisfies this rule."""
        ...

    def _begin(self, value: Any) -> None:
        """Record *value* and clear the previous call's failure."""
        self.value = value
        self._messages = {}

    def _error(self, code: str) -> bool:
        """Record *code* as this call's failure and return False."""
        logger.debug("%s failed with %s", type(self).__name__, code)
        self._messages = {code: self._create_message(code)}
        return False

    @property
    def errors(self) -> list[str]:
        """Error codes recorded by the latest call (zero or one)."""
        return list(self._messages)

    def get_messages(self) -> dict[str, str]:
        """Rendered failure messages keyed by error code."""
        return dict(self._messages)

    # --- Message templates ---

    def get_message_templates(self) -> dict[str, str]:
        return dict(self._templates)

    def get_message_variables(self) -> list[str]:
        return list(self.message_variables)

    def set_message(self, template: str, code: str | None = None) -> None:
        """Override the template for *code*, or for every code if None."""
        if code is None:
            for key in self._templates:
                self._templates[key] = template
            return
        if code not in self._templates:
            msg = f"No message template exists for code '{code}'"
            raise InvalidArgumentError(msg)
        self._templates[code] = template

    @property
    def value_obscured(self) -> bool:
        return bool(self._options.value_obscured)

    @value_obscured.setter
    def value_obscured(self, obscured: bool) -> None:
        self._set_option("value_obscured", obscured)

    @property
    def message_length(self) -> int:
        return int(self._options.message_length)

    @message_length.setter
    def message_length(self, length: int) -> None:
        self._set_option("message_length", length)

    def _create_message(self, code: str) -> str:
        template = self._templates.get(code)
        if template is None:
            return ""

        message = template
        if "%value%" in message:
            value_text = render_value(self.value)
            if self.value_obscured:
                value_text = "*" * len(value_text)
            message = message.replace("%value%", value_text)
        for placeholder, attribute in self.message_variables.items():
            marker = f"%{placeholder}%"
            if marker in message:
                message = message.replace(marker, render_value(getattr(self, attribute)))

        length = self.message_length
        if length > -1 and len(message) > length:
            message = message[: max(length - 3, 0)] + "..."
        return message

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self._options, name)!r}" for name in self.positional
        )
        return f"{type(self).__name__}({fields})"
