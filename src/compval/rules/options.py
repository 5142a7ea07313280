"""Pydantic option models for comparison rules.

Every rule keeps its configuration in one frozen options model. Property
setters on the rule swap in an updated copy; construction validates.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

# --- Shared message options ---


class RuleOptions(BaseModel):
    """Options every rule accepts."""

    model_config = {"frozen": True, "extra": "forbid"}

    messages: dict[str, str] = Field(default_factory=dict)
    value_obscured: bool = False
    message_length: int = -1


# --- Per-rule options ---


class LessThanOptions(RuleOptions):
    """Options for :class:`~compval.rules.less_than.LessThan`."""

    max: Any
    inclusive: bool = False

    @field_validator("max")
    @classmethod
    def _max_present(cls, value: Any) -> Any:
        if value is None:
            msg = "Missing option 'max'"
            raise ValueError(msg)
        return value


class IdenticalOptions(RuleOptions):
    """Options for :class:`~compval.rules.identical.Identical`.

    ``token`` may stay None: a rule without a token fails every value with
    ``missingToken`` rather than refusing to construct.
    """

    token: Any = None
    strict: bool = True
    literal: bool = False
