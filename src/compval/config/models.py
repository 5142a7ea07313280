"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, compval.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# --- compval.toml sections ---


class MessagesConfig(BaseModel):
    """[messages] section.

    ``templates`` maps an error code (``notSame``, ``notLessThan``, ...) to a
    replacement template applied to every rule built by the CLI.
    """

    model_config = {"frozen": True}

    value_obscured: bool = False
    message_length: int = -1
    templates: dict[str, str] = Field(default_factory=dict)


class LessThanConfig(BaseModel):
    """[less_than] section."""

    model_config = {"frozen": True}

    inclusive: bool = False


class IdenticalConfig(BaseModel):
    """[identical] section."""

    model_config = {"frozen": True}

    strict: bool = True
    literal: bool = False


class CompvalConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    less_than: LessThanConfig = Field(default_factory=LessThanConfig)
    identical: IdenticalConfig = Field(default_factory=IdenticalConfig)


def rule_message_options(messages: MessagesConfig, codes: list[str]) -> dict[str, Any]:
    """Translate the [messages] section into rule options.

    Only templates for *codes* are passed on, since a rule rejects
    overrides for codes it does not report.
    """
    return {
        "value_obscured": messages.value_obscured,
        "message_length": messages.message_length,
        "messages": {code: text for code, text in messages.templates.items() if code in codes},
    }
