"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Every EvaluationService method returns a ServiceResult, even for
configuration and context errors. Exceptions never cross this boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is a rule error code (``notSame``, ``notLessThan``, ...) for
    validation failures, or ``INVALID_CONFIGURATION`` / ``INVALID_CONTEXT``
    when the evaluation could not run.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the value passed the rule.
        op: Name of the operation (``"less_than"`` or ``"identical"``).
        data: Evaluation summary (rule, value, validity).
        warnings: Non-fatal observations, e.g. a path token without context.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
