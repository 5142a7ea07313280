"""EvaluationService — run one rule against one value and report.

Wraps the rule API for the CLI: builds the rule from settings plus
per-call options, evaluates, and folds validation failures and caller
errors into a ServiceResult.
"""

from __future__ import annotations

from typing import Any

from compval.domain.tokens import token_path
from compval.errors import InvalidArgumentError, InvalidConfigurationError
from compval.rules.base import ComparisonRule
from compval.rules.identical import Identical
from compval.rules.less_than import LessThan
from compval.services.base import BaseService
from compval.services.result import ServiceError, ServiceResult

INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
INVALID_CONTEXT = "INVALID_CONTEXT"


class EvaluationService(BaseService):
    """Evaluate LessThan and Identical rules."""

    def less_than(
        self,
        value: Any,
        *,
        bound: Any,
        inclusive: bool | None = None,
    ) -> ServiceResult:
        """Check ``value < bound`` (``<=`` when inclusive).

        *inclusive* defaults to the ``[less_than]`` config section.
        """
        op = "less_than"
        if inclusive is None:
            inclusive = self._settings.less_than.inclusive
        try:
            rule = self._build_rule(LessThan, max=bound, inclusive=inclusive)
        except InvalidConfigurationError as exc:
            return self._failure(op, INVALID_CONFIGURATION, str(exc))
        return self._report(op, rule, rule.is_valid(value))

    def identical(
        self,
        value: Any,
        *,
        token: Any = None,
        context: Any = None,
        strict: bool | None = None,
        literal: bool | None = None,
    ) -> ServiceResult:
        """Check *value* against *token*, resolved through *context*.

        *strict* and *literal* default to the ``[identical]`` config section.
        """
        op = "identical"
        if strict is None:
            strict = self._settings.identical.strict
        if literal is None:
            literal = self._settings.identical.literal
        try:
            rule = self._build_rule(Identical, token=token, strict=strict, literal=literal)
        except InvalidConfigurationError as exc:
            return self._failure(op, INVALID_CONFIGURATION, str(exc))

        warnings: list[str] = []
        path = token_path(token)
        if context is None and not literal and path is not None and len(path) > 1:
            warnings.append(
                f"Token looks like the path {'.'.join(map(str, path))} but no context "
                "was given; comparing it literally"
            )

        try:
            valid = rule.is_valid(value, context)
        except InvalidArgumentError as exc:
            return self._failure(op, INVALID_CONTEXT, str(exc))
        return self._report(op, rule, valid, warnings=warnings, with_context=context is not None)

    @staticmethod
    def _report(
        op: str,
        rule: ComparisonRule,
        valid: bool,
        *,
        warnings: list[str] | None = None,
        **extra: Any,
    ) -> ServiceResult:
        data = {"rule": repr(rule), "value": rule.value, "valid": valid, **extra}
        if valid:
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])

        messages = {str(code): text for code, text in rule.get_messages().items()}
        code = str(rule.errors[0])
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=warnings or [],
            error=ServiceError(code=code, message=messages[code], detail={"messages": messages}),
        )
