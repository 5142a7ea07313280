"""BaseService — shared plumbing for service classes.

Every service receives the resolved :class:`CompvalSettings` at
construction time and builds rules with the configured message options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from compval.config.models import rule_message_options
from compval.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from compval.config.settings import CompvalSettings
    from compval.rules.base import ComparisonRule

logger = logging.getLogger(__name__)

RuleT = TypeVar("RuleT", bound="ComparisonRule")


class BaseService:
    """Base for service-layer classes.

    Usage::

        class EvaluationService(BaseService):
            def less_than(self, value: Any, *, bound: Any) -> ServiceResult:
                rule = self._build_rule(LessThan, max=bound)
                ...
    """

    def __init__(self, settings: CompvalSettings) -> None:
        self._settings = settings

    def _build_rule(self, rule_cls: type[RuleT], **options: Any) -> RuleT:
        """Construct *rule_cls* with *options* plus the [messages] config.

        Raises:
            InvalidConfigurationError: *options* are rejected by the rule.
        """
        codes = [str(code) for code in rule_cls.message_templates]
        merged = {**rule_message_options(self._settings.messages, codes), **options}
        return rule_cls(**merged)

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s", op, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
