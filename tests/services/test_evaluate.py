"""Tests for EvaluationService."""

from pathlib import Path
from typing import Any

import pytest

from compval.config.settings import CompvalSettings
from compval.domain.parameters import Parameters
from compval.services.evaluate import (
    INVALID_CONFIGURATION,
    INVALID_CONTEXT,
    EvaluationService,
)


@pytest.fixture
def service(settings: CompvalSettings) -> EvaluationService:
    return EvaluationService(settings)


def _service_with(tmp_path: Path, toml: str) -> EvaluationService:
    (tmp_path / "compval.toml").write_text(toml)
    return EvaluationService(CompvalSettings.from_cli(start=tmp_path))


class TestLessThan:
    def test_valid(self, service: EvaluationService) -> None:
        result = service.less_than(5, bound=10)
        assert result.ok is True
        assert result.op == "less_than"
        assert result.data == {
            "rule": "LessThan(max=10, inclusive=False)",
            "value": 5,
            "valid": True,
        }
        assert result.error is None

    def test_invalid(self, service: EvaluationService) -> None:
        result = service.less_than(10, bound=10)
        assert result.ok is False
        assert result.data["valid"] is False
        assert result.error is not None
        assert result.error.code == "notLessThan"
        assert result.error.message == "The input is not less than '10'"
        assert result.error.detail == {
            "messages": {"notLessThan": "The input is not less than '10'"}
        }

    def test_inclusive(self, service: EvaluationService) -> None:
        assert service.less_than(10, bound=10, inclusive=True).ok is True
        result = service.less_than(11, bound=10, inclusive=True)
        assert result.error is not None
        assert result.error.code == "notLessThanInclusive"

    def test_missing_bound(self, service: EvaluationService) -> None:
        result = service.less_than(1, bound=None)
        assert result.ok is False
        assert "valid" not in result.data
        assert result.error is not None
        assert result.error.code == INVALID_CONFIGURATION
        assert "max" in result.error.message

    def test_inclusive_from_config(self, tmp_path: Path) -> None:
        service = _service_with(tmp_path, "[less_than]\ninclusive = true\n")
        assert service.less_than(10, bound=10).ok is True
        assert service.less_than(10, bound=10, inclusive=False).ok is False


class TestIdentical:
    def test_literal_match(self, service: EvaluationService) -> None:
        result = service.identical("foo", token="foo")
        assert result.ok is True
        assert result.data["with_context"] is False
        assert result.warnings == []

    def test_context_match(self, service: EvaluationService, form_context: dict[str, Any]) -> None:
        result = service.identical("john@doe.com", token=["user", "email"], context=form_context)
        assert result.ok is True
        assert result.data["with_context"] is True

    def test_parameters_context(self, service: EvaluationService) -> None:
        ctx = Parameters.from_query_string("user[email]=a%40b.c")
        assert service.identical("a@b.c", token={"user": "email"}, context=ctx).ok is True

    def test_mismatch(self, service: EvaluationService) -> None:
        result = service.identical("bar", token="foo")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "notSame"
        assert result.error.message == "The two given tokens do not match"

    def test_missing_token(self, service: EvaluationService) -> None:
        result = service.identical("bar")
        assert result.error is not None
        assert result.error.code == "missingToken"

    def test_loose(self, service: EvaluationService) -> None:
        assert service.identical("123", token=123).ok is False
        assert service.identical("123", token=123, strict=False).ok is True

    def test_invalid_context(self, service: EvaluationService) -> None:
        result = service.identical("x", token="email", context="dummy")
        assert result.ok is False
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == INVALID_CONTEXT
        assert "str" in result.error.message

    def test_path_without_context_warns(self, service: EvaluationService) -> None:
        result = service.identical("user.email", token=["user", "email"])
        assert result.ok is False
        assert result.warnings == [
            "Token looks like the path user.email but no context was given; comparing it literally"
        ]

    def test_single_key_token_does_not_warn(self, service: EvaluationService) -> None:
        assert service.identical("email", token="email").warnings == []

    def test_literal_does_not_warn(self, service: EvaluationService) -> None:
        result = service.identical(["a", "b"], token=["a", "b"], literal=True)
        assert result.ok is True
        assert result.warnings == []

    def test_strict_and_literal_from_config(self, tmp_path: Path) -> None:
        service = _service_with(tmp_path, "[identical]\nstrict = false\nliteral = true\n")
        assert service.identical("1", token=1).ok is True
        assert service.identical("email", token="email", context={"email": "x"}).ok is True


class TestMessagesConfig:
    def test_templates_from_config(self, tmp_path: Path) -> None:
        service = _service_with(
            tmp_path,
            '[messages.templates]\nnotSame = "Mismatch: %value%"\nnotLessThan = "Too big"\n',
        )
        result = service.identical("abc", token="xyz")
        assert result.error is not None
        assert result.error.message == "Mismatch: abc"
        result = service.less_than(3, bound=1)
        assert result.error is not None
        assert result.error.message == "Too big"

    def test_obscured_and_truncated(self, tmp_path: Path) -> None:
        service = _service_with(
            tmp_path,
            "[messages]\nvalue_obscured = true\nmessage_length = 8\n"
            '[messages.templates]\nnotSame = "%value% is wrong"\n',
        )
        result = service.identical("secret", token="other")
        assert result.error is not None
        assert result.error.message == "*****..."
