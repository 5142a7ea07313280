"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest

from compval.output.formatters import OutputSettings, format_result
from compval.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data={"valid": True, **data})


def _err(op: str = "test", code: str = "notSame") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        data={"valid": False},
        error=ServiceError(code=code, message="fail"),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(ValueError):
            s.quiet = True  # type: ignore[misc]


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("identical", value="x"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "identical"
        assert data["data"]["value"] == "x"

    def test_json_error(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_err(code="notLessThan"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "notLessThan"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True

    def test_quiet(self) -> None:
        settings = OutputSettings(quiet=True)
        assert format_result(_ok(), settings=settings) == "valid"
        assert format_result(_err(), settings=settings) == "invalid: notSame"

    def test_default_is_rich(self) -> None:
        assert format_result(_ok("less_than")).startswith("VALID  less_than")
