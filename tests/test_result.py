"""Tests for the Result sentinel type."""
from __future__ import annotations

import dataclasses

import pytest

from exception_variants.result import Result


class TestResult:
    def test_success_carries_value(self) -> None:
        result = Result.success("payload")

        assert result.is_success is True
        assert result.value == "payload"
        assert result.error is None

    def test_failure_carries_message(self) -> None:
        result: Result[str] = Result.failure("An error occurred")

        assert result.is_success is False
        assert result.error == "An error occurred"

    def test_failure_has_default_payload(self) -> None:
        assert Result.failure("boom").value is None

    def test_falsy_payload_is_still_success(self) -> None:
        result = Result.success(0)

        assert result.is_success
        assert result.value == 0

    def test_result_is_immutable(self) -> None:
        result = Result.success("payload")

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = "other"  # type: ignore[misc]
