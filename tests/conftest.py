"""Shared fixtures: small configs and counting stand-ins for the synthetic errors."""
from __future__ import annotations

import pytest

from exception_variants import chains
from exception_variants.config import BenchmarkConfig
from exception_variants.errors import IntentionalError, WrappedError
from exception_variants.variants import (
    empty_try,
    nested_no_raise,
    nested_raise,
    no_handling,
    raise_catch,
    raise_rethrow,
)

ERROR_USERS = [
    no_handling,
    empty_try,
    raise_catch,
    raise_rethrow,
    nested_raise,
    nested_no_raise,
    chains,
]


@pytest.fixture
def small_config() -> BenchmarkConfig:
    """A config cheap enough to time every variant inside a unit test."""
    return BenchmarkConfig(iterations=100, percent_exceptions=10, warmup_rounds=1, rounds=3)


@pytest.fixture
def created_errors(monkeypatch: pytest.MonkeyPatch) -> list[IntentionalError]:
    """Swap IntentionalError for a subclass that records every instance built."""
    created: list[IntentionalError] = []

    class CountingError(IntentionalError):
        def __init__(self, *args: object) -> None:
            super().__init__(*args)
            created.append(self)

    for module in ERROR_USERS:
        monkeypatch.setattr(module, "IntentionalError", CountingError)
    return created


@pytest.fixture
def wrapped_errors(monkeypatch: pytest.MonkeyPatch) -> list[WrappedError]:
    """Swap WrappedError in the rethrow variant for a recording subclass."""
    created: list[WrappedError] = []

    class CountingWrappedError(WrappedError):
        def __init__(self, *args: object) -> None:
            super().__init__(*args)
            created.append(self)

    monkeypatch.setattr(raise_rethrow, "WrappedError", CountingWrappedError)
    return created
