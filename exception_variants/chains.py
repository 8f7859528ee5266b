"""
Three-level call chains used by the nested variants.

Every chain goes level_one -> level_two -> level_three -> innermost. The
intermediate frames only forward; they never catch or rewrite what the
innermost function raises or returns.
"""
from __future__ import annotations

from exception_variants.errors import IntentionalError
from exception_variants.result import Result

NESTED_ERROR_MESSAGE = "This is an intentional error for demonstration purposes."
RESULT_ERROR_MESSAGE = "An error occurred"
RESULT_PAYLOAD = "ok"


# ---------------------------------------------------------------------------
# Raising chain
# ---------------------------------------------------------------------------


def call_nested_with_exception() -> None:
    _another_nested_with_exception()


def _another_nested_with_exception() -> None:
    _another_level_nested_with_exception()


def _another_level_nested_with_exception() -> None:
    _final_with_exception()


def _final_with_exception() -> None:
    raise IntentionalError(NESTED_ERROR_MESSAGE)


# ---------------------------------------------------------------------------
# Returning chain (innermost returns normally)
# ---------------------------------------------------------------------------


def call_nested_without_exception() -> None:
    _another_nested_without_exception()


def _another_nested_without_exception() -> None:
    _another_level_nested_without_exception()


def _another_level_nested_without_exception() -> None:
    _final_without_exception()


def _final_without_exception() -> None:
    return None


# ---------------------------------------------------------------------------
# Constructing chain (innermost builds an error but does not raise it)
# ---------------------------------------------------------------------------


def call_nested_constructing_exception() -> None:
    _another_nested_constructing_exception()


def _another_nested_constructing_exception() -> None:
    _another_level_nested_constructing_exception()


def _another_level_nested_constructing_exception() -> None:
    _final_constructing_exception()


def _final_constructing_exception() -> None:
    dummy = IntentionalError(NESTED_ERROR_MESSAGE)  # noqa: F841


# ---------------------------------------------------------------------------
# Result chain
# ---------------------------------------------------------------------------


def call_nested_with_result(simulate_error: bool) -> Result[str]:
    return _another_nested_with_result(simulate_error)


def _another_nested_with_result(simulate_error: bool) -> Result[str]:
    return _another_level_nested_with_result(simulate_error)


def _another_level_nested_with_result(simulate_error: bool) -> Result[str]:
    return _final_with_result(simulate_error)


def _final_with_result(simulate_error: bool) -> Result[str]:
    # Where the raising chain would throw, return a failure value instead.
    if simulate_error:
        return Result.failure(RESULT_ERROR_MESSAGE)
    return Result.success(RESULT_PAYLOAD)
