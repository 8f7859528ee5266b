"""Variant modules timed by the runner, in report order."""
from __future__ import annotations

from exception_variants.variants import (
    empty_try,
    nested_no_raise,
    nested_raise,
    no_handling,
    raise_catch,
    raise_rethrow,
    result_failure,
    result_success,
)

__all__ = [
    "empty_try",
    "nested_no_raise",
    "nested_raise",
    "no_handling",
    "raise_catch",
    "raise_rethrow",
    "result_failure",
    "result_success",
]
