"""Nested baseline: failure cases build an error 3 calls deep but never raise it."""
from __future__ import annotations

from exception_variants import chains
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError

VARIANT_NAME = "nested_no_raise"
DESCRIPTION = "construct error 3 calls deep inside try, never raise"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        try:
            if i < threshold:
                chains.call_nested_constructing_exception()
        except IntentionalError:
            pass
