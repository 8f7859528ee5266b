"""
Nested-raise variant.

Failure cases raise three frames below the handler; success cases walk the
same depth and return normally.
"""
from __future__ import annotations

from exception_variants import chains
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError

VARIANT_NAME = "nested_raise"
DESCRIPTION = "raise error 3 calls deep, catch at the top"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        try:
            if i < threshold:
                chains.call_nested_with_exception()
            else:
                chains.call_nested_without_exception()
        except IntentionalError:
            pass
