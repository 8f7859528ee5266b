"""Result pattern, failure branch: read the message when the chain fails."""
from __future__ import annotations

from exception_variants import chains
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig

VARIANT_NAME = "result_failure"
DESCRIPTION = "Result returned 3 calls deep, failure branch reads error"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        result = chains.call_nested_with_result(i < threshold)
        if not result.is_success:
            error = result.error  # noqa: F841
