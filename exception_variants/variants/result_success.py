"""Result pattern, success branch: read the payload when the chain succeeds."""
from __future__ import annotations

from exception_variants import chains
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig

VARIANT_NAME = "result_success"
DESCRIPTION = "Result returned 3 calls deep, success branch reads value"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        result = chains.call_nested_with_result(i < threshold)
        if result.is_success:
            value = result.value  # noqa: F841
