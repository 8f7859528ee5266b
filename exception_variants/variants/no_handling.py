"""
No-handling baseline.

Failure cases construct an IntentionalError and drop it without raising, so
the allocation cost is measured apart from any control-flow transfer.
"""
from __future__ import annotations

from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError

VARIANT_NAME = "no_handling"
DESCRIPTION = "construct error, never raise, no try"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        if i < threshold:
            dummy = IntentionalError("dummy")  # noqa: F841
