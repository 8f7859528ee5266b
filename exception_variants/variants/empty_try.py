"""
Empty-guard variant.

Same work as the baseline, wrapped in a try block whose handler never fires.
"""
from __future__ import annotations

from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError

VARIANT_NAME = "empty_try"
DESCRIPTION = "construct error inside try, never raise"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        try:
            if i < threshold:
                dummy = IntentionalError("dummy")  # noqa: F841
        except IntentionalError:
            pass
