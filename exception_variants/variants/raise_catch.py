"""Raise-and-catch variant: failure cases raise and are caught in the same frame."""
from __future__ import annotations

from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError

VARIANT_NAME = "raise_catch"
DESCRIPTION = "raise error, catch locally"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        try:
            if i < threshold:
                raise IntentionalError("dummy")
        except IntentionalError:
            pass
