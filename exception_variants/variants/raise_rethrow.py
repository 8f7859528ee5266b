"""
Raise-catch-rethrow variant.

Failure cases raise, catch, wrap the original in a WrappedError (chained
through ``__cause__``) and raise again into an outer handler. Two errors are
built and two handlers run per failure.
"""
from __future__ import annotations

from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.errors import IntentionalError, WrappedError

VARIANT_NAME = "raise_rethrow"
DESCRIPTION = "raise error, catch, wrap and re-raise"


def run(config: BenchmarkConfig = DEFAULT_CONFIG) -> None:
    threshold = config.exception_threshold
    for i in range(config.iterations):
        try:
            try:
                if i < threshold:
                    raise IntentionalError("dummy")
            except IntentionalError as exc:
                raise WrappedError("Rethrowing exception") from exc
        except WrappedError:
            pass
