"""pytest-benchmark suite: one benchmark per variant, grouped for comparison."""
from __future__ import annotations

import pytest

pytest.importorskip("pytest_benchmark")

from exception_variants.runner import VARIANTS  # noqa: E402


@pytest.mark.benchmark(group="exceptions_vs_result")
@pytest.mark.parametrize("module", VARIANTS, ids=[m.VARIANT_NAME for m in VARIANTS])
def test_bench_variant(benchmark, module) -> None:
    assert benchmark(module.run) is None
