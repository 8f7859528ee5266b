"""
Benchmark configuration.

Values come from BENCH_* environment variables with the defaults below.
DEFAULT_CONFIG is built once at import time and shared by every variant.
"""
from __future__ import annotations

import os

from pydantic import BaseModel, Field

ITERATIONS: int = 1000
PERCENT_EXCEPTIONS: float = 1.0
WARMUP_ROUNDS: int = 3
ROUNDS: int = 30


class BenchmarkConfig(BaseModel):
    """Loop bound, failure injection rate and harness round counts."""

    iterations: int = Field(default=ITERATIONS, ge=0)
    percent_exceptions: float = Field(default=PERCENT_EXCEPTIONS, ge=0, le=100)
    warmup_rounds: int = Field(default=WARMUP_ROUNDS, ge=0)
    rounds: int = Field(default=ROUNDS, ge=1)

    model_config = {"frozen": True}

    @property
    def exception_threshold(self) -> int:
        """Iterations with index below this value take the failure path (truncated)."""
        return int(self.iterations * (self.percent_exceptions / 100.0))

    @classmethod
    def from_env(cls) -> BenchmarkConfig:
        return cls(
            iterations=os.getenv("BENCH_ITERATIONS", str(ITERATIONS)),
            percent_exceptions=os.getenv("BENCH_PERCENT_EXCEPTIONS", str(PERCENT_EXCEPTIONS)),
            warmup_rounds=os.getenv("BENCH_WARMUP_ROUNDS", str(WARMUP_ROUNDS)),
            rounds=os.getenv("BENCH_ROUNDS", str(ROUNDS)),
        )


DEFAULT_CONFIG: BenchmarkConfig = BenchmarkConfig.from_env()
