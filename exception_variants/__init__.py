"""
Exception handling micro-benchmarks.

Provides the VariantTiming dataclass shared by the timing harness and the
analysis tooling.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class VariantTiming:
    """Timing statistics for a single variant, in microseconds per call."""

    variant: str
    description: str
    rounds: int
    iterations: int
    exception_threshold: int
    mean_us: float = 0.0
    error_us: float = 0.0
    stddev_us: float = 0.0
    median_us: float = 0.0
    min_us: float = 0.0
    max_us: float = 0.0
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
