"""
Variant timing harness.

Runs every variant through warm-up and measured rounds, computes per-call
statistics, writes JSON to results/variant_timings.json and prints a Rich
summary table.
"""
from __future__ import annotations

import json
import math
import statistics
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from types import ModuleType

import structlog
from rich.console import Console
from rich.table import Table

from exception_variants import VariantTiming
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.variants import (
    empty_try,
    nested_no_raise,
    nested_raise,
    no_handling,
    raise_catch,
    raise_rethrow,
    result_failure,
    result_success,
)

logger = structlog.get_logger(__name__)

VARIANTS: list[ModuleType] = [
    no_handling,
    empty_try,
    raise_catch,
    raise_rethrow,
    nested_raise,
    nested_no_raise,
    result_success,
    result_failure,
]

BASELINE_VARIANT = no_handling.VARIANT_NAME

# Two-sided 99.9% confidence interval.
CONFIDENCE_Z = statistics.NormalDist().inv_cdf(0.9995)

RESULTS_DIR = Path("results")


def _variant_name(module: ModuleType) -> str:
    return getattr(module, "VARIANT_NAME", module.__name__)


def measure_variant(module: ModuleType, config: BenchmarkConfig = DEFAULT_CONFIG) -> VariantTiming:
    """Time `module.run(config)` and return per-call statistics in microseconds."""
    name = _variant_name(module)
    logger.info(
        "variant_measure_start",
        variant=name,
        rounds=config.rounds,
        warmup_rounds=config.warmup_rounds,
    )

    for _ in range(config.warmup_rounds):
        module.run(config)

    samples: list[float] = []
    for _ in range(config.rounds):
        t0 = time.perf_counter()
        module.run(config)
        samples.append((time.perf_counter() - t0) * 1_000_000)

    mean = statistics.fmean(samples)
    stddev = statistics.stdev(samples) if len(samples) > 1 else 0.0
    error = CONFIDENCE_Z * stddev / math.sqrt(len(samples))

    timing = VariantTiming(
        variant=name,
        description=getattr(module, "DESCRIPTION", ""),
        rounds=config.rounds,
        iterations=config.iterations,
        exception_threshold=config.exception_threshold,
        mean_us=round(mean, 3),
        error_us=round(error, 3),
        stddev_us=round(stddev, 3),
        median_us=round(statistics.median(samples), 3),
        min_us=round(min(samples), 3),
        max_us=round(max(samples), 3),
    )
    logger.info("variant_measure_done", variant=name, mean_us=timing.mean_us)
    return timing


def run_all(
    config: BenchmarkConfig = DEFAULT_CONFIG,
    variants: list[ModuleType] | None = None,
) -> list[VariantTiming]:
    """Measure every variant and return the timings in order."""
    timings: list[VariantTiming] = []

    for module in variants if variants is not None else VARIANTS:
        try:
            timing = measure_variant(module, config)
        except Exception as exc:
            logger.error("variant_measure_failed", variant=_variant_name(module), error=str(exc))
            timing = VariantTiming(
                variant=_variant_name(module),
                description=getattr(module, "DESCRIPTION", ""),
                rounds=config.rounds,
                iterations=config.iterations,
                exception_threshold=config.exception_threshold,
                error=f"{type(exc).__name__}: {exc}",
            )
        timings.append(timing)

    return timings


def build_summary(timings: list[VariantTiming], config: BenchmarkConfig) -> dict:
    return {
        "run_at": datetime.now(timezone.utc).isoformat(),
        "config": {
            **config.model_dump(),
            "exception_threshold": config.exception_threshold,
        },
        "baseline": BASELINE_VARIANT,
        "results": [t.to_dict() for t in timings],
    }


def save_results(
    timings: list[VariantTiming],
    config: BenchmarkConfig = DEFAULT_CONFIG,
    output_dir: Path = RESULTS_DIR,
    filename: str = "variant_timings.json",
) -> Path:
    """Serialise timings to JSON."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / filename
    with open(output_path, "w") as fh:
        json.dump(build_summary(timings, config), fh, indent=2)
    logger.info("summary_saved", path=str(output_path))
    return output_path


def print_table(timings: list[VariantTiming], console: Console | None = None) -> None:
    """Print Rich summary table."""
    console = console or Console()
    table = Table(title="Exception Handling Variants", show_lines=True)
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Mean (us)", justify="right")
    table.add_column("Error (us)", justify="right")
    table.add_column("StdDev (us)", justify="right")
    table.add_column("Failures", justify="right", style="magenta")

    for t in timings:
        if t.error:
            table.add_row(t.variant, t.description, f"[red]{t.error}[/red]", "", "", "")
            continue
        table.add_row(
            t.variant,
            t.description,
            f"{t.mean_us:.3f}",
            f"{t.error_us:.3f}",
            f"{t.stddev_us:.3f}",
            f"{t.exception_threshold}/{t.iterations}",
        )

    console.print(table)
    failed = sum(1 for t in timings if t.error)
    console.print(f"\n[bold]Variants: {len(timings)}  Errors: {failed}[/bold]")


def main() -> None:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else RESULTS_DIR
    timings = run_all(DEFAULT_CONFIG)
    path = save_results(timings, DEFAULT_CONFIG, output_dir)
    print_table(timings)
    print(f"\nResults written to {path}")


if __name__ == "__main__":
    main()
