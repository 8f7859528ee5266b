"""
Results comparison utilities.

Loads the timing summary JSON and produces a Pandas DataFrame with a
per-variant comparison table, printed via Rich.
"""
from __future__ import annotations

import json
from typing import Any

import pandas as pd
from rich.console import Console
from rich.table import Table

DEFAULT_BASELINE = "no_handling"

COLUMNS = [
    "Variant",
    "Mean (us)",
    "Error (us)",
    "StdDev (us)",
    "Median (us)",
    "Ratio",
    "Failures",
    "Iterations",
]


def load_results(path: str) -> dict[str, Any]:
    """Load the summary JSON produced by run_experiment.py or the runner."""
    with open(path) as fh:
        return json.load(fh)


def generate_comparison_table(results: dict[str, Any]) -> pd.DataFrame:
    """
    Build a DataFrame from the results dict.

    Rows keep harness order; variants that errored are left out. Ratio is the
    variant's mean divided by the baseline mean (0.0 if no usable baseline).
    """
    timings = [t for t in results.get("results", []) if not t.get("error")]
    baseline_name = results.get("baseline", DEFAULT_BASELINE)
    baseline_mean = next(
        (t.get("mean_us", 0.0) for t in timings if t.get("variant") == baseline_name),
        0.0,
    )

    rows = []
    for t in timings:
        mean = t.get("mean_us", 0.0)
        rows.append(
            {
                "Variant": t.get("variant", ""),
                "Mean (us)": mean,
                "Error (us)": t.get("error_us", 0.0),
                "StdDev (us)": t.get("stddev_us", 0.0),
                "Median (us)": t.get("median_us", 0.0),
                "Ratio": round(mean / baseline_mean, 2) if baseline_mean else 0.0,
                "Failures": t.get("exception_threshold", 0),
                "Iterations": t.get("iterations", 0),
            }
        )

    return pd.DataFrame(rows, columns=COLUMNS)


def print_comparison(df: pd.DataFrame, console: Console | None = None) -> None:
    """Print the comparison DataFrame as a Rich table."""
    console = console or Console()
    table = Table(title="Exceptions vs Result Pattern", show_lines=True)

    for col in df.columns:
        table.add_column(col, justify="right" if col != "Variant" else "left")

    for _, row in df.iterrows():
        cells = []
        for col in df.columns:
            val = row[col]
            if isinstance(val, float):
                cells.append(f"{val:.2f}" if col == "Ratio" else f"{val:.3f}")
            else:
                cells.append(str(val))
        table.add_row(*cells)

    console.print(table)


if __name__ == "__main__":
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else "results/summary.json"
    results = load_results(path)
    df = generate_comparison_table(results)
    print_comparison(df)
