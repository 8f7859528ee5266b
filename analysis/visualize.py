"""
Visualisation module for the exception handling comparison.

Generates the following plots and saves them as PNG files:
1. mean_time_by_variant.png   — bar chart with 99.9% CI error bars
2. ratio_to_baseline.png      — horizontal bar chart of mean / baseline mean
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import matplotlib
matplotlib.use("Agg")  # non-interactive backend
import matplotlib.pyplot as plt
import numpy as np
import structlog

logger = structlog.get_logger(__name__)

PALETTE = [
    "#e41a1c", "#377eb8", "#4daf4a", "#984ea3",
    "#ff7f00", "#a65628", "#f781bf", "#999999",
]


def _load(results_path: str) -> tuple[list[dict[str, Any]], str]:
    with open(results_path) as fh:
        data = json.load(fh)
    timings = [t for t in data.get("results", []) if not t.get("error")]
    return timings, data.get("baseline", "no_handling")


def generate_plots(results_path: str, output_dir: str) -> list[str]:
    """
    Generate all comparison plots.

    Args:
        results_path: Path to summary.json produced by run_experiment.py
        output_dir:   Directory where PNG files will be saved

    Returns:
        List of output file paths.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    timings, baseline = _load(results_path)
    if not timings:
        logger.warning("no_timings_found", path=results_path)
        return []

    variants = [t["variant"] for t in timings]
    colors = [PALETTE[i % len(PALETTE)] for i in range(len(variants))]
    means = np.array([t.get("mean_us", 0.0) for t in timings])
    errors = np.array([t.get("error_us", 0.0) for t in timings])
    saved: list[str] = []

    # ── 1. Mean time per call ────────────────────────────────────────────────
    fig, ax = plt.subplots(figsize=(10, 5))
    x = np.arange(len(variants))
    bars = ax.bar(x, means, yerr=errors, capsize=4, color=colors)
    ax.set_title("Mean Time per Run by Variant (us)", fontsize=14)
    ax.set_ylabel("Mean (us) — lower = faster")
    ax.set_xticks(x)
    ax.set_xticklabels(variants, rotation=30, ha="right")
    for bar, val in zip(bars, means):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                f"{val:.1f}", ha="center", va="bottom", fontsize=9)
    plt.tight_layout()
    p = str(out / "mean_time_by_variant.png")
    fig.savefig(p, dpi=150)
    plt.close(fig)
    saved.append(p)

    # ── 2. Ratio to baseline ──────────────────────────────────────────────────
    baseline_mean = next(
        (t.get("mean_us", 0.0) for t in timings if t["variant"] == baseline), 0.0
    )
    ratios = means / baseline_mean if baseline_mean else np.zeros_like(means)
    fig, ax = plt.subplots(figsize=(10, 5))
    h_bars = ax.barh(variants, ratios, color=colors)
    ax.axvline(1.0, color="black", linewidth=1, linestyle="--")
    ax.set_title(f"Cost Relative to {baseline}", fontsize=14)
    ax.set_xlabel("Ratio (1.0 = baseline)")
    for bar, val in zip(h_bars, ratios):
        ax.text(val, bar.get_y() + bar.get_height() / 2,
                f" {val:.2f}", va="center", fontsize=9)
    plt.tight_layout()
    p = str(out / "ratio_to_baseline.png")
    fig.savefig(p, dpi=150)
    plt.close(fig)
    saved.append(p)

    logger.info("plots_generated", count=len(saved), output_dir=output_dir)
    return saved


if __name__ == "__main__":
    import sys

    rp = sys.argv[1] if len(sys.argv) > 1 else "results/summary.json"
    od = sys.argv[2] if len(sys.argv) > 2 else "results"
    generate_plots(rp, od)
