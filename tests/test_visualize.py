"""Tests for plot generation."""
from __future__ import annotations

import json
from pathlib import Path

from analysis.visualize import generate_plots


def _write_summary(path: Path, results: list[dict]) -> Path:
    path.write_text(json.dumps({"baseline": "no_handling", "results": results}))
    return path


def test_generates_both_plots(tmp_path: Path) -> None:
    summary = _write_summary(
        tmp_path / "summary.json",
        [
            {"variant": "no_handling", "mean_us": 10.0, "error_us": 0.2, "error": None},
            {"variant": "raise_catch", "mean_us": 40.0, "error_us": 1.0, "error": None},
        ],
    )

    saved = generate_plots(str(summary), str(tmp_path / "plots"))

    assert [Path(p).name for p in saved] == ["mean_time_by_variant.png", "ratio_to_baseline.png"]
    assert all(Path(p).stat().st_size > 0 for p in saved)


def test_no_results_generates_nothing(tmp_path: Path) -> None:
    summary = _write_summary(tmp_path / "summary.json", [])

    assert generate_plots(str(summary), str(tmp_path)) == []


def test_missing_baseline_still_plots(tmp_path: Path) -> None:
    summary = _write_summary(
        tmp_path / "summary.json",
        [{"variant": "raise_catch", "mean_us": 40.0, "error_us": 1.0, "error": None}],
    )

    assert len(generate_plots(str(summary), str(tmp_path))) == 2
