"""Tests for the comparison table."""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from analysis.compare import COLUMNS, generate_comparison_table, load_results, print_comparison


def _timing(variant: str, mean: float, **extra) -> dict:
    return {
        "variant": variant,
        "mean_us": mean,
        "error_us": 0.5,
        "stddev_us": 1.0,
        "median_us": mean,
        "exception_threshold": 10,
        "iterations": 1000,
        "error": None,
        **extra,
    }


SUMMARY = {
    "baseline": "no_handling",
    "results": [
        _timing("no_handling", 20.0),
        _timing("raise_catch", 50.0),
        _timing("broken", 0.0, error="RuntimeError: boom"),
        _timing("result_success", 30.0),
    ],
}


class TestComparisonTable:
    def test_keeps_order_and_drops_errors(self) -> None:
        df = generate_comparison_table(SUMMARY)

        assert list(df.columns) == COLUMNS
        assert list(df["Variant"]) == ["no_handling", "raise_catch", "result_success"]

    def test_ratio_against_baseline(self) -> None:
        df = generate_comparison_table(SUMMARY).set_index("Variant")

        assert df.loc["no_handling", "Ratio"] == 1.0
        assert df.loc["raise_catch", "Ratio"] == 2.5
        assert df.loc["result_success", "Ratio"] == 1.5

    def test_missing_baseline_gives_zero_ratio(self) -> None:
        summary = {"baseline": "no_handling", "results": [_timing("raise_catch", 50.0)]}

        df = generate_comparison_table(summary)

        assert df.loc[0, "Ratio"] == 0.0

    def test_empty_results(self) -> None:
        df = generate_comparison_table({"results": []})

        assert df.empty
        assert list(df.columns) == COLUMNS

    def test_load_and_print(self, tmp_path: Path) -> None:
        path = tmp_path / "summary.json"
        path.write_text(json.dumps(SUMMARY))
        console = Console(record=True, width=200)

        print_comparison(generate_comparison_table(load_results(str(path))), console)

        output = console.export_text()
        assert "raise_catch" in output
        assert "2.50" in output
        assert "broken" not in output
