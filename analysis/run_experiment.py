"""
Experiment orchestrator.

Runs the full exceptions-vs-result comparison:
  1. Time every variant
  2. Compile summary.json
  3. Generate comparison table
  4. Generate plots
  5. Print final summary
"""
from __future__ import annotations

import sys
from pathlib import Path

import structlog
from rich.console import Console

from analysis.compare import generate_comparison_table, load_results, print_comparison
from analysis.visualize import generate_plots
from exception_variants.config import DEFAULT_CONFIG, BenchmarkConfig
from exception_variants.runner import run_all, save_results

RESULTS_DIR = Path("results")

console = Console()
logger = structlog.get_logger(__name__)


def configure_logging() -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def run_experiment(
    output_dir: Path = RESULTS_DIR,
    config: BenchmarkConfig = DEFAULT_CONFIG,
) -> Path:
    """Execute the full experiment pipeline and return the summary path."""
    output_dir = Path(output_dir)
    console.rule("[bold blue]Exception Handling Benchmark")
    console.print(
        f"  iterations={config.iterations} "
        f"percent_exceptions={config.percent_exceptions} "
        f"failures/run={config.exception_threshold} "
        f"rounds={config.rounds} warmup={config.warmup_rounds}"
    )

    # ── Step 1: Time variants ────────────────────────────────────────────────
    console.print("\n[bold]1. Timing variants…[/bold]")
    timings = run_all(config)
    for t in timings:
        status = "[green]✓[/green]" if not t.error else "[red]✗[/red]"
        console.print(f"  {status} {t.variant:<20} mean={t.mean_us:.3f}us ±{t.error_us:.3f}")

    # ── Step 2: Save summary.json ────────────────────────────────────────────
    summary_path = save_results(timings, config, output_dir, filename="summary.json")
    console.print(f"\n  Summary saved to [cyan]{summary_path}[/cyan]")

    # ── Step 3: Comparison table ─────────────────────────────────────────────
    console.print("\n[bold]2. Comparison table:[/bold]\n")
    df = generate_comparison_table(load_results(str(summary_path)))
    print_comparison(df, console)

    # ── Step 4: Plots ─────────────────────────────────────────────────────────
    console.print("\n[bold]3. Generating plots…[/bold]")
    try:
        plots = generate_plots(str(summary_path), str(output_dir))
        for p in plots:
            console.print(f"  [green]✓[/green] {p}")
    except Exception as exc:
        logger.warning("plot_generation_failed", error=str(exc))
        console.print(f"  [yellow]Plot generation failed: {exc}[/yellow]")

    # ── Step 5: Final summary ─────────────────────────────────────────────────
    console.rule("[bold green]Experiment Complete")
    measured = [t for t in timings if not t.error]
    if measured:
        fastest = min(measured, key=lambda t: t.mean_us)
        slowest = max(measured, key=lambda t: t.mean_us)
        console.print(f"  Fastest : [green]{fastest.variant}[/green] ({fastest.mean_us:.3f} us)")
        console.print(f"  Slowest : [red]{slowest.variant}[/red] ({slowest.mean_us:.3f} us)")

    return summary_path


def main() -> None:
    configure_logging()
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else RESULTS_DIR
    run_experiment(output_dir)


if __name__ == "__main__":
    main()
