from __future__ import annotations

from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from sortbench.orchestrator import ExperimentReport
from sortbench.strategies.baseline import BASELINE


def _speedup_vs_baseline(elapsed_ms: float, baseline_ms: Optional[float]) -> str:
    """How many times slower than the baseline the algorithm ran."""
    if baseline_ms is None or baseline_ms <= 0:
        return "N/A"
    return f"x{elapsed_ms / baseline_ms:,.1f}"


def print_results(report: ExperimentReport, console: Optional[Console] = None) -> None:
    """
    Render experiment timings as a rich table.

    Rows are grouped by configured dataset size in execution order; the baseline
    column shows each algorithm's time relative to the library sort on the same
    data. The RSS column is sampled at the start and end of each size's cycle, so
    it is not a true peak.
    """
    console = console or Console()

    if not report.results:
        console.print("[yellow]No results to display.[/yellow]")
    else:
        show_verified = any(r.verified is not None for r in report.results)

        table = Table(
            title="Service Sort Benchmark Results",
            box=box.ROUNDED,
            caption=f"Timing log: {report.timing_log_path}",
        )
        table.add_column("Dataset Size", justify="right", style="magenta")
        table.add_column("Algorithm", style="cyan", no_wrap=True)
        table.add_column("Time (ms)", justify="right", style="green")
        table.add_column(f"vs {BASELINE.label}", justify="right", style="bold green")
        table.add_column("RSS entry/exit max (MB)", justify="right", style="yellow")
        if show_verified:
            table.add_column("Verified", justify="center")

        baselines: Dict[int, float] = {
            r.nominal_size: r.elapsed_ms for r in report.results if r.algorithm == BASELINE.name
        }

        previous_size: Optional[int] = None
        for res in report.results:
            if previous_size is not None and res.nominal_size != previous_size:
                table.add_section()
            previous_size = res.nominal_size

            stats = report.profiles.get(res.nominal_size)
            mem_bytes = stats.peak_rss_bytes if stats and stats.peak_rss_bytes else 0
            row = [
                f"{res.dataset_size:,}",
                res.label,
                f"{res.elapsed_ms:,.4f}",
                _speedup_vs_baseline(res.elapsed_ms, baselines.get(res.nominal_size)),
                f"{mem_bytes / (1024 * 1024):.2f}",
            ]
            if show_verified:
                if res.verified is None:
                    row.append("-")
                else:
                    row.append("[green]yes[/green]" if res.verified else "[red]NO[/red]")
            table.add_row(*row)

        console.print(table)

    if report.skipped_sizes:
        skipped = ", ".join(str(size) for size in report.skipped_sizes)
        console.print(f"[yellow]Skipped dataset sizes: {skipped}[/yellow]")

    if report.sorted_output_path is not None:
        console.print(
            f"Sorted output ({report.sorted_output_rows:,} records): {report.sorted_output_path}"
        )
    else:
        console.print("[yellow]No sorted output file was produced.[/yellow]")


__all__ = ["print_results"]
