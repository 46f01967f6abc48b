from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from sortbench.config import get_settings
from sortbench.infrastructure.timing_log import ResultsLogError
from sortbench.orchestrator import (
    RunConfig,
    available_algorithms,
    resolve_algorithms,
    run_experiment,
)
from sortbench.reporter import print_results
from sortbench.utils.logging import configure_logging

app = typer.Typer(help="Service sort benchmark CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"datasets={settings.datasets_dir}/{settings.dataset_filename_pattern} | "
        f"results={settings.results_dir}/{settings.timing_results_filename} | "
        f"sorted_output={settings.sorted_output_template}"
    )
    typer.echo("sizes=" + ", ".join(str(size) for size in settings.dataset_sizes))


@app.command()
def algorithms() -> None:
    """
    List the registered sorting algorithms.
    """
    for algo in resolve_algorithms():
        typer.echo(f"{algo.name:<10} {algo.label} - {algo.description}")


@app.command()
def run(
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-n",
        help="Dataset size to process (repeatable). Defaults to the configured list.",
    ),
    algorithm: str = typer.Option(
        "all",
        "--algorithm",
        "--algorithms",
        "-a",
        help="Comma-separated algorithms (e.g., bubble,shaker) or 'all'. The baseline always runs.",
    ),
    datasets_dir: Optional[Path] = typer.Option(
        None,
        "--datasets-dir",
        "-d",
        help="Directory holding the input datasets (default from settings).",
    ),
    results_dir: Optional[Path] = typer.Option(
        None,
        "--results-dir",
        "-o",
        help="Directory for the timing log and sorted output (default from settings).",
    ),
    verify: bool = typer.Option(
        False,
        "--verify/--no-verify",
        help="Check every algorithm's output against the baseline.",
    ),
    json_logs: Optional[bool] = typer.Option(
        None,
        "--json-logs/--console-logs",
        help="Emit logs as JSON (default from settings).",
    ),
) -> None:
    """
    Run the sorting experiment over every dataset size and persist results.
    """
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
    )

    names = [name.strip() for name in algorithm.split(",") if name.strip()]
    try:
        resolve_algorithms(names)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        typer.echo("Available algorithms: " + ", ".join(available_algorithms()), err=True)
        raise typer.Exit(code=2)

    config = RunConfig(
        dataset_sizes=list(sizes) if sizes else None,
        algorithm_names=names,
        datasets_dir=datasets_dir,
        results_dir=results_dir,
        verify=verify,
    )
    try:
        report = run_experiment(config)
    except ResultsLogError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    print_results(report)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
