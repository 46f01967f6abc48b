"""
Dataset generation script for the service sort benchmark.

Implements deterministic pseudo-random service rows and writes one CSV file
per dataset size, named the way the benchmark expects to find them.
"""

from __future__ import annotations

import csv
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

import typer

from sortbench.config import get_settings
from sortbench.infrastructure.dataset_io import dataset_path

app = typer.Typer(help="Generate synthetic IT service datasets (CSV).")

DATASET_HEADER = ["name", "cost", "duration", "prepayment"]

_SERVICE_KINDS = [
    "Web development",
    "Mobile app",
    "Database audit",
    "Cloud migration",
    "Security review",
    "Tech support",
    "Data pipeline",
    "UI redesign",
]


def _generate_rows_csv(csv_path: Path, rows: int, batch_size: int, seed: int) -> None:
    rng = random.Random(seed)

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(DATASET_HEADER)

        buffer: list[list[str]] = []
        for _ in range(rows):
            # Coarse price steps keep cost ties common so the tie-breakers matter.
            cost = rng.randint(10, 5_000) * 10.0
            prepayment = round(cost * rng.choice([0.0, 0.1, 0.25, 0.5]), 2)
            name = f"{rng.choice(_SERVICE_KINDS)} #{rng.randint(1, max(rows, 1))}"
            buffer.append(
                [
                    name,
                    f"{cost:.2f}",
                    str(rng.randint(1, 180)),
                    f"{prepayment:.2f}",
                ]
            )
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)


@app.command()
def main(
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-n",
        help="Dataset size to generate (repeatable). Defaults to the configured list.",
    ),
    batch_size: int = typer.Option(
        10_000,
        "--batch-size",
        "-b",
        help="Batch size for CSV buffering during generation.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed (offset by the dataset size for each file).",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the generated files (default from settings).",
    ),
) -> None:
    """
    Generate one synthetic dataset per size.
    """
    settings = get_settings()
    target_dir = output_dir or settings.datasets_dir
    target_dir.mkdir(parents=True, exist_ok=True)

    for size in sizes or settings.dataset_sizes:
        csv_path = dataset_path(target_dir, settings.dataset_filename_pattern, size)
        start = time.perf_counter()
        _generate_rows_csv(csv_path, rows=size, batch_size=batch_size, seed=seed + size)
        duration = time.perf_counter() - start
        typer.echo(f"Generated {size:,} rows -> {csv_path} in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
