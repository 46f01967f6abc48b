"""
End-to-end tests for the `sortbench` CLI and the dataset generator script.

These run the whole pipeline on small generated datasets in a temporary
directory: generate -> run -> timing log + sorted output + summary table.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from scripts import generate_datasets
from sortbench.infrastructure.dataset_io import load_services
from sortbench.main import app

DEFAULT_SIZES = [20, 50]
EXPECTED_LOG_ROWS = 1 + len(DEFAULT_SIZES) * 4

runner = CliRunner()


@pytest.fixture
def generated_datasets(tmp_path: Path) -> Path:
    datasets_dir = tmp_path / "datasets"
    args = ["--output-dir", str(datasets_dir), "--seed", "7"]
    for size in DEFAULT_SIZES:
        args += ["--size", str(size)]
    result = runner.invoke(generate_datasets.app, args)
    assert result.exit_code == 0, result.output
    return datasets_dir


class TestRunCommand:
    """Full experiment runs through the CLI."""

    def test_run_produces_log_and_sorted_output(self, tmp_path: Path, generated_datasets: Path):
        results_dir = tmp_path / "results"
        args = ["run", "--datasets-dir", str(generated_datasets), "--results-dir", str(results_dir)]
        for size in DEFAULT_SIZES:
            args += ["--size", str(size)]

        result = runner.invoke(app, args + ["--verify"])

        assert result.exit_code == 0, result.output
        log_rows = (results_dir / "timing_results_bvg_all.csv").read_text(encoding="utf-8")
        assert len(log_rows.splitlines()) == EXPECTED_LOG_ROWS
        sorted_path = results_dir / "sorted_services_50_std_sort.csv"
        services = load_services(sorted_path)
        assert services == sorted(services)
        assert "Service Sort Benchmark Results" in result.output

    def test_run_skips_missing_sizes(self, tmp_path: Path, generated_datasets: Path):
        results_dir = tmp_path / "results"

        result = runner.invoke(
            app,
            [
                "run",
                "--datasets-dir",
                str(generated_datasets),
                "--results-dir",
                str(results_dir),
                "--size",
                "20",
                "--size",
                "999",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Skipped dataset sizes: 999" in result.output
        assert (results_dir / "sorted_services_20_std_sort.csv").exists()

    def test_unwritable_results_log_exits_with_error(self, tmp_path: Path, generated_datasets: Path):
        blocker = tmp_path / "results"
        blocker.write_text("file, not a directory", encoding="utf-8")

        result = runner.invoke(
            app,
            ["run", "--datasets-dir", str(generated_datasets), "--results-dir", str(blocker)],
        )

        assert result.exit_code == 1

    def test_unknown_algorithm_is_rejected(self, tmp_path: Path):
        result = runner.invoke(app, ["run", "--algorithm", "quick", "--results-dir", str(tmp_path)])

        assert result.exit_code == 2
        assert not (tmp_path / "timing_results_bvg_all.csv").exists()


class TestInfoCommands:
    def test_algorithms_lists_registry(self):
        result = runner.invoke(app, ["algorithms"])

        assert result.exit_code == 0
        for name in ("bubble", "insertion", "shaker", "library"):
            assert name in result.output

    def test_info_shows_configured_sizes(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATASET_SIZES", "[5, 15]")

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "sizes=5, 15" in result.output
