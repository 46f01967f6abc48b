"""
Orchestrator for the sorting experiment: load each dataset, time every
algorithm on it, log the results and persist one sorted dataset.

Usage (example from CLI):
    from sortbench.orchestrator import RunConfig, run_experiment

    report = run_experiment(RunConfig(dataset_sizes=[100, 8100]))
    print(report.results)

Outputs are saved to `results/` by default:
- `results/timing_results_bvg_all.csv` (one row per size and algorithm)
- `results/sorted_services_<n>_std_sort.csv` (last loaded dataset, sorted)

The run is sequential. A dataset that cannot be opened or holds no rows is
skipped; only a timing log that cannot be opened aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from sortbench.config import get_settings
from sortbench.domain.models import Service
from sortbench.infrastructure.dataset_io import (
    DatasetOpenError,
    DatasetSaveError,
    EmptyDatasetError,
    dataset_path,
    load_services,
    save_services,
)
from sortbench.infrastructure.timing_log import TimingLog
from sortbench.strategies.abstract import SortAlgorithm
from sortbench.strategies.baseline import BASELINE
from sortbench.strategies.bubble import BUBBLE
from sortbench.strategies.insertion import INSERTION
from sortbench.strategies.shaker import SHAKER
from sortbench.utils.logging import get_logger
from sortbench.utils.profiler import ProfileStats, profile_block, timed_sort

log = get_logger(__name__)


@dataclass
class RunConfig:
    """
    Per-run options. `None` fields fall back to the cached settings.
    """

    dataset_sizes: Optional[List[int]] = None
    algorithm_names: Optional[Iterable[str]] = None
    datasets_dir: Optional[Path] = None
    dataset_filename_pattern: Optional[str] = None
    results_dir: Optional[Path] = None
    timing_results_filename: Optional[str] = None
    sorted_output_template: Optional[str] = None
    verify: bool = False
    persist_sorted: bool = True


@dataclass
class TimingResult:
    """
    One timed sort. `dataset_size` is the loaded record count written to the
    timing log; `nominal_size` is the configured size the input file is named for.
    """

    dataset_size: int
    nominal_size: int
    algorithm: str
    label: str
    elapsed_ms: float
    verified: Optional[bool] = None


@dataclass
class ExperimentReport:
    """Everything a run produced, for reporting and tests."""

    timing_log_path: Path
    results: List[TimingResult] = field(default_factory=list)
    processed_sizes: List[int] = field(default_factory=list)
    skipped_sizes: List[int] = field(default_factory=list)
    # keyed by nominal (configured) size
    profiles: Dict[int, ProfileStats] = field(default_factory=dict)
    sorted_output_path: Optional[Path] = None
    sorted_output_rows: int = 0


def _algorithm_registry() -> Dict[str, SortAlgorithm]:
    """Registry of available algorithms, in execution order."""
    return {algo.name: algo for algo in (BUBBLE, INSERTION, SHAKER, BASELINE)}


def available_algorithms() -> List[str]:
    """List available algorithm names in execution order."""
    return list(_algorithm_registry().keys())


def resolve_algorithms(names: Optional[Iterable[str]] = None) -> List[SortAlgorithm]:
    """
    Resolve algorithm names to registry entries.

    `None` or `["all"]` selects every algorithm. The baseline is always run
    last as the control measurement, even when not requested.
    """
    registry = _algorithm_registry()
    requested = list(names) if names is not None else ["all"]
    if not requested or requested == ["all"]:
        return list(registry.values())

    unknown = [name for name in requested if name not in registry]
    if unknown:
        raise ValueError(
            f"Unknown algorithm(s) {', '.join(unknown)}. Available: {', '.join(registry)}"
        )

    selected = [algo for name, algo in registry.items() if name in requested]
    if BASELINE not in selected:
        selected.append(BASELINE)
    return selected


def _load_dataset(path: Path, size: int) -> Optional[List[Service]]:
    """Load one dataset; report and return None when it has to be skipped."""
    try:
        return load_services(path)
    except DatasetOpenError as exc:
        log.error(str(exc), extra={"dataset_size": size})
        log.error(
            f"Skipping experiments for size {size}: input file could not be opened",
            extra={"dataset_size": size},
        )
    except EmptyDatasetError as exc:
        log.warning(str(exc), extra={"dataset_size": size})
        log.error(
            f"Skipping experiments for size {size}: load failed or file is empty",
            extra={"dataset_size": size},
        )
    return None


def _run_algorithms(
    services: List[Service],
    size: int,
    nominal_size: int,
    algorithms: List[SortAlgorithm],
    timing_log: TimingLog,
    verify: bool,
) -> List[TimingResult]:
    results: List[TimingResult] = []
    outputs: Dict[str, List[Service]] = {}
    for algo in algorithms:
        timing = timed_sort(algo.sort, services)
        log.info(
            f"{algo.label} finished in {timing.elapsed_ms:.4f} ms",
            extra={"algorithm": algo.name, "dataset_size": size, "elapsed_ms": timing.elapsed_ms},
        )
        timing_log.write_result(size, algo.label, timing.elapsed_ms)
        results.append(
            TimingResult(
                dataset_size=size,
                nominal_size=nominal_size,
                algorithm=algo.name,
                label=algo.label,
                elapsed_ms=timing.elapsed_ms,
            )
        )
        if verify:
            outputs[algo.name] = timing.output

    if verify:
        reference = outputs[BASELINE.name]
        for result in results:
            result.verified = outputs[result.algorithm] == reference
            if not result.verified:
                log.error(
                    f"{result.label} output differs from the {BASELINE.label} baseline",
                    extra={"algorithm": result.algorithm, "dataset_size": size},
                )
    return results


def _persist_sorted(services: List[Service], results_dir: Path, template: str) -> Optional[Path]:
    output_path = results_dir / template.format(size=len(services))
    log.info(
        f"Saving {BASELINE.label} result for the largest processed dataset "
        f"({len(services)} records)...",
        extra={"rows": len(services)},
    )
    final_sorted = list(services)
    BASELINE.sort(final_sorted)
    try:
        save_services(output_path, final_sorted)
    except DatasetSaveError as exc:
        log.error(f"Failed to save sorted data: {exc}", extra={"path": str(output_path)})
        return None
    log.info(f"Sorted data saved to {output_path}", extra={"path": str(output_path)})
    return output_path


def run_experiment(config: Optional[RunConfig] = None) -> ExperimentReport:
    """
    Run every selected algorithm over every configured dataset size.

    Parameters
    ----------
    config : RunConfig | None
        Per-run overrides. Missing values come from `get_settings()`.

    Returns
    -------
    ExperimentReport
        Timing rows, skipped sizes, per-size profiles and output paths.

    Raises
    ------
    ResultsLogError
        If the timing results log cannot be opened; nothing else escapes the
        dataset loop.
    ValueError
        If an unknown algorithm name is requested.
    """
    config = config or RunConfig()
    settings = get_settings()

    sizes = config.dataset_sizes if config.dataset_sizes is not None else settings.dataset_sizes
    datasets_dir = Path(config.datasets_dir or settings.datasets_dir)
    pattern = config.dataset_filename_pattern or settings.dataset_filename_pattern
    results_dir = Path(config.results_dir or settings.results_dir)
    timing_filename = config.timing_results_filename or settings.timing_results_filename
    output_template = config.sorted_output_template or settings.sorted_output_template

    algorithms = resolve_algorithms(config.algorithm_names)
    report = ExperimentReport(timing_log_path=results_dir / timing_filename)
    last_loaded: Optional[List[Service]] = None

    with TimingLog(report.timing_log_path) as timing_log:
        for nominal_size in sorted(sizes):
            path = dataset_path(datasets_dir, pattern, nominal_size)
            log.info(f"{'=' * 60}")
            log.info(
                f"[DATASET] {path} (size: {nominal_size})",
                extra={"dataset_size": nominal_size, "path": str(path)},
            )

            services = _load_dataset(path, nominal_size)
            if services is None:
                report.skipped_sizes.append(nominal_size)
                continue

            effective_size = nominal_size
            if len(services) != nominal_size:
                log.warning(
                    f"Expected {nominal_size} records in file, but loaded {len(services)}",
                    extra={"dataset_size": nominal_size, "rows": len(services)},
                )
                effective_size = len(services)
            log.info(f"Loaded {len(services)} records", extra={"rows": len(services)})

            with profile_block(f"size-{nominal_size}") as stats:
                report.results.extend(
                    _run_algorithms(
                        services, effective_size, nominal_size, algorithms, timing_log, config.verify
                    )
                )
            report.profiles[nominal_size] = stats
            report.processed_sizes.append(effective_size)
            last_loaded = services

            timing_log.flush()

        if last_loaded is None:
            log.error(
                "No data to save a final sorted file: no dataset was loaded successfully",
            )
        elif config.persist_sorted:
            report.sorted_output_path = _persist_sorted(last_loaded, results_dir, output_template)
            if report.sorted_output_path is not None:
                report.sorted_output_rows = len(last_loaded)

    log.info(
        f"[EXPERIMENT COMPLETE] {len(report.processed_sizes)} dataset(s) processed, "
        f"{len(report.skipped_sizes)} skipped",
        extra={"processed": report.processed_sizes, "skipped": report.skipped_sizes},
    )
    return report


__all__ = [
    "ExperimentReport",
    "RunConfig",
    "TimingResult",
    "available_algorithms",
    "resolve_algorithms",
    "run_experiment",
]
