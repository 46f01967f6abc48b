"""
Service Sort Benchmark - timing elementary comparison sorts on service records.

This package loads datasets of IT service offerings of increasing size and
measures how long each sorting strategy takes on identical copies of the data:

- Bubble sort with early exit
- Insertion sort
- Cocktail shaker sort
- The built-in list.sort as the baseline

Timings are appended to a CSV log and the largest loaded dataset is written
back out in sorted order.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sortbench.config import Settings, get_settings
from sortbench.domain.models import Ordering, Service, compare_services
from sortbench.infrastructure.dataset_io import (
    DatasetLoadError,
    DatasetOpenError,
    DatasetSaveError,
    EmptyDatasetError,
    format_service,
    load_services,
    parse_service_line,
    save_services,
)
from sortbench.infrastructure.timing_log import ResultsLogError
from sortbench.orchestrator import (
    ExperimentReport,
    RunConfig,
    TimingResult,
    available_algorithms,
    run_experiment,
)
from sortbench.strategies import (
    SortAlgorithm,
    SortFunction,
    bubble_sort,
    insertion_sort,
    library_sort,
    shaker_sort,
)
from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, measure, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Ordering",
    "Service",
    "compare_services",
    # Dataset I/O
    "DatasetLoadError",
    "DatasetOpenError",
    "DatasetSaveError",
    "EmptyDatasetError",
    "ResultsLogError",
    "format_service",
    "load_services",
    "parse_service_line",
    "save_services",
    # Orchestration
    "ExperimentReport",
    "RunConfig",
    "TimingResult",
    "available_algorithms",
    "run_experiment",
    # Sorting strategies
    "SortAlgorithm",
    "SortFunction",
    "bubble_sort",
    "insertion_sort",
    "library_sort",
    "shaker_sort",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "measure",
    "profile_block",
]
