"""
Infrastructure package for the service sort benchmark.

Centralizes file I/O concerns (dataset codec, sorted output, timing log).
Keep this layer focused on I/O and resource management, decoupled from
algorithm/orchestrator logic.
"""

from sortbench.infrastructure.dataset_io import (
    DatasetLoadError,
    DatasetOpenError,
    DatasetSaveError,
    EmptyDatasetError,
    dataset_path,
    format_service,
    load_services,
    parse_service_line,
    save_services,
)
from sortbench.infrastructure.timing_log import ResultsLogError, TimingLog

__all__ = [
    "DatasetLoadError",
    "DatasetOpenError",
    "DatasetSaveError",
    "EmptyDatasetError",
    "ResultsLogError",
    "TimingLog",
    "dataset_path",
    "format_service",
    "load_services",
    "parse_service_line",
    "save_services",
]
