"""
Results log writer for timing measurements.

One row is appended per (dataset size, algorithm) pair:

    DatasetSize,Algorithm,TimeMilliseconds
    100,"Сортировка пузырьком",1.2345

The driver flushes after each dataset size so partial results survive a crash
later in the run.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import IO, Optional, Type

from sortbench.utils.logging import get_logger

log = get_logger(__name__)

TIMING_LOG_HEADER = "DatasetSize,Algorithm,TimeMilliseconds"


class ResultsLogError(Exception):
    """The timing results log could not be opened for writing."""


class TimingLog:
    """
    Context manager owning the results log file handle.

    Opening truncates any previous log and writes the header line.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._handle: Optional[IO[str]] = None
        self.rows_written = 0

    def open(self) -> "TimingLog":
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("w", encoding="utf-8", newline="")
        except OSError as exc:
            raise ResultsLogError(
                f"Cannot open timing results file for writing: {self.path} ({exc})"
            ) from exc
        self._handle.write(TIMING_LOG_HEADER + "\n")
        log.info(f"Timing results file '{self.path}' opened", extra={"path": str(self.path)})
        return self

    def write_result(self, dataset_size: int, label: str, elapsed_ms: float) -> None:
        if self._handle is None:
            raise RuntimeError("Timing log is not open")
        self._handle.write(f'{dataset_size},"{label}",{elapsed_ms:.4f}\n')
        self.rows_written += 1

    def flush(self) -> None:
        if self._handle is not None:
            self._handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            log.info(f"Timing results file '{self.path}' closed", extra={"rows": self.rows_written})

    def __enter__(self) -> "TimingLog":
        return self.open()

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["TIMING_LOG_HEADER", "ResultsLogError", "TimingLog"]
