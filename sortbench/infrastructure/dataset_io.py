"""
Dataset I/O for the service sort benchmark.

Reads and writes service datasets in a line-oriented CSV format:

    <header line, ignored on read>
    name,cost,duration,prepayment

Fields are split on plain commas (no quoting or escaping). Numeric fields are
read like a stream extraction: leading whitespace is skipped and the longest
numeric prefix is used. A missing, malformed or out-of-range field falls back
to zero instead of rejecting the row.

Text is UTF-8. Bytes that do not decode (e.g. a cp1251 name) are carried
through as surrogate escapes, so such rows load and are written back unchanged.
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Iterable, List, Optional

from sortbench.domain.models import Service
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

SORTED_OUTPUT_HEADER = (
    "Название услуги,Ориентировочная стоимость,Срок исполнения (дни),Размер предоплаты"
)

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class DatasetLoadError(Exception):
    """Base class for failures that prevent a dataset from being used."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class DatasetOpenError(DatasetLoadError):
    """The dataset file could not be opened for reading."""


class EmptyDatasetError(DatasetLoadError):
    """The dataset file is empty, holds only a header, or yielded no rows."""


class DatasetSaveError(Exception):
    """The sorted output file could not be written."""


def _parse_float(segment: Optional[str]) -> float:
    if segment is None:
        return 0.0
    match = _FLOAT_PREFIX.match(segment)
    if not match:
        return 0.0
    text = match.group(1)
    value = float(text)
    # Overflow such as "1e999" is an out-of-range value, not an explicit infinity.
    if math.isinf(value) and "inf" not in text.lower():
        return 0.0
    return value


def _parse_int(segment: Optional[str]) -> int:
    if segment is None:
        return 0
    match = _INT_PREFIX.match(segment)
    if not match:
        return 0
    value = int(match.group(1))
    if value < _INT32_MIN or value > _INT32_MAX:
        return 0
    return value


def parse_service_line(line: str) -> Service:
    """
    Parse one CSV data line into a `Service`.

    The prepayment field takes the rest of the line after the third comma.
    Fields that are missing or unparseable default to zero (or an empty name).
    """
    fields: List[Optional[str]] = list(line.rstrip("\r\n").split(",", 3))
    fields += [None] * (4 - len(fields))
    name, cost, duration, prepayment = fields
    return Service(
        name=name or "",
        cost=_parse_float(cost),
        duration=_parse_int(duration),
        prepayment=_parse_float(prepayment),
    )


def format_service(service: Service) -> str:
    """Render a service as `name,cost,duration,prepayment` (money to 2 decimals)."""
    return f"{service.name},{service.cost:.2f},{service.duration},{service.prepayment:.2f}"


def dataset_path(directory: Path | str, pattern: str, size: int) -> Path:
    """Build the input path for a nominal dataset size, e.g. `datasets/x_100.csv`."""
    return Path(directory) / pattern.format(size=size)


def load_services(path: Path | str) -> List[Service]:
    """
    Load all services from a dataset file.

    Raises
    ------
    DatasetOpenError
        If the file cannot be opened.
    EmptyDatasetError
        If the file has no header line or no data rows.
    """
    path = Path(path)
    try:
        handle = path.open("r", encoding="utf-8-sig", errors="surrogateescape", newline=None)
    except OSError as exc:
        raise DatasetOpenError(path, f"Cannot open input file ({exc.strerror or exc})") from exc

    services: List[Service] = []
    with handle:
        header = handle.readline()
        if not header:
            raise EmptyDatasetError(path, "Cannot read header or file is empty")
        for line in handle:
            if not line.strip():
                continue
            services.append(parse_service_line(line))

    if not services:
        raise EmptyDatasetError(path, "File contains only a header or no valid rows")

    log.debug(f"Loaded {len(services)} services", extra={"path": str(path), "rows": len(services)})
    return services


def save_services(path: Path | str, services: Iterable[Service]) -> int:
    """
    Write services to `path` with the sorted-output header.

    Returns the number of rows written. Raises `DatasetSaveError` if the file
    cannot be opened or written.
    """
    path = Path(path)
    rows = 0
    try:
        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(SORTED_OUTPUT_HEADER + "\n")
            for service in services:
                handle.write(format_service(service) + "\n")
                rows += 1
    except OSError as exc:
        raise DatasetSaveError(f"Cannot write output file: {path} ({exc})") from exc
    return rows


__all__ = [
    "SORTED_OUTPUT_HEADER",
    "DatasetLoadError",
    "DatasetOpenError",
    "DatasetSaveError",
    "EmptyDatasetError",
    "dataset_path",
    "format_service",
    "load_services",
    "parse_service_line",
    "save_services",
]
