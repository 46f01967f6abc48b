"""
Profiling utilities for the service sort benchmark.

This module provides the timing harness for sorting strategies and a context
manager to profile a whole dataset cycle:
- Sort timing (perf_counter around the sort call only, copy excluded)
- Wall-clock time for a block (perf_counter)
- Memory usage (RSS at block entry and exit via psutil + optional tracemalloc
  for the true peak of Python allocations)

Usage examples:
    from sortbench.utils.profiler import measure, profile_block

    elapsed_ms = measure(bubble_sort, services)

    with profile_block("size-8100") as stats:
        run_all_algorithms()

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, List, Optional, Sequence

import psutil

from sortbench.domain.models import Service
from sortbench.strategies.abstract import SortFunction


@dataclass
class SortTiming:
    """Elapsed time of one sort call and the private copy it sorted."""

    elapsed_ms: float
    output: List[Service]


def timed_sort(sort_fn: SortFunction, data: Sequence[Service]) -> SortTiming:
    """
    Sort a private copy of `data` with `sort_fn` and time only the sort call.

    Services are immutable, so a new list is a full independent copy: the
    caller's sequence is never reordered.
    """
    working = list(data)
    start = time.perf_counter()
    sort_fn(working)
    end = time.perf_counter()
    return SortTiming(elapsed_ms=(end - start) * 1000.0, output=working)


def measure(sort_fn: SortFunction, data: Sequence[Service]) -> float:
    """Return the elapsed milliseconds of `sort_fn` run over a copy of `data`."""
    return timed_sort(sort_fn, data).elapsed_ms


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    # max of the entry and exit samples, not a continuous peak
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = False
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Measures:
    - Wall-clock duration (perf_counter)
    - The larger of the RSS at entry and at exit (psutil). Only those two
      points are sampled, so memory freed before the block ends is missed
    - Peak Python memory allocations (tracemalloc), when enabled

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to enable tracemalloc for tracking Python-level allocations.
        Tracing slows allocation-heavy code considerably; leave it off when the
        block itself contains timed sorts.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    rss_before = process.memory_info().rss

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stats.peak_rss_bytes = max(rss_before, process.memory_info().rss)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            # Stop tracemalloc only if we started it
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "SortTiming", "measure", "profile_block", "timed_sort"]
