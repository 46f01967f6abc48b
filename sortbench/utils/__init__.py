"""
Utilities package for the service sort benchmark.

Exports shared helpers for logging, timing and profiling.
Keep this package lightweight and free of orchestration logic.
"""

from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, SortTiming, measure, profile_block, timed_sort

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "SortTiming",
    "measure",
    "profile_block",
    "timed_sort",
]
