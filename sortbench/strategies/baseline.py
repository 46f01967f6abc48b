"""
Baseline strategy: the interpreter's built-in sort (Timsort).

Serves as the control measurement the hand-written algorithms are compared
against, and produces the final sorted output artifact.
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.domain.models import Service
from sortbench.strategies.abstract import SortAlgorithm


def library_sort(data: MutableSequence[Service]) -> None:
    if isinstance(data, list):
        data.sort()
    else:
        data[:] = sorted(data)


BASELINE = SortAlgorithm(
    name="library",
    label="list.sort",
    description="Built-in list.sort (Timsort, O(n log n)), used as the baseline.",
    sort=library_sort,
)

__all__ = ["BASELINE", "library_sort"]
