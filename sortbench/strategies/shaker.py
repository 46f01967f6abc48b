"""
Shaker (cocktail) sort: bidirectional bubble sort.

Each cycle runs a forward pass that carries the maximum of the unsorted window
`[start, end]` to `end`, then a backward pass that carries the minimum to
`start`; both ends of the window then shrink by one. Small elements stranded
near the end travel to the front in one backward pass instead of one step per
pass as in bubble sort.
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.domain.models import Service
from sortbench.strategies.abstract import SortAlgorithm


def shaker_sort(data: MutableSequence[Service]) -> None:
    start = 0
    end = len(data) - 1
    swapped = True

    while swapped:
        swapped = False
        for i in range(start, end):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break

        swapped = False
        end -= 1

        for i in range(end - 1, start - 1, -1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        start += 1


SHAKER = SortAlgorithm(
    name="shaker",
    label="Шейкер-сортировка",
    description="Cocktail shaker sort alternating forward and backward passes (O(n^2)).",
    sort=shaker_sort,
)

__all__ = ["SHAKER", "shaker_sort"]
