"""
Bubble sort: adjacent comparison-exchange with early exit.

After pass `i` the `i + 1` largest elements sit at their final positions. A
pass without a single swap means the sequence is sorted, which makes an
already-sorted input O(n).
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.domain.models import Service
from sortbench.strategies.abstract import SortAlgorithm


def bubble_sort(data: MutableSequence[Service]) -> None:
    n = len(data)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break


BUBBLE = SortAlgorithm(
    name="bubble",
    label="Сортировка пузырьком",
    description="Bubble sort with early exit on a swap-free pass (O(n^2), best case O(n)).",
    sort=bubble_sort,
)

__all__ = ["BUBBLE", "bubble_sort"]
