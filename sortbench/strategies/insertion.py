"""
Insertion sort over a growing sorted prefix.
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.domain.models import Service
from sortbench.strategies.abstract import SortAlgorithm


def insertion_sort(data: MutableSequence[Service]) -> None:
    """
    Shift each element back past every strictly greater predecessor.

    Elements that compare equal keep their relative order. O(n^2) worst case,
    O(n) on nearly sorted input.
    """
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key


INSERTION = SortAlgorithm(
    name="insertion",
    label="Сортировка вставками",
    description="Insertion sort shifting greater elements right (O(n^2), best case O(n)).",
    sort=insertion_sort,
)

__all__ = ["INSERTION", "insertion_sort"]
