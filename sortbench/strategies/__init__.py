"""
Strategies package for the service sort benchmark.

This module re-exports the sorting contracts and the concrete algorithms so
downstream code can import from `sortbench.strategies` directly.
"""

from sortbench.strategies.abstract import SortAlgorithm, SortFunction
from sortbench.strategies.baseline import BASELINE, library_sort
from sortbench.strategies.bubble import BUBBLE, bubble_sort
from sortbench.strategies.insertion import INSERTION, insertion_sort
from sortbench.strategies.shaker import SHAKER, shaker_sort

__all__ = [
    # Contracts
    "SortAlgorithm",
    "SortFunction",
    # Registry entries
    "BASELINE",
    "BUBBLE",
    "INSERTION",
    "SHAKER",
    # Sorting routines
    "bubble_sort",
    "insertion_sort",
    "library_sort",
    "shaker_sort",
]
