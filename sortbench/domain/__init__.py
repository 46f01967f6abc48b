"""
Domain package for the service sort benchmark.

Exports the record model and its ordering used by every sorting algorithm.
Keep this package focused on data definitions and comparison semantics.
"""

from sortbench.domain.models import Ordering, Service, compare_services

__all__ = [
    "Ordering",
    "Service",
    "compare_services",
]
