"""
Sorting strategy contracts for the service sort benchmark.

A sorting strategy is any callable that sorts a mutable sequence of services
in place, ascending by the service ordering. Strategies are plain functions;
`SortAlgorithm` only attaches the metadata the orchestrator and reporter need.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Protocol, runtime_checkable

from sortbench.domain.models import Service


@runtime_checkable
class SortFunction(Protocol):
    """
    Common signature all sorting routines implement.

    Parameters
    ----------
    data : MutableSequence[Service]
        Sequence to sort in place, ascending. Nothing is returned.
    """

    def __call__(self, data: MutableSequence[Service]) -> None: ...


@dataclass(frozen=True)
class SortAlgorithm:
    """
    Registry entry describing one sorting strategy.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier (CLI selection).
    label : str
        Name written to the timing log and progress output.
    description : str
        A human-friendly summary of the approach.
    sort : SortFunction
        The in-place sorting routine.
    """

    name: str
    label: str
    description: str
    sort: SortFunction


__all__ = ["SortAlgorithm", "SortFunction"]
