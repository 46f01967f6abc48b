"""
Domain models for the service sort benchmark.

Defines the `Service` record (a billable IT service offering) and the single
three-key ordering every sorting algorithm relies on:

    cost ascending -> prepayment ascending -> name ascending

All relational operators are thin wrappers over `compare_services`, so there
is exactly one place where the order is defined. Floats are compared with
plain `!=`/`<` on the stored values, without any tolerance.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Tuple

from pydantic import BaseModel, Field


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Service(BaseModel):
    """
    A single service offering loaded from a dataset row.

    Equality (and hashing) only looks at the sort key; two services with the
    same cost, prepayment and name are equal even when `duration` differs.
    """

    name: str = Field("", description="Service name; uniqueness is not enforced.")
    cost: float = Field(0.0, description="Estimated price.")
    duration: int = Field(0, description="Days to complete; not validated.")
    prepayment: float = Field(0.0, description="Upfront payment amount.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def sort_key(self) -> Tuple[float, float, str]:
        return (self.cost, self.prepayment, self.name)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Service):
            return NotImplemented
        return compare_services(self, other) is Ordering.LESS

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Service):
            return NotImplemented
        return compare_services(other, self) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Service):
            return NotImplemented
        return compare_services(other, self) is not Ordering.LESS

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Service):
            return NotImplemented
        return compare_services(self, other) is not Ordering.LESS

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Service):
            return NotImplemented
        return (
            self.cost == other.cost
            and self.prepayment == other.prepayment
            and self.name == other.name
        )

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.sort_key())


def compare_services(left: Service, right: Service) -> Ordering:
    """
    Three-way comparison of two services by (cost, prepayment, name).

    A key only decides the result when the two values differ; `<` then picks
    the direction. With NaN values the key counts as "different" and `<` is
    False, so the left side is reported as GREATER.
    """
    if left.cost != right.cost:
        return Ordering.LESS if left.cost < right.cost else Ordering.GREATER
    if left.prepayment != right.prepayment:
        return Ordering.LESS if left.prepayment < right.prepayment else Ordering.GREATER
    if left.name != right.name:
        return Ordering.LESS if left.name < right.name else Ordering.GREATER
    return Ordering.EQUAL


__all__ = ["Ordering", "Service", "compare_services"]
