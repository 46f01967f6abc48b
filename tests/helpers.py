"""Shared test data builders (importable from any test module)."""

from __future__ import annotations

import random
from typing import List

from sortbench.domain.models import Service
from sortbench.strategies import bubble_sort, insertion_sort, library_sort, shaker_sort

DATASET_PATTERN = "it_services_dataset_diverse_{size}.csv"
DATASET_HEADER = "name,cost,duration,prepayment"

ALL_SORTS = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "shaker": shaker_sort,
    "library": library_sort,
}


def make_random_services(count: int, seed: int = 7) -> List[Service]:
    """Services with deliberately frequent ties on cost and prepayment."""
    rng = random.Random(seed)
    return [
        Service(
            name=rng.choice(["alpha", "beta", "gamma", "delta", "omega"]),
            cost=float(rng.randint(0, 20)),
            duration=rng.randint(-5, 60),
            prepayment=rng.choice([0.0, 0.5, 1.25, 10.0]),
        )
        for _ in range(count)
    ]


def service_lines(count: int, seed: int = 3) -> List[str]:
    return [
        f"{s.name},{s.cost:.2f},{s.duration},{s.prepayment:.2f}"
        for s in make_random_services(count, seed=seed)
    ]
