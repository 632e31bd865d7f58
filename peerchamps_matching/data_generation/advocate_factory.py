# peerchamps_matching/data_generation/advocate_factory.py
from __future__ import annotations

import random
from typing import List

from ..models import Advocate
from ..config import DEFAULT_SEED, NUM_ADVOCATES_DEFAULT
from .vocab import INDUSTRIES, REGIONS, USE_CASES, EXPERTISE_AREAS, get_company_sizes

# Mostly active advocates, with a few in the other lifecycle states
_STATUS_CHOICES = ["active"] * 8 + ["inactive", "pending"]


def create_advocates(
    company_id: str,
    count: int = NUM_ADVOCATES_DEFAULT,
    seed: int = DEFAULT_SEED,
) -> List[Advocate]:
    """
    Create `count` reproducible demo advocates for one company.

    IDs are A001, A002, ... Each advocate gets 1-3 use cases, 1-2
    expertise areas, an availability score in 20..100 and some calls
    already completed this month (sometimes the whole cap).
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}.")

    rng = random.Random(seed)
    sizes = get_company_sizes()
    advocates: List[Advocate] = []

    for i in range(1, count + 1):
        max_calls = rng.choice([2, 4, 4, 6])
        advocates.append(
            Advocate(
                id=f"A{i:03d}",
                company_id=company_id,
                name=f"Advocate {i}",
                email=f"advocate{i}@example.com",
                company_name=f"Customer {i}",
                industry=rng.choice(INDUSTRIES),
                company_size=rng.choice(sizes),
                geographic_region=rng.choice(REGIONS),
                use_cases=rng.sample(USE_CASES, k=rng.randint(1, 3)),
                expertise_areas=rng.sample(EXPERTISE_AREAS, k=rng.randint(1, 2)),
                availability_score=rng.randint(20, 100),
                total_calls_completed=rng.randint(0, max_calls),
                max_calls_per_month=max_calls,
                status=rng.choice(_STATUS_CHOICES),
            )
        )

    return advocates
