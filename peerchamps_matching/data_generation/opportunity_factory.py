# peerchamps_matching/data_generation/opportunity_factory.py
from __future__ import annotations

import random
from typing import List, Optional

from ..models import Opportunity
from ..config import DEFAULT_SEED, NUM_OPPORTUNITIES_DEFAULT
from .vocab import INDUSTRIES, REGIONS, USE_CASES, EXPERTISE_AREAS, URGENCIES, get_company_sizes


def create_opportunities(
    company_id: str,
    count: int = NUM_OPPORTUNITIES_DEFAULT,
    seed: Optional[int] = DEFAULT_SEED,
) -> List[Opportunity]:
    """
    Create `count` demo opportunities (O001, O002, ...) that have requested
    a reference. Roughly one in four leaves the expertise wish list empty.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}.")

    rng = random.Random(seed)
    sizes = get_company_sizes()
    opportunities: List[Opportunity] = []

    for i in range(1, count + 1):
        industry = rng.choice(INDUSTRIES)
        expertise = rng.sample(EXPERTISE_AREAS, k=2) if rng.random() > 0.25 else None

        opportunities.append(
            Opportunity(
                id=f"O{i:03d}",
                company_id=company_id,
                opportunity_name=f"{industry} deal {i}",
                prospect_company=f"Prospect {i}",
                prospect_industry=industry,
                prospect_size=rng.choice(sizes),
                geographic_region=rng.choice(REGIONS),
                desired_advocate_industry=industry,
                desired_advocate_size=rng.choice(sizes),
                desired_advocate_region=rng.choice(REGIONS),
                desired_use_cases=rng.sample(USE_CASES, k=2),
                desired_expertise_areas=expertise,
                deal_stage=rng.choice(["qualification", "proposal", "negotiation"]),
                reference_urgency=rng.choice(URGENCIES),
                reference_request_status="requested",
                deal_value=float(rng.randrange(10_000, 250_000, 5_000)),
            )
        )

    return opportunities
