# peerchamps_matching/matching/eligibility.py
from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Advocate, Opportunity, MatchingCriteria

logger = logging.getLogger(__name__)


def has_capacity(advocate: Advocate) -> bool:
    """Capacity is exhausted once completed calls reach the monthly cap."""
    return advocate.total_calls_completed < advocate.max_calls_per_month


def _in_preferred_regions(advocate: Advocate, preferred_regions: List[str]) -> bool:
    # No region on record: the preference cannot rule the advocate out
    if not preferred_regions or not advocate.geographic_region:
        return True

    region = advocate.geographic_region.lower()
    return any(
        region in p.lower() or p.lower() in region
        for p in preferred_regions
    )


def filter_eligible(
    advocates: List[Advocate],
    opportunity: Optional[Opportunity] = None,
    criteria: Optional[MatchingCriteria] = None,
) -> List[Advocate]:
    """
    Hard pass/fail gate applied before any scoring.

    Drops, in order:
      - advocates listed in criteria.exclude_advocate_ids
      - advocates whose status is not 'active' (unless include_inactive)
      - advocates at or over max_calls_per_month (rejected, never queued)
      - advocates outside criteria.preferred_regions, when given

    The opportunity is accepted for call-site symmetry with the scorer;
    none of the rules depend on it. Input order is preserved.
    """
    criteria = criteria or MatchingCriteria()
    excluded = set(criteria.exclude_advocate_ids)

    eligible: List[Advocate] = []
    dropped = {"excluded": 0, "status": 0, "capacity": 0, "region": 0}

    for a in advocates:
        if a.id in excluded:
            dropped["excluded"] += 1
            continue
        if not criteria.include_inactive and a.status != "active":
            dropped["status"] += 1
            continue
        if not has_capacity(a):
            dropped["capacity"] += 1
            continue
        if not _in_preferred_regions(a, criteria.preferred_regions):
            dropped["region"] += 1
            continue
        eligible.append(a)

    logger.debug(
        "Eligibility for %s: %d of %d advocates pass (dropped %s)",
        opportunity.id if opportunity else "-",
        len(eligible),
        len(advocates),
        dropped,
    )
    return eligible
