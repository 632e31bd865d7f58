# peerchamps_matching/assignment/candidates.py
from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from ..models import Advocate, Opportunity, MatchingCriteria
from ..matching.engine import find_matching_advocates


def build_candidate_scores(
    advocates: List[Advocate],
    opportunities: List[Opportunity],
    criteria: Optional[MatchingCriteria] = None,
) -> Dict[Tuple[str, str], int]:
    """
    Candidate pairs for batch assignment.

    Key: (opportunity_id, advocate_id) -> rounded match score.
    Only advocates on each opportunity's ranked shortlist (eligible,
    >= min_score, within max_results) become candidates.
    """
    base = criteria or MatchingCriteria()
    scores: Dict[Tuple[str, str], int] = {}

    for opp in opportunities:
        outcome = find_matching_advocates(
            advocates, opp, replace(base, opportunity_id=opp.id)
        )
        for m in outcome.matches:
            scores[(opp.id, m.advocate.id)] = m.score

    return scores


def remaining_capacity(advocates: List[Advocate]) -> Dict[str, int]:
    """Calls each advocate can still take this month."""
    return {a.id: a.remaining_capacity() for a in advocates}
