# peerchamps_matching/matching/engine.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from ..models import (
    Advocate,
    Opportunity,
    MatchingCriteria,
    MatchingStats,
    MatchingOutcome,
    MatchResult,
    OpportunityMatch,
)
from .eligibility import filter_eligible
from .scoring import score_advocate
from .ranking import rank

logger = logging.getLogger(__name__)


def _average(scores: List[int]) -> int:
    if not scores:
        return 0
    return int(sum(scores) / len(scores) + 0.5)


def find_matching_advocates(
    advocates: List[Advocate],
    opportunity: Opportunity,
    criteria: Optional[MatchingCriteria] = None,
) -> MatchingOutcome:
    """
    Rank the advocate pool against one opportunity.

    Eligibility runs strictly before scoring, so an ineligible advocate
    never reaches the result. An empty pool gives an empty outcome.
    """
    criteria = criteria or MatchingCriteria(opportunity_id=opportunity.id)

    eligible = filter_eligible(advocates, opportunity, criteria)
    scored = [score_advocate(a, opportunity) for a in eligible]
    matches = rank(scored, max_results=criteria.max_results, min_score=criteria.min_score)

    scores = [m.score for m in matches]
    stats = MatchingStats(
        total_advocates=len(advocates),
        eligible_advocates=len(eligible),
        matches_found=len(matches),
        average_score=_average(scores),
        top_score=scores[0] if scores else 0,
        criteria=criteria,
    )

    logger.info(
        "Matched opportunity %s: %d/%d eligible, %d matches, top score %d",
        opportunity.id,
        stats.eligible_advocates,
        stats.total_advocates,
        stats.matches_found,
        stats.top_score,
    )
    return MatchingOutcome(matches=matches, stats=stats)


def get_matching_recommendations(
    advocates: List[Advocate],
    opportunity: Opportunity,
    **overrides,
) -> MatchingOutcome:
    """Same as find_matching_advocates, with default criteria plus keyword overrides."""
    criteria = MatchingCriteria(**{"opportunity_id": opportunity.id, **overrides})
    return find_matching_advocates(advocates, opportunity, criteria)


def find_matches_for_opportunities(
    advocates: List[Advocate],
    opportunities: List[Opportunity],
    criteria: Optional[MatchingCriteria] = None,
) -> Tuple[List[OpportunityMatch], MatchingStats]:
    """
    Run the engine once per opportunity and merge the results.

    All matches come back sorted by score (stable, so per-opportunity
    order is kept on ties). The combined stats count the pool once and
    aggregate over every returned match.
    """
    base = criteria or MatchingCriteria()
    tagged: List[OpportunityMatch] = []
    eligible_counts: List[int] = []

    for opp in opportunities:
        outcome = find_matching_advocates(
            advocates, opp, replace(base, opportunity_id=opp.id)
        )
        eligible_counts.append(outcome.stats.eligible_advocates)
        tagged.extend(
            OpportunityMatch(
                opportunity_id=opp.id,
                opportunity_name=opp.opportunity_name,
                match=m,
            )
            for m in outcome.matches
        )

    tagged.sort(key=lambda om: -om.score)
    scores = [om.score for om in tagged]

    stats = MatchingStats(
        total_advocates=len(advocates),
        eligible_advocates=eligible_counts[0] if eligible_counts else 0,
        matches_found=len(tagged),
        average_score=_average(scores),
        top_score=scores[0] if scores else 0,
        criteria=replace(base, opportunity_id="multiple"),
    )
    return tagged, stats


def matches_for_opportunity(
    tagged: List[OpportunityMatch], opportunity_id: str
) -> List[MatchResult]:
    return [om.match for om in tagged if om.opportunity_id == opportunity_id]


def match_opportunity(
    company_id: str,
    opportunity_id: str,
    advocate_store,
    opportunity_store,
    **overrides,
) -> MatchingOutcome:
    """
    Load one tenant's snapshot from the stores and run the engine.

    The company is always passed in explicitly; stores raise
    RecordNotFoundError if the opportunity belongs to another company.
    """
    opportunity = opportunity_store.get(company_id, opportunity_id)
    advocates = advocate_store.list(company_id)
    return get_matching_recommendations(advocates, opportunity, **overrides)
