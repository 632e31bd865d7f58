# peerchamps_matching/assignment/diagnostics.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple


def analyze_assignment_feasibility(
    opportunity_ids: List[str],
    candidate_scores: Dict[Tuple[str, str], int],
    capacity: Dict[str, int],
    references_per_opportunity: int = 1,
) -> Dict[str, Any]:
    """
    Check what a batch assignment can *possibly* achieve before building
    the MILP.

    Returns a dict with:
      - 'ok': bool (False when no opportunity has a single candidate)
      - 'messages': list[str] (human-readable diagnostics)
      - 'suggestion': str (summary)

      - 'demand': int            (opportunities * references_per_opportunity)
      - 'capacity': int          (remaining calls across candidate advocates)
      - 'candidates_per_opportunity': Dict[str, int]
      - 'uncovered_opportunities': List[str]   (no candidate at all)
      - 'short_opportunities': List[str]       (fewer candidates than requested)
    """
    messages: List[str] = []

    candidates_per_opp: Dict[str, int] = {o: 0 for o in opportunity_ids}
    candidate_advocates = set()
    for (o_id, a_id) in candidate_scores:
        if o_id in candidates_per_opp:
            candidates_per_opp[o_id] += 1
            candidate_advocates.add(a_id)

    demand = len(opportunity_ids) * references_per_opportunity
    total_capacity = sum(capacity.get(a_id, 0) for a_id in candidate_advocates)

    # ---------- 1. Opportunities nobody can serve ----------
    uncovered = [o for o, c in candidates_per_opp.items() if c == 0]
    for o in uncovered:
        messages.append(
            f"Opportunity {o} has no eligible advocate above the score threshold."
        )

    # ---------- 2. Opportunities with a thin shortlist ----------
    short = [
        o for o, c in candidates_per_opp.items()
        if 0 < c < references_per_opportunity
    ]
    for o in short:
        messages.append(
            f"Opportunity {o} has only {candidates_per_opp[o]} candidate(s) "
            f"but {references_per_opportunity} references were requested."
        )

    # ---------- 3. Total capacity vs total demand ----------
    if total_capacity < demand:
        messages.append(
            f"Candidate advocates have {total_capacity} calls left this month "
            f"but the batch asks for {demand}."
        )

    ok = bool(opportunity_ids) and len(uncovered) < len(opportunity_ids)

    if not ok:
        suggestion = (
            "No opportunity can be served: lower min_score, include inactive "
            "advocates, or recruit advocates for these profiles."
        )
    elif messages:
        suggestion = (
            "A partial assignment is possible; some requests will stay open "
            "until more advocate capacity is available."
        )
    else:
        suggestion = "Every reference request can be covered."

    return {
        "ok": ok,
        "messages": messages,
        "suggestion": suggestion,
        "demand": demand,
        "capacity": total_capacity,
        "candidates_per_opportunity": candidates_per_opp,
        "uncovered_opportunities": uncovered,
        "short_opportunities": short,
    }
