# peerchamps_matching/assignment/solve.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pulp

from ..models import Advocate, Opportunity, MatchingCriteria, ReferenceAssignment
from ..config import URGENCY_WEIGHTS, REFERENCES_PER_OPPORTUNITY_DEFAULT
from .candidates import build_candidate_scores, remaining_capacity
from .diagnostics import analyze_assignment_feasibility
from .milp_model import build_assignment_model

logger = logging.getLogger(__name__)

STRUCTURALLY_INFEASIBLE = "Structurally Infeasible"


def solve_assignment(
    advocates: List[Advocate],
    opportunities: List[Opportunity],
    criteria: Optional[MatchingCriteria] = None,
    references_per_opportunity: int = REFERENCES_PER_OPPORTUNITY_DEFAULT,
) -> Tuple[str, List[ReferenceAssignment]]:
    """
    Pick reference advocates for a batch of opportunities at once, so that
    popular advocates are not double-booked past their monthly cap.

    Returns (status, assignments). Assignments are ordered by the input
    opportunity order, then by score (best first).
    """
    if references_per_opportunity < 1:
        raise ValueError(
            f"references_per_opportunity must be >= 1, got {references_per_opportunity}."
        )

    opp_ids = [o.id for o in opportunities]
    candidate_scores = build_candidate_scores(advocates, opportunities, criteria)
    capacity = remaining_capacity(advocates)

    diag = analyze_assignment_feasibility(
        opp_ids, candidate_scores, capacity, references_per_opportunity
    )
    for msg in diag["messages"]:
        logger.info("Assignment diagnostics: %s", msg)

    if not diag["ok"]:
        return STRUCTURALLY_INFEASIBLE, []

    urgency = {o.id: URGENCY_WEIGHTS.get(o.reference_urgency, 1.0) for o in opportunities}

    prob, y = build_assignment_model(
        opportunity_ids=opp_ids,
        advocate_ids=[a.id for a in advocates],
        candidate_scores=candidate_scores,
        capacity=capacity,
        urgency_weight=urgency,
        references_per_opportunity=references_per_opportunity,
    )

    solver = pulp.PULP_CBC_CMD(msg=False)
    prob.solve(solver)
    status = pulp.LpStatus[prob.status]
    logger.info("Reference assignment solver status: %s", status)

    assignments: List[ReferenceAssignment] = []
    if status in ("Optimal", "Feasible"):
        for (o_id, a_id), var in y.items():
            val = var.varValue
            if val is not None and val > 0.5:
                assignments.append(
                    ReferenceAssignment(
                        opportunity_id=o_id,
                        advocate_id=a_id,
                        score=candidate_scores[(o_id, a_id)],
                    )
                )

    order = {o: i for i, o in enumerate(opp_ids)}
    assignments.sort(key=lambda r: (order[r.opportunity_id], -r.score, r.advocate_id))
    return status, assignments
