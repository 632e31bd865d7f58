# peerchamps_matching/assignment/milp_model.py
from __future__ import annotations

from typing import Dict, List, Tuple

import pulp


def build_assignment_model(
    opportunity_ids: List[str],
    advocate_ids: List[str],
    candidate_scores: Dict[Tuple[str, str], int],
    capacity: Dict[str, int],
    urgency_weight: Dict[str, float],
    references_per_opportunity: int = 1,
) -> Tuple[pulp.LpProblem, Dict[Tuple[str, str], pulp.LpVariable]]:
    """
    MILP for handing out reference calls across several opportunities.

    Variables (only for candidate pairs):
        y[o, a] = 1 if advocate a is put forward for opportunity o.

    Objective:
        maximize  sum_{o,a} score[o,a] * urgency_weight[o] * y[o,a]

    Rules encoded:

      1) Each opportunity gets at most `references_per_opportunity` advocates:
           ∀o: sum_a y[o,a] <= references_per_opportunity

      2) An advocate never goes over the calls left this month:
           ∀a: sum_o y[o,a] <= capacity[a]

    Pairs that are not candidates simply have no variable, so the model is
    always feasible (assigning nobody satisfies every row).
    """
    # Index-based names; record IDs may contain characters PuLP rewrites.
    opp_index = {o: i for i, o in enumerate(opportunity_ids)}
    adv_index = {a: j for j, a in enumerate(advocate_ids)}

    prob = pulp.LpProblem("PeerChamps_Reference_Assignment", pulp.LpMaximize)

    # ---------- Decision variables ----------
    y: Dict[Tuple[str, str], pulp.LpVariable] = {}
    for (o, a) in candidate_scores:
        if o not in opp_index or a not in adv_index:
            continue
        y[(o, a)] = pulp.LpVariable(
            f"y_{opp_index[o]}_{adv_index[a]}", lowBound=0, upBound=1, cat="Binary"
        )

    # ---------- Objective ----------
    prob += pulp.lpSum(
        candidate_scores[key] * urgency_weight.get(key[0], 1.0) * var
        for key, var in y.items()
    ), "Maximize_Weighted_Match_Score"

    # ---------- Constraints ----------

    # (1) References per opportunity
    for o in opportunity_ids:
        terms = [var for (oo, _), var in y.items() if oo == o]
        if terms:
            prob += (
                pulp.lpSum(terms) <= references_per_opportunity,
                f"Refs_per_opp_{opp_index[o]}",
            )

    # (2) Monthly capacity per advocate
    for a in advocate_ids:
        terms = [var for (_, aa), var in y.items() if aa == a]
        if terms:
            prob += (
                pulp.lpSum(terms) <= capacity.get(a, 0),
                f"Capacity_adv_{adv_index[a]}",
            )

    return prob, y
