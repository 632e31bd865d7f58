# run_matching.py

import logging
import os

import pandas as pd

from peerchamps_matching.config import (
    ADVOCATES_CSV_PATH,
    OPPORTUNITIES_CSV_PATH,
    DEMO_COMPANY_ID,
)
from peerchamps_matching.models import MatchingCriteria
from peerchamps_matching.data_generation.demo_dataset import make_demo_dataset, seed_stores
from peerchamps_matching.data_generation.snapshot_loader import (
    load_advocates_csv,
    load_opportunities_csv,
)
from peerchamps_matching.matching.engine import match_opportunity, find_matches_for_opportunities
from peerchamps_matching.matching.insights import aggregate
from peerchamps_matching.matching.reporting import matches_to_frame, distribution_to_frame
from peerchamps_matching.assignment.solve import solve_assignment


def load_snapshot(company_id: str):
    """Use exported CSV snapshots when both exist, demo data otherwise."""
    if os.path.exists(ADVOCATES_CSV_PATH) and os.path.exists(OPPORTUNITIES_CSV_PATH):
        print(f"Found snapshots in {os.path.dirname(ADVOCATES_CSV_PATH)}/. Loading...")
        return (
            load_advocates_csv(ADVOCATES_CSV_PATH, company_id),
            load_opportunities_csv(OPPORTUNITIES_CSV_PATH, company_id),
        )
    print("No snapshot CSVs found. Generating demo data...")
    return make_demo_dataset(company_id=company_id)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pd.set_option("display.max_colwidth", 80)
    pd.set_option("display.width", 160)

    company_id = DEMO_COMPANY_ID
    advocates, opportunities = load_snapshot(company_id)
    advocate_store, opportunity_store = seed_stores(advocates, opportunities)

    print(f"Loaded {len(advocates)} advocates and {len(opportunities)} opportunities.")
    print()

    # ============================
    #  PER-OPPORTUNITY MATCHING
    # ============================
    for opp in opportunities:
        outcome = match_opportunity(
            company_id, opp.id, advocate_store, opportunity_store, max_results=5
        )
        stats = outcome.stats
        print(f"=== {opp.id}: {opp.opportunity_name} (urgency {opp.reference_urgency}) ===")
        print(
            f"pool {stats.total_advocates} | eligible {stats.eligible_advocates} | "
            f"matches {stats.matches_found} | avg {stats.average_score} | top {stats.top_score}"
        )
        if outcome.matches:
            print(matches_to_frame(outcome.matches).drop(columns=["reasons"]).to_string(index=False))
        else:
            print("No advocate meets the eligibility and score thresholds.")
        print()

    # ============================
    #  INSIGHTS ACROSS ALL OPPORTUNITIES
    # ============================
    tagged, combined = find_matches_for_opportunities(
        advocates, opportunities, MatchingCriteria(max_results=5)
    )
    all_matches = [om.match for om in tagged]
    insights = aggregate(all_matches)

    print("=== MATCH QUALITY INSIGHTS ===")
    print(
        f"matches {combined.matches_found} | avg {insights.average_score} | "
        f"high {insights.high_confidence_count} | medium {insights.medium_confidence_count} | "
        f"low {insights.low_confidence_count}"
    )
    print()
    print("Score distribution:")
    print(distribution_to_frame(insights.score_distribution, len(all_matches)).to_string(index=False))
    print()
    print("Industry distribution:")
    print(distribution_to_frame(insights.industry_distribution, len(all_matches)).to_string(index=False))
    print()
    print("Region distribution:")
    print(distribution_to_frame(insights.region_distribution, len(all_matches)).to_string(index=False))
    print()
    print("Top reasons:")
    for reason in insights.top_reasons:
        print(f"  - {reason}")
    print()

    # =====================================
    #  BATCH ASSIGNMENT (capacity-aware MILP)
    # =====================================
    print("=== BATCH REFERENCE ASSIGNMENT ===")
    status, assignments = solve_assignment(advocates, opportunities, MatchingCriteria(max_results=5))
    print("Solver status:", status)

    if status not in ("Optimal", "Feasible"):
        print("No assignment possible - model is", status)
        return

    advocate_names = {a.id: a.name for a in advocates}
    assigned = {r.opportunity_id: r for r in assignments}
    for opp in opportunities:
        r = assigned.get(opp.id)
        if r is None:
            print(f"{opp.id}: - (no advocate left with capacity)")
        else:
            print(f"{opp.id}: {r.advocate_id} {advocate_names[r.advocate_id]} (score {r.score})")
    print()


if __name__ == "__main__":
    main()
