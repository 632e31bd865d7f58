# tests/test_scenarios.py
import unittest
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from peerchamps_matching.models import Advocate, Opportunity, MatchingCriteria
from peerchamps_matching.matching.engine import (
    find_matching_advocates,
    get_matching_recommendations,
    find_matches_for_opportunities,
    matches_for_opportunity,
)
from peerchamps_matching.matching.scoring import score_advocate
from peerchamps_matching.matching.ranking import classify_confidence
from peerchamps_matching.data_generation.demo_dataset import make_demo_dataset
from peerchamps_matching.data_generation.vocab import USE_CASES


def manufacturing_advocate(**overrides):
    fields = dict(
        id="A001",
        company_id="acme",
        name="Dana Lee",
        industry="Manufacturing",
        company_size="201-500",
        geographic_region="North America",
        use_cases=["Process Automation", "Quality Control"],
        availability_score=87,
        max_calls_per_month=4,
        total_calls_completed=0,
        status="active",
    )
    fields.update(overrides)
    return Advocate(**fields)


def manufacturing_opportunity(**overrides):
    fields = dict(
        id="O001",
        company_id="acme",
        opportunity_name="Plant modernisation",
        desired_advocate_industry="Manufacturing",
        desired_advocate_size="201-500",
        desired_advocate_region="North America",
        desired_use_cases=["Process Automation", "Quality Control"],
    )
    fields.update(overrides)
    return Opportunity(**fields)


class TestMatchingScenarios(unittest.TestCase):

    def setUp(self):
        self.advocates, self.opportunities = make_demo_dataset(num_advocates=40, num_opportunities=8)

    def test_perfect_manufacturing_match(self):
        """Full profile match lands in the excellent band with the expected reasons."""
        outcome = find_matching_advocates(
            [manufacturing_advocate()], manufacturing_opportunity()
        )

        self.assertEqual(len(outcome.matches), 1)
        match = outcome.matches[0]

        # 25 industry + 15 size + 25 use cases + 10 region + 8.7 availability
        self.assertEqual(match.score, 84)
        self.assertGreaterEqual(match.score, 80)
        self.assertEqual(match.confidence, "high")
        self.assertIn("Industry match: Manufacturing", match.reasons)
        self.assertIn("Use case match: Process Automation", match.reasons)
        self.assertIn("Use case match: Quality Control", match.reasons)

    def test_empty_pool(self):
        """No advocates -> empty outcome, zeroed stats, no exception."""
        outcome = find_matching_advocates([], manufacturing_opportunity())

        self.assertEqual(outcome.matches, [])
        self.assertEqual(outcome.stats.total_advocates, 0)
        self.assertEqual(outcome.stats.eligible_advocates, 0)
        self.assertEqual(outcome.stats.matches_found, 0)
        self.assertEqual(outcome.stats.average_score, 0)
        self.assertEqual(outcome.stats.top_score, 0)

    def test_capacity_exhausted_is_excluded(self):
        """An advocate at the monthly cap never matches, even with a perfect profile."""
        advocate = manufacturing_advocate(total_calls_completed=4, max_calls_per_month=4)
        outcome = find_matching_advocates([advocate], manufacturing_opportunity())

        self.assertEqual(outcome.matches, [])
        self.assertEqual(outcome.stats.total_advocates, 1)
        self.assertEqual(outcome.stats.eligible_advocates, 0)

    def test_non_active_never_returned_by_default(self):
        advocates = [
            manufacturing_advocate(id=f"A{i}", status=status)
            for i, status in enumerate(["active", "inactive", "pending", "blacklisted"])
        ]
        outcome = find_matching_advocates(advocates, manufacturing_opportunity())
        self.assertEqual([m.advocate.id for m in outcome.matches], ["A0"])

        with_inactive = get_matching_recommendations(
            advocates, manufacturing_opportunity(), include_inactive=True
        )
        self.assertEqual(len(with_inactive.matches), 4)

    def test_recommendation_overrides_replace_defaults(self):
        outcome = get_matching_recommendations(
            [manufacturing_advocate()], manufacturing_opportunity(), opportunity_id="custom", min_score=90
        )
        self.assertEqual(outcome.stats.criteria.opportunity_id, "custom")
        self.assertEqual(outcome.stats.criteria.min_score, 90)
        self.assertEqual(outcome.matches, [])

    def test_non_active_never_returned_on_demo_data(self):
        for opp in self.opportunities:
            outcome = find_matching_advocates(
                self.advocates, opp, MatchingCriteria(min_score=0, max_results=100)
            )
            for m in outcome.matches:
                self.assertEqual(m.advocate.status, "active")

    def test_result_bounds(self):
        """Every result respects max_results, min_score, the score range and the tier mapping."""
        criteria = MatchingCriteria(max_results=3, min_score=40)
        for opp in self.opportunities:
            outcome = find_matching_advocates(self.advocates, opp, criteria)
            self.assertLessEqual(len(outcome.matches), 3)
            self.assertEqual(outcome.stats.matches_found, len(outcome.matches))
            for m in outcome.matches:
                self.assertGreaterEqual(m.score, 40)
                self.assertGreaterEqual(m.score, 0)
                self.assertLessEqual(m.score, 100)
                self.assertEqual(m.confidence, classify_confidence(m.score))

            scores = [m.score for m in outcome.matches]
            self.assertEqual(scores, sorted(scores, reverse=True))
            if scores:
                self.assertEqual(outcome.stats.top_score, scores[0])

    def test_idempotent(self):
        """Same inputs -> identical ordered results."""
        for opp in self.opportunities:
            first = find_matching_advocates(self.advocates, opp)
            second = find_matching_advocates(self.advocates, opp)
            self.assertEqual(first.matches, second.matches)
            self.assertEqual(first.stats, second.stats)

    def test_extra_use_case_never_lowers_score(self):
        """Adding a use case to an advocate (all else equal) never decreases its score."""
        for opp in self.opportunities:
            for a in self.advocates:
                before = score_advocate(a, opp).score
                for extra in USE_CASES:
                    if extra in a.use_cases:
                        continue
                    richer = manufacturing_advocate(**{**a.__dict__, "use_cases": a.use_cases + [extra]})
                    self.assertGreaterEqual(score_advocate(richer, opp).score, before)

    def test_matching_use_case_raises_score(self):
        one = manufacturing_advocate(use_cases=["Process Automation"])
        two = manufacturing_advocate(use_cases=["Process Automation", "Quality Control"])
        opp = manufacturing_opportunity()
        self.assertGreater(score_advocate(two, opp).score, score_advocate(one, opp).score)

    def test_missing_desired_fields_give_no_bonus(self):
        """An opportunity with no wishes at all only rewards availability."""
        bare = Opportunity(id="O9", company_id="acme", opportunity_name="Bare")
        outcome = find_matching_advocates(
            [manufacturing_advocate(availability_score=100)], bare, MatchingCriteria(min_score=0)
        )
        self.assertEqual(len(outcome.matches), 1)
        self.assertEqual(outcome.matches[0].score, 10)
        self.assertEqual(outcome.matches[0].reasons, ("Availability: 100/100",))

    def test_multiple_opportunities(self):
        criteria = MatchingCriteria(max_results=3)
        tagged, stats = find_matches_for_opportunities(self.advocates, self.opportunities, criteria)

        self.assertEqual(stats.matches_found, len(tagged))
        self.assertEqual(stats.criteria.opportunity_id, "multiple")
        scores = [om.score for om in tagged]
        self.assertEqual(scores, sorted(scores, reverse=True))

        for opp in self.opportunities:
            own = matches_for_opportunity(tagged, opp.id)
            single = find_matching_advocates(self.advocates, opp, criteria)
            self.assertEqual(own, single.matches)


if __name__ == '__main__':
    unittest.main()
