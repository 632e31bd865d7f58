# tests/test_scoring.py
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from peerchamps_matching.models import Advocate, Opportunity
from peerchamps_matching.matching.scoring import (
    industry_score,
    company_size_score,
    region_score,
    use_case_score,
    expertise_score,
    availability_score,
    overlap_fraction,
    covered_targets,
    score_advocate,
    round_score,
    ranking_key,
)


def advocate(**kw):
    kw.setdefault("id", "A1")
    kw.setdefault("company_id", "acme")
    kw.setdefault("name", "Test Advocate")
    return Advocate(**kw)


def opportunity(**kw):
    kw.setdefault("id", "O1")
    kw.setdefault("company_id", "acme")
    kw.setdefault("opportunity_name", "Test Deal")
    return Opportunity(**kw)


class TestIndustryAndRegion(unittest.TestCase):

    def test_exact_industry_is_case_insensitive(self):
        f = industry_score(advocate(industry="manufacturing"), opportunity(desired_advocate_industry="Manufacturing"))
        self.assertEqual(f.fraction, 1.0)
        self.assertEqual(f.points, 25)
        self.assertEqual(f.reasons, ["Industry match: manufacturing"])

    def test_partial_industry(self):
        f = industry_score(advocate(industry="Industrial Manufacturing"),
                           opportunity(desired_advocate_industry="Manufacturing"))
        self.assertAlmostEqual(f.points, 18.75)
        self.assertTrue(f.reasons[0].startswith("Partial industry match"))

    def test_related_industry(self):
        f = industry_score(advocate(industry="Software"), opportunity(desired_advocate_industry="Technology"))
        self.assertAlmostEqual(f.points, 15.0)
        self.assertEqual(f.reasons, ["Related industry: Software / Technology"])

    def test_falls_back_to_prospect_industry(self):
        f = industry_score(advocate(industry="Healthcare"), opportunity(prospect_industry="Healthcare"))
        self.assertEqual(f.points, 25)

    def test_missing_industry_gives_nothing(self):
        self.assertEqual(industry_score(advocate(industry="Retail"), opportunity()).points, 0)
        self.assertEqual(
            industry_score(advocate(), opportunity(desired_advocate_industry="Retail")).reasons, []
        )

    def test_unrelated_industry(self):
        f = industry_score(advocate(industry="Retail"), opportunity(desired_advocate_industry="Banking"))
        self.assertEqual(f.points, 0)

    def test_related_region(self):
        f = region_score(advocate(geographic_region="USA"),
                         opportunity(desired_advocate_region="North America"))
        self.assertAlmostEqual(f.points, 6.0)

    def test_region_falls_back_to_opportunity_region(self):
        f = region_score(advocate(geographic_region="Europe"), opportunity(geographic_region="europe"))
        self.assertEqual(f.points, 10)
        self.assertEqual(f.reasons, ["Region match: Europe"])


class TestCompanySize(unittest.TestCase):

    def test_exact(self):
        f = company_size_score(advocate(company_size="201-500"), opportunity(desired_advocate_size="201-500"))
        self.assertEqual(f.points, 15)
        self.assertEqual(f.reasons, ["Company size match: 201-500"])

    def test_one_level_apart(self):
        f = company_size_score(advocate(company_size="51-200"), opportunity(desired_advocate_size="201-500"))
        self.assertAlmostEqual(f.points, 12.0)
        self.assertEqual(f.reasons, ["Similar company size: 51-200 vs 201-500"])

    def test_far_apart(self):
        f = company_size_score(advocate(company_size="1-10"), opportunity(prospect_size="1000+"))
        self.assertAlmostEqual(f.points, 3.0)

    def test_unknown_label(self):
        f = company_size_score(advocate(company_size="huge"), opportunity(desired_advocate_size="201-500"))
        self.assertEqual(f.points, 0)


class TestOverlap(unittest.TestCase):

    def test_overlap_fraction(self):
        self.assertEqual(overlap_fraction(0, 2), 0.0)
        self.assertAlmostEqual(overlap_fraction(1, 2), 2 / 3)
        self.assertEqual(overlap_fraction(2, 2), 1.0)
        self.assertEqual(overlap_fraction(3, 2), 1.0)
        self.assertEqual(overlap_fraction(1, 0), 0.0)

    def test_each_extra_match_adds_less(self):
        gains = [overlap_fraction(k + 1, 4) - overlap_fraction(k, 4) for k in range(4)]
        for earlier, later in zip(gains, gains[1:]):
            self.assertGreater(earlier, later)

    def test_covered_targets_substring_and_dedupe(self):
        covered = covered_targets(
            ["Automation", "quality control"],
            ["Process Automation", "Quality Control", "quality control", "Compliance"],
        )
        self.assertEqual(covered, ["Process Automation", "Quality Control"])

    def test_use_case_reason_per_match(self):
        f = use_case_score(
            advocate(use_cases=["Process Automation"]),
            opportunity(desired_use_cases=["Process Automation", "Quality Control"]),
        )
        self.assertEqual(f.reasons, ["Use case match: Process Automation"])
        self.assertAlmostEqual(f.points, 25 * 2 / 3)

    def test_use_case_falls_back_to_single_use_case(self):
        f = use_case_score(advocate(use_cases=["Compliance"]), opportunity(use_case="Compliance"))
        self.assertEqual(f.points, 25)

    def test_explicit_empty_use_cases_do_not_fall_back(self):
        f = use_case_score(
            advocate(use_cases=["Compliance"]),
            opportunity(use_case="Compliance", desired_use_cases=[]),
        )
        self.assertEqual(f.points, 0)
        self.assertEqual(f.reasons, [])

    def test_expertise(self):
        f = expertise_score(
            advocate(expertise_areas=["Integrations", "Security Review"]),
            opportunity(desired_expertise_areas=["Security Review"]),
        )
        self.assertEqual(f.points, 15)
        self.assertEqual(f.reasons, ["Expertise match: Security Review"])

    def test_no_desired_expertise(self):
        f = expertise_score(advocate(expertise_areas=["Integrations"]), opportunity())
        self.assertEqual(f.points, 0)
        self.assertEqual(f.reasons, [])


class TestTotals(unittest.TestCase):

    def test_availability_is_proportional(self):
        self.assertAlmostEqual(availability_score(advocate(availability_score=50)).points, 5.0)
        zero = availability_score(advocate(availability_score=0))
        self.assertEqual(zero.points, 0)
        self.assertEqual(zero.reasons, [])

    def test_out_of_range_availability_is_clamped(self):
        self.assertEqual(availability_score(advocate(availability_score=250)).points, 10)

    def test_score_never_exceeds_range(self):
        a = advocate(
            industry="Finance", company_size="11-50", geographic_region="Europe",
            use_cases=["Compliance"], expertise_areas=["ROI Modeling"], availability_score=100,
        )
        o = opportunity(
            desired_advocate_industry="Finance", desired_advocate_size="11-50",
            desired_advocate_region="Europe", desired_use_cases=["Compliance"],
            desired_expertise_areas=["ROI Modeling"],
        )
        scored = score_advocate(a, o)
        self.assertEqual(scored.score, 100)
        self.assertEqual(len(scored.factors), 6)
        self.assertEqual(len(scored.reasons), 6)

    def test_round_score(self):
        self.assertEqual(round_score(2.5), 3)
        self.assertEqual(round_score(83.7), 84)
        self.assertEqual(round_score(83.2), 83)
        self.assertEqual(round_score(-4), 0)
        self.assertEqual(round_score(100.4), 100)

    def test_ranking_key_tie_break(self):
        busy = advocate(id="A1", availability_score=70, total_calls_completed=3)
        free = advocate(id="A2", availability_score=70, total_calls_completed=0)
        available = advocate(id="A3", availability_score=90, total_calls_completed=3)
        ordered = sorted([busy, free, available], key=lambda a: ranking_key(60, a))
        self.assertEqual([a.id for a in ordered], ["A3", "A2", "A1"])
        self.assertLess(ranking_key(61, busy), ranking_key(60, available))


if __name__ == '__main__':
    unittest.main()
