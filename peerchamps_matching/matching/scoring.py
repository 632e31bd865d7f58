# peerchamps_matching/matching/scoring.py
from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from ..models import Advocate, Opportunity, FactorScore, ScoredAdvocate
from ..config import (
    INDUSTRY_WEIGHT,
    COMPANY_SIZE_WEIGHT,
    USE_CASE_WEIGHT,
    EXPERTISE_WEIGHT,
    REGION_WEIGHT,
    AVAILABILITY_WEIGHT,
    PARTIAL_MATCH_FRACTION,
    RELATED_MATCH_FRACTION,
    OVERLAP_DECAY,
    COMPANY_SIZE_LEVEL,
    SIZE_PROXIMITY_FRACTION,
    SIZE_FAR_FRACTION,
    RELATED_INDUSTRIES,
    RELATED_REGIONS,
    SCORE_MIN,
    SCORE_MAX,
)


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _texts_overlap(a: str, b: str) -> bool:
    """Case-insensitive equality or substring in either direction."""
    a, b = _norm(a), _norm(b)
    if not a or not b:
        return False
    return a == b or a in b or b in a


def _are_related(a: str, b: str, related: Dict[str, List[str]]) -> bool:
    a, b = _norm(a), _norm(b)
    for key, others in related.items():
        if (key == a and b in others) or (key == b and a in others):
            return True
    return False


def _no_match(name: str) -> FactorScore:
    return FactorScore(name=name, fraction=0.0, points=0.0)


def _factor(name: str, fraction: float, weight: float, reasons: List[str]) -> FactorScore:
    return FactorScore(name=name, fraction=fraction, points=fraction * weight, reasons=reasons)


def _label_score(
    name: str,
    label: str,
    advocate_value: Optional[str],
    target_value: Optional[str],
    weight: float,
    related: Dict[str, List[str]],
) -> FactorScore:
    """
    Shared exact / partial / related comparison for industry and region.
    Missing values on either side give no bonus.
    """
    if not _norm(advocate_value) or not _norm(target_value):
        return _no_match(name)

    if _norm(advocate_value) == _norm(target_value):
        return _factor(name, 1.0, weight, [f"{label} match: {advocate_value}"])

    if _texts_overlap(advocate_value, target_value):
        return _factor(
            name,
            PARTIAL_MATCH_FRACTION,
            weight,
            [f"Partial {label.lower()} match: {advocate_value} / {target_value}"],
        )

    if _are_related(advocate_value, target_value, related):
        return _factor(
            name,
            RELATED_MATCH_FRACTION,
            weight,
            [f"Related {label.lower()}: {advocate_value} / {target_value}"],
        )

    return _no_match(name)


def industry_score(advocate: Advocate, opportunity: Opportunity) -> FactorScore:
    target = opportunity.desired_advocate_industry or opportunity.prospect_industry
    return _label_score(
        "industry", "Industry", advocate.industry, target, INDUSTRY_WEIGHT, RELATED_INDUSTRIES
    )


def region_score(advocate: Advocate, opportunity: Opportunity) -> FactorScore:
    target = opportunity.desired_advocate_region or opportunity.geographic_region
    return _label_score(
        "region", "Region", advocate.geographic_region, target, REGION_WEIGHT, RELATED_REGIONS
    )


def company_size_score(advocate: Advocate, opportunity: Opportunity) -> FactorScore:
    """
    Exact size match earns the full weight; otherwise the fraction shrinks
    with distance in the size hierarchy. Unknown size labels score 0.
    """
    target = opportunity.desired_advocate_size or opportunity.prospect_size
    a_level = COMPANY_SIZE_LEVEL.get(advocate.company_size or "")
    t_level = COMPANY_SIZE_LEVEL.get(target or "")
    if a_level is None or t_level is None:
        return _no_match("company_size")

    distance = abs(a_level - t_level)
    if distance == 0:
        return _factor(
            "company_size", 1.0, COMPANY_SIZE_WEIGHT,
            [f"Company size match: {advocate.company_size}"],
        )

    fraction = SIZE_PROXIMITY_FRACTION.get(distance, SIZE_FAR_FRACTION)
    return _factor(
        "company_size", fraction, COMPANY_SIZE_WEIGHT,
        [f"Similar company size: {advocate.company_size} vs {target}"],
    )


def overlap_fraction(matched: int, total: int, decay: float = OVERLAP_DECAY) -> float:
    """
    Share of a factor's weight for `matched` of `total` targets covered.

    Match i (0-based) is worth decay**i, normalised so that covering every
    target earns 1.0. The first match counts most; each extra one adds less.
    """
    if total <= 0 or matched <= 0:
        return 0.0
    matched = min(matched, total)
    earned = sum(decay ** i for i in range(matched))
    possible = sum(decay ** i for i in range(total))
    return earned / possible


def _dedupe(items: List[str]) -> List[str]:
    seen = set()
    out = []
    for item in items:
        key = _norm(item)
        if key and key not in seen:
            seen.add(key)
            out.append(item)
    return out


def covered_targets(advocate_items: Optional[List[str]], targets: Optional[List[str]]) -> List[str]:
    """Targets (in target order) matched by at least one advocate item."""
    items = advocate_items or []
    return [t for t in _dedupe(targets or []) if any(_texts_overlap(i, t) for i in items)]


def _overlap_score(
    name: str,
    label: str,
    advocate_items: Optional[List[str]],
    targets: Optional[List[str]],
    weight: float,
) -> FactorScore:
    targets = _dedupe(targets or [])
    covered = covered_targets(advocate_items, targets)
    if not covered:
        return _no_match(name)

    fraction = overlap_fraction(len(covered), len(targets))
    return _factor(name, fraction, weight, [f"{label} match: {t}" for t in covered])


def use_case_score(advocate: Advocate, opportunity: Opportunity) -> FactorScore:
    targets = opportunity.desired_use_cases
    if targets is None and opportunity.use_case:
        targets = [opportunity.use_case]
    return _overlap_score("use_cases", "Use case", advocate.use_cases, targets, USE_CASE_WEIGHT)


def expertise_score(advocate: Advocate, opportunity: Opportunity) -> FactorScore:
    return _overlap_score(
        "expertise",
        "Expertise",
        advocate.expertise_areas,
        opportunity.desired_expertise_areas,
        EXPERTISE_WEIGHT,
    )


def availability_score(advocate: Advocate) -> FactorScore:
    value = min(max(advocate.availability_score or 0, 0), 100)
    if value == 0:
        return _no_match("availability")
    return _factor(
        "availability", value / 100.0, AVAILABILITY_WEIGHT, [f"Availability: {value}/100"]
    )


def score_advocate(advocate: Advocate, opportunity: Opportunity) -> ScoredAdvocate:
    """
    Additive weighted comparison of one advocate against one opportunity.

    Factors (weights in config): industry, company size, use cases,
    expertise areas, region, availability. Each contributing factor adds
    its reasons; the total is clamped to [SCORE_MIN, SCORE_MAX].
    """
    factors = [
        industry_score(advocate, opportunity),
        company_size_score(advocate, opportunity),
        use_case_score(advocate, opportunity),
        expertise_score(advocate, opportunity),
        region_score(advocate, opportunity),
        availability_score(advocate),
    ]

    total = sum(f.points for f in factors)
    total = min(max(total, SCORE_MIN), SCORE_MAX)

    reasons: List[str] = []
    for f in factors:
        reasons.extend(f.reasons)

    return ScoredAdvocate(advocate=advocate, score=total, reasons=reasons, factors=factors)


def round_score(score: float) -> int:
    """Round half up (2.5 -> 3), then clamp."""
    rounded = int(math.floor(score + 0.5))
    return min(max(rounded, SCORE_MIN), SCORE_MAX)


def ranking_key(score: float, advocate: Advocate) -> Tuple[float, int, int]:
    """
    Sort key: score descending, then availability descending, then fewer
    completed calls first. Use with a stable sort so input order breaks
    any remaining tie.
    """
    return (-score, -(advocate.availability_score or 0), advocate.total_calls_completed)
