# peerchamps_matching/matching/insights.py
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from ..models import MatchResult, MatchInsights
from ..config import SCORE_BUCKETS, TOP_N_INSIGHTS_DEFAULT

UNKNOWN = "Unknown"


def score_bucket(score: float) -> str:
    for name, threshold in SCORE_BUCKETS:
        if score >= threshold:
            return name
    return SCORE_BUCKETS[-1][0]


def percentage(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(count * 100 / total + 0.5)


def _distribution(values: Iterable[str]) -> Dict[str, int]:
    # most_common keeps first-seen order among equal counts
    return dict(Counter(values).most_common())


def aggregate(matches: List[MatchResult], top_n: int = TOP_N_INSIGHTS_DEFAULT) -> MatchInsights:
    """
    Summarise a match list for reporting.

    Pure reduction over `matches`: tier counts, average score, a
    score-bucket histogram (every bucket present, possibly 0), industry and
    region distributions, the top_n most frequent reasons and the top_n
    advocates by score. Frequency ties keep first-seen order.
    """
    tiers = Counter(m.confidence for m in matches)

    buckets = {name: 0 for name, _ in SCORE_BUCKETS}
    for m in matches:
        buckets[score_bucket(m.score)] += 1

    reasons = Counter(r for m in matches for r in m.reasons)
    top_reasons = [r for r, _ in reasons.most_common(top_n)]

    # sorted() is stable, so equal scores stay in incoming order
    top_advocates = sorted(matches, key=lambda m: -m.score)[:top_n]

    total = sum(m.score for m in matches)
    average = int(total / len(matches) + 0.5) if matches else 0

    return MatchInsights(
        high_confidence_count=tiers.get("high", 0),
        medium_confidence_count=tiers.get("medium", 0),
        low_confidence_count=tiers.get("low", 0),
        average_score=average,
        score_distribution=buckets,
        industry_distribution=_distribution(m.advocate.industry or UNKNOWN for m in matches),
        region_distribution=_distribution(
            m.advocate.geographic_region or UNKNOWN for m in matches
        ),
        top_reasons=top_reasons,
        top_advocates=top_advocates,
    )
