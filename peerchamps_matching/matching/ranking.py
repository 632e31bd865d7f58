# peerchamps_matching/matching/ranking.py
from __future__ import annotations

from typing import List

from ..models import MatchResult, ScoredAdvocate
from ..config import (
    HIGH_CONFIDENCE_THRESHOLD,
    MEDIUM_CONFIDENCE_THRESHOLD,
    CONFIDENCE_TIERS,
    MAX_RESULTS_DEFAULT,
    MIN_SCORE_DEFAULT,
    SCORE_MIN,
    SCORE_MAX,
)
from .scoring import round_score, ranking_key


def classify_confidence(score: float) -> str:
    if score >= HIGH_CONFIDENCE_THRESHOLD:
        return "high"
    if score >= MEDIUM_CONFIDENCE_THRESHOLD:
        return "medium"
    return "low"


def _check_options(max_results: int, min_score: float) -> None:
    if max_results < 0:
        raise ValueError(f"max_results must be >= 0, got {max_results}.")
    if not (SCORE_MIN <= min_score <= SCORE_MAX):
        raise ValueError(
            f"min_score must be between {SCORE_MIN} and {SCORE_MAX}, got {min_score}."
        )


def rank(
    scored: List[ScoredAdvocate],
    max_results: int = MAX_RESULTS_DEFAULT,
    min_score: float = MIN_SCORE_DEFAULT,
) -> List[MatchResult]:
    """
    Turn scored advocates into the final ranked match list:
      1) round scores to integers
      2) drop anything below min_score
      3) sort by ranking_key (stable, so input order settles full ties)
      4) keep the first max_results
    Confidence is derived from the rounded score here and nowhere else.
    """
    _check_options(max_results, min_score)

    rounded = [(round_score(s.score), s) for s in scored]
    kept = [(score, s) for score, s in rounded if score >= min_score]
    kept.sort(key=lambda pair: ranking_key(pair[0], pair[1].advocate))

    return [
        MatchResult(
            advocate=s.advocate,
            score=score,
            confidence=classify_confidence(score),
            reasons=tuple(s.reasons),
        )
        for score, s in kept[:max_results]
    ]


def filter_by_confidence(matches: List[MatchResult], confidence: str) -> List[MatchResult]:
    if confidence not in CONFIDENCE_TIERS:
        raise ValueError(f"Unknown confidence tier: {confidence!r}")
    return [m for m in matches if m.confidence == confidence]


def filter_by_score(matches: List[MatchResult], min_score: float) -> List[MatchResult]:
    return [m for m in matches if m.score >= min_score]


def top_matches(matches: List[MatchResult], count: int) -> List[MatchResult]:
    return matches[:max(count, 0)]


def matches_for_advocate(matches: List[MatchResult], advocate_id: str) -> List[MatchResult]:
    return [m for m in matches if m.advocate.id == advocate_id]
