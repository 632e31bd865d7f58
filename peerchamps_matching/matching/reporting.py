# peerchamps_matching/matching/reporting.py
from __future__ import annotations

from typing import Dict, List

import pandas as pd

from ..models import MatchResult
from .insights import score_bucket, percentage

MATCH_COLUMNS = ["rank", "advocate_id", "advocate", "industry", "region", "score",
                 "confidence", "bucket", "reasons"]


def matches_to_frame(matches: List[MatchResult]) -> pd.DataFrame:
    """One row per match, in ranked order (rank starts at 1)."""
    rows = [
        {
            "rank": i,
            "advocate_id": m.advocate.id,
            "advocate": m.advocate.name,
            "industry": m.advocate.industry,
            "region": m.advocate.geographic_region,
            "score": m.score,
            "confidence": m.confidence,
            "bucket": score_bucket(m.score),
            "reasons": "; ".join(m.reasons),
        }
        for i, m in enumerate(matches, start=1)
    ]
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)


def distribution_to_frame(distribution: Dict[str, int], total: int) -> pd.DataFrame:
    rows = [
        {"label": label, "count": count, "percent": percentage(count, total)}
        for label, count in distribution.items()
    ]
    return pd.DataFrame(rows, columns=["label", "count", "percent"])


def export_matches_csv(matches: List[MatchResult], path: str) -> None:
    matches_to_frame(matches).to_csv(path, index=False)
