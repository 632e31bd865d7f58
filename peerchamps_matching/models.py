# peerchamps_matching/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .config import MAX_RESULTS_DEFAULT, MIN_SCORE_DEFAULT


@dataclass
class Advocate:
    id: str
    company_id: str
    name: str
    email: str = ""
    title: Optional[str] = None
    company_name: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None  # one of config.COMPANY_SIZES
    geographic_region: Optional[str] = None
    use_cases: List[str] = field(default_factory=list)
    expertise_areas: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=lambda: ["English"])
    success_stories: List[str] = field(default_factory=list)
    availability_score: int = 100  # 0..100
    total_calls_completed: int = 0
    max_calls_per_month: int = 4
    status: str = "active"
    average_rating: Optional[float] = None
    total_ratings: int = 0
    timezone: str = "UTC"

    def remaining_capacity(self) -> int:
        return max(0, self.max_calls_per_month - self.total_calls_completed)


@dataclass
class Opportunity:
    id: str
    company_id: str
    opportunity_name: str
    prospect_company: str = ""
    prospect_industry: Optional[str] = None
    prospect_size: Optional[str] = None
    geographic_region: Optional[str] = None
    use_case: Optional[str] = None
    desired_advocate_industry: Optional[str] = None
    desired_advocate_size: Optional[str] = None
    desired_advocate_region: Optional[str] = None
    desired_use_cases: Optional[List[str]] = None
    desired_expertise_areas: Optional[List[str]] = None
    deal_stage: str = "discovery"
    reference_urgency: str = "medium"
    reference_request_status: str = "not_requested"
    deal_value: Optional[float] = None


@dataclass
class MatchingCriteria:
    opportunity_id: Optional[str] = None
    max_results: int = MAX_RESULTS_DEFAULT
    min_score: float = MIN_SCORE_DEFAULT
    include_inactive: bool = False
    preferred_regions: List[str] = field(default_factory=list)
    exclude_advocate_ids: List[str] = field(default_factory=list)


@dataclass
class FactorScore:
    name: str
    fraction: float  # share of the factor weight, 0..1
    points: float
    reasons: List[str] = field(default_factory=list)


@dataclass
class ScoredAdvocate:
    advocate: Advocate
    score: float
    reasons: List[str]
    factors: List[FactorScore] = field(default_factory=list)


@dataclass(frozen=True)
class MatchResult:
    advocate: Advocate
    score: int
    confidence: str
    reasons: Tuple[str, ...]


@dataclass
class MatchingStats:
    total_advocates: int
    eligible_advocates: int
    matches_found: int
    average_score: int
    top_score: int
    criteria: MatchingCriteria


@dataclass
class MatchingOutcome:
    matches: List[MatchResult]
    stats: MatchingStats


@dataclass(frozen=True)
class OpportunityMatch:
    opportunity_id: str
    opportunity_name: str
    match: MatchResult

    @property
    def score(self) -> int:
        return self.match.score


@dataclass
class MatchInsights:
    high_confidence_count: int
    medium_confidence_count: int
    low_confidence_count: int
    average_score: int
    score_distribution: Dict[str, int]
    industry_distribution: Dict[str, int]
    region_distribution: Dict[str, int]
    top_reasons: List[str]
    top_advocates: List[MatchResult]


@dataclass(frozen=True)
class ReferenceAssignment:
    opportunity_id: str
    advocate_id: str
    score: int
