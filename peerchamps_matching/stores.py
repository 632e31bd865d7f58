# peerchamps_matching/stores.py
from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import fields
from typing import Dict, List, Optional, Tuple

from .models import Advocate, Opportunity
from .config import (
    ADVOCATE_STATUSES,
    DEAL_STAGES,
    RATING_MAX,
    RATING_MIN,
    REFERENCE_REQUEST_STATUSES,
)

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    pass


class _TenantStore:
    """
    In-memory records keyed by (company_id, record_id).

    Every call names the company explicitly. A record owned by another
    company is indistinguishable from a missing one. Reads hand out deep
    copies so callers always work on a snapshot.
    """

    kind = "record"

    def __init__(self):
        self._rows: Dict[Tuple[str, str], object] = {}

    def _key(self, company_id: str, record_id: str) -> Tuple[str, str]:
        return (company_id, record_id)

    def _require(self, company_id: str, record_id: str):
        row = self._rows.get(self._key(company_id, record_id))
        if row is None:
            raise RecordNotFoundError(
                f"{self.kind} {record_id} not found for company {company_id}."
            )
        return row

    def add(self, record):
        key = self._key(record.company_id, record.id)
        if key in self._rows:
            raise ValueError(f"{self.kind} {record.id} already exists for company {record.company_id}.")
        self._rows[key] = deepcopy(record)
        return deepcopy(record)

    def get(self, company_id: str, record_id: str):
        return deepcopy(self._require(company_id, record_id))

    def _all(self, company_id: str) -> list:
        return [deepcopy(r) for (cid, _), r in self._rows.items() if cid == company_id]


class AdvocateStore(_TenantStore):
    kind = "Advocate"

    _protected = {"id", "company_id"}

    def list(self, company_id: str, status: Optional[str] = None) -> List[Advocate]:
        rows = self._all(company_id)
        if status is not None:
            rows = [a for a in rows if a.status == status]
        return rows

    def update_profile(self, company_id: str, advocate_id: str, /, **changes) -> Advocate:
        advocate = self._require(company_id, advocate_id)
        allowed = {f.name for f in fields(Advocate)} - self._protected
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Unknown or read-only advocate fields: {sorted(unknown)}")
        if "status" in changes and changes["status"] not in ADVOCATE_STATUSES:
            raise ValueError(f"Invalid advocate status: {changes['status']!r}")
        for name, value in changes.items():
            setattr(advocate, name, deepcopy(value))
        return deepcopy(advocate)

    def record_call_completed(
        self, company_id: str, advocate_id: str, rating: Optional[float] = None
    ) -> Advocate:
        """Count a finished reference call and fold an optional rating into the average."""
        if rating is not None and not RATING_MIN <= rating <= RATING_MAX:
            raise ValueError(f"Rating must be between {RATING_MIN} and {RATING_MAX}, got {rating!r}")
        advocate = self._require(company_id, advocate_id)
        advocate.total_calls_completed += 1

        if rating is not None:
            prior = (advocate.average_rating or 0.0) * advocate.total_ratings
            advocate.total_ratings += 1
            advocate.average_rating = (prior + rating) / advocate.total_ratings

        logger.debug(
            "Advocate %s completed call %d/%d",
            advocate_id,
            advocate.total_calls_completed,
            advocate.max_calls_per_month,
        )
        return deepcopy(advocate)

    def deactivate(self, company_id: str, advocate_id: str) -> Advocate:
        # Advocates are never hard-deleted
        return self.update_profile(company_id, advocate_id, status="inactive")


class OpportunityStore(_TenantStore):
    kind = "Opportunity"

    def list(self, company_id: str, deal_stage: Optional[str] = None) -> List[Opportunity]:
        rows = self._all(company_id)
        if deal_stage is not None:
            rows = [o for o in rows if o.deal_stage == deal_stage]
        return rows

    def update_stage(self, company_id: str, opportunity_id: str, stage: str) -> Opportunity:
        if stage not in DEAL_STAGES:
            raise ValueError(f"Invalid deal stage: {stage!r}")
        opp = self._require(company_id, opportunity_id)
        opp.deal_stage = stage
        return deepcopy(opp)

    def set_reference_request_status(
        self, company_id: str, opportunity_id: str, status: str
    ) -> Opportunity:
        if status not in REFERENCE_REQUEST_STATUSES:
            raise ValueError(f"Invalid reference request status: {status!r}")
        opp = self._require(company_id, opportunity_id)
        opp.reference_request_status = status
        return deepcopy(opp)
