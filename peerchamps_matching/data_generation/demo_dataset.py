# peerchamps_matching/data_generation/demo_dataset.py
from __future__ import annotations
from typing import List, Tuple

from ..models import Advocate, Opportunity
from ..config import (
    DEMO_COMPANY_ID,
    NUM_ADVOCATES_DEFAULT,
    NUM_OPPORTUNITIES_DEFAULT,
    DEFAULT_SEED,
)
from ..stores import AdvocateStore, OpportunityStore
from .advocate_factory import create_advocates
from .opportunity_factory import create_opportunities


def make_demo_dataset(
    company_id: str = DEMO_COMPANY_ID,
    num_advocates: int = NUM_ADVOCATES_DEFAULT,
    num_opportunities: int = NUM_OPPORTUNITIES_DEFAULT,
    seed: int = DEFAULT_SEED,
) -> Tuple[List[Advocate], List[Opportunity]]:
    """Return reproducible demo advocates and opportunities for one company."""
    advocates = create_advocates(company_id, count=num_advocates, seed=seed)
    # Offset the seed so opportunities don't mirror the advocates' draws
    opportunities = create_opportunities(company_id, count=num_opportunities, seed=seed + 1)
    return advocates, opportunities


def seed_stores(
    advocates: List[Advocate],
    opportunities: List[Opportunity],
) -> Tuple[AdvocateStore, OpportunityStore]:
    advocate_store = AdvocateStore()
    opportunity_store = OpportunityStore()
    for a in advocates:
        advocate_store.add(a)
    for o in opportunities:
        opportunity_store.add(o)
    return advocate_store, opportunity_store
