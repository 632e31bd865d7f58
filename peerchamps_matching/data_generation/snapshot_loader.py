# peerchamps_matching/data_generation/snapshot_loader.py
from __future__ import annotations

import os
from typing import List, Optional

import pandas as pd

from ..models import Advocate, Opportunity
from ..config import LIST_SEPARATOR

_ADVOCATE_LISTS = ("use_cases", "expertise_areas", "languages", "success_stories")
_ADVOCATE_INTS = ("availability_score", "total_calls_completed", "max_calls_per_month", "total_ratings")
_ADVOCATE_TEXT = ("email", "title", "company_name", "industry", "company_size",
                  "geographic_region", "status", "timezone")

_OPPORTUNITY_LISTS = ("desired_use_cases", "desired_expertise_areas")
_OPPORTUNITY_TEXT = ("prospect_company", "prospect_industry", "prospect_size",
                     "geographic_region", "use_case", "desired_advocate_industry",
                     "desired_advocate_size", "desired_advocate_region", "deal_stage",
                     "reference_urgency", "reference_request_status")


def _read(path: str, required: List[str]) -> pd.DataFrame:
    """
    Read a snapshot CSV with every cell as text; blank cells become "".
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{os.path.basename(path)} is missing required columns: {missing}")
    return df


def _text(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def _split(value: str) -> List[str]:
    return [part.strip() for part in value.split(LIST_SEPARATOR) if part.strip()]


def _rows_for_company(df: pd.DataFrame, company_id: str) -> pd.DataFrame:
    # Snapshots exported for several tenants keep only the requested one
    if "company_id" in df.columns:
        return df[df["company_id"].str.strip() == company_id]
    return df


def load_advocates_csv(path: str, company_id: str) -> List[Advocate]:
    """
    Expected format (header row, list cells joined with ';'):
        id,name,industry,company_size,geographic_region,use_cases,...
        A001,Dana Lee,Manufacturing,201-500,North America,Process Automation;Quality Control,...
    Unknown columns are ignored; absent ones keep the Advocate defaults.
    """
    df = _rows_for_company(_read(path, ["id", "name"]), company_id)
    advocates: List[Advocate] = []

    for row in df.to_dict(orient="records"):
        kwargs = {"id": row["id"].strip(), "company_id": company_id, "name": row["name"].strip()}

        for col in _ADVOCATE_TEXT:
            if col in row and _text(row[col]) is not None:
                kwargs[col] = _text(row[col])
        for col in _ADVOCATE_LISTS:
            if col in row and _split(row[col]):
                kwargs[col] = _split(row[col])
        for col in _ADVOCATE_INTS:
            if col in row and _text(row[col]) is not None:
                kwargs[col] = int(float(row[col]))
        if "average_rating" in row and _text(row["average_rating"]) is not None:
            kwargs["average_rating"] = float(row["average_rating"])

        advocates.append(Advocate(**kwargs))

    return advocates


def load_opportunities_csv(path: str, company_id: str) -> List[Opportunity]:
    """Same conventions as load_advocates_csv; empty wish lists load as None."""
    df = _rows_for_company(_read(path, ["id", "opportunity_name"]), company_id)
    opportunities: List[Opportunity] = []

    for row in df.to_dict(orient="records"):
        kwargs = {
            "id": row["id"].strip(),
            "company_id": company_id,
            "opportunity_name": row["opportunity_name"].strip(),
        }
        for col in _OPPORTUNITY_TEXT:
            if col in row and _text(row[col]) is not None:
                kwargs[col] = _text(row[col])
        for col in _OPPORTUNITY_LISTS:
            if col in row:
                kwargs[col] = _split(row[col]) or None
        if "deal_value" in row and _text(row["deal_value"]) is not None:
            kwargs["deal_value"] = float(row["deal_value"])

        opportunities.append(Opportunity(**kwargs))

    return opportunities
