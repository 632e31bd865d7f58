# peerchamps_matching/data_generation/vocab.py
from typing import List
from ..config import COMPANY_SIZES

INDUSTRIES = [
    "Manufacturing", "Technology", "Healthcare", "Finance", "Retail",
    "Education", "Software", "Banking", "Logistics",
]

REGIONS = ["North America", "Europe", "Asia Pacific", "Latin America", "USA", "UK"]

USE_CASES = [
    "Process Automation", "Quality Control", "Inventory Management",
    "Customer Onboarding", "Reporting & Analytics", "Compliance",
    "Supply Chain Visibility", "Field Service",
]

EXPERTISE_AREAS = [
    "Integrations", "Data Migration", "Security Review", "ROI Modeling",
    "Change Management", "API Development", "Executive Sponsorship",
]

URGENCIES = ["low", "medium", "high", "urgent"]


def get_company_sizes() -> List[str]:
    return list(COMPANY_SIZES)
