# peerchamps_matching/config.py

# Scoring weights (points per factor, sum to 100)
INDUSTRY_WEIGHT = 25
COMPANY_SIZE_WEIGHT = 15
USE_CASE_WEIGHT = 25
EXPERTISE_WEIGHT = 15
REGION_WEIGHT = 10
AVAILABILITY_WEIGHT = 10

# Fraction of a factor's weight awarded for weaker matches
PARTIAL_MATCH_FRACTION = 0.75
RELATED_MATCH_FRACTION = 0.60

# Each extra overlapping use case / expertise area is worth this much of the previous one
OVERLAP_DECAY = 0.5

SCORE_MIN = 0
SCORE_MAX = 100

# Company size hierarchy (smallest first)
COMPANY_SIZES = ["1-10", "11-50", "51-200", "201-500", "501-1000", "1000+"]
COMPANY_SIZE_LEVEL = {size: level for level, size in enumerate(COMPANY_SIZES, start=1)}

# Fraction of COMPANY_SIZE_WEIGHT by distance in the hierarchy
SIZE_PROXIMITY_FRACTION = {
    1: 0.80,
    2: 0.60,
    3: 0.40,
}
SIZE_FAR_FRACTION = 0.20

RELATED_INDUSTRIES = {
    "technology": ["software", "saas", "tech", "it", "digital"],
    "software": ["technology", "saas", "tech", "it", "digital"],
    "saas": ["technology", "software", "tech", "it", "digital"],
    "manufacturing": ["industrial", "production", "factory"],
    "healthcare": ["medical", "pharmaceutical", "biotech"],
    "finance": ["banking", "fintech", "financial services"],
    "retail": ["ecommerce", "commerce", "shopping"],
    "education": ["edtech", "learning", "training"],
}

RELATED_REGIONS = {
    "north america": ["usa", "united states", "canada", "us", "america"],
    "europe": ["eu", "european union", "uk", "united kingdom", "germany", "france"],
    "asia pacific": ["asia", "apac", "australia", "japan", "singapore"],
    "latin america": ["south america", "brazil", "mexico", "latam"],
}

# Confidence tiers (score >= threshold)
HIGH_CONFIDENCE_THRESHOLD = 80
MEDIUM_CONFIDENCE_THRESHOLD = 50
CONFIDENCE_TIERS = ("high", "medium", "low")

# Score buckets for insights (score >= threshold)
SCORE_BUCKETS = [
    ("excellent", 80),
    ("good", 60),
    ("fair", 40),
    ("poor", 0),
]

# Matching defaults
MAX_RESULTS_DEFAULT = 10
MIN_SCORE_DEFAULT = 30
TOP_N_INSIGHTS_DEFAULT = 5

# Lifecycle values
ADVOCATE_STATUSES = ("active", "inactive", "pending", "blacklisted")
RATING_MIN = 1
RATING_MAX = 5
DEAL_STAGES = (
    "discovery", "qualification", "proposal", "negotiation", "closed_won", "closed_lost",
)
REFERENCE_REQUEST_STATUSES = (
    "not_requested", "requested", "in_progress", "completed", "declined",
)

# Batch assignment: objective multiplier per opportunity urgency
URGENCY_WEIGHTS = {
    "low": 0.75,
    "medium": 1.0,
    "high": 1.25,
    "urgent": 1.5,
}
REFERENCES_PER_OPPORTUNITY_DEFAULT = 1

# Demo data knobs
NUM_ADVOCATES_DEFAULT = 25
NUM_OPPORTUNITIES_DEFAULT = 6
DEMO_COMPANY_ID = "demo-company"
DEFAULT_SEED = 42

# Snapshot CSVs picked up by run_matching.py if present
ADVOCATES_CSV_PATH = "data/advocates.csv"
OPPORTUNITIES_CSV_PATH = "data/opportunities.csv"
LIST_SEPARATOR = ";"
