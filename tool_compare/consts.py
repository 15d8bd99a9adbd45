import os
from pathlib import Path

# Data directory, relative to the working directory (override with TOOL_COMPARE_DATA_DIR)
DEFAULT_DATA_DIR = Path(os.getenv("TOOL_COMPARE_DATA_DIR", "").strip() or Path.cwd() / "data")
DEFAULT_CATALOG_PATH = DEFAULT_DATA_DIR / "processed" / "tools.json"
CATALOG_VERSION = "1.0"

# Metrics computed by the scoring engine, in display order
METRIC_PRICING = "pricing"
METRIC_EASE_OF_USE = "easeOfUse"
METRIC_DOCUMENTATION = "documentation"
METRIC_COMMUNITY = "community"
METRIC_RELIABILITY = "reliability"

SCORED_METRICS = (
    METRIC_PRICING,
    METRIC_EASE_OF_USE,
    METRIC_DOCUMENTATION,
    METRIC_COMMUNITY,
    METRIC_RELIABILITY,
)

METRIC_LABELS = {
    METRIC_PRICING: "Pricing Value",
    METRIC_EASE_OF_USE: "Ease of Use",
    METRIC_DOCUMENTATION: "Documentation",
    METRIC_COMMUNITY: "Community",
    METRIC_RELIABILITY: "Reliability",
}

# Score bounds
MIN_SCORE = 0.0
MAX_SCORE = 10.0
NEUTRAL_SCORE = 5  # Default for missing or unrecognized values

# Aggregation
DEFAULT_METRIC_WEIGHT = 0.2
MAX_ADVANTAGES = 3
MAX_DESCRIPTION_USE_CASES = 3

# Radar chart
RADAR_AMPLIFICATION_FACTOR = 1.5
RADAR_PALETTE = (
    "rgba(54, 162, 235, 0.7)",  # Blue
    "rgba(255, 99, 132, 0.7)",  # Red
    "rgba(75, 192, 192, 0.7)",  # Green
    "rgba(255, 159, 64, 0.7)",  # Orange
    "rgba(153, 102, 255, 0.7)",  # Purple
)
