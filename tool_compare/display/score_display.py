"""Score display utilities.

Maps 0-10 scores to human-readable tiers. Every table is keyed by the
lowest score of its tier; a score belongs to the highest tier whose key
it meets or exceeds.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType

from tool_compare.models.model_comparison import ScoreInfo

NO_DESCRIPTION = "No description available"
NO_DATA = "No data available"
NO_DATA_LABEL = "No data"

SCORE_DESCRIPTIONS: Mapping[str, Mapping[int, str]] = MappingProxyType(
    {
        "pricing": {
            10: "Generous free tier and competitive pricing",
            7: "Reasonable pricing with good value",
            4: "Expensive for the features provided",
            1: "Very expensive with limited value",
        },
        "documentation": {
            10: "Excellent documentation with examples and tutorials",
            7: "Good documentation with clear examples",
            4: "Basic documentation, could be better",
            1: "Poor documentation, hard to understand",
        },
        "easeOfUse": {
            10: "Beginner-friendly with intuitive interface",
            7: "Easy to learn with good UX",
            4: "Steep learning curve",
            1: "Very complex and difficult to use",
        },
        "community": {
            10: "Vibrant community with active support",
            7: "Active community with good engagement",
            4: "Small but helpful community",
            1: "Limited community support",
        },
        "reliability": {
            10: "Highly reliable with excellent uptime",
            7: "Reliable with good performance",
            4: "Some reliability issues",
            1: "Frequent issues and downtime",
        },
        "performance": {
            10: "Exceptional performance and speed",
            7: "Good performance for most use cases",
            4: "Adequate performance with some limitations",
            1: "Poor performance and slow",
        },
        "features": {
            10: "Comprehensive feature set with advanced capabilities",
            7: "Good feature set covering most needs",
            4: "Basic features, some gaps",
            1: "Limited features and functionality",
        },
    }
)

SCORE_LABELS: Mapping[int, str] = MappingProxyType(
    {10: "Excellent", 7: "Good", 4: "Fair", 1: "Poor", 0: NO_DATA_LABEL}
)

SCORE_COLORS: Mapping[int, str] = MappingProxyType(
    {
        10: "text-emerald-600 bg-emerald-100",
        7: "text-green-600 bg-green-100",
        4: "text-yellow-600 bg-yellow-100",
        1: "text-red-600 bg-red-100",
        0: "text-gray-600 bg-gray-100",
    }
)

SCORE_ICONS: Mapping[int, str] = MappingProxyType(
    {10: "✨", 7: "\U0001f7e2", 4: "\U0001f7e1", 1: "\U0001f534", 0: "—"}
)


def _lookup_tier(table: Mapping[int, str], score: float) -> str | None:
    """Return the entry of the highest threshold the score meets, if any."""
    for threshold in sorted(table, reverse=True):
        if score >= threshold:
            return table[threshold]
    return None


def get_score_label(score: float) -> str:
    """Get the tier label (Excellent/Good/Fair/Poor/No data) for a score."""
    return _lookup_tier(SCORE_LABELS, score) or NO_DATA_LABEL


def get_score_color(score: float) -> str:
    """Get the color classes for a score."""
    return _lookup_tier(SCORE_COLORS, score) or SCORE_COLORS[0]


def get_score_icon(score: float) -> str:
    """Get the icon for a score."""
    return _lookup_tier(SCORE_ICONS, score) or SCORE_ICONS[0]


def get_score_description(metric: str, score: float) -> str:
    """Get a metric-specific sentence describing a score.

    Returns NO_DESCRIPTION for unknown metrics and NO_DATA when the
    score is below every threshold of a known metric.
    """
    descriptions = SCORE_DESCRIPTIONS.get(metric)
    if descriptions is None:
        return NO_DESCRIPTION
    return _lookup_tier(descriptions, score) or NO_DATA


def get_score_info(metric: str, score: float) -> ScoreInfo:
    """Get label, color, icon and description for a metric score."""
    return ScoreInfo(
        label=get_score_label(score),
        color=get_score_color(score),
        icon=get_score_icon(score),
        description=get_score_description(metric, score),
    )


def get_score_tier(score: float) -> int:
    """Bucket a score into one of the display tiers 0, 1, 4, 7 or 10."""
    if score == 0:
        return 0
    if score <= 3:
        return 1
    if score <= 6:
        return 4
    if score <= 9:
        return 7
    return 10


def weighted_average(scores: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """Average scores by weight, normalizing by the total weight used.

    Metrics without a weight count as weight 0. Returns 0.0 when no
    weight applies.
    """
    total_score = 0.0
    total_weight = 0.0
    for metric, score in scores.items():
        weight = weights.get(metric, 0.0)
        total_score += score * weight
        total_weight += weight
    return total_score / total_weight if total_weight > 0 else 0.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_score(score: float) -> str:
    """Format a score for display.

    "0" for zero or a non-finite value, one decimal below 1, otherwise the
    nearest integer (halves round up).
    """
    if not math.isfinite(score):
        return "0"
    if score == 0:
        return "0"
    if score < 1:
        return f"{score:.1f}"
    return str(_round_half_up(score))


def get_score_comparison(score_a: float, score_b: float, metric: str) -> str:
    """Describe how two scores for the same metric compare."""
    diff = abs(score_a - score_b)

    if diff < 1:
        return f"Both tools have similar {metric} performance"

    better = "A" if score_a > score_b else "B"
    if diff < 2:
        magnitude = "slightly"
    elif diff < 4:
        magnitude = "moderately"
    else:
        magnitude = "significantly"

    return f"Tool {better} has {magnitude} better {metric} performance"
