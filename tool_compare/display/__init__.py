"""Presentation helpers turning scores into display-ready values."""

from tool_compare.display.radar import amplify_difference, build_radar_series, normalize_value
from tool_compare.display.score_display import (
    format_score,
    get_score_color,
    get_score_comparison,
    get_score_description,
    get_score_icon,
    get_score_info,
    get_score_label,
    get_score_tier,
    weighted_average,
)

__all__ = [
    "format_score",
    "get_score_color",
    "get_score_comparison",
    "get_score_description",
    "get_score_icon",
    "get_score_info",
    "get_score_label",
    "get_score_tier",
    "weighted_average",
    "amplify_difference",
    "build_radar_series",
    "normalize_value",
]
