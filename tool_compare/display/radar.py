"""Radar chart helpers for visual tool comparisons."""

import math
from collections.abc import Sequence

from tool_compare.consts import (
    MAX_SCORE,
    MIN_SCORE,
    RADAR_AMPLIFICATION_FACTOR,
    RADAR_PALETTE,
    SCORED_METRICS,
)
from tool_compare.evaluators.registry import calculate_all_scores
from tool_compare.models.model_comparison import RadarSeries
from tool_compare.models.model_tool import ToolRecord


def normalize_value(value: object) -> float:
    """Clamp a value to 0-10; non-numbers and NaN become 0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    if math.isnan(value):
        return 0.0
    return float(min(MAX_SCORE, max(MIN_SCORE, value)))


def amplify_difference(
    score_a: float, score_b: float, factor: float = RADAR_AMPLIFICATION_FACTOR
) -> tuple[float, float]:
    """Spread two scores around the midpoint so small gaps are visible.

    Both results are clamped to 0-10.
    """
    amplified = (score_a - score_b) * factor
    return normalize_value(5 + amplified), normalize_value(5 - amplified)


def get_tool_color(index: int) -> str:
    """Palette color for the n-th tool (wraps around)."""
    return RADAR_PALETTE[index % len(RADAR_PALETTE)]


def build_radar_series(tools: Sequence[ToolRecord], amplify: bool = False) -> list[RadarSeries]:
    """Build one radar series per tool, metrics in SCORED_METRICS order.

    Args:
        tools: Tools to chart
        amplify: Amplify pairwise differences (only applies to exactly two tools)

    Returns:
        List of RadarSeries in input order
    """
    values = [
        [normalize_value(calculate_all_scores(tool).as_dict()[metric]) for metric in SCORED_METRICS]
        for tool in tools
    ]

    if amplify and len(values) == 2:
        pairs = [amplify_difference(a, b) for a, b in zip(values[0], values[1])]
        values = [[a for a, _ in pairs], [b for _, b in pairs]]

    series = []
    for index, (tool, tool_values) in enumerate(zip(tools, values)):
        color = get_tool_color(index)
        series.append(
            RadarSeries(
                label=tool.name,
                values=tuple(tool_values),
                border_color=color,
                background_color=color.replace("0.7", "0.2"),
            )
        )
    return series
