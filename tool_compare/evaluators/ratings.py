"""Lookup evaluators for the qualitative rating fields.

Each rating vocabulary maps directly to a score; anything outside the
vocabulary (including a missing value) scores the neutral 5.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from tool_compare.consts import (
    METRIC_COMMUNITY,
    METRIC_DOCUMENTATION,
    METRIC_EASE_OF_USE,
    METRIC_RELIABILITY,
    NEUTRAL_SCORE,
)
from tool_compare.models.model_tool import (
    CommunitySize,
    DocumentationQuality,
    EaseOfUse,
    Reliability,
    ToolRecord,
)

EASE_OF_USE_SCORES = MappingProxyType(
    {
        EaseOfUse.VERY_EASY.value: 9,
        EaseOfUse.EASY.value: 7,
        EaseOfUse.MODERATE.value: 5,
        EaseOfUse.DIFFICULT.value: 3,
        EaseOfUse.VERY_DIFFICULT.value: 1,
    }
)

DOCUMENTATION_SCORES = MappingProxyType(
    {
        DocumentationQuality.EXCELLENT.value: 9,
        DocumentationQuality.VERY_GOOD.value: 8,
        DocumentationQuality.GOOD.value: 6,
        DocumentationQuality.MODERATE.value: 4,
        DocumentationQuality.BASIC.value: 2,
        DocumentationQuality.POOR.value: 1,
    }
)

COMMUNITY_SCORES = MappingProxyType(
    {
        CommunitySize.VERY_LARGE.value: 9,
        CommunitySize.LARGE.value: 8,
        CommunitySize.MEDIUM.value: 6,
        CommunitySize.SMALL_BUT_GROWING.value: 4,
        CommunitySize.SMALL.value: 2,
        CommunitySize.LIMITED.value: 1,
    }
)

RELIABILITY_SCORES = MappingProxyType(
    {
        Reliability.VERY_HIGH.value: 9,
        Reliability.HIGH.value: 8,
        Reliability.MODERATE.value: 5,
        Reliability.LOW.value: 3,
        Reliability.VERY_LOW.value: 1,
    }
)


class RatingEvaluator:
    """Scores one qualitative rating field by table lookup."""

    def __init__(self, metric: str, field_name: str, table: Mapping[str, int]) -> None:
        self.metric = metric
        self.field_name = field_name
        self.table = table

    def evaluate(self, tool: ToolRecord) -> float:
        value = getattr(tool, self.field_name, None)
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            return float(NEUTRAL_SCORE)
        return float(self.table.get(value, NEUTRAL_SCORE))


class EaseOfUseEvaluator(RatingEvaluator):
    def __init__(self) -> None:
        super().__init__(METRIC_EASE_OF_USE, "ease_of_use", EASE_OF_USE_SCORES)


class DocumentationEvaluator(RatingEvaluator):
    def __init__(self) -> None:
        super().__init__(METRIC_DOCUMENTATION, "documentation", DOCUMENTATION_SCORES)


class CommunityEvaluator(RatingEvaluator):
    def __init__(self) -> None:
        super().__init__(METRIC_COMMUNITY, "community", COMMUNITY_SCORES)


class ReliabilityEvaluator(RatingEvaluator):
    def __init__(self) -> None:
        super().__init__(METRIC_RELIABILITY, "reliability", RELIABILITY_SCORES)
