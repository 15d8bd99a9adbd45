"""Pydantic models for the tool comparison engine."""

from tool_compare.models.model_comparison import (
    Advantage,
    ComparisonCategory,
    ComparisonPair,
    ComparisonReport,
    Confidence,
    MetricScore,
    MetricScores,
    Persona,
    PersonaRecommendation,
    ProsComparison,
    ProsCons,
    RadarSeries,
    ScoreInfo,
    Verdict,
    VerdictReason,
)
from tool_compare.models.model_eval import ScoreWeights
from tool_compare.models.model_storage import CatalogFile
from tool_compare.models.model_tool import (
    CommunitySize,
    DocumentationQuality,
    EaseOfUse,
    RawPricing,
    Reliability,
    ToolRecord,
)

__all__ = [
    # Tool models
    "ToolRecord",
    "RawPricing",
    "EaseOfUse",
    "DocumentationQuality",
    "CommunitySize",
    "Reliability",
    # Registry models
    "ComparisonCategory",
    # Score models
    "MetricScore",
    "MetricScores",
    "Advantage",
    "ComparisonPair",
    "ScoreInfo",
    "RadarSeries",
    # Pros and cons
    "ProsCons",
    "ProsComparison",
    # Verdict models
    "Confidence",
    "Persona",
    "PersonaRecommendation",
    "Verdict",
    "VerdictReason",
    "ComparisonReport",
    # Evaluation models
    "ScoreWeights",
    # Storage models
    "CatalogFile",
]
