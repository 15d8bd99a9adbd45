"""Evaluators module for scoring tools across comparison metrics.

Tools are scored 0-10 on five metrics:
- Pricing (free tier, licensing, pricing model, starting price)
- Ease of use, documentation, community, reliability (rating lookups)

All evaluators are stateless pure functions of a ToolRecord. Missing
or unrecognized data scores the neutral 5 instead of raising.
"""

from tool_compare.evaluators.base import BaseEvaluator
from tool_compare.evaluators.composite import calculate_weighted_score, find_top_advantages
from tool_compare.evaluators.pricing import PricingEvaluator, parse_price
from tool_compare.evaluators.pros_cons import compare_pros, extract_pros_and_cons
from tool_compare.evaluators.ratings import (
    CommunityEvaluator,
    DocumentationEvaluator,
    EaseOfUseEvaluator,
    RatingEvaluator,
    ReliabilityEvaluator,
)
from tool_compare.evaluators.registry import EvaluatorRegistry, calculate_all_scores
from tool_compare.evaluators.verdict import generate_verdict, recommend_for_persona

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "PricingEvaluator",
    "RatingEvaluator",
    "EaseOfUseEvaluator",
    "DocumentationEvaluator",
    "CommunityEvaluator",
    "ReliabilityEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    "calculate_all_scores",
    # Composite scoring
    "calculate_weighted_score",
    "find_top_advantages",
    # Verdict
    "generate_verdict",
    "recommend_for_persona",
    # Pros and cons
    "extract_pros_and_cons",
    "compare_pros",
    # Utilities
    "parse_price",
]
