"""Comparison orchestration for a pair of tools.

Coordinates every step a comparison page needs:
1. Check comparability and build title/description
2. Score both tools on every metric
3. Weighted scores and advantages in both directions
4. Display tiers per metric
5. Pros and cons
6. Verdict
"""

import logging
from collections.abc import Iterable, Mapping

from tool_compare.categorization.categories import (
    all_valid_comparisons,
    build_comparison_description,
    build_comparison_title,
    can_compare,
)
from tool_compare.display.score_display import get_score_info
from tool_compare.evaluators.composite import calculate_weighted_score, find_top_advantages
from tool_compare.evaluators.pros_cons import compare_pros, extract_pros_and_cons
from tool_compare.evaluators.registry import calculate_all_scores
from tool_compare.evaluators.verdict import generate_verdict
from tool_compare.models.model_comparison import ComparisonReport, MetricScores, ScoreInfo
from tool_compare.models.model_eval import ScoreWeights
from tool_compare.models.model_tool import ToolRecord

logger = logging.getLogger(__name__)


def _score_infos(scores: MetricScores) -> dict[str, ScoreInfo]:
    return {metric: get_score_info(metric, score) for metric, score in scores.as_dict().items()}


def compare_tools(
    tool_a: ToolRecord,
    tool_b: ToolRecord,
    weights: ScoreWeights | Mapping[str, float] | None = None,
) -> ComparisonReport:
    """Build the full comparison report for two tools.

    The report is computed even when the categories are not comparable;
    ``comparable`` tells the caller whether the page should be published.

    Args:
        tool_a: First tool
        tool_b: Second tool
        weights: Optional metric weights for the weighted scores

    Returns:
        ComparisonReport for the pair
    """
    comparable = can_compare(tool_a.category, tool_b.category)
    if not comparable:
        logger.info(
            f"Tools not comparable: {tool_a.id} ({tool_a.category}) vs "
            f"{tool_b.id} ({tool_b.category})"
        )

    scores_a = calculate_all_scores(tool_a)
    scores_b = calculate_all_scores(tool_b)
    pros_cons_a = extract_pros_and_cons(tool_a)
    pros_cons_b = extract_pros_and_cons(tool_b)

    return ComparisonReport(
        tool_a=tool_a,
        tool_b=tool_b,
        comparable=comparable,
        title=build_comparison_title(tool_a.name, tool_b.name, tool_a.category, tool_b.category),
        description=build_comparison_description(
            tool_a.name, tool_b.name, tool_a.category, tool_b.category
        ),
        scores_a=scores_a,
        scores_b=scores_b,
        weighted_a=calculate_weighted_score(tool_a, weights),
        weighted_b=calculate_weighted_score(tool_b, weights),
        advantages_a=find_top_advantages(tool_a, tool_b),
        advantages_b=find_top_advantages(tool_b, tool_a),
        score_info_a=_score_infos(scores_a),
        score_info_b=_score_infos(scores_b),
        pros_cons_a=pros_cons_a,
        pros_cons_b=pros_cons_b,
        pros_comparison=compare_pros(pros_cons_a, pros_cons_b),
        verdict=generate_verdict(tool_a, tool_b),
    )


def compare_all(
    tools: Iterable[ToolRecord],
    weights: ScoreWeights | Mapping[str, float] | None = None,
    limit: int | None = None,
) -> list[ComparisonReport]:
    """Build reports for every comparable pair, optionally capped."""
    pairs = all_valid_comparisons(tools)
    if limit is not None:
        pairs = pairs[:limit]
    logger.info(f"Building {len(pairs)} comparison reports")
    return [compare_tools(pair.tool_a, pair.tool_b, weights) for pair in pairs]
