"""Composite scoring functions for combining and contrasting metric scores."""

from collections.abc import Mapping

from tool_compare.consts import MAX_ADVANTAGES
from tool_compare.evaluators.registry import calculate_all_scores
from tool_compare.models.model_comparison import Advantage
from tool_compare.models.model_eval import ScoreWeights
from tool_compare.models.model_tool import ToolRecord


def _as_weights(weights: ScoreWeights | Mapping[str, float] | None) -> ScoreWeights:
    if isinstance(weights, ScoreWeights):
        return weights
    return ScoreWeights.from_partial(weights)


def calculate_weighted_score(
    tool: ToolRecord,
    weights: ScoreWeights | Mapping[str, float] | None = None,
) -> float:
    """Calculate the weighted comparative score of a tool.

    Args:
        tool: The tool to score
        weights: ScoreWeights, or a partial mapping merged over the
            default 0.2 per metric. Weights are not renormalized.

    Returns:
        Sum of metric score times metric weight
    """
    final_weights = _as_weights(weights)
    scores = calculate_all_scores(tool).as_dict()
    return sum(score * final_weights.for_metric(metric) for metric, score in scores.items())


def find_top_advantages(winner: ToolRecord, loser: ToolRecord) -> list[Advantage]:
    """Find the metrics on which ``winner`` leads ``loser`` the most.

    Only strict leads are reported; ties and deficits are dropped.

    Returns:
        Up to three advantages, largest difference first
    """
    winner_scores = calculate_all_scores(winner).as_dict()
    loser_scores = calculate_all_scores(loser).as_dict()

    advantages = [
        Advantage(metric=metric, difference=score - loser_scores[metric], score=score)
        for metric, score in winner_scores.items()
        if score - loser_scores[metric] > 0
    ]
    # Stable sort keeps metric order for equal differences
    advantages.sort(key=lambda adv: adv.difference, reverse=True)
    return advantages[:MAX_ADVANTAGES]
