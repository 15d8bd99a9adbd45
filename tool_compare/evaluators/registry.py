"""Evaluator registry for running all metric evaluators."""

from tool_compare.evaluators.base import BaseEvaluator
from tool_compare.evaluators.pricing import PricingEvaluator
from tool_compare.evaluators.ratings import (
    CommunityEvaluator,
    DocumentationEvaluator,
    EaseOfUseEvaluator,
    ReliabilityEvaluator,
)
from tool_compare.models.model_comparison import MetricScore, MetricScores
from tool_compare.models.model_tool import ToolRecord


class EvaluatorRegistry:
    """Orchestrates the metric evaluators to score tools.

    Evaluators are independent of each other, so the order they run in
    does not affect the result.
    """

    def __init__(self) -> None:
        """Initialize registry with all evaluators."""
        evaluators: list[BaseEvaluator] = [
            PricingEvaluator(),
            EaseOfUseEvaluator(),
            DocumentationEvaluator(),
            CommunityEvaluator(),
            ReliabilityEvaluator(),
        ]
        self.evaluators = {evaluator.metric: evaluator for evaluator in evaluators}

    def evaluate_tool(self, tool: ToolRecord) -> MetricScores:
        """Score a tool on every metric.

        Args:
            tool: The tool to evaluate

        Returns:
            MetricScores with one 0-10 score per metric
        """
        return MetricScores(
            pricing=self.evaluators["pricing"].evaluate(tool),
            ease_of_use=self.evaluators["easeOfUse"].evaluate(tool),
            documentation=self.evaluators["documentation"].evaluate(tool),
            community=self.evaluators["community"].evaluate(tool),
            reliability=self.evaluators["reliability"].evaluate(tool),
        )

    def evaluate_metric(self, tool: ToolRecord, metric: str) -> MetricScore | None:
        """Score a tool on a single metric, or None if the metric is unknown."""
        evaluator = self.evaluators.get(metric)
        if evaluator is None:
            return None
        return MetricScore(metric=metric, score=evaluator.evaluate(tool))

    def evaluate_batch(self, tools: list[ToolRecord]) -> dict[str, MetricScores]:
        """Score multiple tools, keyed by tool id."""
        return {tool.id: self.evaluate_tool(tool) for tool in tools}


_default_registry = EvaluatorRegistry()


def calculate_all_scores(tool: ToolRecord) -> MetricScores:
    """Score a tool on every metric with the default evaluators."""
    return _default_registry.evaluate_tool(tool)
