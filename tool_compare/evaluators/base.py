"""Base evaluator protocol defining the contract for all metric evaluators."""

from typing import Protocol

from tool_compare.models.model_tool import ToolRecord


class BaseEvaluator(Protocol):
    """Protocol defining the metric evaluator contract.

    Evaluators are pure functions of a ToolRecord returning a score
    between 0-10. Missing or unrecognized inputs never raise; they fall
    back to the metric's neutral score.
    """

    metric: str

    def evaluate(self, tool: ToolRecord) -> float:
        """Evaluate tool on this metric.

        Args:
            tool: The tool to evaluate

        Returns:
            Score between 0-10 for this metric
        """
        ...
