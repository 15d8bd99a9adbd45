"""Weighting models for aggregating metric scores."""

from collections.abc import Mapping

from pydantic import BaseModel, Field

from tool_compare.consts import DEFAULT_METRIC_WEIGHT


class ScoreWeights(BaseModel):
    """Per-metric weights for the weighted comparative score.

    Defaults sum to 1.0, but supplied weights are used as-is: the
    aggregate is not renormalized.
    """

    pricing: float = Field(default=DEFAULT_METRIC_WEIGHT, ge=0.0, allow_inf_nan=False)
    ease_of_use: float = Field(default=DEFAULT_METRIC_WEIGHT, ge=0.0, allow_inf_nan=False)
    documentation: float = Field(default=DEFAULT_METRIC_WEIGHT, ge=0.0, allow_inf_nan=False)
    community: float = Field(default=DEFAULT_METRIC_WEIGHT, ge=0.0, allow_inf_nan=False)
    reliability: float = Field(default=DEFAULT_METRIC_WEIGHT, ge=0.0, allow_inf_nan=False)

    @classmethod
    def from_partial(cls, weights: Mapping[str, float] | None) -> "ScoreWeights":
        """Merge a partial mapping over the default weights.

        Keys may be the field names or the camelCase metric names
        (``easeOfUse``). Unknown keys are ignored.
        """
        if not weights:
            return cls()
        aliases = {"easeOfUse": "ease_of_use"}
        merged = {}
        for key, value in weights.items():
            field = aliases.get(key, key)
            if field in cls.model_fields:
                merged[field] = value
        return cls(**merged)

    def for_metric(self, metric: str) -> float:
        """Weight for a camelCase metric name (0.0 if unknown)."""
        return {
            "pricing": self.pricing,
            "easeOfUse": self.ease_of_use,
            "documentation": self.documentation,
            "community": self.community,
            "reliability": self.reliability,
        }.get(metric, 0.0)

    @property
    def total(self) -> float:
        return (
            self.pricing + self.ease_of_use + self.documentation + self.community + self.reliability
        )
