"""Comparison models: category registry entries, scores and verdicts."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from tool_compare.models.model_tool import ToolRecord

# === Static registry types ===


@dataclass(frozen=True)
class ComparisonCategory:
    """A comparison category and the categories it may be paired with."""

    id: str
    name: str
    description: str
    comparable_with: tuple[str, ...]
    seo_keywords: tuple[str, ...] = ()
    use_cases: tuple[str, ...] = ()

    def accepts(self, category_id: str) -> bool:
        """Check if a canonical category id may be compared against this one."""
        return category_id in self.comparable_with


# === Derived scores ===


class MetricScores(BaseModel):
    """Per-metric scores (0-10) for a single tool."""

    pricing: float = Field(ge=0.0, le=10.0)
    ease_of_use: float = Field(ge=0.0, le=10.0)
    documentation: float = Field(ge=0.0, le=10.0)
    community: float = Field(ge=0.0, le=10.0)
    reliability: float = Field(ge=0.0, le=10.0)

    def as_dict(self) -> dict[str, float]:
        """Scores keyed by metric name, in display order."""
        return {
            "pricing": self.pricing,
            "easeOfUse": self.ease_of_use,
            "documentation": self.documentation,
            "community": self.community,
            "reliability": self.reliability,
        }


@dataclass(frozen=True)
class MetricScore:
    """A single scored metric."""

    metric: str
    score: float


@dataclass(frozen=True)
class Advantage:
    """A metric on which one tool strictly leads another."""

    metric: str
    difference: float  # winner score - loser score, always > 0
    score: float  # winner score


@dataclass(frozen=True)
class ComparisonPair:
    """An unordered pair of tools that may be compared."""

    tool_a: ToolRecord
    tool_b: ToolRecord

    @property
    def slug(self) -> str:
        return f"{self.tool_a.id}-vs-{self.tool_b.id}"


# === Presentation ===


@dataclass(frozen=True)
class ScoreInfo:
    """Display tier for a metric score."""

    label: str
    color: str
    icon: str
    description: str


@dataclass(frozen=True)
class RadarSeries:
    """One tool's polygon on a radar chart."""

    label: str
    values: tuple[float, ...]
    border_color: str
    background_color: str


# === Pros and cons ===


@dataclass
class ProsCons:
    """Derived strengths and weaknesses of a tool."""

    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)


@dataclass
class ProsComparison:
    """Which pros are unique to each side and which are shared."""

    unique_to_a: list[str] = field(default_factory=list)
    unique_to_b: list[str] = field(default_factory=list)
    shared: list[str] = field(default_factory=list)


# === Verdict ===


class Confidence(str, Enum):
    """How clearly the winner leads."""

    SLIGHT = "slight"
    MODERATE = "moderate"
    STRONG = "strong"


class Persona(str, Enum):
    """Audience a recommendation is tailored to."""

    STARTUP = "startup"
    ENTERPRISE = "enterprise"
    LEARNING = "learning"


class VerdictReason(BaseModel):
    """A badge-style reason supporting the verdict."""

    metric: str
    text: str


class PersonaRecommendation(BaseModel):
    """Winner for a single persona."""

    persona: Persona
    winner: str
    confidence: Confidence
    reason: str


class Verdict(BaseModel):
    """Opinionated outcome of a head-to-head comparison. Never a tie."""

    winner: str
    headline: str
    confidence: Confidence
    score_difference: float = Field(ge=0.0)
    reasons: list[VerdictReason] = Field(default_factory=list)
    recommendations: list[PersonaRecommendation] = Field(default_factory=list)


class ComparisonReport(BaseModel):
    """Everything a comparison page needs for a pair of tools."""

    tool_a: ToolRecord
    tool_b: ToolRecord
    comparable: bool
    title: str
    description: str
    scores_a: MetricScores
    scores_b: MetricScores
    weighted_a: float
    weighted_b: float
    advantages_a: list[Advantage] = Field(default_factory=list)
    advantages_b: list[Advantage] = Field(default_factory=list)
    score_info_a: dict[str, ScoreInfo] = Field(default_factory=dict)
    score_info_b: dict[str, ScoreInfo] = Field(default_factory=dict)
    pros_cons_a: ProsCons = Field(default_factory=ProsCons)
    pros_cons_b: ProsCons = Field(default_factory=ProsCons)
    pros_comparison: ProsComparison = Field(default_factory=ProsComparison)
    verdict: Verdict
