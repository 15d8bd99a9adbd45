"""Verdict generation: always names a winner, overall and per persona."""

import logging
from types import MappingProxyType

from tool_compare.consts import METRIC_LABELS
from tool_compare.evaluators.composite import calculate_weighted_score, find_top_advantages
from tool_compare.models.model_comparison import (
    Advantage,
    Confidence,
    Persona,
    PersonaRecommendation,
    Verdict,
    VerdictReason,
)
from tool_compare.models.model_eval import ScoreWeights
from tool_compare.models.model_tool import ToolRecord

logger = logging.getLogger(__name__)

PERSONA_WEIGHTS = MappingProxyType(
    {
        Persona.STARTUP: ScoreWeights(
            pricing=0.4, ease_of_use=0.3, documentation=0.2, community=0.1, reliability=0.0
        ),
        Persona.ENTERPRISE: ScoreWeights(
            pricing=0.1, ease_of_use=0.2, documentation=0.3, community=0.1, reliability=0.3
        ),
        Persona.LEARNING: ScoreWeights(
            pricing=0.3, ease_of_use=0.4, documentation=0.2, community=0.1, reliability=0.0
        ),
    }
)

# The overall verdict is judged as the most common audience would
OVERALL_PERSONA = Persona.STARTUP

# (slight below, moderate below); anything larger is strong
OVERALL_CONFIDENCE_THRESHOLDS = (0.5, 2.0)
PERSONA_CONFIDENCE_THRESHOLDS = (0.5, 1.5)

ADVANTAGE_TEMPLATES = MappingProxyType(
    {
        "pricing": "{name} offers better value",
        "easeOfUse": "{name} is easier to use",
        "documentation": "{name} has better docs",
        "community": "{name} has a stronger community",
        "reliability": "{name} is more reliable",
    }
)


def _confidence(score_diff: float, thresholds: tuple[float, float]) -> Confidence:
    slight_below, moderate_below = thresholds
    if score_diff < slight_below:
        return Confidence.SLIGHT
    if score_diff < moderate_below:
        return Confidence.MODERATE
    return Confidence.STRONG


def _headline(winner: str, confidence: Confidence) -> str:
    if confidence == Confidence.SLIGHT:
        return f"{winner} edges out the competition for most developers"
    if confidence == Confidence.MODERATE:
        return f"{winner} is the better choice for most use cases"
    return f"{winner} is significantly better than the alternative"


def _advantage_reason(name: str, advantage: Advantage) -> VerdictReason:
    template = ADVANTAGE_TEMPLATES.get(advantage.metric)
    if template is None:
        label = METRIC_LABELS.get(advantage.metric, advantage.metric)
        text = f"{name} scores higher on {label}"
    else:
        text = template.format(name=name)
    return VerdictReason(metric=advantage.metric, text=text)


def _pick_winner(
    tool_a: ToolRecord, tool_b: ToolRecord, weights: ScoreWeights
) -> tuple[ToolRecord, ToolRecord, float]:
    """Return (winner, loser, score difference). Ties go to tool A."""
    score_a = calculate_weighted_score(tool_a, weights)
    score_b = calculate_weighted_score(tool_b, weights)
    if score_a >= score_b:
        return tool_a, tool_b, score_a - score_b
    return tool_b, tool_a, score_b - score_a


def _persona_reason(persona: Persona, winner: ToolRecord) -> str:
    pricing_text = winner.pricing_text.lower()
    has_free = "free" in pricing_text or bool(winner.raw_pricing and winner.raw_pricing.free_tier)

    if persona == Persona.STARTUP:
        if has_free:
            return "Free tier available for early-stage development"
        if winner.ease_of_use and "easy" in winner.ease_of_use.lower():
            return "Easy to set up and start building quickly"
        return "Better balance of features and cost for startups"

    if persona == Persona.ENTERPRISE:
        if winner.reliability in ("High", "Very High"):
            return "Proven reliability for production environments"
        if winner.documentation in ("Excellent", "Very Good"):
            return "Comprehensive documentation for team adoption"
        return "Enterprise-grade features and support"

    if winner.open_source:
        return "Open source allows deep understanding of the technology"
    if has_free:
        return "Free to experiment and learn without cost barriers"
    return "Great for learning AI development concepts"


def recommend_for_persona(
    tool_a: ToolRecord, tool_b: ToolRecord, persona: Persona
) -> PersonaRecommendation:
    """Pick the better tool for one persona."""
    winner, _, score_diff = _pick_winner(tool_a, tool_b, PERSONA_WEIGHTS[persona])
    return PersonaRecommendation(
        persona=persona,
        winner=winner.name,
        confidence=_confidence(score_diff, PERSONA_CONFIDENCE_THRESHOLDS),
        reason=_persona_reason(persona, winner),
    )


def generate_verdict(tool_a: ToolRecord, tool_b: ToolRecord) -> Verdict:
    """Generate an opinionated verdict for a head-to-head comparison.

    Args:
        tool_a: First tool (wins ties)
        tool_b: Second tool

    Returns:
        Verdict with winner, headline, reasons and persona recommendations
    """
    winner, loser, score_diff = _pick_winner(tool_a, tool_b, PERSONA_WEIGHTS[OVERALL_PERSONA])
    confidence = _confidence(score_diff, OVERALL_CONFIDENCE_THRESHOLDS)

    reasons = [_advantage_reason(winner.name, adv) for adv in find_top_advantages(winner, loser)]
    if not reasons:
        reasons.append(
            VerdictReason(
                metric="overall", text=f"{winner.name} has a slight edge in overall quality"
            )
        )

    logger.debug(
        f"Verdict {tool_a.id} vs {tool_b.id}: {winner.id} ({confidence.value}, diff={score_diff:.2f})"
    )

    return Verdict(
        winner=winner.name,
        headline=_headline(winner.name, confidence),
        confidence=confidence,
        score_difference=score_diff,
        reasons=reasons,
        recommendations=[recommend_for_persona(tool_a, tool_b, persona) for persona in Persona],
    )
