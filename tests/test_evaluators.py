"""Tests for individual metric evaluators and the registry."""

import pytest

from tool_compare.evaluators.pricing import PricingEvaluator, parse_price
from tool_compare.evaluators.ratings import (
    CommunityEvaluator,
    DocumentationEvaluator,
    EaseOfUseEvaluator,
    ReliabilityEvaluator,
)
from tool_compare.evaluators.registry import EvaluatorRegistry, calculate_all_scores
from tool_compare.models.model_tool import EaseOfUse, RawPricing, ToolRecord


def _tool(**kwargs) -> ToolRecord:
    return ToolRecord(id="test", name="Test", **kwargs)


# Pricing Evaluator Tests
def test_pricing_neutral_baseline():
    """Test pricing with no pricing information."""
    assert PricingEvaluator().evaluate(_tool()) == 5


def test_pricing_free_tier_bonus():
    """Test structured free tier adds 3."""
    tool = _tool(raw_pricing=RawPricing(free_tier=True))
    assert PricingEvaluator().evaluate(tool) == 8


def test_pricing_free_text_bonus():
    """Test 'free' in pricing text adds 2 when there is no free tier flag."""
    assert PricingEvaluator().evaluate(_tool(pricing_text="FREE for individuals")) == 7


def test_pricing_free_tier_and_text_do_not_stack():
    """Test free tier flag short-circuits the text check."""
    tool = _tool(pricing_text="Free plan", raw_pricing=RawPricing(free_tier=True))
    assert PricingEvaluator().evaluate(tool) == 8


def test_pricing_open_source_stacks():
    """Test open source bonus stacks with the free tier bonus."""
    tool = _tool(open_source=True, raw_pricing=RawPricing(free_tier=True))
    assert PricingEvaluator().evaluate(tool) == 10


def test_pricing_freemium_with_open_source():
    """Test open-source freemium: 5 + free text 2 + open source 2 + freemium 1."""
    tool = _tool(open_source=True, pricing_text="Freemium with paid tiers")
    assert PricingEvaluator().evaluate(tool) == 10


def test_pricing_pay_as_you_go():
    """Test pay-as-you-go adds 1."""
    assert PricingEvaluator().evaluate(_tool(pricing_text="Pay-as-you-go")) == 6


def test_pricing_subscription_penalty():
    """Test subscription subtracts 1."""
    assert PricingEvaluator().evaluate(_tool(pricing_text="Monthly subscription")) == 4


def test_pricing_model_keywords_first_match_only():
    """Test only the first matching pricing model keyword applies."""
    tool = _tool(pricing_text="Pay-as-you-go or subscription")
    assert PricingEvaluator().evaluate(tool) == 6


@pytest.mark.parametrize(
    "starting_price,expected",
    [
        ("$5/month", 6),
        ("$0", 6),
        ("$10", 5),
        ("$100", 5),
        ("$250/month", 4),
        ("1,200", 4),
        ("Contact sales", 5),
        ("", 5),
        (None, 5),
    ],
)
def test_pricing_starting_price(starting_price, expected):
    """Test starting price bonus/penalty and skipping of unparseable prices."""
    tool = _tool(raw_pricing=RawPricing(free_tier=False, starting_price=starting_price))
    assert PricingEvaluator().evaluate(tool) == expected


def test_pricing_clamped_to_ten():
    """Test pricing never exceeds 10."""
    tool = _tool(
        open_source=True,
        pricing_text="Freemium",
        raw_pricing=RawPricing(free_tier=True, starting_price="$0"),
    )
    assert PricingEvaluator().evaluate(tool) == 10


def test_pricing_stays_in_range_for_worst_case():
    """Test the most penalized combination stays within 0-10."""
    tool = _tool(
        pricing_text="Enterprise subscription",
        raw_pricing=RawPricing(free_tier=False, starting_price="$999"),
    )
    assert PricingEvaluator().evaluate(tool) == 3


def test_parse_price():
    """Test price extraction from free text."""
    assert parse_price("$19.99/month") == 19.99
    assert parse_price("From $20") == 20.0
    assert parse_price("1.2.3") == 1.2
    assert parse_price("free") is None
    assert parse_price(None) is None


# Rating Evaluator Tests
@pytest.mark.parametrize(
    "value,expected",
    [
        ("Very Easy", 9),
        ("Easy", 7),
        ("Moderate", 5),
        ("Difficult", 3),
        ("Very Difficult", 1),
        ("easy", 5),
        ("Medium", 5),
        (None, 5),
    ],
)
def test_ease_of_use(value, expected):
    """Test ease-of-use lookup with neutral default."""
    assert EaseOfUseEvaluator().evaluate(_tool(ease_of_use=value)) == expected


def test_ease_of_use_accepts_enum():
    """Test enum members score like their labels."""
    assert EaseOfUseEvaluator().evaluate(_tool(ease_of_use=EaseOfUse.VERY_EASY)) == 9


def test_non_string_ratings_score_neutral():
    """Test numeric ratings from a catalog are scored as neutral."""
    tool = ToolRecord.model_validate(
        {"id": "x", "name": "X", "easeOfUse": 3, "reliability": 9.5, "community": ["big"]}
    )
    assert tool.ease_of_use is None
    assert EaseOfUseEvaluator().evaluate(tool) == 5
    assert ReliabilityEvaluator().evaluate(tool) == 5
    assert CommunityEvaluator().evaluate(tool) == 5


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Excellent", 9),
        ("Very Good", 8),
        ("Good", 6),
        ("Moderate", 4),
        ("Basic", 2),
        ("Poor", 1),
        ("Amazing", 5),
    ],
)
def test_documentation(value, expected):
    """Test documentation lookup."""
    assert DocumentationEvaluator().evaluate(_tool(documentation=value)) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Very Large", 9),
        ("Large", 8),
        ("Medium", 6),
        ("Small but growing", 4),
        ("Small", 2),
        ("Limited", 1),
        ("Huge", 5),
    ],
)
def test_community(value, expected):
    """Test community lookup."""
    assert CommunityEvaluator().evaluate(_tool(community=value)) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Very High", 9),
        ("High", 8),
        ("Moderate", 5),
        ("Low", 3),
        ("Very Low", 1),
        ("Rock solid", 5),
    ],
)
def test_reliability(value, expected):
    """Test reliability lookup."""
    assert ReliabilityEvaluator().evaluate(_tool(reliability=value)) == expected


# Registry Tests
def test_calculate_all_scores(gpt4):
    """Test all metrics are scored."""
    scores = calculate_all_scores(gpt4)
    assert scores.as_dict() == {
        "pricing": 6,
        "easeOfUse": 7,
        "documentation": 9,
        "community": 9,
        "reliability": 9,
    }


def test_calculate_all_scores_defaults_to_neutral(mystery):
    """Test a tool with no data scores 5 everywhere."""
    assert set(calculate_all_scores(mystery).as_dict().values()) == {5}


def test_scores_always_in_range(sample_tools):
    """Test every metric score is within 0-10."""
    for tool in sample_tools:
        for value in calculate_all_scores(tool).as_dict().values():
            assert 0 <= value <= 10


def test_registry_single_metric(llama):
    """Test scoring a single metric by name."""
    registry = EvaluatorRegistry()
    result = registry.evaluate_metric(llama, "pricing")
    assert result is not None
    assert result.metric == "pricing"
    assert result.score == 10
    assert registry.evaluate_metric(llama, "performance") is None


def test_registry_batch(sample_tools):
    """Test batch scoring is keyed by tool id."""
    results = EvaluatorRegistry().evaluate_batch(sample_tools)
    assert set(results) == {tool.id for tool in sample_tools}
    assert results["copilot"].pricing == 4
