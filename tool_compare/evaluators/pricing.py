"""Pricing evaluator combining structured and free-text pricing signals."""

import re

from tool_compare.consts import MAX_SCORE, METRIC_PRICING, MIN_SCORE, NEUTRAL_SCORE
from tool_compare.models.model_tool import ToolRecord

FREE_TIER_BONUS = 3
FREE_MENTION_BONUS = 2
OPEN_SOURCE_BONUS = 2
FREEMIUM_BONUS = 1
PAY_AS_YOU_GO_BONUS = 1
SUBSCRIPTION_PENALTY = 1
CHEAP_PRICE_BONUS = 1
EXPENSIVE_PRICE_PENALTY = 1

CHEAP_PRICE_BELOW = 10
EXPENSIVE_PRICE_ABOVE = 100

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_price(text: str | None) -> float | None:
    """Extract a numeric price from free text such as "$19.99/month".

    Non-numeric characters are stripped and the leading number is read,
    so "From $20" gives 20.0. Returns None when nothing parses.
    """
    if not text:
        return None
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", text))
    if match is None:
        return None
    return float(match.group())


class PricingEvaluator:
    """Scores affordability on a 0-10 scale.

    Starting from a neutral 5:
    - Free tier: +3, else "free" in the pricing text: +2
    - Open source: +2
    - Pricing model keyword, first match only: freemium +1,
      pay-as-you-go +1, subscription -1
    - Starting price: below 10 +1, above 100 -1
    The result is clamped to 0-10.
    """

    metric = METRIC_PRICING

    def evaluate(self, tool: ToolRecord) -> float:
        score = NEUTRAL_SCORE
        pricing_text = (tool.pricing_text or "").lower()

        if tool.raw_pricing and tool.raw_pricing.free_tier:
            score += FREE_TIER_BONUS
        elif "free" in pricing_text:
            score += FREE_MENTION_BONUS

        if tool.open_source:
            score += OPEN_SOURCE_BONUS

        score += self._model_adjustment(pricing_text)
        score += self._price_adjustment(tool)

        return float(min(MAX_SCORE, max(MIN_SCORE, score)))

    def _model_adjustment(self, pricing_text: str) -> int:
        """Adjustment for the pricing model named in the text."""
        if "freemium" in pricing_text:
            return FREEMIUM_BONUS
        if "pay-as-you-go" in pricing_text:
            return PAY_AS_YOU_GO_BONUS
        if "subscription" in pricing_text:
            return -SUBSCRIPTION_PENALTY
        return 0

    def _price_adjustment(self, tool: ToolRecord) -> int:
        """Adjustment for the starting price; unparseable prices are skipped."""
        if tool.raw_pricing is None:
            return 0
        price = parse_price(tool.raw_pricing.starting_price)
        if price is None:
            return 0
        if price < CHEAP_PRICE_BELOW:
            return CHEAP_PRICE_BONUS
        if price > EXPENSIVE_PRICE_ABOVE:
            return -EXPENSIVE_PRICE_PENALTY
        return 0
