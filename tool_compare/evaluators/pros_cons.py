"""Pros and cons extraction from tool records."""

from tool_compare.evaluators.pricing import parse_price
from tool_compare.models.model_comparison import ProsComparison, ProsCons
from tool_compare.models.model_tool import ToolRecord

MIN_PROS = 3
MIN_CONS = 2
EXPENSIVE_TIER_ABOVE = 50

PRO_FREE_TIER = "Offers a free tier"
PRO_OPEN_SOURCE = "Open source"
PRO_API_ACCESS = "API access available"
CON_NO_FREE_TIER = "No free tier available"
CON_EXPENSIVE = "Premium tiers can be expensive"
CON_NOT_OPEN_SOURCE = "Not open source"


def _has_free_tier(tool: ToolRecord) -> bool:
    return bool(tool.raw_pricing and tool.raw_pricing.free_tier)


def extract_pros_and_cons(tool: ToolRecord) -> ProsCons:
    """Derive pros and cons for a tool.

    Editorial strengths and limitations come first. Short lists are
    padded from pricing and licensing facts. Duplicates are dropped,
    keeping first occurrence.
    """
    pros = list(tool.strengths)
    cons = list(tool.limitations)

    if tool.raw_pricing is not None and tool.raw_pricing.free_tier is False:
        cons.append(CON_NO_FREE_TIER)

    if len(pros) < MIN_PROS:
        if _has_free_tier(tool):
            pros.append(PRO_FREE_TIER)
        if tool.open_source:
            pros.append(PRO_OPEN_SOURCE)
        if tool.api_access:
            pros.append(PRO_API_ACCESS)

    if len(cons) < MIN_CONS:
        if not _has_free_tier(tool) and CON_NO_FREE_TIER not in cons:
            cons.append(CON_NO_FREE_TIER)
        price = parse_price(tool.raw_pricing.starting_price) if tool.raw_pricing else None
        if price is not None and price > EXPENSIVE_TIER_ABOVE:
            cons.append(CON_EXPENSIVE)
        if not tool.open_source:
            cons.append(CON_NOT_OPEN_SOURCE)

    return ProsCons(pros=list(dict.fromkeys(pros)), cons=list(dict.fromkeys(cons)))


def compare_pros(pros_a: ProsCons, pros_b: ProsCons) -> ProsComparison:
    """Split two tools' pros into unique-to-each and shared."""
    b_set = set(pros_b.pros)
    a_set = set(pros_a.pros)
    return ProsComparison(
        unique_to_a=[pro for pro in pros_a.pros if pro not in b_set],
        unique_to_b=[pro for pro in pros_b.pros if pro not in a_set],
        shared=[pro for pro in pros_a.pros if pro in b_set],
    )
