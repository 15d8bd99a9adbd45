"""Comparison category resolution.

Decides whether two tools can be meaningfully compared and builds the
SEO title and description for a comparison page. Every function here
is total: unknown categories degrade to "not comparable" or to generic
wording, never to an exception.
"""

import logging
from collections.abc import Iterable

from tool_compare.categorization.human_maintained import CATEGORY_MAPPING, COMPARISON_CATEGORIES
from tool_compare.consts import MAX_DESCRIPTION_USE_CASES
from tool_compare.models.model_comparison import ComparisonCategory, ComparisonPair
from tool_compare.models.model_tool import ToolRecord

logger = logging.getLogger(__name__)

_CATEGORIES_BY_ID: dict[str, ComparisonCategory] = {cat.id: cat for cat in COMPARISON_CATEGORIES}


def get_category(category_id: str) -> ComparisonCategory | None:
    """Get comparison category by canonical id."""
    return _CATEGORIES_BY_ID.get(category_id)


def get_all_categories() -> list[str]:
    """Get list of all canonical category ids."""
    return [cat.id for cat in COMPARISON_CATEGORIES]


def canonical_category_id(raw_category: str | None) -> str | None:
    """Map a raw or legacy category key to its canonical id."""
    if not isinstance(raw_category, str) or not raw_category:
        return None
    if raw_category in _CATEGORIES_BY_ID:
        return raw_category
    return CATEGORY_MAPPING.get(raw_category)


def resolve_category(raw_category: str | None) -> ComparisonCategory | None:
    """Resolve a tool's category string to its comparison category.

    Args:
        raw_category: Canonical id or legacy key (e.g. "llm", "vector-db").

    Returns:
        The matching ComparisonCategory, or None for unknown categories.
    """
    category_id = canonical_category_id(raw_category)
    if category_id is None:
        logger.debug(f"Unknown comparison category: {raw_category!r}")
        return None
    return _CATEGORIES_BY_ID[category_id]


def can_compare(category_a: str | None, category_b: str | None) -> bool:
    """Check if tools in these two categories may be compared.

    The relation is read in the A -> B direction only: category B's
    canonical id must appear in category A's ``comparable_with``.
    Unknown categories on either side are never comparable.
    """
    resolved_a = resolve_category(category_a)
    resolved_b = resolve_category(category_b)
    if resolved_a is None or resolved_b is None:
        return False
    return resolved_a.accepts(resolved_b.id)


def can_compare_tools(tool_a: ToolRecord, tool_b: ToolRecord) -> bool:
    """Check if two tools may be compared based on their categories."""
    return can_compare(tool_a.category, tool_b.category)


def build_comparison_title(name_a: str, name_b: str, category_a: str, category_b: str) -> str:
    """Build the page title for a comparison.

    Same canonical category gets a category-specific title, anything
    else a generic one.
    """
    resolved_a = resolve_category(category_a)
    resolved_b = resolve_category(category_b)

    if resolved_a and resolved_b and resolved_a.id == resolved_b.id:
        return f"{name_a} vs {name_b}: Best {resolved_a.name}"
    return f"{name_a} vs {name_b}: AI Tools Comparison"


def build_comparison_description(
    name_a: str, name_b: str, category_a: str, category_b: str
) -> str:
    """Build the meta description for a comparison.

    Uses up to three distinct use cases from both categories, in
    registry order, or generic wording if either category is unknown.
    """
    resolved_a = resolve_category(category_a)
    resolved_b = resolve_category(category_b)

    if resolved_a and resolved_b:
        use_cases = list(dict.fromkeys(resolved_a.use_cases + resolved_b.use_cases))
        use_cases = use_cases[:MAX_DESCRIPTION_USE_CASES]
        return (
            f"Compare {name_a} and {name_b} for {', '.join(use_cases)}. "
            "Find the best AI tool for your needs with detailed feature comparisons, "
            "pricing, and use cases."
        )

    return (
        f"Compare {name_a} and {name_b} - features, pricing, pros and cons. "
        "Find the best tool for your development needs."
    )


def all_valid_comparisons(tools: Iterable[ToolRecord]) -> list[ComparisonPair]:
    """Enumerate every comparable unordered pair of tools.

    Pairs are produced in input order (i < j). No cap is applied; callers
    that publish a limited number of pages slice the result themselves.
    """
    tool_list = list(tools)
    pairs = []
    for i, tool_a in enumerate(tool_list):
        for tool_b in tool_list[i + 1 :]:
            if can_compare(tool_a.category, tool_b.category):
                pairs.append(ComparisonPair(tool_a=tool_a, tool_b=tool_b))
    return pairs


def find_asymmetric_pairs() -> list[tuple[str, str]]:
    """List registry pairs where A accepts B but B does not accept A.

    The registry is expected to be symmetric; this is used to check
    hand edits to ``COMPARISON_CATEGORIES``.
    """
    asymmetric = []
    for cat in COMPARISON_CATEGORIES:
        for other_id in cat.comparable_with:
            other = _CATEGORIES_BY_ID.get(other_id)
            if other is None or not other.accepts(cat.id):
                asymmetric.append((cat.id, other_id))
    return asymmetric
