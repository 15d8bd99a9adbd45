"""Categorization module for comparison category resolution."""

from tool_compare.categorization.categories import (
    all_valid_comparisons,
    build_comparison_description,
    build_comparison_title,
    can_compare,
    can_compare_tools,
    get_all_categories,
    get_category,
    resolve_category,
)
from tool_compare.categorization.human_maintained import CATEGORY_MAPPING, COMPARISON_CATEGORIES

__all__ = [
    # Registry
    "COMPARISON_CATEGORIES",
    "CATEGORY_MAPPING",
    "get_category",
    "get_all_categories",
    # Resolver
    "resolve_category",
    "can_compare",
    "can_compare_tools",
    "build_comparison_title",
    "build_comparison_description",
    "all_valid_comparisons",
]
