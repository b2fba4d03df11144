"""
Content policy filter for category names
"""

from typing import List, Sequence

from category_api.schemas.category import Category, FilterPolicy


def contains_banned_term(name: str, banned_terms: Sequence[str]) -> bool:
    """Literal, case-sensitive substring match against every banned term"""
    return any(term in name for term in banned_terms)


def apply(categories: List[Category], policy: FilterPolicy) -> List[Category]:
    """
    Drop categories whose name contains a banned term

    Args:
        categories: Normalized categories in provider order
        policy: Filter policy in force

    Returns:
        The input unchanged when filtering is disabled, otherwise the
        surviving categories in their original order
    """
    if not policy.enabled:
        return categories

    return [
        category for category in categories
        if not contains_banned_term(category.name, policy.banned_terms)
    ]
