"""Keyword-based transaction categorization"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

CategoryRules = Mapping[str, Tuple[str, ...]]

UNCATEGORIZED = "Uncategorized"

DEFAULT_RULES: CategoryRules = MappingProxyType({
    "Food": ("grocery", "restaurant", "cafe", "coffee", "mcdonalds", "starbucks", "burger", "pizza", "diner"),
    "Transport": ("uber", "lyft", "taxi", "gas", "shell", "bp", "train", "bus", "metro", "subway", "fuel"),
    "Utilities": ("electric", "water", "gas", "internet", "comcast", "verizon", "at&t", "t-mobile", "utility"),
    "Entertainment": ("netflix", "spotify", "hulu", "movie", "cinema", "concert", "ticket", "disney"),
    "Shopping": ("amazon", "walmart", "target", "clothing", "shoe", "mall", "store", "market"),
    "Health": ("doctor", "pharmacy", "hospital", "clinic", "medical", "drug", "cvs", "walgreens"),
})


def add_category_rule(rules: CategoryRules, category: str, keywords: Iterable[str]) -> CategoryRules:
    """
    Return a new rule table with keywords added under category.

    Existing categories keep their position and gain only unseen keywords;
    new categories are appended after the existing ones.
    """
    updated = dict(rules)
    merged = list(updated.get(category, ()))
    for keyword in keywords:
        if keyword not in merged:
            merged.append(keyword)
    updated[category] = tuple(merged)
    return MappingProxyType(updated)


def auto_categorize(description: str, rules: CategoryRules = DEFAULT_RULES) -> str:
    """First category (in table order) with a keyword contained in the description"""
    normalized = description.lower()
    for category, keywords in rules.items():
        if any(keyword.lower() in normalized for keyword in keywords):
            return category
    return UNCATEGORIZED
