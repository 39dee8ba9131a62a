from .rule import Rule, rule_categories, APPLICATION_MODES
from .category import Category

__all__ = [
    "Rule",
    "Category",
    "rule_categories",
    "APPLICATION_MODES",
]
