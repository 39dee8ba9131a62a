from app.data.descriptors import CategoryDescriptor, RuleDescriptor, CollectionDescriptor
from app.data.categories import CATEGORIES
from app.data.collections import COLLECTIONS
from app.data.rules import (
    CURATED_RULES,
    MULTI_CATEGORY_RULES,
    generate_template_rules,
    default_rules,
)

__all__ = [
    "CategoryDescriptor",
    "RuleDescriptor",
    "CollectionDescriptor",
    "CATEGORIES",
    "COLLECTIONS",
    "CURATED_RULES",
    "MULTI_CATEGORY_RULES",
    "generate_template_rules",
    "default_rules",
]
