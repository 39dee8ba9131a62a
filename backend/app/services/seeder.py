"""Idempotent import of the static catalogue into the database."""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.data import CATEGORIES, CategoryDescriptor, RuleDescriptor, default_rules
from app.models.category import Category
from app.models.rule import Rule
from app.utils.text import slugify_text

logger = logging.getLogger(__name__)

# Uniform ranges for placeholder counters in fixture mode (inclusive).
FIXTURE_COUNTER_RANGES = {
    "view_count": (50, 500),
    "copy_count": (10, 150),
    "upvotes": (5, 80),
    "downvotes": (0, 15),
}


@dataclass
class SeedReport:
    categories_created: int = 0
    categories_existing: int = 0
    rules_created: int = 0
    rules_skipped: int = 0
    rules_rejected: int = 0
    missing_categories: List[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"categories: {self.categories_created} created, "
            f"{self.categories_existing} existing; "
            f"rules: {self.rules_created} created, {self.rules_skipped} skipped, "
            f"{self.rules_rejected} rejected; "
            f"missing categorizations: {len(self.missing_categories)}"
        )


class CatalogueSeeder:
    """
    Populates categories and rules from static descriptors.

    Categories are created when their slug is absent and left untouched
    otherwise. Rules are inserted only when no rule with the same slug exists,
    so running the seeder twice leaves the row set unchanged. The seeder only
    flushes; committing is left to the caller's session scope.
    """

    def __init__(
        self,
        db: Session,
        fixture_mode: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.db = db
        self.fixture_mode = fixture_mode
        self.rng = rng or random.Random()
        self.report = SeedReport()

    def seed_categories(
        self, descriptors: Iterable[CategoryDescriptor]
    ) -> Dict[str, Category]:
        """Upsert categories keyed by slug. Returns a slug -> Category map."""
        resolved: Dict[str, Category] = {}

        for descriptor in descriptors:
            slug = slugify_text(descriptor.name)
            if not slug:
                logger.warning(
                    f"Skipping category with empty slug: {descriptor.name!r}"
                )
                continue

            category = resolved.get(slug) or (
                self.db.query(Category).filter(Category.slug == slug).first()
            )
            if category:
                if slug not in resolved:
                    self.report.categories_existing += 1
                    logger.info(f"Category exists: {category.name} ({slug})")
                resolved[slug] = category
                continue

            category = Category(
                slug=slug,
                name=descriptor.name,
                description=descriptor.description,
                icon=descriptor.icon,
            )
            self.db.add(category)
            self.db.flush()
            resolved[slug] = category
            self.report.categories_created += 1
            logger.info(f"Created category: {category.name} ({slug})")

        return resolved

    def seed_rules(
        self,
        descriptors: Iterable[RuleDescriptor],
        categories: Optional[Dict[str, Category]] = None,
    ) -> List[Rule]:
        """Insert rules whose slug does not exist yet and attach their categories."""
        categories = dict(categories or {})
        created: List[Rule] = []

        for descriptor in descriptors:
            slug = slugify_text(descriptor.title)
            if not slug:
                self.report.rules_rejected += 1
                logger.warning(f"Skipping rule with empty slug: {descriptor.title!r}")
                continue

            existing = self.db.query(Rule.id).filter(Rule.slug == slug).first()
            if existing:
                self.report.rules_skipped += 1
                logger.info(f"Rule already exists: {descriptor.title} ({slug})")
                continue

            rule = Rule(
                slug=slug,
                title=descriptor.title,
                description=descriptor.description,
                content=descriptor.content,
                is_published=True,
                author=descriptor.author,
                tags=descriptor.tags,
                application_mode=descriptor.application_mode,
                globs=descriptor.globs,
                **self._initial_counters(),
            )

            for name in descriptor.category_names:
                category = self._resolve_category(name, categories)
                if category is None:
                    self.report.missing_categories.append(f"{slug}:{name}")
                    logger.warning(
                        f"Category {name!r} not found for rule {slug!r}; "
                        "skipping categorization"
                    )
                    continue
                if category not in rule.categories:
                    rule.categories.append(category)

            self.db.add(rule)
            self.db.flush()
            created.append(rule)
            self.report.rules_created += 1
            logger.info(
                f"Created rule: {rule.title} ({slug}) in "
                f"{[c.slug for c in rule.categories]}"
            )

        return created

    def run(
        self,
        category_descriptors: Optional[Iterable[CategoryDescriptor]] = None,
        rule_descriptors: Optional[Iterable[RuleDescriptor]] = None,
    ) -> SeedReport:
        """Seed the default catalogue (or the given descriptors)."""
        if category_descriptors is None:
            category_descriptors = CATEGORIES
        if rule_descriptors is None:
            rule_descriptors = default_rules()

        categories = self.seed_categories(category_descriptors)
        self.seed_rules(rule_descriptors, categories)

        logger.info(f"Seed completed: {self.report.summary()}")
        return self.report

    def _initial_counters(self) -> Dict[str, int]:
        if not self.fixture_mode:
            return {name: 0 for name in FIXTURE_COUNTER_RANGES}
        return {
            name: self.rng.randint(low, high)
            for name, (low, high) in FIXTURE_COUNTER_RANGES.items()
        }

    def _resolve_category(
        self, name: str, categories: Dict[str, Category]
    ) -> Optional[Category]:
        slug = slugify_text(name)
        if not slug:
            return None
        if slug not in categories:
            category = self.db.query(Category).filter(Category.slug == slug).first()
            if category is None:
                return None
            categories[slug] = category
        return categories[slug]
